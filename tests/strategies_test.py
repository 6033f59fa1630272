from __future__ import annotations

import pytest

from lecture_slides import SegmentationConfig, Strategy, run_strategy, segment
from lecture_slides.core import available_strategies, configure_pass, strategy_pass
from lecture_slides.framework import registry
from lecture_slides.models import Lecture, SlideKind
from tests.utils.trees import words


def _kinds(slides):
    return [s.kind for s in slides]


def test_storms_smart_end_to_end(storms, quiz) -> None:
    slides = segment(storms, quiz, "smart")
    assert _kinds(slides) == [SlideKind.TITLE, SlideKind.CONTENT, SlideKind.ACTIVITY]
    title, content, activity = slides
    assert (title.title, title.body) == ("Storms", "Intro")
    assert content.title == "Wind"
    assert content.body.endswith("</p>") and "<h1>Wind</h1>" in content.body
    assert activity.title == "Activity 1"
    assert activity.activity == quiz[0]


def test_smart_reports_fallback(storms) -> None:
    result = run_strategy(storms, (), Strategy.SMART)
    assert result.meta["metrics"]["smart"] == {"content_slides": 1, "fallback": True}
    assert result.meta["strategy"] == "smart"


def test_smart_keeps_heading_split_when_it_yields_several() -> None:
    lecture = Lecture(title="T", content="<h1>A</h1><p>x</p><h2>B</h2><p>y</p>")
    slides = segment(lecture)
    assert [s.title for s in slides] == ["T", "A", "B"]
    assert [s.body for s in slides[1:]] == ["<p>x</p>", "<p>y</p>"]


def test_smart_emits_image_slides() -> None:
    lecture = Lecture(
        content='<h1>A</h1><p>x</p><img src="i.png" alt="Eye"/><h2>B</h2><p>y</p>'
    )
    slides = segment(lecture)
    image = slides[2]
    assert image.kind is SlideKind.IMAGE
    assert (image.title, image.image_ref, image.body) == ("Eye", "i.png", None)


def test_manual_with_markers(quiz) -> None:
    lecture = Lecture(title="M", description="d", content="<p>One.</p>[SLIDE]<p>Two.</p>")
    slides = segment(lecture, quiz * 2, Strategy.MANUAL)
    assert _kinds(slides) == [
        SlideKind.TITLE,
        SlideKind.CONTENT,
        SlideKind.CONTENT,
        SlideKind.ACTIVITY,
        SlideKind.ACTIVITY,
    ]
    assert [s.title for s in slides[-2:]] == ["Activity 1", "Activity 2"]
    assert len({s.id for s in slides}) == len(slides)


def test_manual_without_markers_matches_smart(storms, quiz) -> None:
    assert segment(storms, quiz, "manual") == segment(storms, quiz, "smart")
    meta = run_strategy(storms, quiz, "manual").meta
    assert meta["metrics"]["manual"]["fallback"] is True


def test_custom_falls_back_below_minimum() -> None:
    lecture = Lecture(content="<h1>A</h1><p>x</p><h2>B</h2><p>y</p>")
    result = run_strategy(lecture, (), "custom", SegmentationConfig(min_slides_from_content=3))
    assert result.meta["metrics"]["custom"]["fallback"] is True
    assert [s.kind for s in result.payload[1:]] == [SlideKind.CONTENT]


def test_custom_merges_above_maximum() -> None:
    content = "".join(f"<h2>S{i}</h2><p>body {i}</p>" for i in range(12))
    cfg = SegmentationConfig(min_slides_from_content=1, max_slides_from_content=5)
    result = run_strategy(Lecture(content=content), (), "custom", cfg)
    content_slides = result.payload[1:]
    assert len(content_slides) == 5
    assert [s.title for s in content_slides] == ["S0", "S3", "S6", "S8", "S10"]
    assert result.meta["metrics"]["custom"]["merged"] is True


@pytest.mark.parametrize("n_words,expected", [(0, 3), (100, 3), (451, 4), (900, 6), (5000, 6)])
def test_simple_part_counts(n_words: int, expected: int, quiz) -> None:
    lecture = Lecture(title="S", content=f"<p>{words(n_words)}</p>")
    slides = segment(lecture, quiz, "simple")
    parts = slides[1:-1]
    assert len(parts) == expected
    assert [s.title for s in parts] == [f"Part {n}" for n in range(1, expected + 1)]
    assert all(s.body.startswith("<p>") and s.body.endswith("</p>") for s in parts)
    assert sum(len(s.body[3:-4].split()) for s in parts) == n_words


def test_simple_escapes_text() -> None:
    slides = segment(Lecture(content="<p>a &lt;b&gt; c</p>"), (), "simple")
    assert [s.body for s in slides[1:]] == ["<p>a</p>", "<p>&lt;b&gt;</p>", "<p>c</p>"]


def test_simple_counts_text_after_stray_end_tag() -> None:
    slides = segment(Lecture(content="<p>one</p></div> two three"), (), "simple")
    assert [s.body for s in slides[1:]] == ["<p>one</p>", "<p>two</p>", "<p>three</p>"]


def test_record_inputs_are_normalized() -> None:
    slides = segment(
        {"title": None, "content": "<h1>A</h1><p>x</p><h2>B</h2><p>y</p>"},
        [{"id": "q", "type": "multiple-choice", "question": "?", "options": ["a", "b"]}],
    )
    assert slides[0].title == ""
    assert slides[-1].activity.question_text == "?"


def test_empty_content_still_frames() -> None:
    slides = segment(Lecture(title="Empty"), ())
    assert _kinds(slides) == [SlideKind.TITLE]


def test_unknown_strategy_raises() -> None:
    with pytest.raises(ValueError):
        segment(Lecture(), (), "bogus")


def test_every_strategy_is_registered() -> None:
    assert set(available_strategies()) == {s.value for s in Strategy}
    assert all(s.value in registry() for s in Strategy)


def test_configure_pass_does_not_mutate_registry() -> None:
    base = strategy_pass("custom")
    cfg = SegmentationConfig(max_slides_from_content=2)
    configured = configure_pass(base, {"config": cfg, "parser": None})
    assert configured.config == cfg
    assert base.config == SegmentationConfig()
