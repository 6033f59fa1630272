from __future__ import annotations

import pytest

from lecture_slides.models import (
    Activity,
    ChoiceOption,
    FreeText,
    Lecture,
    MultipleChoice,
    Slide,
    SlideKind,
    number_slides,
)


@pytest.mark.parametrize(
    "kind,fields",
    [
        (SlideKind.IMAGE, {"body": "<p>x</p>"}),
        (SlideKind.CONTENT, {"image_ref": "a.png"}),
        (SlideKind.TITLE, {"body": "d", "image_ref": "a.png"}),
        (SlideKind.ACTIVITY, {"body": "<p>x</p>"}),
    ],
)
def test_slide_rejects_foreign_payload(kind: SlideKind, fields: dict) -> None:
    with pytest.raises(ValueError, match="cannot carry"):
        Slide(id="s", kind=kind, **fields)


def test_slide_record_omits_absent_fields() -> None:
    slide = Slide(id="slide-1", kind=SlideKind.IMAGE, title="Pic", image_ref="p.png")
    assert slide.to_record() == {
        "id": "slide-1",
        "kind": "image",
        "title": "Pic",
        "image": "p.png",
    }


def test_multiple_choice_record() -> None:
    activity = Activity.from_record(
        {
            "id": "q1",
            "type": "multiple-choice",
            "question": "Which?",
            "options": ["red", "blue"],
            "correctOption": 1,
        }
    )
    assert activity.answer == MultipleChoice(
        (ChoiceOption("red", False), ChoiceOption("blue", True))
    )
    assert activity.answer.correct_indices == (1,)
    assert activity.to_record()["correctOption"] == 1


def test_short_answer_record() -> None:
    activity = Activity.from_record(
        {"id": "q2", "type": "short-answer", "question": "Name it", "correctAnswer": "Cirrus"}
    )
    assert activity.answer == FreeText("Cirrus")
    assert activity.to_record() == {
        "id": "q2",
        "question": "Name it",
        "type": "short-answer",
        "correctAnswer": "Cirrus",
    }


def test_lecture_record_defaults() -> None:
    lecture = Lecture.from_record({"id": "l1", "isPublished": True, "images": ["a", "b"]})
    assert (lecture.title, lecture.description, lecture.content) == ("", "", "")
    assert lecture.status == "published"
    assert lecture.images == ("a", "b")
    assert Lecture.from_record({"status": "draft", "isPublished": True}).status == "draft"


def test_number_slides() -> None:
    slides = [
        Slide(id="title", kind=SlideKind.TITLE, title="T", body=""),
        Slide(id="slide-1", kind=SlideKind.CONTENT, title="C", body="<p>c</p>"),
    ]
    rows = number_slides(slides)
    assert [(r["slideNumber"], r["totalSlides"]) for r in rows] == [(1, 2), (2, 2)]


@pytest.mark.parametrize(
    "kind,missing",
    [
        (SlideKind.TITLE, "body"),
        (SlideKind.CONTENT, "body"),
        (SlideKind.IMAGE, "image_ref"),
        (SlideKind.ACTIVITY, "activity"),
    ],
)
def test_slide_requires_its_payload(kind: SlideKind, missing: str) -> None:
    with pytest.raises(ValueError, match=f"requires {missing}"):
        Slide(id="s", kind=kind, title="T")


def test_empty_payload_strings_are_allowed() -> None:
    assert Slide(id="title", kind=SlideKind.TITLE, title="", body="").body == ""
