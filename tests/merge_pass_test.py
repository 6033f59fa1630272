from __future__ import annotations

import pytest

from lecture_slides.models import Slide, SlideKind
from lecture_slides.splitters.merge import group_sizes, merge_small_slides


def _slides(n: int) -> list[Slide]:
    return [
        Slide(id=f"slide-{i}", kind=SlideKind.CONTENT, title=f"T{i}", body=f"<p>{i}</p>")
        for i in range(1, n + 1)
    ]


def test_twelve_into_five_groups() -> None:
    assert group_sizes(12, 5) == [3, 3, 2, 2, 2]
    merged = merge_small_slides(_slides(12), 5)
    assert len(merged) == 5
    assert [s.title for s in merged] == ["T1", "T4", "T7", "T9", "T11"]
    assert merged[0].body == "<p>1</p>\n\n<p>2</p>\n\n<p>3</p>"


def test_within_limit_is_untouched() -> None:
    slides = _slides(4)
    assert merge_small_slides(slides, 4) == slides


def test_singleton_groups_pass_through() -> None:
    merged = merge_small_slides(_slides(6), 5)
    assert [len(s.body.split("\n\n")) for s in merged] == [2, 1, 1, 1, 1]
    assert merged[1].id == "slide-3"
    assert merged[0].id == "merged-slide-1"


@pytest.mark.parametrize("n,cap", [(11, 10), (30, 7), (100, 3), (7, 1)])
def test_group_sizes_cover_everything_and_respect_ceiling(n: int, cap: int) -> None:
    sizes = group_sizes(n, cap)
    assert sum(sizes) == n
    assert len(sizes) == cap
    assert max(sizes) == -(-n // cap)
    assert sizes == sorted(sizes, reverse=True)


def test_image_members_keep_their_picture() -> None:
    slides = [
        Slide(id="slide-1", kind=SlideKind.CONTENT, title="Text", body="<p>a</p>"),
        Slide(id="slide-2", kind=SlideKind.IMAGE, title="Map", image_ref="map.png"),
    ]
    (merged,) = merge_small_slides(slides, 1)
    assert merged.kind is SlideKind.CONTENT
    assert merged.body == '<p>a</p>\n\n<img src="map.png" alt="Map"/>'
