"""Fixed-shape slide records: title frame, activities, and chunk conversion."""

from __future__ import annotations

from typing import Iterable, Sequence

from lecture_slides.models import (
    Activity,
    Chunk,
    ImageChunk,
    Lecture,
    Slide,
    SlideKind,
)

DEFAULT_IMAGE_TITLE = "Image"


def title_slide(lecture: Lecture) -> Slide:
    return Slide(
        id="title",
        kind=SlideKind.TITLE,
        title=lecture.title or "",
        body=lecture.description or "",
    )


def activity_slides(activities: Iterable[Activity]) -> list[Slide]:
    """One slide per activity, in input order, titled ``Activity {n}``."""
    return [
        Slide(
            id=f"activity-{i}",
            kind=SlideKind.ACTIVITY,
            title=f"Activity {i + 1}",
            activity=activity,
        )
        for i, activity in enumerate(activities)
    ]


def chunk_slide(n: int, chunk: Chunk) -> Slide:
    """Convert the ``n``-th (1-based) chunk into a content or image slide."""
    if isinstance(chunk, ImageChunk):
        return Slide(
            id=f"slide-{n}",
            kind=SlideKind.IMAGE,
            title=chunk.alt or DEFAULT_IMAGE_TITLE,
            image_ref=chunk.src,
        )
    return Slide(
        id=f"slide-{n}",
        kind=SlideKind.CONTENT,
        title=chunk.derived_title or f"Slide {n}",
        body=chunk.markup,
    )


def chunk_slides(chunks: Iterable[Chunk]) -> list[Slide]:
    return [chunk_slide(n, c) for n, c in enumerate(chunks, 1)]


def framed(lecture: Lecture, content: Sequence[Slide], activities: Iterable[Activity]) -> list[Slide]:
    """Title slide, then ``content``, then one slide per activity."""
    return [title_slide(lecture), *content, *activity_slides(activities)]


__all__ = [
    "activity_slides",
    "chunk_slide",
    "chunk_slides",
    "framed",
    "title_slide",
]
