"""Merge neighbouring slides when a strategy produces more slides than allowed."""

from __future__ import annotations

import logging
from html import escape
from typing import Sequence

from lecture_slides.models import Slide, SlideKind

logger = logging.getLogger(__name__)

MERGED_BODY_SEPARATOR = "\n\n"


def _body_of(slide: Slide) -> str:
    """Markup a slide contributes to a merged body; images become <img> tags."""
    if slide.kind is SlideKind.IMAGE:
        src = escape(slide.image_ref or "", quote=True)
        alt = escape(slide.title or "", quote=True)
        return f'<img src="{src}" alt="{alt}"/>'
    return slide.body or ""


def group_sizes(n: int, max_slides: int) -> list[int]:
    """Sizes of the contiguous groups ``n`` slides fold into.

    Past the limit, the slides are spread over exactly ``max_slides`` groups
    whose sizes differ by at most one, larger groups first, so no group
    holds more than ``ceil(n / max_slides)`` slides: 12 into 5 gives
    ``[3, 3, 2, 2, 2]``.
    """
    if n <= max_slides:
        return [1] * n
    base, extra = divmod(n, max_slides)
    return [base + 1 if i < extra else base for i in range(max_slides)]


def _merged(index: int, group: Sequence[Slide]) -> Slide:
    if len(group) == 1:
        return group[0]
    return Slide(
        id=f"merged-slide-{index}",
        kind=SlideKind.CONTENT,
        title=group[0].title or f"Slide {index}",
        body=MERGED_BODY_SEPARATOR.join(_body_of(s) for s in group),
    )


def merge_small_slides(slides: Sequence[Slide], max_slides: int) -> list[Slide]:
    """Fold ``slides`` into ``max_slides`` contiguous groups when over the limit.

    Groups of one pass through untouched; larger groups become a single
    content slide titled after their first member.
    """
    sizes = group_sizes(len(slides), max_slides)
    starts = [sum(sizes[:i]) for i in range(len(sizes))]
    merged = [
        _merged(i, slides[start : start + size])
        for i, (start, size) in enumerate(zip(starts, sizes), 1)
    ]
    logger.debug("merge_small_slides: %d -> %d", len(slides), len(merged))
    return merged
