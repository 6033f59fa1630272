"""Split lecture content on author-inserted slide break markers.

Authors can force a slide break by typing one of :data:`SLIDE_MARKERS`
anywhere in the content. Matching is literal and case-insensitive.
A ``<!-- NOTES --> ... <!-- /NOTES -->`` block inside a slide becomes the
slide's speaker notes instead of part of its body.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from lecture_slides.markup import DEFAULT_PARSER, MarkupParser
from lecture_slides.models import Slide, SlideKind
from lecture_slides.titles import extract_title

logger = logging.getLogger(__name__)

SLIDE_MARKERS: tuple[str, ...] = ("---SLIDE---", "<!-- SLIDE -->", "[SLIDE]")

MARKER_RE = re.compile("|".join(re.escape(m) for m in SLIDE_MARKERS), re.IGNORECASE)
_NOTES_RE = re.compile(r"<!--\s*NOTES\s*-->(.*?)<!--\s*/NOTES\s*-->", re.IGNORECASE | re.DOTALL)


def has_slide_markers(content: str) -> bool:
    """Return True when ``content`` contains any recognized marker."""
    return bool(MARKER_RE.search(content or ""))


def split_on_markers(content: str) -> list[str]:
    """Trimmed, non-empty fragments between markers."""
    parts = (part.strip() for part in MARKER_RE.split(content or ""))
    return [part for part in parts if part]


def count_marked_slides(content: str) -> int:
    """Slides implied by markers; unmarked content counts as one slide."""
    if not has_slide_markers(content):
        return 1
    return len(split_on_markers(content))


def extract_notes(fragment: str) -> tuple[str, str | None]:
    """Return ``(body, notes)`` with the first notes block lifted out."""
    match = _NOTES_RE.search(fragment)
    if not match:
        return fragment, None
    body = (fragment[: match.start()] + fragment[match.end() :]).strip()
    return body, match.group(1).strip() or None


def _fragment_slide(n: int, fragment: str, parser: MarkupParser) -> Slide:
    body, notes = extract_notes(fragment)
    return Slide(
        id=f"slide-{n}",
        kind=SlideKind.CONTENT,
        title=extract_title(body, parser) or f"Slide {n}",
        body=body,
        notes=notes,
    )


def _slides(fragments: Iterable[str], parser: MarkupParser) -> list[Slide]:
    return [_fragment_slide(n, f, parser) for n, f in enumerate(fragments, 1)]


def split_manual(content: str, parser: MarkupParser = DEFAULT_PARSER) -> list[Slide]:
    """One content slide per non-empty fragment between markers.

    Content with no markers yields a single slide holding the whole
    (trimmed) content, or nothing when it is blank.
    """
    fragments = split_on_markers(content)
    logger.debug("split_manual: %d fragments", len(fragments))
    return _slides(fragments, parser)


__all__ = [
    "MARKER_RE",
    "SLIDE_MARKERS",
    "count_marked_slides",
    "extract_notes",
    "has_slide_markers",
    "split_manual",
    "split_on_markers",
]
