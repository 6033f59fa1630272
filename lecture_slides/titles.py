"""Derive a display title from a markup fragment."""

from __future__ import annotations

import logging

from lecture_slides.markup import (
    BOLD_TAGS,
    DEFAULT_PARSER,
    HEADING_TAGS,
    Element,
    MarkupParser,
    first_of,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Content Slide"
SENTENCE_TITLE_LIMIT = 50
ELLIPSIS = "..."


def _first_sentence(text: str) -> str:
    sentence = text.split(".", 1)[0].strip()
    if len(sentence) > SENTENCE_TITLE_LIMIT:
        return sentence[:SENTENCE_TITLE_LIMIT] + ELLIPSIS
    return sentence


def title_from_elements(elements: tuple[Element, ...]) -> str | None:
    """Heading text, then bold text, then the first paragraph's first sentence.

    Returns ``None`` when the first paragraph has text but its first
    sentence is empty (e.g. ``"<p>. Next</p>"``) so the caller can apply
    its own numbered fallback; returns :data:`DEFAULT_TITLE` when nothing
    matches at all.
    """
    heading = first_of(elements, HEADING_TAGS)
    if heading is not None and heading.text.strip():
        return heading.text.strip()

    bold = first_of(elements, BOLD_TAGS)
    if bold is not None and bold.text.strip():
        return bold.text.strip()

    para = first_of(elements, frozenset({"p"}))
    if para is not None and para.text:
        return _first_sentence(para.text) or None

    return DEFAULT_TITLE


def extract_title(fragment: str, parser: MarkupParser = DEFAULT_PARSER) -> str | None:
    """Parse ``fragment`` and return its best title candidate."""
    title = title_from_elements(parser.parse(fragment))
    logger.debug("extract_title -> %r", title)
    return title


__all__ = ["DEFAULT_TITLE", "extract_title", "title_from_elements"]
