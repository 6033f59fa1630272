"""Helpers shared by the splitters for building :class:`ContentChunk`s."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from lecture_slides.markup import Element, MarkupParser, count_words, join_markup
from lecture_slides.models import Chunk, ContentChunk
from lecture_slides.titles import extract_title, title_from_elements


def word_total(parts: Iterable[Element]) -> int:
    """Sum of per-element word counts, so adjacent elements never fuse words."""
    return sum(count_words(el.text) for el in parts)


def seal(parts: tuple[Element, ...], title: str | None = None) -> ContentChunk:
    return ContentChunk(markup=join_markup(parts), derived_title=title, word_count=word_total(parts))


def seal_titled(parts: tuple[Element, ...]) -> ContentChunk:
    """Seal ``parts`` and derive the title from the same elements."""
    return seal(parts, title_from_elements(parts))


def annotate_titles(chunks: Iterable[Chunk], parser: MarkupParser) -> list[Chunk]:
    """Fill in ``derived_title`` for content chunks that have none."""
    return [
        replace(c, derived_title=extract_title(c.markup, parser))
        if isinstance(c, ContentChunk) and c.derived_title is None
        else c
        for c in chunks
    ]
