"""Chunk heading-less documents at structural and length break points.

Both walks here are folds over top-level elements with state
``(sealed, parts, words)``. The logical-break walk flushes whatever is
left once input runs out; chunks that are still too long afterwards are
regrouped by :func:`subchunk` under the ``max_words_per_slide`` bound.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from itertools import chain
from typing import Iterable

from lecture_slides.config import SegmentationConfig
from lecture_slides.markup import DEFAULT_PARSER, Element, MarkupParser, count_words
from lecture_slides.models import ContentChunk
from lecture_slides.splitters.chunks import seal_titled

logger = logging.getLogger(__name__)

PARAGRAPH_BREAK_WORDS = 80
LIST_BREAK_WORDS = 60
HARD_CAP_WORDS = 200
OVERSIZE_WORDS = 150

_ALWAYS_BREAK = frozenset({"hr"})
_UNCONDITIONAL = frozenset({"hr", "blockquote"})
_LIST_TAGS = frozenset({"ul", "ol"})


@dataclass(frozen=True)
class ChunkFold:
    sealed: tuple[ContentChunk, ...] = ()
    parts: tuple[Element, ...] = ()
    words: int = 0

    def flushed(self) -> tuple[ContentChunk, ...]:
        """Sealed chunks plus the pending one when it has any elements."""
        return (*self.sealed, seal_titled(self.parts)) if self.parts else self.sealed

    def restart(self, el: Element, words: int) -> ChunkFold:
        return ChunkFold(self.flushed(), (el,), words)

    def extend(self, el: Element, words: int) -> ChunkFold:
        return ChunkFold(self.sealed, (*self.parts, el), self.words + words)


def is_break_point(el: Element, running_words: int, break_tags: Iterable[str]) -> bool:
    """Whether ``el`` should start a new chunk given the words gathered so far."""
    tag = el.tag
    if tag in _ALWAYS_BREAK:
        return True
    if tag not in set(break_tags):
        return False
    if tag in _UNCONDITIONAL:
        return True
    if tag == "p":
        return running_words > PARAGRAPH_BREAK_WORDS
    if tag in _LIST_TAGS:
        return running_words > LIST_BREAK_WORDS
    return False


def _logical_step(break_tags: tuple[str, ...]):
    def step(state: ChunkFold, el: Element) -> ChunkFold:
        words = count_words(el.text)
        if state.parts and is_break_point(el, state.words, break_tags):
            state = state.restart(el, words)
        else:
            state = state.extend(el, words)
        if state.words > HARD_CAP_WORDS:
            return ChunkFold(state.flushed())
        return state

    return step


def _subchunk_step(bound: int):
    def step(state: ChunkFold, el: Element) -> ChunkFold:
        words = count_words(el.text)
        if state.parts and state.words + words > bound:
            return state.restart(el, words)
        return state.extend(el, words)

    return step


def subchunk(
    chunk: ContentChunk,
    bound: int = SegmentationConfig().max_words_per_slide,
    parser: MarkupParser = DEFAULT_PARSER,
) -> list[ContentChunk]:
    """Regroup an oversized chunk's elements so each group stays within ``bound``.

    A single element longer than ``bound`` keeps a group of its own; markup
    is never split inside an element.
    """
    elements = parser.parse(chunk.markup)
    pieces = list(reduce(_subchunk_step(bound), elements, ChunkFold()).flushed())
    logger.debug("subchunk: %d words -> %d pieces", chunk.word_count, len(pieces))
    return pieces


def chunk_by_logical_breaks(
    elements: Iterable[Element], config: SegmentationConfig | None = None
) -> list[ContentChunk]:
    """First pass: break at rules, quotes and long paragraphs/lists."""
    cfg = config or SegmentationConfig()
    step = _logical_step(tuple(cfg.preferred_break_tags))
    return list(reduce(step, elements, ChunkFold()).flushed())


def split_by_content_blocks(
    elements: Iterable[Element],
    config: SegmentationConfig | None = None,
    parser: MarkupParser = DEFAULT_PARSER,
) -> list[ContentChunk]:
    """Logical-break chunking followed by sub-chunking of oversized chunks."""
    cfg = config or SegmentationConfig()
    chunks = chunk_by_logical_breaks(elements, cfg)
    final = list(
        chain.from_iterable(
            subchunk(c, cfg.max_words_per_slide, parser) if c.word_count > OVERSIZE_WORDS else [c]
            for c in chunks
        )
    )
    logger.debug("split_by_content_blocks: %d chunks -> %d", len(chunks), len(final))
    return final


__all__ = [
    "ChunkFold",
    "chunk_by_logical_breaks",
    "is_break_point",
    "split_by_content_blocks",
    "subchunk",
]
