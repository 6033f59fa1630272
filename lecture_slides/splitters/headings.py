"""Split a parsed document at heading elements.

The walk is a fold over top-level elements carrying :class:`HeadingFold`:
chunks already sealed, the chunk still open, and whether any heading has
been seen yet. Images inside a section are lifted into their own
:class:`ImageChunk`. What happens to the still-open chunk once input runs
out is decided in one place, :func:`finish`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import reduce
from typing import Iterable

from lecture_slides.markup import HEADING_TAGS, Element, MarkupParser, DEFAULT_PARSER
from lecture_slides.models import Chunk, ImageChunk
from lecture_slides.splitters.chunks import annotate_titles, seal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenChunk:
    title: str | None
    parts: tuple[Element, ...] = ()

    def append(self, el: Element) -> OpenChunk:
        return replace(self, parts=(*self.parts, el))


@dataclass(frozen=True)
class HeadingFold:
    sealed: tuple[Chunk, ...] = ()
    open: OpenChunk | None = None
    seen_heading: bool = False


def _seal_open(state: HeadingFold) -> tuple[Chunk, ...]:
    """Sealed chunks plus the open one, unless it has no body."""
    chunk = state.open
    if chunk is None or not chunk.parts:
        return state.sealed
    return (*state.sealed, seal(chunk.parts, chunk.title))


def _on_heading(state: HeadingFold, el: Element) -> HeadingFold:
    title = el.text.strip() or None
    return HeadingFold(_seal_open(state), OpenChunk(title), True)


def _on_image(state: HeadingFold, el: Element) -> HeadingFold:
    image = ImageChunk(src=el.get("src"), alt=el.get("alt"))
    sealed = _seal_open(state)
    return HeadingFold((*sealed, image), OpenChunk(None), state.seen_heading)


def step(state: HeadingFold, el: Element) -> HeadingFold:
    """Advance the fold by one top-level element."""
    if el.tag in HEADING_TAGS:
        return _on_heading(state, el)
    if state.open is None:
        return state
    if el.tag == "img":
        return _on_image(state, el)
    return replace(state, open=state.open.append(el))


def finish(state: HeadingFold, *, flush_trailing: bool = True) -> tuple[Chunk, ...]:
    """Close the fold.

    With ``flush_trailing`` the open chunk is kept when it has any body;
    a heading with nothing under it never becomes a chunk.
    Without it the open chunk is dropped, so the last section only
    survives if an image or heading sealed it earlier.
    """
    if not flush_trailing:
        return state.sealed
    return _seal_open(state)


def _preamble_state(elements: tuple[Element, ...]) -> HeadingFold:
    return HeadingFold(open=OpenChunk(None)) if elements else HeadingFold()


def split_elements_by_headings(
    elements: Iterable[Element],
    *,
    flush_trailing: bool = True,
    keep_preamble: bool = False,
    parser: MarkupParser = DEFAULT_PARSER,
) -> list[Chunk]:
    """Chunk ``elements`` at headings.

    Content before the first heading is dropped unless ``keep_preamble``
    is set, in which case it becomes an untitled leading chunk.
    """
    items = tuple(elements)
    initial = _preamble_state(items) if keep_preamble else HeadingFold()
    state = reduce(step, items, initial)
    chunks = annotate_titles(finish(state, flush_trailing=flush_trailing), parser)
    logger.debug(
        "split_by_headings: %d chunks (headings seen: %s)", len(chunks), state.seen_heading
    )
    return chunks


def split_by_headings(
    content: str,
    parser: MarkupParser = DEFAULT_PARSER,
    *,
    flush_trailing: bool = True,
    keep_preamble: bool = False,
) -> list[Chunk]:
    """Parse ``content`` and chunk it at headings."""
    return split_elements_by_headings(
        parser.parse(content),
        flush_trailing=flush_trailing,
        keep_preamble=keep_preamble,
        parser=parser,
    )


__all__ = [
    "HeadingFold",
    "OpenChunk",
    "finish",
    "split_by_headings",
    "split_elements_by_headings",
    "step",
]