"""Markup parsing capability used by the splitters.

The splitters only ever see :class:`Element` trees, so tests can feed them
synthetic trees through any object implementing :class:`MarkupParser`.
``SoupParser`` is the default implementation backed by BeautifulSoup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from typing import Iterable, Iterator, Mapping, Protocol, runtime_checkable

from bs4 import BeautifulSoup, Tag

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
BOLD_TAGS = frozenset({"strong", "b"})
VOID_TAGS = frozenset({"br", "hr", "img", "input", "meta", "link", "source", "wbr"})


@dataclass(frozen=True)
class Element:
    """Parsed element: tag name, attributes, text content and children.

    ``text`` is the concatenated text of the whole subtree and ``markup``
    its outer HTML. When ``markup`` is left empty it is rebuilt from the
    other fields, which keeps hand-built trees short in tests.
    """

    tag: str
    attrs: Mapping[str, str] = field(default_factory=dict)
    text: str = ""
    children: tuple[Element, ...] = ()
    markup: str = ""

    def __post_init__(self) -> None:
        if not self.markup:
            object.__setattr__(self, "markup", _serialize(self))

    def get(self, name: str, default: str = "") -> str:
        return self.attrs.get(name, default)


def _serialize(el: Element) -> str:
    attrs = "".join(f' {k}="{escape(v, quote=True)}"' for k, v in el.attrs.items())
    if el.tag in VOID_TAGS:
        return f"<{el.tag}{attrs}/>"
    inner = "".join(child.markup for child in el.children) or escape(el.text, quote=False)
    return f"<{el.tag}{attrs}>{inner}</{el.tag}>"


@runtime_checkable
class MarkupParser(Protocol):
    def parse(self, html: str) -> tuple[Element, ...]:
        """Return the ordered top-level elements of ``html``."""
        ...

    def text(self, html: str) -> str:
        """Return all text content of ``html``, including text outside any element."""
        ...


def _attr_value(value: str | Iterable[str]) -> str:
    return value if isinstance(value, str) else " ".join(value)


def _from_tag(tag: Tag) -> Element:
    return Element(
        tag=tag.name.lower(),
        attrs={k: _attr_value(v) for k, v in tag.attrs.items()},
        text=tag.get_text(),
        children=tuple(_from_tag(c) for c in tag.children if isinstance(c, Tag)),
        markup=str(tag),
    )


class SoupParser:
    """BeautifulSoup-backed parser; malformed input is recovered by bs4."""

    def __init__(self, features: str = "html.parser") -> None:
        self.features = features

    def parse(self, html: str) -> tuple[Element, ...]:
        soup = BeautifulSoup(html or "", self.features)
        root = soup.body if isinstance(soup.body, Tag) else soup
        return tuple(_from_tag(c) for c in root.children if isinstance(c, Tag))

    def text(self, html: str) -> str:
        return BeautifulSoup(html or "", self.features).get_text()


DEFAULT_PARSER: MarkupParser = SoupParser()


def iter_elements(elements: Iterable[Element]) -> Iterator[Element]:
    """Yield ``elements`` and their descendants in document order."""
    for el in elements:
        yield el
        yield from iter_elements(el.children)


def first_of(elements: Iterable[Element], tags: frozenset[str]) -> Element | None:
    return next((el for el in iter_elements(elements) if el.tag in tags), None)


def count_words(text: str) -> int:
    """Number of whitespace-separated words in ``text``."""
    return len(text.split())


def document_text(parser: MarkupParser, html: str) -> str:
    """Full text content of ``html``; stray or unbalanced tags never hide text."""
    return parser.text(html or "")


def join_markup(elements: Iterable[Element]) -> str:
    return "".join(el.markup for el in elements)


__all__ = [
    "BOLD_TAGS",
    "DEFAULT_PARSER",
    "Element",
    "HEADING_TAGS",
    "MarkupParser",
    "SoupParser",
    "count_words",
    "first_of",
    "iter_elements",
    "join_markup",
    "document_text",
]
