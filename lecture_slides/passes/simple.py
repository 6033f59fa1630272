"""Structure-blind segmentation into a handful of equal word groups."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from html import escape

from lecture_slides.builders import framed
from lecture_slides.config import SegmentationConfig
from lecture_slides.framework import Artifact, register, with_metrics
from lecture_slides.markup import DEFAULT_PARSER, MarkupParser, document_text
from lecture_slides.models import SegmentationRequest, Slide, SlideKind

WORDS_PER_PART = 150
MIN_PARTS = 3
MAX_PARTS = 6


def part_count(words: int) -> int:
    return min(max(math.ceil(words / WORDS_PER_PART), MIN_PARTS), MAX_PARTS)


def split_words(words: list[str]) -> list[list[str]]:
    """``part_count`` slices of ``ceil(len / parts)`` words; trailing ones may be short."""
    parts = part_count(len(words))
    per_part = math.ceil(len(words) / parts)
    return [words[i * per_part : (i + 1) * per_part] for i in range(parts)]


def simple_slides(content: str, parser: MarkupParser = DEFAULT_PARSER) -> list[Slide]:
    words = document_text(parser, content).split()
    return [
        Slide(
            id=f"slide-{n}",
            kind=SlideKind.CONTENT,
            title=f"Part {n}",
            body=f"<p>{escape(' '.join(group), quote=False)}</p>",
        )
        for n, group in enumerate(split_words(words), 1)
    ]


@dataclass(frozen=True)
class _SimplePass:
    name: str = field(default="simple", init=False)
    input_type: type = field(default=SegmentationRequest, init=False)
    output_type: type = field(default=list, init=False)
    config: SegmentationConfig = field(default_factory=SegmentationConfig)
    parser: MarkupParser = DEFAULT_PARSER

    def __call__(self, a: Artifact) -> Artifact:
        req: SegmentationRequest = a.payload
        content = simple_slides(req.lecture.content, self.parser)
        meta = with_metrics(a.meta, self.name, content_slides=len(content))
        return Artifact(payload=framed(req.lecture, content, req.activities), meta=meta)


simple = register(_SimplePass())
