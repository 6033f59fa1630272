"""Heading-first segmentation with a logical-break fallback."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from lecture_slides.builders import chunk_slides, framed
from lecture_slides.config import SegmentationConfig
from lecture_slides.framework import Artifact, register, with_metrics
from lecture_slides.markup import DEFAULT_PARSER, MarkupParser
from lecture_slides.models import Chunk, SegmentationRequest
from lecture_slides.splitters.headings import split_elements_by_headings
from lecture_slides.splitters.logical import split_by_content_blocks

logger = logging.getLogger(__name__)


def smart_chunks(
    content: str,
    config: SegmentationConfig,
    parser: MarkupParser = DEFAULT_PARSER,
    *,
    flush_trailing: bool = True,
) -> tuple[list[Chunk], bool]:
    """Return ``(chunks, fell_back)``; headings win when they give 2+ chunks."""
    elements = parser.parse(content)
    by_heading = split_elements_by_headings(
        elements, flush_trailing=flush_trailing, parser=parser
    )
    if len(by_heading) > 1:
        return by_heading, False
    logger.debug("smart: %d heading chunks, using logical breaks", len(by_heading))
    return list(split_by_content_blocks(elements, config, parser)), True


@dataclass(frozen=True)
class _SmartPass:
    name: str = field(default="smart", init=False)
    input_type: type = field(default=SegmentationRequest, init=False)
    output_type: type = field(default=list, init=False)
    config: SegmentationConfig = field(default_factory=SegmentationConfig)
    parser: MarkupParser = DEFAULT_PARSER
    flush_trailing: bool = True

    def __call__(self, a: Artifact) -> Artifact:
        req: SegmentationRequest = a.payload
        chunks, fell_back = smart_chunks(
            req.lecture.content, self.config, self.parser, flush_trailing=self.flush_trailing
        )
        content = chunk_slides(chunks)
        meta = with_metrics(
            a.meta, self.name, content_slides=len(content), fallback=fell_back
        )
        return Artifact(payload=framed(req.lecture, content, req.activities), meta=meta)


smart = register(_SmartPass())
