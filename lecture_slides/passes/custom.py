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
from lecture_slides.splitters.merge import merge_small_slides

logger = logging.getLogger(__name__)


def custom_chunks(
    content: str, config: SegmentationConfig, parser: MarkupParser = DEFAULT_PARSER
) -> tuple[list[Chunk], bool]:
    """Heading chunks, or logical-break chunks when headings give too few."""
    elements = parser.parse(content)
    by_heading = split_elements_by_headings(elements, parser=parser)
    if len(by_heading) >= config.min_slides_from_content:
        return by_heading, False
    logger.debug(
        "custom: %d heading chunks < %d, using logical breaks",
        len(by_heading),
        config.min_slides_from_content,
    )
    return list(split_by_content_blocks(elements, config, parser)), True


@dataclass(frozen=True)
class _CustomPass:
    """Configurable segmentation bounded by ``min``/``max`` slide counts."""

    name: str = field(default="custom", init=False)
    input_type: type = field(default=SegmentationRequest, init=False)
    output_type: type = field(default=list, init=False)
    config: SegmentationConfig = field(default_factory=SegmentationConfig)
    parser: MarkupParser = DEFAULT_PARSER

    def __call__(self, a: Artifact) -> Artifact:
        req: SegmentationRequest = a.payload
        chunks, fell_back = custom_chunks(req.lecture.content, self.config, self.parser)
        slides = chunk_slides(chunks)
        content = merge_small_slides(slides, self.config.max_slides_from_content)
        meta = with_metrics(
            a.meta,
            self.name,
            content_slides=len(content),
            fallback=fell_back,
            merged=len(slides) > len(content),
        )
        return Artifact(payload=framed(req.lecture, content, req.activities), meta=meta)


custom = register(_CustomPass())
