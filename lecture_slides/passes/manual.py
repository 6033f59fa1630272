from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from lecture_slides.builders import framed
from lecture_slides.config import SegmentationConfig
from lecture_slides.framework import Artifact, register, run_pass, with_metrics
from lecture_slides.markers import has_slide_markers, split_manual
from lecture_slides.markup import DEFAULT_PARSER, MarkupParser
from lecture_slides.models import SegmentationRequest
from lecture_slides.passes.smart import _SmartPass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _ManualPass:
    """Author-placed markers decide the breaks; unmarked content goes to ``smart``."""

    name: str = field(default="manual", init=False)
    input_type: type = field(default=SegmentationRequest, init=False)
    output_type: type = field(default=list, init=False)
    config: SegmentationConfig = field(default_factory=SegmentationConfig)
    parser: MarkupParser = DEFAULT_PARSER

    def _fallback(self) -> _SmartPass:
        return replace(_SmartPass(), config=self.config, parser=self.parser)

    def __call__(self, a: Artifact) -> Artifact:
        req: SegmentationRequest = a.payload
        if not has_slide_markers(req.lecture.content):
            logger.debug("manual: no slide markers, falling back to smart")
            out = run_pass(self._fallback(), a)
            return Artifact(
                payload=out.payload,
                meta=with_metrics(out.meta, self.name, fallback=True),
            )
        content = split_manual(req.lecture.content, self.parser)
        meta = with_metrics(a.meta, self.name, content_slides=len(content), fallback=False)
        return Artifact(payload=framed(req.lecture, content, req.activities), meta=meta)


manual = register(_ManualPass())
