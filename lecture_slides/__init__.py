"""Segment lecture content into presentable slides."""

from lecture_slides.config import SegmentationConfig, SlidesSpec, Strategy, load_spec
from lecture_slides.core import run_strategy, segment
from lecture_slides.models import Activity, Lecture, Slide, SlideKind

__all__ = [
    "Activity",
    "Lecture",
    "SegmentationConfig",
    "Slide",
    "SlideKind",
    "SlidesSpec",
    "Strategy",
    "load_spec",
    "run_strategy",
    "segment",
]
