"""Content splitters: headings, logical breaks, sub-chunking and merging."""

from .headings import split_by_headings, split_elements_by_headings  # noqa: F401
from .logical import (  # noqa: F401
    chunk_by_logical_breaks,
    split_by_content_blocks,
    subchunk,
)
from .merge import group_sizes, merge_small_slides  # noqa: F401

__all__ = [
    "chunk_by_logical_breaks",
    "group_sizes",
    "merge_small_slides",
    "split_by_content_blocks",
    "split_by_headings",
    "split_elements_by_headings",
    "subchunk",
]
