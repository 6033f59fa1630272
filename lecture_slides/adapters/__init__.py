"""IO adapters: reading lecture/activity records and emitting slides."""

from . import emit_jsonl, io_lecture  # noqa: F401

__all__ = ["emit_jsonl", "io_lecture"]
