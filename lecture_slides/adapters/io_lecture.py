"""Read lecture and activity records exported from the document store."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from lecture_slides.models import Activity, Lecture

_HTML_SUFFIXES = frozenset({".html", ".htm"})


def _load_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def read_lecture(path: str | Path, title: str = "", description: str = "") -> Lecture:
    """Load a lecture from a JSON record or a bare HTML body.

    For HTML input ``title``/``description`` supply the frame; for JSON
    they only fill fields the record leaves empty.
    """
    p = Path(path)
    if p.suffix.lower() in _HTML_SUFFIXES:
        return Lecture(title=title, description=description, content=p.read_text(encoding="utf-8"))
    record = _load_json(p)
    if not isinstance(record, dict):
        raise TypeError(f"{p.name}: lecture record must be a JSON object")
    lecture = Lecture.from_record(record)
    return Lecture(
        title=lecture.title or title,
        description=lecture.description or description,
        content=lecture.content,
        id=lecture.id,
        images=lecture.images,
        status=lecture.status,
    )


def read_activities(path: str | Path | None) -> tuple[Activity, ...]:
    """Load activity records from a JSON list; ``None`` means no activities."""
    if path is None:
        return ()
    records = _load_json(Path(path))
    if not isinstance(records, list):
        raise TypeError(f"{Path(path).name}: activities must be a JSON list")
    return tuple(Activity.from_record(r) for r in records)


__all__ = ["read_activities", "read_lecture"]
