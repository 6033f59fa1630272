from __future__ import annotations

import json
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any, TextIO

from lecture_slides.models import Slide, number_slides


def _serialize(rows: Iterable[dict[str, Any]]) -> Iterator[str]:
    """Serialize dictionaries to JSON lines."""
    return (json.dumps(r, ensure_ascii=False) for r in rows)


def _write(path: str, lines: Iterable[str]) -> None:
    """Write ``lines`` to ``path`` with trailing newlines."""
    path_obj = Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)
    with path_obj.open("w", encoding="utf-8") as f:
        f.writelines(f"{line}\n" for line in lines)


def rows(slides: Iterable[Slide]) -> list[dict[str, Any]]:
    """Slide records with ``slideNumber``/``totalSlides`` attached."""
    return number_slides(list(slides))


def write(slides: Iterable[Slide], path: str | None, stream: TextIO | None = None) -> None:
    """Write one JSON line per slide to ``path``, or to ``stream`` (stdout) without one."""
    lines = _serialize(rows(slides))
    if path:
        _write(path, lines)
        return
    out = stream or sys.stdout
    out.writelines(f"{line}\n" for line in lines)
