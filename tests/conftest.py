from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from lecture_slides.models import Activity, Lecture  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer shell overrides out of config-dependent tests."""
    tuple(
        monkeypatch.delenv(name, raising=False)
        for name in list(os.environ)
        if name.startswith("SEGMENTATION__") or name == "LECTURE_SLIDES_STRATEGY"
    )


@pytest.fixture
def storms() -> Lecture:
    return Lecture(
        title="Storms",
        description="Intro",
        content="<h1>Wind</h1><p>" + "word " * 90 + "</p>",
    )


@pytest.fixture
def quiz() -> tuple[Activity, ...]:
    return (Activity.from_record({"id": "a1", "questionText": "Q?"}),)
