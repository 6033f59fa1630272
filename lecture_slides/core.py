"""Strategy orchestration: turn a lecture into an ordered slide sequence."""

from __future__ import annotations

import logging
from dataclasses import fields, is_dataclass, replace
from types import MappingProxyType
from typing import Any, Iterable, Mapping

import lecture_slides.passes  # noqa: F401  (registers strategy passes)
from lecture_slides.config import SegmentationConfig, Strategy
from lecture_slides.framework import Artifact, Pass, registry, run_pass
from lecture_slides.markup import MarkupParser
from lecture_slides.models import Activity, Lecture, SegmentationRequest, Slide

logger = logging.getLogger(__name__)


def _strategy_table() -> Mapping[Strategy, Pass]:
    """Map every ``Strategy`` member to its registered pass; fail if any is missing."""
    regs = registry()
    missing = [s.value for s in Strategy if s.value not in regs]
    if missing:
        raise KeyError(f"unregistered strategies: {missing}")
    return MappingProxyType({s: regs[s.value] for s in Strategy})


_STRATEGIES: Mapping[Strategy, Pass] = _strategy_table()


def strategy_pass(strategy: Strategy | str) -> Pass:
    """Return the pass for ``strategy``; unknown names raise ``ValueError``."""
    return _STRATEGIES[Strategy(strategy)]


def configure_pass(pass_obj: Pass, opts: Mapping[str, Any]) -> Pass:
    """Return a new pass with the dataclass fields in ``opts`` replaced."""
    if not is_dataclass(pass_obj):
        return pass_obj
    names = {f.name for f in fields(pass_obj) if f.init}
    updates = {k: v for k, v in opts.items() if k in names and v is not None}
    return replace(pass_obj, **updates) if updates else pass_obj


def _as_lecture(lecture: Lecture | Mapping[str, Any]) -> Lecture:
    return lecture if isinstance(lecture, Lecture) else Lecture.from_record(lecture)


def _as_activities(activities: Iterable[Activity | Mapping[str, Any]]) -> tuple[Activity, ...]:
    return tuple(
        a if isinstance(a, Activity) else Activity.from_record(a) for a in activities
    )


def run_strategy(
    lecture: Lecture | Mapping[str, Any],
    activities: Iterable[Activity | Mapping[str, Any]] = (),
    strategy: Strategy | str = Strategy.SMART,
    config: SegmentationConfig | None = None,
    parser: MarkupParser | None = None,
) -> Artifact:
    """Run one strategy and return the artifact (slides + per-run metrics)."""
    chosen = Strategy(strategy)
    pass_obj = configure_pass(strategy_pass(chosen), {"config": config, "parser": parser})
    request = SegmentationRequest(_as_lecture(lecture), _as_activities(activities))
    start = Artifact(payload=request, meta={"strategy": chosen.value})
    result = run_pass(pass_obj, start)
    logger.debug("run_strategy(%s): %d slides", chosen.value, len(result.payload))
    return result


def segment(
    lecture: Lecture | Mapping[str, Any],
    activities: Iterable[Activity | Mapping[str, Any]] = (),
    strategy: Strategy | str = Strategy.SMART,
    config: SegmentationConfig | None = None,
    parser: MarkupParser | None = None,
) -> list[Slide]:
    """Segment ``lecture`` into title, content/image and activity slides.

    ``config`` tunes the chunkers for every strategy; the slide-count
    bounds are only read by ``custom``. ``parser`` replaces the default
    BeautifulSoup-backed parser.
    """
    return list(run_strategy(lecture, activities, strategy, config, parser).payload)


def available_strategies() -> dict[str, str]:
    """Strategy name -> pass class name, for inspection."""
    return {s.value: type(p).__name__ for s, p in _STRATEGIES.items()}


__all__ = [
    "available_strategies",
    "configure_pass",
    "run_strategy",
    "segment",
    "strategy_pass",
]
