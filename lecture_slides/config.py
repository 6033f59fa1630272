from __future__ import annotations

import os
import pathlib
import warnings
from enum import Enum
from functools import reduce
from typing import Any, Dict, Iterable, Mapping, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "SEGMENTATION__"
STRATEGY_ENV = "LECTURE_SLIDES_STRATEGY"


class Strategy(Enum):
    """Named segmentation algorithms; each maps to one registered pass."""

    SMART = "smart"
    MANUAL = "manual"
    CUSTOM = "custom"
    SIMPLE = "simple"


class SegmentationConfig(BaseModel):
    """Caller-supplied tuning for the chunkers and the merge pass.

    Fields must be positive; ``min_slides_from_content`` larger than
    ``max_slides_from_content`` is accepted as given.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_words_per_slide: int = Field(default=100, ge=1)
    min_slides_from_content: int = Field(default=3, ge=1)
    max_slides_from_content: int = Field(default=10, ge=1)
    preferred_break_tags: Tuple[str, ...] = ("p", "ul", "ol", "blockquote")


class SlidesSpec(BaseModel):
    """Declarative segmentation run: which strategy, with which tuning."""

    strategy: Strategy = Strategy.SMART
    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)


def _read_yaml(path: str | os.PathLike | None) -> Dict[str, Any]:
    """Return a dict from YAML or {} if path is None/missing/empty."""
    if not path:
        return {}
    p = pathlib.Path(path)
    if not p.exists():
        return {}
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise TypeError("slides.yaml must contain a top-level mapping")
    return data


def _coerce(value: str) -> Any:
    try:
        return yaml.safe_load(value)
    except yaml.YAMLError:
        return value


def _env_overrides() -> Dict[str, Any]:
    """
    Map SEGMENTATION__FIELD=value -> segmentation[field]=value (lower-cased)
    and LECTURE_SLIDES_STRATEGY -> strategy. Values are YAML-coerced.
    """
    seg = {
        k[len(ENV_PREFIX) :].lower(): _coerce(v)
        for k, v in os.environ.items()
        if k.startswith(ENV_PREFIX)
    }
    strategy = os.environ.get(STRATEGY_ENV)
    return {
        k: v
        for k, v in {"segmentation": seg, "strategy": strategy}.items()
        if v
    }


def _merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge two raw specs; ``segmentation`` merges per key, override wins."""
    seg = {**(base.get("segmentation") or {}), **(override.get("segmentation") or {})}
    merged = {**base, **override}
    return {**merged, "segmentation": seg} if seg else merged


def _warn_unknown_options(data: Mapping[str, Any]) -> None:
    """Emit a warning for keys neither options model knows about."""
    unknown = [k for k in data if k not in SlidesSpec.model_fields]
    unknown += [
        f"segmentation.{k}"
        for k in data.get("segmentation") or {}
        if k not in SegmentationConfig.model_fields
    ]
    if unknown:
        warnings.warn(
            f"Unknown slide options: {', '.join(sorted(unknown))}",
            stacklevel=3,
        )


def _known(data: Mapping[str, Any]) -> Dict[str, Any]:
    seg = {
        k: v
        for k, v in (data.get("segmentation") or {}).items()
        if k in SegmentationConfig.model_fields
    }
    top = {k: v for k, v in data.items() if k in SlidesSpec.model_fields}
    return {**top, "segmentation": seg}


def load_spec(
    path: str | os.PathLike | None = "slides.yaml",
    overrides: Mapping[str, Any] | None = None,
) -> SlidesSpec:
    """Load YAML + env/CLI overrides into a validated SlidesSpec."""
    sources: Iterable[Mapping[str, Any]] = (
        d for d in (_read_yaml(path), _env_overrides(), overrides) if d
    )
    acc: Dict[str, Any] = {}
    merged = reduce(_merge, sources, acc)
    _warn_unknown_options(merged)
    return SlidesSpec.model_validate(_known(merged))


__all__ = ["SegmentationConfig", "SlidesSpec", "Strategy", "load_spec"]
