"""Pass protocol and registry shared by every segmentation strategy.

A pass declares the payload type it consumes and the one it produces;
:func:`run_pass` holds it to both so a strategy never hands the caller
something other than a slide list.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Protocol, Type, runtime_checkable


@dataclass(frozen=True)
class Artifact:
    """Immutable carrier of a segmentation payload + run metadata."""

    payload: Any
    meta: Dict[str, Any] | None = None


@runtime_checkable
class Pass(Protocol):
    name: str
    input_type: Type
    output_type: Type

    def __call__(self, a: Artifact) -> Artifact:
        """Turn an ``input_type`` payload into an ``output_type`` payload."""
        ...


_REGISTRY: Mapping[str, Pass] = MappingProxyType({})


def register(p: Pass) -> Pass:
    """Add ``p`` under its name; a later pass with the same name replaces it."""
    global _REGISTRY
    _REGISTRY = MappingProxyType({**dict(_REGISTRY), p.name: p})
    return p


def registry() -> Dict[str, Pass]:
    return dict(_REGISTRY)


def _check(p: Pass, payload: Any, expected: Type, role: str) -> None:
    if not isinstance(payload, expected):
        raise TypeError(
            f"{p.name}: {role} payload must be {expected.__name__}, "
            f"got {type(payload).__name__}"
        )


def run_pass(p: Pass, a: Artifact) -> Artifact:
    """Run ``p`` on ``a``; a payload of the wrong type raises ``TypeError``."""
    _check(p, a.payload, p.input_type, "input")
    out = p(a)
    _check(p, out.payload, p.output_type, "output")
    return out


def with_metrics(meta: Mapping[str, Any] | None, name: str, **metrics: Any) -> dict[str, Any]:
    """Return ``meta`` with ``metrics`` merged under ``meta["metrics"][name]``."""
    all_metrics = (meta or {}).get("metrics") or {}
    merged = {**all_metrics.get(name, {}), **metrics}
    return {**(meta or {}), "metrics": {**all_metrics, name: merged}}


__all__ = ["Artifact", "Pass", "register", "registry", "run_pass", "with_metrics"]
