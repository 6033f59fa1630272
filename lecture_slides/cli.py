from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional

import typer

from lecture_slides.adapters import emit_jsonl
from lecture_slides.adapters.io_lecture import read_activities, read_lecture
from lecture_slides.config import load_spec
from lecture_slides.core import available_strategies, run_strategy
from lecture_slides.viewer import render_linear

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _exit_with_error(exc: Exception) -> None:
    """Print ``exc`` to stderr and exit with status 1."""
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(1)


def _safe(func: Callable[[], None]) -> None:
    """Invoke ``func`` and exit non-zero on any exception."""
    try:
        func()
    except Exception as exc:  # pragma: no cover - exercised in CLI tests
        _exit_with_error(exc)


def _cli_overrides(strategy: str | None, max_words: int | None) -> dict[str, Any]:
    seg = {"max_words_per_slide": max_words} if max_words is not None else {}
    return {
        k: v for k, v in {"strategy": strategy, "segmentation": seg}.items() if v
    }


def _run_segment(
    input_path: Path,
    strategy: str | None,
    activities: Path | None,
    spec: str,
    out: Path | None,
    title: str,
    description: str,
    max_words: int | None,
    verbose: bool,
) -> None:
    _configure_logging(verbose)
    s = load_spec(spec, overrides=_cli_overrides(strategy, max_words))
    lecture = read_lecture(input_path, title=title, description=description)
    result = run_strategy(
        lecture, read_activities(activities), s.strategy, s.segmentation
    )
    logger.info("metrics: %s", (result.meta or {}).get("metrics"))
    emit_jsonl.write(result.payload, str(out) if out else None)


@app.command()
def segment(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    strategy: Optional[str] = typer.Option(None, "--strategy", "-s"),
    activities: Optional[Path] = typer.Option(None, "--activities", exists=True, dir_okay=False),
    spec: str = typer.Option("slides.yaml", "--config"),
    out: Optional[Path] = typer.Option(None, "--out"),
    title: str = typer.Option("", "--title"),
    description: str = typer.Option("", "--description"),
    max_words: Optional[int] = typer.Option(None, "--max-words"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    """Segment a lecture (JSON record or HTML file) into JSONL slides."""
    _safe(
        lambda: _run_segment(
            input_path, strategy, activities, spec, out, title, description, max_words, verbose
        )
    )


@app.command()
def render(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
) -> None:
    """Print the lecture content as one document with visible slide breaks."""
    _safe(lambda: typer.echo(render_linear(read_lecture(input_path).content)))


@app.command()
def strategies() -> None:
    """List the registered segmentation strategies."""
    typer.echo(json.dumps(available_strategies(), indent=2))


if __name__ == "__main__":
    app()
