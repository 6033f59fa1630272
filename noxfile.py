"""Nox automation sessions for lecture_slides."""

from __future__ import annotations

import nox

nox.options.sessions = ("lint", "typecheck", "tests")
nox.options.reuse_existing_virtualenvs = True


@nox.session()
def lint(session: nox.Session) -> None:
    session.install("black", "flake8")
    session.run("black", "--check", "lecture_slides", "tests")
    session.run("flake8", "lecture_slides", "tests")


@nox.session()
def typecheck(session: nox.Session) -> None:
    session.install("mypy", "-e", ".")
    session.run("mypy", "lecture_slides")


@nox.session()
def tests(session: nox.Session) -> None:
    session.install("-e", ".[dev]")
    session.run("pytest", "tests")
