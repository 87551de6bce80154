"""Nox sessions orchestrating logrecord unit suites."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import nox


PYTHON_VERSIONS = ["3.11"]
PROJECT_ROOT = Path(__file__).parent

nox.options.sessions = [
    "tests_unit_logrecord",
]


def _install_test_requirements(session: nox.Session) -> None:
    """Install the package plus the testing toolchain inside the session environment."""

    session.install("-e", ".[test]")


def _normalize_pythonpath(existing: str | None) -> str:
    parts = [str(PROJECT_ROOT)]
    if existing:
        parts.append(existing)
    return ":".join(part for part in parts if part)


def _build_env(session: nox.Session) -> dict[str, str]:
    env = dict(session.env)
    env["PYTHONPATH"] = _normalize_pythonpath(env.get("PYTHONPATH"))
    return env


def _run_suite(session: nox.Session, suite: str, targets: Iterable[str]) -> None:
    _install_test_requirements(session)

    env = _build_env(session)

    session.log("Running %s suite under coverage", suite)
    session.run(
        "coverage",
        "run",
        "--source=logrecord",
        "-m",
        "pytest",
        *targets,
        *session.posargs,
        env=env,
    )
    session.run("coverage", "report", "-m", env=env)


@nox.session(python=PYTHON_VERSIONS, reuse_venv=True, name="tests(unit_logrecord)")
def tests_unit_logrecord(session: nox.Session) -> None:
    """Execute record builder unit suites with coverage."""

    targets = ["tests/unit/logrecord"]
    _run_suite(session, "logrecord", targets)
