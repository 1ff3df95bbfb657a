"""Shared pytest fixtures."""

import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog
from hypothesis import HealthCheck, settings

from equation_validator.config import Settings
from equation_validator.disjoint_set import DisjointSet

# Hypothesis settings profiles for different environments
settings.register_profile(
    "fast",
    max_examples=50,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.register_profile(
    "ci",
    max_examples=500,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "fast"))


@pytest.fixture(autouse=True)
def _isolate_settings_from_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent the local .env file from leaking into test Settings instances."""
    monkeypatch.setattr(
        Settings,
        "model_config",
        {**Settings.model_config, "env_file": None},
    )


@pytest.fixture(autouse=True)
def log_events() -> Iterator[list[dict[str, Any]]]:
    """Capture structlog events instead of printing them to stdout."""
    with structlog.testing.capture_logs() as events:
        yield events


@pytest.fixture
def scenario_equalities() -> list[tuple[str, str]]:
    """Equalities from the canonical example: A, B, C, D, E, H collapse into one class."""
    return [("A", "B"), ("B", "D"), ("C", "D"), ("F", "G"), ("E", "H"), ("H", "C")]


@pytest.fixture
def forest() -> DisjointSet:
    return DisjointSet()


@pytest.fixture
def write_lines(tmp_path: Path) -> Callable[[str, list[str]], Path]:
    """Write lines to a file under tmp_path and return its path."""

    def _write(name: str, lines: list[str]) -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write
