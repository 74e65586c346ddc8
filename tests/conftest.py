"""Shared fixtures for the trellis test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog

from trellis.logging import setup_logging
from trellis.models.config import ProjectConfig


@pytest.fixture(autouse=True)
def _quiet_logging() -> Iterator[None]:
    """Route structlog through stdlib logging at WARNING for every test."""
    setup_logging()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory with no settings file in reach."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TRELLIS_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., ProjectConfig]:
    """Build a ProjectConfig targeting a fresh directory under tmp_path."""

    def _make(**overrides: Any) -> ProjectConfig:
        values: dict[str, Any] = {
            "project_name": "shop-api",
            "project_type": "backend",
            "architecture": "mvc",
            "directory": tmp_path / "app",
        }
        values.update(overrides)
        return ProjectConfig.model_validate(values)

    return _make
