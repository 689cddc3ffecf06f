"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sdkmodels.config import load_config

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from sdkmodels.config.schema import Config

_SDKMODELS_ENV_VARS = (
    "SDKMODELS_PACKAGE",
    "SDKMODELS_OUTPUT_DIR",
    "SDKMODELS_HEADER",
    "SDKMODELS_LOG",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def _clean_sdkmodels_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove SDKMODELS_* env vars so unit tests don't leak host config."""
    for var in _SDKMODELS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., Config]:
    """Factory fixture: write YAML + optional .env, return loaded Config."""

    def _make(yaml_str: str, *, dotenv: str | None = None) -> Config:
        (tmp_path / "sdkmodels.yaml").write_text(yaml_str)
        if dotenv is not None:
            (tmp_path / ".env").write_text(dotenv)
        return load_config(tmp_path / "sdkmodels.yaml")

    return _make
