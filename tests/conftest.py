"""Test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo any structlog configuration done by the command-line interface."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set the environment used by the command-line interface."""
    monkeypatch.setenv("HSJWT_SECRET", "secret")
    monkeypatch.delenv("HSJWT_ALGORITHM", raising=False)
    monkeypatch.delenv("HSJWT_LOG_LEVEL", raising=False)
