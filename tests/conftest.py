"""Fixtures shared by unit and integration tests."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from tillerscope.observability.logging import reset_logging


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's TILLERSCOPE_* and KUBECONFIG settings out of tests."""
    for key in list(os.environ):
        if key.startswith("TILLERSCOPE_") or key == "KUBECONFIG":
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _fresh_logging() -> Iterator[None]:
    """Undo any structlog configuration a test installed."""
    yield
    reset_logging()
