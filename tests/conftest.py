"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import itertools
from typing import Callable

import pytest

from src.config import LAYOUT_ENV_KEYS


@pytest.fixture
def sample_outline() -> str:
    """Six-node outline: root, three children, two grandchildren under the first."""
    return "Root Node\n  Child 1\n    Grandchild 1\n    Grandchild 2\n  Child 2\n  Child 3"


@pytest.fixture
def counter_ids() -> Callable[[], str]:
    """Deterministic id factory: n0, n1, ..."""
    counter = itertools.count()
    return lambda: f"n{next(counter)}"


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Avoid loading project .env in tests unless explicitly set."""
    for key in ("INPUT_DIR", "OUTPUT_DIR", *LAYOUT_ENV_KEYS):
        monkeypatch.delenv(key, raising=False)
