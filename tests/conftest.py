from __future__ import annotations

import pytest

from patterntrace.core import list_patterns, registry
from patterntrace.presenters import MemoryPresenter


@pytest.fixture
def memory() -> MemoryPresenter:
    return MemoryPresenter()


@pytest.fixture
def isolated_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    """Let a test register patterns without leaking them into other tests."""
    list_patterns()
    monkeypatch.setattr(registry, "_infos", dict(registry._infos))
    monkeypatch.setattr(registry, "_runners", dict(registry._runners))
