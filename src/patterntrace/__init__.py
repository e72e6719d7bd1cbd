"""patterntrace: a catalogue of classic design-pattern demonstrations.

Every demonstration owns a private ``TraceLog``; its runner appends lines and
shows them exactly once at the end.

    from patterntrace import MemoryPresenter, run_pattern
    presenter = MemoryPresenter()
    run_pattern("strategy", presenter)
    print(presenter.last)
"""

from __future__ import annotations

from .core import (
    CatalogConfig,
    TraceLog,
    build_presenter,
    get_pattern,
    get_runner,
    list_patterns,
    register_pattern,
    run_pattern,
)
from .exceptions import (
    IncompleteBuildError,
    PatternTraceError,
    UnknownPatternError,
    UnknownVariantError,
)
from .models import PatternCategory, PatternInfo, RunRecord
from .presenters import ConsolePresenter, MemoryPresenter, Presenter

__all__ = [
    "CatalogConfig",
    "ConsolePresenter",
    "IncompleteBuildError",
    "MemoryPresenter",
    "PatternCategory",
    "PatternInfo",
    "PatternTraceError",
    "Presenter",
    "RunRecord",
    "TraceLog",
    "UnknownPatternError",
    "UnknownVariantError",
    "build_presenter",
    "get_pattern",
    "get_runner",
    "list_patterns",
    "register_pattern",
    "run_pattern",
]
