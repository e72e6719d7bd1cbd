"""Decorator-based registry mapping pattern keys to their runners."""

from __future__ import annotations

import importlib
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from ..exceptions import UnknownPatternError
from ..models import PatternCategory, PatternInfo
from ..presenters import Presenter

P = ParamSpec("P")
R = TypeVar("R")

Runner = Callable[[Presenter | None], None]

_BUILTIN_PACKAGE = "patterntrace.patterns"

_infos: dict[str, PatternInfo] = {}
_runners: dict[str, Runner] = {}
_builtins_loaded = False


def normalize_key(key: str) -> str:
    """Lowercase a key and fold ``_`` and spaces into ``-``."""
    return "-".join(key.strip().lower().replace("_", " ").split())


def register_pattern(
    key: str,
    *,
    title: str,
    category: PatternCategory,
    summary: str = "",
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Record a runner under ``key``. The runner itself is returned unchanged."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        normalized = normalize_key(key)
        if normalized in _infos:
            raise ValueError(f"Pattern already registered: {normalized}")
        _infos[normalized] = PatternInfo(
            key=normalized,
            title=title,
            category=category,
            summary=summary,
            module=getattr(func, "__module__", ""),
        )
        _runners[normalized] = func  # type: ignore[assignment]
        return func

    return decorator


def get_pattern(key: str) -> PatternInfo:
    _load_builtin_patterns()
    normalized = normalize_key(key)
    try:
        return _infos[normalized]
    except KeyError:
        raise UnknownPatternError(f"Unknown pattern: {key!r}") from None


def get_runner(key: str) -> Runner:
    return _runners[get_pattern(key).key]


def list_patterns(category: PatternCategory | None = None) -> list[PatternInfo]:
    """Registered patterns sorted by category, then key."""
    _load_builtin_patterns()
    order = {member: index for index, member in enumerate(PatternCategory)}
    infos = [info for info in _infos.values() if category is None or info.category == category]
    return sorted(infos, key=lambda info: (order[info.category], info.key))


def run_pattern(key: str, presenter: Presenter | None = None) -> None:
    get_runner(key)(presenter)


def _load_builtin_patterns() -> None:
    global _builtins_loaded
    if _builtins_loaded:
        return
    package = importlib.import_module(_BUILTIN_PACKAGE)
    for name in package.BUILTIN_MODULES:
        importlib.import_module(f"{_BUILTIN_PACKAGE}.{name}")
    # Only a complete load counts; a failed import is retried on the next lookup.
    _builtins_loaded = True
