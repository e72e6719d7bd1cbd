"""Core runtime: trace log, configuration and runner registry."""

from .config import CatalogConfig, build_presenter
from .registry import (
    get_pattern,
    get_runner,
    list_patterns,
    normalize_key,
    register_pattern,
    run_pattern,
)
from .trace_log import TraceLog

__all__ = [
    "CatalogConfig",
    "TraceLog",
    "build_presenter",
    "get_pattern",
    "get_runner",
    "list_patterns",
    "normalize_key",
    "register_pattern",
    "run_pattern",
]
