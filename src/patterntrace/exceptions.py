"""Public exception types for patterntrace."""

from __future__ import annotations


class PatternTraceError(Exception):
    """Base class for all patterntrace exceptions."""


class UnknownVariantError(PatternTraceError, ValueError):
    """Raised when a key does not name a member of a closed set of variants."""


class UnknownPatternError(UnknownVariantError):
    """Raised when a pattern key is not present in the registry."""


class IncompleteBuildError(PatternTraceError):
    """Raised when a builder is asked for its product before construction."""
