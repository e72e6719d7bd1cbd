"""Presentation channel abstractions."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Presenter(Protocol):
    """Protocol for displaying a block of accumulated trace text."""

    def present(self, text: str) -> None: ...
