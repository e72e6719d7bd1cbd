"""In-memory presenter."""

from __future__ import annotations


class MemoryPresenter:
    """Records every presented text. Good for tests and JSON output."""

    def __init__(self) -> None:
        self.shown: list[str] = []

    def present(self, text: str) -> None:
        self.shown.append(text)

    @property
    def last(self) -> str | None:
        return self.shown[-1] if self.shown else None
