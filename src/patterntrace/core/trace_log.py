"""The accumulate-then-show buffer every runner owns."""

from __future__ import annotations

import warnings
from types import TracebackType

from ..presenters import ConsolePresenter, Presenter


class TraceLog:
    """Collects human-readable lines and hands them to a presenter once.

    Error-handling contract
    ----------------------
    - ``add`` and ``show`` never raise.
    - A presenter that fails inside ``show`` is reported with
      ``warnings.warn``; the buffer is still reset.
    """

    def __init__(self, presenter: Presenter | None = None) -> None:
        self.presenter: Presenter = ConsolePresenter() if presenter is None else presenter
        self._buffer: list[str] = []

    @property
    def text(self) -> str:
        """Current buffer contents, without consuming them."""
        return "".join(self._buffer)

    def add(self, line: str) -> None:
        self._buffer.append(f"{line}\n")

    def show(self) -> None:
        text = self.text
        self._buffer = []
        try:
            self.presenter.present(text)
        except Exception:
            warnings.warn(
                "patterntrace: presenter failed to display trace output. "
                "Trace text has been dropped.",
                stacklevel=2,
            )

    def __enter__(self) -> TraceLog:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc is None:
            self.show()
        return False
