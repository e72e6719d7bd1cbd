"""Template Method: a fixed processing skeleton with overridable steps."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter


class DataStore(ABC):
    def __init__(self, log: TraceLog) -> None:
        self.log = log

    def process(self) -> bool:
        self.connect()
        self.select()
        self.disconnect()
        return True

    @abstractmethod
    def connect(self) -> None: ...

    @abstractmethod
    def select(self) -> None: ...

    @abstractmethod
    def disconnect(self) -> None: ...


class MySqlDataStore(DataStore):
    def connect(self) -> None:
        self.log.add("MySQL: connect step")

    def select(self) -> None:
        self.log.add("MySQL: select step")

    def disconnect(self) -> None:
        self.log.add("MySQL: disconnect step")


@register_pattern(
    "template-method",
    title="Template Method",
    category=PatternCategory.BEHAVIORAL,
    summary="Database processing skeleton with concrete steps",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    MySqlDataStore(log).process()
    log.show()


if __name__ == "__main__":
    run()
