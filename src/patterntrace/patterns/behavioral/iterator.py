"""Iterator: sequential access to a collection without exposing its storage.

Both passes of the demo visit every item, the last one included. A
``for (first(); has_next(); next())`` loop would stop one item short.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Generic, TypeVar

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter

T = TypeVar("T")


class Cursor(Generic[T]):
    """Explicit cursor over a sequence, also usable as a Python iterable."""

    def __init__(self, items: Sequence[T]) -> None:
        self._items = list(items)
        self._index = 0

    def first(self) -> T | None:
        self.reset()
        return self.next()

    def next(self) -> T | None:
        if self._index >= len(self._items):
            return None
        item = self._items[self._index]
        self._index += 1
        return item

    def has_next(self) -> bool:
        return self._index < len(self._items)

    def reset(self) -> None:
        self._index = 0

    def each(self, callback: Callable[[T], None]) -> None:
        for item in self:
            callback(item)

    def __iter__(self) -> Iterator[T]:
        self.reset()
        while self.has_next():
            yield self._items[self._index]
            self._index += 1


@register_pattern(
    "iterator",
    title="Iterator",
    category=PatternCategory.BEHAVIORAL,
    summary="Cursor traversal of a heterogeneous collection",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    cursor: Cursor[object] = Cursor(["one", 2, "circle", True, "Applepie"])

    item = cursor.first()
    log.add(str(item))
    while cursor.has_next():
        log.add(str(cursor.next()))

    log.add("")
    cursor.each(lambda element: log.add(str(element)))
    log.show()


if __name__ == "__main__":
    run()
