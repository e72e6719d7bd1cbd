"""Observer: handlers subscribe to an event and are notified when it fires."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter

T = TypeVar("T")


class Click(Generic[T]):
    def __init__(self) -> None:
        self._handlers: list[Callable[[T], None]] = []

    def subscribe(self, handler: Callable[[T], None]) -> None:
        self._handlers.append(handler)

    def unsubscribe(self, handler: Callable[[T], None]) -> None:
        self._handlers = [item for item in self._handlers if item is not handler]

    def fire(self, payload: T) -> None:
        for handler in list(self._handlers):
            handler(payload)


@register_pattern(
    "observer",
    title="Observer",
    category=PatternCategory.BEHAVIORAL,
    summary="Click event with subscribe, unsubscribe and fire",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)

    def click_handler(item: str) -> None:
        log.add(f"fired: {item}")

    click: Click[str] = Click()
    click.subscribe(click_handler)
    click.fire("event #1")
    click.unsubscribe(click_handler)
    click.fire("event #2")
    click.subscribe(click_handler)
    click.fire("event #3")
    log.show()


if __name__ == "__main__":
    run()
