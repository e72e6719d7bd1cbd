"""Singleton: a class that hands out one shared instance."""

from __future__ import annotations

from typing import ClassVar

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter


class Singleton:
    _instance: ClassVar[Singleton | None] = None

    def __init__(self, value: str) -> None:
        self.value = value

    @classmethod
    def get_instance(cls) -> Singleton:
        if cls._instance is None:
            cls._instance = cls("I am the instance")
        return cls._instance


@register_pattern(
    "singleton",
    title="Singleton",
    category=PatternCategory.CREATIONAL,
    summary="One shared instance behind a class accessor",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    first = Singleton.get_instance()
    second = Singleton.get_instance()
    log.add(f"Same instance? {first is second}")
    log.show()


if __name__ == "__main__":
    run()
