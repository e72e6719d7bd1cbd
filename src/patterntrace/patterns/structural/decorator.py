"""Decorator: wrap a user to add an address while keeping its interface."""

from __future__ import annotations

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter


class User:
    def __init__(self, name: str, log: TraceLog) -> None:
        self.name = name
        self.log = log

    def say(self) -> None:
        self.log.add(f"User: {self.name}")


class DecoratedUser:
    def __init__(self, user: User, street: str, city: str) -> None:
        self.user = user
        self.name = user.name
        self.street = street
        self.city = city

    def say(self) -> None:
        self.user.log.add(f"Decorated User: {self.name}, {self.street}, {self.city}")


@register_pattern(
    "decorator",
    title="Decorator",
    category=PatternCategory.STRUCTURAL,
    summary="User wrapped with address details",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    user = User("Kelly", log)
    user.say()
    decorated = DecoratedUser(user, "Broadway", "New York")
    decorated.say()
    log.show()


if __name__ == "__main__":
    run()
