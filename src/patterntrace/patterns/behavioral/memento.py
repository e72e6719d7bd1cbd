"""Memento: snapshot an object's state to JSON and restore it later."""

from __future__ import annotations

from pydantic import BaseModel

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter


class Person(BaseModel):
    name: str
    street: str
    city: str
    state: str

    def hydrate(self) -> str:
        """Capture the current state as a JSON memento."""
        return self.model_dump_json()

    def dehydrate(self, memento: str) -> None:
        """Restore state from a memento produced by ``hydrate``."""
        snapshot = Person.model_validate_json(memento)
        self.name = snapshot.name
        self.street = snapshot.street
        self.city = snapshot.city
        self.state = snapshot.state


class CareTaker:
    """Holds mementos by key without inspecting them."""

    def __init__(self) -> None:
        self._mementos: dict[str | int, str] = {}

    def add(self, key: str | int, memento: str) -> None:
        self._mementos[key] = memento

    def get(self, key: str | int) -> str:
        return self._mementos[key]


@register_pattern(
    "memento",
    title="Memento",
    category=PatternCategory.BEHAVIORAL,
    summary="JSON snapshots restored after mutation",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    mike = Person(name="Mike Foley", street="1112 Main", city="Dallas", state="TX")
    john = Person(name="John Wang", street="48th Street", city="San Jose", state="CA")
    caretaker = CareTaker()

    caretaker.add(1, mike.hydrate())
    caretaker.add(2, john.hydrate())

    mike.name = "King Kong"
    john.name = "Superman"

    mike.dehydrate(caretaker.get(1))
    john.dehydrate(caretaker.get(2))

    log.add(mike.name)
    log.add(john.name)
    log.show()


if __name__ == "__main__":
    run()
