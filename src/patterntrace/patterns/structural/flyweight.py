"""Flyweight: computers share make/model/processor records keyed by make and model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter


class Flyweight(BaseModel):
    """Intrinsic state shared by every computer of the same make and model."""

    model_config = ConfigDict(frozen=True)

    make: str
    model: str
    processor: str


class FlyweightFactory:
    def __init__(self) -> None:
        self._flyweights: dict[str, Flyweight] = {}

    def get(self, make: str, model: str, processor: str) -> Flyweight:
        key = make + model
        if key not in self._flyweights:
            self._flyweights[key] = Flyweight(make=make, model=model, processor=processor)
        return self._flyweights[key]

    def count(self) -> int:
        return len(self._flyweights)


class Computer:
    def __init__(self, flyweight: Flyweight, memory: str, tag: str) -> None:
        self.flyweight = flyweight
        self.memory = memory
        self.tag = tag

    @property
    def make(self) -> str:
        return self.flyweight.make


class ComputerCollection:
    """Owns its own flyweight factory, so separate collections never share state."""

    def __init__(self) -> None:
        self.factory = FlyweightFactory()
        self._computers: dict[str, Computer] = {}
        self._count = 0

    def add(self, make: str, model: str, processor: str, memory: str, tag: str) -> None:
        flyweight = self.factory.get(make, model, processor)
        self._computers[tag] = Computer(flyweight, memory, tag)
        self._count += 1

    def get(self, tag: str) -> Computer | None:
        return self._computers.get(tag)

    def count(self) -> int:
        return self._count


@register_pattern(
    "flyweight",
    title="Flyweight",
    category=PatternCategory.STRUCTURAL,
    summary="Computers sharing make and model records",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    computers = ComputerCollection()
    computers.add("Dell", "Studio XPS", "Intel", "5G", "Y755P")
    computers.add("Dell", "Studio XPS", "Intel", "6G", "X997T")
    computers.add("Dell", "Studio XPS", "Intel", "2G", "U8U80")
    computers.add("Dell", "Studio XPS", "Intel", "2G", "NT777")
    computers.add("Dell", "Studio XPS", "Intel", "2G", "0J88A")
    computers.add("HP", "Envy", "Intel", "4G", "CNU883701")
    computers.add("HP", "Envy", "Intel", "2G", "TXU003283")

    log.add(f"Computers: {computers.count()}")
    log.add(f"Flyweights: {computers.factory.count()}")
    log.show()


if __name__ == "__main__":
    run()
