"""Builder: a shop directs builders through the same steps for different vehicles."""

from __future__ import annotations

from typing import Protocol, TypeVar

from ...core import TraceLog, register_pattern
from ...exceptions import IncompleteBuildError
from ...models import PatternCategory
from ...presenters import Presenter


class Vehicle(Protocol):
    def say(self) -> None: ...


V = TypeVar("V", bound=Vehicle)
V_co = TypeVar("V_co", bound=Vehicle, covariant=True)


class Builder(Protocol[V_co]):
    def step1(self) -> None: ...
    def step2(self) -> None: ...
    def get(self) -> V_co: ...


class Car:
    def __init__(self, log: TraceLog) -> None:
        self.log = log
        self.doors = 0

    def add_parts(self) -> None:
        self.doors = 4

    def say(self) -> None:
        self.log.add(f"I am a {self.doors}-door car")


class Truck:
    def __init__(self, log: TraceLog) -> None:
        self.log = log
        self.doors = 0

    def add_parts(self) -> None:
        self.doors = 2

    def say(self) -> None:
        self.log.add(f"I am a {self.doors}-door truck")


class CarBuilder:
    def __init__(self, log: TraceLog) -> None:
        self.log = log
        self._car: Car | None = None

    def step1(self) -> None:
        self._car = Car(self.log)

    def step2(self) -> None:
        if self._car is not None:
            self._car.add_parts()

    def get(self) -> Car:
        if self._car is None:
            raise IncompleteBuildError("Car not built")
        return self._car


class TruckBuilder:
    def __init__(self, log: TraceLog) -> None:
        self.log = log
        self._truck: Truck | None = None

    def step1(self) -> None:
        self._truck = Truck(self.log)

    def step2(self) -> None:
        if self._truck is not None:
            self._truck.add_parts()

    def get(self) -> Truck:
        if self._truck is None:
            raise IncompleteBuildError("Truck not built")
        return self._truck


class Shop:
    """Director: runs every builder through the same construction steps."""

    def construct(self, builder: Builder[V]) -> V:
        builder.step1()
        builder.step2()
        return builder.get()


@register_pattern(
    "builder",
    title="Builder",
    category=PatternCategory.CREATIONAL,
    summary="Shop directing car and truck builders",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    shop = Shop()
    car = shop.construct(CarBuilder(log))
    truck = shop.construct(TruckBuilder(log))
    car.say()
    truck.say()
    log.show()


if __name__ == "__main__":
    run()
