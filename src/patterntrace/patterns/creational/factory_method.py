"""Factory Method: dedicated factories decide which person class to build."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol

from ...core import TraceLog, register_pattern
from ...exceptions import UnknownVariantError
from ...models import PatternCategory
from ...presenters import Presenter


class Person(Protocol):
    name: str

    def say(self) -> None: ...


class Employee:
    def __init__(self, name: str, log: TraceLog) -> None:
        self.name = name
        self.log = log

    def say(self) -> None:
        self.log.add(f"I am employee {self.name}")


class Vendor:
    def __init__(self, name: str, log: TraceLog) -> None:
        self.name = name
        self.log = log

    def say(self) -> None:
        self.log.add(f"I am vendor {self.name}")


class PersonFactory(Protocol):
    def create(self, name: str) -> Person: ...


class EmployeeFactory:
    def __init__(self, log: TraceLog) -> None:
        self.log = log

    def create(self, name: str) -> Person:
        return Employee(name, self.log)


class VendorFactory:
    def __init__(self, log: TraceLog) -> None:
        self.log = log

    def create(self, name: str) -> Person:
        return Vendor(name, self.log)


class PersonKind(StrEnum):
    EMPLOYEE = "employee"
    VENDOR = "vendor"


def factory_for(kind: PersonKind | str, log: TraceLog) -> PersonFactory:
    try:
        person_kind = PersonKind(kind.lower())
    except ValueError:
        raise UnknownVariantError(f"Unknown person kind: {kind!r}") from None
    if person_kind is PersonKind.EMPLOYEE:
        return EmployeeFactory(log)
    return VendorFactory(log)


@register_pattern(
    "factory-method",
    title="Factory Method",
    category=PatternCategory.CREATIONAL,
    summary="Employee and vendor factories behind one interface",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    employee_factory = EmployeeFactory(log)
    vendor_factory = VendorFactory(log)
    persons = [
        employee_factory.create("Joan DiSilva"),
        employee_factory.create("Tim O'Neill"),
        vendor_factory.create("Gerald Watson"),
        vendor_factory.create("Nicole McNight"),
    ]
    for person in persons:
        person.say()
    log.show()


if __name__ == "__main__":
    run()
