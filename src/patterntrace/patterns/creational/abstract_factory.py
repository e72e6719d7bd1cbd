"""Abstract Factory: one factory producing a closed family of employee types."""

from __future__ import annotations

from abc import ABC
from enum import StrEnum
from typing import ClassVar

from ...core import TraceLog, register_pattern
from ...exceptions import UnknownVariantError
from ...models import PatternCategory
from ...presenters import Presenter


class EmployeeType(StrEnum):
    FULLTIME = "fulltime"
    PARTTIME = "parttime"
    TEMPORARY = "temporary"
    CONTRACTOR = "contractor"


class EmployeeProduct(ABC):
    kind: ClassVar[EmployeeType]
    hourly: ClassVar[str]

    def __init__(self, log: TraceLog) -> None:
        self.log = log

    def say(self) -> None:
        self.log.add(f"{self.kind}: rate {self.hourly}/hour")


class FullTime(EmployeeProduct):
    kind = EmployeeType.FULLTIME
    hourly = "$12"


class PartTime(EmployeeProduct):
    kind = EmployeeType.PARTTIME
    hourly = "$11"


class Temporary(EmployeeProduct):
    kind = EmployeeType.TEMPORARY
    hourly = "$10"


class Contractor(EmployeeProduct):
    kind = EmployeeType.CONTRACTOR
    hourly = "$15"


_PRODUCTS: dict[EmployeeType, type[EmployeeProduct]] = {
    EmployeeType.FULLTIME: FullTime,
    EmployeeType.PARTTIME: PartTime,
    EmployeeType.TEMPORARY: Temporary,
    EmployeeType.CONTRACTOR: Contractor,
}


class EmployeeFactory:
    def __init__(self, log: TraceLog) -> None:
        self.log = log

    def create_employee(self, kind: EmployeeType | str) -> EmployeeProduct:
        """Build the employee for ``kind``, matched case-insensitively; unknown kinds are fatal."""
        try:
            employee_type = EmployeeType(kind.lower())
        except ValueError:
            raise UnknownVariantError(f"Unknown employee type: {kind!r}") from None
        return _PRODUCTS[employee_type](self.log)


@register_pattern(
    "abstract-factory",
    title="Abstract Factory",
    category=PatternCategory.CREATIONAL,
    summary="Factory over a closed family of employee types",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    factory = EmployeeFactory(log)
    employees = [factory.create_employee(kind) for kind in EmployeeType]
    for employee in employees:
        employee.say()
    log.show()


if __name__ == "__main__":
    run()
