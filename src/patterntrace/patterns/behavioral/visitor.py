"""Visitor: apply operations to employees without changing the Employee class."""

from __future__ import annotations

from typing import Protocol

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter


class Visitor(Protocol):
    def visit(self, employee: Employee) -> None: ...


class Employee:
    def __init__(self, name: str, salary: float, vacation: int) -> None:
        self.name = name
        self.salary = salary
        self.vacation = vacation

    def accept(self, visitor: Visitor) -> None:
        visitor.visit(self)


class ExtraSalary:
    def visit(self, employee: Employee) -> None:
        employee.salary = employee.salary * 1.1


class ExtraVacation:
    def visit(self, employee: Employee) -> None:
        employee.vacation = employee.vacation + 2


@register_pattern(
    "visitor",
    title="Visitor",
    category=PatternCategory.BEHAVIORAL,
    summary="Salary and vacation visitors over employees",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    employees = [
        Employee("John", 10000, 10),
        Employee("Mary", 20000, 21),
        Employee("Boss", 250000, 51),
    ]
    visitors: list[Visitor] = [ExtraSalary(), ExtraVacation()]

    for employee in employees:
        for visitor in visitors:
            employee.accept(visitor)
        log.add(f"{employee.name}: ${employee.salary:.2f} and {employee.vacation} vacation days")
    log.show()


if __name__ == "__main__":
    run()
