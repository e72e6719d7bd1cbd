"""Prototype: new customers are cloned from a configured prototype."""

from __future__ import annotations

from pydantic import BaseModel

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter


class Customer(BaseModel):
    first: str
    last: str
    status: str

    def describe(self) -> str:
        return f"name: {self.first} {self.last}, status: {self.status}"


class CustomerPrototype:
    def __init__(self, proto: Customer) -> None:
        self._proto = proto

    def clone(self) -> Customer:
        return self._proto.model_copy(deep=True)


@register_pattern(
    "prototype",
    title="Prototype",
    category=PatternCategory.CREATIONAL,
    summary="Customers cloned from a prototype instance",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    prototype = CustomerPrototype(Customer(first="n/a", last="n/a", status="pending"))
    customer = prototype.clone()
    log.add(customer.describe())
    log.show()


if __name__ == "__main__":
    run()
