"""Strategy: interchangeable shipping-cost algorithms selected at runtime."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol

from pydantic import BaseModel, ConfigDict

from ...core import TraceLog, register_pattern
from ...exceptions import UnknownVariantError
from ...models import PatternCategory
from ...presenters import Presenter


class Package(BaseModel):
    model_config = ConfigDict(frozen=True)

    origin: str
    destination: str
    weight: str


class ShippingCompany(Protocol):
    def calculate(self, package: Package) -> str: ...


class UPS:
    def calculate(self, package: Package) -> str:
        return "$45.95"


class USPS:
    def calculate(self, package: Package) -> str:
        return "$39.40"


class Fedex:
    def calculate(self, package: Package) -> str:
        return "$43.20"


class Carrier(StrEnum):
    UPS = "ups"
    USPS = "usps"
    FEDEX = "fedex"


_CARRIERS: dict[Carrier, type[ShippingCompany]] = {
    Carrier.UPS: UPS,
    Carrier.USPS: USPS,
    Carrier.FEDEX: Fedex,
}


def carrier_for(key: str) -> ShippingCompany:
    """Return the shipping strategy named by ``key``."""
    try:
        carrier = Carrier(key.lower())
    except ValueError:
        raise UnknownVariantError(f"Unknown carrier: {key!r}") from None
    return _CARRIERS[carrier]()


class Shipping:
    def __init__(self) -> None:
        self.company: ShippingCompany | None = None

    def set_strategy(self, company: ShippingCompany) -> None:
        self.company = company

    def calculate(self, package: Package) -> str:
        if self.company is None:
            return ""
        return self.company.calculate(package)


@register_pattern(
    "strategy",
    title="Strategy",
    category=PatternCategory.BEHAVIORAL,
    summary="Swappable shipping-rate strategies",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    package = Package(origin="76712", destination="10012", weight="1kg")
    shipping = Shipping()

    shipping.set_strategy(UPS())
    log.add(f"UPS Strategy: {shipping.calculate(package)}")
    shipping.set_strategy(USPS())
    log.add(f"USPS Strategy: {shipping.calculate(package)}")
    shipping.set_strategy(Fedex())
    log.add(f"Fedex Strategy: {shipping.calculate(package)}")
    log.show()


if __name__ == "__main__":
    run()
