"""Adapter: expose a new shipping API through the legacy request interface."""

from __future__ import annotations

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter


class LegacyShipping:
    def request(self, zip_start: str, zip_end: str, weight: str) -> str:
        return "$49.75"


class AdvancedShipping:
    def __init__(self) -> None:
        self.token: str | None = None
        self.start: str | None = None
        self.destination: str | None = None

    def login(self, credentials: dict[str, str]) -> None:
        self.token = credentials.get("token")

    def set_start(self, start: str) -> None:
        self.start = start

    def set_destination(self, destination: str) -> None:
        self.destination = destination

    def calculate(self, weight: str) -> str:
        return "$39.50"


class ShippingAdapter:
    """Presents ``AdvancedShipping`` with the ``LegacyShipping.request`` signature."""

    def __init__(self, credentials: dict[str, str]) -> None:
        self._shipping = AdvancedShipping()
        self._shipping.login(credentials)

    def request(self, zip_start: str, zip_end: str, weight: str) -> str:
        self._shipping.set_start(zip_start)
        self._shipping.set_destination(zip_end)
        return self._shipping.calculate(weight)


@register_pattern(
    "adapter",
    title="Adapter",
    category=PatternCategory.STRUCTURAL,
    summary="New shipping API behind the legacy interface",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    shipping = LegacyShipping()
    adapter = ShippingAdapter({"token": "30a8-6ee1"})

    cost = shipping.request("78701", "10010", "2 lbs")
    log.add(f"Old cost: {cost}")
    cost = adapter.request("78701", "10010", "2 lbs")
    log.add(f"New cost: {cost}")
    log.show()


if __name__ == "__main__":
    run()
