"""Proxy: a caching stand-in for an expensive geocoding service."""

from __future__ import annotations

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter

_COORDINATES = {
    "Amsterdam": "52.3700° N, 4.8900° E",
    "London": "51.5171° N, 0.1062° W",
    "Paris": "48.8742° N, 2.3470° E",
    "Berlin": "52.5233° N, 13.4127° E",
}


class GeoCoder:
    def __init__(self) -> None:
        self.lookups = 0

    def get_lat_lng(self, address: str) -> str:
        self.lookups += 1
        return _COORDINATES.get(address, "")


class GeoProxy:
    """Same interface as ``GeoCoder``; each address is resolved at most once."""

    def __init__(self, log: TraceLog, geocoder: GeoCoder | None = None) -> None:
        self.log = log
        self.geocoder = geocoder or GeoCoder()
        self._cache: dict[str, str] = {}

    def get_lat_lng(self, address: str) -> str:
        if address not in self._cache:
            self._cache[address] = self.geocoder.get_lat_lng(address)
        self.log.add(f"{address}: {self._cache[address]}")
        return self._cache[address]

    def count(self) -> int:
        return len(self._cache)


@register_pattern(
    "proxy",
    title="Proxy",
    category=PatternCategory.STRUCTURAL,
    summary="Caching proxy in front of a geocoder",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    geo = GeoProxy(log)
    for address in (
        "Paris",
        "London",
        "London",
        "London",
        "London",
        "Amsterdam",
        "Amsterdam",
        "Amsterdam",
        "Amsterdam",
        "London",
        "London",
    ):
        geo.get_lat_lng(address)
    log.add(f"\nCache size: {geo.count()}")
    log.show()


if __name__ == "__main__":
    run()
