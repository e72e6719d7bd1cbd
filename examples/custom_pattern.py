"""Custom pattern: register an extra demonstration next to the built-in ones.

Validates: a private TraceLog handed to the objects that write to it,
exactly one presentation per run, key normalization on lookup.
"""

from __future__ import annotations

from patterntrace import MemoryPresenter, PatternCategory, TraceLog, get_pattern, run_pattern
from patterntrace.core import register_pattern
from patterntrace.presenters import Presenter


class Sensor:
    def __init__(self, name: str, log: TraceLog) -> None:
        self.name = name
        self.log = log
        self.readings: list[float] = []

    def record(self, value: float) -> None:
        self.readings.append(value)
        self.log.add(f"{self.name}: {value:.1f}")


@register_pattern(
    "sensor-log",
    title="Sensor Log",
    category=PatternCategory.BEHAVIORAL,
    summary="Readings recorded through a scoped trace log",
)
def run(presenter: Presenter | None = None) -> None:
    with TraceLog(presenter) as log:
        sensor = Sensor("kitchen", log)
        for value in (20.5, 21.0, 21.4):
            sensor.record(value)
        log.add(f"Average: {sum(sensor.readings) / len(sensor.readings):.2f}")


def main() -> None:
    presenter = MemoryPresenter()
    run_pattern("sensor-log", presenter)

    # -- Assertions --
    assert presenter.shown == ["kitchen: 20.5\nkitchen: 21.0\nkitchen: 21.4\nAverage: 20.97\n"]
    assert get_pattern("Sensor_Log").title == "Sensor Log"

    print("Custom pattern example PASSED")


if __name__ == "__main__":
    main()
