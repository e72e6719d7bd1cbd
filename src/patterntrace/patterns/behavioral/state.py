"""State: a traffic light whose behavior is delegated to its current state."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter

MAX_CHANGES = 10


class LightState(ABC):
    def __init__(self, light: TrafficLight) -> None:
        self.light = light

    @abstractmethod
    def go(self) -> None: ...


class TrafficLight:
    """Cycles through states until ``max_changes`` transitions have happened."""

    def __init__(self, log: TraceLog, max_changes: int = MAX_CHANGES) -> None:
        self.log = log
        self.max_changes = max_changes
        self.changes = 0
        self.current: LightState = Red(self)

    def change(self, state: LightState) -> None:
        if self.changes >= self.max_changes:
            return
        self.changes += 1
        self.current = state
        self.current.go()

    def start(self) -> None:
        self.current.go()


class Red(LightState):
    def go(self) -> None:
        self.light.log.add("Red --> for 1 minute")
        self.light.change(Green(self.light))


class Yellow(LightState):
    def go(self) -> None:
        self.light.log.add("Yellow --> for 10 seconds")
        self.light.change(Red(self.light))


class Green(LightState):
    def go(self) -> None:
        self.light.log.add("Green --> for 1 minute")
        self.light.change(Yellow(self.light))


@register_pattern(
    "state",
    title="State",
    category=PatternCategory.BEHAVIORAL,
    summary="Traffic light delegating behavior to its current state",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    light = TrafficLight(log)
    light.start()
    log.show()


if __name__ == "__main__":
    run()
