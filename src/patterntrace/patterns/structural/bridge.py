"""Bridge: input abstractions and output devices vary independently."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter


class OutputDevice(ABC):
    def __init__(self, log: TraceLog) -> None:
        self.log = log

    @abstractmethod
    def click(self) -> None: ...

    @abstractmethod
    def move(self) -> None: ...

    @abstractmethod
    def drag(self) -> None: ...

    @abstractmethod
    def zoom(self) -> None: ...


class Screen(OutputDevice):
    def click(self) -> None:
        self.log.add("Screen select")

    def move(self) -> None:
        self.log.add("Screen move")

    def drag(self) -> None:
        self.log.add("Screen drag")

    def zoom(self) -> None:
        self.log.add("Screen zoom in")


class Audio(OutputDevice):
    def click(self) -> None:
        self.log.add("Sound oink")

    def move(self) -> None:
        self.log.add("Sound waves")

    def drag(self) -> None:
        self.log.add("Sound screetch")

    def zoom(self) -> None:
        self.log.add("Sound volume up")


class Gestures:
    def __init__(self, output: OutputDevice) -> None:
        self.output = output

    def tap(self) -> None:
        self.output.click()

    def swipe(self) -> None:
        self.output.move()

    def pan(self) -> None:
        self.output.drag()

    def pinch(self) -> None:
        self.output.zoom()


class Mouse:
    def __init__(self, output: OutputDevice) -> None:
        self.output = output

    def click(self) -> None:
        self.output.click()

    def move(self) -> None:
        self.output.move()

    def down(self) -> None:
        self.output.drag()

    def wheel(self) -> None:
        self.output.zoom()


@register_pattern(
    "bridge",
    title="Bridge",
    category=PatternCategory.STRUCTURAL,
    summary="Gestures and mouse input bridged to screen and audio output",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    hand = Gestures(Screen(log))
    mouse = Mouse(Audio(log))

    hand.tap()
    hand.swipe()
    hand.pinch()

    mouse.click()
    mouse.move()
    mouse.wheel()
    log.show()


if __name__ == "__main__":
    run()
