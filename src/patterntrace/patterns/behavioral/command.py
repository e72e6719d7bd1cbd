"""Command: a calculator whose operations are undoable command objects."""

from __future__ import annotations

import operator
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter

BinaryOp = Callable[[float, float], float]


class Command(BaseModel):
    """An operation, its inverse and the operand they share."""

    model_config = ConfigDict(frozen=True)

    name: str
    execute: BinaryOp
    undo: BinaryOp
    value: float


def add_command(value: float) -> Command:
    return Command(name="Add", execute=operator.add, undo=operator.sub, value=value)


def sub_command(value: float) -> Command:
    return Command(name="Sub", execute=operator.sub, undo=operator.add, value=value)


def mul_command(value: float) -> Command:
    return Command(name="Mul", execute=operator.mul, undo=operator.truediv, value=value)


def div_command(value: float) -> Command:
    return Command(name="Div", execute=operator.truediv, undo=operator.mul, value=value)


class Calculator:
    def __init__(self, log: TraceLog) -> None:
        self.current: float = 0
        self._history: list[Command] = []
        self._log = log

    def execute(self, command: Command) -> None:
        self.current = command.execute(self.current, command.value)
        self._history.append(command)
        self._log.add(f"{command.name}: {command.value:g}")

    def undo(self) -> None:
        """Revert the most recent command. No-op when the history is empty."""
        if not self._history:
            return
        command = self._history.pop()
        self.current = command.undo(self.current, command.value)
        self._log.add(f"Undo {command.name}: {command.value:g}")


@register_pattern(
    "command",
    title="Command",
    category=PatternCategory.BEHAVIORAL,
    summary="Calculator operations as undoable command objects",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    calculator = Calculator(log)
    calculator.execute(add_command(100))
    calculator.execute(sub_command(24))
    calculator.execute(mul_command(6))
    calculator.execute(div_command(2))
    calculator.undo()
    calculator.undo()
    log.add(f"\nValue: {calculator.current:g}")
    log.show()


if __name__ == "__main__":
    run()
