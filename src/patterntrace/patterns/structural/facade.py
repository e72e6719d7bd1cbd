"""Facade: one mortgage call hides the bank, credit and background checks."""

from __future__ import annotations

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter


class Bank:
    def verify(self, name: str, amount: str) -> bool:
        return True


class Credit:
    def get(self, name: str) -> bool:
        return True


class Background:
    def check(self, name: str) -> bool:
        return True


class Mortgage:
    def __init__(self, name: str) -> None:
        self.name = name

    def apply_for(self, amount: str) -> str:
        approved = (
            Bank().verify(self.name, amount)
            and Credit().get(self.name)
            and Background().check(self.name)
        )
        result = "approved" if approved else "denied"
        return f"{self.name} has been {result} for a {amount} mortgage"


@register_pattern(
    "facade",
    title="Facade",
    category=PatternCategory.STRUCTURAL,
    summary="Mortgage application over three subsystem checks",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    mortgage = Mortgage("Joan Templeton")
    log.add(mortgage.apply_for("$100,000"))
    log.show()


if __name__ == "__main__":
    run()
