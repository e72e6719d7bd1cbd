"""Chain of Responsibility: an ATM dispensing a request bill by bill.

Each call to ``dispense`` handles as much of the remaining amount as its
denomination allows and passes the rest along the chain.
"""

from __future__ import annotations

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter

DENOMINATIONS = (100, 50, 20, 10, 5, 1)


class Request:
    def __init__(self, amount: int, log: TraceLog) -> None:
        self.amount = amount
        self._log = log
        log.add(f"Requested: ${amount}\n")

    def dispense(self, bill: int) -> Request:
        count, self.amount = divmod(self.amount, bill)
        self._log.add(f"Dispense {count} ${bill} bills")
        return self


@register_pattern(
    "chain-of-responsibility",
    title="Chain of Responsibility",
    category=PatternCategory.BEHAVIORAL,
    summary="ATM request passed along a chain of bill denominations",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    request = Request(378, log)
    for bill in DENOMINATIONS:
        request.dispense(bill)
    log.show()


if __name__ == "__main__":
    run()
