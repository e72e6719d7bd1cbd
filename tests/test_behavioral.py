from __future__ import annotations

import pytest

from patterntrace.core import TraceLog
from patterntrace.exceptions import UnknownVariantError
from patterntrace.patterns.behavioral import (
    chain_of_responsibility,
    command,
    iterator,
    mediator,
    memento,
    observer,
    state,
    strategy,
    template_method,
    visitor,
)
from patterntrace.presenters import MemoryPresenter


def test_chain_of_responsibility_trace(memory: MemoryPresenter) -> None:
    chain_of_responsibility.run(memory)

    assert memory.shown == [
        "Requested: $378\n\n"
        "Dispense 3 $100 bills\n"
        "Dispense 1 $50 bills\n"
        "Dispense 1 $20 bills\n"
        "Dispense 0 $10 bills\n"
        "Dispense 1 $5 bills\n"
        "Dispense 3 $1 bills\n"
    ]


def test_request_dispense_reduces_remaining_amount(memory: MemoryPresenter) -> None:
    request = chain_of_responsibility.Request(95, TraceLog(memory))

    assert request.dispense(50) is request
    assert request.amount == 45
    request.dispense(20).dispense(5)
    assert request.amount == 0


def test_chain_visits_each_denomination_in_order(memory: MemoryPresenter) -> None:
    chain_of_responsibility.run(memory)

    bills = [line.split("$")[1].split()[0] for line in memory.last.splitlines()[2:]]
    assert bills == [str(bill) for bill in chain_of_responsibility.DENOMINATIONS]


def test_command_trace(memory: MemoryPresenter) -> None:
    command.run(memory)

    assert memory.last == (
        "Add: 100\nSub: 24\nMul: 6\nDiv: 2\nUndo Div: 2\nUndo Mul: 6\n\nValue: 76\n"
    )


def test_calculator_undo_restores_previous_value(memory: MemoryPresenter) -> None:
    calculator = command.Calculator(TraceLog(memory))
    calculator.execute(command.add_command(10))
    calculator.execute(command.mul_command(3))
    assert calculator.current == 30

    calculator.undo()
    assert calculator.current == 10
    calculator.undo()
    assert calculator.current == 0


def test_calculator_undo_on_empty_history_is_noop(memory: MemoryPresenter) -> None:
    log = TraceLog(memory)
    calculator = command.Calculator(log)

    calculator.undo()

    assert calculator.current == 0
    assert log.text == ""


def test_iterator_trace_visits_every_item_twice(memory: MemoryPresenter) -> None:
    iterator.run(memory)

    single_pass = "one\n2\ncircle\nTrue\nApplepie\n"
    assert memory.last == f"{single_pass}\n{single_pass}"


def test_cursor_protocol() -> None:
    cursor = iterator.Cursor(["a", "b"])

    assert cursor.first() == "a"
    assert cursor.has_next()
    assert cursor.next() == "b"
    assert not cursor.has_next()
    assert cursor.next() is None

    cursor.reset()
    assert cursor.next() == "a"
    assert list(cursor) == ["a", "b"]


def test_cursor_each_and_empty_sequence() -> None:
    seen: list[int] = []
    iterator.Cursor([1, 2, 3]).each(seen.append)
    assert seen == [1, 2, 3]

    empty: iterator.Cursor[int] = iterator.Cursor([])
    assert empty.first() is None
    assert list(empty) == []


def test_mediator_trace(memory: MemoryPresenter) -> None:
    mediator.run(memory)

    assert memory.last == (
        "Yoko to John: All you need is love.\n"
        "Yoko to Paul: All you need is love.\n"
        "Yoko to Ringo: All you need is love.\n"
        "Yoko to John: I love you John.\n"
        "Yoko to Paul: I love you John.\n"
        "Yoko to Ringo: I love you John.\n"
        "John to Yoko: Hey, no need to broadcast\n"
        "Paul to Yoko: Ha, I heard that!\n"
        "Paul to John: Ha, I heard that!\n"
        "Paul to Ringo: Ha, I heard that!\n"
        "Ringo to Paul: Paul, what do you think?\n"
    )


def test_unregistered_participant_send_is_dropped(memory: MemoryPresenter) -> None:
    log = TraceLog(memory)
    loner = mediator.Participant("Loner", log)

    loner.send("anyone?")

    assert log.text == ""


def test_memento_trace(memory: MemoryPresenter) -> None:
    memento.run(memory)

    assert memory.last == "Mike Foley\nJohn Wang\n"


def test_memento_roundtrip_restores_every_field() -> None:
    person = memento.Person(name="Ann", street="1 Elm", city="Austin", state="TX")
    snapshot = person.hydrate()

    person.name = "Changed"
    person.city = "Elsewhere"
    person.dehydrate(snapshot)

    assert person.model_dump() == {
        "name": "Ann",
        "street": "1 Elm",
        "city": "Austin",
        "state": "TX",
    }


def test_caretaker_missing_key_raises() -> None:
    caretaker = memento.CareTaker()
    caretaker.add("a", "{}")

    assert caretaker.get("a") == "{}"
    with pytest.raises(KeyError):
        caretaker.get("b")


def test_observer_trace(memory: MemoryPresenter) -> None:
    observer.run(memory)

    assert memory.last == "fired: event #1\nfired: event #3\n"


def test_click_notifies_handlers_in_subscription_order() -> None:
    received: list[str] = []
    click: observer.Click[str] = observer.Click()
    click.subscribe(lambda payload: received.append(f"first:{payload}"))
    click.subscribe(lambda payload: received.append(f"second:{payload}"))

    click.fire("x")

    assert received == ["first:x", "second:x"]


def test_state_trace_caps_changes(memory: MemoryPresenter) -> None:
    state.run(memory)

    lines = memory.last.splitlines() if memory.last else []
    assert len(lines) == 11
    assert lines[:4] == [
        "Red --> for 1 minute",
        "Green --> for 1 minute",
        "Yellow --> for 10 seconds",
        "Red --> for 1 minute",
    ]
    assert lines[-1] == "Green --> for 1 minute"


def test_traffic_light_respects_custom_limit(memory: MemoryPresenter) -> None:
    log = TraceLog(memory)
    light = state.TrafficLight(log, max_changes=2)
    light.start()

    assert light.changes == 2
    assert isinstance(light.current, state.Yellow)
    assert log.text.splitlines() == [
        "Red --> for 1 minute",
        "Green --> for 1 minute",
        "Yellow --> for 10 seconds",
    ]


def test_strategy_trace(memory: MemoryPresenter) -> None:
    strategy.run(memory)

    assert memory.last == (
        "UPS Strategy: $45.95\nUSPS Strategy: $39.40\nFedex Strategy: $43.20\n"
    )


def test_shipping_without_strategy_returns_empty() -> None:
    package = strategy.Package(origin="1", destination="2", weight="1kg")

    assert strategy.Shipping().calculate(package) == ""


@pytest.mark.parametrize(
    ("key", "expected"),
    [("ups", "$45.95"), ("USPS", "$39.40"), ("fedex", "$43.20")],
)
def test_carrier_for_known_keys(key: str, expected: str) -> None:
    package = strategy.Package(origin="1", destination="2", weight="1kg")
    shipping = strategy.Shipping()
    shipping.set_strategy(strategy.carrier_for(key))

    assert shipping.calculate(package) == expected


def test_carrier_for_unknown_key_is_fatal() -> None:
    with pytest.raises(UnknownVariantError, match="Unknown carrier: 'dhl'"):
        strategy.carrier_for("dhl")


def test_template_method_trace(memory: MemoryPresenter) -> None:
    template_method.run(memory)

    assert memory.last == "MySQL: connect step\nMySQL: select step\nMySQL: disconnect step\n"


def test_data_store_cannot_be_instantiated(memory: MemoryPresenter) -> None:
    with pytest.raises(TypeError):
        template_method.DataStore(TraceLog(memory))  # type: ignore[abstract]
    assert template_method.MySqlDataStore(TraceLog(memory)).process() is True


def test_visitor_trace(memory: MemoryPresenter) -> None:
    visitor.run(memory)

    assert memory.last == (
        "John: $11000.00 and 12 vacation days\n"
        "Mary: $22000.00 and 23 vacation days\n"
        "Boss: $275000.00 and 53 vacation days\n"
    )


def test_visitors_apply_independently() -> None:
    employee = visitor.Employee("Ann", 100, 5)

    employee.accept(visitor.ExtraVacation())
    assert employee.vacation == 7
    assert employee.salary == 100

    employee.accept(visitor.ExtraSalary())
    assert employee.salary == pytest.approx(110)
