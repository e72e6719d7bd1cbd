from __future__ import annotations

from io import StringIO

import pytest
from pydantic import ValidationError
from rich.console import Console

from patterntrace.core import CatalogConfig, build_presenter, list_patterns
from patterntrace.models import PatternCategory, PatternInfo
from patterntrace.presenters import ConsolePresenter, MemoryPresenter, Presenter, render_catalog


def _console() -> Console:
    return Console(file=StringIO(), markup=False, highlight=False, width=100)


def test_memory_presenter_records_every_presentation() -> None:
    presenter = MemoryPresenter()
    assert presenter.last is None

    presenter.present("a\n")
    presenter.present("")

    assert presenter.shown == ["a\n", ""]
    assert presenter.last == ""


def test_presenters_satisfy_protocol() -> None:
    assert isinstance(MemoryPresenter(), Presenter)
    assert isinstance(ConsolePresenter(_console()), Presenter)


def test_console_presenter_writes_text_verbatim() -> None:
    console = _console()
    presenter = ConsolePresenter(console)

    presenter.present("Old cost: $49.75\nNew cost: $39.50\n")

    output = console.file.getvalue()  # type: ignore[attr-defined]
    assert "Old cost: $49.75" in output
    assert "New cost: $39.50" in output


def test_console_presenter_does_not_interpret_markup() -> None:
    console = _console()
    ConsolePresenter(console).present("[bold]not markup[/bold]\n")

    output = console.file.getvalue()  # type: ignore[attr-defined]
    assert "[bold]not markup[/bold]" in output


def test_console_presenter_framed_uses_title() -> None:
    console = _console()
    ConsolePresenter(console, title="Facade", framed=True).present("approved\n")

    output = console.file.getvalue()  # type: ignore[attr-defined]
    assert "Facade" in output
    assert "approved" in output


def test_render_catalog_groups_by_category() -> None:
    output = render_catalog(list_patterns())

    assert "Patterns" in output
    assert "behavioral (10)" in output
    assert "creational (5)" in output
    assert "structural (7)" in output
    assert "strategy: Strategy - Swappable shipping-rate strategies" in output


def test_render_catalog_skips_empty_categories() -> None:
    info = PatternInfo(key="solo", title="Solo", category=PatternCategory.STRUCTURAL)
    output = render_catalog([info])

    assert "structural (1)" in output
    assert "solo: Solo" in output
    assert "behavioral" not in output


def test_build_presenter_resolves_config() -> None:
    assert isinstance(build_presenter(CatalogConfig(presenter="memory")), MemoryPresenter)

    console_presenter = build_presenter(CatalogConfig(framed=True, width=60), title="Proxy")
    assert isinstance(console_presenter, ConsolePresenter)
    assert console_presenter.framed is True
    assert console_presenter.title == "Proxy"
    assert console_presenter.console.width == 60


def test_catalog_config_rejects_unknown_presenter_and_bad_width() -> None:
    with pytest.raises(ValidationError):
        CatalogConfig(presenter="popup")  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        CatalogConfig(width=0)


def test_build_presenter_rejects_unvalidated_presenter_name() -> None:
    config = CatalogConfig.model_construct(presenter="popup", framed=False, width=None)
    with pytest.raises(ValueError, match="Unsupported presenter value"):
        build_presenter(config)
