from __future__ import annotations

import importlib
from types import ModuleType

import pytest

from patterntrace.core import (
    get_pattern,
    get_runner,
    list_patterns,
    normalize_key,
    register_pattern,
    registry,
    run_pattern,
)
from patterntrace.exceptions import UnknownPatternError, UnknownVariantError
from patterntrace.models import PatternCategory
from patterntrace.presenters import MemoryPresenter, Presenter


def test_catalogue_contains_every_builtin_pattern() -> None:
    keys = [info.key for info in list_patterns()]

    assert len(keys) == 22
    assert len(set(keys)) == 22
    assert keys[:3] == ["chain-of-responsibility", "command", "iterator"]
    assert "singleton" in keys
    assert keys[-1] == "proxy"


def test_list_patterns_filters_by_category() -> None:
    behavioral = list_patterns(PatternCategory.BEHAVIORAL)
    creational = list_patterns(PatternCategory.CREATIONAL)
    structural = list_patterns(PatternCategory.STRUCTURAL)

    assert len(behavioral) == 10
    assert len(creational) == 5
    assert len(structural) == 7
    assert all(info.category == PatternCategory.CREATIONAL for info in creational)
    assert [info.key for info in structural] == sorted(info.key for info in structural)


def test_pattern_info_records_module() -> None:
    info = get_pattern("template-method")

    assert info.title == "Template Method"
    assert info.module == "patterntrace.patterns.behavioral.template_method"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Strategy", "strategy"),
        ("chain_of_responsibility", "chain-of-responsibility"),
        ("  Factory Method ", "factory-method"),
        ("abstract-factory", "abstract-factory"),
    ],
)
def test_normalize_key(raw: str, expected: str) -> None:
    assert normalize_key(raw) == expected
    assert get_pattern(raw).key == expected


def test_unknown_pattern_is_fatal() -> None:
    with pytest.raises(UnknownPatternError, match="Unknown pattern: 'nope'"):
        get_pattern("nope")
    with pytest.raises(UnknownVariantError):
        get_runner("nope")
    with pytest.raises(ValueError):
        run_pattern("nope", MemoryPresenter())


def test_run_pattern_uses_given_presenter(memory: MemoryPresenter) -> None:
    run_pattern("singleton", memory)

    assert memory.shown == ["Same instance? True\n"]


@pytest.mark.usefixtures("isolated_registry")
def test_register_pattern_returns_runner_unchanged() -> None:
    def custom(presenter: Presenter | None = None) -> None:
        del presenter

    decorated = register_pattern(
        "Custom Demo",
        title="Custom",
        category=PatternCategory.STRUCTURAL,
    )(custom)

    assert decorated is custom
    assert get_runner("custom-demo") is custom
    assert get_pattern("custom_demo").category == PatternCategory.STRUCTURAL


@pytest.mark.usefixtures("isolated_registry")
def test_register_duplicate_key_raises() -> None:
    def duplicate(presenter: Presenter | None = None) -> None:
        del presenter

    with pytest.raises(ValueError, match="Pattern already registered: strategy"):
        register_pattern("Strategy", title="Again", category=PatternCategory.BEHAVIORAL)(
            duplicate
        )


@pytest.mark.usefixtures("isolated_registry")
def test_failed_builtin_load_is_retried(monkeypatch: pytest.MonkeyPatch) -> None:
    real_import = importlib.import_module
    failing = {"patterntrace.patterns.behavioral.command"}

    def flaky_import(name: str, package: str | None = None) -> ModuleType:
        if name in failing:
            raise ValueError("Pattern already registered: command")
        return real_import(name, package)

    monkeypatch.setattr(registry, "_builtins_loaded", False)
    monkeypatch.setattr(registry.importlib, "import_module", flaky_import)

    with pytest.raises(ValueError, match="already registered"):
        list_patterns()
    assert registry._builtins_loaded is False

    failing.clear()
    assert len(list_patterns()) == 22
    assert get_pattern("strategy").key == "strategy"
    assert registry._builtins_loaded is True
