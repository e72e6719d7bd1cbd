"""Run subcommand implementation."""

from __future__ import annotations

import sys

from ..core import CatalogConfig, build_presenter, get_pattern, get_runner, list_patterns
from ..exceptions import UnknownPatternError
from ..models import PatternInfo, RunRecord
from ..presenters import MemoryPresenter


def run_patterns(
    keys: list[str],
    *,
    run_all: bool,
    as_json: bool,
    framed: bool,
    width: int | None,
) -> int:
    try:
        infos = list_patterns() if run_all else [get_pattern(key) for key in keys]
    except UnknownPatternError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if width is not None and width <= 0:
        raise ValueError("--width must be a positive integer")
    config = CatalogConfig(
        presenter="memory" if as_json else "console",
        framed=framed,
        width=width,
    )
    for info in infos:
        _run_one(info, config, as_json=as_json)
    return 0


def _run_one(info: PatternInfo, config: CatalogConfig, *, as_json: bool) -> None:
    presenter = build_presenter(config, title=info.title)
    get_runner(info.key)(presenter)
    if as_json and isinstance(presenter, MemoryPresenter):
        record = RunRecord(pattern=info.key, category=info.category, text=presenter.last or "")
        print(record.model_dump_json())
