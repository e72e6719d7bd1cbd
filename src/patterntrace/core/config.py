"""Configuration for presenting catalogue runs."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from rich.console import Console

from ..presenters import ConsolePresenter, MemoryPresenter, Presenter

PresenterName = Literal["console", "memory"]


class CatalogConfig(BaseModel):
    """Validated presentation settings. Passed explicitly, never global."""

    presenter: PresenterName = "console"
    framed: bool = False
    width: int | None = Field(default=None, gt=0)


def build_presenter(config: CatalogConfig, *, title: str | None = None) -> Presenter:
    if config.presenter == "memory":
        return MemoryPresenter()
    if config.presenter == "console":
        console = Console(markup=False, highlight=False, width=config.width)
        return ConsolePresenter(console, title=title, framed=config.framed)
    raise ValueError("Unsupported presenter value. Use 'console' or 'memory'.")
