"""Presentation channels for trace output."""

from .base import Presenter
from .console import ConsolePresenter, render_catalog
from .memory import MemoryPresenter

__all__ = ["ConsolePresenter", "MemoryPresenter", "Presenter", "render_catalog"]
