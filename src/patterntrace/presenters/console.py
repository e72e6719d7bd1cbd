"""Rich-based console presentation and catalogue rendering."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from io import StringIO

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.tree import Tree

from ..models import PatternCategory, PatternInfo


class ConsolePresenter:
    """Writes trace text to a rich console, verbatim unless ``framed``."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        title: str | None = None,
        framed: bool = False,
    ) -> None:
        self.console = console or Console(markup=False, highlight=False)
        self.title = title
        self.framed = framed

    def present(self, text: str) -> None:
        if self.framed:
            self.console.print(Panel(Text(text.rstrip("\n")), title=self.title, expand=False))
            return
        self.console.print(Text(text), end="", soft_wrap=True)


def render_catalog(infos: Iterable[PatternInfo]) -> str:
    """Render the catalogue as a category tree and return it as plain text."""
    by_category: dict[PatternCategory, list[PatternInfo]] = defaultdict(list)
    for info in infos:
        by_category[info.category].append(info)

    tree = Tree("Patterns")
    for category in PatternCategory:
        members = by_category.get(category)
        if not members:
            continue
        branch = tree.add(f"{category.value} ({len(members)})")
        for info in sorted(members, key=lambda item: item.key):
            line = f"{info.key}: {info.title}"
            if info.summary:
                line += f" - {info.summary}"
            branch.add(line)

    console = Console(record=True, width=120, markup=False, file=StringIO())
    console.print(tree)
    return console.export_text()
