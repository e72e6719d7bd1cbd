"""List subcommand implementation."""

from __future__ import annotations

import json

from ..core import list_patterns
from ..models import PatternCategory
from ..presenters import render_catalog


def run_list(category: PatternCategory | None, *, as_json: bool) -> int:
    infos = list_patterns(category)
    if as_json:
        payload = [info.model_dump(mode="json") for info in infos]
        print(json.dumps(payload, ensure_ascii=True))
        return 0
    print(render_catalog(infos), end="")
    return 0
