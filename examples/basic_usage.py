"""Basic usage: browse the catalogue and run demonstrations through the API."""

from __future__ import annotations

from patterntrace import MemoryPresenter, list_patterns, run_pattern
from patterntrace.presenters import render_catalog


def main() -> None:
    print(render_catalog(list_patterns()))

    # Console output, verbatim.
    run_pattern("chain-of-responsibility")

    presenter = MemoryPresenter()
    run_pattern("proxy", presenter)
    cache_line = presenter.last.splitlines()[-1] if presenter.last else ""
    print(f"Proxy finished with: {cache_line}")


if __name__ == "__main__":
    main()
