"""Command line interface for patterntrace."""

from __future__ import annotations

import argparse

from ..models import PatternCategory
from .list_cmd import run_list
from .run_cmd import run_patterns


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="patterntrace")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List the pattern catalogue")
    list_parser.add_argument(
        "--category",
        choices=[category.value for category in PatternCategory],
        default=None,
        help="Only list patterns in this category",
    )
    list_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the catalogue as JSON instead of a tree",
    )

    run_parser = subparsers.add_parser("run", help="Run one or more pattern demonstrations")
    run_parser.add_argument("patterns", nargs="*", help="Pattern keys, e.g. 'strategy'")
    run_parser.add_argument("--all", action="store_true", help="Run every registered pattern")
    run_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit one JSON run record per pattern instead of the trace text",
    )
    run_parser.add_argument(
        "--framed",
        action="store_true",
        help="Draw each trace inside a titled panel",
    )
    run_parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Console width used for framed output",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "list":
        category = PatternCategory(args.category) if args.category else None
        return run_list(category, as_json=args.json)

    if args.command == "run":
        if args.all and args.patterns:
            parser.error("pass pattern keys or --all, not both")
        if not args.all and not args.patterns:
            parser.error("pass at least one pattern key or --all")
        return run_patterns(
            args.patterns,
            run_all=args.all,
            as_json=args.json,
            framed=args.framed,
            width=args.width,
        )

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
