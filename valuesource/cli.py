from __future__ import annotations

import argparse
import sys

from valuesource.simulation import Simulation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="valuesource",
        description="Value source demo: three ways to move an object",
    )
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("run", help="Run the demo loop (dt 0.1 until t = 1.0)")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        Simulation().run()


if __name__ == "__main__":
    main()
