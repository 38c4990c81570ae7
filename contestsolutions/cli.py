"""Command line entry point that solves any known problem from judge input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from . import div2_a, div2_b, div2_c, div3_ab, div3_cd, educational, kickstart, mashup
from . import hashcode

__all__ = ["list_problems", "main"]

_Runner = Callable[[str, str], str]


def _registry() -> dict[str, _Runner]:
    modules = (kickstart, div2_a, div2_b, div2_c, div3_ab, div3_cd, educational, mashup)
    registry: dict[str, _Runner] = {
        name: module.run for module in modules for name in module._SOLVERS
    }
    for name in ("traffic-signals", "pizza-delivery"):
        registry[name] = hashcode.run
    return registry


def list_problems() -> list[str]:
    """Names of all problems that can be solved, in sorted order."""
    return sorted(_registry())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contestsolutions",
        description="Solve a contest problem from judge-format input.",
    )
    parser.add_argument("problem", nargs="?", help="name of the problem to solve")
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="file holding the input; '-' or nothing reads standard input",
    )
    parser.add_argument("-o", "--output", help="file to write the answer to")
    parser.add_argument(
        "--list", action="store_true", help="list the known problems and exit"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface; returns the exit status."""
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    if args.list:
        sys.stdout.write("".join(f"{name}\n" for name in list_problems()))
        return 0
    if args.problem is None:
        parser.error("a problem name is required")
    registry = _registry()
    if args.problem not in registry:
        parser.error(f"unknown problem: {args.problem}")

    if args.input == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as error:
            print(f"cannot read {args.input}: {error}", file=sys.stderr)
            return 1

    try:
        answer = registry[args.problem](args.problem, text)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.write(answer)
    else:
        sys.stdout.write(answer)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())