"""
Reduce a combinatory logic term from the command line.

Usage:
  skic "SKKx"
  skic --trace "S(K(SI))Kab"
  skic --extended --json "BCWxy"
  skic --define "T=2:10" "Tab"
  skic --max-steps 50 "SII(SII)"
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from skic.core.ast import Term
from skic.core.pretty import pretty
from skic.core.reduce import reduce_to_normal_form
from skic.core.registry import BASIS, EXTENDED, Registry, Slot
from skic.errors import ReductionBudgetExceeded, RegistryError, SurfaceError
from skic.observability import setup_logging
from skic.surface.parse import parse_template, parse_term

logger = logging.getLogger(__name__)

EXIT_NORMAL = 0
EXIT_BUDGET = 1
EXIT_ERROR = 2


def parse_definition(text: str) -> tuple[str, int, tuple[Slot, ...]]:
    """Split ``NAME=ARITY:TEMPLATE`` into its parts."""

    name, sep, rest = text.partition("=")
    arity_text, sep2, template_text = rest.partition(":")
    if not sep or not sep2 or not name:
        raise argparse.ArgumentTypeError(
            f"expected NAME=ARITY:TEMPLATE, got {text!r}"
        )
    try:
        arity = int(arity_text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"arity must be an integer, got {arity_text!r}"
        ) from None
    return name, arity, parse_template(template_text)


def non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def non_negative_float(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def build_registry(extended: bool, definitions: list[str]) -> Registry:
    registry = EXTENDED if extended else BASIS
    for text in definitions:
        name, arity, template = parse_definition(text)
        registry = registry.register(name, arity, template)
    return registry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skic", description="Reduce a combinatory logic term to weak normal form."
    )
    parser.add_argument("term", help="Term in juxtaposition notation, e.g. SKKx")
    parser.add_argument(
        "--max-steps",
        type=non_negative_int,
        default=1000,
        help="Step budget; 0 disables the bound (default: 1000)",
    )
    parser.add_argument(
        "--timeout",
        type=non_negative_float,
        default=None,
        help="Wall-clock budget in seconds",
    )
    parser.add_argument(
        "--extended", action="store_true", help="Also recognise B, C and W"
    )
    parser.add_argument(
        "--define",
        action="append",
        default=[],
        metavar="NAME=ARITY:TEMPLATE",
        help="Register an extra combinator, e.g. T=2:10",
    )
    parser.add_argument(
        "--trace", action="store_true", help="Print every intermediate term"
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON only")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("SKIC_LOG_LEVEL", "WARNING"),
        help="Logging level (default: $SKIC_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--log-format",
        choices=("text", "json"),
        default=os.environ.get("SKIC_LOG_FORMAT", "text"),
        help="Log record format on stderr (default: $SKIC_LOG_FORMAT or text)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_format)

    steps: list[str] = []
    try:
        registry = build_registry(args.extended, args.define)
        term = parse_term(args.term)
    except (SurfaceError, RegistryError, argparse.ArgumentTypeError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    max_steps = args.max_steps or None
    result: Term
    normal = True
    try:
        result = reduce_to_normal_form(
            term,
            registry,
            max_steps=max_steps,
            timeout=args.timeout,
            trace=steps.append,
        )
    except ReductionBudgetExceeded as exc:
        logger.info("giving up on %s: %s", args.term, exc)
        result = exc.term
        normal = False

    if args.json:
        payload = {
            "input": pretty(term),
            "result": pretty(result),
            "normal": normal,
            "steps": [{"i": i, "value": value} for i, value in enumerate(steps)],
        }
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        if args.trace:
            for i, value in enumerate(steps):
                print(f"{i:03d}: {value}")
        print(pretty(result))
        if not normal:
            print(f"no normal form within {len(steps) - 1} steps", file=sys.stderr)
    return EXIT_NORMAL if normal else EXIT_BUDGET


if __name__ == "__main__":
    raise SystemExit(main())
