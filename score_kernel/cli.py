"""
Score Kernel CLI
================

Inspect, compare and combine bendable scores from the command line.

Commands:
    show      - Canonical form, short form and diagnostics of a score
    compare   - Print <, = or > for two compatible scores
    add       - Level-wise sum of two compatible scores
    subtract  - Level-wise difference of two compatible scores
    multiply  - Scale every level by a factor (floored)
    divide    - Divide every level by a divisor (floored)
    power     - Raise every level to an exponent (floored)
    negate    - Negate every level
    zero      - Print the zero score for a level layout
    encode    - Print the JSON snapshot of a score
    decode    - Parse a JSON snapshot and print the score
    hash      - Print the SHA-256 of the score snapshot

Usage:
    score-kernel show "[0/-1]hard/[5]soft"
    score-kernel compare "[0]hard/[1]soft" "[0]hard/[2]soft"
    score-kernel multiply -- "-1init[-3]hard/[0]soft" 0.5
    score-kernel zero --hard 2 --soft 3

Scores starting with "-" must follow "--".
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .bendable_score import BendableScore
from .config import KernelSettings, load_settings
from .diagnostics import compute_diagnostics
from .parsing import parse_score
from .score import ScoreError
from .snapshot import decode_score, encode_score, score_hash

logger = logging.getLogger(__name__)


def setup_logging(settings: KernelSettings, verbose: bool = False):
    """Configure logging for CLI."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def cmd_show(args):
    """Print diagnostics for a score."""
    score = parse_score(args.score)
    print(json.dumps(compute_diagnostics(score), indent=2))
    return 0


def cmd_compare(args):
    """Compare two scores."""
    left = parse_score(args.left)
    right = parse_score(args.right)
    result = left.compare_to(right)
    print({-1: "<", 0: "=", 1: ">"}[result])
    return 0


def cmd_add(args):
    print(parse_score(args.left).add(parse_score(args.right)))
    return 0


def cmd_subtract(args):
    print(parse_score(args.left).subtract(parse_score(args.right)))
    return 0


def cmd_multiply(args):
    print(parse_score(args.score).multiply(args.value))
    return 0


def cmd_divide(args):
    print(parse_score(args.score).divide(args.value))
    return 0


def cmd_power(args):
    print(parse_score(args.score).power(args.value))
    return 0


def cmd_negate(args):
    print(parse_score(args.score).negate())
    return 0


def cmd_zero(args):
    """Print the zero score. Level counts default to the settings."""
    hard = args.settings.hard_levels if args.hard is None else args.hard
    soft = args.settings.soft_levels if args.soft is None else args.soft
    print(BendableScore.zero(hard, soft))
    return 0


def cmd_encode(args):
    print(encode_score(parse_score(args.score)))
    return 0


def cmd_decode(args):
    print(decode_score(args.snapshot))
    return 0


def cmd_hash(args):
    print(score_hash(parse_score(args.score)))
    return 0


def _non_negative(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="score-kernel",
        description="Bendable score toolkit",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_show = subparsers.add_parser("show", help="Show score diagnostics")
    p_show.add_argument("score")
    p_show.set_defaults(func=cmd_show)

    for name, func, help_text in (
        ("compare", cmd_compare, "Compare two scores"),
        ("add", cmd_add, "Add two scores"),
        ("subtract", cmd_subtract, "Subtract the second score from the first"),
    ):
        p = subparsers.add_parser(name, help=help_text)
        p.add_argument("left")
        p.add_argument("right")
        p.set_defaults(func=func)

    for name, func, help_text in (
        ("multiply", cmd_multiply, "Multiply every level by VALUE"),
        ("divide", cmd_divide, "Divide every level by VALUE"),
        ("power", cmd_power, "Raise every level to VALUE"),
    ):
        p = subparsers.add_parser(name, help=help_text)
        p.add_argument("score")
        p.add_argument("value", type=float)
        p.set_defaults(func=func)

    for name, func, help_text in (
        ("negate", cmd_negate, "Negate every level"),
        ("encode", cmd_encode, "Print the JSON snapshot"),
        ("hash", cmd_hash, "Print the snapshot SHA-256"),
    ):
        p = subparsers.add_parser(name, help=help_text)
        p.add_argument("score")
        p.set_defaults(func=func)

    p_zero = subparsers.add_parser("zero", help="Print the zero score")
    p_zero.add_argument("--hard", type=_non_negative, default=None)
    p_zero.add_argument("--soft", type=_non_negative, default=None)
    p_zero.set_defaults(func=cmd_zero)

    p_decode = subparsers.add_parser("decode", help="Decode a JSON snapshot")
    p_decode.add_argument("snapshot")
    p_decode.set_defaults(func=cmd_decode)

    return parser


def main(
    argv: Optional[List[str]] = None,
    settings: Optional[KernelSettings] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if settings is None:
        try:
            settings = load_settings()
        except ValueError as exc:
            parser.error(str(exc))
    setup_logging(settings, verbose=args.verbose)
    args.settings = settings

    logger.debug("Running command %s", args.command)
    try:
        return args.func(args)
    except ScoreError as exc:
        logger.info("Command %s failed: %s", args.command, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
