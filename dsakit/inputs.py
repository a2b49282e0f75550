"""Random input generation and tab-separated value files for the sorting drills."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Any

DEFAULT_COUNT = 10000
DEFAULT_HIGH = 30000
DEFAULT_BOUND = 30


def _generator(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError("count must not be negative")


def random_ints(
    count: int = DEFAULT_COUNT,
    low: int = 0,
    high: int = DEFAULT_HIGH,
    rng: random.Random | None = None,
) -> list[int]:
    """Return ``count`` integers drawn uniformly from ``low`` to ``high - 1``."""
    _check_count(count)
    if high <= low:
        raise ValueError("high must be greater than low")
    generator = _generator(rng)
    return [generator.randrange(low, high) for _ in range(count)]


def random_fractions(
    count: int = DEFAULT_COUNT, rng: random.Random | None = None
) -> list[float]:
    """Return ``count`` floats drawn uniformly from ``[0, 1)``."""
    _check_count(count)
    generator = _generator(rng)
    return [generator.random() for _ in range(count)]


def random_signed_ints(
    count: int = DEFAULT_COUNT,
    bound: int = DEFAULT_BOUND,
    rng: random.Random | None = None,
) -> list[int]:
    """Return ``count`` integers of magnitude below ``bound``, each negated half the time."""
    _check_count(count)
    if bound < 1:
        raise ValueError("bound must be positive")
    generator = _generator(rng)
    values = []
    for _ in range(count):
        magnitude = generator.randrange(bound)
        values.append(-magnitude if generator.randrange(2) == 0 else magnitude)
    return values


def write_values(path: str | Path, values: Iterable[Any]) -> None:
    """Write each value followed by a tab."""
    Path(path).write_text("".join(f"{value}\t" for value in values))


def read_values(
    path: str | Path, kind: Callable[[str], Any] = int
) -> list[Any]:
    """Read whitespace-separated values, converting each with ``kind``."""
    return [kind(token) for token in Path(path).read_text().split()]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsakit-inputs", description="Write random input files for sorting."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    ints = commands.add_parser("ints", help="uniform integers in [low, high)")
    ints.add_argument("--low", type=int, default=0)
    ints.add_argument("--high", type=int, default=DEFAULT_HIGH)

    commands.add_parser("fractions", help="uniform floats in [0, 1)")

    signed = commands.add_parser("signed", help="integers of either sign")
    signed.add_argument("--bound", type=int, default=DEFAULT_BOUND)

    for sub in commands.choices.values():
        sub.add_argument("output", type=Path)
        sub.add_argument("--count", type=int, default=DEFAULT_COUNT)
        sub.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Generate one input file as chosen on the command line."""
    parser = _parser()
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    try:
        if args.command == "ints":
            values: list[Any] = random_ints(args.count, args.low, args.high, rng)
        elif args.command == "fractions":
            values = random_fractions(args.count, rng)
        else:
            values = random_signed_ints(args.count, args.bound, rng)
    except ValueError as error:
        parser.error(str(error))
    write_values(args.output, values)
    return 0