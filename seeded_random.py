"""Seeded random number generator utility.

This module exposes an explicit random source handle, the clock based seeding
step that creates one, and helpers that map its unbounded draws into an
inclusive ``[low, high]`` range. It also offers a simple CLI for printing
generated numbers either line-by-line or as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import random
from datetime import datetime
from typing import Iterable, Iterator, List, Optional, Protocol

import pytz

logger = logging.getLogger(__name__)

# Largest value a draw can return.
RAND_MAX = 2147483647

EPOCH = datetime(1970, 1, 1, tzinfo=pytz.utc)


class InvalidRangeError(ValueError):
    """Raised when ``high`` is smaller than ``low``."""


class SourceExhaustedError(ValueError):
    """Raised when a fixed-sequence source has no values left."""


class DrawSource(Protocol):
    """Anything that hands out integers in ``[0, max_value]``."""

    max_value: int

    def draw(self) -> int: ...


class RandomSource:
    """PRNG handle producing integers in ``[0, max_value]``.

    The seed is applied once, when the handle is built. Pass the handle to
    whatever needs random numbers instead of touching module level state.
    """

    def __init__(self, seed: int, max_value: int = RAND_MAX):
        self._seed = seed
        self.max_value = max_value
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def draw(self) -> int:
        return self._rng.randint(0, self.max_value)


class SequenceSource:
    """Source replaying a fixed list of draws, used for deterministic tests."""

    def __init__(self, values: Iterable[int], max_value: int = RAND_MAX):
        values = list(values)
        for value in values:
            if value < 0 or value > max_value:
                raise ValueError(f"draw {value} outside [0, {max_value}]")
        self.max_value = max_value
        self._values: Iterator[int] = iter(values)
        self.draws = 0

    @property
    def seed(self) -> None:
        return None

    def draw(self) -> int:
        try:
            value = next(self._values)
        except StopIteration:
            raise SourceExhaustedError("no draws left in sequence") from None
        self.draws += 1
        return value


def clock_seed(now: Optional[datetime] = None) -> int:
    """Return the wall-clock seed: whole seconds since the Unix epoch.

    The value is truncated to 32 bits. Naive datetimes are taken as UTC.
    """
    if now is None:
        now = datetime.now(pytz.utc)
    elif now.tzinfo is None:
        now = pytz.utc.localize(now)
    seconds = int((now - EPOCH).total_seconds())
    return seconds & 0xFFFFFFFF


def create_source(seed: Optional[int] = None) -> RandomSource:
    """Build the process random source; call once at startup."""
    if seed is None:
        seed = clock_seed()
    logger.info("Seeding random source with %d", seed)
    return RandomSource(seed)


def rand_range(source: DrawSource, low: int, high: int, unbiased: bool = False) -> int:
    """Draw one pseudo-random integer in ``[low, high]``.

    Args:
        source: Random source the draw is taken from.
        low: Inclusive lower bound.
        high: Inclusive upper bound. Must not be smaller than ``low``.
        unbiased: Reject draws from the incomplete top block instead of
            accepting the slight modulo bias toward low values.

    Returns:
        ``draw() % (high - low + 1) + low``.

    Raises:
        InvalidRangeError: If ``high < low``, or if ``unbiased`` is set and the
            range is wider than the source can produce.
    """
    if high < low:
        raise InvalidRangeError(f"high ({high}) must not be smaller than low ({low})")
    span = high - low + 1

    if not unbiased:
        return source.draw() % span + low

    outcomes = source.max_value + 1
    if span > outcomes:
        raise InvalidRangeError(
            f"range of {span} values is wider than the source's {outcomes}"
        )
    limit = outcomes - outcomes % span
    value = source.draw()
    while value >= limit:
        value = source.draw()
    return value % span + low


def generate_random_numbers(
    source: DrawSource,
    count: int,
    lower: int = 0,
    upper: int = 100,
    unbiased: bool = False,
) -> List[int]:
    """Generate a list of pseudo-random integers from ``source``.

    Args:
        source: Random source the draws are taken from.
        count: How many numbers to generate. Must be non-negative.
        lower: Inclusive lower bound of the range.
        upper: Inclusive upper bound of the range.
        unbiased: Use rejection sampling instead of plain modulo.

    Returns:
        A list of integers in the inclusive range ``[lower, upper]``.

    Raises:
        ValueError: If ``count`` is negative.
        InvalidRangeError: If ``lower`` is greater than ``upper``.
    """

    if count < 0:
        raise ValueError("count must be non-negative")
    if lower > upper:
        raise InvalidRangeError("lower cannot be greater than upper")

    return [rand_range(source, lower, upper, unbiased) for _ in range(count)]


def generate_raw_numbers(source: DrawSource, count: int) -> List[int]:
    if count < 0:
        raise ValueError("count must be non-negative")
    return [source.draw() for _ in range(count)]


def _format_numbers(numbers: Iterable[int], as_json: bool) -> str:
    if as_json:
        return json.dumps({"numbers": list(numbers)})
    return "\n".join(str(n) for n in numbers)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, required=True, help="Seed for the RNG")
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="How many numbers to generate (default: 10)",
    )
    parser.add_argument(
        "--lower",
        type=int,
        default=0,
        help="Inclusive lower bound of the generated numbers (default: 0)",
    )
    parser.add_argument(
        "--upper",
        type=int,
        default=100,
        help="Inclusive upper bound of the generated numbers (default: 100)",
    )
    parser.add_argument(
        "--unbiased",
        action="store_true",
        help="Use rejection sampling to remove modulo bias",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the generated numbers as a JSON object",
    )
    args = parser.parse_args(argv)
    if args.lower > args.upper:
        parser.error("--lower must not be greater than --upper")
    if args.count < 0:
        parser.error("--count must be non-negative")
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    source = create_source(args.seed)
    numbers = generate_random_numbers(
        source, args.count, args.lower, args.upper, args.unbiased
    )
    print(_format_numbers(numbers, args.json))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
