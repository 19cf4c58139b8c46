"""Random number tutorial demo.

Seeds the random source once from the clock, then prints a batch of raw draws
followed by a batch of draws restricted to an inclusive range.

Usage:
    python main.py
    python main.py --seed 42 --low 20 --high 30 --json
"""
from __future__ import annotations

import argparse
import json
import logging
from typing import Dict, List, Optional

from seeded_random import (
    DrawSource,
    create_source,
    generate_random_numbers,
    generate_raw_numbers,
)

# -------------------------
# Settings
# -------------------------
REPETITIONS = 10
DEMO_LOW = 200
DEMO_HIGH = 300


# -------------------------
# Demo
# -------------------------
def build_demo(source: DrawSource, repetitions: int = REPETITIONS, low: int = DEMO_LOW, high: int = DEMO_HIGH) -> Dict:
    raw = generate_raw_numbers(source, repetitions)
    ranged = generate_random_numbers(source, repetitions, low, high)
    return {
        "seed": source.seed,
        "max": source.max_value,
        "raw": raw,
        "low": low,
        "high": high,
        "ranged": ranged,
    }


def format_demo(demo: Dict) -> List[str]:
    lines = ["", f"Displaying {len(demo['raw'])} random numbers between 0 and {demo['max']}"]
    lines.extend(str(n) for n in demo["raw"])
    lines.append("")
    lines.append(
        f"Displaying {len(demo['ranged'])} random numbers between {demo['low']} and {demo['high']}"
    )
    lines.extend(str(n) for n in demo["ranged"])
    return lines


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Random number tutorial demo")
    parser.add_argument("--seed", type=int, default=None, help="Seed (default: seconds since the Unix epoch)")
    parser.add_argument("--repetitions", type=int, default=REPETITIONS, help="Numbers per batch")
    parser.add_argument("--low", type=int, default=DEMO_LOW, help="Inclusive lower bound")
    parser.add_argument("--high", type=int, default=DEMO_HIGH, help="Inclusive upper bound")
    parser.add_argument("--json", action="store_true", help="Output a JSON object")
    args = parser.parse_args(argv)
    if args.low > args.high:
        parser.error("--low must not be greater than --high")
    if args.repetitions < 0:
        parser.error("--repetitions must be non-negative")
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    source = create_source(args.seed)
    demo = build_demo(source, args.repetitions, args.low, args.high)
    if args.json:
        print(json.dumps(demo))
        return
    print("\n".join(format_demo(demo)))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
