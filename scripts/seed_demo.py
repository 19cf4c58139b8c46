"""Store default range settings in Redis for the random number API.

This script populates:
- random_settings: {"low", "high", "count"} used by /random/settings-range

Usage:
    python scripts/seed_demo.py --redis redis://localhost:6379/0 --low 20 --high 30 --count 5
"""
from __future__ import annotations

import argparse
import json
from typing import List, Optional

import redis

SETTINGS_KEY = "random_settings"


def build_settings(low: int, high: int, count: int) -> dict:
    if low > high:
        raise ValueError("low cannot be greater than high")
    if count < 1:
        raise ValueError("count must be positive")
    return {"low": low, "high": high, "count": count}


def main(argv: Optional[List[str]] = None, client: Optional[redis.Redis] = None) -> None:
    parser = argparse.ArgumentParser(description="Seed Redis with random range settings")
    parser.add_argument("--redis", default="redis://localhost:6379/0", help="Redis URL")
    parser.add_argument("--low", type=int, default=20, help="Inclusive lower bound")
    parser.add_argument("--high", type=int, default=30, help="Inclusive upper bound")
    parser.add_argument("--count", type=int, default=10, help="Numbers per request")
    args = parser.parse_args(argv)

    try:
        settings = build_settings(args.low, args.high, args.count)
    except ValueError as exc:
        parser.error(str(exc))

    if client is None:
        client = redis.Redis.from_url(args.redis, decode_responses=True)
    client.set(SETTINGS_KEY, json.dumps(settings))

    print("Seeded", SETTINGS_KEY, f"with range {args.low}..{args.high}")


if __name__ == "__main__":
    main()
