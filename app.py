"""Random number API layer.

This module exposes a FastAPI app serving draws from a single random source
that is seeded once per process. Range requests are validated before any draw
is taken, and default range settings can be stored in redis.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Optional

import redis
from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel, Field, validator

from seeded_random import (
    DrawSource,
    InvalidRangeError,
    RandomSource,
    create_source,
    generate_random_numbers,
    generate_raw_numbers,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SETTINGS_KEY = "random_settings"
MAX_COUNT = 1000


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return int(raw)


@dataclass
class RedisConfig:
    url: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")

    def client(self) -> redis.Redis:
        return redis.Redis.from_url(self.url, decode_responses=True)


@dataclass
class RandomConfig:
    seed: Optional[int] = field(default_factory=lambda: _env_int("RANDOM_SEED", None))
    low: int = field(default_factory=lambda: _env_int("RANDOM_LOW", 200))
    high: int = field(default_factory=lambda: _env_int("RANDOM_HIGH", 300))
    count: int = field(default_factory=lambda: _env_int("RANDOM_COUNT", 10))


app = FastAPI(title="Random Number API", version="1.0.0")

config = RandomConfig()
_source = create_source(config.seed)


def get_redis_client() -> redis.Redis:
    return RedisConfig().client()


def get_source() -> RandomSource:
    return _source


class RangeRequest(BaseModel):
    low: int = Field(..., description="Inclusive lower bound")
    high: int = Field(..., description="Inclusive upper bound")
    count: int = Field(default=1, ge=1, le=MAX_COUNT, description="How many numbers to draw")
    unbiased: bool = Field(default=False, description="Use rejection sampling instead of plain modulo")

    @validator("high")
    def validate_order(cls, high: int, values: dict) -> int:
        low: int | None = values.get("low")
        if low is not None and high < low:
            raise ValueError("high must not be smaller than low")
        return high


class RangeResponse(BaseModel):
    low: int
    high: int
    numbers: list[int]


class RawResponse(BaseModel):
    max: int
    numbers: list[int]


@app.get("/health")
def health(source: RandomSource = Depends(get_source)):
    return {"status": "ok", "seed": source.seed}


@app.get("/random/raw", response_model=RawResponse)
def random_raw(
    count: int = Query(default=1, ge=1, le=MAX_COUNT),
    source: RandomSource = Depends(get_source),
):
    return RawResponse(max=source.max_value, numbers=generate_raw_numbers(source, count))


@app.post("/random/range", response_model=RangeResponse)
def random_range(request: RangeRequest, source: RandomSource = Depends(get_source)):
    numbers = _draw(source, request.low, request.high, request.count, request.unbiased)
    return RangeResponse(low=request.low, high=request.high, numbers=numbers)


@app.get("/random/settings-range", response_model=RangeResponse)
def random_settings_range(
    redis_client: redis.Redis = Depends(get_redis_client),
    source: RandomSource = Depends(get_source),
):
    low, high, count = _read_settings(redis_client)
    if high < low:
        raise HTTPException(status_code=500, detail="Stored settings have high below low")
    if count < 1 or count > MAX_COUNT:
        raise HTTPException(status_code=500, detail="Stored count out of bounds")
    numbers = _draw(source, low, high, count, False)
    return RangeResponse(low=low, high=high, numbers=numbers)


def _draw(source: DrawSource, low: int, high: int, count: int, unbiased: bool) -> list[int]:
    try:
        return generate_random_numbers(source, count, low, high, unbiased)
    except InvalidRangeError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _read_settings(redis_client: redis.Redis) -> tuple[int, int, int]:
    defaults = (config.low, config.high, config.count)
    try:
        raw = redis_client.get(SETTINGS_KEY)
    except redis.RedisError as exc:
        logger.warning("Could not read %s, using defaults: %s", SETTINGS_KEY, exc)
        return defaults
    if not raw:
        return defaults
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        logger.warning("Ignoring unreadable %s", SETTINGS_KEY)
        return defaults
    if not isinstance(payload, dict):
        logger.warning("Ignoring %s that is not an object", SETTINGS_KEY)
        return defaults
    values = (
        payload.get("low", config.low),
        payload.get("high", config.high),
        payload.get("count", config.count),
    )
    for value in values:
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int):
            raise HTTPException(status_code=500, detail="Malformed random settings")
    return values


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
