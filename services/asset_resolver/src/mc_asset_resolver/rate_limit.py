"""In-app token bucket limiter for the resolve endpoint (dev/staging)."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Dict

from fastapi import HTTPException, Request, status

from .config import get_settings


@dataclass
class _Bucket:
    capacity: float
    refill_rate: float
    tokens: float
    last_refill: float

    def consume(self, amount: float = 1.0) -> bool:
        now = time.monotonic()
        elapsed = max(0.0, now - self.last_refill)
        self.tokens = min(self.capacity, self.tokens + elapsed * self.refill_rate)
        self.last_refill = now
        if self.tokens >= amount:
            self.tokens -= amount
            return True
        return False


_buckets: Dict[str, _Bucket] = {}
_MAX_KEYS = 10_000


def _key_from_request(request: Request, *, trust_forwarded: bool = False) -> str:
    # X-Forwarded-For is client-controlled unless a trusted proxy sets it
    forwarded = request.headers.get("x-forwarded-for") if trust_forwarded else None
    if forwarded:
        return f"fwd:{forwarded.split(',')[0].strip()}"
    client = request.client.host if request.client else "unknown"
    return f"ip:{client}"


def reset_buckets() -> None:
    _buckets.clear()


def rate_limit(request: Request) -> None:
    cfg = get_settings()
    if not cfg.rate_limit_enabled:
        return

    key = _key_from_request(request, trust_forwarded=cfg.rate_limit_trust_forwarded)
    bucket = _buckets.get(key)
    if bucket is None:
        if len(_buckets) >= _MAX_KEYS:
            _buckets.pop(next(iter(_buckets)), None)
        bucket = _Bucket(
            capacity=float(cfg.rate_limit_burst),
            refill_rate=float(cfg.rate_limit_rps),
            tokens=float(cfg.rate_limit_burst),
            last_refill=time.monotonic(),
        )
        _buckets[key] = bucket

    if not bucket.consume(1.0):
        raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail="Rate limit exceeded")
