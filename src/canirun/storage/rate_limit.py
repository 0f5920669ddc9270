"""Keyed request quota (N lookups per window) and its signed client token."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol, Tuple

from ..config.settings import RATE_LIMIT_MAX, RATE_LIMIT_SECRET, RATE_LIMIT_WINDOW_S
from ..utils.logging import get_logger

logger = get_logger(__name__)

Clock = Callable[[], float]


@dataclass(frozen=True)
class Usage:
    count: int
    remaining: int
    reset_at: float

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0


class CounterStore(Protocol):
    def get(self, key: str) -> Optional[Tuple[int, float]]:
        ...

    def incr(self, key: str, ttl_s: float) -> Tuple[int, float]:
        ...


class MemoryCounterStore:
    """dict-backed counters; an entry disappears once its reset time passes."""

    def __init__(self, clock: Clock = time.time):
        self._clock = clock
        self._entries: Dict[str, Tuple[int, float]] = {}
        self._lock = threading.Lock()

    def _live(self, key: str, now: float) -> Optional[Tuple[int, float]]:
        entry = self._entries.get(key)
        if entry is not None and now >= entry[1]:
            del self._entries[key]
            return None
        return entry

    def get(self, key: str) -> Optional[Tuple[int, float]]:
        with self._lock:
            return self._live(key, self._clock())

    def incr(self, key: str, ttl_s: float) -> Tuple[int, float]:
        with self._lock:
            now = self._clock()
            entry = self._live(key, now)
            count, reset_at = entry if entry is not None else (0, now + ttl_s)
            self._entries[key] = (count + 1, reset_at)
            return self._entries[key]

    def purge(self) -> int:
        """Drop every expired entry; returns how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [k for k, (_, reset_at) in self._entries.items() if now >= reset_at]
            for k in expired:
                del self._entries[k]
            return len(expired)

    def __len__(self) -> int:
        return len(self._entries)


class RateLimiter:
    def __init__(
        self,
        store: Optional[CounterStore] = None,
        limit: int = RATE_LIMIT_MAX,
        window_s: float = RATE_LIMIT_WINDOW_S,
        clock: Clock = time.time,
    ):
        self.store = store if store is not None else MemoryCounterStore(clock)
        self.limit = limit
        self.window_s = window_s
        self._clock = clock

    def _usage(self, entry: Optional[Tuple[int, float]]) -> Usage:
        if entry is None:
            return Usage(count=0, remaining=self.limit, reset_at=self._clock() + self.window_s)
        count, reset_at = entry
        return Usage(count=count, remaining=max(0, self.limit - count), reset_at=reset_at)

    def check(self, key: str) -> Usage:
        return self._usage(self.store.get(key))

    def increment(self, key: str) -> Usage:
        usage = self._usage(self.store.incr(key, self.window_s))
        if usage.exhausted:
            logger.info("Rate limit reached for %s (%d/%d)", key, usage.count, self.limit)
        return usage


# =========================
# Signed usage token
# =========================
def _sign(data: str, secret: str) -> str:
    return hmac.new(secret.encode("utf-8"), data.encode("utf-8"), hashlib.sha256).hexdigest()


def encode_usage_token(usage: Usage, secret: str = RATE_LIMIT_SECRET) -> str:
    """``base64(json).hexsig`` carrying count and reset time."""
    payload = json.dumps({"count": usage.count, "resetAt": usage.reset_at}, separators=(",", ":"))
    b64 = base64.b64encode(payload.encode("utf-8")).decode("ascii")
    return f"{b64}.{_sign(payload, secret)}"


def decode_usage_token(
    token: Optional[str],
    limit: int = RATE_LIMIT_MAX,
    secret: str = RATE_LIMIT_SECRET,
    clock: Clock = time.time,
) -> Optional[Usage]:
    """Usage from a token; None if it is malformed, tampered with or expired."""
    if not token or "." not in token:
        return None
    b64, _, sig = token.partition(".")
    try:
        payload = base64.b64decode(b64, validate=True).decode("utf-8")
        data = json.loads(payload)
    except (binascii.Error, ValueError):
        return None
    if not hmac.compare_digest(_sign(payload, secret), sig):
        return None
    if not isinstance(data, dict):
        return None
    count, reset_at = data.get("count"), data.get("resetAt")
    if isinstance(count, bool) or not isinstance(count, int) or not isinstance(reset_at, (int, float)):
        return None
    if clock() >= reset_at:
        return None
    return Usage(count=count, remaining=max(0, limit - count), reset_at=float(reset_at))
