"""
Strategies for user identifier generation in user_registry.

Provided strategies:
- TimestampStrategy: base36(current time in ms) + random base36 fragment
- UUID4Strategy: 32-char hex UUID4
- RandomStrategy: random base36 string of length L (default from config)

Common helpers:
- _base36_encode: Non-negative integer -> base36 string
- _safe_len: Resolve/normalize desired id length from argument/config (clamped to [8, 64])

Configuration (via user_registry.config.settings):
- ID_STRATEGY: "timestamp" (default), "uuid4", "random"
- ID_LENGTH: Default length for RandomStrategy (default 16; clamped 8..64)

Notes:
- Ids only need to be unique with overwhelming probability; the store
  regenerates on the rare collision, so no strategy keeps shared state.
- TimestampStrategy ids sort roughly by creation time, which makes them easy
  to eyeball in logs; ordering is not guaranteed and nothing relies on it.
"""

import random
import time
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Type

from ..config import settings

_BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_BASE36_BASE = len(_BASE36_ALPHABET)


def _base36_encode(num: int) -> str:
    """
    Convert a non-negative integer to a base36 string.
    0 -> "0", 35 -> "z", 36 -> "10"
    """
    if num < 0:
        raise ValueError("num must be non-negative")
    if num == 0:
        return "0"
    out = []
    while num > 0:
        num, rem = divmod(num, _BASE36_BASE)
        out.append(_BASE36_ALPHABET[rem])
    return "".join(reversed(out))


def _safe_len(length: Optional[int]) -> int:
    """Resolve desired id length from arg or config, clamped to [8, 64]."""
    L = int(length) if length is not None else int(settings.ID_LENGTH)
    return max(8, min(64, L))


def _random_base36(length: int) -> str:
    rng = random.SystemRandom()
    return "".join(rng.choice(_BASE36_ALPHABET) for _ in range(length))


class BaseIdStrategy(ABC):
    """Abstract base for identifier generation strategies."""

    @abstractmethod
    def generate(self) -> str:  # pragma: no cover
        """Return a new, non-empty identifier."""
        raise NotImplementedError


@dataclass(frozen=True)
class TimestampStrategy(BaseIdStrategy):
    """Time-based id with a random suffix, e.g. "mfx2k9qa" + "4h7d0s1kz2b"."""

    suffix_length: int = 11
    clock: Callable[[], float] = field(default=time.time, compare=False)

    def generate(self) -> str:
        millis = int(self.clock() * 1000)
        return _base36_encode(millis) + _random_base36(self.suffix_length)


@dataclass(frozen=True)
class UUID4Strategy(BaseIdStrategy):
    """Random UUID4 rendered as 32 lowercase hex characters."""

    def generate(self) -> str:
        return uuid.uuid4().hex


@dataclass(frozen=True)
class RandomStrategy(BaseIdStrategy):
    """Random base36 ids of a fixed length."""

    length: Optional[int] = None

    def generate(self) -> str:
        return _random_base36(_safe_len(self.length))


# Strategy registry and factory
STRATEGY_REGISTRY: Dict[str, Type[BaseIdStrategy]] = {
    "timestamp": TimestampStrategy,
    "time": TimestampStrategy,
    "uuid4": UUID4Strategy,
    "uuid": UUID4Strategy,
    "random": RandomStrategy,
    "rand": RandomStrategy,
}


def get_strategy_from_config(name: Optional[str] = None) -> BaseIdStrategy:
    """
    Resolve the active strategy from parameter or settings.ID_STRATEGY.

    Raises:
        ValueError: If the name is not a registered strategy.
    """
    key = (name or settings.ID_STRATEGY or "timestamp").strip().lower()
    cls = STRATEGY_REGISTRY.get(key)
    if cls is None:
        raise ValueError(f"Unknown id strategy: {key!r}")
    if cls is RandomStrategy:
        return RandomStrategy(length=settings.ID_LENGTH)
    return cls()
