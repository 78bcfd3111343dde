"""Component id generators injected into the architect engine."""

from __future__ import annotations

import random
from collections import defaultdict
from typing import Protocol

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


class IdGenerator(Protocol):
    def next_id(self, prefix: str) -> str:
        """Return a fresh id that starts with `prefix`."""


class CounterIdGenerator:
    """Deterministic `<prefix>_<n>` ids, counted per prefix."""

    def __init__(self, start: int = 1) -> None:
        self._start = int(start)
        self._counters: dict[str, int] = defaultdict(int)

    def next_id(self, prefix: str) -> str:
        value = self._start + self._counters[prefix]
        self._counters[prefix] += 1
        return f"{prefix}_{value}"


class RandomIdGenerator:
    """`<prefix>_<9 base-36 chars>` ids drawn from a supplied RNG."""

    def __init__(self, rng: random.Random | None = None, length: int = 9) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._length = max(1, int(length))

    def next_id(self, prefix: str) -> str:
        suffix = "".join(self._rng.choice(_BASE36) for _ in range(self._length))
        return f"{prefix}_{suffix}"
