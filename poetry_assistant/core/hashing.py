"""Open-addressing hash table used for the suffix and phonetic indexes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

_HASH_BASE = 31

# Prime sized for roughly 3,300 distinct three-letter suffixes at load ~0.5.
DEFAULT_TABLE_SIZE = 6577


def compute_hash(key: str, capacity: int) -> int:
    """Return the polynomial rolling hash of ``key`` in ``[0, capacity)``."""

    value = 0
    for char in key:
        value = (value * _HASH_BASE + ord(char)) % capacity
    return value


def _is_prime(value: int) -> bool:
    if value < 2:
        return False
    if value % 2 == 0:
        return value == 2
    divisor = 3
    while divisor * divisor <= value:
        if value % divisor == 0:
            return False
        divisor += 2
    return True


def suggest_table_size(expected_keys: int, load_factor: float = 0.5) -> int:
    """Return the smallest prime that keeps ``expected_keys`` under ``load_factor``.

    Capacity must be derived from the number of *distinct keys* (suffixes),
    not from the vocabulary size.
    """

    if load_factor <= 0 or load_factor > 1:
        raise ValueError("load_factor must be in (0, 1]")
    candidate = max(2, math.ceil(max(expected_keys, 1) / load_factor))
    while not _is_prime(candidate):
        candidate += 1
    return candidate


@dataclass
class Bucket:
    """A slot bound to ``key`` holding every word inserted under it."""

    key: str
    words: List[str] = field(default_factory=list)


class ProbingTable:
    """Fixed-capacity linear-probing table mapping keys to word lists.

    Keys are never removed and the table never resizes, so a key stays in
    the slot it was first bound to and an empty slot always terminates a
    lookup.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self.capacity = int(capacity)
        self._slots: List[Optional[Bucket]] = [None] * self.capacity
        self.count = 0
        self.probe_steps = 0

    @property
    def load_factor(self) -> float:
        return self.count / self.capacity

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._locate(key) is not None

    def _locate(self, key: str) -> Optional[Bucket]:
        index = self.slot_of(key)
        return None if index is None else self._slots[index]

    def insert(self, key: str, word: str) -> bool:
        """Add ``word`` under ``key``; return ``False`` when the table is full."""

        index = compute_hash(key, self.capacity)
        for _ in range(self.capacity):
            bucket = self._slots[index]
            if bucket is None:
                self._slots[index] = Bucket(key, [word])
                self.count += 1
                return True
            if bucket.key == key:
                bucket.words.append(word)
                return True
            self.probe_steps += 1
            index = (index + 1) % self.capacity
        return False

    def search(self, key: str) -> List[str]:
        """Return the words stored under ``key`` in insertion order."""

        bucket = self._locate(key)
        if bucket is None:
            return []
        return list(bucket.words)

    def slot_of(self, key: str) -> Optional[int]:
        """Return the slot index bound to ``key``, if any."""

        index = compute_hash(key, self.capacity)
        for _ in range(self.capacity):
            bucket = self._slots[index]
            if bucket is None:
                return None
            if bucket.key == key:
                return index
            index = (index + 1) % self.capacity
        return None

    def buckets(self) -> Iterator[Bucket]:
        """Yield bound buckets in slot order."""

        for bucket in self._slots:
            if bucket is not None:
                yield bucket

    def snapshot(self) -> List[Optional[tuple[str, tuple[str, ...]]]]:
        """Return an immutable view of every slot, empty slots as ``None``."""

        return [
            None if bucket is None else (bucket.key, tuple(bucket.words))
            for bucket in self._slots
        ]


__all__ = [
    "Bucket",
    "DEFAULT_TABLE_SIZE",
    "ProbingTable",
    "compute_hash",
    "suggest_table_size",
]
