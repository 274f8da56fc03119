"""First-letter index used for alliteration lookups."""

from __future__ import annotations

import string
from typing import Iterator, List, Optional, Tuple

LETTERS = string.ascii_lowercase


def letter_index(letter: str) -> Optional[int]:
    """Map ``letter`` (any case) to ``0..25`` or ``None`` for anything else."""

    if not letter:
        return None
    position = ord(letter[0].lower()) - ord("a")
    if 0 <= position < len(LETTERS):
        return position
    return None


class AlliterationIndex:
    """Twenty-six append-only word lists, one per starting letter."""

    def __init__(self) -> None:
        self._buckets: Tuple[List[str], ...] = tuple([] for _ in LETTERS)

    def add(self, word: str) -> None:
        position = letter_index(word[:1])
        if position is None:
            raise ValueError(f"cannot index word without a leading letter: {word!r}")
        self._buckets[position].append(word)

    def find(self, letter: str, max_results: int) -> List[str]:
        """Return up to ``max_results`` words starting with ``letter``."""

        position = letter_index(letter)
        if position is None or max_results <= 0:
            return []
        return self._buckets[position][:max_results]

    def bucket_sizes(self) -> dict[str, int]:
        return {letter: len(bucket) for letter, bucket in zip(LETTERS, self._buckets)}

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[Tuple[str, Tuple[str, ...]]]:
        for letter, bucket in zip(LETTERS, self._buckets):
            yield letter, tuple(bucket)


def find_alliteration(index: AlliterationIndex, letter: str, max_results: int) -> List[str]:
    return index.find(letter, max_results)


__all__ = ["AlliterationIndex", "LETTERS", "find_alliteration", "letter_index"]
