"""Exceptions raised by the indexing core."""

from __future__ import annotations


class PoetryAssistantError(RuntimeError):
    """Base class for failures raised by :mod:`poetry_assistant`."""


class CapacityExhaustedError(PoetryAssistantError):
    """A probing table had no free slot for a new key during the build."""

    def __init__(self, table: str, key: str, capacity: int) -> None:
        super().__init__(
            f"{table} table is full: no slot left for key {key!r} "
            f"(capacity {capacity}); rebuild with a larger table size"
        )
        self.table = table
        self.key = key
        self.capacity = capacity


__all__ = ["CapacityExhaustedError", "PoetryAssistantError"]
