"""Single-pass construction of the rhyme, phonetic and alliteration indexes."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable, Iterator, Union

from poetry_assistant.utils.observability import get_logger

from .alliteration import AlliterationIndex
from .errors import CapacityExhaustedError
from .hashing import DEFAULT_TABLE_SIZE, ProbingTable
from .keys import compute_phonetic_key, extract_suffix, is_alphabetic

DEFAULT_SUFFIX_LENGTH = 3

_LOGGER = get_logger(__name__).bind(component="index_builder")


@dataclass(frozen=True)
class BuildStats:
    word_count: int
    rhyme_table_count: int
    rhyme_table_probe_steps: int
    rhyme_table_load_factor: float
    phonetic_table_count: int
    phonetic_table_probe_steps: int
    phonetic_table_load_factor: float

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PoetryAssistantIndex:
    """Read-only bundle handed to every query.

    ``suffix_length`` records the key length the tables were built with;
    querying with any other length silently misses.
    """

    rhyme_table: ProbingTable
    phonetic_table: ProbingTable
    alliteration_table: AlliterationIndex
    stats: BuildStats
    suffix_length: int


def _iter_lines(source: Union[str, Iterable[str]]) -> Iterator[str]:
    if isinstance(source, str):
        yield from source.split("\n")
    else:
        yield from source


def _insert(table: ProbingTable, name: str, key: str, word: str) -> None:
    if not table.insert(key, word):
        _LOGGER.error(
            "Index table exhausted",
            context={"table": name, "key": key, "capacity": table.capacity},
        )
        raise CapacityExhaustedError(name, key, table.capacity)


def build_poetry_assistant(
    source: Union[str, Iterable[str]],
    suffix_length: int = DEFAULT_SUFFIX_LENGTH,
    *,
    table_size: int = DEFAULT_TABLE_SIZE,
) -> PoetryAssistantIndex:
    """Index every valid word in ``source``.

    Args:
        source: Either the full text of a word list (one word per line) or
            an iterable of raw lines.
        suffix_length: Number of trailing characters used as lookup keys.
            The same value must be used when querying.
        table_size: Capacity of both probing tables. Size it from the
            expected number of distinct suffixes, not the vocabulary size.

    Returns:
        The built :class:`PoetryAssistantIndex`.

    Raises:
        CapacityExhaustedError: A table ran out of slots for a new key.
        ValueError: ``suffix_length`` or ``table_size`` is not positive.
    """

    if suffix_length <= 0:
        raise ValueError("suffix_length must be a positive integer")

    rhyme_table = ProbingTable(table_size)
    phonetic_table = ProbingTable(table_size)
    alliteration_table = AlliterationIndex()

    word_count = 0
    skipped = 0
    for line in _iter_lines(source):
        word = line.strip()
        if not is_alphabetic(word):
            if word:
                skipped += 1
            continue

        _insert(rhyme_table, "rhyme", extract_suffix(word, suffix_length), word)
        alliteration_table.add(word)
        phonetic_suffix = extract_suffix(compute_phonetic_key(word), suffix_length)
        _insert(phonetic_table, "phonetic", phonetic_suffix, word)
        word_count += 1

    stats = BuildStats(
        word_count=word_count,
        rhyme_table_count=rhyme_table.count,
        rhyme_table_probe_steps=rhyme_table.probe_steps,
        rhyme_table_load_factor=rhyme_table.load_factor,
        phonetic_table_count=phonetic_table.count,
        phonetic_table_probe_steps=phonetic_table.probe_steps,
        phonetic_table_load_factor=phonetic_table.load_factor,
    )

    if skipped:
        _LOGGER.debug("Skipped invalid word list entries", context={"skipped": skipped})
    _LOGGER.info(
        "Poetry assistant index built",
        context={"suffix_length": suffix_length, "table_size": table_size, **stats.as_dict()},
    )

    return PoetryAssistantIndex(
        rhyme_table=rhyme_table,
        phonetic_table=phonetic_table,
        alliteration_table=alliteration_table,
        stats=stats,
        suffix_length=suffix_length,
    )


__all__ = [
    "BuildStats",
    "DEFAULT_SUFFIX_LENGTH",
    "PoetryAssistantIndex",
    "build_poetry_assistant",
]
