"""Ranked rhyme retrieval with phonetic fallback, syllables and alliteration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from poetry_assistant.utils.observability import get_logger
from poetry_assistant.utils.syllables import estimate_syllable_count

from .alliteration import find_alliteration
from .hashing import ProbingTable
from .index_builder import PoetryAssistantIndex
from .keys import compute_phonetic_key, extract_suffix
from .scorer import rank_candidates

MAX_RHYMES = 10
MAX_ALLITERATIONS = 5
MAX_PHONETIC_RHYMES = 7
FALLBACK_THRESHOLD = 3

_LOGGER = get_logger(__name__).bind(component="query_engine")


@dataclass
class QueryResult:
    """Answer to one lookup.

    ``word`` is the input with surrounding whitespace removed, which is also
    the form used for the suffix, phonetic key and syllable estimate.
    """

    word: str
    rhymes: List[str] = field(default_factory=list)
    syllables: int = 1
    alliterations: List[str] = field(default_factory=list)
    used_phonetic_fallback: bool = False

    def as_dict(self) -> dict:
        return {
            "word": self.word,
            "rhymes": list(self.rhymes),
            "syllables": self.syllables,
            "alliterations": list(self.alliterations),
            "used_phonetic_fallback": self.used_phonetic_fallback,
        }


def find_rhymes(
    rhyme_table: ProbingTable,
    input_word: str,
    suffix_length: int,
    max_results: int = MAX_RHYMES,
) -> List[str]:
    """Return words sharing ``input_word``'s spelled suffix, best first."""

    candidates = rhyme_table.search(extract_suffix(input_word, suffix_length))
    return [item.word for item in rank_candidates(input_word, candidates, max_results)]


def phonetic_search(
    phonetic_table: ProbingTable,
    input_word: str,
    suffix_length: int,
    max_results: int = MAX_PHONETIC_RHYMES,
) -> List[str]:
    """Return words whose phonetic key ends like ``input_word``'s, best first.

    Candidates are scored on their spelling, exactly like :func:`find_rhymes`.
    """

    phonetic_suffix = extract_suffix(compute_phonetic_key(input_word), suffix_length)
    candidates = phonetic_table.search(phonetic_suffix)
    return [item.word for item in rank_candidates(input_word, candidates, max_results)]


def query(
    index: PoetryAssistantIndex,
    input_word: str,
    suffix_length: Optional[int] = None,
    *,
    max_rhymes: int = MAX_RHYMES,
    max_alliterations: int = MAX_ALLITERATIONS,
    max_phonetic: int = MAX_PHONETIC_RHYMES,
    fallback_threshold: int = FALLBACK_THRESHOLD,
) -> QueryResult:
    """Answer rhymes, syllable count and alliterations for ``input_word``.

    When fewer than ``fallback_threshold`` spelled rhymes are found, phonetic
    matches are appended after them (skipping words already listed), so the
    combined list can be longer than ``max_rhymes``.
    """

    word = (input_word or "").strip()
    if not word:
        raise ValueError("input_word must be a non-empty word")

    if suffix_length is None:
        suffix_length = index.suffix_length
    elif suffix_length != index.suffix_length:
        _LOGGER.warning(
            "Query suffix length differs from build suffix length",
            context={"query": suffix_length, "build": index.suffix_length},
        )

    rhymes = find_rhymes(index.rhyme_table, word, suffix_length, max_rhymes)
    syllables = estimate_syllable_count(word)
    alliterations = find_alliteration(index.alliteration_table, word[0], max_alliterations)

    used_fallback = len(rhymes) < fallback_threshold
    if used_fallback:
        phonetic_rhymes = phonetic_search(index.phonetic_table, word, suffix_length, max_phonetic)
        for candidate in phonetic_rhymes:
            if candidate not in rhymes:
                rhymes.append(candidate)
        _LOGGER.debug(
            "Phonetic fallback applied",
            context={"word": word, "phonetic_candidates": len(phonetic_rhymes), "total": len(rhymes)},
        )

    return QueryResult(
        word=word,
        rhymes=rhymes,
        syllables=syllables,
        alliterations=alliterations,
        used_phonetic_fallback=used_fallback,
    )


__all__ = [
    "FALLBACK_THRESHOLD",
    "MAX_ALLITERATIONS",
    "MAX_PHONETIC_RHYMES",
    "MAX_RHYMES",
    "QueryResult",
    "find_rhymes",
    "phonetic_search",
    "query",
]
