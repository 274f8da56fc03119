"""Indexing and query engine for the Poetry Assistant."""

from .alliteration import AlliterationIndex, find_alliteration
from .errors import CapacityExhaustedError, PoetryAssistantError
from .hashing import (
    DEFAULT_TABLE_SIZE,
    Bucket,
    ProbingTable,
    compute_hash,
    suggest_table_size,
)
from .index_builder import (
    DEFAULT_SUFFIX_LENGTH,
    BuildStats,
    PoetryAssistantIndex,
    build_poetry_assistant,
)
from .keys import compute_phonetic_key, extract_suffix, is_alphabetic
from .query_engine import QueryResult, find_rhymes, phonetic_search, query
from .scorer import ScoredCandidate, rank_candidates, score_rhyme

__all__ = [
    "AlliterationIndex",
    "Bucket",
    "BuildStats",
    "CapacityExhaustedError",
    "DEFAULT_SUFFIX_LENGTH",
    "DEFAULT_TABLE_SIZE",
    "PoetryAssistantError",
    "PoetryAssistantIndex",
    "ProbingTable",
    "QueryResult",
    "ScoredCandidate",
    "build_poetry_assistant",
    "compute_hash",
    "compute_phonetic_key",
    "extract_suffix",
    "find_alliteration",
    "find_rhymes",
    "is_alphabetic",
    "phonetic_search",
    "query",
    "rank_candidates",
    "score_rhyme",
    "suggest_table_size",
]
