"""Rhyme quality scoring and ranking."""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Optional

_SUFFIX_POINTS_PER_CHAR = 15
_SUFFIX_POINTS_CAP = 60
_DISTINCT_ONSET_BONUS = 20

# Bonus keyed by absolute length difference; anything larger earns nothing.
_LENGTH_BONUS = {0: 20, 1: 15, 2: 10, 3: 5, 4: 5}

MAX_SCORE = _SUFFIX_POINTS_CAP + _DISTINCT_ONSET_BONUS + _LENGTH_BONUS[0]


class ScoredCandidate(NamedTuple):
    word: str
    score: int


def matching_suffix_length(first: str, second: str) -> int:
    """Count how many trailing characters ``first`` and ``second`` share."""

    count = 0
    i = len(first) - 1
    j = len(second) - 1
    while i >= 0 and j >= 0 and first[i] == second[j]:
        count += 1
        i -= 1
        j -= 1
    return count


def score_rhyme(first: str, second: str) -> int:
    """Score how well ``second`` rhymes with ``first`` on a 0-100 scale.

    Up to 60 points come from shared trailing characters, 20 from starting
    with different letters and up to 20 from having similar lengths.
    Identical words score 0 so a word never rhymes with itself.
    """

    if first == second:
        return 0

    score = min(
        matching_suffix_length(first, second) * _SUFFIX_POINTS_PER_CHAR,
        _SUFFIX_POINTS_CAP,
    )
    if first[:1] != second[:1]:
        score += _DISTINCT_ONSET_BONUS
    score += _LENGTH_BONUS.get(abs(len(first) - len(second)), 0)
    return score


def rank_candidates(
    source: str,
    candidates: Iterable[str],
    limit: Optional[int] = None,
) -> List[ScoredCandidate]:
    """Score ``candidates`` against ``source`` and return the best first.

    Non-positive scores are dropped. The sort is stable, so equal scores keep
    the order in which the candidates were supplied.
    """

    scored: List[ScoredCandidate] = []
    for candidate in candidates:
        score = score_rhyme(source, candidate)
        if score > 0:
            scored.append(ScoredCandidate(candidate, score))

    scored.sort(key=lambda item: item.score, reverse=True)
    if limit is not None:
        scored = scored[: max(0, limit)]
    return scored


__all__ = [
    "MAX_SCORE",
    "ScoredCandidate",
    "matching_suffix_length",
    "rank_candidates",
    "score_rhyme",
]
