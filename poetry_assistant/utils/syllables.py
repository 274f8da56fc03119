"""Vowel-group syllable estimation."""

from __future__ import annotations


__all__ = ["estimate_syllable_count"]


_VOWELS = frozenset("aeiou")


def estimate_syllable_count(word: str) -> int:
    """Estimate the number of syllables in ``word`` using basic heuristics.

    Each run of vowels counts once. ``y`` is a vowel unless it starts the
    word or follows another vowel, and a final ``e`` after a consonant is
    treated as silent in words of three or more letters.
    """

    normalized = word.lower()
    syllable_count = 0
    previous_was_vowel = False

    for index, char in enumerate(normalized):
        if char == "y":
            is_vowel = index > 0 and not previous_was_vowel
        else:
            is_vowel = char in _VOWELS
        if is_vowel and not previous_was_vowel:
            syllable_count += 1
        previous_was_vowel = is_vowel

    if len(normalized) >= 3 and normalized.endswith("e"):
        before = normalized[-2]
        if before not in _VOWELS and before != "y":
            syllable_count -= 1

    return max(1, syllable_count)
