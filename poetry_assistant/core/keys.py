"""Lookup-key helpers: orthographic suffixes and heuristic phonetic keys."""

from __future__ import annotations

import re
from typing import Sequence, Tuple

VOWELS = frozenset("aeiou")

# Applied in order; each rule sees the output of the rules before it.
REWRITE_RULES: Tuple[Tuple[str, str], ...] = (
    ("ough", "O"),
    ("augh", "AF"),
    ("tion", "SHUN"),
    ("sion", "ZHUN"),
    ("ph", "F"),
    ("gh", ""),
    ("ck", "K"),
    ("wh", "W"),
    ("wr", "R"),
    ("kn", "N"),
    ("gn", "N"),
    ("mb", "M"),
)

_ALPHABETIC_PATTERN = re.compile(r"[A-Za-z]+")


def is_alphabetic(word: str) -> bool:
    """Return ``True`` when ``word`` is non-empty and made of ASCII letters only."""

    return bool(word) and _ALPHABETIC_PATTERN.fullmatch(word) is not None


def extract_suffix(word: str, length: int) -> str:
    """Return the lowercase trailing ``length`` characters of ``word``."""

    normalized = word.lower()
    if len(normalized) <= length:
        return normalized
    return normalized[len(normalized) - length :]


def _rewrite(text: str, pattern: str, replacement: str) -> str:
    """Replace every non-overlapping ``pattern`` in a single left-to-right scan."""

    width = len(pattern)
    pieces = []
    index = 0
    limit = len(text)
    while index < limit:
        if text.startswith(pattern, index):
            pieces.append(replacement)
            index += width
        else:
            pieces.append(text[index])
            index += 1
    return "".join(pieces)


def apply_rewrite_rules(
    text: str,
    rules: Sequence[Tuple[str, str]] = REWRITE_RULES,
) -> str:
    for pattern, replacement in rules:
        text = _rewrite(text, pattern, replacement)
    return text


def _normalize(text: str) -> str:
    key = []
    index = 0
    limit = len(text)
    while index < limit:
        char = text[index]
        if char in VOWELS:
            key.append("V")
            index += 1
            while index < limit and text[index] in VOWELS:
                index += 1
        elif char == "c":
            following = text[index + 1] if index + 1 < limit else ""
            key.append("S" if following in ("e", "i") else "K")
            index += 1
        else:
            key.append(char)
            index += 1
            while index < limit and text[index] == char:
                index += 1
    return "".join(key)


def compute_phonetic_key(word: str) -> str:
    """Return a spelling-normalised key approximating how ``word`` sounds.

    The word is lower-cased, common digraphs are rewritten (``ph`` to ``F``,
    silent ``gh`` dropped and so on), vowel runs collapse to ``V``, ``c`` is
    resolved to ``S`` or ``K`` by the following letter, and doubled
    consonants collapse to one.

    >>> compute_phonetic_key("phone")
    'FVnV'
    """

    return _normalize(apply_rewrite_rules(word.lower()))


__all__ = [
    "REWRITE_RULES",
    "VOWELS",
    "apply_rewrite_rules",
    "compute_phonetic_key",
    "extract_suffix",
    "is_alphabetic",
]
