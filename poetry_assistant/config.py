"""Runtime configuration read from environment variables.

Every setting has a default that reproduces the stock behaviour (three
letter suffixes, a 6577-slot table, ten rhymes, five alliterations), so a
bare environment needs no configuration at all.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from poetry_assistant.core.hashing import DEFAULT_TABLE_SIZE
from poetry_assistant.core.index_builder import DEFAULT_SUFFIX_LENGTH
from poetry_assistant.core.query_engine import (
    FALLBACK_THRESHOLD,
    MAX_ALLITERATIONS,
    MAX_PHONETIC_RHYMES,
    MAX_RHYMES,
)

ENV_PREFIX = "POETRY_ASSISTANT_"


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_bool(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AssistantSettings:
    wordlist_path: Optional[str] = None
    suffix_length: int = DEFAULT_SUFFIX_LENGTH
    table_size: int = DEFAULT_TABLE_SIZE
    max_rhymes: int = MAX_RHYMES
    max_alliterations: int = MAX_ALLITERATIONS
    max_phonetic: int = MAX_PHONETIC_RHYMES
    fallback_threshold: int = FALLBACK_THRESHOLD
    share: bool = False
    log_level: Optional[str] = None


def load_settings(env: Optional[Mapping[str, str]] = None) -> AssistantSettings:
    """Build :class:`AssistantSettings` from ``env`` (defaults to ``os.environ``)."""

    env = os.environ if env is None else env
    wordlist = env.get(ENV_PREFIX + "WORDLIST") or None
    return AssistantSettings(
        wordlist_path=wordlist,
        suffix_length=_env_int(env, "SUFFIX_LENGTH", DEFAULT_SUFFIX_LENGTH),
        table_size=_env_int(env, "TABLE_SIZE", DEFAULT_TABLE_SIZE),
        max_rhymes=_env_int(env, "MAX_RHYMES", MAX_RHYMES),
        max_alliterations=_env_int(env, "MAX_ALLITERATIONS", MAX_ALLITERATIONS),
        max_phonetic=_env_int(env, "MAX_PHONETIC", MAX_PHONETIC_RHYMES),
        fallback_threshold=_env_int(env, "FALLBACK_THRESHOLD", FALLBACK_THRESHOLD),
        share=_env_bool(env, "SHARE"),
        log_level=env.get(ENV_PREFIX + "LOG_LEVEL") or None,
    )


__all__ = ["AssistantSettings", "ENV_PREFIX", "load_settings"]
