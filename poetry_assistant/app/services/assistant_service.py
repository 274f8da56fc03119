"""Service layer that owns the built index and answers lookups."""

from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional

from poetry_assistant.config import AssistantSettings, load_settings
from poetry_assistant.core import (
    PoetryAssistantIndex,
    QueryResult,
    build_poetry_assistant,
    query,
)
from poetry_assistant.utils.observability import get_logger
from poetry_assistant.utils.telemetry import StructuredTelemetry

from ..data.wordlist import WordListLoader


class PoetryAssistantService:
    """Builds the index on first use and serves read-only lookups.

    The index is built at most once, under a lock; after that every lookup
    only reads from it, so ``lookup`` is safe to call from many threads.
    """

    def __init__(
        self,
        *,
        settings: Optional[AssistantSettings] = None,
        loader: Optional[WordListLoader] = None,
        telemetry: Optional[StructuredTelemetry] = None,
        index: Optional[PoetryAssistantIndex] = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.loader = loader or WordListLoader(self.settings.wordlist_path)
        self.telemetry = telemetry or StructuredTelemetry()
        self._index = index
        self._build_lock = threading.Lock()
        self._logger = get_logger(__name__).bind(component="assistant_service")

    # Index lifecycle -------------------------------------------------------
    @property
    def is_built(self) -> bool:
        return self._index is not None

    def ensure_index(self) -> PoetryAssistantIndex:
        if self._index is not None:
            return self._index
        with self._build_lock:
            if self._index is None:
                self._index = self._build()
        return self._index

    def _build(self) -> PoetryAssistantIndex:
        self._logger.info(
            "Building poetry assistant index",
            context={
                "wordlist": str(self.loader.path),
                "suffix_length": self.settings.suffix_length,
                "table_size": self.settings.table_size,
            },
        )
        with self.telemetry.timer("build") as timing:
            index = build_poetry_assistant(
                self.loader.iter_lines(),
                self.settings.suffix_length,
                table_size=self.settings.table_size,
            )
            timing["word_count"] = index.stats.word_count
        self.telemetry.annotate("index.stats", index.stats.as_dict())
        return index

    # Public API ------------------------------------------------------------
    def lookup(self, word: str) -> QueryResult:
        """Return rhymes, syllables and alliterations for ``word``.

        Raises:
            ValueError: ``word`` is empty after trimming.
        """

        index = self.ensure_index()
        settings = self.settings
        with self.telemetry.timer("query") as timing:
            result = query(
                index,
                word,
                index.suffix_length,
                max_rhymes=settings.max_rhymes,
                max_alliterations=settings.max_alliterations,
                max_phonetic=settings.max_phonetic,
                fallback_threshold=settings.fallback_threshold,
            )
            timing["rhymes"] = len(result.rhymes)
        self.telemetry.increment("query.completed")
        if result.used_phonetic_fallback:
            self.telemetry.increment("query.phonetic_fallback")
        return result

    def stats(self) -> Dict[str, Any]:
        return self.ensure_index().stats.as_dict()

    def format_result(self, result: QueryResult) -> str:
        """Render ``result`` as Markdown."""

        lines: List[str] = [f"### Results for **{result.word}**", ""]
        if result.rhymes:
            lines.append("**Rhymes:** " + ", ".join(result.rhymes))
        else:
            lines.append("**Rhymes:** _none found_")
        if result.used_phonetic_fallback:
            lines.append("")
            lines.append("_Few spelled rhymes; sound-alike matches were added._")
        lines.append("")
        lines.append(f"**Syllables:** {result.syllables}")
        lines.append("")
        if result.alliterations:
            lines.append("**Alliteration:** " + ", ".join(result.alliterations))
        else:
            lines.append("**Alliteration:** _none found_")
        return "\n".join(lines)

    def format_stats(self) -> str:
        stats = self.stats()
        return "\n".join(
            [
                "#### Index statistics",
                "",
                f"- Words loaded: {stats['word_count']}",
                f"- Rhyme table unique suffixes: {stats['rhyme_table_count']}",
                f"- Rhyme table probe steps: {stats['rhyme_table_probe_steps']}",
                f"- Rhyme table load factor: {stats['rhyme_table_load_factor']:.4f}",
                f"- Phonetic table unique keys: {stats['phonetic_table_count']}",
                f"- Phonetic table probe steps: {stats['phonetic_table_probe_steps']}",
                f"- Phonetic table load factor: {stats['phonetic_table_load_factor']:.4f}",
            ]
        )


__all__ = ["PoetryAssistantService"]
