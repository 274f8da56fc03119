"""Word list source for the index builder."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Optional

from poetry_assistant.core.errors import PoetryAssistantError

WORDLIST_ENV = "POETRY_ASSISTANT_WORDLIST"
DEMO_WORDLIST = Path(__file__).resolve().with_name("demo_words.txt")


class WordListUnavailableError(PoetryAssistantError):
    """The configured word list could not be read."""


class WordListLoader:
    """Lazy reader for a newline-separated word list.

    The path is resolved from the constructor argument, then the
    ``POETRY_ASSISTANT_WORDLIST`` environment variable, then the bundled
    demo list.
    """

    def __init__(self, path: Optional[Path | str] = None) -> None:
        if path is None:
            path = os.environ.get(WORDLIST_ENV) or DEMO_WORDLIST
        self.path: Path = Path(path)
        self._text: Optional[str] = None

    def read_text(self) -> str:
        if self._text is None:
            try:
                self._text = self.path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise WordListUnavailableError(
                    f"Could not read word list {self.path}: {exc}"
                ) from exc
        return self._text

    def iter_lines(self) -> Iterator[str]:
        """Yield lines split on ``\\n`` only, as the builder splits raw text."""

        yield from self.read_text().split("\n")


__all__ = ["DEMO_WORDLIST", "WORDLIST_ENV", "WordListLoader", "WordListUnavailableError"]
