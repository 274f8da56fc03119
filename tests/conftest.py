import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from poetry_assistant.core import build_poetry_assistant


@pytest.fixture
def small_words():
    return ["cat", "hat", "bat", "dog"]


@pytest.fixture
def light_words():
    """Two spelled rhymes for ``light`` plus one sound-alike (``flat``)."""

    return ["light", "night", "fight", "flat"]


@pytest.fixture
def light_index(light_words):
    return build_poetry_assistant(light_words, 3)


@pytest.fixture
def wordlist_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("light\nnight\nfight\nflat\n\nphone\nstone\nbane\nwi-fi\n", encoding="utf-8")
    return path
