"""Poetry Assistant: suffix and phonetic rhyme lookup over a word list."""

__version__ = "0.1.0"
