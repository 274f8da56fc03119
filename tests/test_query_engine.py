import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from poetry_assistant.core import build_poetry_assistant, query
from poetry_assistant.core import query_engine
from poetry_assistant.core.query_engine import find_rhymes, phonetic_search


def test_cat_scenario_with_two_letter_suffix(small_words):
    index = build_poetry_assistant(small_words, 2)

    assert find_rhymes(index.rhyme_table, "cat", 2) == ["hat", "bat"]

    result = query(index, "cat")
    assert result.rhymes == ["hat", "bat"]
    assert result.syllables == 1
    assert result.alliterations == ["cat"]


def test_three_letter_suffix_keeps_cat_and_hat_apart(small_words):
    index = build_poetry_assistant(small_words, 3)

    result = query(index, "cat")

    assert result.rhymes == []
    assert result.used_phonetic_fallback is True


def test_two_spelled_rhymes_trigger_phonetic_fallback(light_index):
    result = query(light_index, "light")

    assert result.used_phonetic_fallback is True
    assert result.rhymes == ["night", "fight", "flat"]


def test_three_spelled_rhymes_skip_phonetic_fallback(light_words, monkeypatch):
    index = build_poetry_assistant(light_words + ["sight"], 3)

    def _fail(*_args, **_kwargs):
        raise AssertionError("phonetic search should not run")

    monkeypatch.setattr(query_engine, "phonetic_search", _fail)
    result = query(index, "light")

    assert result.used_phonetic_fallback is False
    assert result.rhymes == ["night", "fight", "sight"]


def test_phonetic_search_ranks_sound_alikes(light_index):
    assert phonetic_search(light_index.phonetic_table, "light", 3) == ["flat"]


def test_fallback_skips_words_already_listed():
    index = build_poetry_assistant(["phone", "stone", "bane"], 3)

    assert phonetic_search(index.phonetic_table, "phone", 3) == ["stone", "bane"]
    assert query(index, "phone").rhymes == ["stone", "bane"]


def test_fallback_appends_after_primary_rhymes_without_resorting(light_index):
    result = query(light_index, "light", max_rhymes=1)

    # The combined list can outgrow max_rhymes once fallback results arrive.
    assert result.rhymes == ["night", "flat"]


def test_rhymes_are_truncated_to_ten():
    words = ["bright"] + [prefix + "ight" for prefix in "abcdefghjkmnpqrstuvwxyz"]
    index = build_poetry_assistant(words, 3)

    result = query(index, "bright")

    assert len(result.rhymes) == 10
    assert result.used_phonetic_fallback is False
    assert "bright" not in result.rhymes


def test_alliterations_are_capped_at_five():
    words = ["sun", "sea", "sky", "salt", "star", "stone", "swan"]
    index = build_poetry_assistant(words, 3)

    assert query(index, "Sail").alliterations == ["sun", "sea", "sky", "salt", "star"]


def test_query_defaults_to_build_suffix_length_and_warns_on_mismatch(small_words, caplog):
    index = build_poetry_assistant(small_words, 2)
    caplog.set_level(logging.WARNING, logger="poetry_assistant.core.query_engine")

    assert query(index, "cat").rhymes == ["hat", "bat"]
    assert caplog.records == []

    query(index, "cat", 3)
    assert any("suffix length differs" in record.getMessage() for record in caplog.records)


def test_query_rejects_empty_input(small_words):
    index = build_poetry_assistant(small_words, 3)
    with pytest.raises(ValueError):
        query(index, "   ")


def test_concurrent_queries_agree(light_index):
    expected = query(light_index, "light").as_dict()

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda _: query(light_index, "light").as_dict(), range(64)))

    assert all(result == expected for result in results)


def test_result_word_is_trimmed_input(small_words):
    index = build_poetry_assistant(small_words, 2)

    result = query(index, "  cat ")

    assert result.word == "cat"
    assert result.rhymes == ["hat", "bat"]
