import logging

import pytest

from poetry_assistant.core import (
    CapacityExhaustedError,
    build_poetry_assistant,
    compute_phonetic_key,
    extract_suffix,
)


def test_build_indexes_every_word_three_ways(small_words):
    index = build_poetry_assistant(small_words, 3)

    assert index.suffix_length == 3
    assert index.stats.word_count == 4
    assert index.rhyme_table.search("cat") == ["cat"]
    assert index.rhyme_table.search("dog") == ["dog"]
    assert index.alliteration_table.find("c", 5) == ["cat"]
    phonetic_key = extract_suffix(compute_phonetic_key("hat"), 3)
    assert index.phonetic_table.search(phonetic_key) == ["hat"]


def test_shorter_suffix_groups_words(small_words):
    index = build_poetry_assistant(small_words, 2)

    assert index.rhyme_table.search("at") == ["cat", "hat", "bat"]
    assert index.stats.rhyme_table_count == 2


def test_invalid_lines_are_skipped_silently():
    lines = ["", "   ", "hello world", "abc1", "don't", " Sun \n", "wi-fi"]
    index = build_poetry_assistant(lines, 3)

    assert index.stats.word_count == 1
    assert index.rhyme_table.search("sun") == ["Sun"]
    assert index.alliteration_table.find("s", 5) == ["Sun"]


def test_build_accepts_text_blob():
    index = build_poetry_assistant("cat\nhat\n\nbat\r\n", 2)

    assert index.stats.word_count == 3
    assert index.rhyme_table.search("at") == ["cat", "hat", "bat"]


def test_build_is_idempotent(light_words):
    first = build_poetry_assistant(light_words, 3, table_size=101)
    second = build_poetry_assistant(light_words, 3, table_size=101)

    assert first.rhyme_table.snapshot() == second.rhyme_table.snapshot()
    assert first.phonetic_table.snapshot() == second.phonetic_table.snapshot()
    assert list(first.alliteration_table) == list(second.alliteration_table)
    assert first.stats == second.stats


def test_stats_reflect_tables(light_words):
    index = build_poetry_assistant(light_words, 3, table_size=101)
    stats = index.stats.as_dict()

    assert stats["word_count"] == 4
    # "ght" and "lat" on the spelled side.
    assert stats["rhyme_table_count"] == 2
    assert stats["rhyme_table_load_factor"] == pytest.approx(2 / 101)
    assert stats["phonetic_table_count"] == index.phonetic_table.count


def test_undersized_table_raises_capacity_exhausted():
    with pytest.raises(CapacityExhaustedError) as excinfo:
        build_poetry_assistant(["cat", "dog", "pig"], 3, table_size=2)

    assert excinfo.value.table == "rhyme"
    assert excinfo.value.key == "pig"
    assert excinfo.value.capacity == 2


def test_invalid_parameters_raise_value_error():
    with pytest.raises(ValueError):
        build_poetry_assistant(["cat"], 0)
    with pytest.raises(ValueError):
        build_poetry_assistant(["cat"], 3, table_size=0)


def test_build_logs_statistics(caplog, small_words):
    caplog.set_level(logging.INFO, logger="poetry_assistant.core.index_builder")

    build_poetry_assistant(small_words, 3)

    messages = [record.getMessage() for record in caplog.records]
    assert any("Poetry assistant index built" in message for message in messages)
    assert any('"word_count": 4' in message for message in messages)
