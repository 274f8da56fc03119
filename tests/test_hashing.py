import pytest

from poetry_assistant.core.hashing import (
    ProbingTable,
    compute_hash,
    suggest_table_size,
)


def test_compute_hash_matches_polynomial_rolling_hash():
    assert compute_hash("", 1000) == 0
    assert compute_hash("a", 1000) == 97
    assert compute_hash("ab", 1000) == (97 * 31 + 98) % 1000


def test_compute_hash_stays_in_range():
    for capacity in (1, 2, 7, 6577):
        for key in ("", "a", "ight", "zzzzzzzzzz", "FVnV"):
            value = compute_hash(key, capacity)
            assert 0 <= value < capacity


def test_insert_then_search_round_trip():
    table = ProbingTable(11)

    assert table.insert("at", "cat") is True
    assert "cat" in table.search("at")
    assert table.count == 1


def test_same_key_appends_in_insertion_order_with_duplicates():
    table = ProbingTable(11)
    for word in ("cat", "hat", "cat"):
        table.insert("at", word)

    assert table.search("at") == ["cat", "hat", "cat"]
    assert table.count == 1


def test_missing_key_returns_empty_list():
    table = ProbingTable(11)
    table.insert("at", "cat")

    assert table.search("og") == []
    assert "og" not in table


def test_colliding_keys_remain_independently_retrievable():
    table = ProbingTable(7)
    # 97 % 7 == 104 % 7 == 6, so "h" wraps around to slot 0.
    assert compute_hash("a", 7) == compute_hash("h", 7) == 6

    table.insert("a", "apple")
    table.insert("h", "hat")

    assert table.search("a") == ["apple"]
    assert table.search("h") == ["hat"]
    assert table.slot_of("a") == 6
    assert table.slot_of("h") == 0
    assert table.probe_steps == 1


def test_bound_key_never_moves():
    table = ProbingTable(13)
    table.insert("ing", "sing")
    slot = table.slot_of("ing")

    for key in ("ong", "ang", "ung", "eng", "yng"):
        table.insert(key, key)
    table.insert("ing", "ring")

    assert table.slot_of("ing") == slot
    assert table.search("ing") == ["sing", "ring"]


def test_insert_reports_full_table():
    table = ProbingTable(2)

    assert table.insert("a", "a")
    assert table.insert("b", "b")
    assert table.insert("c", "c") is False
    assert table.insert("a", "again") is True
    assert table.search("c") == []
    assert table.count == 2


def test_search_returns_copy_and_leaves_step_counter_alone():
    table = ProbingTable(7)
    table.insert("a", "apple")
    table.insert("h", "hat")
    steps = table.probe_steps

    found = table.search("h")
    found.append("intruder")

    assert table.search("h") == ["hat"]
    assert table.probe_steps == steps


def test_load_factor_and_buckets():
    table = ProbingTable(10)
    table.insert("x", "fox")
    table.insert("y", "sky")

    assert table.load_factor == pytest.approx(0.2)
    assert len(table) == 2
    assert sorted(bucket.key for bucket in table.buckets()) == ["x", "y"]


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        ProbingTable(0)


def test_suggest_table_size_returns_prime_for_half_load():
    assert suggest_table_size(3) == 7
    assert suggest_table_size(10) == 23
    assert suggest_table_size(10, load_factor=1.0) == 11

    with pytest.raises(ValueError):
        suggest_table_size(10, load_factor=0)
