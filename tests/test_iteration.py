import dataclasses

import pytest

from badgerkv.iteration import (
    BIT_DELETE,
    DEFAULT_ITERATOR_OPTIONS,
    IteratorOptions,
    TableRange,
    is_deleted_or_expired,
)


@pytest.mark.parametrize(
    "prefix, left, right",
    [
        ("abc", "ab", "ad"),
        ("abc", "abc", "ad"),
        ("abc", "abb123", "ad"),
        ("abc", "abc123", "abd234"),
        ("abc", "abc123", "abc456"),
    ],
)
def test_pick_table_within(prefix, left, right):
    opt = dataclasses.replace(DEFAULT_ITERATOR_OPTIONS, prefix=prefix.encode())
    table = TableRange(left.encode(), right.encode())
    assert opt.pick_table(table) is True


@pytest.mark.parametrize(
    "prefix, left, right",
    [
        ("abd", "abe", "ad"),
        ("abd", "ac", "ad"),
        ("abd", "b", "e"),
        ("abd", "a", "ab"),
        ("abd", "ab", "abc"),
        ("abd", "ab", "abc123"),
    ],
)
def test_pick_table_outside(prefix, left, right):
    opt = dataclasses.replace(DEFAULT_ITERATOR_OPTIONS, prefix=prefix.encode())
    table = TableRange(left.encode(), right.encode())
    assert opt.pick_table(table) is False


def test_empty_prefix_picks_every_table():
    table = TableRange(b"zzz", b"zzzz", keys=frozenset())
    assert IteratorOptions().pick_table(table) is True


def test_prefix_is_key_uses_bloom_lookup():
    table = TableRange(b"a", b"z", keys=frozenset({b"key1"}))
    present = IteratorOptions(prefix=b"key1", prefix_is_key=True)
    absent = IteratorOptions(prefix=b"key2", prefix_is_key=True)
    assert present.pick_table(table) is True
    assert absent.pick_table(table) is False


def test_bloom_lookup_ignored_unless_prefix_is_key():
    table = TableRange(b"a", b"z", keys=frozenset({b"key1"}))
    opt = IteratorOptions(prefix=b"key2")
    assert opt.pick_table(table) is True


def test_table_range_accessors():
    table = TableRange(b"left", b"right")
    assert table.smallest() == b"left"
    assert table.biggest() == b"right"
    assert table.does_not_have(b"anything") is False


def test_default_iterator_options_values():
    assert DEFAULT_ITERATOR_OPTIONS.prefetch_values is True
    assert DEFAULT_ITERATOR_OPTIONS.prefetch_size == 100
    assert DEFAULT_ITERATOR_OPTIONS.reverse is False
    assert DEFAULT_ITERATOR_OPTIONS.all_versions is False
    assert DEFAULT_ITERATOR_OPTIONS.prefix == b""
    assert DEFAULT_ITERATOR_OPTIONS.pick_table(TableRange(b"z", b"zz")) is True


def test_deleted_entry_is_deleted():
    assert is_deleted_or_expired(BIT_DELETE, 0, now=100) is True


def test_no_expiry_never_expires():
    assert is_deleted_or_expired(0, 0, now=10**12) is False


@pytest.mark.parametrize(
    "expires_at, now, expected",
    [(100, 99, False), (100, 100, True), (100, 101, True)],
)
def test_expiry_boundary(expires_at, now, expected):
    assert is_deleted_or_expired(0, expires_at, now=now) is expected


def test_expiry_uses_current_time_by_default():
    assert is_deleted_or_expired(0, 1) is True
    assert is_deleted_or_expired(0, 2**62) is False


def test_options_are_immutable():
    opt = IteratorOptions(prefix=b"a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        opt.prefix = b"x"
    assert opt.prefix == b"a"