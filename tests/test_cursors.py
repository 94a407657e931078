"""Tests for list, dict, range and zip cursors."""

import pytest
from chainiter import DictCursor, ListCursor, RangeCursor, ZipCursor


class TestListCursor:
    def test_get_and_set(self):
        data = [1, 2, 3]
        cursor = ListCursor(data, 1)
        assert cursor.get() == 2
        cursor.set(20)
        assert data == [1, 20, 3]

    def test_advance_returns_cursor(self):
        cursor = ListCursor([1, 2], 0)
        assert cursor.advance() is cursor
        assert cursor.index == 1

    def test_equality_needs_same_list(self):
        a, b = [1], [1]
        assert ListCursor(a, 0) == ListCursor(a, 0)
        assert ListCursor(a, 0) != ListCursor(a, 1)
        assert ListCursor(a, 0) != ListCursor(b, 0)


class TestDictCursor:
    def test_get_yields_pairs(self):
        data = {"a": 1, "b": 2}
        cursor = DictCursor(data, tuple(data))
        assert cursor.get() == ("a", 1)
        cursor.advance()
        assert cursor.get() == ("b", 2)

    def test_set_rewrites_value(self):
        data = {"a": 1}
        cursor = DictCursor(data, tuple(data))
        cursor.set(("a", 5))
        assert data == {"a": 5}

    def test_set_rejects_new_key(self):
        data = {"a": 1}
        cursor = DictCursor(data, tuple(data))
        with pytest.raises(ValueError):
            cursor.set(("z", 5))
        assert data == {"a": 1}

    def test_exhausted_cursor_equals_end(self):
        data = {"a": 1}
        cursor = DictCursor(data, tuple(data))
        end = DictCursor(data, ())
        assert cursor != end
        cursor.advance()
        assert cursor == end


class TestRangeCursor:
    def test_counts(self):
        cursor = RangeCursor(3)
        assert cursor.get() == 3
        assert cursor.advance().get() == 4

    def test_set_is_ignored(self):
        cursor = RangeCursor(3)
        cursor.set(100)
        assert cursor.get() == 3


class TestZipCursor:
    def test_get_pairs_both_sides(self):
        cursor = ZipCursor(ListCursor(["x", "y"], 0), RangeCursor(0))
        assert cursor.get() == ("x", 0)
        cursor.advance()
        assert cursor.get() == ("y", 1)

    def test_set_writes_each_half(self):
        left, right = [1, 2], [3, 4]
        cursor = ZipCursor(ListCursor(left, 1), ListCursor(right, 1))
        cursor.set((20, 40))
        assert left == [1, 20]
        assert right == [3, 40]

    def test_equal_when_either_side_matches(self):
        left = [1, 2, 3]
        a = ZipCursor(ListCursor(left, 2), RangeCursor(0))
        b = ZipCursor(ListCursor(left, 2), RangeCursor(7))
        c = ZipCursor(ListCursor(left, 0), RangeCursor(7))
        d = ZipCursor(ListCursor(left, 1), RangeCursor(1))
        assert a == b
        assert b == c
        assert a != d
