"""Tests for the paired container."""

import pytest
from chainiter import Range, SizeMismatchError, Zipper, irange, zipped


class TestZipper:
    def test_iterates_pairs(self):
        assert list(zipped([1, 2, 3], ["a", "b", "c"])) == [(1, "a"), (2, "b"), (3, "c")]

    def test_size(self):
        pair = zipped([5, 6, 7], irange(3))
        assert pair.size() == 3
        assert len(pair) == 3

    def test_size_mismatch(self):
        with pytest.raises(SizeMismatchError) as info:
            zipped([1, 2, 3], [1, 2])
        assert info.value.left_size == 3
        assert info.value.right_size == 2

    def test_size_mismatch_is_value_error(self):
        with pytest.raises(ValueError):
            zipped([1], irange(4))

    def test_equal_sizes_any_types(self):
        zipped([1, 2], {"a": 1, "b": 2})
        zipped(irange(2), ["x", "y"])
        zipped([], [])

    def test_builtin_range_side(self):
        pair = zipped(["a", "b"], range(2))
        assert isinstance(pair.right, Range)
        assert list(pair) == [("a", 0), ("b", 1)]

    def test_borrows_sides(self):
        left = [1, 2]
        assert Zipper(left, irange(2)).left is left

    def test_erase_both_sides(self):
        left, right = [1, 2, 3], ["a", "b", "c"]
        pair = zipped(left, right)
        cursor = pair.begin().advance()
        cursor = pair.erase(cursor)
        assert left == [1, 3]
        assert right == ["a", "c"]
        assert cursor.get() == (3, "c")

    def test_erase_with_range_side(self):
        left = [10, 20, 30]
        pair = zipped(left, irange(3))
        cursor = pair.erase(pair.begin())
        assert left == [20, 30]
        assert cursor.get() == (20, 1)

    def test_traversal_stops_at_shorter_side(self):
        left = [1, 2, 3]
        pair = zipped(left, irange(3))
        left.pop()
        assert list(pair) == [(1, 0), (2, 1)]

    def test_nested(self):
        pair = zipped(zipped([1, 2], [3, 4]), irange(2))
        assert list(pair) == [((1, 3), 0), ((2, 4), 1)]
