"""Tests for the storage-free Range container."""

import pytest
from chainiter import InvalidRangeError, Range, UnsupportedOperationError, irange, shape_of
from chainiter.ranges import from_builtin


class TestRange:
    def test_irange_counts_from_zero(self):
        assert irange(3) == Range(0, 3)
        assert list(irange(3)) == [0, 1, 2]

    def test_irange_with_bounds(self):
        assert list(irange(2, 5)) == [2, 3, 4]

    def test_size(self):
        assert irange(4, 9).size() == 5
        assert len(irange(0)) == 0

    def test_empty(self):
        assert list(irange(5, 5)) == []

    def test_erase_only_advances(self):
        r = irange(3)
        cursor = r.begin()
        after = r.erase(cursor)
        assert after.get() == 1
        assert cursor.get() == 0
        assert list(r) == [0, 1, 2]

    def test_inverted_range_rejected(self):
        with pytest.raises(InvalidRangeError):
            irange(5, 2)

    def test_fractional_span_rejected(self):
        with pytest.raises(InvalidRangeError):
            Range(0.0, 2.5)

    def test_frozen(self):
        r = irange(3)
        with pytest.raises(AttributeError):
            r.stop = 10


class TestFromBuiltin:
    def test_unit_step(self):
        assert from_builtin(range(2, 6)) == Range(2, 6)

    def test_empty_builtin_stays_empty(self):
        assert len(from_builtin(range(5, 1))) == 0

    def test_other_steps_rejected(self):
        with pytest.raises(InvalidRangeError):
            from_builtin(range(0, 10, 2))


class TestRangeShape:
    def test_sink_operations(self):
        r = irange(3)
        shape = shape_of(r)
        shape.reserve(r, 10)
        shape.append(r, 42)
        assert r == Range(0, 3)
        assert shape.mapped() is shape

    def test_cannot_be_created_empty(self):
        with pytest.raises(UnsupportedOperationError):
            shape_of(irange(3)).new()
