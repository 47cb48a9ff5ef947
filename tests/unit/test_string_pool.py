"""
Unit tests for the bounded filler string pool.
"""

import pytest

from pipeline_fixtures.errors import ErrorCategory, PoolBoundsError
from pipeline_fixtures.generators.string_pool import (
    BoundedStringPool,
    default_pool,
    get_string_of_length,
)


class TestBoundedStringPool:
    """Test slicing filler strings out of the pool"""

    @pytest.mark.parametrize("size", [0, 1, 17, 64])
    def test_slice_has_exact_length(self, size):
        """Test every size up to capacity yields exactly that many characters"""
        pool = BoundedStringPool(64)

        assert len(pool.slice(size)) == size

    def test_slice_is_filler(self):
        """Test slices contain only the filler character"""
        pool = BoundedStringPool(8)

        assert pool.slice(5) == "xxxxx"

    def test_slice_over_capacity_fails(self):
        """Test requesting more than the capacity is a bounds error"""
        pool = BoundedStringPool(10)

        with pytest.raises(PoolBoundsError) as exc_info:
            pool.slice(11)

        assert exc_info.value.details == {"size": 11, "capacity": 10}
        assert exc_info.value.category == ErrorCategory.FATAL_SETUP

    def test_negative_size_fails(self):
        """Test negative sizes are rejected"""
        with pytest.raises(PoolBoundsError):
            BoundedStringPool(10).slice(-1)

    def test_zero_capacity_pool(self):
        """Test an empty pool only serves the empty string"""
        pool = BoundedStringPool(0)

        assert pool.slice(0) == ""
        with pytest.raises(PoolBoundsError):
            pool.slice(1)


class TestDefaultPool:
    """Test the process-wide pool"""

    def test_capacity_from_settings(self, monkeypatch):
        """Test pool capacity follows PIPELINE_FIXTURES_STRING_POOL_CAPACITY"""
        monkeypatch.setenv("PIPELINE_FIXTURES_STRING_POOL_CAPACITY", "32")

        assert default_pool().max_capacity == 32
        assert get_string_of_length(32) == "x" * 32
        with pytest.raises(PoolBoundsError):
            get_string_of_length(33)

    def test_pool_is_built_once(self):
        """Test repeated lookups reuse the same pool"""
        assert default_pool() is default_pool()
