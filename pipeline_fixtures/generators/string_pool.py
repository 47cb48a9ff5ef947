"""Fixed-size filler strings for inflating document payloads."""

from functools import lru_cache

from pipeline_fixtures.config import get_settings
from pipeline_fixtures.errors import PoolBoundsError

FILLER_CHAR = "x"


class BoundedStringPool:
    """
    Pool of filler text backed by a single precomputed buffer.

    The buffer is built once, so every ``slice`` call is a prefix copy rather
    than a fresh string construction. Callers must size the pool for their
    largest request; asking for more is a configuration error.
    """

    def __init__(self, max_capacity: int):
        if max_capacity < 0:
            raise PoolBoundsError("Pool capacity must not be negative", capacity=max_capacity)
        self._max_capacity = max_capacity
        self._buffer = FILLER_CHAR * max_capacity

    @property
    def max_capacity(self) -> int:
        return self._max_capacity

    def slice(self, size: int) -> str:
        """
        Return a filler string of exactly ``size`` characters.

        Args:
            size: Number of characters wanted

        Returns:
            Prefix of the pool buffer

        Raises:
            PoolBoundsError: If size is negative or exceeds the pool capacity
        """
        if size < 0 or size > self._max_capacity:
            raise PoolBoundsError(
                "Requested size was too large",
                size=size,
                capacity=self._max_capacity,
            )
        return self._buffer[:size]


@lru_cache(maxsize=1)
def default_pool() -> BoundedStringPool:
    """Process-wide pool sized by ``string_pool_capacity``."""
    return BoundedStringPool(get_settings().string_pool_capacity)


def get_string_of_length(size: int) -> str:
    """Shortcut for ``default_pool().slice(size)``."""
    return default_pool().slice(size)
