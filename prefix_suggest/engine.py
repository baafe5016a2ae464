"""Prefix lookup and top-K ranking over a :class:`Dictionary`."""

from __future__ import annotations

import heapq
import logging
from bisect import bisect_left
from functools import lru_cache

from .dictionary import Dictionary, Entry

log = logging.getLogger(__name__)

_MAX_CHAR = 0x10FFFF


def successor(prefix: str) -> str | None:
    """Return the smallest string greater than every string starting with ``prefix``.

    ``None`` means no such string exists, i.e. ``prefix`` is made only of
    the largest code point and its matches run to the end of the dictionary.
    """
    stripped = prefix.rstrip(chr(_MAX_CHAR))
    if not stripped:
        return None
    return stripped[:-1] + chr(ord(stripped[-1]) + 1)


def prefix_range(dictionary: Dictionary, prefix: str) -> tuple[int, int]:
    """Half-open index range ``[lo, hi)`` of words that start with ``prefix``."""
    words = dictionary.words
    lo = bisect_left(words, prefix)
    upper = successor(prefix)
    hi = len(words) if upper is None else bisect_left(words, upper, lo)
    return lo, hi


class _Ranked:
    """Heap item; ``a < b`` means ``a`` ranks worse than ``b``."""

    __slots__ = ("entry",)

    def __init__(self, entry: Entry) -> None:
        self.entry = entry

    def __lt__(self, other: "_Ranked") -> bool:
        a, b = self.entry, other.entry
        if a.frequency != b.frequency:
            return a.frequency < b.frequency
        return a.word > b.word


def query(dictionary: Dictionary, prefix: str, k: int) -> list[Entry]:
    """Return up to ``k`` entries starting with ``prefix``.

    Results are ordered by frequency descending, then word ascending.
    Degenerate input (empty prefix, empty dictionary, ``k <= 0``) gives ``[]``.
    """
    if not prefix or not dictionary or k <= 0:
        return []

    lo, hi = prefix_range(dictionary, prefix)
    log.debug("prefix %r -> range [%d, %d)", prefix, lo, hi)
    if lo == hi:
        return []

    # min-heap whose root is the worst entry kept so far
    heap: list[_Ranked] = []
    for entry in dictionary[lo:hi]:
        item = _Ranked(entry)
        if len(heap) < k:
            heapq.heappush(heap, item)
        elif heap[0] < item:
            heapq.heapreplace(heap, item)

    results = [heapq.heappop(heap).entry for _ in range(len(heap))]
    results.reverse()
    return results


class Suggester:
    """Answer prefix queries against one immutable dictionary, with caching."""

    def __init__(self, dictionary: Dictionary, cache_size: int = 2048) -> None:
        self._cache_size = cache_size
        self.reload(dictionary)

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    def reload(self, dictionary: Dictionary) -> None:
        """Swap in a freshly built dictionary and drop cached results."""
        self._dictionary = dictionary

        @lru_cache(maxsize=self._cache_size)
        def _cached(prefix: str, k: int) -> tuple[Entry, ...]:
            return tuple(query(dictionary, prefix, k))

        self._cached = _cached

    def suggest(self, prefix: str, k: int = 5) -> list[Entry]:
        """Return up to ``k`` suggestions for ``prefix``."""
        return list(self._cached(prefix, k))

    def cache_info(self):
        return self._cached.cache_info()

    def __len__(self) -> int:
        return len(self._dictionary)
