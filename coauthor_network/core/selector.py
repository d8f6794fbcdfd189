"""Bounded top-K selection shared by every ranking query."""

import heapq
import logging
from typing import Any, Iterable, List, Tuple

from .models import RankedEntry

logger = logging.getLogger(__name__)


class _HeapEntry:
    """Heap slot ordered so that the weakest entry sits at the heap root.

    Weakest means lowest weight; among equal weights, the greatest key.
    """

    __slots__ = ("key", "weight")

    def __init__(self, key: Any, weight: int):
        self.key = key
        self.weight = weight

    def __lt__(self, other: "_HeapEntry") -> bool:
        if self.weight != other.weight:
            return self.weight < other.weight
        return self.key > other.key


class TopKSelector:
    """Keeps the k heaviest keys seen so far.

    Entries are ordered by weight, then by smaller key. A candidate
    displaces the weakest held entry only when it ranks strictly higher
    under that order, so for distinct keys the held set is the top k
    whatever order candidates arrive in. Each offer costs O(log k).

    Args:
        k: Maximum number of entries to keep; must be non-negative.
    """

    def __init__(self, k: int):
        self.k = self.validate_k(k)
        self._heap: List[_HeapEntry] = []

    @staticmethod
    def validate_k(k: int) -> int:
        """Return k unchanged, or raise ValueError if it is not a non-negative int."""
        if isinstance(k, bool) or not isinstance(k, int):
            raise ValueError(f"k must be an integer, got {k!r}")
        if k < 0:
            raise ValueError(f"k must be >= 0, got {k}")
        return k

    def __len__(self) -> int:
        return len(self._heap)

    def offer(self, key: Any, weight: int) -> bool:
        """Offer a candidate; return True if it is now held."""
        if self.k == 0:
            return False

        if len(self._heap) < self.k:
            heapq.heappush(self._heap, _HeapEntry(key, weight))
            return True

        entry = _HeapEntry(key, weight)
        if self._heap[0] < entry:
            heapq.heapreplace(self._heap, entry)
            return True

        return False

    def result(self) -> List[RankedEntry]:
        """Held entries by weight descending, then key ascending."""
        ordered = sorted(self._heap, key=lambda entry: entry.key)
        ordered.sort(key=lambda entry: entry.weight, reverse=True)
        return [RankedEntry(entry.key, entry.weight) for entry in ordered]

    @classmethod
    def select(cls, candidates: Iterable[Tuple[Any, int]], k: int) -> List[RankedEntry]:
        """Run a selector over (key, weight) candidates."""
        selector = cls(k)
        if k == 0:
            return []
        for key, weight in candidates:
            selector.offer(key, weight)
        logger.debug(f"Selected {len(selector)} of top-{k} candidates")
        return selector.result()
