"""Sorted index of every author name seen during ingestion."""

import bisect
import logging
from collections import Counter
from typing import Dict, Iterator, List, Set

logger = logging.getLogger(__name__)


class AuthorIndex:
    """Lexicographically sorted set of author names, searchable by initial."""

    def __init__(self):
        self._sorted_names: List[str] = []
        self._names: Set[str] = set()

    def __len__(self) -> int:
        return len(self._sorted_names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._sorted_names))

    def add_author(self, name: str) -> bool:
        """Insert a name; return False if it was already indexed."""
        if name in self._names:
            return False
        bisect.insort(self._sorted_names, name)
        self._names.add(name)
        return True

    def authors_starting_with(self, initial: str) -> List[str]:
        """Sorted names whose first character is exactly ``initial``."""
        if not isinstance(initial, str) or len(initial) != 1:
            raise ValueError(f"initial must be a single character, got {initial!r}")

        start = bisect.bisect_left(self._sorted_names, initial)
        if ord(initial) == 0x10FFFF:
            stop = len(self._sorted_names)
        else:
            stop = bisect.bisect_left(self._sorted_names, chr(ord(initial) + 1), lo=start)
        return self._sorted_names[start:stop]

    def count_by_initial(self) -> Dict[str, int]:
        counts = Counter(name[0] for name in self._sorted_names if name)
        return dict(sorted(counts.items()))
