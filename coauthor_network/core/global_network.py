"""Network-wide co-authorship model with year-windowed ranking queries."""

import bisect
import logging
from collections import Counter
from itertools import combinations
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .author_info import AuthorInfo
from .exceptions import NoAuthorsInIntervalError, UnknownAuthorError
from .models import AuthorPair, RankedEntry
from .selector import TopKSelector

logger = logging.getLogger(__name__)


class GlobalAuthorNetwork:
    """Owns one AuthorInfo per author plus a per-year publication index.

    Lifetime counters live in each AuthorInfo. Windowed queries cannot use
    them, so they rescan only the publications whose year falls inside the
    requested interval.
    """

    def __init__(self):
        self._authors: Dict[str, AuthorInfo] = {}
        self._year_index: Dict[int, List[Tuple[str, ...]]] = {}
        self._years: List[int] = []
        self._publication_count = 0

    def __len__(self) -> int:
        return len(self._authors)

    def __contains__(self, name: object) -> bool:
        return name in self._authors

    @property
    def publication_count(self) -> int:
        return self._publication_count

    def add_publication(self, year: int, author_names: Sequence[str]) -> None:
        """Apply one publication record to every author on it and to the year index.

        The whole record is validated first; a rejected record leaves the
        network untouched.

        Raises:
            ValueError: On an empty author list, a non-string or empty name,
                a name repeated within the record, or a non-integer year.
        """
        authors = self._validate_publication(year, author_names)

        for name in authors:
            info = self._authors.get(name)
            if info is None:
                info = AuthorInfo(name)
                self._authors[name] = info
            info.add_publication(authors)

        if year not in self._year_index:
            bisect.insort(self._years, year)
            self._year_index[year] = []
        self._year_index[year].append(authors)
        self._publication_count += 1

    @staticmethod
    def _validate_publication(year: int, author_names: Sequence[str]) -> Tuple[str, ...]:
        if isinstance(year, bool) or not isinstance(year, int):
            raise ValueError(f"Publication year must be an integer, got {year!r}")
        if isinstance(author_names, str):
            raise ValueError("Author names must be a sequence of names, not a single string")

        authors = tuple(author_names)
        if not authors:
            raise ValueError("Publication must have at least one author")

        for name in authors:
            if not isinstance(name, str) or not name:
                raise ValueError(f"Invalid author name: {name!r}")

        duplicates = sorted(name for name, count in Counter(authors).items() if count > 1)
        if duplicates:
            raise ValueError(f"Author listed more than once in a publication: {', '.join(duplicates)}")

        return authors

    # ----------------------------------------------------------------
    # Lookups
    # ----------------------------------------------------------------

    def author(self, name: str) -> AuthorInfo:
        """Return the AuthorInfo for ``name``.

        Raises:
            UnknownAuthorError: If the author was never ingested.
        """
        try:
            return self._authors[name]
        except KeyError:
            raise UnknownAuthorError(name) from None

    def author_names(self) -> List[str]:
        return sorted(self._authors)

    def years(self) -> List[int]:
        return list(self._years)

    def year_interval(self) -> Optional[Tuple[int, int]]:
        """(first, last) year with publications, or None if nothing was ingested."""
        if not self._years:
            return None
        return (self._years[0], self._years[-1])

    def only_solo_authors(self) -> List[str]:
        return sorted(name for name, info in self._authors.items() if info.only_solo())

    def never_solo_authors(self) -> List[str]:
        return sorted(name for name, info in self._authors.items() if info.never_solo())

    def iter_publications(self, min_year: Optional[int] = None,
                          max_year: Optional[int] = None) -> Iterator[Tuple[int, Tuple[str, ...]]]:
        """Yield (year, authors) for publications inside an inclusive year window.

        Either bound may be None to leave that side open.
        """
        start = 0 if min_year is None else bisect.bisect_left(self._years, min_year)
        stop = len(self._years) if max_year is None else bisect.bisect_right(self._years, max_year)

        for year in self._years[start:stop]:
            for authors in self._year_index[year]:
                yield year, authors

    # ----------------------------------------------------------------
    # Ranking queries
    # ----------------------------------------------------------------

    def top_coauthors(self, name: str, k: int) -> List[RankedEntry]:
        return self.author(name).top_coauthors(k)

    def top_publishers(self, min_year: int, max_year: int, k: int) -> List[RankedEntry]:
        """Authors with the most publications inside [min_year, max_year]."""
        TopKSelector.validate_k(k)
        if min_year > max_year:
            return []

        counts: Counter = Counter()
        for _, authors in self.iter_publications(min_year, max_year):
            counts.update(authors)

        logger.debug(f"top_publishers({min_year}, {max_year}, {k}): {len(counts)} candidates")
        return TopKSelector.select(counts.items(), k)

    def top_pairs(self, min_year: int, max_year: int, k: int) -> List[RankedEntry]:
        """Coauthor pairs sharing the most publications inside [min_year, max_year]."""
        TopKSelector.validate_k(k)
        if min_year > max_year:
            return []

        counts = self._pair_counts(min_year, max_year)
        logger.debug(f"top_pairs({min_year}, {max_year}, {k}): {len(counts)} candidate pairs")
        return TopKSelector.select(counts.items(), k)

    def authors_in_interval(self, min_year: int, max_year: int) -> List[str]:
        """Sorted authors with at least one publication inside [min_year, max_year].

        Raises:
            NoAuthorsInIntervalError: If nobody published in the interval.
        """
        found = set()
        if min_year <= max_year:
            for _, authors in self.iter_publications(min_year, max_year):
                found.update(authors)

        if not found:
            raise NoAuthorsInIntervalError(min_year, max_year)
        return sorted(found)

    def network_pairs(self) -> Dict[AuthorPair, int]:
        """Lifetime canonical pair counts, one entry per unordered pair."""
        return dict(self._pair_counts())

    def _pair_counts(self, min_year: Optional[int] = None,
                     max_year: Optional[int] = None) -> Counter:
        counts: Counter = Counter()
        for _, authors in self.iter_publications(min_year, max_year):
            for name_a, name_b in combinations(authors, 2):
                counts[AuthorPair.of(name_a, name_b)] += 1
        return counts
