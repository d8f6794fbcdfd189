"""Per-author publication and collaboration aggregate."""

import logging
from collections import Counter
from typing import Dict, List, Sequence, Set

from .models import AuthorPair, PartnershipInfo, RankedEntry
from .selector import TopKSelector

logger = logging.getLogger(__name__)


class AuthorInfo:
    """Publication counters and weighted coauthor map for one author."""

    def __init__(self, name: str):
        """Initialize an author with no publications."""
        self._name = name
        self._solo_publications = 0
        self._joint_publications = 0
        self._coauthors: Counter = Counter()

    @property
    def name(self) -> str:
        return self._name

    @property
    def solo_publications(self) -> int:
        return self._solo_publications

    @property
    def joint_publications(self) -> int:
        return self._joint_publications

    @property
    def total_publications(self) -> int:
        return self._solo_publications + self._joint_publications

    @property
    def coauthors(self) -> Dict[str, int]:
        """Copy of the coauthor -> shared publication count map."""
        return dict(self._coauthors)

    @property
    def coauthor_names(self) -> Set[str]:
        return set(self._coauthors)

    def add_publication(self, author_names: Sequence[str]) -> None:
        """Record one publication given its full author list (self included).

        Raises:
            ValueError: If the list is empty or does not contain this
                author exactly once.
        """
        if not author_names:
            raise ValueError(f"Publication for {self._name!r} has no authors")

        occurrences = sum(1 for author in author_names if author == self._name)
        if occurrences != 1:
            raise ValueError(
                f"Author {self._name!r} must appear exactly once in the publication, "
                f"found {occurrences} times"
            )

        for coauthor in author_names:
            if coauthor != self._name:
                self._coauthors[coauthor] += 1

        if len(author_names) == 1:
            self._solo_publications += 1
        else:
            self._joint_publications += 1

    def top_coauthors(self, k: int) -> List[RankedEntry]:
        """The k coauthors sharing the most publications, ties by name."""
        return TopKSelector.select(self._coauthors.items(), k)

    def only_solo(self) -> bool:
        """True if the author never published jointly."""
        return self._joint_publications == 0

    def never_solo(self) -> bool:
        """True if the author never published alone."""
        return self._solo_publications == 0

    def total_coauthors(self) -> int:
        return len(self._coauthors)

    def partnership_info(self) -> PartnershipInfo:
        """Distinct coauthors and the summed collaboration count across them."""
        return PartnershipInfo(set(self._coauthors), sum(self._coauthors.values()))

    def author_pairs(self) -> Dict[AuthorPair, int]:
        """Canonical (self, coauthor) pairs mapped to their shared count."""
        return {
            AuthorPair.of(self._name, coauthor): count
            for coauthor, count in self._coauthors.items()
        }

    def describe(self) -> str:
        """Multi-line human readable summary."""
        lines = [
            f"Name: {self._name}",
            f"Solo publications: {self._solo_publications}",
            f"Joint publications: {self._joint_publications}",
        ]
        for coauthor in sorted(self._coauthors):
            lines.append(f"\t{coauthor}: {self._coauthors[coauthor]}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AuthorInfo(name={self._name!r}, solo={self._solo_publications}, "
            f"joint={self._joint_publications}, coauthors={len(self._coauthors)})"
        )
