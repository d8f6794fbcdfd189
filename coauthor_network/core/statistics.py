"""Global ingestion counters and per-year publication histogram."""

import logging
from typing import Dict, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class Statistics:
    """Running totals over every ingested publication."""

    def __init__(self):
        self.total_articles = 0
        self.total_names = 0
        self.solo_articles = 0
        self._year_table: Dict[int, int] = {}

    def process(self, year: int, authors: Sequence[str]) -> None:
        """Account for one publication."""
        self.total_articles += 1
        self.total_names += len(authors)
        if len(authors) == 1:
            self.solo_articles += 1
        # First sight of a year counts as one publication
        self._year_table[year] = self._year_table.get(year, 0) + 1

    def year_table(self) -> Dict[int, int]:
        """Copy of year -> publication count, sorted by year."""
        return dict(sorted(self._year_table.items()))

    def year_interval(self) -> Optional[Tuple[int, int]]:
        if not self._year_table:
            return None
        return (min(self._year_table), max(self._year_table))

    def to_dict(self) -> Dict[str, object]:
        interval = self.year_interval()
        return {
            "total_articles": self.total_articles,
            "total_names": self.total_names,
            "solo_articles": self.solo_articles,
            "year_interval": list(interval) if interval else None,
        }
