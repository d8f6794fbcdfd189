"""Main orchestrator for the co-authorship network system."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import pandas as pd

from .author_index import AuthorIndex
from .author_info import AuthorInfo
from .global_network import GlobalAuthorNetwork
from .input_parser import count_repeated_lines, read_publications
from .models import (
    SUPPORTED_EXPORT_FORMATS, AnalyzerConfig, AuthorPair, PublicationRecord, RankedEntry
)
from .network_builder import NetworkBuilder
from .statistics import Statistics

logger = logging.getLogger(__name__)


class CoauthorAnalyzer:
    """Owns the author index, the network and the statistics for one data file."""

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        """Initialize with configuration."""
        self.config = config or AnalyzerConfig()
        self.current_file: Optional[str] = None
        self._reset()

    def _reset(self) -> None:
        self.index = AuthorIndex()
        self.network = GlobalAuthorNetwork()
        self.statistics = Statistics()
        self.network_builder = NetworkBuilder(self.network)

    # ----------------------------------------------------------------
    # Ingestion
    # ----------------------------------------------------------------

    def load_file(self, path: Optional[Union[str, Path]] = None) -> int:
        """Replace the current model with the contents of a data file.

        The file is loaded into fresh structures that replace the current
        ones only once every record was applied, so a failure leaves the
        previously loaded data in place.

        Returns:
            Number of records ingested.
        """
        path = path or self.config.data_file
        if not path:
            raise ValueError("No data file given and none configured")

        logger.info(f"Reading publications from {path}")
        records = list(read_publications(path, skip_malformed=self.config.skip_malformed))

        previous = (self.index, self.network, self.statistics, self.network_builder)
        self._reset()
        try:
            for record in records:
                self.ingest(record)
        except ValueError:
            self.index, self.network, self.statistics, self.network_builder = previous
            raise
        self.current_file = str(path)

        logger.info(f"Loaded {len(records)} publications by {len(self.index)} authors from {path}")
        return len(records)

    def ingest(self, record: PublicationRecord) -> None:
        """Apply one record. The network validates it before anything is mutated."""
        self.network.add_publication(record.year, record.authors)
        for name in record.authors:
            self.index.add_author(name)
        self.statistics.process(record.year, record.authors)

    def add_publication(self, year: int, authors: Sequence[str]) -> None:
        self.ingest(PublicationRecord(year=year, authors=tuple(authors)))

    def count_repeated_lines(self, path: Optional[Union[str, Path]] = None) -> int:
        path = path or self.current_file or self.config.data_file
        if not path:
            raise ValueError("No data file given and none loaded")
        return count_repeated_lines(path)

    # ----------------------------------------------------------------
    # Queries
    # ----------------------------------------------------------------

    def author(self, name: str) -> AuthorInfo:
        return self.network.author(name)

    def authors_starting_with(self, initial: str) -> List[str]:
        return self.index.authors_starting_with(initial)

    def authors_in_interval(self, min_year: int, max_year: int) -> List[str]:
        return self.network.authors_in_interval(min_year, max_year)

    def top_coauthors(self, name: str, k: Optional[int] = None) -> List[RankedEntry]:
        return self.network.top_coauthors(name, self._k(k))

    def top_publishers(self, min_year: int, max_year: int, k: Optional[int] = None) -> List[RankedEntry]:
        return self.network.top_publishers(min_year, max_year, self._k(k))

    def top_pairs(self, min_year: int, max_year: int, k: Optional[int] = None) -> List[RankedEntry]:
        return self.network.top_pairs(min_year, max_year, self._k(k))

    def year_table(self) -> Dict[int, int]:
        return self.statistics.year_table()

    def statistics_summary(self) -> Dict[str, Any]:
        """Totals over the loaded file, including solo / non-solo author counts."""
        summary = self.statistics.to_dict()
        summary.update({
            'file': self.current_file,
            'distinct_authors': len(self.index),
            'only_solo_authors': len(self.network.only_solo_authors()),
            'never_solo_authors': len(self.network.never_solo_authors()),
            'authors_by_initial': self.index.count_by_initial(),
        })
        return summary

    def get_network_statistics(self, min_year: Optional[int] = None,
                               max_year: Optional[int] = None) -> Dict:
        """Graph statistics of the co-authorship network inside a year window."""
        graph = self.network_builder.build_coauthorship_network(min_year, max_year)
        return self.network_builder.get_network_statistics(graph)

    def _k(self, k: Optional[int]) -> int:
        return self.config.default_top_k if k is None else k

    # ----------------------------------------------------------------
    # Export
    # ----------------------------------------------------------------

    def export_results(self, output_path: Union[str, Path], format: Optional[str] = None,
                       kind: str = 'top_publishers', min_year: Optional[int] = None,
                       max_year: Optional[int] = None, k: Optional[int] = None) -> None:
        """Export a ranking or the year table to CSV or JSON.

        Args:
            output_path: Destination file
            format: 'csv' or 'json'; defaults to the configured format
            kind: 'top_publishers', 'top_pairs' or 'year_table'
            min_year: Window start; defaults to the first loaded year
            max_year: Window end; defaults to the last loaded year
            k: Ranking size; defaults to the configured top-k
        """
        format = (format or self.config.export_format).lower()
        if format not in SUPPORTED_EXPORT_FORMATS:
            raise ValueError(f"Unsupported format: {format}")

        if kind == 'year_table':
            df = self._year_table_to_dataframe()
        elif kind in ('top_publishers', 'top_pairs'):
            interval = self.network.year_interval()
            if interval is None:
                logger.warning("No publications loaded; nothing to export")
                return
            lo = interval[0] if min_year is None else min_year
            hi = interval[1] if max_year is None else max_year
            if kind == 'top_publishers':
                df = self._rankings_to_dataframe(self.top_publishers(lo, hi, k))
            else:
                df = self._rankings_to_dataframe(self.top_pairs(lo, hi, k))
        else:
            raise ValueError(f"Unsupported export kind: {kind}")

        output_path = Path(output_path)
        if format == 'csv':
            df.to_csv(output_path, index=False)
        else:
            df.to_json(output_path, orient='records', indent=2, force_ascii=False)

        logger.info(f"Results exported to {output_path} (format: {format}, kind: {kind})")

    def _rankings_to_dataframe(self, rankings: List[RankedEntry]) -> pd.DataFrame:
        """Convert ranked entries to a pandas DataFrame."""
        data = []
        for rank, entry in enumerate(rankings, 1):
            if isinstance(entry.key, AuthorPair):
                data.append({
                    'rank': rank,
                    'author': entry.key.first,
                    'coauthor': entry.key.second,
                    'publications': entry.weight,
                })
            else:
                data.append({
                    'rank': rank,
                    'author': entry.key,
                    'publications': entry.weight,
                })

        return pd.DataFrame(data)

    def _year_table_to_dataframe(self) -> pd.DataFrame:
        rows = [{'year': year, 'publications': count} for year, count in self.year_table().items()]
        return pd.DataFrame(rows, columns=['year', 'publications'])
