"""Scientific co-authorship network analysis.

Builds an in-memory model of a co-authorship network from a flat file of
``name1, name2, ..., nameN, year`` records and answers aggregate and
ranking queries over it:

- per-author solo / joint publication counts and coauthor weights
- top-K coauthors of an author
- top-K publishers and top-K coauthor pairs inside a year interval
- authors active inside a year interval
- author lookup by initial
"""

from .core import (
    AnalyzerConfig, AuthorIndex, AuthorInfo, AuthorPair, CoauthorAnalyzer,
    GlobalAuthorNetwork, NoAuthorsInIntervalError, RankedEntry, TopKSelector,
)

__all__ = [
    "CoauthorAnalyzer",
    "AnalyzerConfig",
    "GlobalAuthorNetwork",
    "AuthorInfo",
    "AuthorIndex",
    "TopKSelector",
    "AuthorPair",
    "RankedEntry",
    "NoAuthorsInIntervalError",
]

__version__ = "1.0.0"
