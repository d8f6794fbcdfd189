"""Data models for the co-authorship network system."""

import os
from dataclasses import dataclass
from typing import Any, List, NamedTuple, Optional, Set, Tuple


class RankedEntry(NamedTuple):
    """A ranked result: the ranked key and its weight."""
    key: Any
    weight: int


class PartnershipInfo(NamedTuple):
    """Distinct coauthors of an author and the sum of all shared counts."""
    coauthors: Set[str]
    total: int


@dataclass(frozen=True, order=True)
class AuthorPair:
    """Unordered pair of author names, smaller name always first."""
    first: str
    second: str

    def __post_init__(self):
        if self.first == self.second:
            raise ValueError(f"An author cannot be paired with itself: {self.first!r}")
        if self.first > self.second:
            raise ValueError(
                f"Pair is not canonical: {self.first!r} > {self.second!r}; use AuthorPair.of()"
            )

    @classmethod
    def of(cls, name_a: str, name_b: str) -> "AuthorPair":
        """Build the canonical pair for two names given in any order."""
        if name_a <= name_b:
            return cls(name_a, name_b)
        return cls(name_b, name_a)

    def as_tuple(self) -> Tuple[str, str]:
        return (self.first, self.second)

    def __str__(self) -> str:
        return f"{self.first} & {self.second}"


@dataclass(frozen=True)
class PublicationRecord:
    """One parsed line: a publication year and its author list."""
    year: int
    authors: Tuple[str, ...]

    @property
    def is_solo(self) -> bool:
        return len(self.authors) == 1


SUPPORTED_EXPORT_FORMATS = ("csv", "json")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class AnalyzerConfig:
    """Configuration for co-authorship network analysis."""
    data_file: Optional[str] = None
    data_dir: Optional[str] = None
    default_top_k: int = 10
    skip_malformed: bool = False
    export_format: str = "csv"

    def __post_init__(self):
        if self.default_top_k < 0:
            raise ValueError(f"default_top_k must be >= 0, got {self.default_top_k}")
        if self.export_format not in SUPPORTED_EXPORT_FORMATS:
            raise ValueError(
                f"Unsupported export format: {self.export_format} "
                f"(expected one of {', '.join(SUPPORTED_EXPORT_FORMATS)})"
            )

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        """Build a config from COAUTHOR_* environment variables.

        Call ``load_dotenv()`` beforehand to pick up a ``.env`` file.
        """
        top_k_raw = os.getenv("COAUTHOR_TOP_K", "10")
        try:
            top_k = int(top_k_raw)
        except ValueError:
            raise ValueError(f"COAUTHOR_TOP_K must be an integer, got {top_k_raw!r}")

        skip_raw = os.getenv("COAUTHOR_SKIP_MALFORMED", "false").strip().lower()
        if skip_raw in _TRUE_VALUES:
            skip_malformed = True
        elif skip_raw in _FALSE_VALUES:
            skip_malformed = False
        else:
            raise ValueError(f"COAUTHOR_SKIP_MALFORMED must be a boolean, got {skip_raw!r}")

        return cls(
            data_file=os.getenv("COAUTHOR_DATA_FILE") or None,
            data_dir=os.getenv("COAUTHOR_DATA_DIR") or None,
            default_top_k=top_k,
            skip_malformed=skip_malformed,
            export_format=os.getenv("COAUTHOR_EXPORT_FORMAT", "csv").strip().lower(),
        )


def ranked_to_dicts(entries: List[RankedEntry], key_name: str = "author") -> List[dict]:
    """Flatten ranked entries into JSON-friendly dicts."""
    rows = []
    for rank, entry in enumerate(entries, 1):
        key = entry.key
        if isinstance(key, AuthorPair):
            key = list(key.as_tuple())
        rows.append({"rank": rank, key_name: key, "count": entry.weight})
    return rows
