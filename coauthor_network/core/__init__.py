"""Core components for the co-authorship network system."""

from .models import (
    AnalyzerConfig, AuthorPair, PartnershipInfo, PublicationRecord, RankedEntry
)
from .exceptions import MalformedRecordError, NoAuthorsInIntervalError, UnknownAuthorError
from .selector import TopKSelector
from .author_info import AuthorInfo
from .author_index import AuthorIndex
from .global_network import GlobalAuthorNetwork
from .statistics import Statistics
from .input_parser import count_repeated_lines, parse_line, read_publications
from .network_builder import NetworkBuilder
from .coauthor_analyzer import CoauthorAnalyzer

__all__ = [
    # Models
    "AnalyzerConfig", "AuthorPair", "PartnershipInfo", "PublicationRecord", "RankedEntry",

    # Errors
    "MalformedRecordError", "NoAuthorsInIntervalError", "UnknownAuthorError",

    # Core components
    "TopKSelector", "AuthorInfo", "AuthorIndex", "GlobalAuthorNetwork",
    "Statistics", "NetworkBuilder", "CoauthorAnalyzer",

    # Ingestion
    "parse_line", "read_publications", "count_repeated_lines",
]
