"""Command-line interface for querying a co-authorship data file."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .core import (
    AnalyzerConfig, AuthorPair, CoauthorAnalyzer, MalformedRecordError,
    NoAuthorsInIntervalError, RankedEntry, UnknownAuthorError,
)

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _single_char(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"expected a single character, got {value!r}")
    return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="coauthor-network",
        description="Query a co-authorship network built from 'name1, ..., nameN, year' records.",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=None,
        help="Path to the data file (default: $COAUTHOR_DATA_FILE)",
    )
    parser.add_argument(
        "--skip-malformed",
        action="store_true",
        default=None,
        help="Skip unparsable lines instead of aborting",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("stats", help="Totals over the loaded file")
    sub.add_parser("year-table", help="Publications per year")
    sub.add_parser("count-repeated", help="Count lines repeating an earlier line")

    p = sub.add_parser("authors-by", help="Authors whose name starts with a character")
    p.add_argument("initial", type=_single_char)

    p = sub.add_parser("authors-in", help="Authors who published inside a year interval")
    p.add_argument("min_year", type=int)
    p.add_argument("max_year", type=int)

    for name, help_text in (("top-publishers", "Most prolific authors inside a year interval"),
                            ("top-pairs", "Coauthor pairs with most joint work inside a year interval")):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("min_year", type=int)
        p.add_argument("max_year", type=int)
        p.add_argument("-k", type=_non_negative_int, default=None, help="Number of results")

    p = sub.add_parser("top-coauthors", help="Most frequent coauthors of an author")
    p.add_argument("name")
    p.add_argument("-k", type=_non_negative_int, default=None, help="Number of results")

    p = sub.add_parser("author", help="Summary of one author")
    p.add_argument("name")

    p = sub.add_parser("export", help="Export a ranking or the year table")
    p.add_argument("output", type=Path)
    p.add_argument("--kind", choices=["top_publishers", "top_pairs", "year_table"],
                   default="top_publishers")
    p.add_argument("--format", choices=["csv", "json"], default=None)
    p.add_argument("--min-year", type=int, default=None)
    p.add_argument("--max-year", type=int, default=None)
    p.add_argument("-k", type=_non_negative_int, default=None, help="Number of results")

    return parser.parse_args(argv)


def _format_key(key) -> str:
    if isinstance(key, AuthorPair):
        return f"{key.first}, {key.second}"
    return str(key)


def _print_ranking(entries: List[RankedEntry]) -> None:
    if not entries:
        print("No results.")
        return
    for rank, entry in enumerate(entries, 1):
        print(f"{rank:>3}. {_format_key(entry.key)}: {entry.weight}")


def run_command(args: argparse.Namespace, analyzer: CoauthorAnalyzer) -> int:
    """Execute one subcommand against a loaded analyzer; return the exit code."""
    command = args.command

    if command == "stats":
        summary = analyzer.statistics_summary()
        interval = summary['year_interval']
        print(f"Statistics for {summary['file']}")
        print(f"Total number of articles: {summary['total_articles']}")
        print(f"Total number of author names: {summary['total_names']}")
        print(f"Total number of different authors: {summary['distinct_authors']}")
        print(f"Total number of solo authors: {summary['only_solo_authors']}")
        print(f"Total number of non-solo authors: {summary['never_solo_authors']}")
        print(f"Total number of solo articles: {summary['solo_articles']}")
        print(f"Year interval: [{interval[0]}, {interval[1]}]" if interval else "Year interval: none")
        by_initial = ", ".join(f"{initial}={count}" for initial, count in summary['authors_by_initial'].items())
        print(f"Authors by initial: {by_initial}")
    elif command == "year-table":
        for year, count in analyzer.year_table().items():
            print(f"{year}: {count}")
    elif command == "authors-by":
        for name in analyzer.authors_starting_with(args.initial):
            print(name)
    elif command == "authors-in":
        try:
            names = analyzer.authors_in_interval(args.min_year, args.max_year)
        except NoAuthorsInIntervalError as e:
            print(e)
            return 1
        for name in names:
            print(name)
    elif command == "top-publishers":
        _print_ranking(analyzer.top_publishers(args.min_year, args.max_year, args.k))
    elif command == "top-pairs":
        _print_ranking(analyzer.top_pairs(args.min_year, args.max_year, args.k))
    elif command in ("top-coauthors", "author"):
        try:
            if command == "author":
                print(analyzer.author(args.name).describe())
            else:
                _print_ranking(analyzer.top_coauthors(args.name, args.k))
        except UnknownAuthorError as e:
            print(e)
            return 1
    elif command == "export":
        analyzer.export_results(
            args.output, format=args.format, kind=args.kind,
            min_year=args.min_year, max_year=args.max_year, k=args.k,
        )
    else:
        raise ValueError(f"Unknown command: {command}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    load_dotenv()
    config = AnalyzerConfig.from_env()
    if args.file is not None:
        config.data_file = str(args.file)
    if args.skip_malformed is not None:
        config.skip_malformed = args.skip_malformed

    if not config.data_file:
        logger.error("No data file: pass --file or set COAUTHOR_DATA_FILE")
        return 2

    analyzer = CoauthorAnalyzer(config)

    if args.command == "count-repeated":
        print(f"Number of repeated lines: {analyzer.count_repeated_lines(config.data_file)}")
        return 0

    try:
        analyzer.load_file()
    except (OSError, MalformedRecordError) as e:
        logger.error(f"Failed to load {config.data_file}: {e}")
        return 2

    return run_command(args, analyzer)


if __name__ == "__main__":
    sys.exit(main())
