"""Line-oriented parsing of co-authorship records.

Each non-trivial line has the shape ``name1, name2, ..., nameN, year``.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from .exceptions import MalformedRecordError
from .models import PublicationRecord

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","


def _is_trivial(line: str) -> bool:
    """Lines of at most one character carry no record."""
    return len(line) <= 1


def parse_line(line: str, line_number: Optional[int] = None) -> Optional[PublicationRecord]:
    """Parse a single line into a PublicationRecord.

    Returns None for trivial lines. Raises MalformedRecordError when the
    line has no author field, an unparsable year, an empty author name or
    the same author twice.
    """
    line = line.rstrip("\r\n")
    if _is_trivial(line):
        return None

    fields = [field.strip() for field in line.split(FIELD_SEPARATOR)]
    if len(fields) < 2:
        raise MalformedRecordError(
            f"expected at least one author and a year, got {line!r}", line_number
        )

    year_field = fields[-1]
    try:
        year = int(year_field)
    except ValueError:
        raise MalformedRecordError(f"invalid year {year_field!r}", line_number) from None

    authors = tuple(fields[:-1])
    if any(not author for author in authors):
        raise MalformedRecordError(f"empty author name in {line!r}", line_number)
    if len(set(authors)) != len(authors):
        raise MalformedRecordError(f"author listed twice in {line!r}", line_number)

    return PublicationRecord(year=year, authors=authors)


def read_publications(path: Union[str, Path],
                      skip_malformed: bool = False) -> Iterator[PublicationRecord]:
    """Yield every record of a data file, in file order.

    With ``skip_malformed`` the offending lines are logged and skipped,
    otherwise the first MalformedRecordError propagates.
    """
    path = Path(path)
    skipped = 0

    with open(path, encoding="utf-8") as fh:
        for line_number, line in enumerate(fh, 1):
            try:
                record = parse_line(line, line_number)
            except MalformedRecordError as e:
                if not skip_malformed:
                    raise
                skipped += 1
                logger.warning(f"Skipping malformed record in {path}: {e}")
                continue

            if record is not None:
                yield record

    if skipped:
        logger.info(f"Skipped {skipped} malformed lines in {path}")


def count_repeated_lines(path: Union[str, Path]) -> int:
    """Number of non-trivial lines that repeat an earlier line verbatim."""
    seen = set()
    repeated = 0

    with open(path, encoding="utf-8") as fh:
        for line in fh:
            line = line.rstrip("\r\n")
            if _is_trivial(line):
                continue
            if line in seen:
                repeated += 1
            else:
                seen.add(line)

    return repeated
