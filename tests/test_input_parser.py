"""Tests for line parsing and file reading."""

from pathlib import Path

import pytest

from coauthor_network.core import (
    MalformedRecordError, PublicationRecord, count_repeated_lines, parse_line, read_publications,
)


class TestParseLine:

    def test_parses_authors_and_year(self) -> None:
        record = parse_line("Alice, Bob , Carol,2020\n")
        assert record == PublicationRecord(year=2020, authors=("Alice", "Bob", "Carol"))
        assert record.is_solo is False

    def test_solo_record(self) -> None:
        record = parse_line("Alice, 2021")
        assert record.authors == ("Alice",)
        assert record.is_solo is True

    def test_negative_year(self) -> None:
        assert parse_line("Alice, -5").year == -5

    def test_names_are_not_normalized(self) -> None:
        record = parse_line("alice Smith, ALICE SMITH, 1999")
        assert record.authors == ("alice Smith", "ALICE SMITH")

    @pytest.mark.parametrize("line", ["", "\n", "x", "x\n", "\r\n"])
    def test_trivial_lines_are_skipped(self, line) -> None:
        assert parse_line(line) is None

    @pytest.mark.parametrize("line", [
        "Alice Bob",
        "Alice, Bob, twenty",
        "Alice, Bob, ",
        "Alice, , 2020",
        ", 2020",
        "Alice, Alice, 2020",
    ])
    def test_malformed_lines(self, line) -> None:
        with pytest.raises(MalformedRecordError):
            parse_line(line, line_number=7)

    def test_error_names_line_number(self) -> None:
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_line("Alice, Bob, 20x0", line_number=12)
        assert exc_info.value.line_number == 12
        assert "line 12" in str(exc_info.value)

    def test_malformed_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_line("Alice, 19.5")


class TestReadPublications:

    def test_reads_records_in_order(self, data_file: Path) -> None:
        records = list(read_publications(data_file))
        assert len(records) == 6
        assert records[0] == PublicationRecord(2020, ("Alice", "Bob"))
        assert records[-1] == PublicationRecord(2018, ("Eve",))

    def test_skips_blank_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "data.txt"
        path.write_text("Alice, 2020\n\n \nBob, 2021\n", encoding="utf-8")
        assert [r.authors for r in read_publications(path)] == [("Alice",), ("Bob",)]

    def test_malformed_line_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "data.txt"
        path.write_text("Alice, 2020\nBob, year\n", encoding="utf-8")
        with pytest.raises(MalformedRecordError) as exc_info:
            list(read_publications(path))
        assert exc_info.value.line_number == 2

    def test_skip_malformed(self, tmp_path: Path, caplog) -> None:
        path = tmp_path / "data.txt"
        path.write_text("Alice, 2020\nBob, year\nCarol, 2021\n", encoding="utf-8")
        with caplog.at_level("WARNING"):
            records = list(read_publications(path, skip_malformed=True))
        assert [r.authors for r in records] == [("Alice",), ("Carol",)]
        assert "line 2" in caplog.text

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            list(read_publications(tmp_path / "missing.txt"))


class TestCountRepeatedLines:

    def test_counts_repeats(self, tmp_path: Path) -> None:
        path = tmp_path / "data.txt"
        path.write_text(
            "Alice, 2020\nBob, 2021\nAlice, 2020\nAlice, 2020\nBob,2021\n",
            encoding="utf-8",
        )
        assert count_repeated_lines(path) == 2

    def test_ignores_trivial_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "data.txt"
        path.write_text("\n\nx\nx\nAlice, 2020\n", encoding="utf-8")
        assert count_repeated_lines(path) == 0

    def test_no_repeats(self, data_file: Path) -> None:
        assert count_repeated_lines(data_file) == 0
