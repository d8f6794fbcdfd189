"""Shared fixtures for coauthor_network tests."""

from pathlib import Path
from typing import List, Tuple

import pytest

from coauthor_network.core import AnalyzerConfig, CoauthorAnalyzer, GlobalAuthorNetwork


# ---------------------------------------------------------------------------
# A small co-authorship data set used by most tests.
#
#   2018: Eve                    (solo)
#   2019: Bob, Carol, Dave
#   2020: Alice, Bob
#   2020: Alice, Carol
#   2021: Alice                  (solo)
#   2021: Bob, Carol
#
#   Alice: 1 solo, 2 joint, coauthors Bob:1 Carol:1
#   Bob:   0 solo, 3 joint, coauthors Alice:1 Carol:2 Dave:1
#   Carol: 0 solo, 3 joint, coauthors Alice:1 Bob:2 Dave:1
#   Dave:  0 solo, 1 joint, coauthors Bob:1 Carol:1
#   Eve:   1 solo, 0 joint
# ---------------------------------------------------------------------------

SAMPLE_LINES = [
    "Alice, Bob, 2020",
    "Alice, Carol, 2020",
    "Alice, 2021",
    "Bob, Carol, Dave, 2019",
    "Bob, Carol, 2021",
    "Eve, 2018",
]


@pytest.fixture()
def sample_records() -> List[Tuple[int, List[str]]]:
    return [
        (2020, ["Alice", "Bob"]),
        (2020, ["Alice", "Carol"]),
        (2021, ["Alice"]),
        (2019, ["Bob", "Carol", "Dave"]),
        (2021, ["Bob", "Carol"]),
        (2018, ["Eve"]),
    ]


@pytest.fixture()
def sample_network(sample_records) -> GlobalAuthorNetwork:
    network = GlobalAuthorNetwork()
    for year, authors in sample_records:
        network.add_publication(year, authors)
    return network


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "publications.txt"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def analyzer(data_file: Path) -> CoauthorAnalyzer:
    analyzer = CoauthorAnalyzer(AnalyzerConfig(data_file=str(data_file), default_top_k=3))
    analyzer.load_file()
    return analyzer
