"""Tests for the bounded top-K selector."""

import random

import pytest

from coauthor_network.core import RankedEntry, TopKSelector


def brute_force(candidates, k):
    return [RankedEntry(key, weight)
            for key, weight in sorted(candidates, key=lambda kv: (-kv[1], kv[0]))[:k]]


class CountingKey(str):
    """String key that counts how often it is compared."""

    comparisons = 0

    def __lt__(self, other):
        CountingKey.comparisons += 1
        return str.__lt__(self, other)

    def __gt__(self, other):
        CountingKey.comparisons += 1
        return str.__gt__(self, other)


class TestTopKSelector:

    def test_keeps_heaviest(self) -> None:
        selector = TopKSelector(2)
        for key, weight in [("a", 1), ("b", 5), ("c", 3), ("d", 4)]:
            selector.offer(key, weight)
        assert selector.result() == [("b", 5), ("d", 4)]

    def test_result_is_descending_with_key_tie_break(self) -> None:
        selector = TopKSelector(10)
        for key, weight in [("c", 2), ("a", 2), ("b", 7), ("d", 1)]:
            selector.offer(key, weight)
        assert selector.result() == [("b", 7), ("a", 2), ("c", 2), ("d", 1)]

    def test_weight_tie_at_boundary_keeps_smaller_key(self) -> None:
        selector = TopKSelector(1)
        assert selector.offer("kim", 3) is True
        assert selector.offer("zed", 3) is False
        assert selector.offer("amy", 3) is True
        assert selector.result() == [("amy", 3)]

    def test_strictly_heavier_evicts_weakest(self) -> None:
        selector = TopKSelector(2)
        selector.offer("a", 2)
        selector.offer("b", 2)
        assert selector.offer("c", 3) is True
        # among the two weight-2 entries, the greater key is the weakest
        assert selector.result() == [("c", 3), ("a", 2)]

    def test_k_zero_is_empty(self) -> None:
        selector = TopKSelector(0)
        assert selector.offer("a", 100) is False
        assert selector.result() == []
        assert TopKSelector.select([("a", 1)], 0) == []

    def test_k_larger_than_input_returns_all_sorted(self) -> None:
        result = TopKSelector.select([("b", 1), ("a", 1), ("c", 9)], 50)
        assert result == [("c", 9), ("a", 1), ("b", 1)]

    def test_empty_input(self) -> None:
        assert TopKSelector.select([], 3) == []

    @pytest.mark.parametrize("bad_k", [-1, 1.5, "3", True, None])
    def test_rejects_invalid_k(self, bad_k) -> None:
        with pytest.raises(ValueError):
            TopKSelector(bad_k)

    def test_select_matches_brute_force_regardless_of_order(self) -> None:
        rng = random.Random(42)
        candidates = [(f"author{i:03d}", rng.randint(1, 6)) for i in range(200)]
        for k in (1, 5, 17, 200, 250):
            shuffled = list(candidates)
            rng.shuffle(shuffled)
            assert TopKSelector.select(shuffled, k) == brute_force(candidates, k)

    def test_select_is_deterministic(self) -> None:
        candidates = [("x", 1), ("y", 1), ("z", 1), ("w", 2)]
        first = TopKSelector.select(candidates, 2)
        second = TopKSelector.select(list(reversed(candidates)), 2)
        assert first == second == [("w", 2), ("x", 1)]

    def test_len_tracks_held_entries(self) -> None:
        selector = TopKSelector(2)
        assert len(selector) == 0
        selector.offer("a", 1)
        selector.offer("b", 1)
        selector.offer("c", 1)
        assert len(selector) == 2

    def test_entries_expose_key_and_weight(self) -> None:
        (entry,) = TopKSelector.select([("a", 4)], 1)
        assert entry.key == "a"
        assert entry.weight == 4

    @pytest.mark.parametrize("k,per_offer", [(1, 2), (4, 8)])
    def test_select_does_not_sort_all_candidates(self, k, per_offer) -> None:
        rng = random.Random(7)
        candidates = [(CountingKey(f"author{i:05d}"), 1) for i in range(20000)]
        rng.shuffle(candidates)
        CountingKey.comparisons = 0
        result = TopKSelector.select(candidates, k)
        # equal weights force every heap comparison onto the keys
        assert CountingKey.comparisons < per_offer * len(candidates)
        assert [entry.key for entry in result] == [f"author{i:05d}" for i in range(k)]
