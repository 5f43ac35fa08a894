import itertools
import random

from termwordle.lexicon.sorting import is_strictly_ascending, merge, merge_sort


def test_merge_sort_small():
    assert merge_sort(["candy", "apple", "baker"]) == ["apple", "baker", "candy"]


def test_merge_sort_base_cases():
    assert merge_sort([]) == []
    assert merge_sort(["apple"]) == ["apple"]


def test_merge_sort_odd_split():
    words = ["eagle", "delta", "candy", "baker", "apple"]
    assert merge_sort(words) == ["apple", "baker", "candy", "delta", "eagle"]


def test_merge_sort_does_not_mutate_input():
    words = ["baker", "apple"]
    merge_sort(words)
    assert words == ["baker", "apple"]


def test_merge_sort_matches_sorted_on_shuffled_words():
    words = ["".join(t) for t in itertools.product("abcd", repeat=5)]
    rng = random.Random(7)
    shuffled = list(words)
    rng.shuffle(shuffled)
    out = merge_sort(shuffled)
    assert out == sorted(words)
    assert is_strictly_ascending(out)


def test_merge_keeps_all_elements():
    assert merge(["apple", "candy"], ["baker"]) == ["apple", "baker", "candy"]
    assert merge([], ["baker"]) == ["baker"]


def test_sort_is_idempotent():
    once = merge_sort(["delta", "apple", "candy"])
    assert merge_sort(once) == once
