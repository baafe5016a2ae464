import random

import pytest

from prefix_suggest.dictionary import Dictionary, Entry, build
from prefix_suggest.engine import Suggester, prefix_range, query, successor


def test_exact_prefix_scenario(animals):
    assert query(animals, "car", 5) == [("car", 20), ("cart", 5)]


def test_k_one_keeps_most_frequent(animals):
    assert query(animals, "ca", 1) == [("car", 20)]


def test_no_match(animals):
    assert query(animals, "z", 5) == []


def test_results_are_entries(animals):
    top = query(animals, "c", 1)[0]
    assert isinstance(top, Entry)
    assert top.word == "car"
    assert top.frequency == 20


@pytest.mark.parametrize(
    "dictionary, prefix, k",
    [
        (build([("a", 1)]), "", 3),
        (build([("a", 1)]), "a", 0),
        (build([("a", 1)]), "a", -2),
        (Dictionary(), "a", 3),
    ],
)
def test_degenerate_inputs_give_empty_result(dictionary, prefix, k):
    assert query(dictionary, prefix, k) == []


def test_ties_prefer_smaller_words():
    d = build([("art", 5), ("ape", 5), ("ant", 5)])
    assert query(d, "a", 2) == [("ant", 5), ("ape", 5)]


def test_equal_frequency_groups_are_sorted_by_word():
    d = build([("bb", 3), ("ba", 3), ("bc", 9), ("bd", 1), ("be", 3)])
    assert query(d, "b", 10) == [
        ("bc", 9),
        ("ba", 3),
        ("bb", 3),
        ("be", 3),
        ("bd", 1),
    ]


def test_duplicate_words_are_both_returned():
    d = build([("go", 4), ("go", 7), ("gone", 1)])
    assert query(d, "go", 5) == [("go", 7), ("go", 4), ("gone", 1)]


def test_prefix_is_case_sensitive():
    d = build([("Apple", 3), ("apple", 2)])
    assert query(d, "a", 5) == [("apple", 2)]
    assert query(d, "A", 5) == [("Apple", 3)]


def test_words_beyond_ascii_are_in_range():
    # a DEL-style sentinel would cut these off
    d = build([("caf", 1), ("café", 9), ("caf\x7f", 2), ("cag", 50)])
    assert query(d, "caf", 5) == [("café", 9), ("caf\x7f", 2), ("caf", 1)]


def test_prefix_range_bounds(animals):
    lo, hi = prefix_range(animals, "car")
    assert [e.word for e in animals[lo:hi]] == ["car", "cart"]
    assert prefix_range(animals, "cow")[0] == prefix_range(animals, "cow")[1]


def test_prefix_range_runs_to_end_for_maximal_prefix():
    top = chr(0x10FFFF)
    d = build([("a", 1), (top, 2), (top + "x", 3)])
    assert prefix_range(d, top) == (1, 3)


def test_successor():
    top = chr(0x10FFFF)
    assert successor("car") == "cas"
    assert successor("a" + top) == "b"
    assert successor(top + top) is None


def _brute_force(entries, prefix, k):
    matches = [e for e in entries if e[0].startswith(prefix)]
    matches.sort(key=lambda e: (-e[1], e[0]))
    return matches[:k]


def test_matches_full_sort_on_random_dictionaries():
    rng = random.Random(1234)
    alphabet = "abcé"
    for _ in range(200):
        entries = [
            (
                "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 4))),
                rng.randint(0, 6),
            )
            for _ in range(rng.randint(0, 40))
        ]
        d = build(entries)
        prefix = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 2)))
        k = rng.randint(1, 8)
        result = query(d, prefix, k)

        assert [tuple(e) for e in result] == _brute_force(entries, prefix, k)
        assert all(e.word.startswith(prefix) for e in result)
        matches = sum(1 for w, _ in entries if w.startswith(prefix))
        assert len(result) == min(k, matches)


def test_query_does_not_modify_dictionary(animals):
    before = list(animals)
    query(animals, "ca", 2)
    assert list(animals) == before


def test_suggester_caches_results(animals):
    suggester = Suggester(animals)
    first = suggester.suggest("ca", 2)
    second = suggester.suggest("ca", 2)
    assert first == second == [("car", 20), ("cat", 10)]
    assert suggester.cache_info().hits == 1
    # callers get their own list
    first.clear()
    assert suggester.suggest("ca", 2) == [("car", 20), ("cat", 10)]


def test_suggester_reload_replaces_dictionary(animals):
    suggester = Suggester(animals)
    assert suggester.suggest("do") == [("dog", 1)]
    suggester.reload(build([("door", 3)]))
    assert suggester.suggest("do") == [("door", 3)]
    assert len(suggester) == 1
    assert suggester.cache_info().currsize == 1
