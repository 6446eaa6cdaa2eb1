import itertools
import random
from collections import deque

import pytest

from prefix_tree.core.prefix_tree import PrefixTree
from tests.tree_helpers import all_prefixes, build_tree, iter_nodes, snapshot


def test_empty_sequence_always_exists():
    tree = PrefixTree()
    assert tree.exists("") is True
    assert tree.exists(()) is True
    tree.insert("abc")
    assert tree.exists("") is True


def test_fresh_tree_is_empty():
    tree = PrefixTree()
    assert len(tree.root) == 0
    assert tree.exists("a") is False


def test_scenario_walkthrough():
    tree = PrefixTree()
    assert not tree.exists("abc")

    tree.insert("abc")
    assert tree.exists("abc")
    assert tree.exists("ab")
    assert tree.exists("a")

    tree.insert("rockstar")
    assert tree.exists("rockstar")
    assert tree.exists("rocks")
    assert tree.exists("rock")

    tree.insert("rockers")
    assert tree.exists("rockers")
    assert tree.exists("rocker")
    assert not tree.exists("arock")


@pytest.mark.parametrize(
    "query",
    ["arock", "abcd", "b", "rockz", "rockstars", "rockerss", "x", "ra"],
)
def test_non_prefixes_do_not_exist(scenario_tree, query):
    assert scenario_tree.exists(query) is False


def test_contains_alias(scenario_tree):
    assert "rocks" in scenario_tree
    assert "rocked" not in scenario_tree


def test_scenario_structure(scenario_tree):
    root = scenario_tree.root
    assert root.labels == ["a", "r"]

    rock = root.edges[1].edges[0].edges[0]
    assert rock.labels == ["k"]
    after_k = rock.edges[0]
    assert after_k.labels == ["e", "s"]


def test_inserting_a_prefix_of_a_stored_sequence_is_a_no_op(scenario_tree):
    before = snapshot(scenario_tree.root)
    scenario_tree.insert("rock")
    assert snapshot(scenario_tree.root) == before


def test_extending_a_terminal_edge():
    tree = build_tree(["ab"])
    tree.insert("abcd")
    assert tree.exists("abcd")
    assert tree.exists("abc")
    assert not tree.exists("abd")


def test_single_element_sequences():
    tree = build_tree(["b", "a", "c"])
    assert tree.root.labels == ["a", "b", "c"]
    assert tree.root.edges == [None, None, None]
    assert tree.exists("a")
    assert not tree.exists("ab")


def test_insert_is_idempotent():
    words = ["rockstar", "rockers", "abc", "ab"]
    once = build_tree(words)
    twice = build_tree(words + words)
    assert snapshot(once.root) == snapshot(twice.root)

    for query in all_prefixes(words) | {"zz", "rockx", "abcd"}:
        assert once.exists(query) == twice.exists(query)


@pytest.mark.parametrize(
    "sequences",
    [
        [(3, 1, 2), (3, 1), (0,), (3, 2, 5, 8)],
        [b"\x01\x02", b"\x01\x03\x04", b"\xff"],
        [[1.5, 2.5], [0.5], [1.5, -1.0, 7.0]],
        [deque("abc"), deque("abd"), deque("x")],
    ],
)
def test_generic_element_types(sequences):
    tree = build_tree(sequences)
    for sequence in sequences:
        for i in range(len(sequence) + 1):
            prefix = type(sequence)(itertools.islice(sequence, i))
            assert tree.exists(prefix)


def test_unsliceable_sequences():
    tree = PrefixTree()
    tree.insert(deque("rockstar"))
    tree.insert(deque("rockers"))

    assert tree.exists(deque("rocks"))
    assert tree.exists(deque("rocker"))
    assert tree.exists(deque())
    assert not tree.exists(deque("arock"))
    # Mixed sequence types share the same paths
    assert tree.exists("rockstar")


def test_random_inserts_match_prefix_oracle():
    rng = random.Random(2024)
    words = [
        "".join(rng.choice("abcd") for _ in range(rng.randint(1, 8)))
        for _ in range(300)
    ]
    tree = build_tree(words)
    prefixes = all_prefixes(words)

    for word in words:
        assert tree.exists(word)

    for _ in range(2000):
        query = "".join(rng.choice("abcde") for _ in range(rng.randint(1, 9)))
        assert tree.exists(query) == (query in prefixes)


def test_labels_stay_sorted_and_unique():
    rng = random.Random(99)
    tree = PrefixTree()
    for _ in range(500):
        sequence = tuple(rng.randint(0, 20) for _ in range(rng.randint(1, 6)))
        tree.insert(sequence)

        for node in iter_nodes(tree.root):
            assert len(node.labels) == len(node.edges)
            assert all(a < b for a, b in zip(node.labels, node.labels[1:]))


def test_long_sequence_does_not_recurse():
    sequence = list(range(20_000))
    tree = PrefixTree()
    tree.insert(sequence)
    assert tree.exists(sequence)
    assert not tree.exists(sequence + [0])


def test_release_empties_the_tree(scenario_tree):
    scenario_tree.release()
    assert len(scenario_tree.root) == 0
    assert not scenario_tree.exists("a")

    scenario_tree.insert("xy")
    assert scenario_tree.exists("xy")


def test_context_manager_releases():
    with PrefixTree() as tree:
        tree.insert("abc")
        root = tree.root
        assert tree.exists("abc")
    assert len(root) == 0
