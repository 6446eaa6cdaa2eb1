from pathlib import Path
from unittest.mock import patch

import pytest

from prefix_tree.core.allocator import AllocationFailure, BudgetAllocator
from prefix_tree.loader import (
    load_dict_trie,
    load_prefix_tree,
    load_sorted_lines,
    prefix_tree_search,
    read_lines,
)

LOADERS = [load_prefix_tree, load_dict_trie, load_sorted_lines]


def test_read_lines_skips_blank_and_strips(words_file):
    assert list(read_lines(words_file)) == [
        "apple",
        "banana",
        "band",
        "cherry",
        "rockstar",
    ]


# Test for file not found
def test_file_not_found():
    non_existent = Path("/non/existent/file.txt")
    for func in LOADERS:
        with pytest.raises(FileNotFoundError) as excinfo:
            func(non_existent)
        assert str(non_existent) in str(excinfo.value)

    with pytest.raises(FileNotFoundError):
        prefix_tree_search(non_existent, "test")


@pytest.mark.parametrize(
    "query, expected",
    [
        ("apple", True),
        ("app", True),
        ("ban", True),
        ("band", True),
        ("cherry", True),
        ("rock", True),
        ("", True),
        ("bandana", False),
        ("cherry ", False),
        ("kiwi", False),
        ("pple", False),
    ],
)
def test_all_structures_agree(words_file, query, expected):
    for func in LOADERS:
        assert func(words_file).exists(query) is expected
    assert prefix_tree_search(words_file, query) is expected


# Test empty file
def test_empty_file(tmp_path):
    empty_file = tmp_path / "empty.txt"
    empty_file.touch()

    for func in LOADERS:
        structure = func(empty_file)
        assert structure.exists("a") is False
        assert structure.exists("") is True


def test_allocation_failure_propagates(words_file):
    with pytest.raises(AllocationFailure):
        load_prefix_tree(words_file, BudgetAllocator(3))


def test_other_errors_are_wrapped(words_file):
    with patch(
        "prefix_tree.loader.PrefixTree.insert",
        side_effect=TypeError("Mock error"),
    ):
        with pytest.raises(Exception) as excinfo:
            load_prefix_tree(words_file)
    assert "An error occurred: Mock error" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, TypeError)


def test_load_logs_line_count(words_file, caplog):
    with caplog.at_level("INFO"):
        load_prefix_tree(words_file)
    assert "Loaded 5 lines" in caplog.text


# Test large file handling
def test_large_file(tmp_path):
    large_file = tmp_path / "large.txt"
    with large_file.open("w") as f:
        for i in range(10000):
            f.write(f"line_{i}\n")

    tree = load_prefix_tree(large_file)
    assert tree.exists("line_0")
    assert tree.exists("line_5000")
    assert tree.exists("line_9999")
    assert tree.exists("line_99")
    assert not tree.exists("line_10000")
    assert not tree.exists("line_x")
