"""Load line-oriented data files into the prefix tree and the
baseline structures it is compared against.
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

from prefix_tree.baselines.dict_trie import DictTrie
from prefix_tree.baselines.sorted_lines import SortedLines
from prefix_tree.core.allocator import NodeAllocator
from prefix_tree.core.prefix_tree import PrefixTree


def read_lines(data_path: Path) -> Iterator[str]:
    """Yield the non-blank lines of a data file, stripped of
    surrounding whitespace.

    Args:
        data_path (Path): The path of the data file to read.

    Raises:
        FileNotFoundError: If the file specified by `data_path` does not exist.

    Yields:
        str: Each non-blank line of the file.

    """
    # Raise an error if the file does not exist
    if not data_path.exists():
        raise FileNotFoundError(f"File not found: {data_path}")

    # Open the file for reading with UTF-8 encoding
    with data_path.open("r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()
            # Blank lines carry nothing to insert
            if line:
                yield line


def load_prefix_tree(
    data_path: Path,
    allocator: Optional[NodeAllocator] = None,
) -> "PrefixTree[str]":
    """Insert all the lines of the data file into a sorted-edge prefix tree.

    Args:
        data_path (Path): The path of the data file to load.
        allocator (Optional[NodeAllocator]): The allocator for the new tree.

    Raises:
        FileNotFoundError: If the file specified by `data_path` does not exist.
        AllocationFailure: If the tree cannot grow any further.
        Exception: If any other error occurs while loading the file.

    Returns:
        PrefixTree[str]: The tree holding every line of the file.

    """
    # Initialize the prefix tree structure
    tree: PrefixTree[str] = PrefixTree(allocator)
    count = 0
    try:
        # Insert each stripped line into the tree
        for line in read_lines(data_path):
            tree.insert(line)
            count += 1

    except (FileNotFoundError, MemoryError):
        # A missing file or a full tree is reported as is
        raise

    except Exception as e:
        # Raise a generic exception for any other errors
        raise Exception(f"An error occurred: {e!s}") from e

    logging.info(
        "Loaded %d lines from %s into a prefix tree.",
        count,
        data_path,
    )
    return tree


def load_dict_trie(data_path: Path) -> DictTrie:
    """Insert all the lines of the data file into a dictionary-based trie.

    Args:
        data_path (Path): The path of the data file to load.

    Raises:
        FileNotFoundError: If the file specified by `data_path` does not exist.
        Exception: If any other error occurs while loading the file.

    Returns:
        DictTrie: The trie holding every line of the file.

    """
    # Initialize the trie structure
    trie = DictTrie()
    try:
        for line in read_lines(data_path):
            trie.insert(line)

    except FileNotFoundError:
        raise

    except Exception as e:
        raise Exception(f"An error occurred: {e!s}") from e

    return trie


def load_sorted_lines(data_path: Path) -> SortedLines:
    """Read the lines of the data file into a sorted list.

    Args:
        data_path (Path): The path of the data file to load.

    Raises:
        FileNotFoundError: If the file specified by `data_path` does not exist.
        Exception: If any other error occurs while loading the file.

    Returns:
        SortedLines: The sorted lines of the file.

    """
    try:
        return SortedLines(read_lines(data_path))

    except FileNotFoundError:
        raise

    except Exception as e:
        raise Exception(f"An error occurred: {e!s}") from e


def prefix_tree_search(data_path: Path, query_string: str) -> bool:
    """Load the data file into a prefix tree and check whether
    `query_string` is a prefix of any of its lines.

    Args:
        data_path (Path): The path of the data file to search in.
        query_string (str): The prefix to search for.

    Raises:
        FileNotFoundError: If the file specified by `data_path` does not exist.
        Exception: If an error occurs while loading the file.

    Returns:
        bool: True if some line of the file starts with `query_string`.
        Otherwise, False.

    """
    # The tree is only needed for this one query
    with load_prefix_tree(data_path) as tree:
        return tree.exists(query_string)
