import pytest

from tests.tree_helpers import build_tree

SCENARIO_WORDS = ["abc", "rockstar", "rockers"]


@pytest.fixture
def scenario_tree():
    return build_tree(SCENARIO_WORDS)


@pytest.fixture
def words_file(tmp_path):
    file_path = tmp_path / "words.txt"
    with file_path.open("w", encoding="utf-8") as f:
        for word in ["apple", "banana", "", "band", "  cherry  ", "rockstar"]:
            f.write(f"{word}\n")
    return file_path
