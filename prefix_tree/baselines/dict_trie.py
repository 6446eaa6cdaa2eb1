"""A dictionary-based trie kept as a comparison point for the
sorted-edge prefix tree.
"""


class DictTrieNode:
    """Represent a node in the dictionary-based trie."""

    def __init__(self) -> None:
        """Initialize a new trie node.

        Attributes:
            children (dict): A dictionary mapping characters to
            their corresponding child DictTrieNode instances.

        """
        self.children: dict[str, DictTrieNode] = {}


class DictTrie:
    """Represents a trie whose nodes keep their children in a dict."""

    def __init__(self) -> None:
        """Initialize the root node of the trie."""
        self.root = DictTrieNode()

    def insert(self, word: str) -> None:
        """Insert a new word into the trie.

        Args:
            word (str): The word to be inserted into the trie.

        """
        node = self.root
        for char in word:
            # If the character is not already a child, add a new node
            if char not in node.children:
                node.children[char] = DictTrieNode()
            node = node.children[char]

    def exists(self, prefix: str) -> bool:
        """Check whether `prefix` is a prefix of an inserted word.

        Args:
            prefix (str): The prefix to search for.

        Returns:
            bool: True if some inserted word starts with `prefix`
            (always True for the empty string), False otherwise.

        """
        node = self.root
        for char in prefix:
            if char not in node.children:
                return False
            node = node.children[char]
        return True
