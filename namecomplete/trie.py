"""Prefix trie over the letters a-z and A-Z.

Children are kept in a sparse ``dict`` keyed by letter.  Traversal order is
fixed by ``ALPHABET`` (``a..z`` then ``A..Z``), never by insertion order or
dict layout.
"""

from __future__ import annotations

from collections.abc import Iterator

from namecomplete.constants import ALPHABET, LOWERCASE


class InvalidCharacter(ValueError):
    """A character outside a-z / A-Z was given to the trie."""

    def __init__(self, char: str, word: str):
        super().__init__(f"Invalid character: {char!r} in {word!r}")
        self.char = char
        self.word = word


def slot_index(ch: str, word: str = "") -> int:
    """Map a letter to its slot: a-z -> 0..25, A-Z -> 26..51."""
    if len(ch) != 1:
        raise InvalidCharacter(ch, word or ch)
    if "a" <= ch <= "z":
        return ord(ch) - ord("a")
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + len(LOWERCASE)
    raise InvalidCharacter(ch, word or ch)


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False

    def iter_children(self) -> Iterator[tuple[str, TrieNode]]:
        """Yield ``(letter, child)`` lowercase a..z first, then A..Z."""
        if not self.children:
            return
        for ch in ALPHABET:
            child = self.children.get(ch)
            if child is not None:
                yield ch, child


class PrefixTrie:
    """Prefix trie for name insertion, exact lookup and prefix collection.

    The trie is case-sensitive: ``"Amy"`` and ``"amy"`` live in different
    branches.  Case folding is the caller's job.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str) -> None:
        # Nodes created before an invalid character stay in the trie.
        node = self.root
        for ch in word:
            slot_index(ch, word)
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def search(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def collect_with_prefix(self, prefix: str) -> list[str]:
        """Every stored word starting with ``prefix``, in traversal order.

        Depth-first: a terminal node's word is emitted before any word below
        it, and children are visited a..z then A..Z.  An unknown prefix gives
        an empty list.
        """
        node = self._walk(prefix)
        if node is None:
            return []

        words: list[str] = []
        stack: list[tuple[TrieNode, str]] = [(node, prefix)]
        while stack:
            node, path = stack.pop()
            if node.is_terminal:
                words.append(path)
            # reversed so the first letter in ALPHABET is popped first
            stack.extend(
                (child, path + ch) for ch, child in reversed(list(node.iter_children()))
            )
        return words

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def __len__(self) -> int:
        return self._size

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            slot_index(ch, s)
            node = node.children.get(ch)
            if node is None:
                return None
        return node

