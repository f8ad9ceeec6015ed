"""A prefix tree counting words and prefixes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class _TrieNode:
    passes: int = 0
    ends: int = 0
    children: dict[str, _TrieNode] = field(default_factory=dict)


class Trie:
    """A prefix tree that counts how often words and prefixes were added."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add one occurrence of ``word``; the empty word is ignored."""
        if not word:
            return
        node = self._root
        node.passes += 1
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
            node.passes += 1
        node.ends += 1

    def _find(self, text: str) -> _TrieNode | None:
        node = self._root
        for char in text:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def search(self, word: str) -> int:
        """Return how many times ``word`` was added."""
        if not word:
            return 0
        node = self._find(word)
        return node.ends if node is not None else 0

    def prefix_number(self, prefix: str) -> int:
        """Return how many added words start with ``prefix``; 0 for the empty prefix."""
        if not prefix:
            return 0
        node = self._find(prefix)
        return node.passes if node is not None else 0

    def delete(self, word: str) -> None:
        """Remove one occurrence of ``word`` if it is present."""
        if self.search(word) == 0:
            return
        node = self._root
        node.passes -= 1
        for char in word:
            child = node.children[char]
            child.passes -= 1
            if child.passes == 0:
                # Nothing else passes through; drop the whole branch.
                del node.children[char]
                return
            node = child
        node.ends -= 1