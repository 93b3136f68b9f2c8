"""Prefix tree over candidate letter sequences.

The search walks this tree instead of the flat candidate list so that a
shared prefix is laid on the board once for all sequences that start with it.
"""

from __future__ import annotations

from typing import Iterable


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class Trie:
    """Prefix trie; children keep insertion order."""

    def __init__(self, sequences: Iterable[str] = ()):
        self.root = TrieNode()
        self.size = 0
        for seq in sequences:
            self.insert(seq)

    def insert(self, seq: str) -> None:
        node = self.root
        for ch in seq:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_terminal:
            node.is_terminal = True
            self.size += 1

    def __len__(self) -> int:
        return self.size
