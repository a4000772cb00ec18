"""Prefix trie over a-z with structural terminality and nested rendering.

Nodes live in an arena: a numpy table of child indices, one row per node and
one column per letter, with parallel vectors for child count, depth and label.
``TrieNode`` is a lightweight handle on one row.

A string counts as present only when its path exists *and* ends on a leaf, so
inserting ``"ab"`` after ``"a"`` makes ``"a"`` unfindable again.
"""

from __future__ import annotations

import logging
from typing import Iterator

import numpy as np

from lextrie.constants import (
    ABSENT,
    ALPHABET,
    ALPHABET_SIZE,
    DEFAULT_CAPACITY,
    ROOT,
    ROOT_LABEL,
)
from lextrie.errors import EmptyStringError, UnsupportedCharacterError

log = logging.getLogger("lextrie.trie")

_CODES = {ch: code for code, ch in enumerate(ALPHABET)}


class TrieNode:
    """Read-only view of a single node in a Trie."""

    __slots__ = ("_trie", "index")

    def __init__(self, trie: Trie, index: int):
        self._trie = trie
        self.index = index

    @property
    def label(self) -> str | None:
        code = int(self._trie._labels[self.index])
        return None if code == ROOT_LABEL else ALPHABET[code]

    @property
    def depth(self) -> int:
        return int(self._trie._depths[self.index])

    @property
    def child_count(self) -> int:
        return int(self._trie._counts[self.index])

    @property
    def is_terminal(self) -> bool:
        return self.depth > 0 and self.child_count == 0

    def child(self, letter: str) -> TrieNode | None:
        if len(letter) != 1:
            raise ValueError(f"expected a single letter, got {letter!r}")
        code = _CODES.get(letter)
        if code is None:
            raise UnsupportedCharacterError(letter, letter, 0)
        idx = int(self._trie._children[self.index, code])
        return None if idx == ABSENT else TrieNode(self._trie, idx)

    def children(self) -> Iterator[TrieNode]:
        """Present children, in alphabet order."""
        for idx in self._trie._child_slots(self.index):
            yield TrieNode(self._trie, idx)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        return self._trie is other._trie and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self._trie), self.index))

    def __repr__(self) -> str:
        return f"TrieNode(label={self.label!r}, depth={self.depth}, children={self.child_count})"


class Trie:
    """Trie answering insert / find / render over lowercase words."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        capacity = max(int(capacity), 1)
        self._children = np.full((capacity, ALPHABET_SIZE), ABSENT, dtype=np.int32)
        self._counts = np.zeros(capacity, dtype=np.int32)
        self._depths = np.zeros(capacity, dtype=np.int32)
        self._labels = np.full(capacity, ROOT_LABEL, dtype=np.uint8)
        self._size = 0
        self._new_node(ROOT_LABEL, 0)

    @property
    def root(self) -> TrieNode:
        return TrieNode(self, ROOT)

    @property
    def node_count(self) -> int:
        return self._size

    # arena

    def _grow(self) -> None:
        old = len(self._counts)
        self._children = np.vstack(
            [self._children, np.full((old, ALPHABET_SIZE), ABSENT, dtype=np.int32)]
        )
        self._counts = np.concatenate([self._counts, np.zeros(old, dtype=np.int32)])
        self._depths = np.concatenate([self._depths, np.zeros(old, dtype=np.int32)])
        self._labels = np.concatenate(
            [self._labels, np.full(old, ROOT_LABEL, dtype=np.uint8)]
        )
        log.debug("Arena grown from %d to %d nodes", old, 2 * old)

    def _new_node(self, label: int, depth: int) -> int:
        if self._size == len(self._counts):
            self._grow()
        idx = self._size
        self._labels[idx] = label
        self._depths[idx] = depth
        self._size += 1
        return idx

    def _attach(self, parent: int, code: int) -> int:
        idx = self._new_node(code, int(self._depths[parent]) + 1)
        self._children[parent, code] = idx
        self._counts[parent] += 1
        return idx

    def _child_slots(self, index: int) -> list[int]:
        row = self._children[index]
        return row[row != ABSENT].tolist()

    @staticmethod
    def _encode(word: str, operation: str) -> list[int]:
        if not word:
            raise EmptyStringError(operation)
        codes: list[int] = []
        for pos, ch in enumerate(word):
            code = _CODES.get(ch)
            if code is None:
                raise UnsupportedCharacterError(word, ch, pos)
            codes.append(code)
        return codes

    # public API

    def insert(self, word: str) -> bool:
        """Add *word*; False when its whole path already existed.

        Everything below the first missing slot is created without further
        checks, since a fresh node has no children.
        """
        codes = self._encode(word, "insert")
        last = len(codes) - 1
        node = ROOT
        for i, code in enumerate(codes):
            nxt = int(self._children[node, code])
            if nxt == ABSENT:
                for rest in codes[i:]:
                    node = self._attach(node, rest)
                return True
            if i == last:
                return False
            node = nxt
        return False

    def find(self, word: str) -> bool:
        """True if *word*'s path exists and ends on a leaf."""
        node = ROOT
        for code in self._encode(word, "find"):
            node = int(self._children[node, code])
            if node == ABSENT:
                return False
        return bool(self._counts[node] == 0)

    def render(self, node: TrieNode | None = None) -> str:
        """Nested-parenthesis form of the subtree at *node* (default: root).

        Non-branching runs below the root print flat; every other child is
        wrapped in its own group, in alphabet order.
        """
        out: list[str] = []
        stack: list[int | str] = [ROOT if node is None else node.index]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                out.append(item)
                continue
            depth = int(self._depths[item])
            if depth > 0:
                out.append(ALPHABET[int(self._labels[item])])
            kids = self._child_slots(item)
            if len(kids) == 1 and depth > 0:
                stack.append(kids[0])
            else:
                for kid in reversed(kids):
                    stack.extend((")", kid, "("))
        return "".join(out)

    def __contains__(self, word: str) -> bool:
        return self.find(word)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Trie(nodes={self._size})"
