"""Batch session: feed a token stream through the trie and report each step."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from lextrie.constants import FOUND_MARKER, MISSING_MARKER, PREFIX_MARKER
from lextrie.errors import InputFormatError
from lextrie.trie import Trie

log = logging.getLogger("lextrie")

Sink = Callable[[str], None]


def read_tokens(path: str) -> list[str]:
    """Whitespace-separated tokens of a UTF-8 file."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read().split()


def parse_batch(tokens: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split ``N w1 .. wN q1 q2 ..`` into (inserts, queries)."""
    tokens = list(tokens)
    if not tokens:
        raise InputFormatError("input is empty; expected an insertion count")

    head = tokens[0]
    try:
        count = int(head)
    except ValueError:
        raise InputFormatError(f"expected an insertion count, got {head!r}") from None
    if count < 0:
        raise InputFormatError(f"insertion count must not be negative, got {count}")

    rest = tokens[1:]
    if len(rest) < count:
        raise InputFormatError(
            f"expected {count} strings to insert, found only {len(rest)}"
        )
    return rest[:count], rest[count:]


class Dictionary:
    """A trie plus the line-oriented reporting around it.

    Every insert or find writes exactly one line to ``sink``:
    ``"<word> <rendering>"`` / ``"<word> PREFIX"`` for inserts and
    ``"<word> YES"`` / ``"<word> NO"`` for queries.
    """

    def __init__(self, sink: Sink, trie: Trie | None = None):
        self.sink = sink
        self.trie = trie if trie is not None else Trie()
        self.created = 0
        self.prefixes = 0
        self.found = 0
        self.missing = 0

    def insert(self, word: str) -> bool:
        if self.trie.insert(word):
            self.created += 1
            line = f"{word} {self.trie.render()}"
            log.debug("insert %s -> new structure", word)
            self.sink(line)
            return True
        self.prefixes += 1
        log.debug("insert %s -> already present", word)
        self.sink(f"{word} {PREFIX_MARKER}")
        return False

    def find(self, word: str) -> bool:
        hit = self.trie.find(word)
        if hit:
            self.found += 1
        else:
            self.missing += 1
        log.debug("find %s -> %s", word, hit)
        self.sink(f"{word} {FOUND_MARKER if hit else MISSING_MARKER}")
        return hit

    def run(self, tokens: Iterable[str]) -> None:
        """Insert the counted strings, then answer every remaining query."""
        inserts, queries = parse_batch(tokens)
        for word in inserts:
            self.insert(word)
        for word in queries:
            self.find(word)
        log.info(
            "Inserted %d strings (%d new, %d prefix), answered %d queries "
            "(%d yes, %d no); trie has %d nodes",
            len(inserts), self.created, self.prefixes,
            len(queries), self.found, self.missing,
            self.trie.node_count,
        )
