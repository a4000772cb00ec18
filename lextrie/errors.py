"""Exceptions raised by the trie and its batch driver."""

from __future__ import annotations


class TrieError(Exception):
    """Base class for every error surfaced by lextrie."""


class EmptyStringError(TrieError, ValueError):
    """An empty string was given to insert or find."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"cannot {operation} an empty string")


class UnsupportedCharacterError(TrieError, ValueError):
    """A string holds a character outside a-z."""

    def __init__(self, word: str, char: str, position: int):
        self.word = word
        self.char = char
        self.position = position
        super().__init__(
            f"unsupported character {char!r} at position {position} in {word!r} "
            "(only lowercase a-z allowed)"
        )


class InputFormatError(TrieError, ValueError):
    """The token stream does not start with a usable count."""
