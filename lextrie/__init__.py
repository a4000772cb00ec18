"""lextrie -- lowercase dictionary trie with nested rendering."""

from lextrie.constants import ALPHABET, PREFIX_MARKER
from lextrie.trie import Trie, TrieNode
from lextrie.dictionary import Dictionary, parse_batch, read_tokens
from lextrie.errors import (
    EmptyStringError,
    InputFormatError,
    TrieError,
    UnsupportedCharacterError,
)

__all__ = [
    "ALPHABET",
    "PREFIX_MARKER",
    "Dictionary",
    "EmptyStringError",
    "InputFormatError",
    "Trie",
    "TrieError",
    "TrieNode",
    "UnsupportedCharacterError",
    "parse_batch",
    "read_tokens",
]
