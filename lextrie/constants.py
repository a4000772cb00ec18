"""Alphabet and report markers."""

import string

ALPHABET = string.ascii_lowercase
ALPHABET_SIZE = len(ALPHABET)

# Arena sentinels
ABSENT = -1
ROOT = 0
ROOT_LABEL = 255

PREFIX_MARKER = "PREFIX"
FOUND_MARKER = "YES"
MISSING_MARKER = "NO"

DEFAULT_CAPACITY = 64
