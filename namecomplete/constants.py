"""Alphabet and name-file conventions."""

from __future__ import annotations

import string

# Traversal order: every lowercase letter before any uppercase one.
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
ALPHABET = LOWERCASE + UPPERCASE

NAME_SEPARATOR = ","
DEFAULT_EXTENSION = ".txt"

QUIT_COMMANDS = frozenset({":q"})
