"""Name autocomplete over a prefix trie."""

from namecomplete.constants import ALPHABET, DEFAULT_EXTENSION, NAME_SEPARATOR
from namecomplete.trie import InvalidCharacter, PrefixTrie, TrieNode, slot_index
from namecomplete.names import NameList, normalize_name, resolve_path, split_names
from namecomplete.cli import format_suggestions, run_cli

__all__ = [
    "ALPHABET",
    "DEFAULT_EXTENSION",
    "NAME_SEPARATOR",
    "InvalidCharacter",
    "NameList",
    "PrefixTrie",
    "TrieNode",
    "format_suggestions",
    "normalize_name",
    "resolve_path",
    "run_cli",
    "slot_index",
    "split_names",
]
