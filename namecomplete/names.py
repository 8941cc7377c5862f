"""Name list loader backed by a prefix trie."""

from __future__ import annotations

import logging
import os

from namecomplete.constants import DEFAULT_EXTENSION, NAME_SEPARATOR
from namecomplete.trie import InvalidCharacter, PrefixTrie

log = logging.getLogger("namecomplete")


def normalize_name(raw: str) -> str:
    return raw.strip().lower()


def split_names(line: str) -> list[str]:
    """Split one line of the name file into normalized, non-empty names."""
    names: list[str] = []
    for part in line.split(NAME_SEPARATOR):
        name = normalize_name(part)
        if name:
            names.append(name)
    return names


def resolve_path(name: str) -> str:
    """Path for a name list given on the command line.

    ``"names"`` becomes ``"names.txt"``; an existing path or one that already
    has a suffix is returned unchanged.
    """
    name = name.strip()
    if os.path.exists(name) or os.path.splitext(name)[1]:
        return name
    return name + DEFAULT_EXTENSION


class NameList:
    """Case-insensitive name list: every name and query is lowercased."""

    def __init__(self, path: str | None = None):
        self.trie = PrefixTrie()
        self.loaded = 0
        self.skipped = 0
        if path is not None:
            self.load(path)

    def load(self, path: str) -> int:
        """Insert every name from ``path``; return how many were read.

        Names with characters outside a-z are skipped with a warning.
        ``OSError`` from opening or reading the file propagates.
        """
        count = 0
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for lineno, line in enumerate(f, 1):
                for name in split_names(line):
                    try:
                        self.trie.insert(name)
                    except InvalidCharacter as exc:
                        self.skipped += 1
                        log.warning("Skipping %r (line %d): %s", name, lineno, exc)
                        continue
                    count += 1
        self.loaded += count
        log.info("Loaded %s names from %s", f"{count:,}", path)
        log.debug("%d distinct names in trie, %d skipped", len(self.trie), self.skipped)
        return count

    def add(self, name: str) -> None:
        self.trie.insert(normalize_name(name))

    def suggest(self, query: str) -> list[str]:
        prefix = normalize_name(query)
        return self.trie.collect_with_prefix(prefix)

    def contains(self, name: str) -> bool:
        return self.trie.search(normalize_name(name))

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def __len__(self) -> int:
        return len(self.trie)
