#!/usr/bin/env python3
"""
Name Autocompleter

Loads a list of comma-separated names from a text file and suggests
completions for whatever prefix you type, using a prefix trie.
Names and queries are case-insensitive.
"""

from __future__ import annotations

import argparse
import logging
import sys

from namecomplete.cli import print_suggestions, prompt_for_file, run_cli
from namecomplete.names import NameList, resolve_path


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("namecomplete")


# Entry point

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Name Autocompleter -- prefix suggestions from a name list",
    )
    parser.add_argument("queries", nargs="*",
                        help="Prefixes to complete; skips the interactive prompt")
    parser.add_argument("--file", "-f", type=str, default=None,
                        help="Path to the name list (comma-separated names per line)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        path = resolve_path(args.file) if args.file else prompt_for_file()
    except (EOFError, KeyboardInterrupt):
        print()
        return 1

    names = NameList()
    try:
        names.load(path)
    except OSError as exc:
        print("Error occurred while reading the file.")
        log.debug("Failed to load %s", path, exc_info=True)
        print(exc)
        return 1

    print("File loaded successfully.")

    if args.queries:
        for query in args.queries:
            print_suggestions(names, query)
        return 0

    run_cli(names)
    return 0


if __name__ == "__main__":
    sys.exit(main())
