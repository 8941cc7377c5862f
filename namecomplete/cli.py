"""Terminal prompt loop for name autocomplete."""

from __future__ import annotations

from namecomplete.constants import DEFAULT_EXTENSION, QUIT_COMMANDS
from namecomplete.names import NameList, normalize_name
from namecomplete.trie import InvalidCharacter


def prompt_for_file() -> str:
    """Ask for a file name; the extension is always added."""
    answer = input("Enter the name of the text file (without quotes and extension): ")
    return answer.strip() + DEFAULT_EXTENSION


def format_suggestions(query: str, matches: list[str]) -> list[str]:
    """Lines to print for ``query`` given its prefix matches."""
    if not matches:
        return ["No matching names found."]
    if len(matches) == 1 and matches[0] == normalize_name(query):
        return [f"Autocomplete: {query}"]
    return ["Autocomplete suggestions:", *matches]


def print_suggestions(names: NameList, query: str) -> None:
    try:
        matches = names.suggest(query)
    except InvalidCharacter as exc:
        print(f"Invalid input: {exc}")
        return
    for line in format_suggestions(query.strip(), matches):
        print(line)


def run_cli(names: NameList) -> None:
    """Read queries until EOF, Ctrl-C or a quit command."""
    while True:
        print("Enter a name to autocomplete:")
        try:
            inp = input().strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if inp.lower() in QUIT_COMMANDS:
            break
        # blank input is the empty prefix and lists every name
        print_suggestions(names, inp)
