"""Interactive command loop for the phone book."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from .phonebook import PhoneBook


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Read ADD, SEARCH and EXIT commands until EXIT or end of input."""
    with PhoneBook(0, stdin, stdout) as book:
        while True:
            stdout.write("Phonebook:")
            stdout.flush()
            line = stdin.readline()
            at_eof = not line.endswith("\n")
            command = line if at_eof else line[:-1]
            if command == "ADD":
                book.add()
            elif command == "SEARCH":
                book.search()
            at_eof = at_eof or book.eof
            if at_eof or command == "EXIT":
                if at_eof:
                    stdout.write("..EOF detected")
                break


def main(argv: Sequence[str] | None = None) -> int:
    """Run the phone book on the standard streams."""
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())