"""An eight-slot phone book driven by prompts on text streams."""

from __future__ import annotations

import sys
from typing import TextIO

from .contact import Contact

CAPACITY = 8
COLUMN_WIDTH = 10
_BLANKS = " \t"
_DIGITS = frozenset("0123456789")
_CONFIDENCE_PROMPT = "Darkest secret"


def truncate(text: str) -> str:
    """Cut text longer than a column to nine characters and a dot."""
    if len(text) > COLUMN_WIDTH:
        return text[: COLUMN_WIDTH - 1] + "."
    return text


def _row(cells: list[str]) -> str:
    return "".join(f"{cell:>{COLUMN_WIDTH}}|" for cell in cells)


_HEADER = ["Index", "First Name", "Last Name", "Nickname"]


class PhoneBook:
    """Holds up to eight contacts, the oldest replaced first."""

    def __init__(
        self,
        start: int = 0,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        if not 0 <= start < CAPACITY:
            raise ValueError(f"start slot must be between 0 and {CAPACITY - 1}")
        self._slots = [Contact() for _ in range(CAPACITY)]
        self._next = start
        self._in = sys.stdin if stdin is None else stdin
        self._out = sys.stdout if stdout is None else stdout
        self._eof = False
        self._closed = False

    @property
    def eof(self) -> bool:
        """True once the input stream has run out."""
        return self._eof

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _readline(self) -> str:
        line = self._in.readline()
        if line.endswith("\n"):
            return line[:-1]
        self._eof = True
        return line

    def _ask(self, prompt: str) -> str | None:
        """Prompt for a field; return it without surrounding blanks, or None if blank."""
        self._write(f"{prompt}:")
        answer = self._readline()
        if self._eof:
            self._write("\n")
        stripped = answer.strip(_BLANKS)
        if not stripped:
            if not self._eof:
                self._write(f"..{prompt} cannot be empty!\n")
            return None
        return stripped

    def add(self) -> None:
        """Prompt for a new contact and store it in the next slot."""
        first_name = self._ask("First name")
        if first_name is None:
            return
        last_name = self._ask("Last name")
        if last_name is None:
            return
        nickname = self._ask("Nickname")
        if nickname is None:
            return
        number = self._ask("Phone number")
        if number is None:
            return
        if not set(number) <= _DIGITS:
            self._write("..Phone number can only contain numbers!\n")
            return
        confidence = self._ask(_CONFIDENCE_PROMPT)
        if confidence is None:
            return
        self._slots[self._next] = Contact(first_name, last_name, nickname, number, confidence)
        self._next = (self._next + 1) % CAPACITY

    def _show(self, index: int) -> None:
        contact = self._slots[index]
        self._write(
            _row(_HEADER)
            + _row([truncate("Phone number"), truncate(_CONFIDENCE_PROMPT)])
            + "\n"
            + _row(
                [
                    str(index),
                    truncate(contact.first_name),
                    truncate(contact.last_name),
                    truncate(contact.nickname),
                    truncate(contact.phone_number),
                    truncate(contact.darkest_secret),
                ]
            )
            + "\n"
        )

    def search(self) -> None:
        """List the stored contacts, then show the one whose index is entered."""
        lines = [_row(_HEADER)]
        for index, contact in enumerate(self._slots):
            if contact.is_empty():
                continue
            lines.append(
                _row(
                    [
                        str(index),
                        truncate(contact.first_name),
                        truncate(contact.last_name),
                        truncate(contact.nickname),
                    ]
                )
            )
        self._write("\n".join(lines) + "\nIndex:")
        answer = self._readline()
        if len(answer) != 1 or answer not in "01234567":
            self._write("..Invalid index!\n")
        else:
            self._show(int(answer))

    def contacts(self) -> tuple[Contact, ...]:
        """All eight slots, empty ones included, in slot order."""
        return tuple(self._slots)

    def close(self) -> None:
        """Announce the end of the program, once."""
        if not self._closed:
            self._closed = True
            self._write("..Exiting program.\n")

    def __enter__(self) -> PhoneBook:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()