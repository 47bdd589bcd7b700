"""A single entry of the phone book."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Contact:
    """The five fields kept for each person."""

    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    phone_number: str = ""
    darkest_secret: str = ""

    def is_empty(self) -> bool:
        """True when the slot holds no contact (no first name)."""
        return not self.first_name