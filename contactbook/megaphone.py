"""Echo the command-line arguments back in capitals."""

from __future__ import annotations

import string
import sys
from collections.abc import Iterable, Sequence

FEEDBACK_NOISE = "* LOUD AND UNBEARABLE FEEDBACK NOISE *"

# Only ASCII letters are raised, as the C locale does.
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def shout(words: Iterable[str]) -> str:
    """Join the words without separators and raise ASCII letters to capitals.

    With no words at all, the feedback noise is returned instead.
    """
    words = list(words)
    if not words:
        return FEEDBACK_NOISE
    return "".join(words).translate(_UPPER)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the shouted arguments, one line."""
    args = sys.argv[1:] if argv is None else list(argv)
    print(shout(args))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())