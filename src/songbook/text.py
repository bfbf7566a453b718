"""String helpers shared by the song model and formatter.

  1. trim()      : strip leading/trailing ASCII whitespace
  2. fold_case() : lowercase ASCII letters only
  3. join()      : separator-joined text with no trailing separator

Case folding is ASCII-only: non-ASCII characters pass through
unchanged, so "Ä" and "ä" are not considered equal.
"""

from collections.abc import Iterable

# Characters classified as whitespace in the "C" locale.
ASCII_WHITESPACE = " \t\n\v\f\r"

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def trim(text: str) -> str:
    """Return *text* without leading or trailing ASCII whitespace.

    Interior whitespace is left alone. All-whitespace input gives ``""``.
    """
    return text.strip(ASCII_WHITESPACE)


def fold_case(text: str) -> str:
    """Lowercase ``A``-``Z``; every other character is returned as-is."""
    return text.translate(_ASCII_LOWER)


def join(items: Iterable[str], separator: str = ", ") -> str:
    return separator.join(items)
