"""Case conversion, insertion and trimming of strings."""

from __future__ import annotations

import string

__all__ = ["to_upper", "to_lower", "insert", "trim"]

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def to_upper(text: str) -> str:
    """Return ``text`` with ASCII letters a-z made upper case."""
    return text.translate(_UPPER)


def to_lower(text: str) -> str:
    """Return ``text`` with ASCII letters A-Z made lower case."""
    return text.translate(_LOWER)


def insert(src: str, text: str, start_index: int) -> str:
    """Return ``src`` with ``text`` inserted before position ``start_index``.

    Raises ValueError when the position lies outside ``src``.
    """
    if not 0 <= start_index <= len(src):
        raise ValueError(
            f"start index {start_index} outside string of length {len(src)}"
        )
    return src[:start_index] + text + src[start_index:]


def trim(src: str, trim_chars: str) -> str:
    """Return ``src`` without leading and trailing characters from ``trim_chars``."""
    return src.strip(trim_chars) if trim_chars else src