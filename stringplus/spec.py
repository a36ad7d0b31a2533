"""Parsing of printf-style conversion directives."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = [
    "CONVERSIONS",
    "FormatError",
    "FormatSpec",
    "split_directive",
    "parse_spec",
]

CONVERSIONS = "cdfsueEgGoxXp"

_LENGTH_TARGETS = {
    "h": "cdfsuoxXgGeE",
    "l": "cdfsuoxXgGeE",
    "L": "fgGeE",
}
_DIGITS = re.compile(r"[0-9]*")


class FormatError(ValueError):
    """Raised for a malformed conversion directive."""


@dataclass
class FormatSpec:
    """Flags, width, precision and length modifier of one directive."""

    conversion: str
    minus: bool = False
    plus: bool = False
    space: bool = False
    sharp: bool = False
    zero: bool = False
    width: int | None = None
    precision: int | None = None
    length: str | None = None

    @property
    def upper(self) -> bool:
        """True for the conversions that print upper-case letters."""
        return self.conversion in ("E", "G", "X")


def split_directive(format: str, start: int) -> tuple[str, str, int]:
    """Split the directive beginning with ``%`` at ``start``.

    Returns the text between ``%`` and the conversion character, the
    conversion character itself and the index just past the directive.
    """
    if format[start:start + 1] != "%":
        raise FormatError(f"no directive at position {start}")
    for index, ch in enumerate(format[start + 1:], start + 1):
        if ch == "\0":
            break
        if ch in CONVERSIONS:
            return format[start + 1:index], ch, index + 1
    raise FormatError(f"unterminated directive: {format[start:]!r}")


def _star(args: Iterator) -> int:
    try:
        return int(next(args))
    except StopIteration:
        raise FormatError("missing argument for '*'") from None


def _number(text: str, start: int) -> tuple[int, int]:
    match = _DIGITS.match(text, start)
    return int(match.group() or 0), match.end()


def parse_spec(
    flags_text: str, conversion: str, args: Iterable = ()
) -> FormatSpec:
    """Build a FormatSpec from the text of a directive.

    Values for ``*`` are taken from ``args``; when an iterator is given,
    the values used are consumed from it.
    """
    if len(conversion) != 1 or conversion not in CONVERSIONS:
        raise FormatError(f"unknown conversion: {conversion!r}")
    stars = iter(args)
    spec = FormatSpec(conversion)
    text = flags_text + conversion
    i = 0
    while i < len(flags_text):
        ch = flags_text[i]
        following = text[i + 1]
        i += 1
        if ch == "-":
            spec.minus = True
        elif ch == "+":
            spec.plus = True
        elif ch == " ":
            if spec.plus:
                raise FormatError("' ' flag after '+'")
            spec.space = True
        elif ch == "#":
            spec.sharp = True
        elif ch == "*":
            if spec.precision is None:
                spec.width = _star(stars)
            else:
                spec.precision = _star(stars)
        elif ch == "0":
            if spec.minus:
                raise FormatError("'0' flag after '-'")
            spec.zero = True
        elif ch == ".":
            if following == "*":
                spec.precision = _star(stars)
                i += 1
            else:
                spec.precision, i = _number(flags_text, i)
        elif ch in _LENGTH_TARGETS:
            if following not in _LENGTH_TARGETS[ch] or spec.length is not None:
                raise FormatError(f"length modifier {ch!r} misplaced")
            spec.length = ch
        elif "1" <= ch <= "9":
            spec.width, i = _number(flags_text, i - 1)
        else:
            raise FormatError(f"unexpected character {ch!r} in directive")
    return spec