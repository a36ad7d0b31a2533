"""Formatting of characters, integers and strings for printf directives."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .spec import FormatSpec

__all__ = ["format_char", "format_signed", "format_unsigned", "format_string"]

_BITS = {"h": 16, "l": 64}
_NULL_POINTER = "(nil)"


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


def _pad(spec: FormatSpec, count: int) -> str:
    return ("0" if spec.zero else " ") * max(count, 0)


@dataclass(frozen=True)
class _Number:
    digits: str
    value: int
    unsigned: bool
    pointer: bool = False
    hex: bool = False
    octal: bool = False


def _sign(spec: FormatSpec, value: int) -> str:
    if value < 0:
        return "-"
    return "+" if spec.plus else ""


def _needs_sign(spec: FormatSpec, n: _Number) -> bool:
    return (spec.plus or n.value < 0) and not n.unsigned


def _prefix(spec: FormatSpec, n: _Number, upper_prefix: str = "0X") -> str:
    if not n.value:
        return ""
    if n.pointer or (spec.sharp and n.hex and not spec.upper):
        return "0x"
    if spec.sharp and n.hex and spec.upper:
        return upper_prefix
    return ""


def _with_precision(spec: FormatSpec, n: _Number) -> str:
    parts = []
    if _needs_sign(spec, n):
        parts.append(_sign(spec, n.value))
    precision = spec.precision or 0
    if precision == 0 and n.value == 0:
        return "".join(parts)
    if spec.space and not spec.plus and n.value > 0 and not n.unsigned:
        parts.append(" ")
    if n.pointer and n.value:
        parts.append("0x")
    skip = 0
    if spec.sharp:
        if n.octal:
            skip = 1
        elif n.hex:
            parts.append("0X" if spec.upper else "0x")
    parts.append("0" * (precision - (len(n.digits) - skip)))
    parts.append(n.digits)
    return "".join(parts)


def _left_aligned(spec: FormatSpec, n: _Number) -> str:
    width = spec.width or 0
    parts = []
    if spec.space and not spec.plus and n.value >= 0:
        parts.append(" ")
        width -= 1
    if _needs_sign(spec, n):
        parts.append(_sign(spec, n.value))
        width -= 1
    prefix = _prefix(spec, n, upper_prefix="0x")
    parts.append(prefix)
    parts.append(n.digits)
    if width > len(n.digits):
        width -= len(prefix)
        parts.append(_pad(spec, width - len(n.digits)))
    return "".join(parts)


def _right_aligned(spec: FormatSpec, n: _Number) -> str:
    width = spec.width or 0
    parts = []
    if spec.space and not spec.plus and n.value >= 0:
        parts.append(" ")
        width -= 1
    if width > len(n.digits):
        signed = spec.plus or n.value < 0
        if signed:
            width -= 1
        if n.pointer or (spec.sharp and n.hex and n.value):
            width -= 2
        if signed and spec.zero and not n.unsigned:
            parts.append(_sign(spec, n.value))
        parts.append(_pad(spec, width - len(n.digits)))
        if signed and not spec.zero and not n.unsigned:
            parts.append(_sign(spec, n.value))
    elif _needs_sign(spec, n):
        parts.append(_sign(spec, n.value))
    parts.append(_prefix(spec, n))
    parts.append(n.digits)
    return "".join(parts)


def _plain(spec: FormatSpec, n: _Number) -> str:
    parts = []
    if spec.space and not spec.plus and n.value >= 0:
        parts.append(" ")
    if _needs_sign(spec, n):
        parts.append(_sign(spec, n.value))
    parts.append(_prefix(spec, n))
    parts.append(n.digits)
    return "".join(parts)


def _render(spec: FormatSpec, n: _Number) -> str:
    aligned = _left_aligned if spec.minus else _right_aligned
    if spec.precision is not None and spec.width is not None:
        if spec.precision - spec.width >= 0:
            return _with_precision(spec, n)
        return aligned(spec, n)
    if spec.precision is not None:
        return _with_precision(spec, n)
    if spec.width is not None:
        return aligned(spec, n)
    return _plain(spec, n)


def format_char(spec: FormatSpec, value: int | str) -> str:
    """Format a ``%c`` directive; integers are truncated to one byte."""
    ch = value if isinstance(value, str) else chr(int(value) & 0xFF)
    if len(ch) != 1:
        raise ValueError("expected a single character")
    if spec.width:
        padding = _pad(spec, spec.width - 1)
        return ch + padding if spec.minus else padding + ch
    return ch


def format_signed(spec: FormatSpec, value: int) -> str:
    """Format a ``%d`` directive, wrapping the value to its C type."""
    number = _wrap_signed(int(value), _BITS.get(spec.length or "", 32))
    return _render(spec, _Number(str(abs(number)), number, unsigned=False))


def format_unsigned(spec: FormatSpec, value: int | None) -> str:
    """Format a ``%u``, ``%o``, ``%x``, ``%X`` or ``%p`` directive."""
    conversion = spec.conversion
    pointer = conversion == "p"
    if value is None and pointer:
        value = 0
    bits = 64 if pointer else _BITS.get(spec.length or "", 32)
    number = int(value) & ((1 << bits) - 1)
    hexadecimal = conversion in ("x", "X")
    if conversion == "o":
        digits = format(number, "o")
        if number and spec.sharp:
            digits = "0" + digits
    elif pointer and number == 0:
        digits = _NULL_POINTER
    elif hexadecimal or pointer:
        digits = format(number, "X" if spec.upper else "x")
    else:
        digits = str(number)
    spec = replace(spec, plus=False, space=False)
    n = _Number(
        digits,
        _wrap_signed(number, 64),
        unsigned=True,
        pointer=pointer,
        hex=hexadecimal,
        octal=conversion == "o",
    )
    return _render(spec, n)


def format_string(spec: FormatSpec, value: str) -> str:
    """Format a ``%s`` directive; the text ends at its first NUL."""
    text = value.partition("\0")[0]
    count = len(text)
    if spec.precision is not None and 0 <= spec.precision < count:
        count = spec.precision
    shown = text[:count]
    width = spec.width or 0
    if count < width:
        padding = _pad(spec, width - count)
        return shown + padding if spec.minus else padding + shown
    return shown