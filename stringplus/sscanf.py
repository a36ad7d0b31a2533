"""Reading values out of a string by a scanf-style format."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from fractions import Fraction

from .spec import FormatError
from .transform import to_lower

__all__ = ["sscanf"]

_CONVERSIONS = "cdfsueEgGoxXpni"
_LENGTH_TARGETS = {
    "h": "cdfsuoxXgGeEli",
    "l": "cdfsuoxXgGeEli",
    "L": "fgGeE",
}
_HEX_DIGITS = "0123456789abcdefABCDEF"
_FLOAT_CHARS = "0123456789.e+-"
_FLOAT_CHARS_WIDTH = "0123456789.eE+-"
_MASK64 = (1 << 64) - 1
_NULL_POINTER = "(nil)"
_DIGITS = re.compile(r"[0-9]+")


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _c_int(value: int) -> int:
    return _wrap(value, 32, True)


def _accumulate(value: int, digit: int, base: int, step: int) -> int:
    """Add ``digit`` times ``base`` to the power ``step``, truncating fractions."""
    if step >= 0:
        return value + digit * base**step
    return int(value + digit * float(base) ** step)


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass
class _Directive:
    conversion: str
    suppress: bool = False
    has_width: bool = False
    width: int = 0
    length: str | None = None
    octal: bool = False
    pointer: bool = False
    negative: bool = False
    exhausted: bool = False
    infinite: bool = False
    nan: bool = False

    def shrink(self, amount: int = 1) -> None:
        self.width = (self.width - amount) & _MASK64


def _split_directive(format: str, start: int) -> tuple[str, str, int]:
    for index, ch in enumerate(format[start + 1:], start + 1):
        if ch in _CONVERSIONS:
            return format[start + 1:index], ch, index + 1
    raise FormatError(f"unterminated directive: {format[start:]!r}")


def _parse_directive(flags_text: str, conversion: str) -> _Directive:
    directive = _Directive(conversion)
    text = flags_text + conversion
    i = 0
    while i < len(flags_text):
        ch = flags_text[i]
        if ch == "*":
            directive.suppress = True
        elif ch in _LENGTH_TARGETS:
            if text[i + 1] in _LENGTH_TARGETS[ch] and directive.length in (None, ch):
                directive.length = ch
        elif "0" <= ch <= "9":
            match = _DIGITS.match(flags_text, i)
            directive.has_width = True
            directive.width = int(match.group())
            i = match.end()
            continue
        else:
            raise FormatError(f"unexpected character {ch!r} in directive")
        i += 1
    return directive


def _sci_to_plain(sci: str) -> str:
    """Rewrite a number in exponent notation as plain decimal digits."""
    negative = sci.startswith("-")
    body = sci[1:] if sci.startswith(("-", "+")) else sci
    marker = next((i for i, ch in enumerate(body) if ch in "eE"), None)
    mantissa = body if marker is None else body[:marker]
    digits: list[str] = []
    point = -1
    for ch in mantissa:
        if ch == ".":
            point = len(digits)
        else:
            digits.append(ch)
    exponent = 0
    if marker is not None:
        exp_text = body[marker + 1:]
        sign = 1
        if exp_text.startswith("-"):
            sign = -1
            exp_text = exp_text[1:]
        elif exp_text.startswith("+"):
            exp_text = exp_text[1:]
        for ch in exp_text:
            exponent = exponent * 10 + (ord(ch) - ord("0"))
        exponent *= sign
    if point == -1:
        point = len(digits)
    point += exponent
    joined = "".join(digits)
    if point <= 0:
        result = "0." + "0" * (-point) + joined
    else:
        dot = "." if point < len(joined) else ""
        result = joined[:point] + dot + joined[point:] + "0" * (point - len(joined))
    return ("-" if negative else "") + result


def _plain_to_number(text: str) -> Fraction:
    """Turn collected number text into its value."""
    dot_index = text.rfind(".")
    length = len(text) - text.count(".")
    leading_zeros = 0
    for ch in text:
        if ch == "0":
            leading_zeros += 1
        elif ch != ".":
            break
    whole = 0
    for ch in text:
        if ch != ".":
            whole = whole * 10 + (ord(ch) - ord("0"))
    magnitude = 0
    while whole > 10**magnitude:
        magnitude += 1
    if leading_zeros:
        shift = magnitude + leading_zeros - 1
    elif dot_index != -1:
        shift = length - dot_index
    else:
        shift = 0
    result = Fraction(whole)
    if shift > 0:
        result /= 10**shift
    return result


class _Cursor:
    """A read position in the input; reading past the end yields NUL."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def char(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if 0 <= index < len(self.text) else "\0"

    def advance(self, count: int = 1) -> None:
        self.pos += count

    def skip_to_end(self) -> None:
        self.pos = max(self.pos, len(self.text))

    def rest(self) -> str:
        return self.text[self.pos:]

    def digit_run(self) -> int:
        count = 0
        while "0" <= self.char(count) <= "9":
            count += 1
        return count


class _Scanner:
    def __init__(self, text: str) -> None:
        self.cur = _Cursor(text)
        self.values: list = []
        self.after_char = False
        self._handlers = {
            "c": self._scan_char,
            "d": self._scan_signed,
            "u": self._scan_unsigned,
            "o": self._scan_octal,
            "x": self._scan_hex,
            "X": self._scan_hex,
            "p": self._scan_pointer,
            "s": self._scan_string,
            "n": self._scan_position,
            "i": self._scan_auto,
            **dict.fromkeys("feEgG", self._scan_float),
        }

    def skip_past_percent(self) -> None:
        index = self.cur.text.find("%", self.cur.pos)
        if index < 0:
            self.cur.skip_to_end()
        else:
            self.cur.pos = index + 1

    def match_literal(self, ch: str) -> None:
        if self.cur.char() == ch:
            self.cur.advance()

    def convert(self, directive: _Directive) -> None:
        self._handlers[directive.conversion](directive)

    # --- storing -------------------------------------------------------

    def _store_signed(self, d: _Directive, value: int) -> None:
        if d.negative:
            value = -value
        bits = {"h": 16, "l": 64}.get(d.length or "", 32)
        self.values.append(_wrap(value, bits, True))

    def _store_unsigned(self, d: _Directive, value: int) -> None:
        if d.negative:
            value = -value
        if d.length == "l" or d.pointer:
            bits = 64
        elif d.length == "h":
            bits = 16
        else:
            bits = 32
        self.values.append(_wrap(value, bits, False))

    def _store_float(self, d: _Directive, value: Fraction | float) -> None:
        number = float(value)
        if d.negative:
            number = -number
        if d.length in ("l", "L"):
            self.values.append(number)
        else:
            self.values.append(_to_float32(number))

    # --- positioning ---------------------------------------------------

    def _skip_to_number(self, d: _Directive) -> None:
        cur = self.cur
        if cur.char() == "0" and cur.char(1) == "0":
            while cur.char() == "0":
                cur.advance()
        last = "7" if d.octal else "9"
        while not "0" <= (ch := cur.char()) <= last:
            if ch in "+-" and (d.negative or cur.char(1) == "+"):
                cur.skip_to_end()
            elif ch == "-":
                if d.has_width:
                    d.shrink()
                d.negative = True
                cur.advance()
            elif ch == "\0" or (ch in "xX" and cur.char(-1) == "0"):
                if ch == "\0":
                    d.exhausted = True
                break
            elif ch in " +":
                if ch == "+":
                    d.shrink()
                cur.advance()
            else:
                cur.skip_to_end()

    def _skip_to_hex(self, d: _Directive) -> None:
        cur = self.cur
        while (ch := cur.char()) not in _HEX_DIGITS:
            if ch in "+-" and (d.negative or cur.char(1) == "+"):
                cur.skip_to_end()
            elif ch == "-":
                if d.has_width:
                    d.shrink()
                d.negative = True
                cur.advance()
            elif ch in "\0(":
                d.exhausted = True
                break
            elif ch <= " " or ch == "+":
                if ch == "+":
                    d.shrink()
                cur.advance()
            else:
                cur.skip_to_end()

    def _skip_to_float(self, d: _Directive) -> None:
        cur = self.cur
        while not "0" <= (ch := cur.char()) <= "9":
            if ch == "-":
                d.negative = True
            if ch in "iI":
                lowered = to_lower(cur.rest())
                if "infinity" in lowered:
                    d.infinite = True
                    cur.advance(8)
                elif "inf" in lowered:
                    d.infinite = True
                    cur.advance(3)
            if cur.char() in "nN" and "nan" in to_lower(cur.rest()):
                d.nan = True
                cur.advance(3)
            if cur.char() == "\0" or d.nan or d.infinite:
                break
            cur.advance()

    # --- reading numbers -----------------------------------------------

    def _read_number(self, d: _Directive) -> int:
        cur = self.cur
        last, base = ("7", 8) if d.octal else ("9", 10)
        if not d.has_width:
            value = 0
            while "0" <= (ch := cur.char()) <= last:
                value = value * base + (ord(ch) - ord("0"))
                cur.advance()
            return value
        if not d.width:
            d.suppress = True
            cur.skip_to_end()
            return 0
        step = min(_c_int(d.width - 1), cur.digit_run() - 1)
        value = 0
        consumed = 0
        while consumed < d.width and "0" <= (ch := cur.char()) <= last:
            value = _accumulate(value, ord(ch) - ord("0"), base, step)
            consumed += 1
            step -= 1
            cur.advance()
        if consumed < d.width:
            cur.skip_to_end()
        return value

    def _read_hex(self, d: _Directive) -> int:
        cur = self.cur
        prefixed = cur.text[cur.pos:cur.pos + 2] in ("0x", "0X")
        width = d.width
        if prefixed:
            cur.advance(2)
            width = (width - 2) & _MASK64
        value = 0
        if not d.has_width:
            while (ch := cur.char()) in _HEX_DIGITS:
                value = value * 16 + int(ch, 16)
                cur.advance()
            return value
        step = _c_int(width - 1)
        consumed = 0
        while consumed < width and (ch := cur.char()) in _HEX_DIGITS:
            value = _accumulate(value, int(ch, 16), 16, step)
            consumed += 1
            step -= 1
            cur.advance()
        return value

    def _read_float(self, d: _Directive) -> Fraction:
        cur = self.cur
        chars: list[str] = []
        exponent = False
        if not d.has_width:
            while (ch := cur.char()) in _FLOAT_CHARS:
                if not chars and ch == "-":
                    d.negative = True
                chars.append(ch)
                exponent = exponent or ch in "eE"
                cur.advance()
        else:
            while len(chars) < d.width:
                ch = cur.char()
                if ch == "\0":
                    break
                if not chars and ch == "-":
                    d.negative = True
                if ch not in _FLOAT_CHARS_WIDTH:
                    break
                if ch in "eE":
                    if exponent:
                        break
                    exponent = True
                chars.append(ch)
                cur.advance()
        text = "".join(chars)
        if exponent:
            text = _sci_to_plain(text)
        return _plain_to_number(text)

    # --- conversions ---------------------------------------------------

    def _scan_char(self, d: _Directive) -> None:
        cur = self.cur
        if self.after_char:
            while cur.char() == " ":
                cur.advance()
        if not d.suppress:
            self.values.append(cur.char())
            self.after_char = True
        cur.advance()

    def _scan_integer(self, d: _Directive, signed: bool) -> None:
        self._skip_to_number(d)
        if d.exhausted:
            return
        value = self._read_number(d)
        if d.suppress:
            return
        if signed:
            self._store_signed(d, value)
        else:
            self._store_unsigned(d, value)

    def _scan_signed(self, d: _Directive) -> None:
        self._scan_integer(d, signed=True)

    def _scan_unsigned(self, d: _Directive) -> None:
        self._scan_integer(d, signed=False)

    def _scan_octal(self, d: _Directive) -> None:
        d.octal = True
        self._scan_integer(d, signed=False)

    def _scan_hex(self, d: _Directive) -> None:
        self._skip_to_hex(d)
        if d.exhausted:
            return
        value = self._read_hex(d)
        if not d.suppress:
            self._store_unsigned(d, value)

    def _scan_pointer(self, d: _Directive) -> None:
        if self.cur.rest().startswith(_NULL_POINTER):
            self.values.append(None)
            return
        d.pointer = True
        self._scan_hex(d)

    def _scan_auto(self, d: _Directive) -> None:
        cur = self.cur
        self._skip_to_number(d)
        if d.exhausted:
            return
        if cur.char() == "0" and cur.char(1) in "xX":
            value = self._read_hex(d)
        elif cur.char() == "0" and "1" <= cur.char(1) <= "9":
            d.octal = True
            value = self._read_number(d)
            d.octal = False
        else:
            value = self._read_number(d)
        if not d.suppress:
            self._store_signed(d, value)

    def _scan_string(self, d: _Directive) -> None:
        cur = self.cur
        while cur.pos < len(cur.text) and cur.char() <= " ":
            cur.advance()
        if d.suppress:
            return
        start = cur.pos
        while (not d.has_width or cur.pos - start < d.width) and cur.char() > " ":
            cur.advance()
        self.values.append(cur.text[start:cur.pos])

    def _scan_float(self, d: _Directive) -> None:
        self._skip_to_float(d)
        if d.nan:
            value: Fraction | float = math.nan
        elif d.infinite:
            value = math.inf
        else:
            value = self._read_float(d)
        if not d.suppress:
            self._store_float(d, value)

    def _scan_position(self, d: _Directive) -> None:
        self.values.append(self.cur.pos)


def sscanf(text: str, format: str) -> list:
    """Read values out of ``text`` as the directives of ``format`` describe.

    Returns one value for every directive that stores one, in order:
    integers for ``d``, ``i``, ``u``, ``o``, ``x``, ``X`` and ``p`` (``None``
    for a ``(nil)`` pointer), floats for ``f``, ``e``, ``E``, ``g``, ``G``,
    strings for ``c`` and ``s``, and for ``n`` the number of characters read
    so far. Directives marked with ``*`` are read but not stored. Both
    strings end at their first NUL character.

    Raises EOFError when ``text`` holds nothing but white space, and
    FormatError for a malformed directive.
    """
    text = text.partition("\0")[0]
    format = format.partition("\0")[0]
    if not any(ch > " " for ch in text):
        raise EOFError("input holds nothing to read")
    scanner = _Scanner(text)
    i = 0
    while i < len(format):
        ch = format[i]
        if ch != "%":
            scanner.match_literal(ch)
            i += 1
        elif format.startswith("%%", i):
            scanner.skip_past_percent()
            i += 2
        else:
            flags_text, conversion, i = _split_directive(format, i)
            scanner.convert(_parse_directive(flags_text, conversion))
    return scanner.values