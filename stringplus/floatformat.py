"""Formatting of floating-point values for printf directives."""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction

from .intformat import format_string
from .spec import FormatSpec

__all__ = ["format_float", "format_nonfinite"]

_CONVERSIONS = "feEgG"
_DEFAULT_PRECISION = 6
_SCALE_LIMIT = Fraction(0.999999999999999)


@dataclass(frozen=True)
class _Exponent:
    power: int
    positive: bool

    def render(self, upper: bool) -> str:
        letter = "E" if upper else "e"
        sign = "+" if self.positive else "-"
        digits = f"0{self.power}" if self.power <= 9 else str(self.power)
        return f"{letter}{sign}{digits}"


def _scale(number: Fraction) -> tuple[Fraction, _Exponent]:
    """Bring a non-negative number near the range [1, 10] and count the steps."""
    if number == 0:
        return number, _Exponent(0, True)
    power = 0
    if number >= 1:
        while number > 10:
            number /= 10
            power += 1
        return number, _Exponent(power, True)
    while number < _SCALE_LIMIT:
        number *= 10
        power += 1
    return number, _Exponent(power, False)


def _carry(digits: list[int], last: int) -> None:
    """Propagate a rounding carry leftwards from position ``last``."""
    carry = True
    for i in reversed(range(last)):
        if digits[i + 1] != 9 and not carry:
            break
        digits[i] += 1
        if digits[i + 1] == 9:
            digits[i + 1] = 0
        carry = digits[i] == 10
        if carry:
            digits[i] = 0


def _split_digits(number: Fraction, accuracy: int) -> tuple[str, str]:
    """Return the integral digits and ``accuracy`` rounded fractional digits."""
    whole = int(number)
    rest = number - whole
    digits = []
    for _ in range(accuracy + 1):
        rest *= 10
        digit = int(rest)
        digits.append(digit)
        rest -= digit
    if accuracy and digits[accuracy] >= 5:
        last = accuracy - 1
        digits[last] += 1
        if digits[last] == 10:
            digits[last] = 0
            _carry(digits, last)
    return str(whole), "".join(map(str, digits[:accuracy]))


def _trailing_zeros(accuracy: int, integral_len: int, fraction: str) -> int:
    available = accuracy - (integral_len + 1)
    if available <= 0:
        return 0
    shown = fraction[:available]
    return len(shown) - len(shown.rstrip("0"))


@dataclass
class _Parts:
    spec: FormatSpec
    sign: str
    accuracy: int
    general: bool
    integral: str
    fraction: str
    exponent: _Exponent | None

    def pad(self, count: int) -> str:
        return ("0" if self.spec.zero else " ") * max(count, 0)

    def _general_digits(self, width: int) -> tuple[str, int]:
        count = self.accuracy - len(self.integral)
        width -= len(self.integral)
        if not self.spec.sharp and count > 0:
            count = len(self.fraction[:count].rstrip("0"))
        text = self.integral
        if count > 0 or self.spec.sharp:
            text += "."
            width -= 1
        shown = self.fraction[: max(count, 0)]
        return text + shown, width - len(shown)

    def body(self, width: int) -> tuple[str, int]:
        if self.general:
            text, width = self._general_digits(width)
        else:
            dot = "." if self.accuracy or self.spec.sharp else ""
            text = self.integral + dot + self.fraction
        if self.exponent is not None:
            text += self.exponent.render(self.spec.upper)
        return text, width

    @property
    def fixed_length(self) -> int:
        return len(self.integral) + self.accuracy + 1


def _plain(parts: _Parts) -> str:
    spec = parts.spec
    out = []
    if spec.space and not spec.plus:
        out.append(" ")
    out.append(parts.sign)
    out.append(parts.body(0)[0])
    return "".join(out)


def _left(parts: _Parts, width: int) -> str:
    spec = parts.spec
    out = []
    if spec.space and not spec.plus:
        out.append(" ")
        width -= 1
    if parts.sign:
        out.append(parts.sign)
        if parts.accuracy or parts.general:
            width -= 1
    body, width = parts.body(width)
    out.append(body)
    if parts.general:
        out.append(parts.pad(width))
    else:
        out.append(parts.pad(width - parts.fixed_length))
    return "".join(out)


def _right(parts: _Parts, width: int) -> str:
    spec = parts.spec
    out = []
    if spec.space and not spec.plus:
        out.append(" ")
        width -= 1
    if (spec.plus and parts.accuracy) or parts.general:
        width -= 1
    if spec.zero:
        out.append(parts.sign)
    if parts.general:
        if spec.sharp or parts.accuracy <= len(parts.integral):
            out.append(parts.pad(width - (parts.accuracy or 1)))
        else:
            width += 1
            zeros = _trailing_zeros(
                parts.accuracy, len(parts.integral), parts.fraction
            )
            out.append(parts.pad(width - (parts.accuracy - zeros)))
    else:
        out.append(parts.pad(width - parts.fixed_length))
    if not spec.zero:
        out.append(parts.sign)
    out.append(parts.body(width)[0])
    return "".join(out)


def format_nonfinite(spec: FormatSpec, value: float) -> str:
    """Format an infinity or NaN, padded like a ``%s`` directive."""
    if math.isnan(value):
        text = "nan"
    elif value < 0:
        text = "-inf"
    else:
        text = "inf"
    if spec.width is not None:
        return format_string(spec, text)
    return text


def format_float(spec: FormatSpec, value: float) -> str:
    """Format a ``%f``, ``%e``, ``%E``, ``%g`` or ``%G`` directive.

    Digits are produced from the exact binary value and rounded on the one
    digit past the precision; an infinity is printed without its sign.
    """
    if spec.conversion not in _CONVERSIONS:
        raise ValueError(f"not a floating-point conversion: {spec.conversion!r}")
    accuracy = _DEFAULT_PRECISION if spec.precision is None else spec.precision
    if accuracy < 0:
        raise ValueError("precision must not be negative")
    number = float(value)
    negative = number < 0
    magnitude = -number if negative else number
    if not math.isfinite(magnitude):
        return format_nonfinite(spec, magnitude)

    general = spec.conversion in "gG"
    exponential = spec.conversion in "eE"
    exact = Fraction(magnitude)
    if general:
        _, probe = _scale(exact)
        exponential = (
            not probe.positive and probe.power > 4
        ) or probe.power >= accuracy

    width = spec.width or 0
    exponent = None
    if exponential:
        exact, exponent = _scale(exact)
        width -= 4

    integral, fraction = _split_digits(exact, accuracy)
    sign = "-" if negative else ("+" if spec.plus else "")
    parts = _Parts(spec, sign, accuracy, general, integral, fraction, exponent)
    if spec.width is not None and width > parts.fixed_length:
        return _left(parts, width) if spec.minus else _right(parts, width)
    return _plain(parts)