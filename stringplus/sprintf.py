"""A printf-style formatter producing a string."""

from __future__ import annotations

from .floatformat import format_float
from .intformat import format_char, format_signed, format_string, format_unsigned
from .spec import FormatError, parse_spec, split_directive

__all__ = ["sprintf"]

_FORMATTERS = {
    "c": format_char,
    "d": format_signed,
    "s": format_string,
    **dict.fromkeys("uoxXp", format_unsigned),
    **dict.fromkeys("feEgG", format_float),
}


def sprintf(format: str, *args) -> str:
    """Return ``format`` with each directive replaced by its formatted argument.

    ``%%`` stands for a percent sign. Values for ``*`` widths and precisions
    are taken from ``args`` in order. The result, like the format, ends at
    its first NUL character. Raises FormatError for a malformed directive or
    a missing argument.
    """
    text = format.partition("\0")[0]
    values = iter(args)
    out = []
    pos = 0
    while (start := text.find("%", pos)) >= 0:
        out.append(text[pos:start])
        if text.startswith("%%", start):
            out.append("%")
            pos = start + 2
            continue
        flags_text, conversion, pos = split_directive(text, start)
        spec = parse_spec(flags_text, conversion, values)
        try:
            value = next(values)
        except StopIteration:
            raise FormatError(
                f"missing argument for %{flags_text}{conversion}"
            ) from None
        out.append(_FORMATTERS[conversion](spec, value))
    out.append(text[pos:])
    return "".join(out).partition("\0")[0]