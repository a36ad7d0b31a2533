import math
import struct

import pytest

from stringplus.spec import FormatError
from stringplus.sprintf import sprintf


def _f32(x):
    return struct.unpack("f", struct.pack("f", x))[0]


@pytest.mark.parametrize(
    "directive, value",
    [
        ("%c", 50),
        ("%10c", 55),
        ("%-20c", 55),
        ("%- .5hd", 20),
        ("%5d", 12456),
        ("%+5d", 12456),
        ("%-+10ld", 543256789),
        ("%- .15f", _f32(21.21)),
        ("%-+15lf", 21.322),
        ("%-+15.Lf", 21.2121212121),
        ("%+15lf", 21.322),
        ("%lf", math.inf),
        ("%lf", math.nan),
        ("%f", _f32(21.21)),
        ("%s", "School 21"),
        ("%20s", "School 21"),
        ("%- .10g", _f32(21.322)),
        ("%-+15lg", 22.322322),
        ("%-+10.LG", 33.2121212121),
        ("%+10.LG", 33.2121212121),
        ("%20.10g", _f32(21.322)),
        ("%-+15le", 0.000322322),
        ("%-+10.LE", 33.2121212121),
        ("%+10.Le", 33.2121212121),
        ("%5x", 5),
        ("%05o", 5),
        ("%5o", 5),
        ("%010lo", 21),
        ("%#x", 14),
        ("%#X", 14),
        ("%#f", 21.0),
        ("%#e", 21.0),
        ("%#E", 21.0),
        ("%#g", 21.000001),
    ],
)
def test_single_directive_matches_reference(directive, value):
    assert sprintf(directive, value) == directive % value


@pytest.mark.parametrize(
    "directive, value, wrapped",
    [
        ("%-.5hu", -20, 65536 - 20),
        ("%5u", -1, 2**32 - 1),
        ("%-10lu", -5, 2**64 - 5),
        ("%-.5hx", -5, 65536 - 5),
        ("%-.5ho", -5, 65536 - 5),
    ],
)
def test_unsigned_values_wrap_to_their_type(directive, value, wrapped):
    reference = directive.replace("h", "").replace("l", "")
    assert sprintf(directive, value) == reference % wrapped


def test_star_arguments():
    assert sprintf("%- .*e", 10, _f32(21.322)) == "%- .*e" % (10, _f32(21.322))
    assert sprintf("%-*lX", 15, 21) == "%-*X" % (15, 21)


def test_sharp_octal_has_leading_zero():
    assert sprintf("%#o", 14) == "016"


def test_pointer_formats():
    address = 0x1234ABCD
    assert sprintf("%-15p", address) == f"{address:<#15x}"
    assert sprintf("%15p", address) == f"{address:>#15x}"
    assert sprintf("%*p", 5, address) == f"{address:#x}"
    assert sprintf("%p", address) == f"{address:#x}"


def test_percent_and_literal_text():
    assert sprintf("%% kek %d", 21) == "%% kek %d" % 21
    assert sprintf("%% kek %lf", 21.2121) == "%% kek %f" % 21.2121


def test_mixed_directives():
    fmt = "%d-%s-%c-%.2f"
    args = (7, "ab", 65, 1.25)
    assert sprintf(fmt, *args) == fmt % args


def test_text_without_directives_is_unchanged():
    assert sprintf("plain text") == "plain text"


def test_format_ends_at_nul():
    assert sprintf("abc\0%d", 5) == "abc"


def test_result_ends_at_nul_character():
    assert sprintf("ab%ccd", 0) == "ab"


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        sprintf("%d")


def test_unterminated_directive_raises():
    with pytest.raises(FormatError):
        sprintf("100%")


def test_space_after_plus_raises():
    with pytest.raises(FormatError):
        sprintf("%+ d", 1)


def test_zero_after_minus_raises():
    with pytest.raises(FormatError):
        sprintf("%-05d", 1)