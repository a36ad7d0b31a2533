import pytest

from stringplus.intformat import (
    format_char,
    format_signed,
    format_string,
    format_unsigned,
)
from stringplus.spec import parse_spec, split_directive


def spec_for(directive, *stars):
    flags, conversion, _ = split_directive(directive, 0)
    return parse_spec(flags, conversion, iter(stars))


def test_signed_width_wins_over_smaller_precision():
    result = format_signed(spec_for("%5.2d"), 3)
    assert len(result) == 5
    assert result.strip() == "3"
    assert "0" not in result


def test_signed_short_wraps():
    assert int(format_signed(spec_for("%hd"), 40000)) == 40000 - 2**16


def test_signed_int_wraps():
    assert int(format_signed(spec_for("%d"), 2**31)) == -(2**31)


def test_signed_long_keeps_64_bits():
    assert int(format_signed(spec_for("%ld"), 2**40)) == 2**40


def test_unsigned_star_width():
    assert format_unsigned(spec_for("%-*lX", 15), 21) == "%-*X" % (15, 21)


def test_octal_alternate_form():
    assert format_unsigned(spec_for("%#o"), 14) == "016"


def test_alternate_form_has_no_effect_on_zero():
    assert format_unsigned(spec_for("%#x"), 0) == format_unsigned(spec_for("%x"), 0)
    assert format_unsigned(spec_for("%#o"), 0) == format_unsigned(spec_for("%o"), 0)


def test_plus_and_space_ignored_for_unsigned():
    plain = format_unsigned(spec_for("%u"), 7)
    assert format_unsigned(spec_for("%+u"), 7) == plain
    assert format_unsigned(spec_for("% u"), 7) == plain


@pytest.mark.parametrize(
    "directive, reference, stars",
    [
        ("%p", "%#x", ()),
        ("%15p", "%#15x", ()),
        ("%-15p", "%-#15x", ()),
        ("%*p", "%#*x", (5,)),
    ],
)
def test_pointer(directive, reference, stars):
    address = 0x7FFD1000
    assert format_unsigned(spec_for(directive, *stars), address) == reference % (
        *stars,
        address,
    )


def test_pointer_is_64_bits():
    assert format_unsigned(spec_for("%p"), -1) == "%#x" % (2**64 - 1)


@pytest.mark.parametrize("value", [0, None])
def test_null_pointer(value):
    assert format_unsigned(spec_for("%p"), value) == "(nil)"


@pytest.mark.parametrize(
    "directive, value", [("%c", 50), ("%10c", 55), ("%-20c", 55), ("%3c", "x")]
)
def test_char_matches_printf(directive, value):
    assert format_char(spec_for(directive), value) == directive % value


def test_char_truncated_to_byte():
    assert format_char(spec_for("%c"), 0x132) == "%c" % 0x32


def test_char_zero_padding():
    assert format_char(spec_for("%03c"), "x") == "00x"


def test_char_rejects_long_text():
    with pytest.raises(ValueError):
        format_char(spec_for("%c"), "ab")


@pytest.mark.parametrize(
    "directive", ["%s", "%20s", "%-12s", "%.3s", "%10.3s", "%-10.3s", "%3s"]
)
def test_string_matches_printf(directive):
    text = "School 21"
    assert format_string(spec_for(directive), text) == directive % text


def test_string_ends_at_nul():
    assert format_string(spec_for("%s"), "ab\0cd") == "ab"


def test_string_negative_precision_ignored():
    assert format_string(spec_for("%.*s", -1), "hello") == "hello"


def test_string_width_invariant():
    result = format_string(spec_for("%-8s"), "abc")
    assert len(result) == 8
    assert result.rstrip() == "abc"