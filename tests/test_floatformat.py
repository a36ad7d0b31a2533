import math
import struct

import pytest

from stringplus.floatformat import format_float, format_nonfinite
from stringplus.spec import FormatSpec, parse_spec, split_directive


def _f32(x):
    return struct.unpack("f", struct.pack("f", x))[0]


def fmt(directive, value):
    flags_text, conversion, _ = split_directive(directive, 0)
    return format_float(parse_spec(flags_text, conversion), value)


@pytest.mark.parametrize(
    "directive, value",
    [
        ("%f", _f32(21.21)),
        ("%- .15f", _f32(21.21)),
        ("%-+15f", 21.322),
        ("%+15f", 21.322),
        ("%-+15.f", 21.2121212121),
        ("%.2f", 3.14159),
        ("%.2f", -3.14159),
        ("%+.1f", 2.34),
        ("%10.3f", 2.71828),
        ("%-10.3f", 2.71828),
        ("%010.3f", 2.71828),
        ("%+10.3f", 2.71828),
        ("%#.0f", 3.2),
        ("%#f", 21.0),
        ("%e", 12345.678),
        ("%E", 0.000123),
        ("%-+15e", 0.000322322),
        ("%-+10.E", 33.2121212121),
        ("%+10.e", 33.2121212121),
        ("%.0e", 3.2),
        ("%#e", 21.0),
        ("%-20e", 12345.678),
        ("%g", 0.5),
        ("%g", 0.0),
        ("%- .10g", _f32(21.322)),
        ("%-+15g", 22.322322),
        ("%-+10.G", 33.2121212121),
        ("%+10.G", 33.2121212121),
        ("%20.10g", _f32(21.322)),
        ("%#g", 21.000001),
    ],
)
def test_matches_reference_formatting(directive, value):
    assert fmt(directive, value) == directive % value


@pytest.mark.parametrize("width", range(5, 16))
def test_right_aligned_result_fills_width(width):
    result = fmt(f"%{width}.2f", 3.5)
    assert len(result) == width
    assert result.endswith("3.50")


def test_zero_flag_pads_with_zeros():
    assert fmt("%08.2f", 3.5) == "%08.2f" % 3.5


def test_zero_precision_does_not_round():
    assert fmt("%.0f", 2.7) == "2"


def test_ten_is_not_scaled_for_exponent():
    assert fmt("%e", 10.0) == "10.000000e+00"


def test_infinity_loses_its_sign():
    assert fmt("%f", -math.inf) == "inf"
    assert fmt("%f", math.inf) == "inf"


def test_nan():
    assert fmt("%f", math.nan) == "nan"


def test_nonfinite_keeps_sign_when_given_directly():
    assert format_nonfinite(FormatSpec("f"), -math.inf) == "-inf"


def test_nonfinite_width_pads_like_string():
    assert format_nonfinite(FormatSpec("f", width=5), math.nan) == "%5f" % math.nan


def test_nonfinite_precision_truncates_with_width():
    result = format_nonfinite(FormatSpec("f", width=5, precision=1), math.inf)
    assert len(result) == 5
    assert result.strip() == "i"


def test_rejects_integer_conversion():
    with pytest.raises(ValueError):
        format_float(FormatSpec("d"), 1.0)


def test_rejects_negative_precision():
    with pytest.raises(ValueError):
        format_float(FormatSpec("f", precision=-1), 1.0)