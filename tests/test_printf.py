import io

import pytest

from alumgame.fmtspec import Rendered, Spec
from alumgame.printf import convert_other, convert_percent, format_string, printf


@pytest.mark.parametrize(
    "fmt,value",
    [
        ("%d", 42),
        ("%5d", 42),
        ("%-5d|", 42),
        ("%05d", 42),
        ("%+d", 42),
        ("%d", -17),
        ("%5.3d", 42),
        ("%u", 7),
        ("%x", 255),
        ("%X", 255),
        ("%o", 8),
        ("%#x", 255),
        ("%s", "hi"),
        ("%5s", "hi"),
        ("%-5s|", "hi"),
        ("%.1s", "hi"),
        ("%c", "A"),
    ],
)
def test_common_conversions_agree_with_standard_formatting(fmt, value):
    result = format_string(fmt, value)
    assert result.data == (fmt % value).encode()
    assert result.count == len(result.data)


def test_several_conversions_in_one_format():
    fmt = "%s has %d rows"
    result = format_string(fmt, "board", 3)
    assert result.data == (fmt % ("board", 3)).encode()


def test_double_percent():
    assert format_string("%%").data == b"%"


def test_trailing_percent_ends_output():
    assert format_string("100%").data == b"100"


def test_missing_argument_raises():
    with pytest.raises(IndexError):
        format_string("%d")


def test_unknown_conversion_prints_the_character():
    assert format_string("%k").data == b"k"


def test_unknown_conversion_with_width():
    result = format_string("%5k")
    assert len(result.data) == 5
    assert result.data.endswith(b"k")
    assert result.data.startswith(b" ")


def test_printf_to_binary_stream():
    out = io.BytesIO()
    count = printf("%d-%s", 12, "ab", out=out)
    assert out.getvalue() == format_string("%d-%s", 12, "ab").data
    assert count == len(out.getvalue())


def test_printf_to_text_stream():
    out = io.StringIO()
    printf("row %d", 5, out=out)
    assert out.getvalue() == "row %d" % 5


def test_percent_plain():
    assert convert_percent(Spec()) == Rendered(b"%", 1)


def test_percent_right_aligned():
    result = convert_percent(Spec(width=4))
    assert result.data.endswith(b"%")
    assert len(result.data) == 4
    assert result.count == 4


def test_percent_left_aligned():
    result = convert_percent(Spec(width=4, minus=True))
    assert result.data.startswith(b"%")
    assert len(result.data) == 4


def test_percent_with_plus():
    assert convert_percent(Spec(plus=True)).data == b"+%"


def test_other_with_space_flag_hides_character():
    result = convert_other(Spec(space=True), "k")
    assert result.data == b""
    assert result.count == 0


def test_other_zero_padded():
    result = convert_other(Spec(width=3, zero=True), "k")
    assert len(result.data) == 3
    assert result.data.endswith(b"k")
    assert set(result.data[:-1]) == {ord("0")}


def test_other_negative_star_width_left_aligns():
    result = convert_other(Spec(width=-3, star=True), "k")
    assert result.data.startswith(b"k")
    assert len(result.data) == 3
    assert result.count == 3