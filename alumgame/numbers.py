"""Integer parsing and formatting helpers with C integer semantics."""

from __future__ import annotations

_WHITESPACE = " \n\t\v\r\f"
_DIGITS = "0123456789ABCDEF"
_LONG_LIMIT = 9223372036854775807
_U64_MASK = (1 << 64) - 1


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, returning a 32-bit signed value.

    Leading whitespace and one sign are accepted; a second sign yields 0.
    A magnitude reaching 2**63 - 1 yields -1 when positive and 0 when negative.
    """
    i = 0
    n = len(text)
    while i < n and text[i] in _WHITESPACE:
        i += 1
    minus = 1
    if i < n and text[i] == "-":
        minus = -1
    if i < n and text[i] in "+-":
        i += 1
    if i < n and text[i] in "+-":
        return 0
    num = 0
    while i < n and "0" <= text[i] <= "9":
        num = (num * 10 + ord(text[i]) - ord("0")) & _U64_MASK
        i += 1
        if num >= _LONG_LIMIT:
            return -1 if minus == 1 else 0
    return _to_int32(num * minus)


def _in_base(c: str, base: int) -> bool:
    if "0" <= c <= "9":
        return True
    if base <= 10:
        return False
    last = base - 10
    return ord("A") <= ord(c) <= ord("A") + last or ord("a") <= ord(c) <= ord("a") + last


def _digit_value(c: str) -> int:
    if "A" <= c <= "Z":
        return ord(c) - ord("A") + 10
    if c >= "a":
        return ord(c) - ord("a") + 10
    return ord(c) - ord("0")


def atoi_base(text: str, base: int) -> int:
    """Parse a number in the given base after a two-character prefix.

    The first two characters (such as ``0x``) are skipped unconditionally.
    Bases outside 2..36 yield 0.
    """
    if base <= 1 or base > 36:
        return 0
    rest = text[2:]
    i = 0
    n = len(rest)
    while i < n and rest[i] in _WHITESPACE:
        i += 1
    minus = -1 if i < n and rest[i] == "-" else 1
    if i < n and rest[i] in "+-":
        i += 1
    value = 0
    while i < n and _in_base(rest[i], base):
        value = _to_int32(value * base + _digit_value(rest[i]))
        i += 1
    return _to_int32(value * minus)


def itoa(n: int) -> str:
    """Decimal text of an integer."""
    return str(n)


def itoa_base(num: int, base: int, upper: bool) -> str:
    """Text of an unsigned 64-bit value in a base from 2 to 16."""
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    num &= _U64_MASK
    if num == 0:
        return "0"
    digits = []
    while num:
        num, rem = divmod(num, base)
        digits.append(_DIGITS[rem])
    result = "".join(reversed(digits))
    return result if upper else result.lower()


def rgb_to_int(red: int, green: int, blue: int) -> int:
    """Pack three colour channels, each masked to 8 bits, into 0xRRGGBB."""
    return (red & 0xFF) << 16 | (green & 0xFF) << 8 | (blue & 0xFF)


def rgb_smooth(t: float, k: int) -> int:
    """Smooth colour gradient for a parameter t in [0, 1] and a scale k."""
    return rgb_to_int(
        int(9 * k * (1 - t) * t * t * t * 255),
        int(15 * k * (1 - t) * (1 - t) * t * t * 255),
        int(8.5 * k * (1 - t) * (1 - t) * (1 - t) * t * 255),
    )


def format_bits(octet: int) -> str:
    """The low eight bits of a value, most significant first."""
    return format(octet & 0xFF, "08b")