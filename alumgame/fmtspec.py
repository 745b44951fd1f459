"""Conversion specifications for the formatted-output engine.

A specification is what follows a ``%`` in a format string: flags, a field
width, a precision, a length modifier and a conversion character. This
module parses it, holds the argument list it draws from, and provides the
integer casts and length helpers the individual conversions share.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

_CONVERSIONS = frozenset("sSpdDioOuUxXcC")
_U64_MASK = (1 << 64) - 1


class Length(enum.Enum):
    """Length modifier of a conversion."""

    NONE = 0
    LONG = 1
    CHAR = 2
    SHORT = 3
    LONGLONG = 4
    INTMAX = 5
    SIZE = 6


@dataclass
class Spec:
    """Flags, width, precision and length of one conversion.

    ``other`` marks a specification that ended on a character which is not
    a known conversion.
    """

    alternate: bool = False
    minus: bool = False
    plus: bool = False
    zero: bool = False
    space: bool = False
    star: bool = False
    width: int = 0
    precision: int = 0
    dot: bool = False
    length: Length = Length.NONE
    other: bool = False


@dataclass(frozen=True)
class Rendered:
    """Bytes produced by a conversion and the count it reports.

    The count can differ from ``len(data)``: some conversions account for
    padding they do not write.
    """

    data: bytes
    count: int


class ArgList:
    """The arguments a format string consumes, taken in order."""

    def __init__(self, values: Iterable[object]) -> None:
        self._values: List[object] = list(values)
        self._index = 0

    def next(self) -> object:
        """The next unused argument."""
        if self._index >= len(self._values):
            raise IndexError("the format needs more arguments than were given")
        value = self._values[self._index]
        self._index += 1
        return value


def _int_arg(value: object) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return int(value)


def _wrap_signed(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def is_conversion(c: str) -> bool:
    """True for the characters that end a specification as a known conversion."""
    return c in _CONVERSIONS


def _digit_run(fmt: str, i: int) -> Tuple[int, int]:
    start = i
    while i < len(fmt) and "0" <= fmt[i] <= "9":
        i += 1
    return (int(fmt[start:i]) if i > start else 0), i


def parse_spec(fmt: str, pos: int, args: ArgList) -> Tuple[Spec, int]:
    """Parse the specification starting at ``pos``, just after a ``%``.

    Returns the specification and the index of the character that selects
    the conversion; that index equals ``len(fmt)`` when the format ends
    inside the specification. Widths and precisions given as ``*`` are
    taken from ``args``.
    """
    if pos >= len(fmt):
        raise ValueError("the format ends where a conversion was expected")

    def at(k: int) -> str:
        return fmt[k] if 0 <= k < len(fmt) else "\0"

    spec = Spec()
    i = pos
    while not is_conversion(at(i)):
        c = at(i)
        if c == "-":
            spec.minus = True
            i += 1
        elif c == "+":
            spec.plus = True
            i += 1
        elif c == " ":
            spec.space = True
            if at(i + 1) == " ":
                while at(i) == " ":
                    i += 1
            else:
                i += 1
        elif c == "#":
            spec.alternate = True
            i += 1
        elif c == "0":
            spec.zero = True
            i += 1
        elif c == "*":
            i += 1
            spec.star = True
            value = _wrap_signed(_int_arg(args.next()), 32)
            if spec.dot:
                spec.precision = value
            else:
                spec.width = value
        elif "1" <= c <= "9":
            spec.width, i = _digit_run(fmt, i)
        elif c == ".":
            spec.dot = True
            spec.precision, i = _digit_run(fmt, i + 1)
        elif c == "l":
            spec.length = Length.LONG
            i += 1
        elif c == "h" and at(i + 1) == "h":
            spec.length = Length.CHAR
            i += 2
        elif c == "h":
            spec.length = Length.SHORT
            i += 1
        elif c == "j":
            spec.length = Length.INTMAX
            i += 1
        elif c == "z":
            spec.length = Length.SIZE
            i += 1
        elif c == "%":
            return spec, i
        elif at(i - 1) != "%":
            spec.other = True
            if spec.width or spec.minus:
                return spec, i
            return spec, i - 1
        else:
            i += 1
    return spec, i


def int_length(num: int) -> int:
    """Number of characters in the decimal text of num, sign included."""
    return len(str(num))


def uchar_length(c: Union[str, int]) -> int:
    """Number of UTF-8 bytes for a code point; 0 above U+10FFFF."""
    code = ord(c) if isinstance(c, str) else c
    if code <= 0x7F:
        return 1
    if code <= 0x7FF:
        return 2
    if code <= 0xFFFF:
        return 3
    if code <= 0x10FFFF:
        return 4
    return 0


def _codes(s: Union[str, Sequence[int]]) -> List[int]:
    codes = []
    for ch in s:
        code = ord(ch) if isinstance(ch, str) else ch
        if code == 0:
            break
        codes.append(code)
    return codes


def ustr_length(s: Union[str, Sequence[int]]) -> int:
    """UTF-8 byte length of a wide string, up to its first NUL."""
    return sum(uchar_length(code) for code in _codes(s))


def precision_length(s: Union[str, Sequence[int]], length: int) -> int:
    """Bytes of whole characters from the first ``length`` characters that fit in ``length`` bytes."""
    total = 0
    kept = 0
    for code in _codes(s)[:max(length, 0)]:
        size = uchar_length(code)
        total += size
        if total <= length:
            kept += size
    return kept


def cast_signed(value: object, spec: Spec, conv: str) -> int:
    """Reduce an argument to the signed type its length modifier selects."""
    number = _int_arg(value)
    if spec.length is Length.LONG or conv == "D":
        return _wrap_signed(number, 64)
    if spec.length is Length.CHAR:
        return _wrap_signed(number, 8)
    if spec.length is Length.SHORT:
        return _wrap_signed(number, 16)
    if spec.length in (Length.LONGLONG, Length.INTMAX, Length.SIZE):
        return _wrap_signed(number, 64)
    return _wrap_signed(number, 32)


def cast_unsigned(value: object, spec: Spec, conv: str) -> int:
    """Reduce an argument to the unsigned type its length modifier selects."""
    number = _int_arg(value)
    if spec.length is Length.LONG or conv in ("U", "O"):
        return _wrap_unsigned(number, 64)
    if spec.length is Length.CHAR:
        return _wrap_unsigned(number, 8)
    if spec.length is Length.SHORT:
        return _wrap_unsigned(number, 16)
    if spec.length in (Length.LONGLONG, Length.INTMAX, Length.SIZE):
        return _wrap_unsigned(number, 64)
    return _wrap_unsigned(number, 32)


def utoa(n: int) -> str:
    """Decimal text of a value taken as an unsigned 64-bit integer."""
    return str(n & _U64_MASK)