"""Signed and unsigned decimal conversions (``%d``, ``%i``, ``%D``, ``%u``, ``%U``)."""

from __future__ import annotations

from typing import List

from alumgame.fmtspec import (
    ArgList,
    Rendered,
    Spec,
    cast_signed,
    cast_unsigned,
    int_length,
    utoa,
)

_INT64_MIN = -(1 << 63)


def _negate64(value: int) -> int:
    # Negating the most negative 64-bit value leaves it unchanged.
    return value if value == _INT64_MIN else -value


def _pad(char: str, n: int) -> str:
    return char * max(n, 0)


def convert_d(spec: Spec, args: ArgList, conv: str) -> Rendered:
    """Render the next argument as a signed decimal."""
    value = cast_signed(args.next(), spec, conv)
    minus = spec.minus
    width = spec.width
    precision = spec.precision
    prec = precision

    if spec.star and width < 0:
        minus = True
        width = -width
    if width > 0:
        width -= int_length(value)
    if width and value == 0 and prec == 0 and spec.dot:
        width += 1
    if precision > 0:
        precision -= int_length(value)
        if value < 0:
            precision += 1
        if precision > 0:
            width -= precision
    if value >= 0 and (spec.plus or (spec.space and spec.zero and width > 0)):
        width -= 1

    out: List[str] = []
    count = max(width, 0) + max(precision, 0)
    trailing = width
    if value >= 0 and spec.space and (width == 0 or (spec.zero and width > 0)):
        out.append(" ")
        count += 1
    if not minus and not spec.zero:
        out.append(_pad(" ", width))
    if value >= 0 and spec.plus:
        out.append("+")
        count += 1
    if not minus and spec.zero and precision <= 0:
        if value < 0:
            out.append("-")
            value = _negate64(value)
            count += 1
        out.append(_pad("0", width))
    elif not minus and spec.zero:
        out.append(_pad(" ", width))
    if value < 0 and value != _INT64_MIN:
        out.append("-")
        value = -value
        count += 1
    out.append(_pad("0", precision))

    if not (value == 0 and prec == 0 and spec.dot):
        out.append(str(value))
        count += int_length(value)
        if minus:
            out.append(_pad(" ", trailing))
    return Rendered("".join(out).encode("ascii"), count)


def convert_u(spec: Spec, args: ArgList, conv: str) -> Rendered:
    """Render the next argument as an unsigned decimal."""
    value = cast_unsigned(args.next(), spec, conv)
    width = spec.width
    precision = spec.precision
    prec = precision

    if width > 0:
        width -= int_length(value)
    if width and value == 0 and prec == 0 and spec.dot:
        width += 1
    if precision > 0:
        precision -= int_length(value)
        if precision > 0:
            width -= precision

    out: List[str] = []
    count = max(width, 0) + max(precision, 0)
    trailing = width
    if not spec.minus and not spec.zero:
        out.append(_pad(" ", width))
    if not spec.minus and spec.zero and precision <= 0:
        out.append(_pad("0", width))
    elif not spec.minus and spec.zero:
        out.append(_pad(" ", width))
    out.append(_pad("0", precision))

    if not (value == 0 and prec == 0 and spec.dot):
        out.append(utoa(value))
        count += int_length(value)
        if spec.minus:
            out.append(_pad(" ", trailing))
    return Rendered("".join(out).encode("ascii"), count)