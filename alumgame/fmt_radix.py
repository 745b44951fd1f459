"""Octal, hexadecimal and pointer conversions (``%o``, ``%O``, ``%x``, ``%X``, ``%p``)."""

from __future__ import annotations

from typing import List

from alumgame.fmtspec import ArgList, Rendered, Spec, cast_unsigned
from alumgame.numbers import itoa_base

_U64_MASK = (1 << 64) - 1


def _pad(char: str, n: int) -> str:
    return char * max(n, 0)


def _octal(spec: Spec, args: ArgList, conv: str) -> Rendered:
    value = cast_unsigned(args.next(), spec, conv)
    digits = itoa_base(value, 8, True)
    width = spec.width
    precision = spec.precision
    prec = precision
    count = 0

    if width > 0:
        width -= len(digits)
    if spec.alternate and value != 0 and not precision:
        width -= 1
        count += 1
    if width and value == 0 and prec == 0 and spec.dot:
        width += 1
    if precision > 0:
        precision -= len(digits)
        if precision > 0:
            width -= precision
    count += max(width, 0) + max(precision, 0)
    trailing = width

    out: List[str] = []
    if not spec.minus and not spec.zero:
        out.append(_pad(" ", width))
        width = 0
    if not spec.minus and ((spec.zero and precision <= 0) or (spec.dot and precision)):
        if spec.alternate and value != 0 and not spec.dot:
            out.append("0")
        out.append(_pad("0", width))
        width = 0
    elif not spec.minus and spec.zero:
        out.append(_pad(" ", width))
        width = 0
    if spec.alternate and value != 0 and precision == 0 and (not spec.zero or spec.minus):
        digits = "0" + digits
        count -= 1
    out.append(_pad("0", precision))

    if not (value == 0 and prec == 0 and spec.dot and not spec.alternate):
        out.append(digits)
        count += len(digits)
        if spec.minus:
            out.append(_pad(" ", trailing))
    return Rendered("".join(out).encode("ascii"), count)


def _hexadecimal(spec: Spec, args: ArgList, conv: str, upper: bool) -> Rendered:
    value = cast_unsigned(args.next(), spec, conv)
    digits = itoa_base(value, 16, upper)
    prefix = "0X" if upper else "0x"
    width = spec.width
    precision = spec.precision
    prec = precision
    count = 0

    if width > 0:
        width -= len(digits)
    if spec.alternate and value != 0:
        width -= 2
        count += 2
    if width and value == 0 and prec == 0 and spec.dot:
        width += 1
    if precision > 0:
        precision -= len(digits)
        if precision > 0:
            width -= precision
    count += max(width, 0) + max(precision, 0)
    trailing = width

    out: List[str] = []
    if not spec.minus and not spec.zero:
        out.append(_pad(" ", width))
        width = 0
    if not spec.minus and ((spec.zero and precision <= 0) or (spec.dot and precision)):
        if spec.alternate and value != 0:
            out.append(prefix)
        out.append(_pad("0", width))
        width = 0
    elif not spec.minus and spec.zero:
        out.append(_pad(" ", width))
        width = 0
    out.append(_pad("0", precision))

    if value == 0 and prec == 0 and spec.dot:
        return Rendered("".join(out).encode("ascii"), count)
    if spec.alternate and value != 0 and not spec.dot and (not spec.zero or spec.minus):
        digits = prefix + digits
        count -= 2
    out.append(digits)
    count += len(digits)
    if spec.minus:
        out.append(_pad(" ", trailing))
    return Rendered("".join(out).encode("ascii"), count)


def convert_o(spec: Spec, args: ArgList, conv: str) -> Rendered:
    """Render the next argument as an unsigned octal number."""
    return _octal(spec, args, conv)


def convert_big_o(spec: Spec, args: ArgList, conv: str) -> Rendered:
    """Render the next argument as an unsigned long octal number."""
    return _octal(spec, args, conv)


def convert_x(spec: Spec, args: ArgList, conv: str) -> Rendered:
    """Render the next argument in lower-case hexadecimal."""
    return _hexadecimal(spec, args, conv, upper=False)


def convert_big_x(spec: Spec, args: ArgList, conv: str) -> Rendered:
    """Render the next argument in upper-case hexadecimal."""
    return _hexadecimal(spec, args, conv, upper=True)


def convert_p(spec: Spec, args: ArgList) -> Rendered:
    """Render the next argument as a pointer: ``0x`` and lower-case hexadecimal."""
    raw = args.next()
    if not isinstance(raw, int):
        raise TypeError(f"expected an integer argument, got {type(raw).__name__}")
    value = raw & _U64_MASK
    digits = itoa_base(value, 16, False)
    width = spec.width
    precision = spec.precision
    count = 0

    if width > 0:
        width -= len(digits) + 2
    if width and value == 0 and precision == 0 and spec.dot:
        width += 1
    if precision > 0:
        if value != 0:
            precision -= len(digits)
        if precision > 0:
            width -= precision
    count += max(width, 0) + max(precision, 0)
    trailing = width

    out: List[str] = []
    if not spec.minus and not spec.zero:
        out.append(_pad(" ", width))
        width = 0
    if value == 0 and spec.dot:
        out.append("0x")
        out.append(_pad("0", precision))
        return Rendered("".join(out).encode("ascii"), count + 2)
    out.append("0x")
    out.append(_pad("0", precision))
    # The precision zeros are always used up here, so only the zero flag matters.
    if not spec.minus and spec.zero:
        out.append(_pad("0", width))
    out.append(digits)
    count += len(digits) + 2
    if spec.minus:
        out.append(_pad(" ", trailing))
    return Rendered("".join(out).encode("ascii"), count)