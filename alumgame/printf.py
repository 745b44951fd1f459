"""Formatted output: expands a format string and writes the resulting bytes."""

from __future__ import annotations

import io
import sys
from typing import IO, List, Optional

from alumgame.fmt_decimal import convert_d, convert_u
from alumgame.fmt_radix import convert_big_o, convert_big_x, convert_o, convert_p, convert_x
from alumgame.fmt_text import convert_c, convert_ls, convert_s
from alumgame.fmtspec import ArgList, Length, Rendered, Spec, parse_spec


def _pad(char: bytes, n: int) -> bytes:
    return char * max(n, 0)


def _encode(text: str) -> bytes:
    return text.encode("utf-8", errors="surrogateescape")


def convert_percent(spec: Spec) -> Rendered:
    """Render a literal percent sign with its padding and optional plus sign."""
    width = spec.width
    count = 0
    if spec.plus:
        width -= 1
    if width > 0:
        width -= 1
        count += width
    trailing = width

    parts: List[bytes] = []
    if not spec.minus and not spec.zero:
        parts.append(_pad(b" ", width))
    if spec.plus:
        parts.append(b"+")
        count += 1
    if not spec.minus and spec.zero:
        parts.append(_pad(b"0", width))
    parts.append(b"%")
    count += 1
    if spec.minus:
        parts.append(_pad(b" ", trailing))
    return Rendered(b"".join(parts), count)


def convert_other(spec: Spec, char: str) -> Rendered:
    """Render a character that is not a known conversion, padded to the field width.

    With the space flag the character itself is left out but its padding is kept.
    """
    minus = spec.minus
    width = spec.width
    if spec.star and width < 0:
        minus = True
        width = -width
    count = 0
    if width > 0:
        width -= 1
        count += width
    trailing = width

    parts: List[bytes] = []
    if not minus and not spec.zero:
        parts.append(_pad(b" ", width))
    elif not minus and spec.precision <= 0:
        parts.append(_pad(b"0", width))
    elif not minus:
        parts.append(_pad(b" ", width))
    if not spec.space:
        encoded = _encode(char)
        parts.append(encoded)
        count += len(encoded)
    if minus:
        parts.append(_pad(b" ", trailing))
    return Rendered(b"".join(parts), count)


def _convert(spec: Spec, args: ArgList, conv: str) -> Optional[Rendered]:
    if conv in ("d", "D", "i"):
        return convert_d(spec, args, conv)
    if conv in ("u", "U"):
        return convert_u(spec, args, conv)
    if conv == "o":
        return convert_o(spec, args, conv)
    if conv == "O":
        return convert_big_o(spec, args, conv)
    if conv == "x":
        return convert_x(spec, args, conv)
    if conv == "X":
        return convert_big_x(spec, args, conv)
    if conv == "p":
        return convert_p(spec, args)
    if conv == "S" or (conv == "s" and spec.length is Length.LONG):
        return convert_ls(spec, args)
    if conv == "s":
        return convert_s(spec, args)
    if conv in ("c", "C"):
        return convert_c(spec, args, conv)
    if conv == "%":
        return convert_percent(spec)
    if spec.other:
        return convert_other(spec, conv)
    return None


def format_string(fmt: str, *args: object) -> Rendered:
    """Expand ``fmt`` with ``args``; returns the bytes and the count reported for them.

    A ``%`` at the very end of the format ends the output.
    """
    arglist = ArgList(args)
    chunks: List[bytes] = []
    count = 0
    i = 0
    n = len(fmt)
    while i < n:
        percent = fmt.find("%", i)
        literal = _encode(fmt[i:] if percent < 0 else fmt[i:percent])
        chunks.append(literal)
        count += len(literal)
        if percent < 0 or percent + 1 >= n:
            break
        spec, pos = parse_spec(fmt, percent + 1, arglist)
        conv = fmt[pos] if pos < n else "\0"
        rendered = _convert(spec, arglist, conv)
        if rendered is not None:
            chunks.append(rendered.data)
            count += rendered.count
        i = pos + 1
    return Rendered(b"".join(chunks), count)


def _emit(out: Optional[IO], data: bytes) -> None:
    stream = sys.stdout if out is None else out
    if isinstance(stream, io.TextIOBase):
        buffer = getattr(stream, "buffer", None)
        if buffer is not None:
            stream.flush()
            buffer.write(data)
            buffer.flush()
        else:
            stream.write(data.decode("utf-8", errors="replace"))
    else:
        stream.write(data)


def printf(fmt: str, *args: object, out: Optional[IO] = None) -> int:
    """Write the expansion of ``fmt`` to ``out`` (standard output by default).

    Returns the count the conversions report.
    """
    rendered = format_string(fmt, *args)
    _emit(out, rendered.data)
    return rendered.count