"""Character and string conversions (``%c``, ``%C``, ``%s``, ``%ls``, ``%S``)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import List

from alumgame.fmtspec import (
    ArgList,
    Length,
    Rendered,
    Spec,
    precision_length,
    uchar_length,
    ustr_length,
)
from alumgame.output import encode_char

_NULL_TEXT = "(null)"


def _pad(char: bytes, n: int) -> bytes:
    return char * max(n, 0)


def _char_code(value: object) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    if isinstance(value, int):
        code = value & 0xFFFFFFFF
        return code - (1 << 32) if code & 0x80000000 else code
    raise TypeError(f"expected a character argument, got {type(value).__name__}")


def _byte_string(value: object) -> bytes:
    if value is None:
        text = _NULL_TEXT.encode("ascii")
    elif isinstance(value, str):
        text = value.encode("utf-8", errors="surrogateescape")
    elif isinstance(value, (bytes, bytearray)):
        text = bytes(value)
    else:
        raise TypeError(f"expected a string argument, got {type(value).__name__}")
    return text.split(b"\0", 1)[0]


def _wide_codes(value: object) -> List[int]:
    if value is None:
        value = _NULL_TEXT
    if isinstance(value, str):
        codes = [ord(ch) for ch in value]
    elif isinstance(value, Sequence) and all(isinstance(code, int) for code in value):
        codes = list(value)
    else:
        raise TypeError(f"expected a wide string argument, got {type(value).__name__}")
    if 0 in codes:
        codes = codes[:codes.index(0)]
    return codes


def _lead_padding(spec: Spec, minus: bool, width: int) -> bytes:
    if minus:
        return b""
    if not spec.zero:
        return _pad(b" ", width)
    if spec.precision <= 0:
        return _pad(b"0", width)
    return _pad(b" ", width)


def convert_c(spec: Spec, args: ArgList, conv: str) -> Rendered:
    """Render the next argument as one character; ``%C`` and ``%lc`` encode it as UTF-8."""
    wide = spec.length is Length.LONG or conv == "C"
    code = _char_code(args.next())
    if not wide:
        code &= 0xFF
    minus = spec.minus
    width = spec.width
    if spec.star and width < 0:
        minus = True
        width = -width
    if width > 0:
        width -= 1
    count = max(width, 0)

    parts = [_lead_padding(spec, minus, width)]
    if wide:
        parts.append(encode_char(code))
        count += uchar_length(code)
    else:
        parts.append(bytes([code]))
        count += 1
    if minus:
        parts.append(_pad(b" ", width))
    return Rendered(b"".join(parts), count)


def convert_s(spec: Spec, args: ArgList) -> Rendered:
    """Render the next argument as a byte string; a missing string prints ``(null)``."""
    text = _byte_string(args.next())
    length = len(text)
    minus = spec.minus
    width = spec.width
    precision = spec.precision
    if spec.star and width < 0:
        minus = True
        width = -width
    if width > 0 and length > precision:
        width -= precision if precision >= 0 and spec.dot else length
    if precision > 0 and length < precision:
        width -= length
    count = max(width, 0)

    parts = [_lead_padding(spec, minus, width)]
    if precision >= 0 and length > precision and spec.dot:
        parts.append(text[:precision])
        count += precision
    else:
        parts.append(text)
        count += length
    if minus:
        parts.append(_pad(b" ", width))
    return Rendered(b"".join(parts), count)


def _truncated(codes: List[int], limit: int) -> bytes:
    out = []
    total = 0
    for code in codes[:max(limit, 0)]:
        total += uchar_length(code)
        if total <= limit:
            out.append(encode_char(code))
    return b"".join(out)


def convert_ls(spec: Spec, args: ArgList) -> Rendered:
    """Render the next argument as a wide string encoded in UTF-8.

    A precision limits the output to whole characters that fit in that many
    bytes; a missing string prints ``(null)``.
    """
    codes = _wide_codes(args.next())
    length = ustr_length(codes)
    minus = spec.minus
    width = spec.width
    precision = spec.precision
    if spec.star and width < 0:
        minus = True
        width = -width
    if width > 0 and length > precision:
        if precision >= 0 and spec.dot:
            width -= precision_length(codes, precision)
        else:
            width -= length
    if precision > 0 and length < precision:
        width -= length
    count = max(width, 0)

    parts = [_lead_padding(spec, minus, width)]
    if precision >= 0 and length > precision and spec.dot:
        parts.append(_truncated(codes, precision))
        count += precision_length(codes, precision)
    else:
        parts.append(b"".join(encode_char(code) for code in codes))
        count += length
    if minus:
        parts.append(_pad(b" ", width))
    return Rendered(b"".join(parts), count)