"""Writing characters, strings and numbers to an output stream.

Characters are encoded as UTF-8 byte sequences by code point, including
surrogates; code points above U+10FFFF produce nothing. Streams may be
binary or text; a text stream with an underlying buffer receives the raw
bytes. Every writer returns the number of bytes written.
"""

from __future__ import annotations

import io
import sys
from typing import BinaryIO, Optional, TextIO, Union

Stream = Union[BinaryIO, TextIO]


def _write(out: Optional[Stream], data: bytes) -> int:
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
    return len(data)


def encode_char(c: Union[str, int]) -> bytes:
    """UTF-8 bytes for a character or code point."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        c = ord(c)
    if c <= 0x7F:
        return bytes([c & 0xFF])
    if c <= 0x7FF:
        return bytes([(c >> 6) + 0xC0, (c & 0x3F) + 0x80])
    if c <= 0xFFFF:
        return bytes([(c >> 12) + 0xE0, ((c >> 6) & 0x3F) + 0x80, (c & 0x3F) + 0x80])
    if c <= 0x10FFFF:
        return bytes([
            (c >> 18) + 0xF0,
            ((c >> 12) & 0x3F) + 0x80,
            ((c >> 6) & 0x3F) + 0x80,
            (c & 0x3F) + 0x80,
        ])
    return b""


def putchar(c: Union[str, int], out: Optional[Stream] = None) -> int:
    """Write one character."""
    return _write(out, encode_char(c))


def putstr(s: str, out: Optional[Stream] = None) -> int:
    """Write a string."""
    return _write(out, b"".join(encode_char(ch) for ch in s))


def putendl(s: Optional[str], out: Optional[Stream] = None) -> int:
    """Write a string followed by a newline; a missing string writes nothing."""
    if s is None:
        return 0
    return putstr(s + "\n", out)


def putnbr(n: int, out: Optional[Stream] = None) -> int:
    """Write an integer in decimal."""
    return _write(out, str(n).encode("ascii"))