"""Reading a stream one line at a time."""

from __future__ import annotations

from typing import IO, Iterator, Optional


class LineReader:
    """Reads newline-separated lines from a text or binary stream.

    Lines are returned without their newline. A final line with no newline
    is still returned; NUL characters are dropped. Binary input is decoded
    as UTF-8, with undecodable bytes kept as surrogate escapes.
    """

    def __init__(self, stream: IO) -> None:
        self._stream = stream

    def read_line(self) -> Optional[str]:
        """The next line, or None at end of input."""
        if getattr(self._stream, "closed", False):
            raise OSError("cannot read from a closed stream")
        raw = self._stream.readline()
        if not raw:
            return None
        line = raw.decode("utf-8", errors="surrogateescape") if isinstance(raw, bytes) else raw
        if line.endswith("\n"):
            line = line[:-1]
        return line.replace("\0", "")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line