"""The playing field: rows of matches, played from the last row down."""

from __future__ import annotations

from typing import Iterable, List


class Board:
    """Rows of matches; every move takes from the last row that still has any.

    The display width is set by the widest row ever added and does not shrink
    as matches are taken.
    """

    def __init__(self, rows: Iterable[int] = ()) -> None:
        self._rows: List[int] = []
        self._widest = 0
        for count in rows:
            self.append(count)

    def append(self, count: int) -> None:
        """Add a row of ``count`` matches below the others."""
        if count < 1:
            raise ValueError(f"a row needs at least one match, got {count}")
        self._rows.append(count)
        self._widest = max(self._widest, count)

    def take(self, count: int) -> int:
        """Remove ``count`` matches from the last row; returns what is left on it.

        A row that runs out is removed from the board.
        """
        if not self._rows:
            raise ValueError("the board is empty")
        last = self._rows[-1]
        if not 1 <= count <= last:
            raise ValueError(f"cannot take {count} matches from a row of {last}")
        left = last - count
        if left:
            self._rows[-1] = left
        else:
            self._rows.pop()
        return left

    def last_row(self) -> int:
        """Matches on the last row, or 0 when the board is empty."""
        return self._rows[-1] if self._rows else 0

    def widest(self) -> int:
        """Width of the widest row the board was set up with."""
        return self._widest

    def is_empty(self) -> bool:
        """True when no matches are left."""
        return not self._rows

    def render(self) -> str:
        """The remaining rows drawn with ``|``, each centred on the widest row."""
        return "".join(
            " " * ((self._widest - count) // 2) + "|" * count + "\n" for count in self._rows
        )

    def __len__(self) -> int:
        return len(self._rows)