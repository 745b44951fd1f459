"""The game itself: choosing an opponent, taking turns, and the command."""

from __future__ import annotations

import sys
from typing import IO, Iterable, List, Optional

from alumgame.ai import bot_take
from alumgame.board import Board
from alumgame.linereader import LineReader
from alumgame.numbers import atoi
from alumgame.rules import BoardError, read_rows, usage

_BEGIN = "\033[1;32m------The game begins!-----\n\033[0m"
_YOU_WIN = "\033[1;32m------You  Win!------\n\033[0m"
_COMPUTER_WINS = "\033[1;32m------Computer Wins------\n\033[0m"
_PLAYER_ONE_TURN = "\033[1;32m--Player 1 plays his turn--\n\033[0m"
_PLAYER_TWO_TURN = "\033[1;34m--Player 2 plays his turn--\n\033[0m"
_WINS = "\033[1;33m------{} wins!------\n\033[0m"
_STDIN_PROMPT = (
    "Enter number of matches (1 to 10000) per row (Enter for each row).\n"
    "Press Enter when you are finished.\n"
)


def _stream(out: Optional[IO]) -> IO:
    return sys.stdout if out is None else out


def choice_prompt(matches: int) -> str:
    """The question asked of a player facing ``matches`` on the last row."""
    if matches == 1:
        return (
            "Only \033[1;33mone\033[0m match left on the last row. "
            "You can only ask to remove 1 match\n"
        )
    if matches == 2:
        return (
            "\033[1;33m2\033[0m matches left on the last row. "
            "How many matches do you want to remove? (1 or 2)\n"
        )
    if matches >= 3:
        return (
            f"\033[1;33m{matches}\033[0m matches left on the last row. "
            "How many matches do you want to remove? (1 to 3)\n"
        )
    return ""


def choose_opponent(lines: Iterable[str], out: Optional[IO] = None) -> Optional[int]:
    """Ask for 1 (computer) or 2 (another person); None if input ends first."""
    out = _stream(out)
    lines = iter(lines)
    out.write("Welcome to Alum1!\n")
    out.write("Choose your opponent:\n1 - AI\n2 - Other person\n")
    for line in lines:
        if line == "1":
            out.write("\033[1;33mYou've chosen AI.\n\033[0m")
            return 1
        if line == "2":
            out.write("\033[1;33mYou've chosen other player.\n\033[0m")
            return 2
        out.write("Wrong, try again!\n")
    return None


def _read_value(board: Board, lines, out: IO) -> Optional[int]:
    """Show the board and ask; returns the value typed, or None at end of input."""
    out.write(board.render())
    out.write(choice_prompt(board.last_row()))
    line = next(lines, None)
    return None if line is None else atoi(line)


def _is_valid(board: Board, value: int) -> bool:
    return 1 <= value <= 3 and value <= board.last_row()


def make_move(board: Board, value: int, out: Optional[IO] = None) -> Optional[str]:
    """Play the player's move and the computer's reply.

    Returns ``"you"`` or ``"computer"`` when the game is over, else None.
    Whoever takes the last match loses.
    """
    out = _stream(out)
    board.take(value)
    taken = bot_take(board)
    out.write(board.render())
    noun = "match" if taken == 1 else "matches"
    out.write(f"\033[91m--Computer plays his turn : removes {taken} {noun}--\033[0m\n")
    if board.is_empty():
        out.write(_COMPUTER_WINS)
        return "computer"
    board.take(taken)
    if board.is_empty():
        out.write(_YOU_WIN)
        return "you"
    return None


def play_against_ai(board: Board, lines: Iterable[str], out: Optional[IO] = None) -> Optional[str]:
    """Play against the computer; returns the winner, or None if input ends."""
    out = _stream(out)
    lines = iter(lines)
    out.write(_BEGIN)
    while not board.is_empty():
        value = _read_value(board, lines, out)
        if value is None:
            return None
        if not _is_valid(board, value):
            out.write(choice_prompt(board.last_row()))
            continue
        winner = make_move(board, value, out)
        if winner is not None:
            return winner
    return None


def _person_turn(board: Board, lines, out: IO, other: str) -> Optional[bool]:
    """One player's turn: False when input ends, True when ``other`` has won."""
    value = _read_value(board, lines, out)
    if value is None:
        return False
    if not _is_valid(board, value):
        # An invalid answer passes the turn to the other player.
        out.write(choice_prompt(board.last_row()))
        return None
    board.take(value)
    if board.is_empty():
        out.write(_WINS.format(other))
        return True
    return None


def play_against_person(
    board: Board, lines: Iterable[str], out: Optional[IO] = None
) -> Optional[str]:
    """Two people alternate; returns ``"Player 1"`` or ``"Player 2"``, or None if input ends."""
    out = _stream(out)
    lines = iter(lines)
    out.write(_BEGIN)
    turns = ((_PLAYER_ONE_TURN, "Player 2"), (_PLAYER_TWO_TURN, "Player 1"))
    while not board.is_empty():
        for header, other in turns:
            out.write(header)
            result = _person_turn(board, lines, out, other)
            if result is False:
                return None
            if result is True:
                return other
    return None


def _load_rows(args: List[str], lines, out: IO) -> List[int]:
    if not args:
        out.write(_STDIN_PROMPT)
        return read_rows(lines, stop_at_blank=True)
    try:
        with open(args[0], encoding="utf-8", errors="surrogateescape") as handle:
            return read_rows(LineReader(handle), stop_at_blank=False)
    except OSError as err:
        raise BoardError("Error. Opening file.") from err


def main(argv: Optional[List[str]] = None) -> int:
    """Run the game; the only argument is an optional file describing the board."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    if len(args) > 1:
        out.write(usage() + "\n")
        return 1
    lines = iter(LineReader(sys.stdin))
    try:
        rows = _load_rows(args, lines, out)
    except BoardError as err:
        out.write(f"{err}\n")
        return 255
    board = Board(rows)
    opponent = choose_opponent(lines, out)
    if opponent == 1:
        play_against_ai(board, lines, out)
    elif opponent == 2:
        play_against_person(board, lines, out)
    out.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())