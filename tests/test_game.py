import io

import pytest

from alumgame.ai import endgame_take
from alumgame.board import Board
from alumgame.game import (
    choice_prompt,
    choose_opponent,
    main,
    make_move,
    play_against_ai,
    play_against_person,
)


def test_choice_prompt_single_match():
    assert "one" in choice_prompt(1)
    assert "You can only ask to remove 1 match" in choice_prompt(1)


def test_choice_prompt_two_matches():
    assert "(1 or 2)" in choice_prompt(2)


def test_choice_prompt_many_matches():
    prompt = choice_prompt(7)
    assert "7" in prompt
    assert "(1 to 3)" in prompt


def test_choice_prompt_nothing_left():
    assert choice_prompt(0) == ""


def test_choose_opponent_retries():
    out = io.StringIO()
    assert choose_opponent(iter(["x", "3", "2"]), out) == 2
    assert out.getvalue().count("Wrong, try again!") == 2
    assert "You've chosen other player." in out.getvalue()


def test_choose_ai():
    out = io.StringIO()
    assert choose_opponent(["1"], out) == 1
    assert "You've chosen AI." in out.getvalue()


def test_choose_opponent_end_of_input():
    assert choose_opponent([], io.StringIO()) is None


def test_taking_last_match_loses():
    out = io.StringIO()
    assert make_move(Board([1]), 1, out) == "computer"
    assert "Computer Wins" in out.getvalue()
    assert "removes 1 match--" in out.getvalue()


def test_computer_taking_last_match_loses():
    out = io.StringIO()
    board = Board([2])
    assert make_move(board, 1, out) == "you"
    assert "You  Win!" in out.getvalue()
    assert board.is_empty()


def test_make_move_continues():
    board = Board([10])
    assert make_move(board, 1, io.StringIO()) is None
    assert board.last_row() == 9 - endgame_take(9)


def test_make_move_after_row_runs_out():
    board = Board([3, 1])
    assert make_move(board, 1, io.StringIO()) is None
    assert board.last_row() == 3 - endgame_take(3)


def test_play_against_ai_win():
    out = io.StringIO()
    assert play_against_ai(Board([2]), ["1"], out) == "you"
    assert "The game begins!" in out.getvalue()


def test_play_against_ai_invalid_input_then_end():
    out = io.StringIO()
    board = Board([2])
    assert play_against_ai(board, ["7"], out) is None
    assert out.getvalue().count("(1 or 2)") >= 2
    assert board.last_row() == 2


def test_play_against_person():
    out = io.StringIO()
    assert play_against_person(Board([3]), ["1", "1", "1"], out) == "Player 2"
    assert "Player 2 wins!" in out.getvalue()
    assert "Player 1 plays his turn" in out.getvalue()


def test_invalid_answer_passes_turn():
    out = io.StringIO()
    assert play_against_person(Board([3]), ["5", "3"], out) == "Player 1"
    assert "Player 1 wins!" in out.getvalue()


def test_play_against_person_end_of_input():
    assert play_against_person(Board([3]), [], io.StringIO()) is None


def _run(monkeypatch, capsys, argv, stdin):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    code = main(argv)
    return code, capsys.readouterr().out


def test_main_against_ai(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, [], "1\n\n1\n1\n")
    assert code == 0
    assert "Computer Wins" in out


def test_main_against_person(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, [], "3\n\n2\n1\n1\n1\n")
    assert code == 0
    assert "Player 2 wins!" in out


def test_main_bad_row(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, [], "abc\n")
    assert code == 255
    assert "ERROR. Number is wrong" in out


def test_main_no_rows(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, [], "")
    assert code == 255
    assert "Error. Number of matches is 0." in out


def test_main_too_many_arguments(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["a", "b"], "")
    assert code == 1
    assert "[FILE]" in out


def test_main_reads_board_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "board.txt"
    path.write_text("2\n")
    code, out = _run(monkeypatch, capsys, [str(path)], "1\n1\n")
    assert code == 0
    assert "You  Win!" in out


def test_main_missing_file(monkeypatch, capsys, tmp_path):
    code, out = _run(monkeypatch, capsys, [str(tmp_path / "missing")], "")
    assert code == 255
    assert "Error. Opening file." in out


@pytest.mark.parametrize("stdin", ["4\n\n", "4\n\nx\n"])
def test_main_ends_when_no_opponent_chosen(monkeypatch, capsys, stdin):
    code, out = _run(monkeypatch, capsys, [], stdin)
    assert code == 0
    assert "The game begins!" not in out