import pytest

from alumgame.board import Board


def test_render_example():
    assert Board([1, 3, 5, 7]).render() == "   |\n  |||\n |||||\n|||||||\n"


def test_render_has_one_line_per_row_with_its_matches():
    rows = [4, 9, 2, 6]
    lines = Board(rows).render().splitlines()
    assert [line.count("|") for line in lines] == rows


def test_widest_row_is_not_indented():
    lines = Board([2, 8, 3]).render().splitlines()
    assert not lines[1].startswith(" ")


def test_take_from_last_row():
    board = Board([2, 4])
    assert board.take(3) == 1
    assert board.last_row() == 1
    assert len(board) == 2


def test_emptied_row_is_removed():
    board = Board([2, 4])
    board.take(3)
    assert board.take(1) == 0
    assert board.last_row() == 2
    assert len(board) == 1
    assert board.render().count("\n") == 1


def test_widest_does_not_shrink():
    board = Board([2, 4])
    board.take(3)
    board.take(1)
    assert board.widest() == 4


def test_append_updates_widest():
    board = Board()
    board.append(3)
    board.append(8)
    assert board.widest() == 8
    assert board.last_row() == 8


@pytest.mark.parametrize("count", [0, 4, -1])
def test_take_rejects_invalid_counts(count):
    board = Board([3])
    with pytest.raises(ValueError):
        board.take(count)


def test_take_on_empty_board_raises():
    with pytest.raises(ValueError):
        Board().take(1)


def test_row_needs_a_match():
    with pytest.raises(ValueError):
        Board([0])


def test_empty_board():
    board = Board([1])
    assert not board.is_empty()
    board.take(1)
    assert board.is_empty()
    assert board.last_row() == 0
    assert board.render() == ""