"""
Tests for the board model and win detection.

Usage:
    pytest test_board.py
"""

import pytest

from logic.board import (
    DRAW_SCORE,
    PLAYER_ONE_WIN_SCORE,
    PLAYER_TWO_WIN_SCORE,
    Board,
    coords_to_space,
    outcome_score,
    opponent,
    row_spaces,
    space_to_coords,
)
from logic.win_checker import EMPTY, PLAYER_ONE, PLAYER_TWO, Outcome, WinChecker


def make_board(x=(), o=(), active=EMPTY) -> Board:
    """Build a board with X (player 1) and O (player 2) on the given spaces."""
    board = Board()
    board.active_player = PLAYER_ONE
    for space in x:
        board.set_space(space)
    board.active_player = PLAYER_TWO
    for space in o:
        board.set_space(space)
    board.active_player = active
    return board


# ==================== COORDINATES ====================

def test_space_numbering_is_row_major():
    assert space_to_coords(1) == (0, 0)
    assert space_to_coords(2) == (0, 1)
    assert space_to_coords(3) == (0, 2)
    assert space_to_coords(4) == (1, 0)
    assert space_to_coords(5) == (1, 1)
    assert space_to_coords(9) == (2, 2)
    assert row_spaces(2) == (7, 8, 9)


@pytest.mark.parametrize("space", range(1, 10))
def test_coordinate_mapping_is_a_bijection(space):
    assert coords_to_space(*space_to_coords(space)) == space


def test_opponent():
    assert opponent(PLAYER_ONE) == PLAYER_TWO
    assert opponent(PLAYER_TWO) == PLAYER_ONE


# ==================== OCCUPANCY ====================

def test_empty_board():
    board = Board()

    assert board.active_player == EMPTY
    assert board.open_spaces() == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert not board.is_full()
    assert board.occupied_count() == 0
    assert board.is_terminal().outcome is Outcome.IN_PROGRESS
    assert board.is_terminal().line == ()


def test_set_space_marks_with_active_player():
    board = Board()
    board.active_player = PLAYER_TWO

    assert not board.space_taken(6)
    board.set_space(6)

    assert board.space_taken(6)
    assert board.mark_at(6) == PLAYER_TWO
    assert board.cells[1, 2] == PLAYER_TWO
    assert 6 not in board.open_spaces()


def test_open_and_occupied_always_add_up_to_nine():
    board = Board()
    for i, space in enumerate([5, 1, 9, 3, 7, 2, 8, 4, 6]):
        board.active_player = PLAYER_ONE if i % 2 == 0 else PLAYER_TWO
        board.set_space(space)
        assert len(board.open_spaces()) + board.occupied_count() == 9
        assert board.open_spaces() == sorted(board.open_spaces())

    assert board.is_full()
    assert board.open_spaces() == []


# ==================== TERMINAL STATES ====================

def test_top_row_win():
    state = make_board(x=[1, 2, 3], o=[4, 5]).is_terminal()

    assert state.outcome is Outcome.PLAYER_ONE_WINS
    assert state.outcome.winner == PLAYER_ONE
    assert list(state.line) == [1, 2, 3]


def test_main_diagonal_win():
    state = make_board(x=[1, 5, 9], o=[2, 3]).is_terminal()

    assert state.outcome is Outcome.PLAYER_ONE_WINS
    assert list(state.line) == [1, 5, 9]


def test_anti_diagonal_win_for_player_two():
    state = make_board(x=[1, 2, 4], o=[3, 5, 7]).is_terminal()

    assert state.outcome is Outcome.PLAYER_TWO_WINS
    assert state.outcome.winner == PLAYER_TWO
    assert list(state.line) == [7, 5, 3]


@pytest.mark.parametrize("line", [(1, 4, 7), (2, 5, 8), (3, 6, 9), (4, 5, 6), (7, 8, 9)])
def test_rows_and_columns_report_their_spaces(line):
    state = make_board(o=line).is_terminal()

    assert state.outcome is Outcome.PLAYER_TWO_WINS
    assert state.line == line


def test_row_is_found_before_column_in_same_pass():
    # Row 0 and column 0 both complete (not reachable in play, but shows the order)
    state = make_board(x=[1, 2, 3, 4, 7]).is_terminal()

    assert state.line == (1, 2, 3)


def test_full_board_without_line_is_draw():
    # X O X
    # X O O
    # O X X
    board = make_board(x=[1, 3, 4, 8, 9], o=[2, 5, 6, 7])
    state = board.is_terminal()

    assert board.is_full()
    assert state.outcome is Outcome.DRAW
    assert state.outcome.winner is None
    assert state.outcome.is_over
    assert state.line == ()


def test_win_on_last_move_is_not_a_draw():
    board = make_board(x=[1, 2, 3, 5, 8], o=[4, 6, 7, 9])

    assert board.is_full()
    assert board.is_terminal().outcome is Outcome.PLAYER_ONE_WINS


def test_is_terminal_is_pure():
    board = make_board(x=[1, 5], o=[9])
    before = board.cells.copy()

    assert board.is_terminal() == board.is_terminal()
    assert (board.cells == before).all()


def test_win_checker_on_plain_lists():
    checker = WinChecker()
    rows = [[0, 2, 0], [1, 2, 1], [0, 2, 1]]

    assert checker.find_line(rows) == (2, (2, 5, 8))
    assert checker.find_line([[0] * 3 for _ in range(3)]) is None


# ==================== HEURISTIC ====================

def test_heuristic_scores():
    assert Board().heuristic() == 0
    assert make_board(x=[1, 2, 3], o=[4, 5]).heuristic() == PLAYER_ONE_WIN_SCORE
    assert make_board(x=[1, 2, 9], o=[4, 5, 6]).heuristic() == PLAYER_TWO_WIN_SCORE
    assert make_board(x=[1, 3, 4, 8, 9], o=[2, 5, 6, 7]).heuristic() == DRAW_SCORE

    assert PLAYER_ONE_WIN_SCORE < DRAW_SCORE < 0 < PLAYER_TWO_WIN_SCORE


# ==================== CHILDREN ====================

def test_children_cover_every_open_space():
    board = make_board(x=[1, 5], o=[9], active=PLAYER_TWO)
    children = board.get_children()

    assert [space for space, _ in children] == board.open_spaces()

    for space, child in children:
        assert child.mark_at(space) == PLAYER_TWO
        assert child.occupied_count() == board.occupied_count() + 1
        assert child.active_player == PLAYER_ONE


def test_children_are_independent_copies():
    board = make_board(x=[1], active=PLAYER_TWO)
    children = board.get_children()

    children[0][1].active_player = PLAYER_ONE
    children[0][1].set_space(9)

    assert not board.space_taken(9)
    assert board.occupied_count() == 1
    assert not children[1][1].space_taken(9)


def test_full_board_has_no_children():
    assert make_board(x=[1, 3, 4, 8, 9], o=[2, 5, 6, 7]).get_children() == []


@pytest.mark.parametrize("outcome, score", [
    (Outcome.IN_PROGRESS, 0),
    (Outcome.DRAW, DRAW_SCORE),
    (Outcome.PLAYER_ONE_WINS, PLAYER_ONE_WIN_SCORE),
    (Outcome.PLAYER_TWO_WINS, PLAYER_TWO_WIN_SCORE),
])
def test_heuristic_matches_outcome_score(outcome, score):
    assert outcome_score(outcome) == score
