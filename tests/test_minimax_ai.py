"""Tests for the minimax move selector."""

from game import LINES, NO_MOVE, O, X, available_moves, evaluate_winner, is_board_full, new_board
from minimax_ai import MinimaxAI, best_move, minimax

_ = None


def test_takes_immediate_win():
    board = [O, O, _,
             X, X, _,
             _, _, _]
    assert best_move(board) == 2


def test_blocks_immediate_loss():
    board = [X, X, _,
             O, _, _,
             _, _, _]
    assert best_move(board) == 2


def test_full_board_returns_sentinel():
    board = [X, O, X,
             X, O, O,
             O, X, X]
    assert evaluate_winner(board) is None
    assert best_move(board) == NO_MOVE


def test_empty_board_picks_lowest_index_among_draws():
    # Every opening is a draw with perfect play, so the tie-break keeps cell 0
    assert best_move(new_board()) == 0


def test_answers_corner_opening_with_center():
    board = new_board()
    board[0] = X
    assert best_move(board) == 4


def test_repeated_calls_agree():
    board = [X, _, _,
             _, O, _,
             _, _, X]
    first = best_move(board)
    assert first in available_moves(board)
    assert best_move(board) == first


def test_best_move_does_not_mutate_board():
    board = [X, _, _,
             _, _, _,
             _, _, _]
    snapshot = list(board)
    best_move(board)
    assert board == snapshot


def test_minimax_restores_board():
    board = [X, O, X,
             _, O, _,
             _, _, _]
    snapshot = list(board)
    minimax(board, False)
    assert board == snapshot


def test_minimax_terminal_scores():
    o_wins = [O, O, O, X, X, _, _, _, _]
    x_wins = [X, X, X, O, O, _, _, _, _]
    draw = [X, O, X, X, O, O, O, X, X]
    assert minimax(o_wins, True) == 10
    assert minimax(x_wins, False) == -10
    assert minimax(draw, True) == 0


def test_wins_score_the_same_at_any_depth():
    # O wins at once with 8, but 3 forks and wins a move later. With no depth
    # discount both score 10, so the lower index is chosen.
    board = [O, X, X,
             _, O, _,
             _, X, _]
    board_with_8 = list(board)
    board_with_8[8] = O
    board_with_3 = list(board)
    board_with_3[3] = O
    assert minimax(board_with_8, False) == 10
    assert minimax(board_with_3, False) == 10
    assert best_move(board) == 3


def _final_boards(board):
    """Every finished game where X tries all replies and O uses best_move."""
    if evaluate_winner(board) or is_board_full(board):
        yield board
        return
    for i in available_moves(board):
        after_x = list(board)
        after_x[i] = X
        if evaluate_winner(after_x) or is_board_full(after_x):
            yield after_x
            continue
        move = best_move(after_x)
        after_o = list(after_x)
        after_o[move] = O
        yield from _final_boards(after_o)


def test_never_loses_when_x_starts():
    finals = list(_final_boards(new_board()))
    assert finals
    assert all(evaluate_winner(board) != X for board in finals)


def test_never_loses_when_o_starts():
    board = new_board()
    board[best_move(board)] = O
    assert all(evaluate_winner(final) != X for final in _final_boards(board))


def test_minimax_ai_plays_o():
    ai = MinimaxAI()
    assert ai.player == O
    assert ai.opponent == X
    board = [O, _, _, X, O, _, X, _, _]
    assert ai.best_move(board) == best_move(board)


def test_lines_cover_rows_columns_and_diagonals():
    assert len(LINES) == 8
    assert LINES[:3] == ((0, 1, 2), (3, 4, 5), (6, 7, 8))
    assert LINES[-2:] == ((0, 4, 8), (2, 4, 6))
