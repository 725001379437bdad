"""Timing and click handling of the pygame window, run headless."""

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

pygame = pytest.importorskip("pygame")

from gui import TicTacToeGUI  # noqa: E402


@pytest.fixture
def gui():
    window = TicTacToeGUI()
    yield window
    pygame.quit()


def test_click_places_mark(gui):
    assert gui.handle_cell_click(gui.cell_center(4)) == 4
    assert gui.game.board[4] == 'X'
    assert gui.animations[0].index == 4


def test_click_outside_board_is_ignored(gui):
    assert gui.handle_cell_click((5, 5)) is None
    assert gui.game.board == [None] * 9


def test_computer_moves_after_delay(gui):
    gui.game.set_mode("pvc")
    gui.handle_cell_click(gui.cell_center(0))

    gui.update_timers(1000)
    assert gui.computer_due_at == 1000 + gui.COMPUTER_DELAY_MS
    gui.update_timers(1000 + gui.COMPUTER_DELAY_MS - 1)
    assert gui.game.board[4] is None

    gui.update_timers(1000 + gui.COMPUTER_DELAY_MS)
    assert gui.game.board[4] == 'O'
    assert gui.computer_due_at is None


def test_restart_cancels_pending_computer_move(gui):
    gui.game.set_mode("pvc")
    gui.handle_cell_click(gui.cell_center(0))
    gui.update_timers(0)
    assert gui.computer_due_at is not None

    gui.game.reset_board()
    gui.update_timers(10)
    assert gui.computer_due_at is None
    assert gui.game.board == [None] * 9


def test_finished_round_is_scored_after_delay(gui):
    for idx in (0, 3, 1, 4, 2):
        gui.game.make_move(idx)
    gui.check_win_line()
    assert gui.win_animation is not None

    gui.update_timers(0)
    assert gui.game.scoreboard.scores['X'] == 0
    gui.update_timers(gui.ROUND_RESET_DELAY_MS)
    assert gui.game.scoreboard.scores['X'] == 1
    assert gui.game.board == [None] * 9
    assert gui.win_animation is None
