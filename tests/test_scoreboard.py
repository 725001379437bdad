import pytest

from scoreboard import Scoreboard


def test_starts_at_zero():
    assert Scoreboard().scores == {'X': 0, 'O': 0, 'Draw': 0}


def test_record_and_labels():
    board = Scoreboard()
    board.record('X')
    board.record('X')
    board.record('O')
    board.record('Draw')
    assert board.labels() == [("X Wins", 2), ("O Wins", 1), ("Draws", 1)]


def test_unknown_result_is_rejected():
    with pytest.raises(ValueError):
        Scoreboard().record(None)


def test_reset():
    board = Scoreboard()
    board.record('O')
    board.reset()
    assert board.scores == {'X': 0, 'O': 0, 'Draw': 0}
