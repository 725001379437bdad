import logging

from scoreboard import Scoreboard

logger = logging.getLogger(__name__)

X = 'X'
O = 'O'

# Row-major cell indices of every winning line: rows, columns, diagonals
LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

NO_MOVE = -1


def new_board():
    return [None] * 9


def evaluate_winner(board):
    """Return 'X' or 'O' if that mark fills a line, otherwise None.

    None covers both a game in progress and a draw; callers tell them apart
    with is_board_full().
    """
    for a, b, c in LINES:
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
    return None


def winning_line(board):
    for line in LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return line
    return None


def is_board_full(board):
    return all(cell is not None for cell in board)


def available_moves(board):
    return [i for i, cell in enumerate(board) if cell is None]


class TicTacToe:
    MODES = ("pvp", "pvc")

    def __init__(self, mode="pvp"):
        if mode not in self.MODES:
            raise ValueError(f"Unknown mode: {mode!r}")
        self.board = new_board()
        self.x_is_next = True  # X goes first
        self.mode = mode
        self.scoreboard = Scoreboard()

    @property
    def current_player(self):
        return X if self.x_is_next else O

    @property
    def winner(self):
        return evaluate_winner(self.board)

    @property
    def is_draw(self):
        return self.winner is None and is_board_full(self.board)

    def is_game_over(self):
        return self.winner is not None or is_board_full(self.board)

    def set_mode(self, mode):
        if mode not in self.MODES:
            raise ValueError(f"Unknown mode: {mode!r}")
        # Switching modes keeps the board as it is
        self.mode = mode

    def make_move(self, index):
        """Place the current player's mark for a human click."""
        if not 0 <= index < 9 or self.board[index] is not None:
            return False
        if self.winner is not None:
            return False
        # O belongs to the computer in pvc mode
        if self.mode == "pvc" and not self.x_is_next:
            return False

        self.board[index] = self.current_player
        logger.debug("%s plays %d", self.current_player, index)
        self.x_is_next = not self.x_is_next
        return True

    def is_computer_turn(self):
        return self.mode == "pvc" and not self.x_is_next and not self.is_game_over()

    def computer_move(self, ai):
        """Let the AI pick O's move and apply it. Returns the move or NO_MOVE."""
        move = ai.best_move(self.board)
        if move == NO_MOVE:
            return NO_MOVE
        self.board[move] = O
        self.x_is_next = True
        logger.debug("Computer plays %d", move)
        return move

    def finish_round(self):
        """Record a finished game on the scoreboard and clear the board."""
        if not self.is_game_over():
            return None
        result = self.winner or "Draw"
        self.scoreboard.record(result)
        logger.info("Round over: %s", result)
        self.reset_board()
        return result

    def reset_board(self):
        self.board = new_board()
        self.x_is_next = True

    def reset_all(self):
        self.scoreboard.reset()
        self.reset_board()
