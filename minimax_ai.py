import logging

from game import NO_MOVE, O, X, evaluate_winner, is_board_full

logger = logging.getLogger(__name__)

WIN_SCORE = 10
LOSS_SCORE = -10
DRAW_SCORE = 0


def minimax(board, is_maximizing):
    """Score a position for O by searching every continuation to the end.

    O maximizes, X minimizes. Wins and losses score the same at any depth.
    The board is mutated while searching and restored before returning.
    """
    winner = evaluate_winner(board)

    # Terminal states
    if winner == O:
        return WIN_SCORE
    if winner == X:
        return LOSS_SCORE
    if is_board_full(board):
        return DRAW_SCORE

    mark = O if is_maximizing else X
    scores = []
    for i in range(9):
        if board[i] is None:
            board[i] = mark
            try:
                scores.append(minimax(board, not is_maximizing))
            finally:
                board[i] = None

    return max(scores) if is_maximizing else min(scores)


def best_move(board):
    """Return the best cell for O, or NO_MOVE when the board is full.

    Ties go to the lowest index.
    """
    board = list(board)  # work on a copy, the caller keeps its own board
    best_val = -float('inf')
    move = NO_MOVE

    for i in range(9):
        if board[i] is None:
            board[i] = O
            try:
                move_val = minimax(board, False)
            finally:
                board[i] = None

            if move_val > best_val:
                best_val = move_val
                move = i

    if move != NO_MOVE:
        logger.debug("Best move %d (score %d)", move, best_val)
    return move


class MinimaxAI:
    def __init__(self):
        self.player = O  # The computer always plays O
        self.opponent = X

    def best_move(self, board):
        return best_move(board)
