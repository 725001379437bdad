def row_col_to_index(row, col):
    return row * 3 + col


def index_to_row_col(index):
    return divmod(index, 3)


def render_board(board):
    """Text version of the board. Empty cells show their index."""
    cells = [str(i) if cell is None else cell for i, cell in enumerate(board)]
    rows = [" | ".join(cells[i:i + 3]) for i in range(0, 9, 3)]
    return "\n---------\n".join(rows)


def status_text(game):
    if game.winner:
        return f"Winner: {game.winner}"
    if game.is_draw:
        return "It's a draw!"
    return f"Next: {game.current_player}"
