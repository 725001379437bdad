import argparse
import logging
import sys
import time

from game import NO_MOVE, TicTacToe
from minimax_ai import MinimaxAI
from utils import render_board, status_text

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Tic-Tac-Toe in the terminal")
    p.add_argument("--mode", choices=TicTacToe.MODES, default="pvc",
                   help="pvp: two players, pvc: play X against the computer")
    p.add_argument("--rounds", type=int, default=1, help="number of games to play")
    p.add_argument("--delay", type=float, default=0.5,
                   help="seconds to wait before the computer moves")
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   default="WARNING")
    args = p.parse_args(argv)
    if args.rounds < 1:
        p.error("--rounds must be at least 1")
    if args.delay < 0:
        p.error("--delay cannot be negative")
    return args


def read_human_move(game):
    while True:
        try:
            idx = int(input(f"Play {game.current_player} at [0-8]: "))
        except ValueError:
            print("Please type a number 0..8.")
            continue
        if game.make_move(idx):
            return idx
        print("Illegal move. Try again.")


def play_round(game, ai, delay):
    while not game.is_game_over():
        print(render_board(game.board))
        print(status_text(game))
        if game.is_computer_turn():
            time.sleep(delay)
            move = game.computer_move(ai)
            if move != NO_MOVE:
                print(f"Computer plays at {move}")
        else:
            read_human_move(game)

    print(render_board(game.board))
    print(status_text(game))
    return game.finish_round()


def run_cli(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s: %(message)s")

    game = TicTacToe(mode=args.mode)
    ai = MinimaxAI()

    print("Index map:\n0|1|2\n3|4|5\n6|7|8\n")

    try:
        for round_number in range(1, args.rounds + 1):
            print(f"--- Round {round_number} ---")
            play_round(game, ai, args.delay)
    except (KeyboardInterrupt, EOFError):
        print("\nGame aborted.")
        return 1

    print("Scores:")
    for label, count in game.scoreboard.labels():
        print(f"  {label}: {count}")
    return 0


def main():
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
