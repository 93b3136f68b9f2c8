"""Terminal entry point: plays a full self-play game."""

from __future__ import annotations

import argparse
import logging
import time

from scrabbler.dictionary import Dictionary, DictionaryError
from scrabbler.game import Game
from scrabbler.render import render_board, render_scores, save_board_image

log = logging.getLogger("scrabbler")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Scrabble self-play -- both players use the best-scoring move",
    )
    parser.add_argument("--dict", type=str, default="dictionary.txt", dest="dict_path",
                        help="Path to dictionary / word list file (one word per line)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the tile shuffle")
    parser.add_argument("--color", action="store_true",
                        help="Colour premium squares and blanks in the board dump")
    parser.add_argument("--image", type=str, default=None,
                        help="Write a PNG of the final board to this path")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        dictionary = Dictionary.load(args.dict_path)
    except DictionaryError as exc:
        log.error("%s", exc)
        return 1

    game = Game.new(dictionary, seed=args.seed)

    def show(g: Game) -> None:
        print(render_board(g.board, color=args.color))
        print()
        print(render_scores(g))
        print()

    t0 = time.time()
    game.run(on_round=show)
    elapsed = time.time() - t0

    winner = game.winner()
    print(f"Game over in {game.rounds_played} rounds, {game.turns_played} turns ({elapsed:.1f}s).")
    print("Tie game." if winner is None else f"Player {winner + 1} wins.")

    if args.image:
        save_board_image(game.board, args.image)
        log.info("Board image written to %s", args.image)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
