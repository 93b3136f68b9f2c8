"""Two-player self-play game loop.

Each turn the engine finds the best move for the player to act; the move
is laid on the board, its tiles leave the rack, the rack is refilled from
the bag and the score is added. A player with no legal move passes.
Rounds continue while both racks hold tiles.
"""

from __future__ import annotations

import logging
import random
from typing import Callable

from scrabbler.bag import TileBag
from scrabbler.board import Board
from scrabbler.constants import RACK_SIZE
from scrabbler.dictionary import Dictionary
from scrabbler.engine import MoveEngine
from scrabbler.move import Move
from scrabbler.rack import Rack

logger = logging.getLogger("scrabbler.game")

PLAYERS = 2


class Game:
    """Board, bag, racks and scores for one game, owned by the loop."""

    def __init__(
        self,
        dictionary: Dictionary,
        bag: TileBag,
        racks: list[Rack],
        board: Board | None = None,
    ):
        self.dictionary = dictionary
        self.engine = MoveEngine(dictionary)
        self.board = board if board is not None else Board()
        self.bag = bag
        self.racks = racks
        self.scores = [0] * len(racks)
        self.turns_played = 0
        self.rounds_played = 0

    @classmethod
    def new(cls, dictionary: Dictionary, seed: int | None = None) -> Game:
        """Shuffle a full bag and deal seven tiles to each player."""
        bag = TileBag(rng=random.Random(seed))
        racks = [Rack(bag.draw(RACK_SIZE)) for _ in range(PLAYERS)]
        return cls(dictionary, bag, racks)

    def players_have_tiles(self) -> bool:
        return all(not rack.is_empty() for rack in self.racks)

    def apply_move(self, player: int, move: Move) -> None:
        rack = self.racks[player]
        rack.remove_played(move.letters)
        for letter, x, y in move.tiles_used:
            self.board.place(x, y, letter)
        drawn = rack.refill(self.bag)
        self.scores[player] += move.score
        logger.debug(
            "Player %d drew %s, bag has %d left",
            player + 1, "".join(t.symbol for t in drawn), len(self.bag),
        )

    def play_turn(self, player: int) -> Move | None:
        """Find and play the best move for ``player``. None means a pass."""
        self.turns_played += 1
        move = self.engine.find_best_move(self.board, self.racks[player])
        if move is None:
            logger.info("Player %d: no move found, passing", player + 1)
            return None
        self.apply_move(player, move)
        logger.info("Player %d plays %r", player + 1, move)
        return move

    def play_round(self) -> list[Move | None]:
        return [self.play_turn(player) for player in range(len(self.racks))]

    def run(self, on_round: Callable[[Game], None] | None = None) -> list[int]:
        """Play rounds until a rack runs dry. Returns the final scores.

        A round in which every player passes also ends the game, since
        nothing on the board, racks or bag can change after it.
        """
        while self.players_have_tiles():
            results = self.play_round()
            self.rounds_played += 1
            if on_round is not None:
                on_round(self)
            if all(result is None for result in results):
                logger.info("No player can move, ending the game")
                break
        logger.info("Game over after %d rounds: %s", self.rounds_played, self.scores)
        return list(self.scores)

    def winner(self) -> int | None:
        """Index of the leading player, or None on a tie."""
        top = max(self.scores)
        leaders = [i for i, s in enumerate(self.scores) if s == top]
        return leaders[0] if len(leaders) == 1 else None
