"""Scrabble self-play engine."""

from scrabbler.constants import BOARD_SIZE, BONUS_GRID, CENTER, RACK_SIZE, TILE_DISTRIBUTION, TILE_VALUES
from scrabbler.board import Board
from scrabbler.dictionary import Dictionary, DictionaryError, fingerprint
from scrabbler.bag import Tile, TileBag, make_full_bag
from scrabbler.rack import Rack
from scrabbler.candidates import enumerate_candidates
from scrabbler.move import Move
from scrabbler.scoring import check_geometry, evaluate_placement
from scrabbler.engine import MoveEngine, best_move
from scrabbler.game import Game

__all__ = [
    "BOARD_SIZE",
    "BONUS_GRID",
    "CENTER",
    "RACK_SIZE",
    "TILE_DISTRIBUTION",
    "TILE_VALUES",
    "Board",
    "Dictionary",
    "DictionaryError",
    "Game",
    "Move",
    "MoveEngine",
    "Rack",
    "Tile",
    "TileBag",
    "best_move",
    "check_geometry",
    "enumerate_candidates",
    "evaluate_placement",
    "fingerprint",
    "make_full_bag",
]
