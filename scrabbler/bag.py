"""Tiles and the shared draw pool.

A tile is either a lettered tile or a blank. A blank only takes on a
letter when it is played; in the bag and on a rack it stays a blank.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from scrabbler.constants import BLANK, TILE_DISTRIBUTION, TILE_VALUES

TOTAL_TILES = sum(TILE_DISTRIBUTION.values())  # 100


@dataclass(frozen=True)
class Tile:
    face: str | None  # None for a blank

    @classmethod
    def letter(cls, ch: str) -> Tile:
        ch = ch.upper()
        if ch not in TILE_VALUES:
            raise ValueError(f"Not a tile letter: {ch!r}")
        return cls(ch)

    @classmethod
    def blank(cls) -> Tile:
        return cls(None)

    @classmethod
    def from_symbol(cls, symbol: str) -> Tile:
        """'A'-'Z' for a lettered tile, '?' for a blank."""
        return cls.blank() if symbol == BLANK else cls.letter(symbol)

    @property
    def is_blank(self) -> bool:
        return self.face is None

    @property
    def symbol(self) -> str:
        return BLANK if self.face is None else self.face

    @property
    def value(self) -> int:
        return 0 if self.face is None else TILE_VALUES[self.face]

    def __str__(self) -> str:
        return self.symbol


def make_full_bag() -> list[Tile]:
    """Return a list of all tiles in the bag (unshuffled)."""
    bag: list[Tile] = []
    for symbol, count in TILE_DISTRIBUTION.items():
        bag.extend([Tile.from_symbol(symbol)] * count)
    return bag


class TileBag:
    """Shuffled draw pool. Only ever shrinks."""

    def __init__(self, tiles: list[Tile] | None = None, rng: random.Random | None = None):
        self._tiles = list(make_full_bag() if tiles is None else tiles)
        (rng or random.Random()).shuffle(self._tiles)

    def draw(self, n: int) -> list[Tile]:
        """Take up to ``n`` tiles; fewer when the pool runs low."""
        drawn, self._tiles = self._tiles[:n], self._tiles[n:]
        return drawn

    def is_empty(self) -> bool:
        return not self._tiles

    def __len__(self) -> int:
        return len(self._tiles)
