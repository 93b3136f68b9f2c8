"""A player's rack of up to seven tiles."""

from __future__ import annotations

from typing import Iterable, Iterator

from scrabbler.bag import Tile, TileBag
from scrabbler.constants import RACK_SIZE


class Rack:
    def __init__(self, tiles: Iterable[Tile] = ()):
        self.tiles: list[Tile] = list(tiles)

    @classmethod
    def from_symbols(cls, symbols: str) -> Rack:
        """Build from e.g. ``"CAT?"``, with '?' for blanks."""
        return cls(Tile.from_symbol(s) for s in symbols.upper())

    def symbols(self) -> str:
        return "".join(t.symbol for t in self.tiles)

    def remove_played(self, letters: str) -> None:
        """Remove the tiles behind a played sequence.

        Uppercase letters take that lettered tile, lowercase letters were
        played from a blank and take a blank.
        """
        for ch in letters:
            wanted = Tile.blank() if ch.islower() else Tile.letter(ch)
            try:
                self.tiles.remove(wanted)
            except ValueError:
                raise ValueError(f"Rack {self.symbols()} has no {wanted.symbol} for {letters!r}") from None

    def refill(self, bag: TileBag) -> list[Tile]:
        """Draw until the rack holds seven tiles or the bag is empty."""
        drawn = bag.draw(RACK_SIZE - len(self.tiles))
        self.tiles.extend(drawn)
        return drawn

    def total_value(self) -> int:
        return sum(t.value for t in self.tiles)

    def is_empty(self) -> bool:
        return not self.tiles

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def __str__(self) -> str:
        return self.symbols()
