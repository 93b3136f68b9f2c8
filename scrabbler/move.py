"""Move representation."""

from __future__ import annotations

from scrabbler.constants import HORIZONTAL, RACK_SIZE


class Move:
    """A legal, scored placement of rack letters on the board."""

    __slots__ = (
        "x", "y", "direction", "letters", "score", "word",
        "tiles_used", "cross_words", "blank_positions",
    )

    def __init__(
        self,
        x: int,
        y: int,
        direction: str,
        letters: str,
        score: int,
        word: str,
        tiles_used: list[tuple[str, int, int]],
        cross_words: list[str] | None = None,
    ):
        self.x = x
        self.y = y
        self.direction = direction  # 'H' or 'V'
        self.letters = letters      # as played; lowercase = blank
        self.score = score
        self.word = word            # primary word, uppercase
        self.tiles_used = tiles_used  # [(letter, x, y), ...]
        self.cross_words = cross_words or []
        self.blank_positions = {(x_, y_) for letter, x_, y_ in tiles_used if letter.islower()}

    @property
    def is_sweep(self) -> bool:
        return len(self.tiles_used) == RACK_SIZE

    def __repr__(self) -> str:
        arrow = "→" if self.direction == HORIZONTAL else "↓"
        sweep = " +SWEEP!" if self.is_sweep else ""
        return f"{self.word} at ({self.x},{self.y}) {arrow} = {self.score} pts{sweep}"
