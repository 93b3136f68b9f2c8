"""Board geometry, tile values and premium-square layout."""

from __future__ import annotations

import numpy as np

BOARD_SIZE = 15
CENTER = 7  # 0-indexed center square, (7, 7)
RACK_SIZE = 7
BLANK = "?"

HORIZONTAL = "H"
VERTICAL = "V"
DIRECTIONS = (HORIZONTAL, VERTICAL)

# Standard Scrabble letter values; blanks are worth 0 and are handled apart.
TILE_VALUES: dict[str, int] = {
    "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2,
    "H": 4, "I": 1, "J": 8, "K": 5, "L": 1, "M": 3, "N": 1,
    "O": 1, "P": 3, "Q": 10, "R": 1, "S": 1, "T": 1, "U": 1,
    "V": 4, "W": 4, "X": 8, "Y": 4, "Z": 10,
}

# 98 lettered tiles plus two blanks.
TILE_DISTRIBUTION: dict[str, int] = {
    "A": 9,  "B": 2,  "C": 2,  "D": 4,  "E": 12, "F": 2,  "G": 3,
    "H": 2,  "I": 9,  "J": 1,  "K": 1,  "L": 4,  "M": 2,  "N": 6,
    "O": 8,  "P": 2,  "Q": 1,  "R": 6,  "S": 4,  "T": 6,  "U": 4,
    "V": 2,  "W": 2,  "X": 1,  "Y": 2,  "Z": 1,  BLANK: 2,
}

NORMAL = "."
DOUBLE_LETTER = "DL"
TRIPLE_LETTER = "TL"
DOUBLE_WORD = "DW"
TRIPLE_WORD = "TW"

# Standard premium layout, indexed BONUS_GRID[y][x].
# fmt: off
BONUS_GRID: tuple[tuple[str, ...], ...] = (
    ("TW", ".",  ".",  "DL", ".",  ".",  ".",  "TW", ".",  ".",  ".",  "DL", ".",  ".",  "TW"),
    (".",  "DW", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "DW", "." ),
    (".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DW", ".",  "." ),
    ("DL", ".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  ".",  ".",  "DW", ".",  ".",  "DL"),
    (".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  "." ),
    (".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", "." ),
    (".",  ".",  "DL", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DL", ".",  "." ),
    ("TW", ".",  ".",  "DL", ".",  ".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  ".",  "TW"),
    (".",  ".",  "DL", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DL", ".",  "." ),
    (".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", "." ),
    (".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  "." ),
    ("DL", ".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  ".",  ".",  "DW", ".",  ".",  "DL"),
    (".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DW", ".",  "." ),
    (".",  "DW", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "DW", "." ),
    ("TW", ".",  ".",  "DL", ".",  ".",  ".",  "TW", ".",  ".",  ".",  "DL", ".",  ".",  "TW"),
)
# fmt: on

_LETTER_FACTORS = {DOUBLE_LETTER: 2, TRIPLE_LETTER: 3}
_WORD_FACTORS = {DOUBLE_WORD: 2, TRIPLE_WORD: 3}


def multiplier_tables(grid) -> tuple[np.ndarray, np.ndarray]:
    """Build read-only (letter, word) multiplier arrays from a premium grid."""
    letter = np.ones((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    word = np.ones((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    for y, row in enumerate(grid):
        for x, code in enumerate(row):
            letter[y, x] = _LETTER_FACTORS.get(code, 1)
            word[y, x] = _WORD_FACTORS.get(code, 1)
    letter.flags.writeable = False
    word.flags.writeable = False
    return letter, word


LETTER_MULTIPLIERS, WORD_MULTIPLIERS = multiplier_tables(BONUS_GRID)
