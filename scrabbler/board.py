"""15×15 Scrabble board."""

from __future__ import annotations

from scrabbler.constants import (
    BOARD_SIZE,
    BONUS_GRID,
    CENTER,
    LETTER_MULTIPLIERS,
    WORD_MULTIPLIERS,
    multiplier_tables,
)


class Board:
    """15x15 game board. Cells are None (empty), 'A'-'Z' (tile),
    or lowercase 'a'-'z' (blank used as that letter).

    Coordinates are (x, y): x is the column, y the row.
    """

    def __init__(self, bonus_grid=BONUS_GRID):
        self.cells: list[list[str | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self.bonus_grid = bonus_grid
        if bonus_grid is BONUS_GRID:
            letter, word = LETTER_MULTIPLIERS, WORD_MULTIPLIERS
        else:
            letter, word = multiplier_tables(bonus_grid)
        # plain ints for the scoring loop
        self._letter_mult: list[list[int]] = letter.tolist()
        self._word_mult: list[list[int]] = word.tolist()

    @staticmethod
    def from_string(text: str) -> Board:
        """Parse 15 lines of 15 chars: '.' empty, 'A-Z' tile, 'a-z' blank."""
        rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Board string must be 15 lines of 15 characters")
        board = Board()
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch == ".":
                    continue
                if not ("A" <= ch <= "Z" or "a" <= ch <= "z"):
                    raise ValueError(f"Invalid board character: {ch}")
                board.cells[y][x] = ch
        return board

    def letter_at(self, x: int, y: int) -> str | None:
        """Letter at (x, y), or None."""
        if 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE:
            return self.cells[y][x]
        return None

    def place(self, x: int, y: int, letter: str) -> None:
        """Put a letter on an empty cell. Placed letters are permanent."""
        if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
            raise ValueError(f"({x},{y}) is off the board")
        if self.cells[y][x] is not None:
            raise ValueError(f"({x},{y}) already holds {self.cells[y][x]!r}")
        self.cells[y][x] = letter

    def is_empty(self, x: int, y: int) -> bool:
        """True if no tile at (x, y)."""
        return self.letter_at(x, y) is None

    def is_occupied(self, x: int, y: int) -> bool:
        """True if there's a tile at (x, y)."""
        return not self.is_empty(x, y)

    def is_board_empty(self) -> bool:
        """True if no tiles on the board."""
        return all(cell is None for row in self.cells for cell in row)

    def center_occupied(self) -> bool:
        """True if the center square holds a tile."""
        return self.cells[CENTER][CENTER] is not None

    def count_tiles(self) -> int:
        """Number of tiles on the board."""
        return sum(1 for row in self.cells for cell in row if cell is not None)

    def premium_kind(self, x: int, y: int) -> str:
        """Premium code at (x, y): '.', 'DL', 'TL', 'DW' or 'TW'."""
        return self.bonus_grid[y][x]

    def letter_multiplier(self, x: int, y: int) -> int:
        """Letter multiplier of the square at (x, y): 1, 2 or 3."""
        return self._letter_mult[y][x]

    def word_multiplier(self, x: int, y: int) -> int:
        """Word multiplier of the square at (x, y): 1, 2 or 3."""
        return self._word_mult[y][x]

    def copy(self) -> Board:
        """Copy of the board sharing the premium layout."""
        b = Board(self.bonus_grid)
        for y in range(BOARD_SIZE):
            b.cells[y] = self.cells[y][:]
        return b

    def __str__(self) -> str:
        return "\n".join(
            "".join(cell if cell is not None else "." for cell in row)
            for row in self.cells
        )
