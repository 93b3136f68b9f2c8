"""Placement legality and scoring.

A placement drops a sequence of letters into the empty squares of a run
starting at (x, y) and heading right (H) or down (V). Letters already on
the board are stepped over and become part of the words formed.

Rejection is an ordinary outcome here: illegal placements return None.
"""

from __future__ import annotations

from scrabbler.board import Board
from scrabbler.constants import BOARD_SIZE, CENTER, HORIZONTAL, TILE_VALUES, VERTICAL
from scrabbler.dictionary import Dictionary
from scrabbler.move import Move

STEP = {HORIZONTAL: (1, 0), VERTICAL: (0, 1)}
_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def perpendicular(direction: str) -> str:
    return VERTICAL if direction == HORIZONTAL else HORIZONTAL


def touches_tile(board: Board, x: int, y: int) -> bool:
    """True if an orthogonal neighbour of (x, y) holds a tile."""
    return any(board.is_occupied(x + dx, y + dy) for dx, dy in _NEIGHBOURS)


def placement_cells(
    board: Board, x: int, y: int, direction: str, count: int,
) -> list[tuple[int, int]] | None:
    """The first ``count`` empty squares of the run from (x, y).

    None if the run reaches the edge of the board first.
    """
    dx, dy = STEP[direction]
    cells: list[tuple[int, int]] = []
    while len(cells) < count:
        if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
            return None
        if board.cells[y][x] is None:
            cells.append((x, y))
        x += dx
        y += dy
    return cells


def check_geometry(
    board: Board, x: int, y: int, direction: str, count: int,
) -> list[tuple[int, int]] | None:
    """Squares filled by a ``count``-letter placement, or None if illegal.

    The opening play must cover the center square. Every later play must
    put at least one letter next to a tile already on the board.
    """
    cells = placement_cells(board, x, y, direction, count)
    if not cells:
        return None
    if board.center_occupied():
        if not any(touches_tile(board, cx, cy) for cx, cy in cells):
            return None
    elif (CENTER, CENTER) not in cells:
        return None
    return cells


def _letter(board: Board, plays: dict[tuple[int, int], str], x: int, y: int) -> str | None:
    placed = plays.get((x, y))
    return placed if placed is not None else board.letter_at(x, y)


def score_word(
    board: Board, plays: dict[tuple[int, int], str], x: int, y: int, direction: str,
) -> tuple[str, int]:
    """Maximal run through (x, y) along ``direction`` and its points.

    ``plays`` maps newly placed squares to their letters. Only those squares
    have their premiums counted. Lowercase letters (blanks) score 0.
    """
    dx, dy = STEP[direction]
    while _letter(board, plays, x - dx, y - dy) is not None:
        x -= dx
        y -= dy

    letters: list[str] = []
    points = 0
    word_mult = 1
    while True:
        placed = plays.get((x, y))
        ch = placed if placed is not None else board.letter_at(x, y)
        if ch is None:
            break
        value = 0 if ch.islower() else TILE_VALUES.get(ch, 0)
        if placed is not None:
            value *= board.letter_multiplier(x, y)
            word_mult *= board.word_multiplier(x, y)
        points += value
        letters.append(ch.upper())
        x += dx
        y += dy
    return "".join(letters), points * word_mult


def evaluate_placement(
    board: Board,
    dictionary: Dictionary,
    x: int,
    y: int,
    direction: str,
    letters: str,
) -> Move | None:
    """Validate and score ``letters`` played from (x, y).

    Every word of two or more letters that the placement forms, the main
    word and one cross word per new letter, must be in the dictionary. The
    main word must have at least two letters.
    """
    cells = check_geometry(board, x, y, direction, len(letters))
    if cells is None:
        return None
    plays = dict(zip(cells, letters))

    total = 0
    cross_words: list[str] = []
    cross = perpendicular(direction)
    for cx, cy in cells:
        word, points = score_word(board, plays, cx, cy, cross)
        if len(word) < 2:
            continue
        if not dictionary.contains(word):
            return None
        cross_words.append(word)
        total += points

    word, points = score_word(board, plays, x, y, direction)
    if len(word) < 2 or not dictionary.contains(word):
        return None
    total += points

    return Move(
        x=x,
        y=y,
        direction=direction,
        letters=letters,
        score=total,
        word=word,
        tiles_used=[(ch, cx, cy) for ch, (cx, cy) in zip(letters, cells)],
        cross_words=cross_words,
    )
