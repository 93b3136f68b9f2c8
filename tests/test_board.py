import pytest

from scrabbler.board import Board
from scrabbler.constants import BOARD_SIZE, BONUS_GRID


BOARD_WITH_CAT = "\n".join([
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    ".......CAt.....",
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
])


def test_empty_board():
    board = Board()
    assert board.is_board_empty()
    assert board.count_tiles() == 0
    assert not board.is_occupied(7, 7)
    assert board.letter_at(7, 7) is None
    assert not board.center_occupied()


def test_place_and_read_back():
    board = Board()
    board.place(3, 5, "Q")
    assert board.is_occupied(3, 5)
    assert board.letter_at(3, 5) == "Q"
    # x is the column, y the row
    assert board.cells[5][3] == "Q"
    assert board.is_empty(5, 3)


def test_place_on_occupied_cell_fails():
    board = Board()
    board.place(7, 7, "A")
    with pytest.raises(ValueError):
        board.place(7, 7, "B")
    assert board.letter_at(7, 7) == "A"


def test_place_off_board_fails():
    with pytest.raises(ValueError):
        Board().place(15, 0, "A")


def test_off_board_reads_as_empty():
    board = Board()
    assert board.letter_at(-1, 0) is None
    assert not board.is_occupied(0, 15)


def test_premium_kinds():
    board = Board()
    assert board.premium_kind(0, 0) == "TW"
    assert board.premium_kind(7, 7) == "DW"
    assert board.premium_kind(3, 0) == "DL"
    assert board.premium_kind(5, 1) == "TL"
    assert board.premium_kind(1, 1) == "DW"
    assert board.premium_kind(1, 0) == "."


def test_multipliers_follow_premiums():
    board = Board()
    assert board.letter_multiplier(5, 1) == 3
    assert board.word_multiplier(5, 1) == 1
    assert board.letter_multiplier(3, 0) == 2
    assert board.word_multiplier(0, 0) == 3
    assert board.word_multiplier(7, 7) == 2
    assert board.letter_multiplier(7, 7) == 1


def test_premium_counts_and_symmetry():
    flat = [code for row in BONUS_GRID for code in row]
    assert flat.count("TW") == 8
    assert flat.count("DW") == 17
    assert flat.count("TL") == 12
    assert flat.count("DL") == 24
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            assert BONUS_GRID[y][x] == BONUS_GRID[x][y]
            assert BONUS_GRID[y][x] == BONUS_GRID[BOARD_SIZE - 1 - y][x]


def test_custom_premium_layout():
    grid = [["."] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    grid[0][0] = "TL"
    board = Board(grid)
    assert board.premium_kind(0, 0) == "TL"
    assert board.letter_multiplier(0, 0) == 3
    assert board.word_multiplier(7, 7) == 1


def test_from_string_keeps_blanks_lowercase():
    board = Board.from_string(BOARD_WITH_CAT)
    assert board.letter_at(7, 7) == "C"
    assert board.letter_at(9, 7) == "t"
    assert board.count_tiles() == 3
    assert str(board).splitlines()[7] == ".......CAt....."


def test_from_string_rejects_bad_input():
    with pytest.raises(ValueError):
        Board.from_string("...")
    with pytest.raises(ValueError):
        Board.from_string(BOARD_WITH_CAT.replace("CAt", "C1t"))


def test_copy_is_independent():
    board = Board.from_string(BOARD_WITH_CAT)
    clone = board.copy()
    clone.place(0, 0, "Z")
    assert board.is_empty(0, 0)
    assert clone.letter_at(7, 7) == "C"
