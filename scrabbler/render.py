"""Board and score output: plain or ANSI-coloured text, and PNG snapshots."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import Image, ImageDraw, ImageFont

from scrabbler.board import Board
from scrabbler.constants import BOARD_SIZE, NORMAL, TILE_VALUES

if TYPE_CHECKING:
    from scrabbler.game import Game

EMPTY = "-"

_ANSI = {
    "DL": "\033[46m", "TL": "\033[44m",
    "DW": "\033[45m", "TW": "\033[41m",
}
_ANSI_BLANK = "\033[33m"
_ANSI_RESET = "\033[0m"

# Colour palette
_BG = "#0f0f1a"
_CELL_EMPTY = "#1a1a2e"
_CELL_TILE = "#f5e6c8"
_CELL_BLANK = "#d4c4a8"
_CELL_TILE_FG = "#1a1a2e"
_BONUS_COLORS = {
    "DL": "#eab308", "TL": "#16a34a",
    "DW": "#2563eb", "TW": "#7c3aed",
    NORMAL: _CELL_EMPTY,
}
_DISPLAY_LABELS = {"DL": "2L", "TL": "3L", "DW": "2W", "TW": "3W"}
_CELL_SIZE = 38
_BOARD_PX = _CELL_SIZE * BOARD_SIZE


def render_board(board: Board, color: bool = False) -> str:
    """Text grid with row/column numbers; blanks print as their letter."""
    header = "    " + " ".join(f"{x:>2}" for x in range(BOARD_SIZE))
    lines = [header]
    for y in range(BOARD_SIZE):
        parts = [f"{y:>2} "]
        for x in range(BOARD_SIZE):
            letter = board.letter_at(x, y)
            text = f" {letter.upper() if letter else EMPTY} "
            if color:
                if letter is not None and letter.islower():
                    text = f"{_ANSI_BLANK}{text}{_ANSI_RESET}"
                elif letter is None and board.premium_kind(x, y) in _ANSI:
                    text = f"{_ANSI[board.premium_kind(x, y)]}{text}{_ANSI_RESET}"
            parts.append(text)
        lines.append("".join(parts))
    return "\n".join(lines)


def render_scores(game: Game) -> str:
    return "\n".join(
        f"Player {i + 1}: {score} - {game.racks[i].symbols()}"
        for i, score in enumerate(game.scores)
    )


def _centered_text(draw, cx: int, cy: int, text: str, fill: str, font) -> None:
    left, top, right, bottom = font.getbbox(text)
    draw.text((cx - (right + left) // 2, cy - (bottom + top) // 2), text, fill=fill, font=font)


def board_image(board: Board) -> Image.Image:
    """Draw the board as an RGB image."""
    img = Image.new("RGB", (_BOARD_PX + 2, _BOARD_PX + 2), _BG)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            x1 = x * _CELL_SIZE + 1
            y1 = y * _CELL_SIZE + 1
            x2 = x1 + _CELL_SIZE - 1
            y2 = y1 + _CELL_SIZE - 1
            cx = x1 + _CELL_SIZE // 2
            cy = y1 + _CELL_SIZE // 2

            letter = board.letter_at(x, y)
            bonus = board.premium_kind(x, y)
            if letter is None:
                fill = _BONUS_COLORS.get(bonus, _CELL_EMPTY)
            elif letter.islower():
                fill = _CELL_BLANK
            else:
                fill = _CELL_TILE
            draw.rectangle((x1, y1, x2, y2), fill=fill, outline="#0a0a14")

            if letter is not None:
                _centered_text(draw, cx, cy, letter.upper(), _CELL_TILE_FG, font)
                pts = 0 if letter.islower() else TILE_VALUES.get(letter, 0)
                left, top, right, bottom = font.getbbox(str(pts))
                draw.text((x2 - 3 - (right - left), y2 - 2 - (bottom - top)), str(pts), fill="#888", font=font)
            elif bonus in _DISPLAY_LABELS:
                _centered_text(draw, cx, cy, _DISPLAY_LABELS[bonus], "#fff", font)
    return img


def save_board_image(board: Board, path: str) -> None:
    board_image(board).save(path, format="PNG")
