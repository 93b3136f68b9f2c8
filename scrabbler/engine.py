"""Turn search: the best placement for a rack on the current board.

Every empty square is tried as a starting point, in both directions, with
every candidate sequence the rack can produce. Candidates are walked as a
prefix tree. A branch is abandoned once it cannot lead to a legal play: its
letter forms a bad cross word, or the main word so far starts no dictionary
word. What survives is checked and scored by ``evaluate_placement``.
"""

from __future__ import annotations

import heapq
import logging
import string
from typing import Iterable, Iterator

from scrabbler.bag import Tile
from scrabbler.board import Board
from scrabbler.candidates import enumerate_candidates
from scrabbler.constants import BOARD_SIZE, DIRECTIONS
from scrabbler.dictionary import FNV_OFFSET, Dictionary, extend, fingerprint
from scrabbler.move import Move
from scrabbler.scoring import STEP, check_geometry, evaluate_placement, perpendicular
from scrabbler.trie import Trie, TrieNode

log = logging.getLogger("scrabbler.engine")


class _CrossChecks:
    """Letters allowed on a square given the tiles perpendicular to a play.

    None means the square has no perpendicular neighbours, so any letter fits.
    """

    def __init__(self, board: Board, dictionary: Dictionary):
        self.board = board
        self.dict = dictionary
        self._cache: dict[tuple[int, int, str], frozenset[str] | None] = {}

    def allowed(self, x: int, y: int, direction: str) -> frozenset[str] | None:
        key = (x, y, direction)
        if key not in self._cache:
            self._cache[key] = self._compute(x, y, perpendicular(direction))
        return self._cache[key]

    def _compute(self, x: int, y: int, cross: str) -> frozenset[str] | None:
        dx, dy = STEP[cross]
        before: list[str] = []
        nx, ny = x - dx, y - dy
        while self.board.is_occupied(nx, ny):
            before.append(self.board.letter_at(nx, ny))
            nx -= dx
            ny -= dy
        after: list[str] = []
        nx, ny = x + dx, y + dy
        while self.board.is_occupied(nx, ny):
            after.append(self.board.letter_at(nx, ny))
            nx += dx
            ny += dy
        if not before and not after:
            return None

        head = fingerprint("".join(reversed(before)))
        tail = "".join(after)
        return frozenset(
            ch for ch in string.ascii_uppercase
            if self.dict.contains_hash(fingerprint(tail, extend(head, ch)))
        )


class MoveEngine:
    """Exhaustive move search over rack permutations."""

    def __init__(self, dictionary: Dictionary):
        self.dict = dictionary

    # public API

    def find_best_move(self, board: Board, rack: Iterable[Tile | str]) -> Move | None:
        """Highest-scoring legal move, or None if there is none.

        Ties go to the first move found: squares in row-major order,
        H before V, candidate sequences in sorted order.
        """
        best: Move | None = None
        legal = 0
        for move in self._generate(board, rack):
            legal += 1
            if best is None or move.score > best.score:
                best = move
        log.debug("%d legal moves, best: %r", legal, best)
        return best

    def find_all_moves(self, board: Board, rack: Iterable[Tile | str]) -> list[Move]:
        return list(self._generate(board, rack))

    def find_best_moves(
        self, board: Board, rack: Iterable[Tile | str], top_n: int = 10,
    ) -> list[Move]:
        """Top N highest-scoring legal moves."""
        return heapq.nlargest(top_n, self._generate(board, rack), key=lambda m: m.score)

    # move generation

    def _generate(self, board: Board, rack: Iterable[Tile | str]) -> Iterator[Move]:
        candidates = enumerate_candidates(rack)
        if not candidates:
            return
        trie = Trie(candidates)
        max_len = max(len(c) for c in candidates)
        checks = _CrossChecks(board, self.dict)
        log.debug("%d candidate sequences", len(trie))

        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                if board.cells[y][x] is not None:
                    continue
                for direction in DIRECTIONS:
                    yield from self._moves_from(board, trie, checks, x, y, direction, max_len)

    def _moves_from(
        self,
        board: Board,
        trie: Trie,
        checks: _CrossChecks,
        x: int,
        y: int,
        direction: str,
        max_len: int,
    ) -> Iterator[Move]:
        dx, dy = STEP[direction]

        # Squares from the start to the edge, and which of them are open.
        run: list[tuple[int, int, str | None]] = []
        cx, cy = x, y
        while 0 <= cx < BOARD_SIZE and 0 <= cy < BOARD_SIZE:
            run.append((cx, cy, board.cells[cy][cx]))
            cx += dx
            cy += dy
        empties = [i for i, (_, _, ch) in enumerate(run) if ch is None]
        longest = min(len(empties), max_len)

        shortest = next(
            (n for n in range(1, longest + 1)
             if check_geometry(board, x, y, direction, n) is not None),
            None,
        )
        if shortest is None:
            return

        # Tiles directly before the start belong to the main word.
        before: list[str] = []
        bx, by = x - dx, y - dy
        while board.is_occupied(bx, by):
            before.append(board.letter_at(bx, by))
            bx -= dx
            by -= dy
        h0 = FNV_OFFSET
        if before:
            h0 = fingerprint("".join(reversed(before)))
            if not self.dict.is_prefix_hash(h0):
                return

        def walk(node: TrieNode, depth: int, h: int, letters: str) -> Iterator[Move]:
            i = empties[depth]
            sx, sy, _ = run[i]
            allowed = checks.allowed(sx, sy, direction)
            stop = empties[depth + 1] if depth + 1 < len(empties) else len(run)
            for ch, child in node.children.items():
                if allowed is not None and ch.upper() not in allowed:
                    continue
                h1 = extend(h, ch)
                for j in range(i + 1, stop):
                    h1 = extend(h1, run[j][2])
                if not self.dict.is_prefix_hash(h1):
                    continue
                seq = letters + ch
                if (child.is_terminal and depth + 1 >= shortest
                        and self.dict.contains_hash(h1)):
                    move = evaluate_placement(board, self.dict, x, y, direction, seq)
                    if move is not None:
                        yield move
                if child.children and depth + 1 < longest:
                    yield from walk(child, depth + 1, h1, seq)

        yield from walk(trie.root, 0, h0, "")


def best_move(board: Board, rack: Iterable[Tile | str], dictionary: Dictionary) -> Move | None:
    """Best legal move for ``rack`` on ``board``, or None to pass."""
    return MoveEngine(dictionary).find_best_move(board, rack)
