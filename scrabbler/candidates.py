"""Rack permutations used as fills for open squares.

Every ordered arrangement of every non-empty subset of the rack, with
duplicates from repeated letters collapsed. A blank is materialised as
each of the 26 letters, written in lowercase so the scorer knows it is
worth nothing. Arrangements that would use two blanks at once are not
produced.
"""

from __future__ import annotations

import random
import string
from itertools import permutations
from math import perm
from typing import Iterable

from scrabbler.bag import Tile
from scrabbler.constants import BLANK

_BLANK_LETTERS = string.ascii_lowercase


def raw_permutation_count(n: int) -> int:
    """Arrangements of all subsets of ``n`` tiles before deduplication."""
    return sum(perm(n, k) for k in range(1, n + 1))


def _materialise(arrangement: tuple[str, ...]) -> Iterable[str]:
    blanks = arrangement.count(BLANK)
    if blanks == 0:
        yield "".join(arrangement)
    elif blanks == 1:
        i = arrangement.index(BLANK)
        head = "".join(arrangement[:i])
        tail = "".join(arrangement[i + 1:])
        for ch in _BLANK_LETTERS:
            yield head + ch + tail
    # two or more blanks in one arrangement: not supported


def enumerate_candidates(
    rack: Iterable[Tile | str],
    rng: random.Random | None = None,
) -> list[str]:
    """All distinct letter sequences playable from ``rack``.

    ``rack`` holds Tiles or their symbols ('?' for a blank) and is not
    modified. The result is sorted unless ``rng`` is given, in which case
    it is shuffled with it.
    """
    symbols = tuple(t.symbol if isinstance(t, Tile) else t.upper() for t in rack)
    arrangements: set[tuple[str, ...]] = set()
    for k in range(1, len(symbols) + 1):
        arrangements.update(permutations(symbols, k))
    found: set[str] = set()
    for arrangement in arrangements:
        found.update(_materialise(arrangement))
    result = sorted(found)
    if rng is not None:
        rng.shuffle(result)
    return result
