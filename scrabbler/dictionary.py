"""Word list stored as 64-bit case-insensitive fingerprints.

Membership is tested on a rolling hash of the word rather than on the
string itself. Each character contributes its low five bits, which folds
upper and lower case together. Two different words could in principle
share a fingerprint and would then be treated as the same word; that
approximation is accepted.
"""

from __future__ import annotations

import logging
from typing import Iterable

log = logging.getLogger("scrabbler")

FNV_OFFSET = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3
_MASK = 0xFFFFFFFFFFFFFFFF


class DictionaryError(OSError):
    """The word list could not be read."""


def extend(h: int, ch: str) -> int:
    """One rolling step: multiply, then fold in the character's low 5 bits."""
    return ((h * FNV_PRIME) & _MASK) ^ (ord(ch) & 0x1F)


def fingerprint(word: str, h: int = FNV_OFFSET) -> int:
    """Fingerprint of ``word``, or of ``word`` appended to the text hashed into ``h``."""
    for ch in word:
        h = extend(h, ch)
    return h


class Dictionary:
    """Immutable set of valid words (length >= 2), case-insensitive."""

    def __init__(self, words: Iterable[str] = ()):
        self._words: set[int] = set()
        self._prefixes: set[int] = set()
        for word in words:
            self._add(word)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Dictionary:
        return cls(words)

    @classmethod
    def load(cls, path: str) -> Dictionary:
        """Read one word per line. Raises DictionaryError if unreadable."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                dictionary = cls(line.rstrip("\r\n") for line in f)
        except OSError as exc:
            raise DictionaryError(f"Unable to open dictionary {path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise DictionaryError(f"Dictionary {path} is not UTF-8 text: {exc}") from exc
        log.info("Loaded %s words from %s", f"{len(dictionary):,}", path)
        return dictionary

    def _add(self, word: str) -> None:
        if len(word) < 2 or not (word.isascii() and word.isalpha()):
            return
        h = FNV_OFFSET
        for ch in word:
            h = extend(h, ch)
            self._prefixes.add(h)
        self._words.add(h)

    def contains(self, word: str) -> bool:
        if len(word) < 2:
            return False
        return fingerprint(word) in self._words

    def contains_hash(self, h: int) -> bool:
        return h in self._words

    def is_prefix_hash(self, h: int) -> bool:
        """True if ``h`` fingerprints the beginning of some word."""
        return h in self._prefixes

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._words)
