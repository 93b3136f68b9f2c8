import pytest

from scrabbler.dictionary import Dictionary

WORDS = [
    "CAT", "CATS", "SCAT", "ACT", "ACTS", "AT", "AS", "TA", "SAT",
    "TAX", "TAXI", "AX", "XI", "IT", "TI", "IS", "SI", "OX", "TO", "QI",
]


@pytest.fixture
def dictionary() -> Dictionary:
    return Dictionary.from_words(WORDS)
