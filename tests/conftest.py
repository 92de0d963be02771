import pytest

from wordle_assistant import Dictionary

ANSWERS = [
    "CRANE", "SLATE", "FREON", "LEMON", "ERASE", "LATER", "ALLEY", "SPEED",
    "PRONE", "BRINE", "DRONE", "MONEY", "HOUSE", "LIGHT", "WORLD", "PLUMB",
    "CHILD", "GHOST", "FJORD", "NYMPH",
]
ACCEPTED = ["MELEE", "STERN", "ROATE", "EERIE", "BOOKS", "QUEEN", "KAYAK", "CRANE"]


@pytest.fixture
def dictionary():
    return Dictionary.from_lists(ANSWERS, ACCEPTED)


@pytest.fixture
def all_words():
    return sorted(set(ANSWERS) | set(ACCEPTED))
