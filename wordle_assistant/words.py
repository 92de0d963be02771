"""Word validation and the answers/accepted dictionary."""

import re
from dataclasses import dataclass, field
from functools import cached_property
from typing import FrozenSet, Iterable, Tuple

from .config import WORD_LENGTH
from .errors import DictionaryEmpty, InvalidWord
from .frequency import PositionFreqTable, build_position_freq

_WORD_RE = re.compile(r"[A-Z]{%d}" % WORD_LENGTH)


def normalize_word(word: str) -> str:
    """Strips and uppercases `word`, raising InvalidWord unless it is five letters A-Z."""
    if not isinstance(word, str):
        raise InvalidWord(word, "must be a string")
    w = word.strip().upper()
    if len(w) != WORD_LENGTH:
        raise InvalidWord(word, f"must be {WORD_LENGTH} letters long, got {len(w)}")
    if not _WORD_RE.fullmatch(w):
        raise InvalidWord(word, "must contain only letters A-Z")
    return w


def is_valid_word(word: str) -> bool:
    try:
        normalize_word(word)
    except InvalidWord:
        return False
    return True


@dataclass(frozen=True)
class Dictionary:
    """
    The two word lists the game is played with.

    `answers` are the words that can be hidden, `accepted` the extra legal
    guesses. The sets may overlap; their union is the playable set and only
    `answers` feeds the statistics and the position-frequency table.
    """
    answers: FrozenSet[str]
    accepted: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if not self.answers:
            raise DictionaryEmpty("Cannot build a dictionary without any answers.")

    @classmethod
    def from_lists(cls, answers: Iterable[str], accepted: Iterable[str] = ()) -> "Dictionary":
        """Validates and uppercases both lists; duplicates collapse."""
        return cls(
            answers=frozenset(normalize_word(w) for w in answers),
            accepted=frozenset(normalize_word(w) for w in accepted),
        )

    @cached_property
    def playable(self) -> Tuple[str, ...]:
        """Answers and accepted words together, sorted."""
        return tuple(sorted(self.answers | self.accepted))

    @cached_property
    def position_freq(self) -> PositionFreqTable:
        return build_position_freq(self.answers)

    def is_playable(self, word: str) -> bool:
        return word in self.answers or word in self.accepted

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and self.is_playable(word.strip().upper())

    def __len__(self) -> int:
        return len(self.playable)


def load_dictionary(answers: Iterable[str], accepted: Iterable[str] = ()) -> Dictionary:
    return Dictionary.from_lists(answers, accepted)
