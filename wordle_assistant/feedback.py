"""
Per-letter feedback for a guess against an answer.

Feedback is kept as a tuple of `Mark`s and only turned into the five-character
G/Y/X form at the edges (tests, terminal input, the GUI tile grid).
"""

from enum import Enum
from typing import Iterable, List, Union

from . import config
from .config import WORD_LENGTH
from .errors import InvalidFeedback
from .words import normalize_word


class Mark(str, Enum):
    GREEN = config.CORRECT
    YELLOW = config.PRESENT
    ABSENT = config.ABSENT

    def __str__(self) -> str:
        return self.value


class Feedback(tuple):
    """Five marks, one per guess position."""

    def __new__(cls, marks: Iterable[Mark]):
        marks = tuple(marks)
        if len(marks) != WORD_LENGTH:
            raise InvalidFeedback(marks, f"must have {WORD_LENGTH} marks, got {len(marks)}")
        if not all(isinstance(m, Mark) for m in marks):
            raise InvalidFeedback(marks, "every mark must be a Mark")
        return super().__new__(cls, marks)

    @classmethod
    def parse(cls, text: str) -> "Feedback":
        """Reads the G/Y/X wire form, e.g. "XGXYY"."""
        if not isinstance(text, str):
            raise InvalidFeedback(text, "must be a string")
        symbols = text.strip().upper()
        if len(symbols) != WORD_LENGTH:
            raise InvalidFeedback(text, f"must be {WORD_LENGTH} symbols long, got {len(symbols)}")
        try:
            return cls(Mark(s) for s in symbols)
        except ValueError:
            raise InvalidFeedback(text) from None

    @classmethod
    def coerce(cls, value: Union["Feedback", str, Iterable[Mark]]) -> "Feedback":
        if isinstance(value, Feedback):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        return cls(value)

    @property
    def solved(self) -> bool:
        return self == SOLVED

    def __str__(self) -> str:
        return "".join(m.value for m in self)

    def __repr__(self) -> str:
        return f"Feedback({str(self)!r})"


SOLVED = Feedback([Mark.GREEN] * WORD_LENGTH)


def compute_feedback(guess: str, answer: str) -> Feedback:
    """
    Scores `guess` against `answer`.

    Greens are assigned first and consume their answer letter; each remaining
    guess letter then takes the leftmost still-unused equal answer letter as a
    yellow. A letter guessed more often than it occurs in the answer gets the
    surplus copies marked absent.
    """
    guess = normalize_word(guess)
    answer = normalize_word(answer)

    result: List[Mark] = [Mark.ABSENT] * WORD_LENGTH
    available = [True] * WORD_LENGTH

    # First pass: correct position
    for i in range(WORD_LENGTH):
        if guess[i] == answer[i]:
            result[i] = Mark.GREEN
            available[i] = False

    # Second pass: correct letter, wrong position
    for i in range(WORD_LENGTH):
        if result[i] is Mark.GREEN:
            continue
        for j in range(WORD_LENGTH):
            if available[j] and guess[i] == answer[j]:
                result[i] = Mark.YELLOW
                available[j] = False
                break

    return Feedback(result)


def feedback_string(guess: str, answer: str) -> str:
    return str(compute_feedback(guess, answer))
