"""
Turning guess/feedback history into constraints, and filtering words by them.

Duplicate letters need care: Wordle marks the surplus copies of a letter X
when the answer holds fewer copies than the guess. Such an X only says the
answer has no *more* copies than were marked green/yellow in that row; it is
not a global absence.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Mapping, NamedTuple, Tuple, Union

from .config import WORD_LENGTH
from .feedback import Feedback, Mark
from .words import normalize_word


class GuessRow(NamedTuple):
    guess: str
    feedback: Feedback

    @classmethod
    def parse(cls, guess: str, feedback: Union[Feedback, str]) -> "GuessRow":
        return cls(normalize_word(guess), Feedback.coerce(feedback))

    def __str__(self) -> str:
        return f"{self.guess} {self.feedback}"


RowLike = Union[GuessRow, Tuple[str, Union[Feedback, str]]]


@dataclass(frozen=True)
class ConstraintSet:
    """
    Everything known about the answer after some guesses.

    The fields are plain mappings, so a ConstraintSet compares by value but
    is not hashable.
    """
    green: Mapping[int, str] = field(default_factory=dict)  # position -> letter
    yellow_forbidden: Mapping[str, FrozenSet[int]] = field(default_factory=dict)  # letter -> positions it cannot take
    present: FrozenSet[str] = frozenset()
    absent: FrozenSet[str] = frozenset()
    min_count: Mapping[str, int] = field(default_factory=dict)
    max_count: Mapping[str, int] = field(default_factory=dict)

    __hash__ = None

    def __post_init__(self):
        # Accept plain dicts/sets from callers; store normalized copies
        object.__setattr__(self, "green", {int(pos): letter.upper() for pos, letter in dict(self.green).items()})
        object.__setattr__(self, "yellow_forbidden", {
            letter.upper(): frozenset(int(pos) for pos in positions)
            for letter, positions in dict(self.yellow_forbidden).items() if positions
        })
        object.__setattr__(self, "present", frozenset(letter.upper() for letter in self.present))
        object.__setattr__(self, "absent", frozenset(letter.upper() for letter in self.absent))
        object.__setattr__(self, "min_count", {
            letter.upper(): int(n) for letter, n in dict(self.min_count).items() if n > 0
        })
        object.__setattr__(self, "max_count", {letter.upper(): int(n) for letter, n in dict(self.max_count).items()})

    def is_empty(self) -> bool:
        return not (self.green or self.yellow_forbidden or self.present
                    or self.absent or self.min_count or self.max_count)

    @property
    def pattern(self) -> str:
        """Greens as a pattern such as "_R_EN"."""
        return "".join(self.green.get(i, "_") for i in range(WORD_LENGTH))

    def summary(self) -> Dict[str, str]:
        return {
            "greens": self.pattern,
            "must_include": "".join(sorted(self.present)) or "(none)",
            "must_exclude": "".join(sorted(self.absent)) or "(none)",
            "yellows_not_here": ", ".join(
                f"{letter}:{''.join(str(pos + 1) for pos in sorted(positions))}"
                for letter, positions in sorted(self.yellow_forbidden.items())
            ) or "(none)",
        }


EMPTY = ConstraintSet()


def aggregate(rows: Iterable[RowLike]) -> ConstraintSet:
    """Folds a guess/feedback history into one ConstraintSet."""
    green: Dict[int, str] = {}
    forbidden: Dict[str, set] = {}
    present = set()
    absent = set()
    min_count: Dict[str, int] = {}
    max_count: Dict[str, int] = {}

    for row in rows:
        guess, marks = GuessRow.parse(*row)

        # Non-gray instances of each letter in *this* guess
        hits = Counter(letter for letter, mark in zip(guess, marks) if mark is not Mark.ABSENT)

        for i, (letter, mark) in enumerate(zip(guess, marks)):
            if mark is Mark.GREEN:
                green[i] = letter
                present.add(letter)
            elif mark is Mark.YELLOW:
                forbidden.setdefault(letter, set()).add(i)
                present.add(letter)
            elif hits[letter] == 0:
                absent.add(letter)
            else:
                # Surplus copy: the answer holds exactly `hits` of this letter
                max_count[letter] = min(max_count.get(letter, WORD_LENGTH), hits[letter])

        for letter, n in hits.items():
            min_count[letter] = max(min_count.get(letter, 0), n)

    absent -= {letter for letter, n in min_count.items() if n > 0}

    return ConstraintSet(
        green=green,
        yellow_forbidden=forbidden,
        present=present,
        absent=absent,
        min_count=min_count,
        max_count=max_count,
    )


def matches(word: str, constraints: ConstraintSet) -> bool:
    """True if `word` is consistent with every constraint."""
    word = normalize_word(word)
    return _matches(word, constraints)


def _matches(word: str, c: ConstraintSet) -> bool:
    # fixed greens
    for pos, letter in c.green.items():
        if word[pos] != letter:
            return False
    # yellows cannot be at those positions
    for letter, positions in c.yellow_forbidden.items():
        if any(word[pos] == letter for pos in positions):
            return False

    counts = Counter(word)
    for letter in c.present:
        if counts[letter] < max(1, c.min_count.get(letter, 1)):
            return False
    for letter, n in c.min_count.items():
        if counts[letter] < n:
            return False

    # an absent letter may only sit where a green pins it
    pinned = Counter(c.green.values())
    for letter in c.absent:
        if letter in c.present:
            continue
        if counts[letter] != pinned[letter]:
            return False

    for letter, n in c.max_count.items():
        if counts[letter] > n:
            return False
    return True


def filter_words(words: Iterable[str], constraints: ConstraintSet) -> List[str]:
    """Keeps the words that satisfy `constraints`, order preserved. Words must already be normalized."""
    return [w for w in words if _matches(w, constraints)]
