"""A single game of Wordle: the hidden answer, the guesses so far and the keyboard."""

import random
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Tuple

from .config import MAX_GUESSES, NUM_SUGGESTIONS
from .constraints import ConstraintSet, GuessRow, aggregate
from .errors import GameOver, NotInWordList
from .feedback import Mark, compute_feedback
from .ranker import Ranked, optimal, top_n
from .words import Dictionary, normalize_word

KEYBOARD_ROWS: Tuple[str, ...] = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class KeyState(IntEnum):
    """Keyboard colour of a letter; a key only ever moves up this order."""
    UNUSED = 0
    ABSENT = 1
    PRESENT = 2
    CORRECT = 3


_KEY_FOR_MARK = {Mark.ABSENT: KeyState.ABSENT, Mark.YELLOW: KeyState.PRESENT, Mark.GREEN: KeyState.CORRECT}


class WordleGame:
    def __init__(self, dictionary: Dictionary, answer: str, max_guesses: int = MAX_GUESSES):
        self.dictionary = dictionary
        self.answer = normalize_word(answer)
        self.max_guesses = max_guesses
        self.rows: List[GuessRow] = []
        self.status = GameStatus.PLAYING
        self.keyboard: Dict[str, KeyState] = {
            letter: KeyState.UNUSED for row in KEYBOARD_ROWS for letter in row
        }

    @classmethod
    def new(cls, dictionary: Dictionary, rng: Optional[random.Random] = None, **kwargs) -> "WordleGame":
        """Starts a game with a random answer; pass a seeded `rng` for a reproducible pick."""
        rng = rng or random.Random()
        return cls(dictionary, rng.choice(sorted(dictionary.answers)), **kwargs)

    @property
    def guesses(self) -> int:
        return len(self.rows)

    @property
    def guesses_left(self) -> int:
        return self.max_guesses - self.guesses

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.PLAYING

    @property
    def constraints(self) -> ConstraintSet:
        return aggregate(self.rows)

    def submit(self, guess: str) -> GuessRow:
        """Plays one guess. Malformed or unknown words do not use up a guess."""
        if self.is_over:
            raise GameOver(f"The game is over ({self.status.value}).")
        word = normalize_word(guess)
        if not self.dictionary.is_playable(word):
            raise NotInWordList(word)

        row = GuessRow(word, compute_feedback(word, self.answer))
        self.rows.append(row)
        self._update_keyboard(row)

        if row.feedback.solved:
            self.status = GameStatus.WON
        elif self.guesses >= self.max_guesses:
            self.status = GameStatus.LOST
        return row

    def _update_keyboard(self, row: GuessRow) -> None:
        for letter, mark in zip(row.guess, row.feedback):
            state = _KEY_FOR_MARK[mark]
            if state > self.keyboard[letter]:
                self.keyboard[letter] = state

    def optimal_guess(self) -> Optional[str]:
        return optimal(self.dictionary, self.constraints)

    def suggestions(self, n: int = NUM_SUGGESTIONS) -> Ranked:
        return top_n(self.dictionary, self.constraints, n)

    @property
    def message(self) -> str:
        if self.status is GameStatus.WON:
            return "Congratulations! You guessed the word!"
        if self.status is GameStatus.LOST:
            return f"Sorry, you lost! The word was: {self.answer}"
        if not self.rows:
            return f"You have {self.max_guesses} guesses."
        return f"Guesses left: {self.guesses_left}"
