"""Exceptions raised by the Wordle engine and the game session."""


class WordleError(Exception):
    """Base class for every error raised by this package."""


class InvalidWord(WordleError, ValueError):
    """A word is not exactly five letters A-Z (after uppercasing)."""

    def __init__(self, word, reason: str = "must be exactly 5 letters A-Z"):
        self.word = word
        super().__init__(f"Invalid word {word!r}: {reason}")


class InvalidFeedback(WordleError, ValueError):
    """Feedback is not five symbols over G, Y and X."""

    def __init__(self, feedback, reason: str = "must be 5 symbols from G, Y, X"):
        self.feedback = feedback
        super().__init__(f"Invalid feedback {feedback!r}: {reason}")


class DictionaryEmpty(WordleError):
    """A dictionary was built without any answers."""


class NotInWordList(WordleError):
    """A well-formed guess that is neither an answer nor an accepted word."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"'{word}' is not in the valid word list.")


class GameOver(WordleError):
    """A guess was submitted after the game finished."""
