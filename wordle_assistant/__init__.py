"""
Wordle game and assistant.

The engine (feedback, constraints, scoring, ranking, stats) is pure and does no
I/O; `loader`, `cli` and `app` are the shells around it.
"""

__version__ = "1.0.0"

from .constraints import EMPTY, ConstraintSet, GuessRow, aggregate, filter_words, matches
from .errors import (
    DictionaryEmpty,
    GameOver,
    InvalidFeedback,
    InvalidWord,
    NotInWordList,
    WordleError,
)
from .feedback import Feedback, Mark, compute_feedback, feedback_string
from .frequency import build_position_freq
from .game import GameStatus, KeyState, WordleGame
from .ranker import optimal, remaining_answers, suggest, top_n
from .scoring import score_word
from .stats import StatsReport, format_report, stats
from .words import Dictionary, load_dictionary, normalize_word
