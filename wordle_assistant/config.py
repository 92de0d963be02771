"""Game constants and word-list locations."""

import os
from pathlib import Path
from typing import Optional, Tuple

WORD_LENGTH = 5
MAX_GUESSES = 5
NUM_SUGGESTIONS = 5  # How many suggestions the solver views fetch
STATS_TOP = 10

CORRECT = "G"
PRESENT = "Y"
ABSENT = "X"
COLORS = {CORRECT: "#6aaa64", PRESENT: "#c9b458", ABSENT: "#787c7e", "empty": "#d3d6da"}

# Scoring weights
UNIQUE_BONUS = 2000
PRESENT_BONUS = 5000
REPEAT_PENALTY = 10000
REPEAT_PENALTY_WITH_PRESENT = 1000

DEFAULT_WORD_LIST = "WordList.txt"
DEFAULT_ACCEPTED_LIST = "AcceptedWordList"
WORD_LIST_ENV = "WORDLE_WORD_LIST"
ACCEPTED_LIST_ENV = "WORDLE_ACCEPTED_LIST"


def word_list_paths(answers: Optional[str] = None, accepted: Optional[str] = None) -> Tuple[Path, Path]:
    """Resolves the answers and accepted list paths: argument, then environment, then cwd default."""
    answers_path = answers or os.getenv(WORD_LIST_ENV, "").strip() or DEFAULT_WORD_LIST
    accepted_path = accepted or os.getenv(ACCEPTED_LIST_ENV, "").strip() or DEFAULT_ACCEPTED_LIST
    return Path(answers_path).expanduser(), Path(accepted_path).expanduser()
