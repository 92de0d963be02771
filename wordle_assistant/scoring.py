"""Heuristic word scores from positional letter frequencies."""

from typing import Iterable, Optional

from .config import (
    PRESENT_BONUS,
    REPEAT_PENALTY,
    REPEAT_PENALTY_WITH_PRESENT,
    UNIQUE_BONUS,
    WORD_LENGTH,
)
from .frequency import PositionFreqTable
from .words import normalize_word


def score_word(word: str, position_freq: PositionFreqTable,
               present_letters: Iterable[str] = (), for_starter: bool = False) -> Optional[int]:
    """
    Scores a word; higher is better.

    Every word earns the positional frequency of its letters plus a bonus per
    distinct letter, and loses a penalty per repeated letter. Starter scoring
    rejects words with repeats (returns None). Constrained scoring adds a bonus
    for each known-present letter the word uses, and softens the repeat
    penalty when it uses at least one.
    """
    word = normalize_word(word)
    positional = sum(position_freq[i][letter] for i, letter in enumerate(word))
    unique = len(set(word))
    repeats = WORD_LENGTH - unique
    bonus = unique * UNIQUE_BONUS

    if for_starter:
        if unique < WORD_LENGTH:
            return None
        return positional + bonus - repeats * REPEAT_PENALTY

    used_present = len({letter.upper() for letter in present_letters} & set(word))
    presence_bonus = used_present * PRESENT_BONUS
    if used_present > 0:
        penalty = repeats * REPEAT_PENALTY_WITH_PRESENT
    else:
        penalty = repeats * REPEAT_PENALTY
    return positional + bonus + presence_bonus - penalty
