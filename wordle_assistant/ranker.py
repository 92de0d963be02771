"""Ranked guess suggestions over a Dictionary."""

import heapq  # Needed for efficient top-N selection
from typing import Iterable, List, Optional, Tuple

from .constraints import EMPTY, ConstraintSet, RowLike, aggregate, filter_words
from .scoring import score_word
from .words import Dictionary

Ranked = List[Tuple[str, int]]


def _rank_key(item: Tuple[str, int]):
    # Highest score first, alphabetical on ties
    word, score = item
    return -score, word


def top_n(dictionary: Dictionary, constraints: ConstraintSet = EMPTY, n: int = 5) -> Ranked:
    """
    Returns the `n` best (word, score) guesses, best first.

    With no constraints the whole playable list is scored as starters (five
    distinct letters only). Otherwise only words matching `constraints` are
    scored, rewarding use of the letters known to be present. An
    unsatisfiable constraint set gives an empty list.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0:
        return []

    table = dictionary.position_freq
    scored: Ranked = []
    if constraints.is_empty():
        for word in dictionary.playable:
            score = score_word(word, table, for_starter=True)
            if score is not None:
                scored.append((word, score))
    else:
        for word in filter_words(dictionary.playable, constraints):
            scored.append((word, score_word(word, table, constraints.present)))

    return heapq.nsmallest(n, scored, key=_rank_key)


def optimal(dictionary: Dictionary, constraints: ConstraintSet = EMPTY) -> Optional[str]:
    """The single best guess, or None when nothing fits."""
    best = top_n(dictionary, constraints, 1)
    return best[0][0] if best else None


def suggest(dictionary: Dictionary, rows: Iterable[RowLike], n: int = 5) -> Ranked:
    return top_n(dictionary, aggregate(rows), n)


def remaining_answers(dictionary: Dictionary, constraints: ConstraintSet = EMPTY) -> List[str]:
    """Answers still consistent with `constraints`, sorted."""
    return filter_words(sorted(dictionary.answers), constraints)
