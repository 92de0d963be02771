"""Letter frequency tables over a word list."""

from collections import Counter
from typing import Iterable, List, Optional, Tuple

from .config import WORD_LENGTH

# One Counter per position: table[pos][letter] -> number of words with letter at pos
PositionFreqTable = Tuple[Counter, ...]


def build_position_freq(words: Iterable[str]) -> PositionFreqTable:
    """Calculates letter frequencies for each position."""
    positional_frequencies = [Counter() for _ in range(WORD_LENGTH)]
    for word in words:
        for i, letter in enumerate(word):
            positional_frequencies[i][letter] += 1
    return tuple(positional_frequencies)


def letter_frequencies(words: Iterable[str]) -> Counter:
    """Calculates overall letter frequencies."""
    return Counter("".join(words))


def prefix_frequencies(words: Iterable[str], length: int = 3) -> Counter:
    return Counter(word[:length] for word in words)


def ranked(counts: Counter, limit: Optional[int] = None) -> List[Tuple[str, int]]:
    """Sorts (key, count) pairs by count descending, then key ascending."""
    items = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return items if limit is None else items[:limit]
