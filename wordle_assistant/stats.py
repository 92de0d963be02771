"""Dictionary statistics for the stats view."""

import string
from collections import Counter
from dataclasses import dataclass
from typing import List, Tuple

from .config import STATS_TOP, WORD_LENGTH
from .constraints import EMPTY
from .frequency import letter_frequencies, prefix_frequencies, ranked
from .ranker import top_n
from .words import Dictionary

Counts = List[Tuple[str, int]]


@dataclass(frozen=True)
class StatsReport:
    total_answers: int
    total_accepted: int
    positional: List[Counts]  # per position, top letters
    letter_frequency: Counts  # all 26 letters over the answers
    top_prefixes: Counts  # 3-letter prefixes over the answers
    best_starters: Counts


def stats(dictionary: Dictionary, top: int = STATS_TOP) -> StatsReport:
    table = dictionary.position_freq
    overall = Counter({letter: 0 for letter in string.ascii_uppercase})
    overall.update(letter_frequencies(dictionary.answers))
    return StatsReport(
        total_answers=len(dictionary.answers),
        total_accepted=len(dictionary.accepted),
        positional=[ranked(table[pos], top) for pos in range(WORD_LENGTH)],
        letter_frequency=ranked(overall),
        top_prefixes=ranked(prefix_frequencies(dictionary.answers, 3), top),
        best_starters=top_n(dictionary, EMPTY, top),
    )


def format_report(report: StatsReport) -> str:
    """Plain-text rendering used by the terminal and the stats page."""
    lines = [
        "=== Word List Statistics ===",
        f"Answers: {report.total_answers}",
        f"Accepted guesses: {report.total_accepted}",
        "",
        "Most common letters by position:",
    ]
    for pos, counts in enumerate(report.positional):
        lines.append(f"  {pos + 1}: " + "  ".join(f"{l}={n}" for l, n in counts))

    lines += ["", "Overall letter frequency:"]
    freq = report.letter_frequency
    for start in range(0, len(freq), 9):
        lines.append("  " + "  ".join(f"{l}={n}" for l, n in freq[start:start + 9]))

    lines += ["", "Most common 3-letter prefixes:"]
    lines.append("  " + "  ".join(f"{p}={n}" for p, n in report.top_prefixes))

    lines += ["", "Best starting words:"]
    for rank, (word, score) in enumerate(report.best_starters, 1):
        lines.append(f"  {rank:2d}. {word}  ({score})")
    return "\n".join(lines)
