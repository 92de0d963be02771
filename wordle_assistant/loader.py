"""Reading word-list files from disk."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .errors import InvalidWord
from .words import Dictionary, normalize_word

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_word_list(path: PathLike) -> List[str]:
    """
    One word per line: whitespace trimmed, uppercased, empty lines skipped.

    Lines that are not five letters A-Z are skipped with a warning. A missing
    file raises FileNotFoundError.
    """
    path = Path(path)
    words = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            if not line.strip():
                continue
            try:
                words.append(normalize_word(line))
            except InvalidWord:
                log.warning(f"{path}:{lineno}: skipping {line.strip()!r}")
    log.debug(f"Read {len(words)} words from {path}")
    return words


def load_dictionary_files(answers_path: PathLike, accepted_path: Optional[PathLike] = None) -> Dictionary:
    """Builds a Dictionary from the answers file and the optional accepted-guesses file."""
    answers = read_word_list(answers_path)
    accepted: List[str] = []
    if accepted_path is not None:
        try:
            accepted = read_word_list(accepted_path)
        except FileNotFoundError:
            log.warning(f"Could not load '{accepted_path}'. Only answers will be accepted as guesses.")
    dictionary = Dictionary.from_lists(answers, accepted)
    log.info(f"Loaded {len(dictionary.answers)} answers and {len(dictionary.accepted)} accepted words")
    return dictionary
