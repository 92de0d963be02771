from collections import Counter
from itertools import product

import pytest

from wordle_assistant import Feedback, InvalidFeedback, InvalidWord, Mark, compute_feedback, feedback_string
from wordle_assistant.feedback import SOLVED


@pytest.mark.parametrize("guess,answer,expected", [
    ("SPEED", "ERASE", "YXYYX"),
    ("ALLEY", "LATER", "YYXGX"),  # second L is surplus; E sits on the answer's E
    ("CRANE", "CRANE", "GGGGG"),
    ("CRANE", "FREON", "XGXYY"),
    ("STERN", "FREON", "XXGYG"),
    ("MELEE", "LEMON", "YGYXX"),
    ("EERIE", "SPEED", "YYXXX"),
    ("LEVEL", "HELLO", "YGXXY"),
    ("BOOKS", "FJORD", "XXGXX"),  # green takes the only O before the first O can be yellow
    ("ROATE", "NYMPH", "XXXXX"),
])
def test_feedback_golden(guess, answer, expected):
    assert str(compute_feedback(guess, answer)) == expected
    assert feedback_string(guess, answer) == expected


def test_feedback_accepts_lowercase():
    assert str(compute_feedback("speed", "erase")) == "YXYYX"


def test_feedback_rejects_malformed_words():
    with pytest.raises(InvalidWord):
        compute_feedback("SPEEDY", "ERASE")
    with pytest.raises(InvalidWord):
        compute_feedback("SPEED", "ER4SE")


def test_feedback_self_match(all_words):
    for word in all_words:
        assert compute_feedback(word, word) == SOLVED
        assert compute_feedback(word, word).solved


def test_feedback_properties(all_words):
    for guess, answer in product(all_words, repeat=2):
        fb = compute_feedback(guess, answer)
        assert len(fb) == 5
        assert len(str(fb)) == 5

        # G dominance
        for i in range(5):
            if guess[i] == answer[i]:
                assert fb[i] is Mark.GREEN

        # G+Y marks per letter equal the shared multiplicity
        hits = Counter(g for g, m in zip(guess, fb) if m is not Mark.ABSENT)
        guess_counts, answer_counts = Counter(guess), Counter(answer)
        for letter in guess_counts:
            assert hits[letter] == min(guess_counts[letter], answer_counts[letter])


def test_parse_round_trip():
    fb = Feedback.parse(" gyxXG ")
    assert fb == (Mark.GREEN, Mark.YELLOW, Mark.ABSENT, Mark.ABSENT, Mark.GREEN)
    assert str(fb) == "GYXXG"
    assert Feedback.coerce(fb) is fb
    assert Feedback.coerce("GYXXG") == fb
    assert not fb.solved


@pytest.mark.parametrize("text", ["GYXX", "GYXXGG", "GYXXB", "", "-GYYY", None])
def test_parse_rejects(text):
    with pytest.raises(InvalidFeedback):
        Feedback.parse(text)


def test_feedback_needs_five_marks():
    with pytest.raises(InvalidFeedback):
        Feedback([Mark.GREEN] * 4)
    with pytest.raises(InvalidFeedback):
        Feedback(["G", "G", "G", "G", "G"])
