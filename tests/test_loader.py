import logging

import pytest

from wordle_assistant import DictionaryEmpty
from wordle_assistant.config import word_list_paths
from wordle_assistant.loader import load_dictionary_files, read_word_list


def test_read_word_list(tmp_path, caplog):
    path = tmp_path / "WordList.txt"
    path.write_text("  crane\n\nSLATE \r\nbad\nTOOLONG\n   \nlemon")
    with caplog.at_level(logging.WARNING):
        words = read_word_list(path)
    assert words == ["CRANE", "SLATE", "LEMON"]
    assert "BAD" in caplog.text.upper()
    assert "TOOLONG" in caplog.text


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_word_list(tmp_path / "nope.txt")


def test_load_dictionary_files(tmp_path):
    answers = tmp_path / "WordList.txt"
    accepted = tmp_path / "AcceptedWordList"
    answers.write_text("CRANE\nLEMON\n")
    accepted.write_text("MELEE\n")
    d = load_dictionary_files(answers, accepted)
    assert d.answers == {"CRANE", "LEMON"}
    assert d.accepted == {"MELEE"}


def test_missing_accepted_list_is_tolerated(tmp_path, caplog):
    answers = tmp_path / "WordList.txt"
    answers.write_text("CRANE\n")
    with caplog.at_level(logging.WARNING):
        d = load_dictionary_files(answers, tmp_path / "AcceptedWordList")
    assert d.accepted == frozenset()
    assert "AcceptedWordList" in caplog.text


def test_empty_answers_file(tmp_path):
    answers = tmp_path / "WordList.txt"
    answers.write_text("\n\n")
    with pytest.raises(DictionaryEmpty):
        load_dictionary_files(answers)


def test_word_list_paths(monkeypatch):
    monkeypatch.delenv("WORDLE_WORD_LIST", raising=False)
    monkeypatch.delenv("WORDLE_ACCEPTED_LIST", raising=False)
    answers, accepted = word_list_paths()
    assert answers.name == "WordList.txt"
    assert accepted.name == "AcceptedWordList"

    monkeypatch.setenv("WORDLE_WORD_LIST", "/data/answers.txt")
    answers, _ = word_list_paths()
    assert str(answers) == "/data/answers.txt"
    answers, _ = word_list_paths("/other/list.txt")
    assert str(answers) == "/other/list.txt"
