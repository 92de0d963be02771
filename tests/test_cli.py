import logging

import pytest

from wordle_assistant import cli
from wordle_assistant.game import KeyState


@pytest.fixture
def word_files(tmp_path):
    answers = tmp_path / "WordList.txt"
    accepted = tmp_path / "AcceptedWordList"
    answers.write_text("LEMON\n")
    accepted.write_text("CRANE\nMELEE\n")
    return answers, accepted


@pytest.fixture
def feed_input(monkeypatch):
    def feed(*lines):
        it = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", fake_input)
    return feed


def run(word_files, *extra):
    answers, accepted = word_files
    return cli.main(["--answers", str(answers), "--accepted", str(accepted), *extra])


def test_exit(word_files, feed_input, capsys):
    feed_input("4")
    assert run(word_files) == 0
    assert "1) Play in terminal" in capsys.readouterr().out


def test_analyze(word_files, feed_input, capsys):
    feed_input("2", "4")
    assert run(word_files) == 0
    out = capsys.readouterr().out
    assert "Answers: 1" in out
    assert "Accepted guesses: 2" in out
    assert "LEMON" in out


def test_play_terminal(word_files, feed_input, capsys):
    feed_input("1", "?", "xyz", "ZZZZZ", "crane", "lemon", "4")
    assert run(word_files, "--seed", "3") == 0
    out = capsys.readouterr().out
    assert "You have 5 guesses." in out
    assert "Optimal guess: LEMON" in out
    assert "Invalid word 'xyz'" in out
    assert "'ZZZZZ' is not in the valid word list." in out
    assert "Guess 1: CRANE  XXXYY" in out
    assert "Guess 2: LEMON  GGGGG" in out
    assert "Congratulations! You guessed the word!" in out


def test_verbose_log_keeps_answer_hidden(word_files, feed_input, caplog):
    caplog.set_level(logging.DEBUG)
    feed_input("1", "crane", "4")
    assert run(word_files, "-v") == 0
    assert caplog.records
    assert "LEMON" not in caplog.text


def test_unknown_choice(word_files, feed_input, capsys):
    feed_input("9", "4")
    assert run(word_files) == 0
    assert "Please enter 1, 2, 3 or 4." in capsys.readouterr().out


def test_end_of_input_exits_cleanly(word_files, feed_input):
    feed_input()
    assert run(word_files) == 0


def test_gui_unavailable(word_files, feed_input, monkeypatch, capsys):
    monkeypatch.setattr(cli.importlib.util, "find_spec", lambda name: None)
    feed_input("3")
    assert run(word_files) == 1
    assert "GUI not available" in capsys.readouterr().out


def test_gui_launches_streamlit(word_files, feed_input, monkeypatch):
    calls = []

    class Done:
        returncode = 0

    def fake_run(cmd, env):
        calls.append((cmd, env))
        return Done()

    monkeypatch.setattr(cli.importlib.util, "find_spec", lambda name: object())
    monkeypatch.setattr(cli.subprocess, "run", fake_run)
    feed_input("3")
    assert run(word_files) == 0
    (cmd, env), = calls
    assert cmd[1:4] == ["-m", "streamlit", "run"]
    assert cmd[4].endswith("app.py")
    assert env["WORDLE_WORD_LIST"] == str(word_files[0].resolve())


def test_missing_answers_file(tmp_path, feed_input):
    feed_input("4")
    assert cli.main(["--answers", str(tmp_path / "missing.txt")]) == 1


def test_render_keyboard():
    keyboard = {letter: KeyState.UNUSED for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"}
    keyboard.update(Q=KeyState.CORRECT, W=KeyState.PRESENT, E=KeyState.ABSENT)
    lines = cli.render_keyboard(keyboard).splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("[Q](W) . ")
    assert " A " in lines[1]
