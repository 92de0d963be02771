"""Terminal entry point: the main menu, a terminal game and the word-list analysis."""

import argparse
import importlib.util
import logging
import os
import random
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional

from . import config
from .errors import WordleError
from .game import KEYBOARD_ROWS, KeyState, WordleGame
from .loader import load_dictionary_files
from .stats import format_report, stats
from .words import Dictionary

log = logging.getLogger(__name__)

MENU = """
=== Wordle ===
1) Play in terminal
2) Analyze word lists
3) Launch GUI
4) Exit"""

APP_PATH = Path(__file__).resolve().parent / "app.py"

_KEY_FORMAT = {
    KeyState.UNUSED: " {} ",
    KeyState.ABSENT: " . ",
    KeyState.PRESENT: "({})",
    KeyState.CORRECT: "[{}]",
}


def render_keyboard(keyboard: Dict[str, KeyState]) -> str:
    """QWERTY rows; [A] green, (A) yellow, '.' gray."""
    lines = []
    for indent, row in enumerate(KEYBOARD_ROWS):
        keys = "".join(_KEY_FORMAT[keyboard[letter]].format(letter) for letter in row)
        lines.append(" " * indent + keys)
    return "\n".join(lines)


def play_terminal(dictionary: Dictionary, rng: Optional[random.Random] = None) -> WordleGame:
    """Runs one game on stdin/stdout."""
    game = WordleGame.new(dictionary, rng)
    print("\nWordle (terminal)")
    print(game.message)

    while not game.is_over:
        text = input("Enter your guess (? for the optimal guess): ").strip()
        if text == "?":
            best = game.optimal_guess()
            print(f"Optimal guess: {best}" if best else "No valid words remaining.")
            continue
        try:
            row = game.submit(text)
        except WordleError as e:
            print(e)
            continue
        print(f"Guess {game.guesses}: {row.guess}  {row.feedback}")
        print(render_keyboard(game.keyboard))
        print(game.message)
    return game


def analyze(dictionary: Dictionary) -> None:
    print(format_report(stats(dictionary)))


def launch_gui(answers: Path, accepted: Path) -> int:
    """Runs the Streamlit app; returns 1 when Streamlit is not installed."""
    if importlib.util.find_spec("streamlit") is None:
        print("GUI not available. Install streamlit to use it.")
        return 1
    env = dict(os.environ)
    env[config.WORD_LIST_ENV] = str(answers.resolve())
    env[config.ACCEPTED_LIST_ENV] = str(accepted.resolve())
    log.info(f"Starting Streamlit app {APP_PATH}")
    return subprocess.run([sys.executable, "-m", "streamlit", "run", str(APP_PATH)], env=env).returncode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordle", description="Wordle game and solver.")
    parser.add_argument("--answers", help=f"answers word list (default: ${config.WORD_LIST_ENV} or {config.DEFAULT_WORD_LIST})")
    parser.add_argument("--accepted", help=f"accepted guesses list (default: ${config.ACCEPTED_LIST_ENV} or {config.DEFAULT_ACCEPTED_LIST})")
    parser.add_argument("--seed", type=int, help="random seed for choosing answers")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    answers_path, accepted_path = config.word_list_paths(args.answers, args.accepted)
    rng = random.Random(args.seed)

    try:
        dictionary = load_dictionary_files(answers_path, accepted_path)
    except FileNotFoundError:
        log.error(f"Could not load {answers_path}")
        return 1
    except WordleError as e:
        log.error(f"{answers_path}: {e}")
        return 1

    try:
        while True:
            print(MENU)
            choice = input("Choose an option: ").strip()
            if choice == "1":
                play_terminal(dictionary, rng)
            elif choice == "2":
                analyze(dictionary)
            elif choice == "3":
                return launch_gui(answers_path, accepted_path)
            elif choice == "4":
                return 0
            else:
                print("Please enter 1, 2, 3 or 4.")
    except (EOFError, KeyboardInterrupt):
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())
