"""
Streamlit front end: play Wordle, run the solver on a real game, view word-list stats.

Run with `streamlit run wordle_assistant/app.py` (or menu option 3 of `wordle`).
"""

import streamlit as st

from wordle_assistant import config
from wordle_assistant.constraints import GuessRow, aggregate
from wordle_assistant.errors import WordleError
from wordle_assistant.game import KEYBOARD_ROWS, GameStatus, KeyState, WordleGame
from wordle_assistant.loader import load_dictionary_files
from wordle_assistant.ranker import remaining_answers, top_n
from wordle_assistant.stats import format_report, stats
from wordle_assistant.words import is_valid_word

FEEDBACK_OPTIONS = [config.ABSENT, config.PRESENT, config.CORRECT]
DEFAULT_FEEDBACK = [config.ABSENT] * config.WORD_LENGTH
KEY_COLORS = {
    KeyState.UNUSED: ("white", "black"),
    KeyState.ABSENT: (config.COLORS[config.ABSENT], "white"),
    KeyState.PRESENT: (config.COLORS[config.PRESENT], "white"),
    KeyState.CORRECT: (config.COLORS[config.CORRECT], "white"),
}

TILE_CSS = """
    <style>
        .tile {
            display: inline-flex;
            justify-content: center;
            align-items: center;
            width: 50px;
            height: 50px;
            border: 2px solid #d3d6da;
            margin: 2px;
            font-size: 2em;
            font-weight: bold;
            text-transform: uppercase;
            color: white;
        }
        .tile[data-state="G"] { background-color: #6aaa64; border-color: #6aaa64; }
        .tile[data-state="Y"] { background-color: #c9b458; border-color: #c9b458; }
        .tile[data-state="X"] { background-color: #787c7e; border-color: #787c7e; }
        .tile[data-state="empty"] { background-color: white; border-color: #d3d6da; }
        .key {
            display: inline-block;
            width: 30px;
            height: 30px;
            line-height: 30px;
            margin: 2px;
            text-align: center;
            border: 1px solid gray;
            font-weight: bold;
        }
    </style>
"""


@st.cache_resource  # Cache the dictionary across reruns
def get_dictionary():
    answers_path, accepted_path = config.word_list_paths()
    try:
        return load_dictionary_files(answers_path, accepted_path)
    except FileNotFoundError:
        st.error(f"Could not load {answers_path}")
    except WordleError as e:
        st.error(f"CRITICAL: {e}")
    st.stop()


def display_guess_grid(rows, total_rows):
    st.markdown(TILE_CSS, unsafe_allow_html=True)

    # Past guesses
    for guess, feedback in rows:
        cols = st.columns(config.WORD_LENGTH)
        for i, letter in enumerate(guess):
            with cols[i]:
                st.markdown(f'<div class="tile" data-state="{feedback[i]}">{letter}</div>', unsafe_allow_html=True)

    # Empty rows for remaining guesses
    for _ in range(total_rows - len(rows)):
        cols = st.columns(config.WORD_LENGTH)
        for i in range(config.WORD_LENGTH):
            with cols[i]:
                st.markdown('<div class="tile" data-state="empty">&nbsp;</div>', unsafe_allow_html=True)


def display_keyboard(keyboard):
    for indent, row in enumerate(KEYBOARD_ROWS):
        keys = []
        for letter in row:
            background, color = KEY_COLORS[keyboard[letter]]
            keys.append(f'<span class="key" style="background-color:{background}; color:{color};">{letter}</span>')
        st.markdown(f'<div style="padding-left:{indent * 15}px">{"".join(keys)}</div>', unsafe_allow_html=True)


# --- Play page ---

def play_page(dictionary):
    if "game" not in st.session_state:
        st.session_state.game = WordleGame.new(dictionary)
        st.session_state.show_optimal = False
    game = st.session_state.game

    grid_col, control_col = st.columns([2, 1])
    with grid_col:
        st.subheader("Guesses")
        display_guess_grid(game.rows, game.max_guesses)
        st.write("Keyboard:")
        display_keyboard(game.keyboard)

    with control_col:
        st.subheader("Controls")
        if game.status is GameStatus.WON:
            st.success(game.message)
        elif game.status is GameStatus.LOST:
            st.error(game.message)
        else:
            st.write(game.message)
            with st.form("guess_form", clear_on_submit=True):
                guess = st.text_input("Enter your guess:", max_chars=config.WORD_LENGTH)
                if st.form_submit_button("Guess"):
                    try:
                        game.submit(guess)
                    except WordleError as e:
                        st.warning(str(e))
                    else:
                        st.rerun()

            if st.button("Show Optimal Guess"):
                st.session_state.show_optimal = not st.session_state.show_optimal
            if st.session_state.show_optimal:
                best = game.optimal_guess()
                st.info(f"Optimal guess: **{best}**" if best else "No valid words remaining.")

        if st.button("New Game"):
            st.session_state.game = WordleGame.new(dictionary)
            st.session_state.show_optimal = False
            st.rerun()


# --- Solver page ---

def reset_solver():
    st.session_state.solver_rows = []  # List of GuessRow
    st.session_state.current_feedback = list(DEFAULT_FEEDBACK)  # Feedback for the *next* guess
    st.session_state.current_guess_input = ""
    st.session_state.top_suggestions = []
    st.session_state.suggestion_index = 0


def solver_page(dictionary):
    if "solver_rows" not in st.session_state:
        reset_solver()

    rows = st.session_state.solver_rows
    constraints = aggregate(rows)
    solved = bool(rows) and rows[-1].feedback.solved
    game_over = solved or len(rows) >= config.MAX_GUESSES

    if st.sidebar.button("Reset Solver"):
        reset_solver()
        st.rerun()

    grid_col, control_col = st.columns([2, 1])
    with grid_col:
        st.subheader("Guess Grid")
        display_guess_grid(rows, config.MAX_GUESSES)

    possible = remaining_answers(dictionary, constraints)

    with control_col:
        st.subheader("Controls")
        if game_over:
            if solved:
                st.success(f"Solved in {len(rows)} guesses! 🎉")
            else:
                st.error(f"Out of guesses after {len(rows)} tries.")
            if 1 <= len(possible) <= 10:
                st.info(f"Possible remaining words: {', '.join(possible)}")
            return

        st.write(f"Possible answers remaining: **{len(possible)}**")
        if not constraints.is_empty():
            st.caption(" · ".join(f"{k}: {v}" for k, v in constraints.summary().items()))

        # Get suggestions if not already calculated for this turn
        if not st.session_state.top_suggestions:
            st.session_state.top_suggestions = [w for w, _ in top_n(dictionary, constraints, config.NUM_SUGGESTIONS)]
            st.session_state.suggestion_index = 0
            if st.session_state.top_suggestions:
                st.session_state.current_guess_input = st.session_state.top_suggestions[0]

        suggestions = st.session_state.top_suggestions
        if suggestions:
            index = st.session_state.suggestion_index
            st.info(f"Solver Suggests ({index + 1}/{len(suggestions)}): **{suggestions[index]}**")
            if len(suggestions) > 1:
                if st.button("Next Suggestion", disabled=index >= len(suggestions) - 1):
                    st.session_state.suggestion_index += 1
                    st.session_state.current_guess_input = suggestions[st.session_state.suggestion_index]
                    st.rerun()
        else:
            st.warning("No valid words remaining. Check the feedback you entered.")

        guess = st.text_input(
            "Enter Your Guess:",
            value=st.session_state.current_guess_input,
            max_chars=config.WORD_LENGTH,
        ).upper().strip()

        st.write("Click to set feedback for your guess:")
        if is_valid_word(guess):
            feedback_cols = st.columns(config.WORD_LENGTH)
            for i, letter in enumerate(guess):
                with feedback_cols[i]:
                    current_status = st.session_state.current_feedback[i]
                    # Cycle through feedback options on click
                    if st.button(letter, key=f"fb_{i}", help=f"Current: {current_status}"):
                        next_index = (FEEDBACK_OPTIONS.index(current_status) + 1) % len(FEEDBACK_OPTIONS)
                        st.session_state.current_feedback[i] = FEEDBACK_OPTIONS[next_index]
                        st.rerun()
                    color = config.COLORS.get(current_status, config.COLORS["empty"])
                    st.markdown(f'<div style="width:30px; height:10px; background-color:{color}; margin: auto; border: 1px solid black;"></div>', unsafe_allow_html=True)

            if st.button("Submit Guess and Feedback"):
                try:
                    row = GuessRow.parse(guess, "".join(st.session_state.current_feedback))
                except WordleError as e:
                    st.warning(str(e))
                else:
                    if not dictionary.is_playable(row.guess):
                        st.warning(f"'{row.guess}' is not in the valid word list.")
                    else:
                        rows.append(row)
                        st.session_state.current_feedback = list(DEFAULT_FEEDBACK)
                        st.session_state.current_guess_input = ""
                        st.session_state.top_suggestions = []  # force recalculation
                        st.session_state.suggestion_index = 0
                        st.rerun()
        elif guess:
            st.warning("Type a 5-letter word to enable feedback input.")

    if 1 < len(possible) <= 15:
        with grid_col:
            st.write("---")
            st.write(f"**Potential Answers ({len(possible)}):**")
            st.write(", ".join(possible))


# --- Stats page ---

def stats_page(dictionary):
    report = stats(dictionary)
    left, right = st.columns(2)
    with left:
        st.metric("Answers", report.total_answers)
        st.subheader("Best starting words")
        st.table([{"word": w, "score": s} for w, s in report.best_starters])
        st.subheader("Most common 3-letter prefixes")
        st.table([{"prefix": p, "count": n} for p, n in report.top_prefixes])
    with right:
        st.metric("Accepted guesses", report.total_accepted)
        st.subheader("Letter frequency")
        st.bar_chart({letter: count for letter, count in sorted(report.letter_frequency)})
        st.subheader("Top letters by position")
        table_rows = []
        for rank in range(config.STATS_TOP):
            row = {}
            for pos, counts in enumerate(report.positional):
                row[f"Position {pos + 1}"] = f"{counts[rank][0]} ({counts[rank][1]})" if rank < len(counts) else ""
            table_rows.append(row)
        st.table(table_rows)
    with st.expander("Plain-text report"):
        st.code(format_report(report), language=None)


# --- App ---

PAGES = {
    "Play Wordle": play_page,
    "Solver": solver_page,
    "Stats": stats_page,
}

st.set_page_config(page_title="Wordle", layout="wide")
st.title("🧠 Wordle")

dictionary = get_dictionary()
page = st.sidebar.radio("Menu", list(PAGES))
PAGES[page](dictionary)
