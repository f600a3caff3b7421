#!/usr/bin/env python3
"""LGO Deterministic Predictor console.

Interactive mode (default) shows the start-value menu, then runs the
predictor on a full-screen curses dashboard until 'S' is pressed, and
returns to the menu.  Every predicted value is appended to the sequence
file.

Headless runs:

    python3 lgo_console.py --start 9999999967 --steps 1000
    python3 lgo_console.py --resume --steps 500
    python3 lgo_console.py --plot --save gaps.png
"""

import argparse
import curses
import logging
import sys

from lgo_arith import InvalidInput, parse_decimal_string
from lgo_display import CursesDisplay, TqdmDisplay
from lgo_menu import InputSelector
from lgo_session import DEFAULT_DELAY, PredictionSession, run_session
from lgo_store import SEQUENCE_FILE, SequenceStore

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
INTERACTIVE_LOG_FILE = "lgo_predictor.log"

logger = logging.getLogger(__name__)


def configure_logging(level: str, log_file: str | None) -> None:
    logging.basicConfig(filename=log_file, level=getattr(logging, level), format=LOG_FORMAT)


# ─────────────────────────────────────────────────────────────────────────────
# Modes
# ─────────────────────────────────────────────────────────────────────────────

def _curses_run(stdscr, session: PredictionSession, delay: float) -> int:
    return run_session(session, CursesDisplay(stdscr), delay=delay)


def run_interactive(store: SequenceStore, delay: float) -> int:
    """Menu -> curses run -> menu until the user quits; return total predictions."""
    selector = InputSelector(store)
    total = 0
    while True:
        value = selector.select()
        if value is None:
            break
        session = PredictionSession(value, store)
        made = curses.wrapper(_curses_run, session, delay)
        total += made
        print(f"\n--- Stopped after {made} predictions; returning to menu... ---\n")
    print(f"\n--- Program Terminated. Total Predictions: {total} ---")
    return total


def run_batch(store: SequenceStore, start: str, steps: int, delay: float) -> int:
    session = PredictionSession(start, store)
    made = run_session(session, TqdmDisplay(total=steps), delay=delay, max_steps=steps)

    print("\n--- Prediction Run Complete ---")
    print(f"Start value: {len(start)} digits")
    print(f"Predictions made: {made}")
    if session.last_metrics is not None:
        m = session.last_metrics
        print(f"Last gap: {m.final_gap} ({m.residue_class.label})")
        print(f"Last PNT ratio: {m.pnt_ratio:.6f}")
    print(f"Last value ({len(session.current)} digits) appended to {store.path}")
    return made


def run_plot(store: SequenceStore, save_path: str | None) -> None:
    # matplotlib is only needed here
    from lgo_plot import plot_sequence

    values = store.read_values()
    print(f"Plotting {len(values)} values from {store.path}")
    plot_sequence(values, save_path)
    if save_path:
        print(f"Plot written to {save_path}")


# ─────────────────────────────────────────────────────────────────────────────
# Command-line interface
# ─────────────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="LGO Deterministic Predictor: closed-form gap sequence generator"
    )
    parser.add_argument('--file', default=SEQUENCE_FILE,
                        help=f"Sequence file (default {SEQUENCE_FILE})")
    parser.add_argument('--delay', type=float,
                        help=f"Pause between steps in seconds "
                             f"(default {DEFAULT_DELAY} interactive, 0 headless)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--start', help="Run headless from this start value")
    mode.add_argument('--resume', action='store_true',
                      help="Run headless from the last value in the sequence file")
    mode.add_argument('--plot', action='store_true',
                      help="Plot gaps and PNT ratios of the sequence file")
    parser.add_argument('--steps', type=int, default=100,
                        help="Predictions to make in a headless run (default 100)")
    parser.add_argument('--save', help="With --plot, write the figure here instead of showing it")
    parser.add_argument('--log-level', default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument('--log-file',
                        help=f"Log file (interactive default {INTERACTIVE_LOG_FILE}, else stderr)")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    headless = args.start is not None or args.resume or args.plot
    log_file = args.log_file or (None if headless else INTERACTIVE_LOG_FILE)
    configure_logging(args.log_level, log_file)

    store = SequenceStore(args.file)

    if args.plot:
        try:
            run_plot(store, args.save)
        except (OSError, ValueError) as e:
            print("Error:", e, file=sys.stderr)
            sys.exit(1)
        return

    if args.steps < 0:
        print("Error: --steps must not be negative", file=sys.stderr)
        sys.exit(1)

    if args.start is not None or args.resume:
        if args.resume:
            start = store.load_last()
            if start is None:
                print(f"Error: no value to resume from in {store.path}", file=sys.stderr)
                sys.exit(1)
        else:
            start = args.start
        try:
            start = parse_decimal_string(start)
        except InvalidInput as e:
            print("Error:", e, file=sys.stderr)
            sys.exit(1)
        try:
            run_batch(store, start, args.steps, args.delay or 0.0)
        except OSError as e:
            print("Error:", e, file=sys.stderr)
            sys.exit(1)
        return

    delay = DEFAULT_DELAY if args.delay is None else args.delay
    run_interactive(store, delay)


if __name__ == "__main__":
    main()
