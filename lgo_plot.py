#!/usr/bin/env python3
"""Gap and PNT-ratio plots for a stored prediction sequence.

The sequence file collects every run back to back, so the values are first
split into runs: a value continues the current run only if it is exactly
what the predictor produces from the previous value.  Gaps are measured
inside runs and never across a run boundary.
"""

from __future__ import annotations

import sys

import matplotlib.pyplot as plt
import numpy as np

from lgo_predictor import natural_log, predict_next

# Stored values can have far more digits than the default int->str limit
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(100000000)


def split_runs(values: list[str]) -> list[list[str]]:
    """Group ``values`` into runs of consecutive predictions."""
    runs: list[list[str]] = []
    for value in values:
        if runs and predict_next(runs[-1][-1])[1] == value:
            runs[-1].append(value)
        else:
            runs.append([value])
    return runs


def run_steps(runs: list[list[str]]) -> list[tuple[str, str]]:
    """``(value, next_value)`` pairs taken inside each run."""
    return [(a, b) for run in runs for a, b in zip(run, run[1:])]


def sequence_gaps(values: list[str]) -> np.ndarray:
    """Gaps between successive values of the same run."""
    steps = run_steps(split_runs(values))
    return np.array([int(b) - int(a) for a, b in steps], dtype=np.int64)


def sequence_ratios(values: list[str]) -> np.ndarray:
    """``gap_i / ln(value_i)`` for every step inside a run."""
    steps = run_steps(split_runs(values))
    gaps = np.array([int(b) - int(a) for a, b in steps], dtype=np.int64)
    logs = np.array([natural_log(a) for a, _ in steps], dtype=float)
    ratios = np.zeros(len(gaps), dtype=float)
    np.divide(gaps, logs, out=ratios, where=logs > 0)
    return ratios


def plot_sequence(values: list[str], save_path: str | None = None) -> None:
    runs = split_runs(values)
    gaps = sequence_gaps(values)
    if len(gaps) == 0:
        raise ValueError("Need at least two consecutive predicted values to plot gaps")
    ratios = sequence_ratios(values)
    steps = np.arange(1, len(gaps) + 1)

    fig, (ax_gap, ax_ratio) = plt.subplots(2, 1, figsize=(12, 7), sharex=True)
    ax_gap.plot(steps, gaps, color='blue', linewidth=1)
    ax_gap.set_ylabel("Predicted gap")
    ax_gap.set_title(f"LGO sequence: {len(values)} values in {len(runs)} run(s), "
                     f"{len(values[0])} → {len(values[-1])} digits")
    ax_gap.grid(True)

    ax_ratio.plot(steps, ratios, color='orange', linewidth=1)
    ax_ratio.axhline(np.mean(ratios), color='green', linewidth=1, linestyle='--',
                     label=f"mean = {np.mean(ratios):.6f}")
    ax_ratio.set_xlabel("Step")
    ax_ratio.set_ylabel("Gap / ln(Pn)")
    ax_ratio.legend()
    ax_ratio.grid(True)

    # mark where one run ends and the next begins
    boundary = 0
    for run in runs[:-1]:
        boundary += len(run) - 1
        if 0 < boundary < len(gaps):
            for ax in (ax_gap, ax_ratio):
                ax.axvline(boundary + 0.5, color='gray', linewidth=1, linestyle=':')
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path)
        plt.close(fig)
    else:
        plt.show()
