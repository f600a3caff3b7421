#!/usr/bin/env python3
"""Terminal displays for a running prediction session.

``CursesDisplay`` draws a fixed-position dashboard and polls for the stop
key; ``TqdmDisplay`` is the headless progress bar used by batch runs.  Both
expose ``begin()``, ``show(step, metrics, next_value)``, ``stop_requested()``
and ``close()``.
"""

from __future__ import annotations

import curses

from tqdm import tqdm

from lgo_predictor import LGO, LgoConstants, PredictionMetrics, round_half_away

STOP_KEYS = (ord("s"), ord("S"))
RULE_WIDTH = 100
VALUE_WIDTH = 18

# ─────────────────────────────────────────────────────────────────────────────
# Screen layout: label and value columns, one row per field
# ─────────────────────────────────────────────────────────────────────────────
CONST_X, CONST_VALUE_X = 2, 25
COMP_X, COMP_VALUE_X = 46, 72
PROOF_X, PROOF_VALUE_X = 2, 31
SCANNER_X, SCANNER_Y = 46, 18
SCANNER_HALF_WIDTH = 20
SCANNER_SCALE = 400.0
LOG_Y = 27

COMPONENT_ROWS = {
    "digits": 9,
    "base_gap": 10,
    "density_correction": 11,
    "phi_term": 12,
    "delta_final": 13,
    "fluctuation": 14,
    "residue_set": 15,
}
PROOF_ROWS = {
    "final_gap": 19,
    "pnt_ratio": 21,
    "zeta_line": 22,
}


def scanner_offset(pnt_ratio: float) -> int:
    """Column offset of the scanner pointer for ``pnt_ratio``.

    The deviation from the nearest integer is scaled so ``±0.05`` spans the
    full half width, then clamped.
    """
    target = round_half_away(pnt_ratio)
    offset = round_half_away((pnt_ratio - target) * SCANNER_SCALE)
    return max(-SCANNER_HALF_WIDTH, min(SCANNER_HALF_WIDTH, offset))


class CursesDisplay:
    def __init__(self, win, constants: LgoConstants = LGO) -> None:
        self.win = win
        self.constants = constants

    def _put(self, y: int, x: int, text: str) -> None:
        # clip to the window; the bottom-right cell cannot be written
        h, w = self.win.getmaxyx()
        if y >= h or x >= w:
            return
        room = w - x - (1 if y == h - 1 else 0)
        if room > 0:
            self.win.addstr(y, x, text[:room])

    def begin(self) -> None:
        """Hide the cursor, clear the screen and draw every static label."""
        c = self.constants
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal cannot hide the cursor
        self.win.nodelay(True)
        self.win.erase()

        self._put(0, 0, "=" * RULE_WIDTH)
        self._put(1, 0, "      LGO Deterministic Predictor - Console Mode Running...")
        self._put(2, 0, "=" * RULE_WIDTH)
        self._put(4, COMP_X, "PRESS 'S' TO STOP AND RETURN TO MENU")

        self._put(7, CONST_X, "-" * 40)
        self._put(8, CONST_X, "          CONSTANT PANEL")
        self._put(9, CONST_X, "-" * 40)
        self._put(10, CONST_X, "Muon Mass (kg):")
        self._put(10, CONST_VALUE_X, f"{c.muon_mass:e}")
        self._put(11, CONST_X, "Electron Mass (kg):")
        self._put(11, CONST_VALUE_X, f"{c.electron_mass:e}")
        self._put(12, CONST_X, "Phi Dampener (Phi/2):")
        self._put(12, CONST_VALUE_X, f"{c.phi_dampener:.9f}")
        self._put(13, CONST_X, "LGO Static Constant:")
        self._put(13, CONST_VALUE_X, f"{c.mass_ratio:.9f}")
        self._put(14, CONST_X, "Rigid Constant C_LGO*:")
        self._put(14, CONST_VALUE_X, f"{c.c_star:.9f}")
        self._put(15, CONST_X, "Status:")
        self._put(15, CONST_VALUE_X, "STABLE (C_LGO*)")
        self._put(16, CONST_X, "-" * 40)

        self._put(7, COMP_X, "--- PREDICTOR COMPONENTS ---")
        labels = {
            "digits": "Current Digits:",
            "base_gap": "Base Gap Heuristic:",
            "density_correction": "Density Correction (G):",
            "phi_term": "PHI Correlative (Phi):",
            "delta_final": "Ulam/Mod7 Delta:",
            "fluctuation": "Fluctuation Delta (0):",
            "residue_set": "Current Set:",
        }
        for key, label in labels.items():
            self._put(COMPONENT_ROWS[key], COMP_X, label)

        self._put(18, PROOF_X, "--- PROOF METRICS ---")
        self._put(PROOF_ROWS["final_gap"], PROOF_X, "FINAL GAP:")
        self._put(20, PROOF_X, "-" * 40)
        self._put(PROOF_ROWS["pnt_ratio"], PROOF_X, "PNT Gap Ratio (Gap/ln(Pn)):")
        self._put(PROOF_ROWS["zeta_line"], PROOF_X, "Zeta Critical Line Check:")
        self._put(PROOF_ROWS["zeta_line"], PROOF_VALUE_X, f"{c.zeta_line:.9f}")

        self._put(LOG_Y - 1, 0, "=" * RULE_WIDTH)
        self._put(LOG_Y, 0, "[0] Next Candidate: ")
        self.win.refresh()

    def show(self, step: int, metrics: PredictionMetrics, next_value: str) -> None:
        self._put(4, 0, f" Value Used: {metrics.digits} digits...".ljust(COMP_X - 1))

        values = {
            "digits": metrics.digits,
            "base_gap": metrics.base_gap,
            "density_correction": metrics.density_correction,
            "phi_term": f"{metrics.phi_term:.6f}",
            "delta_final": metrics.delta_final,
            "fluctuation": 0,
            "residue_set": metrics.residue_class.label,
        }
        for key, value in values.items():
            self._put(COMPONENT_ROWS[key], COMP_VALUE_X, f"{value!s:<{VALUE_WIDTH}}")

        self._put(PROOF_ROWS["final_gap"], PROOF_VALUE_X, f"{metrics.final_gap:<{VALUE_WIDTH}}")
        self._put(PROOF_ROWS["pnt_ratio"], PROOF_VALUE_X, f"{metrics.pnt_ratio:<{VALUE_WIDTH}.6f}")

        self.draw_scanner(metrics.pnt_ratio)

        _, w = self.win.getmaxyx()
        line = f"[{step}] Next Candidate: {next_value}"
        self._put(LOG_Y, 0, line.ljust(w))
        self.win.refresh()

    def draw_scanner(self, pnt_ratio: float) -> None:
        center = SCANNER_X + 8 + SCANNER_HALF_WIDTH
        span = 2 * SCANNER_HALF_WIDTH + 1
        self._put(SCANNER_Y, SCANNER_X, "--- NON-CRITICAL ZERO LINE ---")
        self._put(SCANNER_Y + 1, SCANNER_X, f"Target: {round_half_away(pnt_ratio)}.0".ljust(VALUE_WIDTH))
        self._put(SCANNER_Y + 2, SCANNER_X, " " * (span + 16))
        self._put(SCANNER_Y + 2, center + scanner_offset(pnt_ratio), "*")
        self._put(SCANNER_Y + 3, SCANNER_X, "  -0.05 |" + "-" * (span - 2) + "| +0.05")
        self._put(SCANNER_Y + 3, center, "|")
        self._put(SCANNER_Y + 4, SCANNER_X, f"PNT Ratio: {pnt_ratio:.6f}".ljust(VALUE_WIDTH + 11))

    def stop_requested(self) -> bool:
        return self.win.getch() in STOP_KEYS

    def close(self) -> None:
        self.win.nodelay(False)


class TqdmDisplay:
    """Progress bar display for headless runs."""

    def __init__(self, total: int | None = None, desc: str = "Predicting", file=None) -> None:
        self.total = total
        self.desc = desc
        self.file = file
        self.bar = None

    def begin(self) -> None:
        self.bar = tqdm(total=self.total, desc=self.desc, unit="step", file=self.file)

    def show(self, step: int, metrics: PredictionMetrics, next_value: str) -> None:
        self.bar.set_postfix(
            digits=metrics.digits,
            gap=metrics.final_gap,
            set=metrics.residue_class.label,
            ratio=f"{metrics.pnt_ratio:.6f}",
            refresh=False,
        )
        self.bar.update(1)

    def stop_requested(self) -> bool:
        return False

    def close(self) -> None:
        if self.bar is not None:
            self.bar.close()
            self.bar = None
