#!/usr/bin/env python3
"""LGO deterministic gap predictor.

Given the current value as a decimal string, a fixed closed-form formula
produces a "gap" and the next value ``current + gap``.  Nothing here tests
primality; the gap is built from four pieces:

* a base heuristic that grows with the square of the digit count,
* a density correction driven by ``ln(value)`` and the rigid constant
  ``C_LGO*``,
* a residue-class offset picked by ``value mod 12``,
* a secondary offset picked by ``value mod 7``.

The final gap is always even and at least 2.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import IntEnum

from mpmath import mp, mpf

from lgo_arith import add_strings, string_mod

# mpmath parses decimal strings through int(); lift the 3.11+ digit limit
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(100000000)

# ─────────────────────────────────────────────────────────────────────────────
# 1) Rigid constant table
# ─────────────────────────────────────────────────────────────────────────────
MUON_MASS_KG = 1.8835316e-28
ELECTRON_MASS_KG = 9.1093837e-31
PHI_DAMPENER = 1.6180339887 / 2.0


@dataclass(frozen=True)
class LgoConstants:
    muon_mass: float
    electron_mass: float
    phi_dampener: float
    mass_ratio: float
    c_star: float
    zeta_line: float

    @classmethod
    def derive(cls,
               muon_mass: float = MUON_MASS_KG,
               electron_mass: float = ELECTRON_MASS_KG,
               phi_dampener: float = PHI_DAMPENER) -> "LgoConstants":
        """Build the table from the two masses and the damping factor.

        ``C_LGO* = ratio * phi/2 * ln(ratio) / ln(e*pi)`` and the zeta line
        constant is ``C_LGO* / (2*pi^4)``.
        """
        ratio = muon_mass / electron_mass
        c_star = ratio * phi_dampener * (math.log(ratio) / math.log(math.e * math.pi))
        zeta_line = c_star / (2.0 * math.pi ** 4)
        return cls(muon_mass, electron_mass, phi_dampener, ratio, c_star, zeta_line)


LGO = LgoConstants.derive()

# ─────────────────────────────────────────────────────────────────────────────
# 2) Residue classes and correction tables
# ─────────────────────────────────────────────────────────────────────────────

class ResidueClass(IntEnum):
    NONE = 0
    A = 1
    B = 2
    C = 3
    D = 4

    @property
    def label(self) -> str:
        return "SET_UNKNOWN" if self is ResidueClass.NONE else f"SET_{self.name}"


RESIDUE_DELTA = (0, -2, 2, -1, -6)        # indexed by ResidueClass
MOD7_DELTA = (0, 3, -1, 0, 1, -1, 0)      # indexed by value % 7

_MOD12_CLASS = {
    1: ResidueClass.A,
    5: ResidueClass.B,
    7: ResidueClass.C,
    11: ResidueClass.D,
}
_SMALL_PRIME_CLASS = {"2": ResidueClass.A, "3": ResidueClass.B}


@dataclass(frozen=True)
class PredictionMetrics:
    digits: int
    base_gap: int
    phi_term: float
    density_correction: int
    residue_class: ResidueClass
    residue_delta: int
    mod7_delta: int
    delta_final: int
    final_gap: int
    pnt_ratio: float


# ─────────────────────────────────────────────────────────────────────────────
# 3) Formula pieces
# ─────────────────────────────────────────────────────────────────────────────

def round_half_away(x: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def force_even(gap: int) -> int:
    """Bump an odd gap to the next even number and floor the result at 2."""
    if gap % 2:
        gap += 1
    return max(gap, 2)


def base_gap_heuristic(digits: int) -> int:
    # round(d^2 / 50) with ties up, kept exact for any digit count
    return force_even((digits * digits + 25) // 50 + 2)


def approx_log(num_str: str) -> float:
    """Approximate ``ln(value)`` from the digit count and the leading digits.

    The leading (up to) 10 digits are taken as an integer and are not
    rescaled, so this is ``ln(10)*(digits-1) + ln(int(num_str[:10]))``.
    """
    head = int(num_str[:10])
    head_log = math.log(head) if head > 0 else 0.0
    return math.log(10.0) * (len(num_str) - 1) + head_log


def natural_log(num_str: str, dps: int = 30) -> float:
    """Return ``ln(value)`` for a decimal string of any length."""
    with mp.workdps(dps):
        value = mpf(num_str)
        if value <= 0:
            return float("-inf")
        return float(mp.log(value))


def determine_residue_class(num_str: str) -> ResidueClass:
    """Classify ``num_str`` by ``value mod 12``; ``"2"`` and ``"3"`` are special."""
    if not num_str:
        return ResidueClass.NONE
    cls = _MOD12_CLASS.get(string_mod(num_str, 12))
    if cls is not None:
        return cls
    return _SMALL_PRIME_CLASS.get(num_str, ResidueClass.NONE)


def density_correction(num_str: str, constants: LgoConstants = LGO) -> tuple[float, int]:
    """Return ``(phi_term, rounded correction)`` for ``num_str``."""
    c = constants.c_star
    phi_term = approx_log(num_str) * math.log(c) / c
    return phi_term, round_half_away(phi_term)


def secondary_correction(num_str: str) -> int:
    return round_half_away(MOD7_DELTA[string_mod(num_str, 7)] * math.pi / 10.0)


# ─────────────────────────────────────────────────────────────────────────────
# 4) One prediction step
# ─────────────────────────────────────────────────────────────────────────────

def predict_next(num_str: str, constants: LgoConstants = LGO) -> tuple[int, str, PredictionMetrics]:
    """Return ``(final_gap, next_value, metrics)`` for the value ``num_str``.

    ``num_str`` must already be a validated decimal string.
    """
    digits = len(num_str)
    base_gap = base_gap_heuristic(digits)
    phi_term, g_density = density_correction(num_str, constants)

    residue = determine_residue_class(num_str)
    residue_delta = RESIDUE_DELTA[residue]
    mod7_delta = secondary_correction(num_str)
    delta_final = residue_delta + mod7_delta

    final_gap = force_even(base_gap + delta_final + g_density)

    ln_value = natural_log(num_str)
    pnt_ratio = final_gap / ln_value if ln_value > 0.0 else 0.0

    metrics = PredictionMetrics(
        digits=digits,
        base_gap=base_gap,
        phi_term=phi_term,
        density_correction=g_density,
        residue_class=residue,
        residue_delta=residue_delta,
        mod7_delta=mod7_delta,
        delta_final=delta_final,
        final_gap=final_gap,
        pnt_ratio=pnt_ratio,
    )
    return final_gap, add_strings(num_str, final_gap), metrics
