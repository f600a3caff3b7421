#!/usr/bin/env python3
"""Decimal-string arithmetic for the LGO predictor.

Values in the sequence grow without bound, so they are kept as plain
decimal strings.  Only two operations are needed on them: adding a small
gap and reducing modulo a small modulus.  Both walk the digits directly and
never build a big ``int``.
"""

from __future__ import annotations

DIGITS = "0123456789"


class InvalidInput(ValueError):
    """Raised when a proposed value is empty or contains non-digit characters."""


# ─────────────────────────────────────────────────────────────────────────────
# Validation
# ─────────────────────────────────────────────────────────────────────────────

def is_decimal_string(text: str) -> bool:
    """Return ``True`` if ``text`` is a non-empty run of ASCII digits."""
    return bool(text) and all(ch in DIGITS for ch in text)


def parse_decimal_string(text: str) -> str:
    """Strip ``text`` and return it if it is a valid decimal string."""
    num_str = text.strip()
    if not num_str:
        raise InvalidInput("Value must not be empty")
    if not is_decimal_string(num_str):
        raise InvalidInput(f"Value must contain only digits: {num_str!r}")
    return num_str


# ─────────────────────────────────────────────────────────────────────────────
# Addition and modulus
# ─────────────────────────────────────────────────────────────────────────────

def add_strings(num_str: str, small: int) -> str:
    """Return the decimal string for ``int(num_str) + small``.

    ``small`` must be non-negative.  Digits are added from the least
    significant end with a running carry.
    """
    if small < 0:
        raise ValueError("Only non-negative values can be added")
    small_str = str(small)
    out: list[str] = []
    carry = 0
    i = len(num_str) - 1
    j = len(small_str) - 1
    while i >= 0 or j >= 0 or carry:
        total = carry
        if i >= 0:
            total += ord(num_str[i]) - 48
            i -= 1
        if j >= 0:
            total += ord(small_str[j]) - 48
            j -= 1
        carry, digit = divmod(total, 10)
        out.append(DIGITS[digit])
    return "".join(reversed(out))


def string_mod(num_str: str, modulus: int) -> int:
    """Return ``int(num_str) % modulus`` by folding digits left to right."""
    rem = 0
    for ch in num_str:
        if ch not in DIGITS:
            raise InvalidInput(f"Non-digit character {ch!r} in value")
        rem = (rem * 10 + ord(ch) - 48) % modulus
    return rem
