#!/usr/bin/env python3
"""Start-value selection menu."""

from __future__ import annotations

import logging
from typing import Callable

from lgo_arith import DIGITS, InvalidInput, is_decimal_string, parse_decimal_string
from lgo_store import SequenceStore

PRESETS: list[tuple[str, str]] = [
    ("(1) 10 Digits", "9999999967"),
    ("(2) 15 Digits", "999999999999991"),
    ("(3) 18 Digits", "9999999999999999983"),
    ("(4) 19 Digits (BigInt Test)", "9999999999999999997"),
]

RULE = "-" * 67
BANNER = "=" * 67

logger = logging.getLogger(__name__)


class InputSelector:
    """Prompt for a starting value until a valid one is chosen or the user quits.

    ``read`` and ``write`` default to :func:`input` and :func:`print`.
    """

    def __init__(self,
                 store: SequenceStore,
                 presets: list[tuple[str, str]] | None = None,
                 read: Callable[[str], str] = input,
                 write: Callable[[str], None] = print) -> None:
        self.store = store
        self.presets = PRESETS if presets is None else presets
        self.read = read
        self.write = write

    def render(self) -> None:
        self.write(BANNER)
        self.write("        LGO Deterministic Predictor - START VALUE SELECTION")
        self.write(BANNER)
        self.write("\nChoose a starting value or enter your own:\n")
        self.write(f"(L) Load Last Value from {self.store.path}")
        self.write(RULE)
        for label, value in self.presets:
            self.write(f"{label} ({len(value)} digits)")
        self.write("\n(M) Manual Entry (arbitrary length)")
        self.write("(Q) Quit Program")
        self.write(RULE)

    def select(self) -> str | None:
        """Return a validated decimal string, or ``None`` if the user quits."""
        self.render()
        while True:
            try:
                line = self.read("Your Choice: ")
            except EOFError:
                return None
            line = line.strip()
            if not line:
                continue
            choice = line[0].upper()

            if choice == "Q":
                return None
            if choice == "L":
                value = self._load_last()
            elif choice == "M":
                value = self._manual_entry()
            elif choice in DIGITS:
                value = self._preset(int(choice))
            else:
                self.write("Invalid option. Please choose from the list.")
                continue
            if value is not None:
                logger.info("Selected %d-digit start value", len(value))
                return value

    def _load_last(self) -> str | None:
        value = self.store.load_last()
        if value is None or not is_decimal_string(value):
            self.write("Could not load sequence. Please choose another option.")
            return None
        self.write(f"Loaded last value ({len(value)} digits) from {self.store.path}")
        return value

    def _manual_entry(self) -> str | None:
        try:
            text = self.read("\nEnter your value (arbitrary length): ")
        except EOFError:
            text = ""
        try:
            value = parse_decimal_string(text)
        except InvalidInput:
            self.write("Invalid input. Please enter only digits.")
            return None
        self.write(f"Value selected: {value}")
        return value

    def _preset(self, number: int) -> str | None:
        if not 1 <= number <= len(self.presets):
            self.write("Invalid selection. Please re-enter choice.")
            return None
        label, value = self.presets[number - 1]
        self.write(f"Value selected: {value} ({label})")
        return value
