#!/usr/bin/env python3
"""Append-only sequence file: one decimal string per line."""

from __future__ import annotations

import logging
import os

SEQUENCE_FILE = "lgo_sequence.txt"

logger = logging.getLogger(__name__)


class StoreUnavailable(OSError):
    """Raised when the sequence file cannot be opened for reading."""


class SequenceStore:
    def __init__(self, path: str = SEQUENCE_FILE) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f"SequenceStore({self.path!r})"

    def read_values(self) -> list[str]:
        """Return every non-empty line of the file, whitespace stripped."""
        try:
            with open(self.path, encoding="utf-8") as f:
                return [line.strip() for line in f if line.strip()]
        except OSError as e:
            raise StoreUnavailable(f"Cannot read sequence file {self.path}: {e}") from e

    def load_last(self) -> str | None:
        """Return the last non-empty line, or ``None`` if there is none."""
        if not os.path.exists(self.path):
            logger.debug("No sequence file at %s", self.path)
            return None
        try:
            values = self.read_values()
        except StoreUnavailable as e:
            logger.warning("%s", e)
            return None
        return values[-1] if values else None

    def append(self, value: str) -> None:
        """Append ``value`` as a new line and make sure it reaches the disk."""
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(value + "\n")
            f.flush()
            os.fsync(f.fileno())
        logger.debug("Appended %d-digit value to %s", len(value), self.path)
