#!/usr/bin/env python3
"""Prediction session: the current value, its step counter and the loop."""

from __future__ import annotations

import logging
import threading

from lgo_predictor import PredictionMetrics, predict_next
from lgo_store import SequenceStore

DEFAULT_DELAY = 0.1

logger = logging.getLogger(__name__)


class PredictionSession:
    """State of one run, from choosing a start value until the run stops."""

    def __init__(self, current: str, store: SequenceStore) -> None:
        self.current = current
        self.store = store
        self.steps = 0
        self.last_metrics: PredictionMetrics | None = None

    def advance(self) -> tuple[int, str, PredictionMetrics]:
        """Predict the next value, persist it and make it current."""
        gap, next_value, metrics = predict_next(self.current)
        self.store.append(next_value)
        self.current = next_value
        self.steps += 1
        self.last_metrics = metrics
        return gap, next_value, metrics


def run_session(session: PredictionSession,
                display,
                stop: threading.Event | None = None,
                delay: float = DEFAULT_DELAY,
                max_steps: int | None = None) -> int:
    """Advance ``session`` until stopped; return the number of steps made.

    ``stop`` and ``display.stop_requested()`` are each checked once per
    iteration.  The pause between steps waits on ``stop`` so setting it ends
    the pause early.
    """
    if stop is None:
        stop = threading.Event()
    start_steps = session.steps
    logger.info("Run started from a %d-digit value", len(session.current))

    display.begin()
    try:
        while not stop.is_set():
            if max_steps is not None and session.steps - start_steps >= max_steps:
                break
            if display.stop_requested():
                logger.info("Stop key pressed")
                break
            _, next_value, metrics = session.advance()
            display.show(session.steps, metrics, next_value)
            if delay > 0:
                stop.wait(delay)
    except KeyboardInterrupt:
        logger.info("Run interrupted")
    finally:
        display.close()

    made = session.steps - start_steps
    logger.info("Run stopped after %d predictions", made)
    return made
