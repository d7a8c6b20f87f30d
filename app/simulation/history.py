"""
simulation/history.py

Sliding time-window averaging over a component's bounded SignalHistory.
Timestamps are simulated milliseconds, never wall-clock.
"""

import numpy as np

from models.state import SignalHistory


def prune(history: SignalHistory, cutoff_ms: float) -> None:
    """Drop samples older than ``cutoff_ms``."""
    entries = history.entries
    while entries and entries[0][1] < cutoff_ms:
        entries.popleft()


def windowed_mean(history: SignalHistory, value: float, now_ms: float, window_seconds: float) -> float:
    """
    Record ``value`` at ``now_ms`` and return the mean of samples inside the window.

    Args:
        history: The component's history buffer (mutated).
        value: This tick's sample.
        now_ms: Current simulated time.
        window_seconds: Window length; samples older than this are discarded.
    """
    history.entries.append((value, now_ms))
    prune(history, now_ms - window_seconds * 1000.0)
    samples = np.fromiter((entry[0] for entry in history.entries), dtype=float, count=len(history.entries))
    return float(np.mean(samples))
