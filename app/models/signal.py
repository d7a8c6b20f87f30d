"""
Signal values carried on pins.

A pin carries either a number, a piece of text, or NO_SIGNAL. NO_SIGNAL is
the explicit "nothing connected / nothing emitted" state and is distinct
from numeric zero. ``None`` and the empty string are accepted at the edges
of the system and normalised to NO_SIGNAL by ``as_signal``.
"""

from typing import Union


class NoSignalType:
    """Singleton type for the absent signal."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_SIGNAL"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (NoSignalType, ())


NO_SIGNAL = NoSignalType()

Signal = Union[NoSignalType, int, float, str]


def is_present(value) -> bool:
    """True when the value is an actual signal (not None, '' or NO_SIGNAL)."""
    return value is not None and value is not NO_SIGNAL and value != ""


def as_signal(value) -> Signal:
    """Normalise None and '' to NO_SIGNAL; everything else passes through."""
    if is_present(value):
        return value
    return NO_SIGNAL
