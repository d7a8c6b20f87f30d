"""
simulation/broadcast.py

Double-buffered channel map used by wireless components instead of wires.

Writers fill ``current`` during a tick; readers only ever see ``previous``.
``swap()`` runs once at the tick boundary, so a value written in tick N is
visible from tick N+1 and evaluation order inside a tick never matters.
"""

from models.signal import NO_SIGNAL, as_signal, is_present


class BroadcastBuffer:
    """Channel number -> signal, with a one-tick read delay."""

    def __init__(self):
        self.current: dict[int, object] = {}
        self.previous: dict[int, object] = {}

    def write(self, channel: int, value) -> None:
        """Publish on a channel for the next tick. Absent values are ignored."""
        if is_present(value):
            self.current[channel] = value

    def read(self, channel: int):
        """Value broadcast on a channel during the previous tick."""
        return as_signal(self.previous.get(channel, NO_SIGNAL))

    def swap(self) -> None:
        """Tick boundary: this tick's writes become next tick's reads."""
        self.previous = self.current
        self.current = {}

    def clear(self) -> None:
        self.current = {}
        self.previous = {}

    def occupied_channels(self) -> list[int]:
        return sorted(self.previous)
