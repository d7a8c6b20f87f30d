"""PulseBoard: a tick-driven signal circuit simulator."""
