"""
Typed persistent state for stateful component kinds.

Each stateful component owns exactly one state object, created from its
settings when the component is created (or reset). Stateless kinds get
``None``. Nothing here is shared between components.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from .signal import NO_SIGNAL

# Upper bound on entries kept in a time-window history buffer
DEFAULT_HISTORY_LIMIT = 1000


@dataclass
class SignalHistory:
    """Bounded list of (value, timestamp_ms) samples, oldest first."""

    limit: int = DEFAULT_HISTORY_LIMIT
    entries: deque = field(default=None)

    def __post_init__(self):
        if self.entries is None:
            self.entries = deque(maxlen=self.limit)

    def set_limit(self, limit: int) -> None:
        if limit != self.limit:
            self.limit = limit
            self.entries = deque(self.entries, maxlen=limit)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class WindowState:
    """Adder/Equals-style components with an optional sliding time window."""

    history: SignalHistory = field(default_factory=SignalHistory)


@dataclass
class LatchState:
    """Components that remember their last emitted value (RegEx, Not)."""

    value: Any = NO_SIGNAL


@dataclass
class OscillatorState:
    cumulative_phase: float = 0.0


@dataclass
class RelayState:
    is_on: bool = False
    last_toggle_signal: Any = NO_SIGNAL


@dataclass
class SelectorState:
    selected_connection: int = 0
    last_move_signal: Any = NO_SIGNAL


@dataclass
class RandomState:
    last_execution_ms: Optional[float] = None
    current_output: Any = NO_SIGNAL
    rng: Any = None


@dataclass
class DelayState:
    pending: list = field(default_factory=list)  # [(value, release_ms)]
    last_signal_in: Any = NO_SIGNAL
    previous_input: Any = NO_SIGNAL


@dataclass
class MemoryState:
    stored: Any = 0


@dataclass
class ButtonState:
    is_pressed: bool = False


@dataclass
class LightState:
    is_on: bool = False
    color: str = "#ffffff"


def _selector(settings: dict) -> SelectorState:
    try:
        selected = int(settings.get("selectedConnection") or 0)
    except (TypeError, ValueError):
        selected = 0
    return SelectorState(selected_connection=selected)


_WINDOWED = ("Adder", "Subtract", "Multiply", "Divide", "Equals", "And", "Or", "Xor", "Greater")

STATE_FACTORIES: dict[str, Callable[[dict], Any]] = {
    "Oscillator": lambda settings: OscillatorState(),
    "Relay": lambda settings: RelayState(is_on=bool(settings.get("isOn", False))),
    "InputSelector": _selector,
    "OutputSelector": _selector,
    "RegEx": lambda settings: LatchState(),
    "Not": lambda settings: LatchState(),
    "Random": lambda settings: RandomState(),
    "Delay": lambda settings: DelayState(),
    "Memory": lambda settings: MemoryState(stored=settings.get("value", 0)),
    "Button": lambda settings: ButtonState(),
    "Light": lambda settings: LightState(
        is_on=bool(settings.get("isOn", False)),
        color=settings.get("color", "#ffffff"),
    ),
}
STATE_FACTORIES.update({name: (lambda settings: WindowState()) for name in _WINDOWED})


def create_state(component_type: str, settings: dict):
    """Build the initial persistent state for a component, or None if stateless."""
    factory = STATE_FACTORIES.get(component_type)
    if factory is None:
        return None
    return factory(settings)
