"""
ComponentData - Pure Python data model for circuit components.

This module contains no Qt dependencies. Component types use their palette
names as canonical identifiers ('Adder', 'Oscillator', 'WiFi', ...). Pin
names are the upper-case identifiers used on wires.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .signal import NO_SIGNAL
from .state import create_state

_SELECTOR_CHANNELS = 10

_UNARY = ["SIGNAL_IN"]
_BINARY = ["SIGNAL_IN_1", "SIGNAL_IN_2"]
_GATE = ["SIGNAL_IN_1", "SIGNAL_IN_2", "SET_OUTPUT"]
_OUT = ["SIGNAL_OUT"]

# Input pins per component type
INPUT_PINS = {
    "Constant": [],
    "Random": [],
    "Button": [],
    "Display": ["SIGNAL_IN"],
    "Light": ["TOGGLE_STATE", "SET_STATE", "SET_COLOR"],
    "Abs": _UNARY,
    "Ceil": _UNARY,
    "Floor": _UNARY,
    "Round": _UNARY,
    "SquareRoot": _UNARY,
    "Factorial": _UNARY,
    "Not": _UNARY,
    "Sin": _UNARY,
    "Cos": _UNARY,
    "Tan": _UNARY,
    "Asin": _UNARY,
    "Acos": _UNARY,
    "Atan": ["SIGNAL_IN", "SIGNAL_IN_X", "SIGNAL_IN_Y"],
    "Modulo": ["SIGNAL_IN", "SET_MODULUS"],
    "Exponentiation": ["SIGNAL_IN", "SET_EXPONENT"],
    "Adder": _BINARY,
    "Subtract": _BINARY,
    "Multiply": _BINARY,
    "Divide": _BINARY,
    "Concatenation": _BINARY,
    "Equals": _GATE,
    "And": _GATE,
    "Or": _GATE,
    "Xor": _GATE,
    "Greater": _GATE,
    "SignalCheck": ["SIGNAL_IN", "SET_TARGETSIGNAL", "SET_OUTPUT"],
    "RegEx": ["SIGNAL_IN", "SET_OUTPUT"],
    "Oscillator": ["SET_FREQUENCY", "SET_OUTPUTTYPE"],
    "InputSelector": [f"SIGNAL_IN_{i}" for i in range(_SELECTOR_CHANNELS)] + ["SET_INPUT", "MOVE_INPUT"],
    "OutputSelector": ["SIGNAL_IN", "SET_OUTPUT", "MOVE_OUTPUT"],
    "Relay": ["SIGNAL_IN_1", "SIGNAL_IN_2", "TOGGLE_STATE", "SET_STATE"],
    "WiFi": ["SIGNAL_IN", "SET_CHANNEL"],
    "Delay": ["SIGNAL_IN", "SET_DELAY"],
    "Memory": ["SIGNAL_IN", "LOCK_STATE"],
    "Color": ["SIGNAL_IN_R", "SIGNAL_IN_G", "SIGNAL_IN_B", "SIGNAL_IN_A"],
}

# Output pins per component type (sinks have none)
OUTPUT_PINS = {
    "Constant": ["VALUE_OUT"],
    "Random": ["VALUE_OUT"],
    "Display": [],
    "Light": [],
    "InputSelector": ["SIGNAL_OUT", "SELECTED_INPUT_OUT"],
    "OutputSelector": [f"SIGNAL_OUT_{i}" for i in range(_SELECTOR_CHANNELS)] + ["SELECTED_OUTPUT_OUT"],
    "Relay": ["SIGNAL_OUT_1", "SIGNAL_OUT_2", "STATE_OUT"],
}

COMPONENT_TYPES = list(INPUT_PINS)

for _type in COMPONENT_TYPES:
    OUTPUT_PINS.setdefault(_type, _OUT)

_GATE_DEFAULTS = {"output": "1", "falseOutput": "0", "maxOutputLength": 200, "timeFrame": 0}
_ARITHMETIC_DEFAULTS = {"clampMin": None, "clampMax": None, "timeFrame": 0}

# Default settings per component type; user settings are merged on top
DEFAULT_SETTINGS = {
    "Random": {"min": 0, "max": 100, "period": 1000},
    "Button": {"output": "1"},
    "Light": {"isOn": False, "color": "#ffffff"},
    "Sin": {"useRadians": True},
    "Cos": {"useRadians": True},
    "Tan": {"useRadians": True, "maxValue": 1e6, "minValue": -1e6},
    "Atan": {"useRadians": True},
    "Asin": {"useRadians": False},
    "Acos": {"useRadians": False},
    "Not": {"continuousOutput": False},
    "Modulo": {"modulus": 1},
    "Exponentiation": {"exponent": 1},
    "Adder": dict(_ARITHMETIC_DEFAULTS),
    "Subtract": dict(_ARITHMETIC_DEFAULTS),
    "Multiply": dict(_ARITHMETIC_DEFAULTS, precision=0),
    "Divide": dict(_ARITHMETIC_DEFAULTS),
    "Concatenation": {"separator": "", "maxOutputLength": 200},
    "Equals": dict(_GATE_DEFAULTS, tolerance=1e-9),
    "And": dict(_GATE_DEFAULTS),
    "Or": dict(_GATE_DEFAULTS),
    "Xor": dict(_GATE_DEFAULTS),
    "Greater": dict(_GATE_DEFAULTS),
    "SignalCheck": {"targetSignal": "", "output": "1", "falseOutput": "0", "maxOutputLength": 200},
    "RegEx": {
        "expression": "",
        "output": "1",
        "falseOutput": "0",
        "useCaptureGroup": False,
        "outputEmptyCaptureGroup": False,
        "continuousOutput": False,
        "maxOutputLength": 200,
    },
    "Oscillator": {"frequency": 1.0, "outputType": 0},
    "InputSelector": {"selectedConnection": 0, "wrapAround": True, "skipEmptyConnections": False},
    "OutputSelector": {"selectedConnection": 0, "wrapAround": True, "skipEmptyConnections": False},
    "Relay": {"isOn": False},
    "WiFi": {"channel": 1},
    "Delay": {"delay": 1.0, "resetOnNewSignal": False, "resetOnDifferentSignal": False},
    "Memory": {"value": 0, "writeable": True, "maxValueLength": 100},
    "Color": {"useHSV": False},
}

# Initial literal for components that carry a user-set value
DEFAULT_VALUES = {
    "Constant": "0",
}


@dataclass
class ComponentData:
    """
    Pure Python data class representing a component on the board.

    ``inputs`` and ``outputs`` are rebuilt by the scheduler every tick.
    ``state`` holds the typed persistent state owned by this component only.
    ``value`` is the externally readable value (Constant literal, Display
    reading, latched outputs).
    """

    component_id: str
    component_type: str
    settings: dict = field(default_factory=dict)
    value: Any = None
    inputs: dict = field(default_factory=dict)
    outputs: dict = field(default_factory=dict)
    state: Optional[Any] = None

    def __post_init__(self):
        self.settings = {**DEFAULT_SETTINGS.get(self.component_type, {}), **(self.settings or {})}
        if self.value is None and self.component_type in DEFAULT_VALUES:
            self.value = DEFAULT_VALUES[self.component_type]
        if self.state is None:
            self.state = create_state(self.component_type, self.settings)

    def get_input_pins(self) -> list[str]:
        return list(INPUT_PINS.get(self.component_type, []))

    def get_output_pins(self) -> list[str]:
        return list(OUTPUT_PINS.get(self.component_type, []))

    def has_input_pin(self, pin_name: str) -> bool:
        return pin_name in INPUT_PINS.get(self.component_type, [])

    def has_output_pin(self, pin_name: str) -> bool:
        return pin_name in OUTPUT_PINS.get(self.component_type, [])

    def is_sink(self) -> bool:
        """Sinks have no output pins and expose their reading through ``value``."""
        return not OUTPUT_PINS.get(self.component_type)

    def reset_state(self) -> None:
        """Discard persistent state and per-tick pin values."""
        self.state = create_state(self.component_type, self.settings)
        self.inputs = {}
        self.outputs = {}
        if self.component_type in DEFAULT_VALUES:
            return
        self.value = None

    def to_dict(self) -> dict:
        """Serialize component to dictionary."""
        data = {
            "id": self.component_id,
            "type": self.component_type,
            "settings": dict(self.settings),
        }
        if self.value is not None and self.value is not NO_SIGNAL:
            data["value"] = self.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ComponentData":
        """Deserialize component from dictionary."""
        return cls(
            component_id=data["id"],
            component_type=data["type"],
            settings=dict(data.get("settings", {})),
            value=data.get("value"),
        )

    def __repr__(self) -> str:
        return f"ComponentData({self.component_id}: {self.component_type})"
