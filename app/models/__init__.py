"""
Pure Python data models for Pulseboard.

This package contains Qt-free data classes that represent the board:
components, wires, signals and per-component persistent state.
"""

from .circuit import CircuitModel, validate_circuit_data
from .component import (
    COMPONENT_TYPES,
    DEFAULT_SETTINGS,
    DEFAULT_VALUES,
    INPUT_PINS,
    OUTPUT_PINS,
    ComponentData,
)
from .signal import NO_SIGNAL, NoSignalType, Signal, as_signal, is_present
from .wire import WireData

__all__ = [
    "CircuitModel",
    "validate_circuit_data",
    "ComponentData",
    "COMPONENT_TYPES",
    "DEFAULT_SETTINGS",
    "DEFAULT_VALUES",
    "INPUT_PINS",
    "OUTPUT_PINS",
    "NO_SIGNAL",
    "NoSignalType",
    "Signal",
    "as_signal",
    "is_present",
    "WireData",
]
