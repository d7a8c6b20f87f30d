"""
Controllers for PulseBoard.

This package contains the controller classes that orchestrate operations
between models and views using an observer pattern.
"""

from .circuit_controller import CircuitController
from .simulation_controller import SimulationController

__all__ = [
    "CircuitController",
    "SimulationController",
]
