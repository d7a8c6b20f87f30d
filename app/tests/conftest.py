"""
Shared test fixtures for the PulseBoard test suite.

Fixtures build pure-Python model objects; only the controller tests touch Qt.
"""

import os
import sys
from pathlib import Path

# Ensure app/ is on sys.path so bare imports (models, simulation, controllers)
# work when running individual test files (e.g., python -m pytest app/tests/unit/test_foo.py).
_app_dir = str(Path(__file__).resolve().parent.parent)
if _app_dir not in sys.path:
    sys.path.insert(0, _app_dir)

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from models.circuit import CircuitModel
from models.component import ComponentData
from models.wire import WireData
from simulation.broadcast import BroadcastBuffer
from simulation.scheduler import TickContext
from simulation.settings_store import SimulationSettings


def make_component(component_type, component_id=None, settings=None, value=None, inputs=None):
    """Helper to create a ComponentData with its inputs already aggregated."""
    component = ComponentData(
        component_id=component_id or f"{component_type}1",
        component_type=component_type,
        settings=dict(settings or {}),
        value=value,
    )
    component.inputs = dict(inputs or {})
    return component


def make_wire(wire_id, from_id, from_pin, to_id, to_pin):
    """Helper to create a WireData."""
    return WireData(wire_id=wire_id, from_id=from_id, from_pin=from_pin, to_id=to_id, to_pin=to_pin)


def make_context(tick_count=1, tick_interval_ms=100.0, now_ms=None, circuit=None, broadcast=None, settings=None):
    """Helper to build the TickContext a processor sees."""
    if now_ms is None:
        now_ms = tick_count * tick_interval_ms
    return TickContext(
        tick_count=tick_count,
        tick_interval_ms=tick_interval_ms,
        now_ms=now_ms,
        circuit=circuit if circuit is not None else CircuitModel(),
        broadcast=broadcast if broadcast is not None else BroadcastBuffer(),
        settings=settings or SimulationSettings(tick_interval_ms=tick_interval_ms),
    )


@pytest.fixture
def context():
    """Context for the first tick at the default 100 ms interval."""
    return make_context()


@pytest.fixture
def constant_adder_display():
    """
    Constant(2) --+
                  +-- Adder -- Display
    Constant(3) --+
    """
    model = CircuitModel()
    for component in (
        make_component("Constant", "Constant1", value=2),
        make_component("Constant", "Constant2", value=3),
        make_component("Adder", "Adder1"),
        make_component("Display", "Display1"),
    ):
        model.add_component(component)
    model.add_wire(make_wire("W1", "Constant1", "VALUE_OUT", "Adder1", "SIGNAL_IN_1"))
    model.add_wire(make_wire("W2", "Constant2", "VALUE_OUT", "Adder1", "SIGNAL_IN_2"))
    model.add_wire(make_wire("W3", "Adder1", "SIGNAL_OUT", "Display1", "SIGNAL_IN"))
    return model
