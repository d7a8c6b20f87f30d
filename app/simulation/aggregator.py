"""
simulation/aggregator.py

Resolves, for every input pin, the value visible this tick.

First-connection-wins: when several wires feed the same input pin, only the
earliest-created one (first in the circuit's wire list) is consulted. If its
source published NO_SIGNAL, or no longer exists, the pin is NO_SIGNAL; later
wires are never used as a fallback. A pin with no wires is NO_SIGNAL.
"""

from models.circuit import CircuitModel
from models.component import ComponentData
from models.signal import NO_SIGNAL, as_signal
from models.wire import WireData

PinKey = tuple[str, str]


def build_input_index(wires: list[WireData]) -> dict[PinKey, WireData]:
    """Map (to_id, to_pin) to the winning wire for that input pin."""
    index: dict[PinKey, WireData] = {}
    for wire in wires:
        index.setdefault((wire.to_id, wire.to_pin), wire)
    return index


def resolve_pin(
    circuit: CircuitModel,
    published: dict[PinKey, object],
    index: dict[PinKey, WireData],
    component_id: str,
    pin_name: str,
):
    """Value delivered to a single input pin this tick."""
    wire = index.get((component_id, pin_name))
    if wire is None or wire.from_id not in circuit.components:
        return NO_SIGNAL
    return as_signal(published.get((wire.from_id, wire.from_pin), NO_SIGNAL))


def aggregate_inputs(
    circuit: CircuitModel,
    published: dict[PinKey, object],
    component: ComponentData,
    index: dict[PinKey, WireData] = None,
) -> dict[str, object]:
    """
    Build the full input map for a component.

    Every declared input pin is present in the result; unconnected pins
    carry NO_SIGNAL.
    """
    if index is None:
        index = build_input_index(circuit.wires)
    return {
        pin: resolve_pin(circuit, published, index, component.component_id, pin)
        for pin in component.get_input_pins()
    }
