"""
CircuitModel - Central data store for circuit state.

This module contains no Qt dependencies. It holds the components and wires
of the board. Wire list order is creation order and is relied on by input
aggregation, so wires are only ever appended or removed, never reordered.
"""

from dataclasses import dataclass, field

from .component import COMPONENT_TYPES, INPUT_PINS, OUTPUT_PINS, ComponentData
from .wire import WireData


def validate_circuit_data(data) -> None:
    """
    Validate a serialized circuit before loading.

    Raises ValueError with a descriptive message if anything is wrong.
    """
    if not isinstance(data, dict):
        raise ValueError("Data does not contain a valid circuit object.")

    if "components" not in data or not isinstance(data["components"], list):
        raise ValueError("Missing or invalid 'components' list.")
    if "wires" not in data or not isinstance(data["wires"], list):
        raise ValueError("Missing or invalid 'wires' list.")

    comp_types = {}
    for i, comp in enumerate(data["components"]):
        for key in ("id", "type"):
            if key not in comp:
                raise ValueError(f"Component #{i + 1} is missing required field '{key}'.")
        if comp["type"] not in COMPONENT_TYPES:
            raise ValueError(f"Component '{comp['id']}' has unknown type '{comp['type']}'.")
        if "settings" in comp and not isinstance(comp["settings"], dict):
            raise ValueError(f"Component '{comp['id']}' settings must be an object.")
        if comp["id"] in comp_types:
            raise ValueError(f"Duplicate component id '{comp['id']}'.")
        comp_types[comp["id"]] = comp["type"]

    for i, wire in enumerate(data["wires"]):
        for key in ("id", "from_id", "from_pin", "to_id", "to_pin"):
            if key not in wire:
                raise ValueError(f"Wire #{i + 1} is missing required field '{key}'.")
        if wire["from_id"] not in comp_types:
            raise ValueError(f"Wire #{i + 1} references unknown component '{wire['from_id']}'.")
        if wire["to_id"] not in comp_types:
            raise ValueError(f"Wire #{i + 1} references unknown component '{wire['to_id']}'.")
        if wire["from_pin"] not in OUTPUT_PINS[comp_types[wire["from_id"]]]:
            raise ValueError(f"Wire #{i + 1} starts at unknown output pin '{wire['from_pin']}'.")
        if wire["to_pin"] not in INPUT_PINS[comp_types[wire["to_id"]]]:
            raise ValueError(f"Wire #{i + 1} ends at unknown input pin '{wire['to_pin']}'.")


@dataclass
class CircuitModel:
    """
    Central data store holding all circuit state.

    Components are indexed by id; wires are kept in creation order.
    """

    components: dict[str, ComponentData] = field(default_factory=dict)
    wires: list[WireData] = field(default_factory=list)
    component_counter: dict[str, int] = field(default_factory=dict)
    wire_counter: int = 0

    # --- Component operations ---

    def add_component(self, component: ComponentData) -> None:
        """Add a component to the circuit."""
        self.components[component.component_id] = component

    def remove_component(self, component_id: str) -> list[str]:
        """
        Remove a component together with every wire attached to it.

        Returns:
            IDs of the wires that were removed.
        """
        if component_id not in self.components:
            return []

        removed = [w.wire_id for w in self.wires if w.connects_component(component_id)]
        self.wires = [w for w in self.wires if not w.connects_component(component_id)]
        del self.components[component_id]
        return removed

    # --- Wire operations ---

    def add_wire(self, wire: WireData) -> None:
        """Append a wire; later wires lose to earlier ones on a shared input pin."""
        self.wires.append(wire)

    def remove_wire(self, wire_id: str) -> bool:
        """Remove a wire by id. Returns True if a wire was removed."""
        for index, wire in enumerate(self.wires):
            if wire.wire_id == wire_id:
                del self.wires[index]
                return True
        return False

    def wires_into(self, component_id: str, pin_name: str) -> list[WireData]:
        """All wires feeding an input pin, in creation order."""
        return [w for w in self.wires if w.targets(component_id, pin_name)]

    def is_input_connected(self, component_id: str, pin_name: str) -> bool:
        return any(w.targets(component_id, pin_name) for w in self.wires)

    def is_output_connected(self, component_id: str, pin_name: str) -> bool:
        return any(w.from_id == component_id and w.from_pin == pin_name for w in self.wires)

    # --- ID generation ---

    def next_component_id(self, component_type: str) -> str:
        """Generate a unique id such as 'Adder1', 'Adder2', ..."""
        count = self.component_counter.get(component_type, 0)
        while True:
            count += 1
            candidate = f"{component_type}{count}"
            if candidate not in self.components:
                break
        self.component_counter[component_type] = count
        return candidate

    def next_wire_id(self) -> str:
        existing = {w.wire_id for w in self.wires}
        while True:
            self.wire_counter += 1
            candidate = f"W{self.wire_counter}"
            if candidate not in existing:
                return candidate

    # --- Circuit operations ---

    def clear(self) -> None:
        """Clear all circuit data."""
        self.components.clear()
        self.wires.clear()
        self.component_counter.clear()
        self.wire_counter = 0

    # --- Serialization ---

    def to_dict(self) -> dict:
        """Serialize circuit to dictionary."""
        return {
            "components": [c.to_dict() for c in self.components.values()],
            "wires": [w.to_dict() for w in self.wires],
            "counters": self.component_counter.copy(),
            "wire_counter": self.wire_counter,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CircuitModel":
        """Deserialize circuit from dictionary. Wire order is preserved."""
        model = cls()
        model.component_counter = data.get("counters", {}).copy()
        model.wire_counter = data.get("wire_counter", 0)

        for comp_data in data.get("components", []):
            component = ComponentData.from_dict(comp_data)
            model.components[component.component_id] = component

        for wire_data in data.get("wires", []):
            model.wires.append(WireData.from_dict(wire_data))

        return model
