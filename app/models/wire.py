"""
WireData - Pure Python data model for circuit wires.

A wire always runs from an output pin to an input pin. Wires carry no
geometry here; placement and routing belong to the view layer.
"""

from dataclasses import dataclass


@dataclass
class WireData:
    """
    Pure Python data class representing a connection between two component pins.
    """

    wire_id: str
    from_id: str
    from_pin: str
    to_id: str
    to_pin: str

    def connects_component(self, component_id: str) -> bool:
        """Check if this wire connects to the given component."""
        return self.from_id == component_id or self.to_id == component_id

    def targets(self, component_id: str, pin_name: str) -> bool:
        """Check if this wire feeds the given input pin."""
        return self.to_id == component_id and self.to_pin == pin_name

    def to_dict(self) -> dict:
        """Serialize wire to dictionary."""
        return {
            "id": self.wire_id,
            "from_id": self.from_id,
            "from_pin": self.from_pin,
            "to_id": self.to_id,
            "to_pin": self.to_pin,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WireData":
        """Deserialize wire from dictionary."""
        return cls(
            wire_id=data["id"],
            from_id=data["from_id"],
            from_pin=data["from_pin"],
            to_id=data["to_id"],
            to_pin=data["to_pin"],
        )

    def __repr__(self) -> str:
        return f"WireData({self.wire_id}: {self.from_id}.{self.from_pin} -> {self.to_id}.{self.to_pin})"
