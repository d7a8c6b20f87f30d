"""
CircuitController - Orchestrates component and wire CRUD operations.

This module contains no Qt dependencies. It manages the CircuitModel
and notifies views of changes through an observer pattern.
"""

import logging
from typing import Any, Callable, Optional

from models.circuit import CircuitModel
from models.component import COMPONENT_TYPES, ComponentData
from models.wire import WireData

logger = logging.getLogger(__name__)

# Settings that seed a component's persistent state; changing one re-seeds it
STATE_SEED_SETTINGS = ("isOn", "value", "selectedConnection", "color")


class CircuitController:
    """
    Controller for circuit component and wire operations.

    Manages the CircuitModel and notifies registered observers when
    the model changes. Views register callbacks to stay in sync.
    Mutations may happen while a simulation is running; the scheduler
    picks them up on its next tick.

    Observer events:
        component_added (ComponentData) - A new component was added
        component_removed (str) - A component was removed (by ID)
        component_settings_changed (ComponentData) - Settings were updated
        component_value_changed (ComponentData) - A component's value changed
        button_state_changed (ComponentData) - A Button was pressed or released
        wire_added (WireData) - A new wire was added
        wire_removed (str) - A wire was removed (by ID)
        circuit_cleared (None) - The entire circuit was cleared
        simulation_started (None) - The tick driver started
        simulation_stopped (None) - The tick driver stopped
        simulation_reset (None) - Component state was reset
        tick_completed (int) - A tick finished (tick count)
    """

    def __init__(self, model: Optional[CircuitModel] = None):
        self.model = model if model is not None else CircuitModel()
        self._observers: list[Callable[[str, Any], None]] = []

    def add_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Register a callback for model change events."""
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Unregister a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self, event: str, data: Any) -> None:
        """Notify all observers of a model change."""
        for observer in list(self._observers):
            try:
                observer(event, data)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying observer of '%s': %s", event, e)

    # --- Component operations ---

    def add_component(
        self,
        component_type: str,
        settings: Optional[dict] = None,
        component_id: Optional[str] = None,
    ) -> ComponentData:
        """
        Create and add a new component to the circuit.

        Generates a unique ID from the type name (Adder1, Adder2, ...) unless
        one is given.

        Raises:
            ValueError: If the type is unknown or the ID is already in use.

        Returns:
            The newly created ComponentData.
        """
        if component_type not in COMPONENT_TYPES:
            raise ValueError(f"Unknown component type '{component_type}'.")
        if component_id is None:
            component_id = self.model.next_component_id(component_type)
        elif component_id in self.model.components:
            raise ValueError(f"Component id '{component_id}' is already in use.")

        component = ComponentData(
            component_id=component_id,
            component_type=component_type,
            settings=dict(settings or {}),
        )
        self.model.add_component(component)
        self._notify("component_added", component)
        return component

    def remove_component(self, component_id: str) -> None:
        """Remove a component and all connected wires. Unknown IDs are ignored."""
        if component_id not in self.model.components:
            return
        for wire_id in self.model.remove_component(component_id):
            self._notify("wire_removed", wire_id)
        self._notify("component_removed", component_id)

    def update_component_settings(self, component_id: str, settings: dict) -> None:
        """Merge new settings into a component's settings map."""
        component = self.model.components.get(component_id)
        if component is None:
            return
        reseed = any(
            key in settings and settings[key] != component.settings.get(key)
            for key in STATE_SEED_SETTINGS
        )
        component.settings.update(settings)
        if reseed and component.state is not None:
            component.reset_state()
        self._notify("component_settings_changed", component)

    def update_component_value(self, component_id: str, value: Any) -> None:
        """Update a component's value (the literal emitted by a Constant)."""
        component = self.model.components.get(component_id)
        if component is None:
            return
        component.value = value
        self._notify("component_value_changed", component)

    def set_button_pressed(self, component_id: str, pressed: bool) -> None:
        """
        Press or release a Button component.

        Raises:
            ValueError: If the component is not a Button.
        """
        component = self.model.components.get(component_id)
        if component is None:
            return
        if component.component_type != "Button":
            raise ValueError(f"Component '{component_id}' is a {component.component_type}, not a Button.")
        component.state.is_pressed = bool(pressed)
        self._notify("button_state_changed", component)

    # --- Wire operations ---

    def add_wire(self, from_id: str, from_pin: str, to_id: str, to_pin: str) -> WireData:
        """
        Connect an output pin to an input pin.

        Several wires may feed the same input pin; the earliest one wins.

        Raises:
            ValueError: If either component is unknown, a pin does not exist
                on its component, or the wire loops a pin back onto itself.

        Returns:
            The newly created WireData.
        """
        source = self.model.components.get(from_id)
        target = self.model.components.get(to_id)
        if source is None:
            raise ValueError(f"Unknown source component '{from_id}'.")
        if target is None:
            raise ValueError(f"Unknown target component '{to_id}'.")
        if not source.has_output_pin(from_pin):
            raise ValueError(f"{source.component_type} '{from_id}' has no output pin '{from_pin}'.")
        if not target.has_input_pin(to_pin):
            raise ValueError(f"{target.component_type} '{to_id}' has no input pin '{to_pin}'.")
        if from_id == to_id and from_pin == to_pin:
            raise ValueError(f"Cannot connect pin '{from_pin}' of '{from_id}' to itself.")

        wire = WireData(
            wire_id=self.model.next_wire_id(),
            from_id=from_id,
            from_pin=from_pin,
            to_id=to_id,
            to_pin=to_pin,
        )
        self.model.add_wire(wire)
        self._notify("wire_added", wire)
        return wire

    def remove_wire(self, wire_id: str) -> None:
        """Remove a wire by ID. Unknown IDs are ignored."""
        if self.model.remove_wire(wire_id):
            self._notify("wire_removed", wire_id)

    # --- Circuit operations ---

    def clear_circuit(self) -> None:
        """Clear the entire circuit."""
        self.model.clear()
        self._notify("circuit_cleared", None)
