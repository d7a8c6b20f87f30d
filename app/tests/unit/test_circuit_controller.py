"""Tests for CircuitController."""

import logging

import pytest
from controllers.circuit_controller import CircuitController
from models.circuit import CircuitModel


@pytest.fixture
def controller():
    return CircuitController()


@pytest.fixture
def events():
    """Fixture that returns a list and a callback that appends events to it."""
    recorded = []

    def callback(event, data):
        recorded.append((event, data))

    return recorded, callback


class TestObserverPattern:
    def test_add_observer(self, controller, events):
        recorded, callback = events
        controller.add_observer(callback)
        controller.clear_circuit()
        assert recorded == [("circuit_cleared", None)]

    def test_remove_observer(self, controller, events):
        recorded, callback = events
        controller.add_observer(callback)
        controller.remove_observer(callback)
        controller.clear_circuit()
        assert len(recorded) == 0

    def test_duplicate_observer_not_added(self, controller, events):
        recorded, callback = events
        controller.add_observer(callback)
        controller.add_observer(callback)
        controller.clear_circuit()
        assert len(recorded) == 1

    def test_failing_observer_does_not_block_others(self, controller, events, caplog):
        recorded, callback = events

        def broken(event, data):
            raise RuntimeError("view gone")

        controller.add_observer(broken)
        controller.add_observer(callback)
        with caplog.at_level(logging.ERROR):
            controller.clear_circuit()
        assert len(recorded) == 1
        assert "view gone" in caplog.text


class TestComponentOperations:
    def test_add_component_generates_id(self, controller, events):
        recorded, callback = events
        controller.add_observer(callback)
        comp = controller.add_component("Adder")
        assert comp.component_id == "Adder1"
        assert controller.add_component("Adder").component_id == "Adder2"
        assert recorded[0] == ("component_added", comp)

    def test_add_component_with_settings_and_id(self, controller):
        comp = controller.add_component("Oscillator", {"frequency": 2}, component_id="clock")
        assert controller.model.components["clock"] is comp
        assert comp.settings["frequency"] == 2
        assert comp.settings["outputType"] == 0

    def test_unknown_type_rejected(self, controller):
        with pytest.raises(ValueError, match="Unknown component type"):
            controller.add_component("Resistor")

    def test_duplicate_id_rejected(self, controller):
        controller.add_component("Constant", component_id="c")
        with pytest.raises(ValueError, match="already in use"):
            controller.add_component("Constant", component_id="c")

    def test_remove_component_removes_wires(self, controller, events):
        recorded, callback = events
        controller.add_component("Constant")
        controller.add_component("Display")
        controller.add_wire("Constant1", "VALUE_OUT", "Display1", "SIGNAL_IN")
        controller.add_observer(callback)
        controller.remove_component("Constant1")
        assert recorded == [("wire_removed", "W1"), ("component_removed", "Constant1")]
        assert controller.model.wires == []

    def test_remove_unknown_component_is_silent(self, controller, events):
        recorded, callback = events
        controller.add_observer(callback)
        controller.remove_component("nope")
        assert recorded == []

    def test_update_settings(self, controller, events):
        recorded, callback = events
        comp = controller.add_component("Adder")
        controller.add_observer(callback)
        controller.update_component_settings("Adder1", {"clampMax": 3})
        assert comp.settings["clampMax"] == 3
        assert recorded == [("component_settings_changed", comp)]

    def test_seed_setting_reseeds_state(self, controller):
        relay = controller.add_component("Relay")
        controller.update_component_settings(relay.component_id, {"isOn": True})
        assert relay.state.is_on is True

    def test_update_value(self, controller):
        comp = controller.add_component("Constant")
        controller.update_component_value("Constant1", 42)
        assert comp.value == 42

    def test_button_press(self, controller):
        button = controller.add_component("Button")
        controller.set_button_pressed("Button1", True)
        assert button.state.is_pressed is True
        controller.set_button_pressed("Button1", False)
        assert button.state.is_pressed is False

    def test_press_non_button_rejected(self, controller):
        controller.add_component("Constant")
        with pytest.raises(ValueError, match="not a Button"):
            controller.set_button_pressed("Constant1", True)


class TestWireOperations:
    @pytest.fixture
    def wired(self, controller):
        controller.add_component("Constant")
        controller.add_component("Display")
        return controller

    def test_add_wire(self, wired, events):
        recorded, callback = events
        wired.add_observer(callback)
        wire = wired.add_wire("Constant1", "VALUE_OUT", "Display1", "SIGNAL_IN")
        assert wire.wire_id == "W1"
        assert recorded == [("wire_added", wire)]

    def test_multiple_wires_to_one_pin_allowed(self, wired):
        wired.add_component("Constant")
        wired.add_wire("Constant1", "VALUE_OUT", "Display1", "SIGNAL_IN")
        wired.add_wire("Constant2", "VALUE_OUT", "Display1", "SIGNAL_IN")
        assert [w.from_id for w in wired.model.wires_into("Display1", "SIGNAL_IN")] == ["Constant1", "Constant2"]

    @pytest.mark.parametrize(
        "args, message",
        [
            (("Ghost", "VALUE_OUT", "Display1", "SIGNAL_IN"), "Unknown source"),
            (("Constant1", "VALUE_OUT", "Ghost", "SIGNAL_IN"), "Unknown target"),
            (("Constant1", "SIGNAL_OUT", "Display1", "SIGNAL_IN"), "no output pin"),
            (("Constant1", "VALUE_OUT", "Display1", "VALUE_OUT"), "no input pin"),
        ],
    )
    def test_invalid_wires_rejected(self, wired, args, message):
        with pytest.raises(ValueError, match=message):
            wired.add_wire(*args)

    def test_remove_wire(self, wired, events):
        recorded, callback = events
        wired.add_wire("Constant1", "VALUE_OUT", "Display1", "SIGNAL_IN")
        wired.add_observer(callback)
        wired.remove_wire("W1")
        wired.remove_wire("W1")
        assert recorded == [("wire_removed", "W1")]

    def test_wire_ids_not_reused(self, wired):
        wired.add_wire("Constant1", "VALUE_OUT", "Display1", "SIGNAL_IN")
        wired.remove_wire("W1")
        assert wired.add_wire("Constant1", "VALUE_OUT", "Display1", "SIGNAL_IN").wire_id == "W2"


def test_controller_wraps_existing_model():
    model = CircuitModel()
    controller = CircuitController(model)
    controller.add_component("Constant")
    assert "Constant1" in model.components
