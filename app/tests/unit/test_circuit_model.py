"""Tests for the Qt-free data models (signal, component, wire, circuit)."""

import copy

import pytest
from models.circuit import CircuitModel, validate_circuit_data
from models.component import COMPONENT_TYPES, ComponentData, OUTPUT_PINS
from models.signal import NO_SIGNAL, NoSignalType, as_signal, is_present
from models.state import LatchState, RelayState, SelectorState, SignalHistory, WindowState
from tests.conftest import make_component, make_wire


class TestSignal:
    def test_singleton(self):
        assert NoSignalType() is NO_SIGNAL

    def test_copies_preserve_identity(self):
        assert copy.copy(NO_SIGNAL) is NO_SIGNAL
        assert copy.deepcopy({"pin": NO_SIGNAL})["pin"] is NO_SIGNAL

    def test_falsy_and_distinct_from_zero(self):
        assert not NO_SIGNAL
        assert NO_SIGNAL != 0

    @pytest.mark.parametrize("value", [None, "", NO_SIGNAL])
    def test_absent_values_normalise(self, value):
        assert as_signal(value) is NO_SIGNAL
        assert not is_present(value)

    @pytest.mark.parametrize("value", [0, "0", "text", 1.5])
    def test_present_values_pass_through(self, value):
        assert as_signal(value) == value
        assert is_present(value)


class TestComponentData:
    def test_defaults_merged_under_user_settings(self):
        comp = make_component("Adder", settings={"clampMax": 15})
        assert comp.settings["clampMax"] == 15
        assert comp.settings["timeFrame"] == 0

    def test_constant_has_default_value(self):
        assert make_component("Constant").value == "0"

    def test_state_created_per_kind(self):
        assert isinstance(make_component("Relay").state, RelayState)
        assert isinstance(make_component("Adder").state, WindowState)
        assert isinstance(make_component("RegEx").state, LatchState)
        assert make_component("Abs").state is None

    def test_state_seeded_from_settings(self):
        relay = make_component("Relay", settings={"isOn": True})
        assert relay.state.is_on is True
        selector = make_component("InputSelector", settings={"selectedConnection": 4})
        assert isinstance(selector.state, SelectorState)
        assert selector.state.selected_connection == 4

    def test_every_type_declares_outputs(self):
        for component_type in COMPONENT_TYPES:
            assert component_type in OUTPUT_PINS

    def test_sinks(self):
        assert make_component("Display").is_sink()
        assert make_component("Light").is_sink()
        assert not make_component("Constant").is_sink()

    def test_reset_state_discards_state(self):
        comp = make_component("Relay")
        comp.state.is_on = True
        comp.reset_state()
        assert comp.state.is_on is False

    def test_round_trip(self):
        comp = make_component("Constant", "Constant7", value=42)
        restored = ComponentData.from_dict(comp.to_dict())
        assert restored.component_id == "Constant7"
        assert restored.value == 42
        assert restored.settings == comp.settings


class TestSignalHistory:
    def test_bounded(self):
        history = SignalHistory(limit=3)
        for i in range(5):
            history.entries.append((i, i * 100.0))
        assert [v for v, _ in history.entries] == [2, 3, 4]

    def test_set_limit_keeps_newest(self):
        history = SignalHistory(limit=5)
        for i in range(5):
            history.entries.append((i, float(i)))
        history.set_limit(2)
        assert len(history) == 2
        assert history.entries[-1][0] == 4


class TestCircuitModel:
    def test_component_ids_increment(self):
        model = CircuitModel()
        assert model.next_component_id("Adder") == "Adder1"
        model.add_component(make_component("Adder", "Adder1"))
        assert model.next_component_id("Adder") == "Adder2"

    def test_wire_ids_increment(self):
        model = CircuitModel()
        assert model.next_wire_id() == "W1"
        assert model.next_wire_id() == "W2"

    def test_remove_component_removes_attached_wires(self, constant_adder_display):
        model = constant_adder_display
        removed = model.remove_component("Adder1")
        assert removed == ["W1", "W2", "W3"]
        assert model.wires == []

    def test_remove_unknown_component(self):
        assert CircuitModel().remove_component("missing") == []

    def test_remove_wire_keeps_order(self, constant_adder_display):
        model = constant_adder_display
        assert model.remove_wire("W2") is True
        assert [w.wire_id for w in model.wires] == ["W1", "W3"]
        assert model.remove_wire("W2") is False

    def test_connection_queries(self, constant_adder_display):
        model = constant_adder_display
        assert model.is_input_connected("Adder1", "SIGNAL_IN_1")
        assert not model.is_input_connected("Display1", "SIGNAL_OUT")
        assert model.is_output_connected("Adder1", "SIGNAL_OUT")
        assert [w.wire_id for w in model.wires_into("Adder1", "SIGNAL_IN_2")] == ["W2"]

    def test_round_trip_preserves_wire_order(self, constant_adder_display):
        data = constant_adder_display.to_dict()
        restored = CircuitModel.from_dict(data)
        assert [w.wire_id for w in restored.wires] == ["W1", "W2", "W3"]
        assert list(restored.components) == ["Constant1", "Constant2", "Adder1", "Display1"]
        validate_circuit_data(data)


class TestValidateCircuitData:
    def _valid(self):
        return {
            "components": [
                {"id": "Constant1", "type": "Constant", "value": 1},
                {"id": "Display1", "type": "Display"},
            ],
            "wires": [
                {"id": "W1", "from_id": "Constant1", "from_pin": "VALUE_OUT", "to_id": "Display1", "to_pin": "SIGNAL_IN"}
            ],
        }

    def test_valid(self):
        validate_circuit_data(self._valid())

    def test_not_a_dict(self):
        with pytest.raises(ValueError, match="valid circuit"):
            validate_circuit_data([])

    def test_unknown_type(self):
        data = self._valid()
        data["components"][0]["type"] = "Resistor"
        with pytest.raises(ValueError, match="unknown type"):
            validate_circuit_data(data)

    def test_duplicate_id(self):
        data = self._valid()
        data["components"][1]["id"] = "Constant1"
        with pytest.raises(ValueError, match="Duplicate"):
            validate_circuit_data(data)

    def test_unknown_wire_endpoint(self):
        data = self._valid()
        data["wires"][0]["to_id"] = "Nope"
        with pytest.raises(ValueError, match="unknown component"):
            validate_circuit_data(data)

    def test_bad_pins(self):
        data = self._valid()
        data["wires"][0]["to_pin"] = "SIGNAL_OUT"
        with pytest.raises(ValueError, match="input pin"):
            validate_circuit_data(data)

    def test_missing_wire_field(self):
        data = self._valid()
        del data["wires"][0]["from_pin"]
        with pytest.raises(ValueError, match="from_pin"):
            validate_circuit_data(data)


def test_make_wire_helper_targets():
    wire = make_wire("W1", "A", "SIGNAL_OUT", "B", "SIGNAL_IN")
    assert wire.targets("B", "SIGNAL_IN")
    assert not wire.targets("A", "SIGNAL_IN")
