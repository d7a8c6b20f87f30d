"""Tests for source, sink and utility processors."""

from models.signal import NO_SIGNAL
from simulation.processors.basic import (
    process_button,
    process_color,
    process_constant,
    process_display,
    process_light,
    process_random,
)
from simulation.settings_store import SimulationSettings
from tests.conftest import make_component, make_context


class TestConstantAndDisplay:
    def test_constant_emits_value(self, context):
        assert process_constant(make_component("Constant", value=7), context) == {"VALUE_OUT": 7}

    def test_display_latches_present_input(self, context):
        display = make_component("Display", inputs={"SIGNAL_IN": 12})
        assert process_display(display, context) is None
        assert display.value == 12

    def test_display_keeps_value_on_no_signal(self, context):
        display = make_component("Display", value=3, inputs={"SIGNAL_IN": NO_SIGNAL})
        process_display(display, context)
        assert display.value == 3


class TestRandom:
    def test_value_in_range_and_held_between_periods(self):
        rand = make_component("Random", settings={"min": 1, "max": 6, "period": 1000})
        first = process_random(rand, make_context(tick_count=1))["VALUE_OUT"]
        assert 1 <= first <= 6
        for tick in range(2, 10):
            assert process_random(rand, make_context(tick_count=tick))["VALUE_OUT"] == first

    def test_redraws_after_period(self):
        rand = make_component("Random", settings={"min": 0, "max": 1000000, "period": 100})
        values = {process_random(rand, make_context(tick_count=t))["VALUE_OUT"] for t in range(1, 6)}
        assert len(values) > 1

    def test_seeded_runs_repeat(self):
        settings = SimulationSettings(random_seed=42)
        runs = []
        for _ in range(2):
            rand = make_component("Random", "Random1", settings={"period": 100})
            runs.append([process_random(rand, make_context(tick_count=t, settings=settings))["VALUE_OUT"] for t in range(1, 6)])
        assert runs[0] == runs[1]

    def test_swapped_bounds(self, context):
        rand = make_component("Random", settings={"min": 5, "max": 5})
        assert process_random(rand, context) == {"VALUE_OUT": 5}


class TestButtonAndLight:
    def test_button_released(self, context):
        assert process_button(make_component("Button"), context) is None

    def test_button_pressed(self, context):
        button = make_component("Button", settings={"output": "go"})
        button.state.is_pressed = True
        assert process_button(button, context) == {"SIGNAL_OUT": "go"}

    def test_light_toggle_and_set(self, context):
        light = make_component("Light", inputs={"TOGGLE_STATE": 1})
        process_light(light, context)
        assert light.state.is_on and light.value == 1
        light.inputs = {"TOGGLE_STATE": 1, "SET_STATE": 0}
        process_light(light, context)
        assert not light.state.is_on and light.value == 0

    def test_light_color(self, context):
        light = make_component("Light", inputs={"SET_COLOR": "#ff0000"})
        process_light(light, context)
        assert light.state.color == "#ff0000"


class TestColor:
    def test_rgb(self, context):
        color = make_component("Color", inputs={"SIGNAL_IN_R": 300, "SIGNAL_IN_G": "128", "SIGNAL_IN_B": -4})
        assert process_color(color, context) == {"SIGNAL_OUT": "255,128,0,0"}

    def test_hsv(self, context):
        color = make_component(
            "Color",
            settings={"useHSV": True},
            inputs={"SIGNAL_IN_R": 120, "SIGNAL_IN_G": 1, "SIGNAL_IN_B": 1, "SIGNAL_IN_A": 255},
        )
        assert process_color(color, context) == {"SIGNAL_OUT": "0,255,0,255"}

    def test_all_absent(self, context):
        assert process_color(make_component("Color"), context) is None
