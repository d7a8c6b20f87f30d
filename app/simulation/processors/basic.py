"""Sources, sinks and utility components: Constant, Display, Random, Button, Light, Color."""

import colorsys
import math
import zlib

import numpy as np

from models.signal import NO_SIGNAL, is_present

from ..coercion import is_active, number_or_zero, parse_int, parse_number


def process_constant(component, context):
    """Emit the user-set literal; never reads inputs."""
    return {"VALUE_OUT": component.value}


def process_display(component, context):
    """Latch the input into ``value``; NO_SIGNAL leaves the previous reading."""
    signal_in = component.inputs.get("SIGNAL_IN", NO_SIGNAL)
    if is_present(signal_in):
        component.value = signal_in
    return None


def _random_seed(component, context):
    seed = context.settings.random_seed
    if seed is None:
        return None
    return [int(seed), zlib.crc32(component.component_id.encode("utf-8"))]


def process_random(component, context):
    """
    Draw an integer in [min, max] every ``period`` ms of simulated time.

    The first draw happens on the first tick; between draws the last value
    is repeated.
    """
    state = component.state
    settings = component.settings

    if state.rng is None:
        state.rng = np.random.default_rng(_random_seed(component, context))

    period = parse_number(settings.get("period"))
    if period is None or period <= 0:
        period = context.tick_interval_ms

    due = state.last_execution_ms is None or context.now_ms - state.last_execution_ms >= period
    if due:
        low = parse_int(settings.get("min")) or 0
        high = parse_int(settings.get("max")) or 0
        if low > high:
            low, high = high, low
        state.current_output = int(state.rng.integers(low, high, endpoint=True))
        state.last_execution_ms = context.now_ms

    return {"VALUE_OUT": state.current_output}


def process_button(component, context):
    """Emit ``output`` while pressed, nothing otherwise."""
    if component.state.is_pressed:
        output = component.settings.get("output")
        return {"SIGNAL_OUT": output if is_present(output) else "1"}
    return None


def process_light(component, context):
    """Sink: TOGGLE_STATE flips, SET_STATE (priority) sets, SET_COLOR recolours."""
    state = component.state
    inputs = component.inputs

    if is_active(inputs.get("TOGGLE_STATE", NO_SIGNAL)):
        state.is_on = not state.is_on

    set_state = inputs.get("SET_STATE", NO_SIGNAL)
    if is_present(set_state):
        state.is_on = is_active(set_state)

    color = inputs.get("SET_COLOR", NO_SIGNAL)
    if isinstance(color, str) and color.strip():
        state.color = color

    component.value = 1 if state.is_on else 0
    return None


def _channel(value, upper: int) -> int:
    number = parse_int(value)
    if number is None:
        return 0
    return max(0, min(upper, number))


def _unit(value, upper: float) -> float:
    number = number_or_zero(value)
    if not math.isfinite(number):
        return 0.0
    return max(0.0, min(upper, float(number)))


def _to_byte(fraction: float) -> int:
    return int(math.floor(fraction * 255 + 0.5))


def process_color(component, context):
    """Pack R/G/B/A (or H/S/V/A when ``useHSV``) inputs into an 'r,g,b,a' string."""
    inputs = component.inputs
    pins = ("SIGNAL_IN_R", "SIGNAL_IN_G", "SIGNAL_IN_B", "SIGNAL_IN_A")
    if not any(is_present(inputs.get(pin, NO_SIGNAL)) for pin in pins):
        return None

    alpha = _channel(inputs.get("SIGNAL_IN_A"), 255)

    if component.settings.get("useHSV"):
        hue = _unit(inputs.get("SIGNAL_IN_R"), 360.0)
        saturation = _unit(inputs.get("SIGNAL_IN_G"), 1.0)
        brightness = _unit(inputs.get("SIGNAL_IN_B"), 1.0)
        r, g, b = (_to_byte(c) for c in colorsys.hsv_to_rgb((hue / 360.0) % 1.0, saturation, brightness))
    else:
        r = _channel(inputs.get("SIGNAL_IN_R"), 255)
        g = _channel(inputs.get("SIGNAL_IN_G"), 255)
        b = _channel(inputs.get("SIGNAL_IN_B"), 255)

    return {"SIGNAL_OUT": f"{r},{g},{b},{alpha}"}
