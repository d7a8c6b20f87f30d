"""
Comparison and logic gates: Equals, SignalCheck, And, Or, Xor, Greater.

Gates emit ``output`` (or the per-tick SET_OUTPUT override) when their
condition holds and ``falseOutput`` otherwise, cut to ``maxOutputLength``.
Windowed gates average their 1/0 outcome over ``timeFrame`` seconds and
report a match while that mean exceeds 0.5.
"""

from models.signal import NO_SIGNAL, is_present

from ..coercion import is_active, loose_equals, number_or_zero, parse_number, strict_equals, truncate
from ..history import windowed_mean

MATCH_THRESHOLD = 0.5


def _gate_output(component, matched: bool) -> dict:
    settings = component.settings
    if matched:
        override = component.inputs.get("SET_OUTPUT", NO_SIGNAL)
        value = override if is_present(override) else settings.get("output")
    else:
        value = settings.get("falseOutput")
    return {"SIGNAL_OUT": truncate(value, settings.get("maxOutputLength"))}


def _smoothed(component, context, matched: bool) -> bool:
    time_frame = parse_number(component.settings.get("timeFrame"))
    if time_frame is None or time_frame <= 0:
        return matched
    mean = windowed_mean(component.state.history, 1 if matched else 0, context.now_ms, time_frame)
    return mean > MATCH_THRESHOLD


def _pair(component):
    return (
        component.inputs.get("SIGNAL_IN_1", NO_SIGNAL),
        component.inputs.get("SIGNAL_IN_2", NO_SIGNAL),
    )


def process_equals(component, context):
    """Numeric comparison within ``tolerance``, falling back to text comparison."""
    in1, in2 = _pair(component)
    matched = False
    if is_present(in1) and is_present(in2):
        tolerance = number_or_zero(component.settings.get("tolerance"))
        matched = loose_equals(in1, in2, abs(tolerance))
    return _gate_output(component, _smoothed(component, context, matched))


def process_signal_check(component, context):
    """Strict (type-sensitive) comparison of SIGNAL_IN with the target signal."""
    inputs = component.inputs
    signal_in = inputs.get("SIGNAL_IN", NO_SIGNAL)

    target = inputs.get("SET_TARGETSIGNAL", NO_SIGNAL)
    if not is_present(target):
        target = component.settings.get("targetSignal")

    matched = is_present(signal_in) and strict_equals(signal_in, target)
    outputs = _gate_output(component, matched)
    component.value = outputs["SIGNAL_OUT"]
    return outputs


def process_and(component, context):
    in1, in2 = _pair(component)
    matched = is_active(in1) and is_active(in2)
    return _gate_output(component, _smoothed(component, context, matched))


def process_or(component, context):
    in1, in2 = _pair(component)
    matched = is_active(in1) or is_active(in2)
    return _gate_output(component, _smoothed(component, context, matched))


def process_xor(component, context):
    in1, in2 = _pair(component)
    matched = is_active(in1) != is_active(in2)
    return _gate_output(component, _smoothed(component, context, matched))


def process_greater(component, context):
    in1, in2 = _pair(component)
    num1 = parse_number(in1)
    num2 = parse_number(in2)
    matched = num1 is not None and num2 is not None and num1 > num2
    return _gate_output(component, _smoothed(component, context, matched))
