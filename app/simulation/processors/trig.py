"""
Trigonometric components: Sin, Cos, Tan, Asin, Acos, Atan.

Every component has a ``useRadians`` setting selecting the unit of its angle
(the input for Sin/Cos/Tan, the output for the inverse functions).
Non-finite arguments and results fall back the same way a non-numeric input
does for that component.
"""

import math

from models.signal import NO_SIGNAL, is_present

from ..coercion import number_or_zero, parse_number

# Distance from an asymptote of tan() inside which the output is clamped
TAN_ASYMPTOTE_EPSILON = 0.001


def _to_radians(component, number):
    if component.settings.get("useRadians", True):
        return number
    return math.radians(number)


def _from_radians(component, angle):
    if component.settings.get("useRadians", True):
        return angle
    return math.degrees(angle)


def _finite_input(component):
    """Numeric SIGNAL_IN if present and finite, else None."""
    number = parse_number(component.inputs.get("SIGNAL_IN", NO_SIGNAL))
    if number is None or not math.isfinite(number):
        return None
    return number


def process_sin(component, context):
    number = _finite_input(component)
    if number is None:
        return {"SIGNAL_OUT": 0}
    return {"SIGNAL_OUT": math.sin(_to_radians(component, number))}


def process_cos(component, context):
    if not is_present(component.inputs.get("SIGNAL_IN", NO_SIGNAL)):
        return None
    number = _finite_input(component)
    if number is None:
        return {"SIGNAL_OUT": NO_SIGNAL}
    return {"SIGNAL_OUT": math.cos(_to_radians(component, number))}


def process_tan(component, context):
    """
    Tangent with clamping near the asymptotes at pi/2 + n*pi.

    Approaching an asymptote from below yields ``maxValue``; just past it
    yields ``minValue``.
    """
    number = _finite_input(component)
    if number is None:
        return {"SIGNAL_OUT": 0}

    angle = _to_radians(component, number)
    offset = (angle - math.pi / 2) % math.pi
    if offset == 0 or math.pi - offset < TAN_ASYMPTOTE_EPSILON:
        return {"SIGNAL_OUT": number_or_zero(component.settings.get("maxValue", 1e6))}
    if offset < TAN_ASYMPTOTE_EPSILON:
        return {"SIGNAL_OUT": number_or_zero(component.settings.get("minValue", -1e6))}

    result = math.tan(angle)
    if not math.isfinite(result):
        return {"SIGNAL_OUT": 0}
    return {"SIGNAL_OUT": result}


def process_asin(component, context):
    signal_in = component.inputs.get("SIGNAL_IN", NO_SIGNAL)
    if not is_present(signal_in):
        return None
    number = parse_number(signal_in)
    if number is None or not -1 <= number <= 1:
        return {"SIGNAL_OUT": NO_SIGNAL}
    return {"SIGNAL_OUT": _from_radians(component, math.asin(number))}


def process_acos(component, context):
    signal_in = component.inputs.get("SIGNAL_IN", NO_SIGNAL)
    if not is_present(signal_in):
        return None
    number = parse_number(signal_in)
    if number is None:
        return {"SIGNAL_OUT": signal_in}
    if not -1 <= number <= 1:
        return {"SIGNAL_OUT": NO_SIGNAL}
    return {"SIGNAL_OUT": _from_radians(component, math.acos(number))}


def process_atan(component, context):
    """atan(SIGNAL_IN), or atan2(Y, X) when both vector pins are present."""
    inputs = component.inputs
    signal_y = inputs.get("SIGNAL_IN_Y", NO_SIGNAL)
    signal_x = inputs.get("SIGNAL_IN_X", NO_SIGNAL)
    signal_in = inputs.get("SIGNAL_IN", NO_SIGNAL)

    if is_present(signal_y) and is_present(signal_x):
        y = number_or_zero(signal_y)
        x = number_or_zero(signal_x)
        angle = math.atan2(y, x)
    elif is_present(signal_in):
        angle = math.atan(number_or_zero(signal_in))
    else:
        return None

    if not math.isfinite(angle):
        return {"SIGNAL_OUT": 0}
    return {"SIGNAL_OUT": _from_radians(component, angle)}
