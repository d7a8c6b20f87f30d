"""
Single-input numeric components.

Fallbacks differ by component and are part of their contract:

    component       absent input    non-numeric input
    Abs             NO_SIGNAL       raw value passed through
    Ceil, Floor     NO_SIGNAL       NO_SIGNAL
    Round           0               0
    SquareRoot      0               0 (also for negatives)
    Factorial       NO_SIGNAL       0 (also outside 0..20)
    Not             latched / 0     treated as 0
    Modulo          NO_SIGNAL       0
    Exponentiation  NO_SIGNAL       0
"""

import math

from models.signal import NO_SIGNAL, is_present

from ..coercion import is_finite_number, number_or_zero, parse_int, parse_number

MAX_FACTORIAL_INPUT = 20


def _signal_in(component):
    return component.inputs.get("SIGNAL_IN", NO_SIGNAL)


def process_abs(component, context):
    signal_in = _signal_in(component)
    if not is_present(signal_in):
        return None
    number = parse_number(signal_in)
    if number is None:
        return {"SIGNAL_OUT": signal_in}
    return {"SIGNAL_OUT": abs(number)}


def _rounding(component, func):
    signal_in = _signal_in(component)
    if not is_present(signal_in):
        return None
    number = parse_number(signal_in)
    if number is None or not math.isfinite(number):
        return {"SIGNAL_OUT": NO_SIGNAL}
    return {"SIGNAL_OUT": func(number)}


def process_ceil(component, context):
    return _rounding(component, math.ceil)


def process_floor(component, context):
    return _rounding(component, math.floor)


def process_round(component, context):
    """Half-up rounding; anything unusable becomes 0."""
    number = parse_number(_signal_in(component))
    if number is None or not math.isfinite(number):
        return {"SIGNAL_OUT": 0}
    return {"SIGNAL_OUT": math.floor(number + 0.5)}


def process_square_root(component, context):
    number = parse_number(_signal_in(component))
    if number is None or number < 0:
        return {"SIGNAL_OUT": 0}
    return {"SIGNAL_OUT": math.sqrt(number)}


def process_factorial(component, context):
    signal_in = _signal_in(component)
    if not is_present(signal_in):
        return None
    n = parse_int(signal_in)
    if n is None or n < 0 or n > MAX_FACTORIAL_INPUT:
        return {"SIGNAL_OUT": 0}
    return {"SIGNAL_OUT": math.factorial(n)}


def process_not(component, context):
    """1 for numeric zero (or non-numeric), 0 otherwise; may hold its last value."""
    state = component.state
    signal_in = _signal_in(component)

    if is_present(signal_in):
        state.value = 1 if number_or_zero(signal_in) == 0 else 0
        return {"SIGNAL_OUT": state.value}

    if component.settings.get("continuousOutput"):
        return {"SIGNAL_OUT": state.value}
    return {"SIGNAL_OUT": 0}


def _operand(component, pin, setting):
    """Per-tick override pin wins over the configured setting."""
    override = component.inputs.get(pin, NO_SIGNAL)
    if is_present(override):
        return override
    return component.settings.get(setting)


def process_modulo(component, context):
    """Remainder with the sign of the dividend."""
    signal_in = _signal_in(component)
    if not is_present(signal_in):
        return None

    dividend = number_or_zero(signal_in)
    modulus = number_or_zero(_operand(component, "SET_MODULUS", "modulus"))
    if modulus == 0 or not is_finite_number(dividend):
        return {"SIGNAL_OUT": 0}

    result = math.fmod(dividend, modulus)
    if isinstance(dividend, int) and isinstance(modulus, int):
        result = int(result)
    return {"SIGNAL_OUT": result}


def process_exponentiation(component, context):
    signal_in = _signal_in(component)
    if not is_present(signal_in):
        return None

    base = number_or_zero(signal_in)
    exponent = number_or_zero(_operand(component, "SET_EXPONENT", "exponent"))
    try:
        result = math.pow(base, exponent)
    except (OverflowError, ValueError, ZeroDivisionError):
        return {"SIGNAL_OUT": 0}

    if not is_finite_number(result):
        return {"SIGNAL_OUT": 0}
    if result.is_integer() and isinstance(base, int) and isinstance(exponent, int) and exponent >= 0:
        result = int(result)
    return {"SIGNAL_OUT": result}
