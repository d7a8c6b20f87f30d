"""
Two-operand arithmetic: Adder, Subtract, Multiply, Divide, Concatenation.

The numeric components share one contract:
    - a NO_SIGNAL operand counts as 0, so Adder(NO_SIGNAL, NO_SIGNAL) == 0
    - a present operand that is not a number makes the output SIGNAL_IN_1, raw
    - with ``timeFrame`` > 0 the result is averaged over that many seconds of
      simulated time before ``clampMin``/``clampMax`` are applied
"""

from models.signal import NO_SIGNAL, is_present

from ..coercion import clamp, format_signal, is_finite_number, parse_int, parse_number, truncate
from ..history import windowed_mean


def _operands(component):
    """(in1, in2, numbers) where numbers is None if an operand is non-numeric."""
    in1 = component.inputs.get("SIGNAL_IN_1", NO_SIGNAL)
    in2 = component.inputs.get("SIGNAL_IN_2", NO_SIGNAL)
    numbers = []
    for value in (in1, in2):
        if not is_present(value):
            numbers.append(0)
            continue
        number = parse_number(value)
        if number is None:
            return in1, in2, None
        numbers.append(number)
    return in1, in2, numbers


def _finish(component, context, result):
    """Shared post-processing: time window, then clamping."""
    settings = component.settings
    if not is_finite_number(result):
        result = 0

    time_frame = parse_number(settings.get("timeFrame"))
    if time_frame is not None and time_frame > 0:
        result = windowed_mean(component.state.history, result, context.now_ms, time_frame)

    return clamp(result, settings.get("clampMin"), settings.get("clampMax"))


def _arithmetic(component, context, operation):
    in1, _in2, numbers = _operands(component)
    if numbers is None:
        return {"SIGNAL_OUT": in1}
    return {"SIGNAL_OUT": _finish(component, context, operation(*numbers))}


def process_adder(component, context):
    return _arithmetic(component, context, lambda a, b: a + b)


def process_subtract(component, context):
    return _arithmetic(component, context, lambda a, b: a - b)


def process_multiply(component, context):
    precision = parse_int(component.settings.get("precision"))

    def multiply(a, b):
        product = a * b
        if precision is not None and precision > 0 and is_finite_number(product):
            product = round(product, precision)
        return product

    return _arithmetic(component, context, multiply)


def process_divide(component, context):
    def divide(a, b):
        if b == 0:
            return 0
        return a / b

    return _arithmetic(component, context, divide)


def process_concatenation(component, context):
    in1 = component.inputs.get("SIGNAL_IN_1", NO_SIGNAL)
    in2 = component.inputs.get("SIGNAL_IN_2", NO_SIGNAL)
    if not (is_present(in1) and is_present(in2)):
        return None

    settings = component.settings
    separator = settings.get("separator") or ""
    text = format_signal(in1) + str(separator) + format_signal(in2)
    return {"SIGNAL_OUT": truncate(text, settings.get("maxOutputLength"))}
