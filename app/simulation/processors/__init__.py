"""
Per-component tick processors.

Every processor has the signature ``process(component, context)`` and returns
a dict of output pin -> signal, or None when the component emits nothing this
tick. Output pins missing from the dict are published as NO_SIGNAL.
Processors mutate only their own component (``state`` and ``value``), plus the
broadcast buffer in the case of WiFi.
"""

from .arithmetic import process_adder, process_concatenation, process_divide, process_multiply, process_subtract
from .basic import process_button, process_color, process_constant, process_display, process_light, process_random
from .comparison import process_and, process_equals, process_greater, process_or, process_signal_check, process_xor
from .oscillator import WaveType, process_oscillator
from .regex import process_regex
from .relay import process_relay
from .selectors import process_input_selector, process_output_selector
from .timing import process_delay, process_memory
from .trig import process_acos, process_asin, process_atan, process_cos, process_sin, process_tan
from .unary import (
    process_abs,
    process_ceil,
    process_exponentiation,
    process_factorial,
    process_floor,
    process_modulo,
    process_not,
    process_round,
    process_square_root,
)
from .wifi import process_wifi

PROCESSORS = {
    "Constant": process_constant,
    "Random": process_random,
    "Button": process_button,
    "Display": process_display,
    "Light": process_light,
    "Color": process_color,
    "Abs": process_abs,
    "Ceil": process_ceil,
    "Floor": process_floor,
    "Round": process_round,
    "SquareRoot": process_square_root,
    "Factorial": process_factorial,
    "Not": process_not,
    "Modulo": process_modulo,
    "Exponentiation": process_exponentiation,
    "Sin": process_sin,
    "Cos": process_cos,
    "Tan": process_tan,
    "Asin": process_asin,
    "Acos": process_acos,
    "Atan": process_atan,
    "Adder": process_adder,
    "Subtract": process_subtract,
    "Multiply": process_multiply,
    "Divide": process_divide,
    "Concatenation": process_concatenation,
    "Equals": process_equals,
    "SignalCheck": process_signal_check,
    "And": process_and,
    "Or": process_or,
    "Xor": process_xor,
    "Greater": process_greater,
    "RegEx": process_regex,
    "Oscillator": process_oscillator,
    "InputSelector": process_input_selector,
    "OutputSelector": process_output_selector,
    "Relay": process_relay,
    "WiFi": process_wifi,
    "Delay": process_delay,
    "Memory": process_memory,
}

__all__ = ["PROCESSORS", "WaveType"]
