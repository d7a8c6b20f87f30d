"""
simulation/coercion.py

Numeric/text normalisation shared by every processor. Nothing here raises:
conversion failures come back as ``None`` so each caller can pick its own
fallback (pass the raw value through, substitute 0, or emit NO_SIGNAL).
"""

import math
from typing import Optional

from models.signal import NO_SIGNAL, is_present


def parse_number(value) -> Optional[float]:
    """
    Standard numeric parse of a signal.

    Returns:
        The number (ints are kept as ints), or None when the value is
        absent or does not parse to a number. NaN counts as not a number.
        Ints too large for a float become +/-inf.
    """
    if not is_present(value):
        return None
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        try:
            float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
        return value
    if isinstance(value, float):
        number = value
    else:
        try:
            number = float(str(value).strip())
        except (TypeError, ValueError):
            return None
    if isinstance(number, float) and math.isnan(number):
        return None
    return number


def parse_int(value) -> Optional[int]:
    """Parse to an integer, truncating toward zero. None if not finite."""
    number = parse_number(value)
    if number is None or not math.isfinite(number):
        return None
    return int(number)


def number_or_zero(value):
    number = parse_number(value)
    return 0 if number is None else number


def is_active(value) -> bool:
    """
    Truthiness of a signal: present and not numeric zero.

    Non-numeric text counts as active.
    """
    if not is_present(value):
        return False
    number = parse_number(value)
    return number is None or number != 0


def is_finite_number(value) -> bool:
    """True for a real number that fits in a float and is not inf or NaN."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def format_signal(value) -> str:
    """Render a signal as text; integral floats drop their trailing '.0'."""
    if not is_present(value):
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def truncate(value, max_length) -> str:
    """Text form of ``value`` cut to ``max_length`` characters when it is positive."""
    text = format_signal(value)
    limit = parse_int(max_length)
    if limit is not None and limit > 0:
        text = text[:limit]
    return text


def clamp(value, minimum=None, maximum=None):
    """Clamp a number to optional bounds taken from settings."""
    upper = parse_number(maximum)
    lower = parse_number(minimum)
    if upper is not None:
        value = min(value, upper)
    if lower is not None:
        value = max(value, lower)
    return value


def sign(number) -> int:
    if number > 0:
        return 1
    if number < 0:
        return -1
    return 0


def loose_equals(a, b, tolerance: float = 0.0) -> bool:
    """
    Typed comparison with a fallback.

    Numeric when both sides parse to numbers (within ``tolerance``),
    otherwise a comparison of their text forms.
    """
    num_a = parse_number(a)
    num_b = parse_number(b)
    if num_a is not None and num_b is not None:
        if num_a == num_b:
            return True
        try:
            return abs(num_a - num_b) <= tolerance
        except (ArithmeticError, TypeError):
            return False
    return format_signal(a) == format_signal(b)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def strict_equals(a, b) -> bool:
    """Type-sensitive equality: numbers only equal numbers, text only text."""
    if a is NO_SIGNAL or b is NO_SIGNAL:
        return a is b
    if _is_number(a) and _is_number(b):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    return False
