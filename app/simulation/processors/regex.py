"""RegEx component: pattern matching with optional capture-group extraction."""

import re

from models.signal import NO_SIGNAL, is_present

from ..coercion import format_signal, truncate

# JavaScript-style named groups, (?<name>...), excluding lookbehinds
_JS_NAMED_GROUP = re.compile(r"\(\?<(?![=!])")


def compile_expression(expression: str):
    """
    Compile a user expression, accepting ``(?<name>...)`` named groups.

    Raises:
        re.error: If the expression is invalid.
    """
    return re.compile(_JS_NAMED_GROUP.sub("(?P<", expression))


def _first_named_group(match):
    names = sorted(match.re.groupindex, key=match.re.groupindex.get)
    if not names:
        return None
    return match.group(names[0])


def _evaluate(component, signal_in):
    settings = component.settings
    override = component.inputs.get("SET_OUTPUT", NO_SIGNAL)
    output = override if is_present(override) else settings.get("output")
    false_output = settings.get("falseOutput")

    expression = settings.get("expression") or ""
    if not str(expression).strip():
        return output

    try:
        pattern = compile_expression(str(expression))
    except re.error:
        return false_output

    match = pattern.search(format_signal(signal_in))
    if match is None:
        return false_output
    if not settings.get("useCaptureGroup"):
        return output

    captured = _first_named_group(match)
    if captured is None or (captured == "" and not settings.get("outputEmptyCaptureGroup")):
        return false_output
    return captured


def process_regex(component, context):
    """
    Match SIGNAL_IN against ``expression``.

    An invalid expression counts as no match. With ``continuousOutput`` an
    absent input repeats the last emitted value.
    """
    state = component.state
    settings = component.settings
    signal_in = component.inputs.get("SIGNAL_IN", NO_SIGNAL)

    if is_present(signal_in):
        result = _evaluate(component, signal_in)
    elif settings.get("continuousOutput") and is_present(state.value):
        result = state.value
    else:
        result = settings.get("falseOutput")

    result = truncate(result, settings.get("maxOutputLength"))
    state.value = result
    component.value = result
    return {"SIGNAL_OUT": result}
