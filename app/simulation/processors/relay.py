"""Relay component: an edge-toggled double switch."""

from models.signal import NO_SIGNAL, is_present

from ..coercion import format_signal, is_active, loose_equals


def _is_toggle_edge(current, previous) -> bool:
    if not is_active(current):
        return False
    return not (is_present(previous) and loose_equals(current, previous))


def process_relay(component, context):
    """
    TOGGLE_STATE flips the relay on a fresh non-zero value; SET_STATE then
    sets it outright ("0" is off, anything else on). While on, SIGNAL_IN_1/2
    pass through; while off both outputs are 0.
    """
    state = component.state
    inputs = component.inputs

    toggle = inputs.get("TOGGLE_STATE", NO_SIGNAL)
    if _is_toggle_edge(toggle, state.last_toggle_signal):
        state.is_on = not state.is_on
    state.last_toggle_signal = toggle

    set_state = inputs.get("SET_STATE", NO_SIGNAL)
    if is_present(set_state):
        state.is_on = format_signal(set_state).strip() != "0"

    component.value = 1 if state.is_on else 0
    if state.is_on:
        return {
            "SIGNAL_OUT_1": inputs.get("SIGNAL_IN_1", NO_SIGNAL),
            "SIGNAL_OUT_2": inputs.get("SIGNAL_IN_2", NO_SIGNAL),
            "STATE_OUT": 1,
        }
    return {"SIGNAL_OUT_1": 0, "SIGNAL_OUT_2": 0, "STATE_OUT": 0}
