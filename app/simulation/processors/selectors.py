"""
InputSelector and OutputSelector: ten-way multiplexer and demultiplexer.

Both keep a selected channel in their state. SET_INPUT/SET_OUTPUT jump to a
channel directly; MOVE_INPUT/MOVE_OUTPUT step by the sign of their value,
but only on the tick the move value turns non-zero.
"""

from models.signal import NO_SIGNAL, is_present

from ..coercion import number_or_zero, parse_int, sign

CHANNEL_COUNT = 10


def _bound(channel: int, wrap_around: bool) -> int:
    if wrap_around:
        return channel % CHANNEL_COUNT
    return max(0, min(CHANNEL_COUNT - 1, channel))


def _is_move_edge(current, previous) -> bool:
    return is_present(current) and number_or_zero(current) != 0 and number_or_zero(previous) == 0


def update_selection(component, set_pin: str, move_pin: str, is_connected) -> int:
    """
    Apply the direct-set and move pins to the component's selection.

    Args:
        component: InputSelector or OutputSelector.
        set_pin: Name of the direct-set pin.
        move_pin: Name of the move pin.
        is_connected: Callable(channel) -> bool, used by skipEmptyConnections.

    Returns:
        The selected channel after this tick.
    """
    state = component.state
    settings = component.settings
    wrap_around = bool(settings.get("wrapAround", True))
    selected = _bound(state.selected_connection, wrap_around)

    requested = parse_int(component.inputs.get(set_pin, NO_SIGNAL))
    if requested is not None:
        selected = _bound(requested, wrap_around)

    move = component.inputs.get(move_pin, NO_SIGNAL)
    if _is_move_edge(move, state.last_move_signal):
        step = sign(number_or_zero(move))
        for _ in range(CHANNEL_COUNT):
            selected = _bound(selected + step, wrap_around)
            if not settings.get("skipEmptyConnections") or is_connected(selected):
                break
    state.last_move_signal = move

    state.selected_connection = selected
    return selected


def process_input_selector(component, context):
    """Forward the selected SIGNAL_IN_n; an absent selected input reads as 0."""
    circuit = context.circuit

    def is_connected(channel):
        return circuit.is_input_connected(component.component_id, f"SIGNAL_IN_{channel}")

    selected = update_selection(component, "SET_INPUT", "MOVE_INPUT", is_connected)
    signal = component.inputs.get(f"SIGNAL_IN_{selected}", NO_SIGNAL)
    component.value = selected
    return {
        "SIGNAL_OUT": signal if is_present(signal) else 0,
        "SELECTED_INPUT_OUT": selected,
    }


def process_output_selector(component, context):
    """Route SIGNAL_IN to the selected SIGNAL_OUT_n; every other output is NO_SIGNAL."""
    circuit = context.circuit

    def is_connected(channel):
        return circuit.is_output_connected(component.component_id, f"SIGNAL_OUT_{channel}")

    selected = update_selection(component, "SET_OUTPUT", "MOVE_OUTPUT", is_connected)
    outputs = {f"SIGNAL_OUT_{channel}": NO_SIGNAL for channel in range(CHANNEL_COUNT)}
    outputs[f"SIGNAL_OUT_{selected}"] = component.inputs.get("SIGNAL_IN", NO_SIGNAL)
    outputs["SELECTED_OUTPUT_OUT"] = selected
    component.value = selected
    return outputs
