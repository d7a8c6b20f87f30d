"""Delay and Memory components."""

from models.signal import NO_SIGNAL, is_present

from ..coercion import parse_number, truncate


def _delay_ms(component) -> float:
    delay = parse_number(component.inputs.get("SET_DELAY", NO_SIGNAL))
    if delay is None:
        delay = parse_number(component.settings.get("delay"))
    if delay is None or delay < 0:
        delay = 0
    return delay * 1000.0


def process_delay(component, context):
    """
    Re-emit each new input value ``delay`` seconds of simulated time later.

    A value is queued on the tick it appears on SIGNAL_IN (a change from the
    previous tick). ``resetOnNewSignal`` drops everything still pending when
    a value is queued; ``resetOnDifferentSignal`` does so only when it differs
    from the last queued value. At most one released value is emitted per tick.
    """
    state = component.state
    settings = component.settings
    signal_in = component.inputs.get("SIGNAL_IN", NO_SIGNAL)

    is_new = is_present(signal_in) and not (
        is_present(state.previous_input) and signal_in == state.previous_input
    )
    if is_new:
        if settings.get("resetOnNewSignal"):
            state.pending.clear()
        if settings.get("resetOnDifferentSignal") and signal_in != state.last_signal_in:
            state.pending.clear()
        state.pending.append((signal_in, context.now_ms + _delay_ms(component)))
        state.last_signal_in = signal_in
    state.previous_input = signal_in

    for index, (value, release_ms) in enumerate(state.pending):
        if release_ms <= context.now_ms:
            del state.pending[index]
            return {"SIGNAL_OUT": value}
    return None


def process_memory(component, context):
    """Output the stored value; store SIGNAL_IN while writeable and LOCK_STATE > 0."""
    state = component.state
    settings = component.settings
    signal_in = component.inputs.get("SIGNAL_IN", NO_SIGNAL)
    lock = parse_number(component.inputs.get("LOCK_STATE", NO_SIGNAL))

    if settings.get("writeable", True) and lock is not None and lock > 0 and is_present(signal_in):
        if isinstance(signal_in, str):
            signal_in = truncate(signal_in, settings.get("maxValueLength"))
        state.stored = signal_in

    component.value = state.stored
    return {"SIGNAL_OUT": state.stored}
