"""WiFi component: wireless send/receive over numbered broadcast channels."""

from models.signal import NO_SIGNAL, is_present

from ..coercion import parse_int


def resolve_channel(component, context) -> int:
    """Channel from SET_CHANNEL or the ``channel`` setting, kept in the configured range."""
    settings = context.settings
    low = settings.broadcast_channel_min
    high = settings.broadcast_channel_max

    channel = parse_int(component.settings.get("channel"))
    override = parse_int(component.inputs.get("SET_CHANNEL", NO_SIGNAL))
    if override is not None:
        channel = override
    if channel is None:
        channel = low
    return max(low, min(high, channel))


def process_wifi(component, context):
    """
    Publish a present SIGNAL_IN on the channel for the next tick and emit
    whatever was broadcast there during the previous tick.
    """
    channel = resolve_channel(component, context)

    signal_in = component.inputs.get("SIGNAL_IN", NO_SIGNAL)
    if is_present(signal_in):
        context.broadcast.write(channel, signal_in)

    received = context.broadcast.read(channel)
    component.value = received
    return {"SIGNAL_OUT": received}
