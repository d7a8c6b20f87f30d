"""Oscillator component: periodic waveforms driven by simulated time."""

import math
from enum import IntEnum

from models.signal import NO_SIGNAL, is_present

from ..coercion import clamp, parse_int, parse_number

MIN_FREQUENCY = 0.1
MAX_FREQUENCY = 10.0

# Phase is rounded to this many decimals so repeated float increments
# land exactly on integer boundaries
PHASE_DECIMALS = 12


class WaveType(IntEnum):
    PULSE = 0
    SAWTOOTH = 1
    SINE = 2
    SQUARE = 3
    TRIANGLE = 4


def _frequency(component) -> float:
    frequency = parse_number(component.settings.get("frequency"))
    override = component.inputs.get("SET_FREQUENCY", NO_SIGNAL)
    if is_present(override) and parse_number(override) is not None:
        frequency = parse_number(override)
    if frequency is None or not math.isfinite(frequency):
        frequency = 1.0
    return clamp(float(frequency), MIN_FREQUENCY, MAX_FREQUENCY)


def _wave_type(component) -> WaveType:
    wave = WaveType.PULSE
    configured = parse_int(component.settings.get("outputType"))
    if configured is not None and configured in WaveType._value2member_map_:
        wave = WaveType(configured)
    override = parse_int(component.inputs.get("SET_OUTPUTTYPE", NO_SIGNAL))
    if override is not None and override in WaveType._value2member_map_:
        wave = WaveType(override)
    return wave


def waveform(wave: WaveType, phase: float, cycled: bool):
    """Sample a waveform at cycle position ``phase`` in [0, 1)."""
    if wave == WaveType.PULSE:
        return 1 if cycled else 0
    if wave == WaveType.SAWTOOTH:
        return phase
    if wave == WaveType.SINE:
        return math.sin(2 * math.pi * phase)
    if wave == WaveType.SQUARE:
        return 1 if phase < 0.5 else 0
    if phase < 0.5:
        return 4 * phase - 1
    return -4 * phase + 3


def process_oscillator(component, context):
    """
    Advance the cumulative phase by ``frequency * interval`` seconds and sample.

    Pulse fires on the tick where the integer part of the phase increases.
    """
    state = component.state
    frequency = _frequency(component)
    wave = _wave_type(component)

    before = state.cumulative_phase
    after = round(before + frequency * context.tick_interval_ms / 1000.0, PHASE_DECIMALS)
    state.cumulative_phase = after

    cycled = math.floor(after) != math.floor(before)
    return {"SIGNAL_OUT": waveform(wave, after % 1.0, cycled)}
