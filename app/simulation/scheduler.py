"""
simulation/scheduler.py

The per-tick evaluation loop. This module contains no Qt dependencies; the
fixed-interval driving lives in SimulationController.

Each tick:
    1. every component's inputs are aggregated from the outputs published
       in the previous tick,
    2. its processor runs (pure computation + mutation of its own state),
    3. its outputs are collected into the map that the next tick reads,
    4. the broadcast buffer is swapped.

Because step 1 only reads the previous tick's outputs, the order in which
components are evaluated inside a tick does not affect the result.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from models.circuit import CircuitModel
from models.component import ComponentData
from models.signal import NO_SIGNAL, as_signal
from models.state import SignalHistory

from .aggregator import aggregate_inputs, build_input_index
from .broadcast import BroadcastBuffer
from .processors import PROCESSORS
from .settings_store import SimulationSettings

logger = logging.getLogger(__name__)

# Failures a processor may hit on malformed settings; never allowed to stop a tick
PROCESSOR_ERRORS = (ArithmeticError, TypeError, ValueError, AttributeError, KeyError, IndexError, re.error)


@dataclass
class TickContext:
    """Circuit-wide data handed to processors alongside their component."""

    tick_count: int
    tick_interval_ms: float
    now_ms: float
    circuit: CircuitModel
    broadcast: BroadcastBuffer
    settings: SimulationSettings


class TickScheduler:
    """
    Evaluates the whole component graph one discrete tick at a time.

    Stopping and restarting the driver never touches this object, so
    persistent component state survives pause/resume.
    """

    def __init__(self, model: Optional[CircuitModel] = None, settings: Optional[SimulationSettings] = None):
        self.model = model if model is not None else CircuitModel()
        self.settings = settings or SimulationSettings()
        self.broadcast = BroadcastBuffer()
        self.tick_interval_ms = float(self.settings.tick_interval_ms)
        self._tick_count = 0
        self._elapsed_ms = 0.0
        self._published: dict[tuple[str, str], object] = {}
        self._unknown_types: set[str] = set()

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def elapsed_ms(self) -> float:
        """Simulated time: the sum of the intervals of every tick run so far."""
        return self._elapsed_ms

    def published_value(self, component_id: str, pin_name: str):
        """Output published by a component in the most recent tick."""
        return self._published.get((component_id, pin_name), NO_SIGNAL)

    def tick(self) -> None:
        """Run exactly one tick over every component, in insertion order."""
        self._tick_count += 1
        self._elapsed_ms += self.tick_interval_ms
        context = TickContext(
            tick_count=self._tick_count,
            tick_interval_ms=self.tick_interval_ms,
            now_ms=self._elapsed_ms,
            circuit=self.model,
            broadcast=self.broadcast,
            settings=self.settings,
        )

        previous = self._published
        index = build_input_index(self.model.wires)
        published: dict[tuple[str, str], object] = {}

        for component in list(self.model.components.values()):
            component.inputs = aggregate_inputs(self.model, previous, component, index)
            self._apply_history_limit(component)
            outputs = self._run_processor(component, context) or {}
            component.outputs = {pin: as_signal(outputs.get(pin, NO_SIGNAL)) for pin in component.get_output_pins()}
            for pin, value in component.outputs.items():
                published[(component.component_id, pin)] = value

        self._published = published
        self.broadcast.swap()

    def run(self, ticks: int) -> None:
        """Run several ticks back to back."""
        for _ in range(ticks):
            self.tick()

    def reset(self) -> None:
        """Return every component and the clock to their initial state."""
        self._tick_count = 0
        self._elapsed_ms = 0.0
        self._published = {}
        self.broadcast.clear()
        for component in self.model.components.values():
            component.reset_state()

    def _run_processor(self, component: ComponentData, context: TickContext) -> Optional[dict]:
        processor = PROCESSORS.get(component.component_type)
        if processor is None:
            if component.component_type not in self._unknown_types:
                self._unknown_types.add(component.component_type)
                logger.warning("No processor for component type '%s'", component.component_type)
            return None
        try:
            return processor(component, context)
        except PROCESSOR_ERRORS as e:
            logger.error(
                "Processor for %s (%s) failed on tick %d: %s",
                component.component_id,
                component.component_type,
                context.tick_count,
                e,
            )
            return None

    def _apply_history_limit(self, component: ComponentData) -> None:
        history = getattr(component.state, "history", None)
        if isinstance(history, SignalHistory):
            history.set_limit(self.settings.history_limit)
