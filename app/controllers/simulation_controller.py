"""
SimulationController - Drives the tick scheduler and exposes live values.

Ticks are scheduled with a PyQt6 QTimer so they run on the Qt event loop
alongside the views. step() runs a single tick synchronously and works
without an event loop (CLI, tests).
"""

import logging
from typing import Any, Optional

from PyQt6.QtCore import QTimer

from models.circuit import CircuitModel
from models.signal import NO_SIGNAL
from simulation.scheduler import TickScheduler
from simulation.settings_store import SimulationSettings

logger = logging.getLogger(__name__)


class SimulationController:
    """
    Controller for running the simulation.

    Stopping the driver never resets component state: a later start()
    resumes where the previous run left off. Use reset() to start over.
    """

    def __init__(
        self,
        model: Optional[CircuitModel] = None,
        circuit_ctrl=None,
        settings: Optional[SimulationSettings] = None,
    ):
        self.model = model if model is not None else CircuitModel()
        self.circuit_ctrl = circuit_ctrl
        self.scheduler = TickScheduler(self.model, settings)
        self._timer = None
        self._running = False

    @property
    def settings(self) -> SimulationSettings:
        return self.scheduler.settings

    @property
    def tick_count(self) -> int:
        return self.scheduler.tick_count

    @property
    def elapsed_ms(self) -> float:
        return self.scheduler.elapsed_ms

    @property
    def tick_interval_ms(self) -> float:
        return self.scheduler.tick_interval_ms

    def _notify(self, event: str, data: Any) -> None:
        if self.circuit_ctrl:
            self.circuit_ctrl._notify(event, data)

    # --- Scheduler control ---

    def start(self, tick_interval_ms: Optional[float] = None) -> None:
        """
        Start ticking every ``tick_interval_ms`` milliseconds.

        Calling start() while running only changes the interval.

        Raises:
            ValueError: If the interval is not a positive number.
        """
        if tick_interval_ms is None:
            tick_interval_ms = self.scheduler.tick_interval_ms
        if tick_interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {tick_interval_ms}.")

        self.scheduler.tick_interval_ms = float(tick_interval_ms)
        if self._timer is None:
            self._timer = QTimer()
            self._timer.timeout.connect(self.step)
        self._timer.start(max(1, int(round(tick_interval_ms))))

        was_running = self._running
        self._running = True
        if not was_running:
            logger.info("Simulation started (tick interval %s ms)", tick_interval_ms)
            self._notify("simulation_started", None)

    def stop(self) -> None:
        """Stop ticking. Component state is kept."""
        if not self._running:
            return
        if self._timer is not None:
            self._timer.stop()
        self._running = False
        logger.info("Simulation stopped after %d ticks", self.scheduler.tick_count)
        self._notify("simulation_stopped", None)

    def is_running(self) -> bool:
        return self._running

    def step(self) -> int:
        """Run exactly one tick. Returns the new tick count."""
        self.scheduler.tick()
        self._notify("tick_completed", self.scheduler.tick_count)
        return self.scheduler.tick_count

    def run_ticks(self, count: int) -> None:
        """Run ``count`` ticks synchronously."""
        for _ in range(count):
            self.step()

    def reset(self) -> None:
        """Return every component and the simulated clock to their initial state."""
        self.scheduler.reset()
        self._notify("simulation_reset", None)

    # --- Read API ---

    def get_outputs(self, component_id: str) -> dict:
        """Output pin map published by a component in the latest tick."""
        component = self.model.components.get(component_id)
        if component is None:
            return {}
        return dict(component.outputs)

    def get_value(self, component_id: str):
        """
        Current displayable value of a component.

        Sinks (Display, Light) report their ``value``; everything else reports
        its first output pin. Unknown IDs and components that have not ticked
        yet report NO_SIGNAL.
        """
        component = self.model.components.get(component_id)
        if component is None:
            return NO_SIGNAL
        if component.is_sink():
            return NO_SIGNAL if component.value is None else component.value
        pins = component.get_output_pins()
        return component.outputs.get(pins[0], NO_SIGNAL)
