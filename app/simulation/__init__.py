from .broadcast import BroadcastBuffer
from .processors import PROCESSORS
from .scheduler import TickContext, TickScheduler
from .settings_store import SettingsStore, SimulationSettings

__all__ = ["BroadcastBuffer", "PROCESSORS", "SettingsStore", "SimulationSettings", "TickContext", "TickScheduler"]
