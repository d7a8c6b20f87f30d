"""Simulation settings - load/save engine configuration as JSON."""

import json
import logging
import math
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class SimulationSettings:
    """Engine-wide configuration.

    Out-of-range values fall back to their defaults with a logged warning.
    """

    tick_interval_ms: float = 100.0
    history_limit: int = 1000
    random_seed: Optional[int] = None
    broadcast_channel_min: int = 1
    broadcast_channel_max: int = 100

    def __post_init__(self):
        if not _is_number(self.tick_interval_ms) or not 0 < self.tick_interval_ms < math.inf:
            self._reset_field("tick_interval_ms", "must be a positive number")
        if not _is_int(self.history_limit) or self.history_limit < 1:
            self._reset_field("history_limit", "must be an integer >= 1")
        if self.random_seed is not None and (not _is_int(self.random_seed) or self.random_seed < 0):
            self._reset_field("random_seed", "must be a non-negative integer")
        if (
            not _is_int(self.broadcast_channel_min)
            or not _is_int(self.broadcast_channel_max)
            or self.broadcast_channel_min > self.broadcast_channel_max
        ):
            self._reset_field("broadcast_channel_min", "channel range is invalid")
            self._reset_field("broadcast_channel_max", "channel range is invalid")

    def _reset_field(self, name: str, reason: str) -> None:
        default = next(f.default for f in fields(self) if f.name == name)
        logger.warning("Invalid %s %r (%s); using %r", name, getattr(self, name), reason, default)
        setattr(self, name, default)

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationSettings":
        """Build settings from a dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict:
        return asdict(self)


class SettingsStore:
    """Persists SimulationSettings in a user-writable JSON file.

    A missing file yields defaults. An unreadable or malformed file also
    yields defaults, with a warning in the log.
    """

    def __init__(self, settings_file: Optional[Path] = None):
        if settings_file is None:
            settings_file = self._default_settings_path()
        self._settings_file = Path(settings_file)
        self.settings = self._load()

    @staticmethod
    def _default_settings_path() -> Path:
        """Return the default path for the settings file."""
        return Path.home() / ".pulseboard" / "simulation.json"

    @property
    def path(self) -> Path:
        return self._settings_file

    def _load(self) -> SimulationSettings:
        if not self._settings_file.exists():
            return SimulationSettings()
        try:
            data = json.loads(self._settings_file.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Failed to load simulation settings from %s: %s", self._settings_file, e)
            return SimulationSettings()
        if not isinstance(data, dict):
            logger.warning("Ignoring simulation settings in %s: not a JSON object", self._settings_file)
            return SimulationSettings()
        try:
            return SimulationSettings.from_dict(data)
        except TypeError as e:
            logger.warning("Invalid simulation settings in %s: %s", self._settings_file, e)
            return SimulationSettings()

    def save(self) -> None:
        """Write the current settings to disk."""
        self._settings_file.parent.mkdir(parents=True, exist_ok=True)
        self._settings_file.write_text(json.dumps(self.settings.to_dict(), indent=2), encoding="utf-8")

    def update(self, **changes) -> SimulationSettings:
        """Replace individual settings and persist them."""
        data = self.settings.to_dict()
        data.update(changes)
        self.settings = SimulationSettings.from_dict(data)
        self.save()
        return self.settings
