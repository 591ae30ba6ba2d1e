"""User stats persistence and derived energy figures."""

import logging
from dataclasses import asdict, dataclass

from calorie_tracker.domain.metabolic import EnergyProfile, UserStats, energy_profile
from calorie_tracker.services.state import STATS_KEY, StateStore, read_json, write_json

_logger = logging.getLogger(__name__)


@dataclass
class ProfileService:
    """Service for the stored body stats."""

    store: StateStore

    def get_stats(self) -> UserStats:
        """Return stored stats, falling back to defaults."""
        raw = read_json(self.store, STATS_KEY)
        if not isinstance(raw, dict):
            return UserStats()
        defaults = asdict(UserStats())
        values = {key: raw.get(key, value) for key, value in defaults.items()}
        try:
            return UserStats(**values)
        except (TypeError, ValueError):
            _logger.warning("Stored stats are invalid, using defaults")
            return UserStats()

    def update_stats(self, stats: UserStats) -> UserStats:
        """Persist new stats."""
        write_json(self.store, STATS_KEY, asdict(stats))
        return stats

    def get_energy(self) -> EnergyProfile:
        """Return BMR and TDEE for the stored stats."""
        return energy_profile(self.get_stats())
