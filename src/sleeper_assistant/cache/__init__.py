"""In-memory caches: the player directory and the current-period cache."""

from sleeper_assistant.cache.period import PeriodCache, PeriodSnapshot
from sleeper_assistant.cache.players import PlayerDirectory

__all__ = ["PeriodCache", "PeriodSnapshot", "PlayerDirectory"]
