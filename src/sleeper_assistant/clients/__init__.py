"""External API clients."""

from sleeper_assistant.clients.pacer import RequestPacer
from sleeper_assistant.clients.sleeper import SleeperAPIError, SleeperClient

__all__ = ["RequestPacer", "SleeperClient", "SleeperAPIError"]
