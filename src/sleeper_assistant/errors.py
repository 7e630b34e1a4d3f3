"""
Error types shared across the assistant.

Upstream failures are raised as ``SleeperAPIError`` from the client module;
the errors here cover configuration, resolution and argument problems.
"""

from typing import Any


class AssistantError(Exception):
    """Base class for errors that become structured tool results."""

    kind = "internal"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(AssistantError):
    """No usable account/league configuration."""

    kind = "configuration"


class ResolutionError(AssistantError):
    """A hint, roster or record could not be matched."""

    kind = "not_found"


class InvalidArgumentsError(AssistantError):
    """Tool arguments are missing or of the wrong type."""

    kind = "invalid_arguments"
