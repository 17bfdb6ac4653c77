class RelayError(Exception):
    """Base class for relay errors."""


class LogUnavailableError(RelayError):
    """The shared log could not be opened, written or read."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"log {path} unavailable: {reason}")


class ConfigError(RelayError):
    """A configuration value is missing or invalid."""
