import logging
import math
import os
import sys
from dataclasses import dataclass

from relay.errors import ConfigError

RECORD_FORMATS = ("random", "timestamp")
ROLES = ("generator", "echo", "all")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Config:
    """Explicit settings handed to the generator and the echo server."""

    log_path: str = "/data/output.txt"
    interval: float = 2.0
    record_format: str = "random"
    fsync: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    role: str = "all"
    log_level: str = "INFO"

    def __post_init__(self):
        if not self.log_path:
            raise ConfigError("log_path must not be empty")
        if not math.isfinite(self.interval) or self.interval <= 0:
            raise ConfigError(f"interval must be positive, got {self.interval}")
        if self.record_format not in RECORD_FORMATS:
            raise ConfigError(f"unknown record format: {self.record_format}")
        if not 0 < self.port < 65536:
            raise ConfigError(f"port out of range: {self.port}")
        if self.role not in ROLES:
            raise ConfigError(f"unknown role: {self.role}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, environ=None):
        """Builds a Config from RELAY_* environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            log_path=env.get('RELAY_LOG_PATH', '/data/output.txt'),
            interval=_number(env, 'RELAY_INTERVAL', '2', float),
            record_format=env.get('RELAY_RECORD_FORMAT', 'random').lower(),
            fsync=_flag(env, 'RELAY_FSYNC'),
            host=env.get('RELAY_HOST', '0.0.0.0'),
            port=_number(env, 'RELAY_PORT', '8000', int),
            role=env.get('RELAY_ROLE', 'all').lower(),
            log_level=env.get('RELAY_LOG_LEVEL', 'INFO').upper(),
        )


def _number(env, name, default, kind):
    raw = env.get(name, default)
    try:
        return kind(raw)
    except ValueError:
        raise ConfigError(f"{name} is not a valid {kind.__name__}: {raw!r}") from None


def _flag(env, name):
    raw = env.get(name, 'false').strip().lower()
    if raw in ('1', 'true', 'yes', 'on'):
        return True
    if raw in ('0', 'false', 'no', 'off', ''):
        return False
    raise ConfigError(f"{name} is not a boolean: {raw!r}")


def configure_logging(level="INFO"):
    """Sends all process logs to stderr with one timestamped format."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
