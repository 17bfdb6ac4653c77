import logging
import random
import sys
import time
from datetime import datetime, timezone

from relay.config import Config, configure_logging
from relay.errors import ConfigError, LogUnavailableError
from relay.sharedlog import SharedLog

logger = logging.getLogger(__name__)

# Same range as the shell's $RANDOM.
RANDOM_MAX = 32767


def random_record():
    return str(random.randint(0, RANDOM_MAX))


def timestamp_record():
    return datetime.now(timezone.utc).isoformat()


RECORD_FACTORIES = {
    'random': random_record,
    'timestamp': timestamp_record,
}


class Generator:
    """Appends one generated record to the shared log every interval."""

    def __init__(self, log, interval=2.0, make_record=random_record, sleep=None):
        self.log = log
        self.interval = interval
        self.make_record = make_record
        self.sleep = sleep or time.sleep
        self.ticks = 0

    @classmethod
    def from_config(cls, config, **kwargs):
        log = SharedLog(config.log_path, fsync=config.fsync)
        return cls(log, config.interval, RECORD_FACTORIES[config.record_format], **kwargs)

    def tick(self):
        """Generate a record, append it, then wait one interval."""
        record = self.make_record()
        self.log.append(record)
        self.ticks += 1
        logger.debug(f"Appended record #{self.ticks} to {self.log.path}: {record}")
        self.sleep(self.interval)
        return record

    def run(self, max_ticks=None):
        """Tick until stopped, or until max_ticks records have been written."""
        logger.info(f"Generator writing to {self.log.path} every {self.interval}s")
        while max_ticks is None or self.ticks < max_ticks:
            self.tick()
        return self.ticks


def run_generator(config):
    """Run the generator; a log that cannot be written is fatal (exit status 1)."""
    generator = Generator.from_config(config)
    try:
        generator.run()
    except LogUnavailableError as e:
        logger.error(f"Cannot append to shared log: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info(f"Generator stopped after {generator.ticks} records")
    return 0


def main():
    try:
        config = Config.from_env()
    except ConfigError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        return 2
    configure_logging(config.log_level)
    return run_generator(config)


if __name__ == "__main__":
    sys.exit(main())
