"""
Runs the relay in the role named by RELAY_ROLE.

    generator   append records to the shared log
    echo        serve the shared log over HTTP
    all         both in one process: the generator in a background
                thread, the echo server in the foreground
"""

import _thread
import logging
import sys
import threading

from relay.config import Config, configure_logging
from relay.echo import run_server
from relay.errors import ConfigError
from relay.generator import run_generator

logger = logging.getLogger("relay")


def run_all(config):
    """Generator and echo server in one process; a generator failure stops both."""
    status = {'generator': 0}

    def generate():
        status['generator'] = run_generator(config)
        if status['generator'] != 0:
            # Stops the server loop in the main thread.
            _thread.interrupt_main()

    thread = threading.Thread(target=generate, name="generator", daemon=True)
    thread.start()
    run_server(config)
    return status['generator']


ROLES = {
    'generator': run_generator,
    'echo': run_server,
    'all': run_all,
}


def main():
    try:
        config = Config.from_env()
    except ConfigError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        return 2
    configure_logging(config.log_level)
    logger.info(f"Starting relay in role '{config.role}'")
    return ROLES[config.role](config)


if __name__ == "__main__":
    sys.exit(main())
