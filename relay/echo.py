import logging
import os
import sys

from flask import Flask, Response, jsonify

from relay.config import Config, configure_logging
from relay.errors import ConfigError, LogUnavailableError
from relay.sharedlog import SharedLog


def create_app(config):
    """Builds the echo server for the log at config.log_path."""
    app = Flask(__name__)
    app.config['RELAY'] = config
    log = SharedLog(config.log_path)
    log_name = os.path.basename(log.path)

    def handle():
        """Returns the log's committed contents, read fresh for this request."""
        try:
            data = log.read()
        except LogUnavailableError as e:
            app.logger.error(f"Error reading shared log: {e}")
            return jsonify(error="log unavailable", path=log.path), 500
        if data is None:
            return jsonify(error="log not found", path=log.path), 404
        return Response(data, status=200, mimetype='text/plain')

    @app.route('/health')
    def health_check():
        """Liveness check; a missing log is normal before the first record."""
        return jsonify(status="ok", log="present" if log.exists() else "absent"), 200

    # --- Log contents: the root and the file's own name, like a file server ---
    app.add_url_rule('/', 'index', handle)
    if log_name and log_name != 'health':
        app.add_url_rule(f'/{log_name}', 'log_file', handle)

    return app


def run_server(config):
    app = create_app(config)
    app.logger.info(f"Echo serving {config.log_path} on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, threaded=True)
    return 0


def main():
    try:
        config = Config.from_env()
    except ConfigError as e:
        configure_logging()
        logging.getLogger(__name__).error(f"Invalid configuration: {e}")
        return 2
    configure_logging(config.log_level)
    return run_server(config)


if __name__ == "__main__":
    sys.exit(main())
