"""
Logging Setup

One stdout format for the Flask application logger and for the loggers of
the import pipeline packages, plus a log line per API request and response.
"""

import logging
import sys
from flask import request, has_request_context

# Loggers of the core packages, which log through logging.getLogger(__name__)
PIPELINE_LOGGERS = ('models', 'services', 'analyzers')
HANDLER_NAME = 'fm_role_scout'
LOG_FORMAT = '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'


def setup_logger(app):
    """
    Configure logging for the Flask application.

    Debug mode logs at DEBUG (skipped export rows included), otherwise
    INFO (catalogue loads, imports and requests).

    Args:
        app: Flask application instance

    Returns:
        The same application
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    level = logging.DEBUG if app.debug else logging.INFO

    _attach(app.logger, handler, level)
    # Prevent duplicate logs from propagating
    app.logger.propagate = False

    for name in PIPELINE_LOGGERS:
        _attach(logging.getLogger(name), handler, level)

    @app.before_request
    def log_api_request():
        if has_request_context():
            upload = f" ({request.content_length} bytes)" if request.content_length else ""
            app.logger.info(f"API {request.method} {request.path}{upload}")

    @app.after_request
    def log_api_response(response):
        if has_request_context():
            app.logger.info(f"API {request.method} {request.path} -> {response.status_code}")
        return response

    app.logger.debug(f"Logging at {logging.getLevelName(level)} for {', '.join(PIPELINE_LOGGERS)}")

    return app


def _attach(logger, handler, level):
    # One named handler per logger across repeated create_app calls
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        logger.addHandler(handler)
    logger.setLevel(level)
