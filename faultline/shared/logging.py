"""
Logging configuration for the application.

Every request writes one INFO access line ("GET /path") from the dispatch
wrapper, and every failure writes the error line (plus a hint for
non-debuggable errors) from the error logger. Both go through stdlib
logging with a single format on stdout.

Never logs request bodies or error metadata.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ACCESS_LOGGER = "faultline.application.responding.dispatch_request"

# Servers that write their own access line; ours replaces it
SERVER_ACCESS_LOGGERS = ("uvicorn.access", "hypercorn.access", "gunicorn.access")


def configure_logging(level: str = "INFO", access_log: bool = True) -> None:
    """Configure logging for the dispatch access line and error lines.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        access_log: Emit the per-request access line. When False the
            dispatch logger only reports failures to build a response.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger(ACCESS_LOGGER).setLevel(
        logging.NOTSET if access_log else logging.WARNING
    )
    for name in SERVER_ACCESS_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
