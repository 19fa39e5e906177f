"""
Logging setup for the Proprials service.

One line per record: timestamp, level, logger name, message.
Ledger code logs ids and share counts only; balances and deposit
amounts never reach the log.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are only useful when debugging them.
NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Install the root handler and return the ``proprials`` logger.

    Unknown level names fall back to INFO. Calling this again replaces
    the previous handler, so the app factory can run more than once in
    one process.
    """
    resolved = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))

    app_logger = logging.getLogger("proprials")
    app_logger.setLevel(resolved)
    return app_logger
