import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False

logger = logging.getLogger("sqlalchemy_querydemo")


def configure_logging(verbose=False):
    """
    Attach a single stderr handler to the package logger.

    Output goes to stderr so it does not interleave with the query results
    printed on stdout.
    """
    global _initialized
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if _initialized:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    logger.addHandler(handler)
    _initialized = True
    return logger
