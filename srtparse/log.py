"""Logging setup for srtparse.

The library itself only logs through ``logging.getLogger(__name__)``; handlers
are attached here, by the CLI or by an application that wants parser output.
"""

import logging
import sys

ROOT_LOGGER = 'srtparse'
LOG_FORMAT = '%(asctime)s %(levelname)-8s %(name)s - %(message)s'



class _ConsoleHandler(logging.StreamHandler):
    """Console handler installed by setup_logging, replaced on each call."""


class _FileHandler(logging.FileHandler):
    """File handler installed by setup_logging, replaced on each call."""


def setup_logging(verbose=False, log_file=None):
    """Send 'srtparse' log records to stderr and, optionally, to a file.

    ``verbose`` switches from warnings only to per-subtitle DEBUG output. Calling
    this again swaps out the handlers it installed before, so the console handler
    always writes to the current ``sys.stderr``.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, (_ConsoleHandler, _FileHandler)):
            logger.removeHandler(handler)
            handler.close()

    fmt = logging.Formatter(LOG_FORMAT)
    console = _ConsoleHandler(sys.stderr)
    console.setFormatter(fmt)
    logger.addHandler(console)
    if log_file:
        fh = _FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


def get_logger(name):
    """Return a logger under the 'srtparse' namespace."""
    if name == ROOT_LOGGER or name.startswith(f'{ROOT_LOGGER}.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{ROOT_LOGGER}.{name}')
