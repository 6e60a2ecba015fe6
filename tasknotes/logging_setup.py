import logging
import sys


def setup_logging(level="INFO"):
    """Attach one stderr handler to the ``tasknotes`` logger.

    Safe to call more than once: previously installed handlers are replaced.
    """
    logger = logging.getLogger("tasknotes")
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
    return logger
