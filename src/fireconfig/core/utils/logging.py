"""Logging helpers (no env reads)."""
import logging

ROOT_LOGGER_NAME = "fireconfig"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = ROOT_LOGGER_NAME, level: int | None = None) -> logging.Logger:
    """Return a logger in the ``fireconfig`` namespace.

    Only the namespace root carries a handler; child loggers propagate to it,
    so raising the root level (e.g. ``--verbose``) affects the whole package.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
