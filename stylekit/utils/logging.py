"""Logger factory shared by the package modules."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str, verbose: bool = False) -> logging.Logger:
    """
    Return a named logger with a single stream handler attached.

    Parameters
    ----------
    name: str
        Logger name, usually ``f"{__name__}.{ClassName}"``.
    verbose: bool, optional
        If True, log at DEBUG level. Otherwise a new logger starts at WARNING and an
        existing one keeps its level.

    Returns
    -------
    logging.Logger
        The configured logger. Calling again with the same name reuses the handler.
    """
    logger = logging.getLogger(name)
    if not any(getattr(handler, "_stylekit", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._stylekit = True
        logger.addHandler(handler)
    if verbose:
        logger.setLevel(logging.DEBUG)
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)
    return logger
