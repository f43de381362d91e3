import logging
import logging.handlers
from typing import Optional

_LOGGER_NAME = "fractol"

def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)

def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    ))
    logger.addHandler(handler)

def configure_logging(
    *,
    level: int = logging.INFO,
    console: bool = True,
    log_file: Optional[str] = None,
    rotate_bytes: int = 1024 * 1024,
    rotate_count: int = 3,
) -> logging.Logger:
    """Reset the viewer's logger to a console handler and an optional rotating file."""
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    if console:
        _attach(logger, logging.StreamHandler(), level)
    if log_file:
        _attach(logger, logging.handlers.RotatingFileHandler(
            log_file, maxBytes=rotate_bytes, backupCount=rotate_count, encoding="utf-8"
        ), level)
    return logger
