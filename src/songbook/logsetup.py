import sys

from loguru import logger

from .config import get_config


def setup_logger(level: str | None = None) -> int:
    """Send songbook diagnostics to stdout; return the loguru handler id.

    *level* overrides the configured ``SONGBOOK_LOG_LEVEL``.
    """
    config = get_config()
    logger.remove()
    logger.enable("songbook")
    return logger.add(
        sys.stdout,
        level=level or config.log_level,
        colorize=config.log_color,
        format="<level>{level: <8}</level> {message}",
    )
