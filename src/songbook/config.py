import os

from loguru import logger

from .exceptions import InvalidConfigError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
_FALSE_VALUES = ("0", "false", "no", "off")


class Config:
    def __init__(self) -> None:
        self._log_level: str = os.environ.get("SONGBOOK_LOG_LEVEL", "WARNING").upper()
        if self._log_level not in LOG_LEVELS:
            raise InvalidConfigError("SONGBOOK_LOG_LEVEL", self._log_level)
        logger.debug("log_level={}", self._log_level)

        color = os.environ.get("SONGBOOK_LOG_COLOR", "1")
        self._log_color: bool = color.strip().lower() not in _FALSE_VALUES
        logger.debug("log_color={}", self._log_color)

    @property
    def log_level(self) -> str:
        return self._log_level

    @property
    def log_color(self) -> bool:
        return self._log_color


_config: Config | None = None


def get_config() -> Config:
    global _config  # noqa: PLW0603
    if not _config:
        _config = Config()
    return _config


def reset_config() -> None:
    global _config  # noqa: PLW0603
    _config = None
