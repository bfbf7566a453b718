import pytest

from songbook.config import get_config, reset_config
from songbook.exceptions import InvalidConfigError


def test_defaults(monkeypatch):
    monkeypatch.delenv("SONGBOOK_LOG_COLOR")
    reset_config()
    config = get_config()
    assert config.log_level == "WARNING"
    assert config.log_color is True


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("SONGBOOK_LOG_LEVEL", "debug")
    assert get_config().log_level == "DEBUG"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("SONGBOOK_LOG_LEVEL", "LOUD")
    with pytest.raises(InvalidConfigError) as exc_info:
        get_config()
    assert exc_info.value.variable_name == "SONGBOOK_LOG_LEVEL"


@pytest.mark.parametrize("value", ["0", "false", "No", " off "])
def test_log_color_disabled(monkeypatch, value):
    monkeypatch.setenv("SONGBOOK_LOG_COLOR", value)
    assert get_config().log_color is False


def test_config_is_cached():
    assert get_config() is get_config()
