import sys
from collections.abc import Generator

import pytest
from loguru import logger

from songbook.config import reset_config
from songbook.ids import IdAllocator


@pytest.fixture
def allocator() -> IdAllocator:
    return IdAllocator()


@pytest.fixture
def log_messages() -> Generator[list[str], None, None]:
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="DEBUG"
    )
    logger.enable("songbook")
    yield messages
    logger.disable("songbook")
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    yield
    # The CLI replaces loguru's sinks with one bound to the captured stdout.
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("songbook")


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    monkeypatch.setenv("SONGBOOK_LOG_COLOR", "0")
    monkeypatch.delenv("SONGBOOK_LOG_LEVEL", raising=False)
    reset_config()
    yield
    reset_config()
