import threading

from loguru import logger


class IdAllocator:
    """Hands out song ids: 1, 2, 3, ... never reused, never reset."""

    def __init__(self, start: int = 1) -> None:
        self._next_id = start
        self._lock = threading.Lock()

    def allocate(self) -> int:
        with self._lock:
            song_id = self._next_id
            self._next_id += 1
        logger.debug("allocated song id={}", song_id)
        return song_id

    def peek(self) -> int:
        """Return the id the next ``allocate()`` will hand out."""
        with self._lock:
            return self._next_id


_allocator: IdAllocator | None = None
_allocator_lock = threading.Lock()


def get_allocator() -> IdAllocator:
    global _allocator  # noqa: PLW0603
    with _allocator_lock:
        if not _allocator:
            _allocator = IdAllocator()
        return _allocator
