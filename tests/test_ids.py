import threading

from songbook.ids import IdAllocator, get_allocator


def test_allocator_starts_at_one():
    assert IdAllocator().allocate() == 1


def test_allocator_is_monotonic():
    allocator = IdAllocator()
    ids = [allocator.allocate() for _ in range(5)]
    assert ids == [1, 2, 3, 4, 5]


def test_peek_does_not_consume():
    allocator = IdAllocator()
    assert allocator.peek() == 1
    assert allocator.peek() == 1
    assert allocator.allocate() == 1
    assert allocator.peek() == 2


def test_custom_start():
    assert IdAllocator(start=10).allocate() == 10


def test_get_allocator_returns_shared_instance():
    assert get_allocator() is get_allocator()


def test_concurrent_allocation_gives_unique_ids():
    allocator = IdAllocator()
    seen: list[int] = []
    lock = threading.Lock()

    def worker():
        for _ in range(200):
            song_id = allocator.allocate()
            with lock:
                seen.append(song_id)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(seen) == list(range(1, 1601))
