from collections.abc import Iterable, Iterator

from loguru import logger

from .formatter import SongFormatter
from .ids import IdAllocator, get_allocator
from .models import Song, SongResult, create_song


class Catalog:
    """An in-memory collection of valid songs, kept in insertion order."""

    def __init__(self, allocator: IdAllocator | None = None) -> None:
        self._allocator = allocator or get_allocator()
        self._songs: dict[int, Song] = {}

    def add(
        self,
        title: str,
        artist: str,
        duration_seconds: int,
        rating: int,
        tags: Iterable[str] = (),
    ) -> SongResult:
        """Create a song and store it if it is valid.

        Rejected tags are logged by :meth:`Song.add_tag` and skipped; they do
        not stop the song from being added.
        """
        result = create_song(
            title, artist, duration_seconds, rating, allocator=self._allocator
        )
        if not result.valid:
            return result

        song = result.song
        for tag in tags:
            song.add_tag(tag)
        self._songs[song.id] = song
        logger.debug("catalog size={}", len(self._songs))
        return result

    def get(self, song_id: int) -> Song | None:
        return self._songs.get(song_id)

    def remove(self, song_id: int) -> bool:
        if self._songs.pop(song_id, None) is None:
            logger.warning("No song #{} in catalog", song_id)
            return False
        return True

    def search(self, keyword: str) -> list[Song]:
        """Songs matching *keyword*, in display order."""
        return sorted(song for song in self._songs.values() if song.matches_keyword(keyword))

    def sorted(self) -> list[Song]:
        return sorted(self._songs.values())

    def render(self) -> str:
        return SongFormatter().render_all(self.sorted())

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(self._songs.values())
