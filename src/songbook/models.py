from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering

from loguru import logger

from .exceptions import (
    DuplicateTagError,
    EmptyFieldError,
    EmptyTagError,
    InvalidDurationError,
    InvalidRatingError,
    TagNotFoundError,
    ValidationError,
)
from .ids import IdAllocator, get_allocator
from .text import fold_case, trim

MIN_RATING = 1
MAX_RATING = 5


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@total_ordering
class Song:
    """A validated song record.

    Use :func:`create_song` to build one. Calling ``Song(...)`` directly runs
    the same rules but raises the :class:`ValidationError` instead of
    returning it. Fields are read-only; change them through the setters and
    tag methods, which only accept values that keep the record valid. ``id``
    never changes after creation.
    """

    def __init__(
        self,
        song_id: int,
        title: str,
        artist: str,
        duration_seconds: int,
        rating: int,
        tags: Iterable[str] = (),
    ) -> None:
        if song_id <= 0:
            raise ValueError(f"song id must be positive, got {song_id}")
        title = trim(title)
        artist = trim(artist)
        error = _first_error(title, artist, duration_seconds, rating)
        if error is not None:
            raise error

        self._id = song_id
        self._title = title
        self._artist = artist
        self._duration_seconds = duration_seconds
        self._rating = rating
        self._tags: list[str] = []  # first-inserted casing kept
        for tag in tags:
            error = self._tag_error(trim(tag))
            if error is not None:
                raise error
            self._tags.append(trim(tag))

    @property
    def id(self) -> int:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def artist(self) -> str:
        return self._artist

    @property
    def duration_seconds(self) -> int:
        return self._duration_seconds

    @property
    def rating(self) -> int:
        return self._rating

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self._tags)

    # --- Setters ---

    def set_title(self, text: str) -> bool:
        title = trim(text)
        if not title:
            return self._reject(EmptyFieldError("title"))
        self._title = title
        logger.debug("song #{} title={!r}", self._id, title)
        return True

    def set_artist(self, text: str) -> bool:
        artist = trim(text)
        if not artist:
            return self._reject(EmptyFieldError("artist"))
        self._artist = artist
        logger.debug("song #{} artist={!r}", self._id, artist)
        return True

    def set_duration(self, seconds: int) -> bool:
        if seconds <= 0:
            return self._reject(InvalidDurationError(seconds))
        self._duration_seconds = seconds
        logger.debug("song #{} duration_seconds={}", self._id, seconds)
        return True

    def set_rating(self, value: int) -> bool:
        if not _rating_in_range(value):
            return self._reject(InvalidRatingError(value))
        self._rating = value
        logger.debug("song #{} rating={}", self._id, value)
        return True

    # --- Tags ---

    def add_tag(self, text: str) -> bool:
        """Append a tag unless it is empty or already present in any casing."""
        tag = trim(text)
        error = self._tag_error(tag)
        if error is not None:
            return self._reject(error)
        self._tags.append(tag)
        logger.debug("song #{} tag added: {!r}", self._id, tag)
        return True

    def remove_tag(self, text: str) -> bool:
        """Remove the first tag equal to *text*, ignoring case."""
        key = fold_case(trim(text))
        for i, existing in enumerate(self._tags):
            if fold_case(existing) == key:
                del self._tags[i]
                logger.debug("song #{} tag removed: {!r}", self._id, existing)
                return True
        return self._reject(TagNotFoundError(trim(text)))

    # --- Search / ordering ---

    def matches_keyword(self, text: str) -> bool:
        """Case-insensitive substring search over title, artist and tags.

        An empty (or all-whitespace) keyword matches nothing.
        """
        key = fold_case(trim(text))
        if not key:
            return False
        if key in fold_case(self._title):
            return True
        if key in fold_case(self._artist):
            return True
        return any(key in fold_case(tag) for tag in self._tags)

    def sort_key(self) -> tuple[str, str, int]:
        return (self._title, self._artist, self._id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Song):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __lt__(self, other: "Song") -> bool:
        if not isinstance(other, Song):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"Song(id={self._id!r}, title={self._title!r}, artist={self._artist!r}, "
            f"duration_seconds={self._duration_seconds!r}, rating={self._rating!r}, "
            f"tags={self._tags!r})"
        )

    def __str__(self) -> str:
        from .formatter import format_song

        return format_song(self)

    def _tag_error(self, tag: str) -> ValidationError | None:
        if not tag:
            return EmptyTagError()
        key = fold_case(tag)
        for existing in self._tags:
            if fold_case(existing) == key:
                return DuplicateTagError(tag, existing)
        return None

    def _reject(self, error: ValidationError) -> bool:
        logger.warning("Song #{}: {}; change ignored", self._id, error)
        return False


@dataclass(frozen=True)
class SongResult:
    """Outcome of :func:`create_song`: either a song or the reason there isn't one.

    Exactly one of ``song`` and ``error`` is set. The field properties mirror
    the song when creation succeeded and report zero values (id 0, empty
    text, no tags) when it failed.
    """

    song: Song | None = None
    error: ValidationError | None = None

    def __post_init__(self) -> None:
        if (self.song is None) == (self.error is None):
            raise ValueError("SongResult needs exactly one of song or error")

    @classmethod
    def ok(cls, song: Song) -> "SongResult":
        return cls(song=song)

    @classmethod
    def failed(cls, error: ValidationError) -> "SongResult":
        return cls(error=error)

    @property
    def valid(self) -> bool:
        return self.song is not None

    @property
    def id(self) -> int:
        return self.song.id if self.song else 0

    @property
    def title(self) -> str:
        return self.song.title if self.song else ""

    @property
    def artist(self) -> str:
        return self.song.artist if self.song else ""

    @property
    def duration_seconds(self) -> int:
        return self.song.duration_seconds if self.song else 0

    @property
    def rating(self) -> int:
        return self.song.rating if self.song else 0

    @property
    def tags(self) -> tuple[str, ...]:
        return self.song.tags if self.song else ()

    def unwrap(self) -> Song:
        """Return the song, or raise the validation error that prevented it."""
        if self.song is None:
            raise self.error
        return self.song


def create_song(
    title: str,
    artist: str,
    duration_seconds: int,
    rating: int,
    *,
    allocator: IdAllocator | None = None,
) -> SongResult:
    """Validate the inputs and build a :class:`Song`.

    Rules are checked in order (title, artist, duration, rating) and the
    first failure is returned in the result. An id is only taken from
    *allocator* (default: the process-wide one) once every rule has passed.
    Never raises for invalid input.
    """
    error = _first_error(trim(title), trim(artist), duration_seconds, rating)
    if error is not None:
        logger.warning("Song rejected: {}", error)
        return SongResult.failed(error)

    allocator = allocator or get_allocator()
    song = Song(allocator.allocate(), title, artist, duration_seconds, rating)
    logger.debug("created song #{}: {!r} by {!r}", song.id, song.title, song.artist)
    return SongResult.ok(song)


def compare(a: Song, b: Song) -> Ordering:
    """Three-way comparison by title, then artist, then id."""
    key_a, key_b = a.sort_key(), b.sort_key()
    if key_a < key_b:
        return Ordering.LESS
    if key_a > key_b:
        return Ordering.GREATER
    return Ordering.EQUAL


def _first_error(
    title: str, artist: str, duration_seconds: int, rating: int
) -> ValidationError | None:
    if not title:
        return EmptyFieldError("title")
    if not artist:
        return EmptyFieldError("artist")
    if duration_seconds <= 0:
        return InvalidDurationError(duration_seconds)
    if not _rating_in_range(rating):
        return InvalidRatingError(rating)
    return None


def _rating_in_range(value: int) -> bool:
    return MIN_RATING <= value <= MAX_RATING
