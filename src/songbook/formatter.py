"""Plain-text rendering of a :class:`~songbook.models.Song`.

One song renders to a single line::

    [#3] Sia - Chandelier (240s) **** [tags: pop, live]

The rating is drawn as that many ``*`` characters. The ``[tags: ...]``
suffix only appears when the song has at least one tag; tags keep their
insertion order.

Usage::

    from songbook.formatter import SongFormatter
    formatter = SongFormatter()
    print(formatter.render(song))
"""

from collections.abc import Iterable

from .models import Song
from .text import join

RATING_MARK = "*"


class SongFormatter:
    """Render songs for display."""

    def render(self, song: Song) -> str:
        """Return the one-line display text for *song* (no trailing newline)."""
        text = (
            f"[#{song.id}] {song.artist} - {song.title} "
            f"({song.duration_seconds}s) {RATING_MARK * song.rating}"
        )
        if song.tags:
            text += f" [tags: {join(song.tags)}]"
        return text

    def render_all(self, songs: Iterable[Song]) -> str:
        """Render each song on its own line, in the order given."""
        return join((self.render(song) for song in songs), "\n")


def format_song(song: Song) -> str:
    return SongFormatter().render(song)
