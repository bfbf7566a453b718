import sys

import click

from .catalog import Catalog
from .exceptions import InvalidConfigError, SongSpecError
from .logsetup import setup_logger
from .text import trim

SPEC_SEPARATOR = "|"
TAG_SEPARATOR = ","


def _parse_song_spec(spec: str) -> tuple[str, str, int, int, list[str]]:
    """Split ``TITLE|ARTIST|SECONDS|RATING[|tag1,tag2]`` into its parts.

    Only the shape is checked here; the song rules are applied by the catalog.
    """
    parts = spec.split(SPEC_SEPARATOR)
    if len(parts) not in (4, 5):
        raise SongSpecError(spec, f"expected 4 or 5 '{SPEC_SEPARATOR}'-separated fields")

    title, artist, seconds, rating = parts[:4]
    try:
        duration_seconds = int(trim(seconds))
    except ValueError as exc:
        raise SongSpecError(spec, f"duration {seconds!r} is not a whole number") from exc
    try:
        rating_value = int(trim(rating))
    except ValueError as exc:
        raise SongSpecError(spec, f"rating {rating!r} is not a whole number") from exc

    tags = parts[4].split(TAG_SEPARATOR) if len(parts) == 5 else []
    return title, artist, duration_seconds, rating_value, tags


@click.command()
@click.option("-s", "--song", "songs", multiple=True, metavar="SPEC",
              help="Song as TITLE|ARTIST|SECONDS|RATING[|tag1,tag2]. Repeatable.")
@click.option("-k", "--search", "keyword", default=None, metavar="KEYWORD",
              help="Only list songs whose title, artist or tags contain KEYWORD.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log every accepted change, not just rejected input.")
def main(songs: tuple[str, ...], keyword: str | None, verbose: bool) -> None:
    """List songs sorted by title, then artist.

    \b
    Example:
      songbook -s "Chandelier|Sia|240|4|pop,live" -s "Hurt|Johnny Cash|218|5"
    """
    try:
        setup_logger("DEBUG" if verbose else None)
    except InvalidConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    # --- Parse ---
    try:
        parsed = [_parse_song_spec(spec) for spec in songs]
    except SongSpecError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    # --- Build catalog ---
    catalog = Catalog()
    for title, artist, duration_seconds, rating, tags in parsed:
        catalog.add(title, artist, duration_seconds, rating, tags)

    if songs and len(catalog) == 0:
        click.echo("Error: none of the given songs were valid", err=True)
        sys.exit(1)

    # --- Output ---
    if keyword is not None:
        matches = catalog.search(keyword)
        if not matches:
            click.echo(f"No songs match {keyword!r}.")
            return
        for song in matches:
            click.echo(str(song))
        return

    for song in catalog.sorted():
        click.echo(str(song))
