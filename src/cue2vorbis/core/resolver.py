"""
Tag resolution: one track of a Disc -> ordered Vorbis comment pairs

Tag names follow https://wiki.hydrogenaud.io/index.php?title=Tag_Mapping
"""
from .disc import Disc, FieldKind, RemKind, TagLine
from .errors import TrackLookupError


# Tags taken from the track when set there, otherwise from the disc:
# (key, track accessor, disc accessor, field). Row order is the output order.
FALLBACK_TAGS = (
    ("LYRICIST", Disc.track_field, Disc.disc_field, FieldKind.SONGWRITER),
    ("COMPOSER", Disc.track_field, Disc.disc_field, FieldKind.COMPOSER),
    ("ARRANGER", Disc.track_field, Disc.disc_field, FieldKind.ARRANGER),
    ("COMMENT", Disc.track_field, Disc.disc_field, FieldKind.MESSAGE),
    ("GENRE", Disc.track_field, Disc.disc_field, FieldKind.GENRE),
    ("DATE", Disc.track_rem, Disc.disc_rem, RemKind.DATE),
    ("REPLAYGAIN_ALBUM_GAIN", Disc.track_rem, Disc.disc_rem, RemKind.REPLAYGAIN_ALBUM_GAIN),
    ("REPLAYGAIN_ALBUM_PEAK", Disc.track_rem, Disc.disc_rem, RemKind.REPLAYGAIN_ALBUM_PEAK),
    ("REPLAYGAIN_TRACK_GAIN", Disc.track_rem, Disc.disc_rem, RemKind.REPLAYGAIN_TRACK_GAIN),
    ("REPLAYGAIN_TRACK_PEAK", Disc.track_rem, Disc.disc_rem, RemKind.REPLAYGAIN_TRACK_PEAK),
)


def _first_present(*values):
    for value in values:
        if value is not None:
            return value
    return None


def resolve(disc, track_index, track_count):
    """
    Resolve the Vorbis tags of one track.

    Title and artist tags are scope-exclusive: TITLE and ARTIST come from the
    track only, ALBUM and ALBUMARTIST from the disc only. Tags in
    FALLBACK_TAGS prefer the track value and fall back to the disc. Tags
    without a value are left out.

    Args:
        disc: Loaded Disc, never modified
        track_index: 1-based track index
        track_count: Number of tracks on the disc

    Returns:
        List of TagLine in output order

    Raises:
        ValueError: If track_count does not match the disc
        TrackLookupError: If track_index is outside [1, track_count]
    """
    if track_count != disc.track_count():
        raise ValueError(
            f"track_count {track_count} does not match disc track count {disc.track_count()}"
        )
    if not 1 <= track_index <= track_count:
        raise TrackLookupError(f"Cannot get track #{track_index} from CD.")

    tags = [
        TagLine("TRACKNUMBER", str(track_index)),
        TagLine("TRACKTOTAL", str(track_count)),
    ]

    def add(key, value):
        if value is not None:
            tags.append(TagLine(key, value))

    add("TITLE", disc.track_field(track_index, FieldKind.TITLE))
    add("ALBUM", disc.disc_field(FieldKind.TITLE))
    add("ARTIST", disc.track_field(track_index, FieldKind.PERFORMER))
    add("ALBUMARTIST", disc.disc_field(FieldKind.PERFORMER))

    for key, track_lookup, disc_lookup, kind in FALLBACK_TAGS:
        value = track_lookup(disc, track_index, kind)
        if value is None:
            value = disc_lookup(disc, kind)
        add(key, value)

    add("ISRC", _first_present(
        disc.track_field(track_index, FieldKind.UPC_ISRC),
        disc.track_isrc(track_index),
    ))
    add("EAN/UPN", disc.disc_field(FieldKind.UPC_ISRC))

    return tags


def resolve_all(disc):
    """
    Resolve every track of the disc, lazily and in ascending order.

    Yields:
        Tuples of (track_index, list of TagLine)
    """
    track_count = disc.track_count()
    for track_index in range(1, track_count + 1):
        yield track_index, resolve(disc, track_index, track_count)
