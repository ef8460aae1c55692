"""In-memory representation of a parsed CUE sheet"""
from collections import namedtuple
from enum import Enum
from types import MappingProxyType

from .errors import TrackLookupError


class FieldKind(Enum):
    """CD-TEXT fields, valued with the CUE command that sets them"""

    TITLE = "TITLE"
    PERFORMER = "PERFORMER"
    SONGWRITER = "SONGWRITER"
    COMPOSER = "COMPOSER"
    ARRANGER = "ARRANGER"
    MESSAGE = "MESSAGE"
    GENRE = "GENRE"
    UPC_ISRC = "UPC_EAN"

    @classmethod
    def from_command(cls, command):
        """Return the field set by a CUE command keyword, or None"""
        try:
            return cls(command.upper())
        except ValueError:
            return None


class RemKind(Enum):
    """REM comment fields, valued with their REM keyword"""

    DATE = "DATE"
    REPLAYGAIN_ALBUM_GAIN = "REPLAYGAIN_ALBUM_GAIN"
    REPLAYGAIN_ALBUM_PEAK = "REPLAYGAIN_ALBUM_PEAK"
    REPLAYGAIN_TRACK_GAIN = "REPLAYGAIN_TRACK_GAIN"
    REPLAYGAIN_TRACK_PEAK = "REPLAYGAIN_TRACK_PEAK"

    @classmethod
    def from_keyword(cls, keyword):
        """Return the REM field named by keyword, or None"""
        try:
            return cls(keyword.upper())
        except ValueError:
            return None


TagLine = namedtuple("TagLine", ["key", "value"])


class Track:
    """
    One track of a Disc.

    Field maps hold present values only; a missing key means the field is
    absent. An empty string is a present value.
    """

    def __init__(self, number, track_text=None, track_rem=None, isrc=None):
        self._number = number
        self._text = MappingProxyType(dict(track_text or {}))
        self._rem = MappingProxyType(dict(track_rem or {}))
        self._isrc = isrc

    @property
    def number(self):
        return self._number

    @property
    def track_text(self):
        return self._text

    @property
    def track_rem(self):
        return self._rem

    @property
    def isrc(self):
        return self._isrc

    def __repr__(self):
        return f"Track(number={self._number!r}, text={dict(self._text)!r}, rem={dict(self._rem)!r}, isrc={self._isrc!r})"


class Disc:
    """
    Read-only view of a CUE sheet: disc-level CD-TEXT and REM fields plus
    the tracks, addressed by 1-based index.
    """

    def __init__(self, tracks=(), disc_text=None, disc_rem=None):
        self._tracks = tuple(tracks)
        self._text = MappingProxyType(dict(disc_text or {}))
        self._rem = MappingProxyType(dict(disc_rem or {}))

    @property
    def tracks(self):
        return self._tracks

    @property
    def text(self):
        """Disc-level CD-TEXT fields"""
        return self._text

    @property
    def rem(self):
        """Disc-level REM fields"""
        return self._rem

    def track_count(self):
        return len(self._tracks)

    def track(self, index):
        """
        Get a track by its 1-based index.

        Raises:
            TrackLookupError: If index is outside [1, track_count]
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TrackLookupError(f"Cannot get track from CD: invalid index {index!r}.")
        if not 1 <= index <= len(self._tracks):
            raise TrackLookupError(f"Cannot get track #{index} from CD.")
        return self._tracks[index - 1]

    def disc_field(self, kind):
        return self._text.get(kind)

    def disc_rem(self, kind):
        return self._rem.get(kind)

    def track_field(self, index, kind):
        return self.track(index).track_text.get(kind)

    def track_rem(self, index, kind):
        return self.track(index).track_rem.get(kind)

    def track_isrc(self, index):
        return self.track(index).isrc

    def __repr__(self):
        return f"Disc(track_count={len(self._tracks)}, text={dict(self._text)!r}, rem={dict(self._rem)!r})"
