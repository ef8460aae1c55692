"""Core functionality modules"""

from .disc import Disc, Track, FieldKind, RemKind, TagLine
from .errors import (
    Cue2VorbisError,
    UsageError,
    CueLoadError,
    CueFileNotFoundError,
    CueParseError,
    TrackLookupError,
)
from .loader import load_disc
from .resolver import resolve, resolve_all
from .emitter import format_tag_line, write_block

__all__ = [
    "Disc",
    "Track",
    "FieldKind",
    "RemKind",
    "TagLine",
    "Cue2VorbisError",
    "UsageError",
    "CueLoadError",
    "CueFileNotFoundError",
    "CueParseError",
    "TrackLookupError",
    "load_disc",
    "resolve",
    "resolve_all",
    "format_tag_line",
    "write_block",
]
