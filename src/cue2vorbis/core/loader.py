"""CUE sheet loading: file -> Disc"""
import os
import re

import cueparser

from ..utils.encoding import decode_cue_bytes
from .disc import Disc, FieldKind, RemKind, Track
from .errors import CueFileNotFoundError, CueParseError


_COMMAND_PATTERN = re.compile(r'^\s*(\S+)(?:\s+(.*?))?\s*$')
_TRACK_PATTERN = re.compile(r'^(\d+)\s+(\S+)$')
_REM_PATTERN = re.compile(r'^(\S+)(?:\s+(.*))?$')
_QUOTED_PATTERN = re.compile(r'^"([^"]*)"')
_INDEX_PATTERN = re.compile(r'^(\d{1,2})\s+(\S+)$')
_TIME_PATTERN = re.compile(r'^(\d{1,3}):([0-5]\d):(\d{2})$')


def _load_cue_lines(text):
    """
    Split CUE text into lines using cueparser library.

    Only the line list (`cue_sheet.data`) is used; the metadata commands are
    read by _extract_disc.

    Args:
        text: Decoded CUE file content

    Returns:
        CueSheet object holding the lines
    """
    cue_sheet = cueparser.CueSheet()
    cue_sheet.setOutputFormat('', '')
    cue_sheet.setData(text)
    return cue_sheet


def _parse_value(raw, line_number):
    """Strip quotes from a command argument; bare values run to end of line"""
    if raw.startswith('"'):
        match = _QUOTED_PATTERN.match(raw)
        if not match:
            raise CueParseError("Unterminated quoted string", line_number)
        return match.group(1)
    return raw


def _is_msf(value):
    """Check a mm:ss:ff timestamp (75 frames per second)"""
    match = _TIME_PATTERN.match(value)
    return bool(match) and int(match.group(3)) < 75


class _Scope:
    """Fields collected for the disc or for one track while scanning"""

    def __init__(self):
        self.text = {}
        self.rem = {}
        self.isrc = None


def _extract_disc(cue_sheet):
    """
    Walk the CUE lines and collect CD-TEXT, REM and ISRC values per scope.

    Commands before the first TRACK belong to the disc, later ones to the
    most recent TRACK. Commands that carry no metadata are skipped.

    Args:
        cue_sheet: CueSheet object holding the lines

    Returns:
        Disc built from the collected fields
    """
    disc_scope = _Scope()
    track_scopes = []
    current = disc_scope

    for line_number, line in enumerate(cue_sheet.data, 1):
        match = _COMMAND_PATTERN.match(line)
        if not match:
            continue
        command = match.group(1).upper()
        args = match.group(2) or ""

        if command == "TRACK":
            track_match = _TRACK_PATTERN.match(args)
            if not track_match or int(track_match.group(1)) == 0:
                raise CueParseError(f"Invalid TRACK command: '{args}'", line_number)
            current = _Scope()
            track_scopes.append(current)
            continue

        if command == "INDEX":
            if current is disc_scope:
                raise CueParseError("INDEX outside of a TRACK", line_number)
            index_match = _INDEX_PATTERN.match(args)
            if not index_match or not _is_msf(index_match.group(2)):
                raise CueParseError(f"Invalid INDEX command: '{args}'", line_number)
            continue

        if command in ("PREGAP", "POSTGAP"):
            if not _is_msf(args):
                raise CueParseError(f"Invalid {command} command: '{args}'", line_number)
            continue

        if command == "REM":
            rem_match = _REM_PATTERN.match(args)
            if not rem_match:
                continue
            kind = RemKind.from_keyword(rem_match.group(1))
            if kind is None:
                continue
            if not rem_match.group(2):
                raise CueParseError(f"REM {kind.value} has no value", line_number)
            current.rem[kind] = _parse_value(rem_match.group(2), line_number)
            continue

        if command == "ISRC":
            if current is disc_scope:
                raise CueParseError("ISRC outside of a TRACK", line_number)
            if not args:
                raise CueParseError("ISRC has no value", line_number)
            current.isrc = _parse_value(args, line_number)
            continue

        kind = FieldKind.from_command(command)
        if kind is None:
            continue
        if not args:
            raise CueParseError(f"{command} has no value", line_number)
        current.text[kind] = _parse_value(args, line_number)

    tracks = [
        Track(index, scope.text, scope.rem, scope.isrc)
        for index, scope in enumerate(track_scopes, 1)
    ]
    return Disc(tracks, disc_scope.text, disc_scope.rem)


def load_disc(cue_path, encoding=None, log_func=None):
    """
    Load a CUE file into a Disc.

    Args:
        cue_path: Path to the CUE file
        encoding: Force this text encoding instead of detecting it
        log_func: Optional function to call for logging messages

    Returns:
        Disc with every track of the sheet

    Raises:
        CueFileNotFoundError: If the file cannot be opened or read
        CueParseError: If the content cannot be decoded or parsed
    """
    if log_func is None:
        log_func = lambda msg: None

    log_func(f"📄 Loading CUE file: {os.path.basename(cue_path)}")
    try:
        with open(cue_path, 'rb') as f:
            raw_data = f.read()
    except OSError as e:
        raise CueFileNotFoundError(cue_path) from e

    try:
        text = decode_cue_bytes(raw_data, log_func, encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise CueParseError(f"Cannot decode text: {e}") from e

    cue_sheet = _load_cue_lines(text)
    disc = _extract_disc(cue_sheet)
    log_func(f"🔗 Found {disc.track_count()} track(s) in CUE")
    return disc
