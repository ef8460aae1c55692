"""Exception types raised while loading and resolving CUE metadata"""


class Cue2VorbisError(Exception):
    """Base class for every error reported to the user"""


class UsageError(Cue2VorbisError):
    """Invalid command-line input (bad track number, empty disc, ...)"""


class CueLoadError(Cue2VorbisError):
    """The CUE sheet could not be turned into a Disc"""


class CueFileNotFoundError(CueLoadError):
    """The CUE file could not be opened"""

    def __init__(self, path):
        super().__init__(f"Cannot open CUE file: '{path}'")
        self.path = path


class CueParseError(CueLoadError):
    """The CUE file content could not be parsed"""

    def __init__(self, reason=None, line_number=None):
        message = "Cannot parse CUE file."
        if reason:
            where = f" (line {line_number})" if line_number else ""
            message = f"{message} {reason}{where}"
        super().__init__(message)
        self.reason = reason
        self.line_number = line_number


class TrackLookupError(Cue2VorbisError):
    """A track could not be looked up in a loaded Disc"""
