"""
cue2vorbis - Print CUE sheet metadata as Vorbis comments

This package provides functionality to:
- Load CD-TEXT and REM metadata from a CUE sheet, whatever its encoding
- Resolve per-track Vorbis tags with track-over-disc precedence
- Print the tags as KEY=value lines, one block per track
"""

__version__ = "1.0.0"
__author__ = "cue2vorbis Project"
