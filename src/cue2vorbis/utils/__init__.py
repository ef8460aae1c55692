"""Utility functions and helpers"""

from .helpers import safe_print, make_logger
from .encoding import decode_cue_bytes

__all__ = ["safe_print", "make_logger", "decode_cue_bytes"]
