#!/usr/bin/env python3
"""
cue2vorbis - Main Entry Point

Print CUE file tags in Vorbis naming.
Features:
- CD-TEXT and REM metadata for one track or for every track of the sheet
- Track values take precedence over disc values where both apply
- Automatic detection of non-UTF-8 CUE files
"""
import os
import sys

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from cue2vorbis.cli import main


if __name__ == "__main__":
    sys.exit(main())
