"""Shared fixtures for cue2vorbis tests"""
import pytest


SAMPLE_CUE = """REM GENRE Rock
REM DATE 2020
REM DISCID 8A0B2C0D
REM COMMENT "ExactAudioCopy v1.6"
REM REPLAYGAIN_ALBUM_GAIN -6.20 dB
REM REPLAYGAIN_ALBUM_PEAK 0.988
CATALOG 0123456789012
PERFORMER "Band Y"
TITLE "Album X"
GENRE "Rock"
UPC_EAN 0123456789012
FILE "album.flac" WAVE
  TRACK 01 AUDIO
    TITLE "Song A"
    ISRC USABC2000001
    REM REPLAYGAIN_TRACK_GAIN -5.10 dB
    REM REPLAYGAIN_TRACK_PEAK 0.950
    INDEX 01 00:00:00
  TRACK 02 AUDIO
    TITLE "Song B"
    PERFORMER "Guest Z"
    SONGWRITER "Writer W"
    REM DATE 2021
    INDEX 00 03:58:10
    INDEX 01 04:00:00
"""

SAMPLE_TRACK_1 = [
    "TRACKNUMBER=1",
    "TRACKTOTAL=2",
    "TITLE=Song A",
    "ALBUM=Album X",
    "ALBUMARTIST=Band Y",
    "GENRE=Rock",
    "DATE=2020",
    "REPLAYGAIN_ALBUM_GAIN=-6.20 dB",
    "REPLAYGAIN_ALBUM_PEAK=0.988",
    "REPLAYGAIN_TRACK_GAIN=-5.10 dB",
    "REPLAYGAIN_TRACK_PEAK=0.950",
    "ISRC=USABC2000001",
    "EAN/UPN=0123456789012",
]

SAMPLE_TRACK_2 = [
    "TRACKNUMBER=2",
    "TRACKTOTAL=2",
    "TITLE=Song B",
    "ALBUM=Album X",
    "ARTIST=Guest Z",
    "ALBUMARTIST=Band Y",
    "LYRICIST=Writer W",
    "GENRE=Rock",
    "DATE=2021",
    "REPLAYGAIN_ALBUM_GAIN=-6.20 dB",
    "REPLAYGAIN_ALBUM_PEAK=0.988",
    "EAN/UPN=0123456789012",
]


@pytest.fixture
def write_cue(tmp_path):
    """Return a function writing CUE content to a temporary file"""

    def _write(content=SAMPLE_CUE, name="album.cue", encoding="utf-8"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode(encoding))
        return path

    return _write


@pytest.fixture
def sample_cue(write_cue):
    return write_cue()


EAC_CUE = """REM DATE 1985
PERFORMER "Orchestra"
TITLE "Suites"
FILE "CDImage.wav" WAVE
  TRACK 01 AUDIO
    TITLE "Prelude"
    index 01 00:00:00
  TRACK 02 AUDIO
    TITLE "Allemande"
    COMPOSER "Bach"
    PREGAP 00:02:00
    index 01 04:10:33
  TRACK 03 AUDIO
    TITLE "Courante"
    INDEX 01 08:01:12
    COMPOSER "J. S. Bach"
    REM DATE 2021
"""
