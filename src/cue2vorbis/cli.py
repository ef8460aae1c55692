"""Command-line driver: CUE file in, Vorbis comments on stdout"""
import argparse
import os
import sys

from .core.emitter import write_block
from .core.errors import Cue2VorbisError, UsageError
from .core.loader import load_disc
from .core.resolver import resolve, resolve_all
from .utils.helpers import make_logger, safe_print


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser exiting with status 1 on bad usage"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_arguments(argv=None):
    """Parse command line arguments and environment variables"""
    # Read defaults from environment variables
    env_encoding = os.environ.get("CUE2VORBIS_ENCODING") or None
    env_verbose = os.environ.get("CUE2VORBIS_VERBOSE", "false").lower() in ("true", "1", "yes")

    parser = _ArgumentParser(
        prog="cue2vorbis",
        description="Print CUE file tags in Vorbis naming.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
When the track number is given, the program will print tags only for the specified track.
When no track number is given, the program will print tags for all tracks from the CUE file.
Each track entry is started with the tag TRACKNUMBER. This may be used as a separator in scripting.

Examples:
  %(prog)s album.cue
  %(prog)s album.cue 3
  %(prog)s --encoding cp1251 album.cue

Environment Variables:
  CUE2VORBIS_ENCODING  - Text encoding of the CUE file (default: detect)
  CUE2VORBIS_VERBOSE   - Print progress messages to stderr (true/false)
"""
    )

    parser.add_argument(
        "cue_file",
        help="CUE sheet to read"
    )
    parser.add_argument(
        "track_number",
        nargs="?",
        default=None,
        help="Print tags for this track only (1-based)"
    )
    parser.add_argument(
        "--encoding",
        default=env_encoding,
        help=f"Text encoding of the CUE file (default: {env_encoding or 'detect'}, env: CUE2VORBIS_ENCODING)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=env_verbose,
        help=f"Print progress messages to stderr (default: {env_verbose}, env: CUE2VORBIS_VERBOSE)"
    )

    return parser.parse_args(argv)


def parse_track_number(value):
    """
    Validate the optional track number argument.

    Returns:
        Positive track number, or None when no track was requested

    Raises:
        UsageError: If the value is not a positive integer
    """
    if value is None:
        return None
    try:
        track_number = int(value)
    except ValueError:
        raise UsageError(f"Wrong track number: '{value}'") from None
    if track_number <= 0:
        raise UsageError(f"Wrong track number: '{value}'")
    return track_number


def run(args, stdout=None):
    """
    Load the CUE file and print the requested track blocks.

    Each block is written and flushed as soon as it is resolved, so in
    all-tracks mode an error on a later track leaves earlier blocks printed.

    Args:
        args: Parsed arguments (cue_file, track_number, encoding, verbose)
        stdout: Stream receiving the tags (default: sys.stdout)

    Raises:
        Cue2VorbisError: On any input, load or lookup error
    """
    if stdout is None:
        stdout = sys.stdout
    log = make_logger(args.verbose)

    track_arg = parse_track_number(args.track_number)

    disc = load_disc(args.cue_file, encoding=args.encoding, log_func=log)
    track_count = disc.track_count()
    if track_count == 0:
        raise UsageError("CUE file has no tracks.")
    if track_arg is not None and track_arg > track_count:
        raise UsageError(f"CUE file does not have track #{track_arg}.")

    if track_arg is not None:
        log(f"🎧 Printing tags for track {track_arg}/{track_count}")
        write_block(resolve(disc, track_arg, track_count), stdout)
        return

    log(f"🎧 Printing tags for {track_count} track(s)")
    for _, tags in resolve_all(disc):
        write_block(tags, stdout)


def _ensure_utf8_stdout():
    encoding = (getattr(sys.stdout, "encoding", None) or "").lower().replace("-", "")
    if encoding != "utf8" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")


def main(argv=None):
    """Main entry point"""
    args = parse_arguments(argv)
    _ensure_utf8_stdout()

    try:
        run(args)
    except Cue2VorbisError as e:
        safe_print(str(e), sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
