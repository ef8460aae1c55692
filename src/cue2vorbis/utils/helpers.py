"""General utility functions"""
import sys
import time


def safe_print(msg, stream=None):
    """Print with handling for surrogate characters that can't be encoded"""
    if stream is None:
        stream = sys.stdout
    try:
        print(msg, file=stream)
    except UnicodeEncodeError:
        # Replace characters the stream encoding cannot represent
        encoding = getattr(stream, 'encoding', None) or 'utf-8'
        safe_msg = msg.encode(encoding, errors='replace').decode(encoding)
        print(safe_msg, file=stream)
    stream.flush()


def make_logger(verbose=False, stream=None):
    """
    Build the log function passed down to the loader.

    Args:
        verbose: If False, the returned function discards every message
        stream: Where messages go (default: stderr, stdout carries the tags)

    Returns:
        Function taking a single message argument
    """
    if not verbose:
        return lambda msg: None

    def log(msg):
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
        safe_print(f"[{timestamp}] {msg}", stream if stream is not None else sys.stderr)

    return log
