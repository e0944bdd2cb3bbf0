"""
Command-Line Interface (CLI) setup for the Video Facade.

This module uses Python's `argparse` to define and parse the arguments of
the client: which file to convert, to which format, and how verbosely.
"""
import argparse
from typing import Optional, Sequence

from .config.common import KNOWN_LOG_LEVELS, LOG_LEVEL, STRICT_FORMATS
from .config.video import DEFAULT_FILE_NAME, DEFAULT_TARGET_FORMAT


def get_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for the Video Facade client.

    Args:
        argv: Arguments to parse. Defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: The parsed arguments (`file_name`, `target_format`,
                            `log_level`, `strict_formats`).
    """
    parser = argparse.ArgumentParser(description="Convert a video file through the conversion facade.")
    parser.add_argument(
        "file_name", nargs="?", default=DEFAULT_FILE_NAME,
        help=f"Name of the source video file (default: {DEFAULT_FILE_NAME})."
    )
    parser.add_argument(
        "target_format", nargs="?", default=DEFAULT_TARGET_FORMAT,
        help=f"Destination format, 'mp4' or 'ogg' (default: {DEFAULT_TARGET_FORMAT})."
    )
    parser.add_argument(
        "--log-level", type=str.upper, default=LOG_LEVEL,
        choices=KNOWN_LOG_LEVELS,
        help="Set the logging level."
    )
    parser.add_argument(
        "--strict-formats", action=argparse.BooleanOptionalAction, default=STRICT_FORMATS,
        help="Reject formats other than mp4 and ogg instead of treating them as Ogg."
    )
    return parser.parse_args(argv)
