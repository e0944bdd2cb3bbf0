"""
Client entry point for the Video Facade.

Parses the command line, configures the logger, asks the conversion facade
for one conversion and prints the name of the resulting output handle.
"""

import sys
from typing import Optional, Sequence

from loguru import logger

from video_facade.cli import get_args
from video_facade.config.common import LOGGER_FORMAT, LOG_LEVEL
from video_facade.domain.exceptions import VideoFacadeException
from video_facade.pipeline.conversion_facade import ConversionFacade


# Initial logger setup; main() re-applies it with the requested level.
logger.remove()
logger.add(sys.stderr, level=LOG_LEVEL, format=LOGGER_FORMAT)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Runs a single conversion.

    Returns:
        0 on success, 1 if the facade rejected the input.
    """
    args = get_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level, format=LOGGER_FORMAT)
    logger.debug(f"Parsed arguments: {args}")

    facade = ConversionFacade(strict_formats=args.strict_formats)
    try:
        output = facade.convert_video(args.file_name, args.target_format)
    except VideoFacadeException as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    print(output.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
