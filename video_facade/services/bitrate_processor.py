"""
Bitrate stage of the conversion subsystem.

Both operations are passthroughs: they log what they would do and hand the
media file back unchanged.
"""
from loguru import logger

from ..domain.media import Codec, MediaFile


class BitrateProcessor:
    """Reads a source file and transcodes it to a destination codec."""

    def read(self, file: MediaFile, codec: Codec) -> MediaFile:
        """
        Reads the source file with the given codec.

        Args:
            file: The media file to read.
            codec: The codec the source is encoded with.

        Returns:
            The same `MediaFile` instance.
        """
        logger.info(f"BitrateProcessor: reading {file.name} as {codec.name}")
        return file

    def convert(self, file: MediaFile, codec: Codec) -> MediaFile:
        """
        Transcodes the buffered file to the destination codec.

        Args:
            file: The media file returned by `read`.
            codec: The destination codec.

        Returns:
            The same `MediaFile` instance.
        """
        logger.info(f"BitrateProcessor: converting {file.name} to {codec.name}")
        return file
