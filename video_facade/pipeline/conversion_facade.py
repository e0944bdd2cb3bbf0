from typing import Optional

from loguru import logger

# Domain objects
from ..domain.media import Codec, MediaFile, OutputHandle
from ..domain.exceptions import UnsupportedFormatException

# Services
from ..services.conversion_service import (
    AudioAdjuster,
    BitrateProcessor,
    CodecDetector,
)

# Config
from ..config.common import STRICT_FORMATS
from ..config.video import KNOWN_FORMATS


class ConversionFacade:
    """
    Single entry point to the video conversion subsystem.

    `convert_video` runs the detector, the bitrate processor and the audio
    adjuster in a fixed order and returns the adjuster's output handle.
    Callers never deal with codecs or intermediate files.

    The collaborators can be passed in; by default the standard ones are
    created. The facade keeps no state between calls.

    Attributes:
        codec_detector (CodecDetector): Classifies the source file.
        bitrate_processor (BitrateProcessor): Reads and converts the file.
        audio_adjuster (AudioAdjuster): Produces the final output handle.
        strict_formats (bool): Reject formats other than mp4 and ogg instead
                               of treating them as Ogg.
    """

    def __init__(
        self,
        codec_detector: Optional[CodecDetector] = None,
        bitrate_processor: Optional[BitrateProcessor] = None,
        audio_adjuster: Optional[AudioAdjuster] = None,
        strict_formats: bool = STRICT_FORMATS,
    ):
        self.codec_detector = codec_detector if codec_detector is not None else CodecDetector()
        self.bitrate_processor = bitrate_processor if bitrate_processor is not None else BitrateProcessor()
        self.audio_adjuster = audio_adjuster if audio_adjuster is not None else AudioAdjuster()
        self.strict_formats = strict_formats

    def convert_video(self, file_name: str, target_format: str) -> OutputHandle:
        """
        Converts a video file to the target format.

        Args:
            file_name: Name of the source file, e.g. "youtubevideo.ogg".
            target_format: "mp4" selects MPEG4; anything else selects Ogg.

        Returns:
            The placeholder `OutputHandle` produced by the audio adjuster.

        Raises:
            InvalidMediaNameException: If `file_name` has no extension.
            UnsupportedFormatException: In strict mode, if the source extension
                                        or the target format is not recognised.
        """
        logger.info(f"ConversionFacade: conversion of {file_name} to {target_format} started")
        file = MediaFile(file_name)
        if self.strict_formats:
            self._check_format(file.codec_type, "source extension")
            self._check_format(target_format, "target format")

        source_codec = self.codec_detector.detect(file)
        destination_codec = Codec.for_format(target_format)

        buffer = self.bitrate_processor.read(file, source_codec)
        intermediate = self.bitrate_processor.convert(buffer, destination_codec)
        output = self.audio_adjuster.fix(intermediate)

        logger.success(f"ConversionFacade: conversion of {file_name} completed -> {output.name}")
        return output

    @staticmethod
    def _check_format(format_name: str, role: str):
        if format_name not in KNOWN_FORMATS:
            logger.error(f"Unsupported {role} '{format_name}'. Known formats: {', '.join(KNOWN_FORMATS)}")
            raise UnsupportedFormatException(f"Unsupported {role}: '{format_name}'")
