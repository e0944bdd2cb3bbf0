from loguru import logger

from ..domain.media import Codec, MediaFile
from ..config.video import MPEG4_FORMAT


class CodecDetector:
    """
    Classifies a media file by the codec type derived from its name.

    Only mp4 is recognised explicitly; every other codec type is treated as
    Ogg.
    """

    def detect(self, file: MediaFile) -> Codec:
        if file.codec_type == MPEG4_FORMAT:
            logger.info(f"CodecDetector: {file.name} detected as MPEG4 source")
            return Codec.MPEG4
        logger.info(f"CodecDetector: {file.name} ({file.codec_type}) treated as Ogg source")
        return Codec.OGG
