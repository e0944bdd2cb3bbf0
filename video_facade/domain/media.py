from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from loguru import logger

from .exceptions import InvalidMediaNameException
from ..config.video import MPEG4_FORMAT, OGG_FORMAT


class Codec(Enum):
    """
    Tag describing an encoding format.

    The set is closed: every format other than mp4 maps to `OGG`.
    """

    MPEG4 = MPEG4_FORMAT
    OGG = OGG_FORMAT

    @classmethod
    def for_format(cls, format_name: str) -> "Codec":
        """Returns `MPEG4` for "mp4" and `OGG` for anything else."""
        if format_name == MPEG4_FORMAT:
            return cls.MPEG4
        return cls.OGG


def parse_codec_type(name: str) -> str:
    """
    Extracts the codec type from a file name.

    The codec type is everything after the first '.', so "clip.tar.ogg"
    yields "tar.ogg".

    Raises:
        InvalidMediaNameException: If the name has no '.' or nothing follows it.
    """
    if not isinstance(name, str):
        logger.error(f"Media file name must be a string, got {type(name).__name__}")
        raise InvalidMediaNameException(f"Media file name must be a string, got {type(name).__name__}")
    _, separator, codec_type = name.partition(".")
    if not separator or not codec_type:
        logger.error(f"No extension found in media file name '{name}'")
        raise InvalidMediaNameException(f"No extension found in media file name: '{name}'")
    return codec_type


@dataclass(frozen=True)
class MediaFile:
    """
    Immutable descriptor of a media file to convert.

    Only the name is given; the codec type is computed once from it at
    construction. Nothing is read from disk.

    Attributes:
        name (str): The file name as passed by the caller.
        codec_type (str): The part of the name after the first '.'.
    """

    name: str
    codec_type: str = field(init=False)

    def __post_init__(self):
        # frozen dataclass: bypass __setattr__ for the derived field
        object.__setattr__(self, "codec_type", parse_codec_type(self.name))


@dataclass(frozen=True)
class OutputHandle:
    """Placeholder path returned by a conversion. No backing file is guaranteed."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name
