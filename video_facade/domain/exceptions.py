"""
Defines custom exception types for the Video Facade application.

The subsystem itself never fails, but the inputs handed to the facade can be
unusable. These exceptions let callers tell a malformed file name apart from
an unrecognised format instead of catching a generic `Exception`.

All custom exceptions inherit from the base `VideoFacadeException`.
"""


class VideoFacadeException(Exception):
    """Base class for all custom exceptions in the Video Facade application."""

    pass


# --- MediaFile Specific Exceptions ---
class MediaFileException(VideoFacadeException):
    """Base class for exceptions raised while describing a media file."""

    pass


class InvalidMediaNameException(MediaFileException):
    """
    Raised when a file name has no extension to derive a codec type from.

    The codec type is the part of the name after the first '.', so a name
    without a '.' (or with nothing after it) cannot be classified.
    """

    pass


# --- Conversion Specific Exceptions ---
class ConversionException(VideoFacadeException):
    """Base class for exceptions raised by the conversion facade."""

    pass


class UnsupportedFormatException(ConversionException):
    """
    Raised in strict mode when a source extension or target format is unknown.

    Outside strict mode any format other than mp4 is treated as Ogg and this
    exception is never raised.
    """

    pass
