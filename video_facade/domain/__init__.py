"""
This package contains the core domain models of the Video Facade application.

Modules:
    exceptions.py: Custom exception types for malformed file names and
                   unrecognised formats.
    media.py: The `MediaFile` descriptor, the closed `Codec` enum and the
              `OutputHandle` placeholder returned by a conversion.
"""
