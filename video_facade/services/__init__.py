"""
Services Package for the Video Facade Application.

This package contains the conversion subsystem: the components the facade
coordinates. Each one performs a single step and carries no state between
calls.

- **CodecDetector:** classifies a `MediaFile` as MPEG4 or Ogg.
- **BitrateProcessor:** reads the source and converts it to the destination
  codec.
- **AudioAdjuster:** fixes the audio track and yields the `OutputHandle`.

None of them touches the filesystem; every step only logs what it would do.
"""
