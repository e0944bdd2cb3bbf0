"""
This package contains the conversion pipeline of the Video Facade application.

The pipeline is the facade itself: `ConversionFacade` coordinates the
services (codec detection, bitrate processing, audio adjustment) in a fixed
order behind a single `convert_video` call.
"""
