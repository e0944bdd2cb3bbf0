"""
A convenience module for importing the conversion subsystem services.

Pipelines import the collaborators from here rather than from each module:

    from video_facade.services.conversion_service import CodecDetector, BitrateProcessor
"""
from .audio_adjuster import AudioAdjuster
from .bitrate_processor import BitrateProcessor
from .codec_detector import CodecDetector

__all__ = ["AudioAdjuster", "BitrateProcessor", "CodecDetector"]
