"""
Video Facade: a video conversion subsystem hidden behind a single facade.

    from video_facade import ConversionFacade

    handle = ConversionFacade().convert_video("youtubevideo.ogg", "mp4")
    print(handle.name)  # tmp
"""
from .pipeline.conversion_facade import ConversionFacade

__all__ = ["ConversionFacade"]
