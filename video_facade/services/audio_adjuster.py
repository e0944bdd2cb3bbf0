from pathlib import Path

from loguru import logger

from ..domain.media import MediaFile, OutputHandle
from ..config.video import OUTPUT_PLACEHOLDER


class AudioAdjuster:
    """Final stage of the subsystem: fixes the audio track and produces the output handle."""

    def fix(self, file: MediaFile) -> OutputHandle:
        # The handle does not depend on the input.
        logger.info(f"AudioAdjuster: fixing audio of {file.name}")
        return OutputHandle(Path(OUTPUT_PLACEHOLDER))
