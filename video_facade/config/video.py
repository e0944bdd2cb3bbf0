"""
Configuration settings related to video conversion.

This module defines the format names the subsystem recognises, the
placeholder used for conversion output, and the defaults used by the client.
"""

# --- Format Names ---
MPEG4_FORMAT = "mp4"
OGG_FORMAT = "ogg"
KNOWN_FORMATS = (MPEG4_FORMAT, OGG_FORMAT)

# --- Output Settings ---
# Name of the output handle returned by every conversion. No file is written.
OUTPUT_PLACEHOLDER = "tmp"

# --- Client Defaults ---
DEFAULT_FILE_NAME = "youtubevideo.ogg"
DEFAULT_TARGET_FORMAT = MPEG4_FORMAT
