"""Frame extraction subsystem: turn a video into numbered PNG frames.

Typical usage::

    from src.extraction import create_extractor

    extractor = create_extractor("ffmpeg")
    ok = extractor.extract("talk.mp4", "frames", fps=1)
"""

from src.extraction.base import (
    FRAME_EXTENSION,
    FRAME_PATTERN,
    ExtractorError,
    FrameExtractor,
    frame_filename,
)
from src.extraction.factory import available_backends, create_extractor, register_extractor
from src.extraction.ffmpeg_extractor import FfmpegExtractor
from src.extraction.opencv_extractor import OpenCVExtractor

__all__ = [
    "FRAME_EXTENSION",
    "FRAME_PATTERN",
    "ExtractorError",
    "FfmpegExtractor",
    "FrameExtractor",
    "OpenCVExtractor",
    "available_backends",
    "create_extractor",
    "frame_filename",
    "register_extractor",
]
