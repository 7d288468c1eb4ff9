"""Pipeline configuration data structures.

A :class:`PipelineConfig` fixes everything one run needs: where the
frames go, how often to sample, which extractor backend to use and how
strict the duplicate check is.  Values are constant for the whole run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from src.dedup.similarity import validate_threshold
from src.extraction.base import FRAME_EXTENSION

logger = logging.getLogger(__name__)

# Working directory for extracted frames, relative to the current directory.
DEFAULT_OUTPUT_DIR = "frames"

# One frame per second of source video.
DEFAULT_FPS = 1

# At most 1% of pixels may differ for two frames to be duplicates.
DEFAULT_THRESHOLD = 0.01


@dataclass
class PipelineConfig:
    """Declarative description of one extract-and-dedup run.

    Parameters
    ----------
    output_dir : str or Path
        Working directory that receives the frame files.
    fps : int
        Sampling rate in frames per second of source video (>= 1).
    threshold : float
        Similarity threshold in ``[0, 1]``: the maximum fraction of
        differing pixels for two frames to count as duplicates.
    backend : str
        Extractor backend name, see
        :func:`~src.extraction.factory.create_extractor`.
    ffmpeg_binary : str
        Executable used by the ``"ffmpeg"`` backend.
    extension : str
        Frame file suffix the scanner looks for.
    """

    output_dir: str | Path = DEFAULT_OUTPUT_DIR
    fps: int = DEFAULT_FPS
    threshold: float = DEFAULT_THRESHOLD
    backend: str = "ffmpeg"
    ffmpeg_binary: str = "ffmpeg"
    extension: str = FRAME_EXTENSION

    def __post_init__(self) -> None:
        self.output_dir = Path(self.output_dir)
        if isinstance(self.fps, bool) or int(self.fps) != self.fps or self.fps < 1:
            raise ValueError(f"fps must be a positive integer, got {self.fps!r}")
        self.fps = int(self.fps)
        self.threshold = validate_threshold(self.threshold)
        logger.debug(
            "Pipeline config: output_dir=%s fps=%d threshold=%.4f backend=%s",
            self.output_dir,
            self.fps,
            self.threshold,
            self.backend,
        )

    def extractor_kwargs(self) -> dict:
        """Constructor arguments for the configured extractor backend."""
        if self.backend == "ffmpeg":
            return {"binary": self.ffmpeg_binary}
        return {}
