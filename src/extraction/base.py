"""Abstract base class for frame extractors.

A :class:`FrameExtractor` turns a video file into a numbered sequence
of still images inside a working directory.  The deduplication scanner
only ever sees the files on disk, so backends (an external ``ffmpeg``
process, an in-process OpenCV decoder, ...) can be swapped freely.

Frame files are named ``frame_0001.png``, ``frame_0002.png``, ... so
that lexicographic order equals sequence order.
"""

from __future__ import annotations

import abc
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Lossless still-image format shared by every extractor and the scanner.
FRAME_EXTENSION = ".png"

# printf-style pattern (as understood by ffmpeg) for frame filenames.
FRAME_PATTERN = "frame_%04d" + FRAME_EXTENSION


def frame_filename(index: int) -> str:
    """Return the filename of the frame with 1-based ordinal ``index``."""
    return FRAME_PATTERN % index


class FrameExtractor(abc.ABC):
    """Base class for all frame extraction backends.

    Subclasses implement :meth:`_extract`; the public :meth:`extract`
    takes care of preparing the output directory first.
    """

    def extract(self, video_path: str | Path, output_dir: str | Path, fps: int) -> bool:
        """Extract frames from ``video_path`` into ``output_dir``.

        Parameters
        ----------
        video_path : str or Path
            Input video file.
        output_dir : str or Path
            Directory that receives the frame files.  Created (with
            parents) if it does not exist.
        fps : int
            Frames sampled per second of source video.

        Returns
        -------
        bool
            ``True`` if the decoder reported success, ``False`` if it ran
            but failed.  A failed run is logged, not raised: whatever
            partial output exists is left for the scanner.

        Raises
        ------
        ExtractorError
            If the output directory cannot be created or the decoder
            cannot be launched at all.
        """
        if fps < 1:
            raise ValueError(f"fps must be >= 1, got {fps}")

        output_dir = Path(output_dir)
        ensure_output_dir(output_dir)
        return self._extract(Path(video_path), output_dir, fps)

    @abc.abstractmethod
    def _extract(self, video_path: Path, output_dir: Path, fps: int) -> bool:
        """Backend-specific extraction into an existing ``output_dir``."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Short backend identifier (e.g. ``"ffmpeg"``)."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__}({self.name!r})>"


def ensure_output_dir(output_dir: Path) -> None:
    """Create ``output_dir`` if absent.

    Raises
    ------
    ExtractorError
        If the path exists but is not a directory, or cannot be created.
    """
    if output_dir.is_dir():
        return
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExtractorError(
            f"Cannot create output directory {output_dir}: {exc}"
        ) from exc
    logger.debug("Created output directory %s", output_dir)


class ExtractorError(Exception):
    """Raised when frame extraction cannot be started."""
