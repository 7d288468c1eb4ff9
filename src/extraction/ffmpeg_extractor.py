"""Frame extraction via an external ``ffmpeg`` process.

Runs::

    ffmpeg -i <video> -vf fps=<R> <output_dir>/frame_%04d.png

and blocks until the process exits.  There is no timeout.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from src.extraction.base import FRAME_PATTERN, ExtractorError, FrameExtractor

logger = logging.getLogger(__name__)


class FfmpegExtractor(FrameExtractor):
    """Extract frames by spawning one ``ffmpeg`` process per call.

    Parameters
    ----------
    binary : str
        Name or path of the ffmpeg executable.
    """

    def __init__(self, binary: str = "ffmpeg") -> None:
        self.binary = binary

    @property
    def name(self) -> str:
        return "ffmpeg"

    def build_command(self, video_path: Path, output_dir: Path, fps: int) -> list[str]:
        """Return the argument vector for a single extraction run."""
        return [
            self.binary,
            "-i",
            str(video_path),
            "-vf",
            f"fps={fps}",
            str(output_dir / FRAME_PATTERN),
        ]

    def _extract(self, video_path: Path, output_dir: Path, fps: int) -> bool:
        cmd = self.build_command(video_path, output_dir, fps)
        logger.info("Extracting frames: %s", " ".join(cmd))

        try:
            # No stdin: an overwrite prompt must fail instead of blocking.
            result = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
            )
        except OSError as exc:
            raise ExtractorError(f"Could not launch {self.binary!r}: {exc}") from exc

        if result.returncode != 0:
            logger.error(
                "ffmpeg process failed (exit %d): %s",
                result.returncode,
                (result.stderr or "")[-500:].strip(),
            )
            return False

        logger.info("Frames extracted successfully into %s", output_dir)
        return True
