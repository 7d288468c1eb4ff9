"""In-process frame extraction with OpenCV.

Decodes the video with ``cv2.VideoCapture`` and keeps every N-th frame,
where ``N = round(video_fps / fps)``.  Output naming matches
:class:`~src.extraction.ffmpeg_extractor.FfmpegExtractor` so the
scanner cannot tell the backends apart.
"""

from __future__ import annotations

import logging
from pathlib import Path

from src.extraction.base import FrameExtractor, frame_filename

logger = logging.getLogger(__name__)


class OpenCVExtractor(FrameExtractor):
    """Extract frames without spawning an external process.

    A video that OpenCV cannot open is treated like a decoder that
    exited with an error: logged, and :meth:`extract` returns ``False``.
    """

    @property
    def name(self) -> str:
        return "opencv"

    def _extract(self, video_path: Path, output_dir: Path, fps: int) -> bool:
        # Lazy import so the ffmpeg backend works without OpenCV installed
        import cv2

        cap = cv2.VideoCapture(str(video_path))
        if not cap.isOpened():
            logger.error("OpenCV could not open video %s", video_path)
            cap.release()
            return False

        try:
            video_fps = cap.get(cv2.CAP_PROP_FPS)
            if video_fps and video_fps > 0:
                interval = max(1, round(video_fps / fps))
            else:
                logger.warning(
                    "Video %s reports no frame rate; keeping every frame",
                    video_path,
                )
                interval = 1
            logger.info(
                "Extracting every %d frame(s) of %s (source %.2f fps)",
                interval,
                video_path,
                video_fps or 0.0,
            )

            frame_index = 0
            saved = 0
            while True:
                ret, frame = cap.read()
                if not ret:
                    break
                if frame_index % interval == 0:
                    saved += 1
                    path = output_dir / frame_filename(saved)
                    if not cv2.imwrite(str(path), frame):
                        logger.error("Failed to write frame %s", path)
                        return False
                frame_index += 1
        finally:
            cap.release()

        logger.info("Frames extracted successfully: %d frame(s) into %s", saved, output_dir)
        return True
