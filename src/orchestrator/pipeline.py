"""Two-phase pipeline: extract frames, then remove duplicates.

Extraction runs to completion before the scan starts.  A decoder that
ran but failed is only logged; the scan then works on whatever partial
output exists (possibly none).  A decoder that cannot be launched
aborts the run before any scanning.
"""

from __future__ import annotations

import logging
from pathlib import Path

from src.dedup.scanner import DedupScanner, ScanResult
from src.extraction.base import FrameExtractor
from src.extraction.factory import create_extractor
from src.orchestrator.config import PipelineConfig

logger = logging.getLogger(__name__)


class FramePipeline:
    """Run extraction and deduplication over a single video.

    Parameters
    ----------
    config : PipelineConfig, optional
        Run configuration.  Defaults to ``PipelineConfig()``.
    extractor : FrameExtractor, optional
        Extraction backend.  Built from ``config.backend`` when omitted.
    """

    def __init__(
        self,
        config: PipelineConfig | None = None,
        extractor: FrameExtractor | None = None,
    ) -> None:
        self.config = config or PipelineConfig()
        self.extractor = extractor or create_extractor(
            self.config.backend, **self.config.extractor_kwargs()
        )
        self.scanner = DedupScanner(
            threshold=self.config.threshold,
            extension=self.config.extension,
        )

    def run(self, video_path: str | Path) -> ScanResult:
        """Extract frames from ``video_path`` and delete duplicates.

        Returns
        -------
        ScanResult
            Retained and deleted frame paths.

        Raises
        ------
        ExtractorError
            If the output directory cannot be created or the decoder
            cannot be launched.
        ScanError
            If the scan fails on a directory read, decode or deletion.
        """
        output_dir = Path(self.config.output_dir)
        logger.info(
            "Extracting %s at %d fps into %s using %s",
            video_path,
            self.config.fps,
            output_dir,
            self.extractor.name,
        )

        ok = self.extractor.extract(video_path, output_dir, self.config.fps)
        if not ok:
            logger.warning(
                "Frame extraction failed for %s; scanning partial output in %s",
                video_path,
                output_dir,
            )

        return self.scanner.scan(output_dir)
