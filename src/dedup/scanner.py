"""Sequential deduplication pass over a directory of extracted frames.

Frames are visited in sorted-name order.  Each one is compared with the
last *retained* frame (the baseline); duplicates are deleted from disk
and leave the baseline untouched, anything else is kept and becomes
the new baseline.  The first frame is always kept.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
from PIL import Image

from src.dedup.similarity import are_similar, load_frame, validate_threshold
from src.extraction.base import FRAME_EXTENSION

logger = logging.getLogger(__name__)


class ScanError(Exception):
    """Raised when the scan cannot read, decode or delete a frame."""


@dataclass
class ScanResult:
    """Outcome of one :meth:`DedupScanner.scan` run.

    Attributes
    ----------
    retained : list[Path]
        Frames left on disk, in sequence order.
    deleted : list[Path]
        Frames removed as duplicates, in sequence order.
    """

    retained: list[Path] = field(default_factory=list)
    deleted: list[Path] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.retained) + len(self.deleted)

    @property
    def n_retained(self) -> int:
        return len(self.retained)

    @property
    def n_deleted(self) -> int:
        return len(self.deleted)


def list_frame_files(directory: str | Path, extension: str = FRAME_EXTENSION) -> list[Path]:
    """Return the frame files in ``directory`` sorted by name.

    Only regular files whose suffix equals ``extension`` are returned.
    Entries whose type cannot be determined are skipped.  Zero-padded
    ordinals make lexicographic order equal sequence order; directory
    listings come back in arbitrary order, so the sort is required.

    Raises
    ------
    ScanError
        If the directory itself cannot be read.
    """
    directory = Path(directory)
    names: list[str] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    is_file = entry.is_file()
                except OSError:
                    logger.debug("Skipping unreadable entry %s", entry.path, exc_info=True)
                    continue
                if is_file and Path(entry.name).suffix == extension:
                    names.append(entry.name)
    except OSError as exc:
        raise ScanError(f"Cannot read frame directory {directory}: {exc}") from exc

    names.sort()
    return [directory / name for name in names]


class DedupScanner:
    """Delete frames that duplicate the last retained frame.

    Parameters
    ----------
    threshold : float
        Maximum difference ratio, in ``[0, 1]``, at which two frames
        are still duplicates.  ``0`` removes only identical frames;
        ``1`` removes every frame after the first.
    extension : str
        Suffix of the frame files to consider.
    """

    def __init__(self, threshold: float = 0.01, extension: str = FRAME_EXTENSION) -> None:
        self.threshold = validate_threshold(threshold)
        self.extension = extension

    def scan(self, directory: str | Path) -> ScanResult:
        """Run one forward pass over ``directory``.

        Raises
        ------
        ScanError
            If the directory cannot be listed, a frame cannot be decoded,
            or a duplicate cannot be deleted.  The run stops at the first
            such error; frames already deleted stay deleted.
        """
        frame_files = list_frame_files(directory, self.extension)
        logger.info(
            "Scanning %d frame(s) in %s (threshold %.4f)",
            len(frame_files),
            directory,
            self.threshold,
        )

        result = ScanResult()
        baseline: np.ndarray | None = None

        for frame in frame_files:
            current = self._decode(frame)

            if baseline is None:
                logger.info("First frame %s is considered unique.", frame)
                result.retained.append(frame)
                baseline = current
                continue

            if are_similar(baseline, current, self.threshold):
                logger.info("Frame %s is similar to the previous one, deleting it.", frame)
                self._delete(frame)
                result.deleted.append(frame)
            else:
                logger.info("Frame %s is unique.", frame)
                result.retained.append(frame)
                baseline = current

        logger.info(
            "Scan complete: %d retained, %d deleted",
            result.n_retained,
            result.n_deleted,
        )
        return result

    @staticmethod
    def _decode(frame: Path) -> np.ndarray:
        try:
            return load_frame(frame)
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise ScanError(f"Error opening image {frame}: {exc}") from exc

    @staticmethod
    def _delete(frame: Path) -> None:
        try:
            frame.unlink()
        except OSError as exc:
            raise ScanError(f"Error deleting frame {frame}: {exc}") from exc

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(threshold={self.threshold}, extension={self.extension!r})>"
