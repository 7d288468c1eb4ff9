"""Shared pytest fixtures for the unique-frames test suite.

Provides helpers for writing small synthetic PNG frames into a
temporary frame directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import numpy as np
import pytest
from PIL import Image


def solid_frame(h: int = 8, w: int = 8, value: int = 128, channels: int = 3) -> np.ndarray:
    """Create a solid-colour uint8 frame of shape ``(h, w, channels)``."""
    return np.full((h, w, channels), value, dtype=np.uint8)


def write_png(path: Path, frame: np.ndarray) -> Path:
    """Save ``frame`` as a PNG at ``path`` and return the path."""
    Image.fromarray(frame).save(path)
    return path


@pytest.fixture
def frames_dir(tmp_path: Path) -> Path:
    """An empty frame directory."""
    d = tmp_path / "frames"
    d.mkdir()
    return d


@pytest.fixture
def write_frames(frames_dir: Path) -> Callable[[list[np.ndarray]], list[Path]]:
    """Write a list of arrays as ``frame_0001.png``, ``frame_0002.png``, ..."""

    def _write(frames: list[np.ndarray]) -> list[Path]:
        return [
            write_png(frames_dir / f"frame_{i:04d}.png", frame)
            for i, frame in enumerate(frames, start=1)
        ]

    return _write
