"""Exact pixel-difference comparison between decoded frames.

Two frames are compared coordinate by coordinate; a pixel "differs" if
any of its channels differs at all.  The difference ratio is the
fraction of differing pixels.  This is a coarse duplicate-frame
detector, not a perceptual metric: there is no per-channel tolerance.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image


def load_frame(path: str | Path) -> np.ndarray:
    """Decode an image file into an RGBA ``uint8`` array of shape ``(H, W, 4)``.

    Every image is converted to RGBA so that frames stored in different
    PNG colour modes still compare on their full colour value.

    Raises
    ------
    OSError
        If the file cannot be opened or decoded (Pillow's
        ``UnidentifiedImageError`` is an ``OSError``).
    """
    with Image.open(path) as img:
        return np.asarray(img.convert("RGBA"))


def validate_threshold(threshold: float) -> float:
    """Return ``threshold`` as a float, or raise if outside ``[0, 1]``."""
    value = float(threshold)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"threshold must be between 0.0 and 1.0, got {value}")
    return value


def difference_ratio(a: np.ndarray, b: np.ndarray) -> float:
    """Return the fraction of pixels that differ between ``a`` and ``b``.

    Parameters
    ----------
    a, b : np.ndarray
        Images of identical shape, either ``(H, W)`` or ``(H, W, C)``.

    Returns
    -------
    float
        ``k / (H * W)`` where ``k`` is the number of coordinates at
        which any channel differs.  ``0.0`` for an empty image.

    Raises
    ------
    ValueError
        If the shapes differ.
    """
    if a.shape != b.shape:
        raise ValueError(f"Cannot compare images of shape {a.shape} and {b.shape}")

    mismatch = a != b
    if mismatch.ndim == 3:
        mismatch = mismatch.any(axis=2)

    total = mismatch.size
    if total == 0:
        return 0.0
    return int(np.count_nonzero(mismatch)) / total


def are_similar(a: np.ndarray, b: np.ndarray, threshold: float) -> bool:
    """Return ``True`` if ``a`` and ``b`` count as duplicates.

    Frames with different dimensions are never similar, whatever the
    threshold.  Otherwise the comparison is inclusive:
    ``difference_ratio(a, b) <= threshold``.
    """
    threshold = validate_threshold(threshold)
    if a.shape != b.shape:
        return False
    return difference_ratio(a, b) <= threshold
