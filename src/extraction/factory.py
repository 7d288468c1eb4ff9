"""Factory function for creating frame extractors by backend name.

The :func:`create_extractor` function maps a backend name (the
``backend`` field of :class:`~src.orchestrator.config.PipelineConfig`)
to the matching :class:`FrameExtractor` subclass.
"""

from __future__ import annotations

import logging
from typing import Any

from src.extraction.base import ExtractorError, FrameExtractor
from src.extraction.ffmpeg_extractor import FfmpegExtractor
from src.extraction.opencv_extractor import OpenCVExtractor

logger = logging.getLogger(__name__)

# Registry of backend name → class.
_EXTRACTOR_REGISTRY: dict[str, type[FrameExtractor]] = {
    "ffmpeg": FfmpegExtractor,
    "opencv": OpenCVExtractor,
}


def available_backends() -> list[str]:
    """Return the sorted names of all registered backends."""
    return sorted(_EXTRACTOR_REGISTRY)


def create_extractor(backend: str, **kwargs: Any) -> FrameExtractor:
    """Instantiate the extractor registered under ``backend``.

    Parameters
    ----------
    backend : str
        Backend name, e.g. ``"ffmpeg"`` or ``"opencv"``.
    **kwargs
        Passed through to the extractor's constructor.

    Returns
    -------
    FrameExtractor

    Raises
    ------
    ExtractorError
        If ``backend`` is not registered.
    """
    extractor_cls = _EXTRACTOR_REGISTRY.get(backend)
    if extractor_cls is None:
        raise ExtractorError(
            f"Unknown extractor backend {backend!r}. Available: {available_backends()}"
        )

    logger.debug("Creating %s", extractor_cls.__name__)
    return extractor_cls(**kwargs)


def register_extractor(name: str, extractor_cls: type[FrameExtractor]) -> None:
    """Register a custom extractor class under ``name``."""
    _EXTRACTOR_REGISTRY[name] = extractor_cls
    logger.info("Registered extractor %r → %s", name, extractor_cls.__name__)
