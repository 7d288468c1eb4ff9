"""Orchestrator module -- configuration and the extract-then-dedup pipeline.

Provides ``PipelineConfig`` for the fixed per-run settings and
``FramePipeline``, which runs a frame extractor to completion and then
scans its output for near-duplicate frames.
"""

from .config import PipelineConfig
from .pipeline import FramePipeline

__all__ = [
    "FramePipeline",
    "PipelineConfig",
]
