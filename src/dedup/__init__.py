"""Dedup module: remove near-duplicate frames from an extracted sequence."""

from .scanner import DedupScanner, ScanError, ScanResult, list_frame_files
from .similarity import are_similar, difference_ratio, load_frame

__all__ = [
    "DedupScanner",
    "ScanError",
    "ScanResult",
    "are_similar",
    "difference_ratio",
    "list_frame_files",
    "load_frame",
]
