#!/usr/bin/env python
"""CLI entry point -- extract frames from a video and drop near-duplicates.

Usage::

    python scripts/extract_unique_frames.py lecture.mp4

Frames are sampled at 1 frame per second into ``frames/`` as
``frame_0001.png``, ``frame_0002.png``, ...; every frame in which at
most 1% of pixels differ from the last kept frame is then deleted.
Requires ``ffmpeg`` on ``PATH``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] or None
        Command-line arguments.  If None, uses ``sys.argv[1:]``.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Extract frames from a video and delete near-duplicate frames.",
    )
    parser.add_argument(
        "file_path",
        help="Input video file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)
    # A lone argument is always the input path, even if it starts with "-".
    if len(argv) == 1:
        argv = ["--", *argv]
    return parser.parse_args(argv)


def _as_text_path(value: str) -> str | None:
    """Return ``value`` if it is valid text, else ``None``.

    Undecodable bytes in ``sys.argv`` arrive as lone surrogates, which
    cannot be encoded as UTF-8.
    """
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return value


def main(argv: list[str] | None = None) -> int:
    """Run extraction followed by deduplication.

    Parameters
    ----------
    argv : list[str] or None
        Command-line arguments.

    Returns
    -------
    int
        Exit code (0 on success, 1 on an invalid path).
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    logging.getLogger("PIL").setLevel(logging.WARNING)

    input_file = _as_text_path(args.file_path)
    if input_file is None:
        print("Invalid file path.", file=sys.stderr)
        return 1

    from src.orchestrator import FramePipeline, PipelineConfig

    pipeline = FramePipeline(PipelineConfig())
    result = pipeline.run(Path(input_file))

    print("\n--- Frame Summary ---")
    print(f"Frames scanned:  {result.total}")
    print(f"Frames kept:     {result.n_retained}")
    print(f"Frames deleted:  {result.n_deleted}")
    print(f"Output dir:      {pipeline.config.output_dir}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
