"""Tests for the extract_unique_frames CLI.

Covers:
- Argument count validation (usage on stderr, non-zero exit)
- Rejection of paths that are not valid text
- Wiring of the default pipeline and the printed summary
- Propagation of fatal runtime errors
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest import mock

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from scripts.extract_unique_frames import main, parse_args  # noqa: E402
from src.dedup.scanner import ScanError, ScanResult  # noqa: E402
from src.orchestrator.config import PipelineConfig  # noqa: E402


class TestParseArgs:
    def test_single_positional(self):
        args = parse_args(["movie.mp4"])
        assert args.file_path == "movie.mp4"
        assert args.verbose is False

    def test_verbose_flag(self):
        assert parse_args(["-v", "movie.mp4"]).verbose is True

    def test_no_arguments_prints_usage_and_exits_nonzero(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args([])
        assert exc_info.value.code != 0
        assert "usage" in capsys.readouterr().err

    def test_lone_dash_prefixed_argument_is_the_path(self):
        args = parse_args(["-clip.mp4"])
        assert args.file_path == "-clip.mp4"
        assert args.verbose is False

    def test_extra_arguments_exit_nonzero(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["a.mp4", "b.mp4"])
        assert exc_info.value.code != 0
        assert "usage" in capsys.readouterr().err


class TestMain:
    def test_rejects_undecodable_path(self, capsys):
        with mock.patch("src.orchestrator.FramePipeline") as mock_pipeline:
            code = main(["bad\udcff.mp4"])
        assert code == 1
        assert "Invalid file path." in capsys.readouterr().err
        mock_pipeline.assert_not_called()

    def test_runs_default_pipeline(self, capsys):
        result = ScanResult(
            retained=[Path("frames/frame_0001.png")],
            deleted=[Path("frames/frame_0002.png"), Path("frames/frame_0003.png")],
        )
        with mock.patch("src.orchestrator.FramePipeline") as mock_pipeline:
            instance = mock_pipeline.return_value
            instance.run.return_value = result
            instance.config = PipelineConfig()

            code = main(["movie.mp4"])

        assert code == 0
        config = mock_pipeline.call_args[0][0]
        assert config == PipelineConfig()
        instance.run.assert_called_once_with(Path("movie.mp4"))

        out = capsys.readouterr().out
        assert "Frames scanned:  3" in out
        assert "Frames kept:     1" in out
        assert "Frames deleted:  2" in out

    def test_accepts_path_starting_with_dash(self):
        with mock.patch("src.orchestrator.FramePipeline") as mock_pipeline:
            mock_pipeline.return_value.run.return_value = ScanResult()
            mock_pipeline.return_value.config = PipelineConfig()

            code = main(["-clip.mp4"])

        assert code == 0
        mock_pipeline.return_value.run.assert_called_once_with(Path("-clip.mp4"))

    def test_fatal_scan_error_propagates(self):
        with mock.patch("src.orchestrator.FramePipeline") as mock_pipeline:
            mock_pipeline.return_value.run.side_effect = ScanError("Error opening image x.png")
            with pytest.raises(ScanError):
                main(["movie.mp4"])
