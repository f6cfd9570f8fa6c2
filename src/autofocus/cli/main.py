#!/usr/bin/env python3
"""
autofocus: rate the sharpness of every frame extracted from a video.

Frames are expected to be extracted beforehand, e.g.:

    ffmpeg -i <input_file> frame%05d.png -hide_banner

Each frame file name must end in a zero-padded frame number (5 digits by
default, see AUTOFOCUS_FRAMES__FRAME_NUMBER_DIGITS). The result is a
tab-delimited table of frame number and sharpness, ordered by frame number.
"""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from ..config import AppConfig, get_config
from ..core.errors import AutofocusError
from ..core.types import FrameInfo
from ..output.logger import SimpleLogger, printable
from ..output.results import write_results
from ..processing.frames import analyse_frames, select_sharpest


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    p = argparse.ArgumentParser(
        prog="autofocus",
        description="Compute a sharpness score for every frame in a directory.",
    )
    p.add_argument("frames_directory", type=Path, help="Directory containing the extracted frames")
    p.add_argument("result_file", type=Path, help="Tab-delimited result file to write")
    return p.parse_args(argv)


def print_run_header(logger: SimpleLogger, args: argparse.Namespace, config: AppConfig) -> None:
    """Print the run configuration."""
    logger.section("Run Configuration")
    rows = [
        ["Frames:", str(args.frames_directory)],
        ["Result:", str(args.result_file)],
        ["Digits:", str(config.frames.frame_number_digits)],
        ["Workers:", str(config.worker.max_workers)],
    ]
    for label, value in rows:
        logger.log(f"{label:<12} {value}")


def print_sharpest(logger: SimpleLogger, frames: list[FrameInfo], count: int) -> None:
    """Print the sharpest frames as a table."""
    best = select_sharpest(frames, count)
    if not best:
        return
    rows = [
        [str(rank), str(frame.number), f"{frame.sharpness:g}", frame.path.name if frame.path else ""]
        for rank, frame in enumerate(best, 1)
    ]
    logger.table(["#", "Frame", "Sharpness", "File"], rows, title=f"Sharpest {len(best)} frames")


def run(frames_directory: Path, result_file: Path, config: AppConfig, logger: SimpleLogger) -> list[FrameInfo]:
    """Analyse ``frames_directory`` and write the results to ``result_file``.

    The directory is analysed completely before the result file is opened.
    """
    logger.info(f"Analysing frames in {frames_directory}")
    frames = analyse_frames(
        frames_directory,
        frame_number_digits=config.frames.frame_number_digits,
        max_workers=config.worker.max_workers,
        logger=logger,
        progress_interval=config.report.progress_interval,
    )
    if not frames:
        logger.warning(f"No frames found in {frames_directory}; writing an empty result file")
    write_results(result_file, frames)
    return frames


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)
    try:
        config = get_config()
    except ValidationError as ex:
        print(f"invalid configuration: {ex}", file=sys.stderr)
        return 1
    try:
        logger = SimpleLogger(config.log_file)
    except OSError as ex:
        print(printable(f"unable to open log file '{config.log_file}': {ex}"), file=sys.stderr)
        return 1

    print_run_header(logger, args, config)

    t0 = time.time()
    try:
        frames = run(args.frames_directory, args.result_file, config, logger)
    except AutofocusError as ex:
        logger.error(str(ex))
        return 1

    logger.success(f"Wrote {len(frames)} frames to {args.result_file} in {time.time() - t0:.1f}s")
    if frames and config.report.top_frames:
        print_sharpest(logger, frames, config.report.top_frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())
