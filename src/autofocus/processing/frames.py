"""
Frame collection for autofocus.

This module turns a directory of extracted frames into an ordered list of
FrameInfo results:
- Frame number parsing and sharpness measurement per directory entry
- Optional thread-pool fan-out of the per-entry analysis
- Ordering by frame number and selection of the sharpest frames
"""

from __future__ import annotations

import concurrent.futures as futures
from collections.abc import Sequence
from pathlib import Path

from ..config import DEFAULT_FRAME_NUMBER_DIGITS
from ..core.errors import InvalidDirectoryError
from ..core.types import FrameInfo
from ..output.logger import SimpleLogger
from ..utils.path import extract_frame_number
from .sharpness import calculate_sharpness

DEFAULT_PROGRESS_INTERVAL = 50


def analyse_frame(path: Path, frame_number_digits: int = DEFAULT_FRAME_NUMBER_DIGITS) -> FrameInfo:
    """Analyse the image at ``path`` and return its FrameInfo.

    The frame number is parsed before the image is decoded, so badly named
    entries fail without being read.
    """
    number = extract_frame_number(path, frame_number_digits)
    return FrameInfo(number=number, sharpness=calculate_sharpness(path), path=path)


def list_entries(directory: Path) -> list[Path]:
    """Return every entry of ``directory`` in enumeration order (unsorted).

    Raises:
        InvalidDirectoryError: ``directory`` is not a directory or cannot be listed.
    """
    if not directory.is_dir():
        raise InvalidDirectoryError(directory)
    try:
        return list(directory.iterdir())
    except OSError as ex:
        raise InvalidDirectoryError(directory) from ex


def analyse_frames(
    directory: Path,
    frame_number_digits: int = DEFAULT_FRAME_NUMBER_DIGITS,
    max_workers: int = 1,
    logger: SimpleLogger | None = None,
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
) -> list[FrameInfo]:
    """Analyse all images in ``directory`` and return them sorted by frame number.

    Every entry is analysed; there is no filtering. The first error aborts the
    whole collection and is re-raised unchanged. Frames sharing a number keep
    directory enumeration order.

    Args:
        directory: Directory holding the extracted frames.
        frame_number_digits: Width of the frame number field in the file names.
        max_workers: Threads used for analysis; 1 runs sequentially.
        logger: Optional logger receiving progress lines.
        progress_interval: Log progress every N frames.

    Returns:
        List of FrameInfo sorted ascending by number.
    """
    directory = Path(directory)
    entries = list_entries(directory)
    total = len(entries)

    def report(done: int) -> None:
        if logger is not None and (done % progress_interval == 0 or done == total):
            logger.progress(done, total, "frames analysed")

    results: list[FrameInfo] = []
    if max_workers <= 1 or total <= 1:
        for entry in entries:
            results.append(analyse_frame(entry, frame_number_digits))
            report(len(results))
    else:
        with futures.ThreadPoolExecutor(max_workers=max_workers) as pool:
            futs = [pool.submit(analyse_frame, entry, frame_number_digits) for entry in entries]
            try:
                # collect in enumeration order so the sort below sees the same input as a sequential run
                for fut in futs:
                    results.append(fut.result())
                    report(len(results))
            except Exception:
                for f in futs:
                    f.cancel()
                raise

    # directory iteration is not sorted; list.sort is stable for equal numbers
    results.sort(key=lambda frame: frame.number)
    return results


def select_sharpest(frames: Sequence[FrameInfo], count: int = 1) -> list[FrameInfo]:
    """Return the ``count`` sharpest frames, sharpest first.

    Ties are broken by the lower frame number.
    """
    if count <= 0:
        return []
    ranked = sorted(frames, key=lambda frame: (-frame.sharpness, frame.number))
    return ranked[:count]
