"""Result file writing.

The result file is a tab-delimited ASCII table without header: one
``<frame number>\\t<sharpness>`` record per line.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..core.errors import OutputWriteError
from ..core.types import FrameInfo


def format_result_line(frame: FrameInfo) -> str:
    """Format one record, newline included."""
    return f"{frame.number}\t{frame.sharpness!r}\n"


def write_results(path: Path, frames: Iterable[FrameInfo]) -> None:
    """Write frame infos to ``path``, one line per frame in the given order.

    The file is overwritten if it exists. Ordering is the caller's job.

    Raises:
        OutputWriteError: The file cannot be opened or written.
    """
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for frame in frames:
                f.write(format_result_line(frame))
    except OSError as ex:
        raise OutputWriteError(path, ex.strerror or str(ex)) from ex

