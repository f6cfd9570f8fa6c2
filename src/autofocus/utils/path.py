"""
Path and file name utilities for autofocus.

Frames are expected to follow the naming produced by e.g.
``ffmpeg -i <input_file> frame%05d.png``: an arbitrary prefix, a fixed-width
zero-padded frame number and the extension.
"""

from __future__ import annotations

from pathlib import Path

from ..config import DEFAULT_FRAME_NUMBER_DIGITS
from ..core.errors import FrameNumberParseError, InvalidFileNameError


def extract_frame_number(filename: str | Path, frame_number_digits: int = DEFAULT_FRAME_NUMBER_DIGITS) -> int:
    """Extract the frame number from a file name.

    The number is the ``frame_number_digits`` characters right before the
    extension. The prefix must not be empty.
    Examples:
        "frame00042.png" -> 42
        "f00001.jpg" -> 1
        "00042.png" -> InvalidFileNameError (no prefix)
        "frameAB123.png" -> FrameNumberParseError

    Args:
        filename (str | Path): File name or path; only the final component is used.
        frame_number_digits (int): Width of the frame number field.

    Returns:
        int: The parsed frame number.

    Raises:
        InvalidFileNameError: The name is too short to contain the field.
        FrameNumberParseError: The field is not made of decimal digits only.
    """
    if frame_number_digits < 1:
        raise ValueError(f"frame_number_digits must be >= 1, got {frame_number_digits}")

    name = Path(filename).name
    ext_len = len(Path(name).suffix)
    if len(name) <= ext_len + frame_number_digits:
        raise InvalidFileNameError(name, frame_number_digits)

    end = len(name) - ext_len
    field = name[end - frame_number_digits : end]
    # str.isdigit() also accepts non-ASCII digits such as superscripts
    if not (field.isascii() and field.isdigit()):
        raise FrameNumberParseError(name, field)
    return int(field)
