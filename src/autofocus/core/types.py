"""
Core data types for autofocus.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FrameInfo:
    """Result of analysing one frame.

    Attributes:
        number (int): Frame number parsed from the file name.
        sharpness (float): Sharpness score; higher means sharper.
        path (Optional[Path]): Analysed file, when known. Not part of equality.
    """

    number: int
    sharpness: float
    path: Path | None = field(default=None, compare=False)
