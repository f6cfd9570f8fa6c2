"""
Error taxonomy for autofocus.

Every failure raised by the analysis pipeline derives from ``AutofocusError``
so the CLI can report it and exit with a failure status. There is no local
recovery: the first error aborts the run.
"""

from __future__ import annotations

from pathlib import Path


class AutofocusError(Exception):
    """Base class for all pipeline errors.

    Attributes:
        path: The file or directory the error refers to.
    """

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidDirectoryError(AutofocusError):
    """The frames path does not denote a readable directory."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"invalid data directory '{path}'.", path)


class InvalidFileNameError(AutofocusError):
    """A file name is too short to hold the frame number field."""

    def __init__(self, name: str, frame_number_digits: int) -> None:
        super().__init__(
            f"invalid filename: '{name}' (expected at least {frame_number_digits + 1} "
            f"characters before the extension)",
            name,
        )


class FrameNumberParseError(AutofocusError):
    """The frame number field of a file name is not an unsigned integer."""

    def __init__(self, name: str, field: str) -> None:
        super().__init__(f"unable to parse frame number from file '{name}' (got '{field}')", name)
        self.field = field


class ImageDecodeError(AutofocusError):
    """An image file could not be decoded, or decoded to an empty image."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"error while opening image '{path}'", path)


class OutputWriteError(AutofocusError):
    """The result file could not be opened or written."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        message = f"unable to open result file '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, path)
