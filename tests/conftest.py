"""
Shared pytest fixtures for the autofocus test suite.
"""

from __future__ import annotations

import os
from pathlib import Path

import cv2
import numpy as np
import pytest

from autofocus.config import get_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Run every test with default settings, ignoring AUTOFOCUS_* from the environment."""
    for key in list(os.environ):
        if key.upper().startswith("AUTOFOCUS_"):
            monkeypatch.delenv(key)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


def checkerboard(h: int = 64, w: int = 64, square: int = 8) -> np.ndarray:
    """Return a high-contrast BGR checkerboard with ``square``-pixel cells."""
    rows = np.arange(h) // square
    cols = np.arange(w) // square
    mask = (rows[:, None] + cols[None, :]) % 2 == 0
    frame = np.zeros((h, w, 3), dtype=np.uint8)
    frame[mask] = 255
    return frame


def solid(h: int = 64, w: int = 64, value: int = 128) -> np.ndarray:
    """Return a solid BGR frame."""
    return np.full((h, w, 3), value, dtype=np.uint8)


def write_image(path: Path, array: np.ndarray) -> Path:
    ok = cv2.imwrite(str(path), array)
    assert ok, f"failed to write {path}"
    return path
