"""
Consolidated configuration system for autofocus.

Settings are grouped into small Pydantic models and collected in a single
``AppConfig`` that reads overrides from the environment.

All settings can be overridden via environment variables with the AUTOFOCUS_
prefix, using ``__`` to reach nested sections.
Example: AUTOFOCUS_FRAMES__FRAME_NUMBER_DIGITS=6
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FRAME_NUMBER_DIGITS = 5


# =============================================================================
# FRAME SETTINGS
# =============================================================================

class FrameSettings(BaseModel):
    """How frame numbers are encoded in the file names."""

    model_config = ConfigDict(frozen=True)

    frame_number_digits: Annotated[int, Field(
        ge=1,
        le=20,
        description="Width of the zero-padded frame number preceding the extension"
    )] = DEFAULT_FRAME_NUMBER_DIGITS


# =============================================================================
# WORKER SETTINGS
# =============================================================================

class WorkerSettings(BaseModel):
    """Worker thread configuration for frame analysis."""

    model_config = ConfigDict(frozen=True)

    max_workers: Annotated[int, Field(
        ge=1,
        le=32,
        description="Number of threads analysing frames (1 = sequential)"
    )] = 1


# =============================================================================
# REPORT SETTINGS
# =============================================================================

class ReportSettings(BaseModel):
    """Console reporting options."""

    model_config = ConfigDict(frozen=True)

    top_frames: Annotated[int, Field(
        ge=0,
        description="Number of sharpest frames listed after a run (0 disables the table)"
    )] = 5

    progress_interval: Annotated[int, Field(
        ge=1,
        description="Log a progress line every N analysed frames"
    )] = 50


# =============================================================================
# MAIN APPLICATION CONFIGURATION
# =============================================================================

class AppConfig(BaseSettings):
    """Main application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="AUTOFOCUS_",
        env_nested_delimiter="__",
        case_sensitive=False,
        frozen=True,
    )

    frames: FrameSettings = FrameSettings()
    worker: WorkerSettings = WorkerSettings()
    report: ReportSettings = ReportSettings()

    log_file: Path | None = None


@lru_cache
def get_config() -> AppConfig:
    """Return the process-wide configuration, read once from the environment."""
    return AppConfig()
