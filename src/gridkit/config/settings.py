"""Environment-driven settings.

Values are loaded from environment variables (prefix ``GRIDKIT_``) or a
``.env`` file in the working directory.  Only the drawing sinks and the CLI
read settings; the grid algorithms themselves are pure and take everything
as arguments.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DrawSettings(BaseSettings):
    """Defaults for the bitmap and terminal sinks."""

    model_config = SettingsConfigDict(env_prefix="GRIDKIT_DRAW_")

    output_dir: Path = Path("frames")
    """Directory the CLI writes frames into when given a bare basename."""
    background: tuple[int, int, int] = (255, 255, 255)
    """Colour of pixels no cell was drawn onto."""
    hex_outline: tuple[int, int, int] = (180, 180, 180)
    sprite_width: int = Field(default=1, ge=1, le=256)
    sprite_height: int = Field(default=1, ge=1, le=256)
    empty_char: str = Field(default=" ", min_length=1, max_length=1)
    """Character printed for cells without a value."""


class GraphSettings(BaseSettings):
    """Defaults for grid → graph conversion."""

    model_config = SettingsConfigDict(env_prefix="GRIDKIT_GRAPH_")

    connectivity: int = 4
    """Neighbourhood used by the CLI path search: 4 (orthogonal) or 8."""

    @field_validator("connectivity")
    @classmethod
    def _check_connectivity(cls, v: int) -> int:
        if v not in (4, 8):
            raise ValueError(f"connectivity must be 4 or 8, got {v}")
        return v


class Settings(BaseSettings):
    """Top-level settings aggregator."""

    model_config = SettingsConfigDict(
        env_prefix="GRIDKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    draw: DrawSettings = Field(default_factory=DrawSettings)
    graph: GraphSettings = Field(default_factory=GraphSettings)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


# Module-level singleton; import and use directly.
settings = Settings()


def get_settings() -> Settings:
    """Return the module-level Settings singleton."""
    return settings


def reload_settings() -> Settings:
    """Re-read the environment (used after changing env vars, e.g. in tests)."""
    global settings  # noqa: PLW0603
    settings = Settings()
    return settings
