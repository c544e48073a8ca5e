"""Configuration package."""

from __future__ import annotations

from gridkit.config.settings import Settings, get_settings, reload_settings

__all__ = ["Settings", "get_settings", "reload_settings"]
