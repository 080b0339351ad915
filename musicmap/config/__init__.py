"""Configuration module — exports Settings and load_settings."""

from musicmap.config.loader import load_settings
from musicmap.config.settings import Settings

__all__ = ["Settings", "load_settings"]
