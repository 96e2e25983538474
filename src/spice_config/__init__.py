"""
spice_config：Spotify 定制工具的 config.ini 管理。
"""

from __future__ import annotations

from .config import ConfigDocument, ConfigPaths, open_config, save_document  # noqa: F401
from .core.exceptions import MissingSectionError  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "ConfigDocument",
    "ConfigPaths",
    "MissingSectionError",
    "open_config",
    "save_document",
]
