"""
核心模块导出。
"""

from __future__ import annotations

from .exceptions import ConfigParseError, MissingSectionError, SpiceConfigError  # noqa: F401
from .logging import LogSink, make_emitter  # noqa: F401

__all__ = [
    "ConfigParseError",
    "LogSink",
    "MissingSectionError",
    "SpiceConfigError",
    "make_emitter",
]
