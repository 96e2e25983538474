"""
平台相关服务。
"""

from __future__ import annotations

from .probes import PathProbe, find_app_path, find_prefs_path, probe_for_platform  # noqa: F401

__all__ = ["PathProbe", "find_app_path", "find_prefs_path", "probe_for_platform"]
