"""
配置模块入口。

提供用于打开、补全与保存 config.ini 的便捷导出。
"""

from __future__ import annotations

from .defaults import SCHEMA, schema_with_overrides  # noqa: F401
from .document import ConfigDocument, save_document  # noqa: F401
from .loader import ConfigPaths, build_default_document, open_config  # noqa: F401
from .reconcile import missing_entries, reconcile  # noqa: F401

__all__ = [
    "SCHEMA",
    "ConfigDocument",
    "ConfigPaths",
    "build_default_document",
    "missing_entries",
    "open_config",
    "reconcile",
    "save_document",
    "schema_with_overrides",
]
