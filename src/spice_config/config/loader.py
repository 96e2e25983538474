"""
配置文件加载与写入工具。
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from spice_config.core.exceptions import ConfigParseError
from spice_config.core.logging import LogSink, make_emitter
from spice_config.services.probes import PathProbe, find_app_path, find_prefs_path

from .defaults import (
    BACKUP_COMMENT,
    BACKUP_SECTION,
    BACKUP_VERSION_KEY,
    PREFS_PATH_KEY,
    SETTING_SECTION,
    SPOTIFY_PATH_KEY,
    schema_with_overrides,
)
from .document import ConfigDocument, PathLike, save_document
from .reconcile import reconcile

CONFIG_FILE_NAME = "config.ini"
CONFIG_HOME_ENV = "SPICE_CONFIG_HOME"


@dataclass(frozen=True)
class ConfigPaths:
    """集中管理配置路径。"""

    root: Path
    config_file: Path

    @classmethod
    def from_root(cls, root: PathLike) -> "ConfigPaths":
        base = Path(root).expanduser().resolve()
        return cls(root=base, config_file=base / CONFIG_FILE_NAME)

    @classmethod
    def default(
        cls,
        env: Optional[Mapping[str, str]] = None,
        *,
        platform_tag: Optional[str] = None,
    ) -> "ConfigPaths":
        """``$SPICE_CONFIG_HOME`` 优先，否则为用户目录下的 ``.spicetify``。"""
        env = os.environ if env is None else env
        override = env.get(CONFIG_HOME_ENV, "")
        if override:
            return cls.from_root(override)
        tag = platform_tag or sys.platform
        home_var = "USERPROFILE" if tag.startswith("win") else "HOME"
        home = env.get(home_var, "") or str(Path.home())
        return cls.from_root(Path(home) / ".spicetify")


def build_default_document(
    path: PathLike,
    *,
    probe: Optional[PathProbe] = None,
    on_log: Optional[LogSink] = None,
) -> ConfigDocument:
    """按默认结构生成新文档，并填入探测到的 Spotify 路径。"""
    emit = make_emitter(on_log)

    spotify_path = find_app_path(probe, on_log=on_log)
    prefs_path = find_prefs_path(probe)
    if not spotify_path:
        emit("Could not detect Spotify location.", "warning")
    if not prefs_path:
        emit('Could not detect "prefs" file location.', "warning")

    detected = {SETTING_SECTION: {SPOTIFY_PATH_KEY: spotify_path, PREFS_PATH_KEY: prefs_path}}
    doc = ConfigDocument(path)
    for section, keys in schema_with_overrides(detected).items():
        doc.add_section(section)
        for key, value in keys.items():
            doc.set(section, key, value)

    doc.add_section(BACKUP_SECTION, comment=BACKUP_COMMENT)
    doc.set(BACKUP_SECTION, BACKUP_VERSION_KEY, "")
    return doc


def open_config(
    path: PathLike,
    *,
    probe: Optional[PathProbe] = None,
    on_log: Optional[LogSink] = None,
) -> ConfigDocument:
    """读取配置；缺项补全后写回，文件缺失或损坏时生成默认配置。"""
    emit = make_emitter(on_log)
    try:
        doc = ConfigDocument.read(path)
    except ConfigParseError as exc:
        emit(f"Cannot read config ({exc}), generating default.", "debug")
        doc = build_default_document(path, probe=probe, on_log=on_log)
        save_document(doc)
        emit(f"Default {doc.path.name} generated.", "info")
        return doc

    if reconcile(doc):
        save_document(doc)
        emit("Config is updated.", "info")
    return doc


__all__ = [
    "CONFIG_FILE_NAME",
    "CONFIG_HOME_ENV",
    "ConfigPaths",
    "build_default_document",
    "open_config",
]
