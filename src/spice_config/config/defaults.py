"""
默认配置定义。

集中维护 config.ini 的规范结构（段 → 键 → 默认值）。``SCHEMA`` 为只读映射，
探测得到的路径通过 :func:`schema_with_overrides` 在生成默认配置时合并，
不会回写到 ``SCHEMA`` 本身。
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional

SETTING_SECTION = "Setting"
SPOTIFY_PATH_KEY = "spotify_path"
PREFS_PATH_KEY = "prefs_path"

BACKUP_SECTION = "Backup"
BACKUP_COMMENT = "DO NOT CHANGE!"
BACKUP_VERSION_KEY = "version"

_LAYOUT: Dict[str, Dict[str, str]] = {
    SETTING_SECTION: {
        SPOTIFY_PATH_KEY: "",
        PREFS_PATH_KEY: "",
        "current_theme": "SpicetifyDefault",
        "inject_css": "1",
        "replace_colors": "1",
    },
    "Preprocesses": {
        "disable_sentry": "1",
        "disable_ui_logging": "1",
        "remove_rtl_rule": "1",
        "expose_apis": "1",
    },
    "AdditionalOptions": {
        "experimental_features": "0",
        "fastUser_switching": "0",
        "home": "0",
        "lyric_always_show": "0",
        "lyric_force_no_sync": "0",
        "made_for_you_hub": "0",
        "radio": "0",
        "song_page": "0",
        "visualization_high_framerate": "0",
        "extensions": "",
        "custom_apps": "",
    },
}

SCHEMA: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {name: MappingProxyType(dict(keys)) for name, keys in _LAYOUT.items()}
)


def schema_with_overrides(
    overrides: Optional[Mapping[str, Mapping[str, str]]] = None,
    *,
    schema: Mapping[str, Mapping[str, str]] = SCHEMA,
) -> Dict[str, Dict[str, str]]:
    """返回 schema 的可变副本，并套用非空的覆盖值。"""
    layout = {name: dict(keys) for name, keys in schema.items()}
    for section, values in (overrides or {}).items():
        node = layout.setdefault(section, {})
        for key, value in values.items():
            if value:
                node[key] = str(value)
    return layout


__all__ = [
    "BACKUP_COMMENT",
    "BACKUP_SECTION",
    "BACKUP_VERSION_KEY",
    "PREFS_PATH_KEY",
    "SCHEMA",
    "SETTING_SECTION",
    "SPOTIFY_PATH_KEY",
    "schema_with_overrides",
]
