"""
配置补全。

与默认结构逐段逐键比对，只补缺失项，不改写、不删除已有值。
"""

from __future__ import annotations

from typing import List, Mapping, Tuple

from .defaults import SCHEMA
from .document import ConfigDocument


def missing_entries(
    doc: ConfigDocument,
    schema: Mapping[str, Mapping[str, str]] = SCHEMA,
) -> List[Tuple[str, str]]:
    """列出 schema 中存在而文档缺少的 (段, 键)。"""
    missing: List[Tuple[str, str]] = []
    for section, keys in schema.items():
        present = doc.has_section(section)
        for key in keys:
            if not present or not doc.has_key(section, key):
                missing.append((section, key))
    return missing


def reconcile(
    doc: ConfigDocument,
    schema: Mapping[str, Mapping[str, str]] = SCHEMA,
) -> bool:
    """补全缺失的段与键，返回是否发生了修改。重复调用不会再次修改。"""
    changed = False
    for section, keys in schema.items():
        if not doc.has_section(section):
            doc.add_section(section)
            changed = True
        for key, default in keys.items():
            if not doc.has_key(section, key):
                doc.set(section, key, default)
                changed = True
    return changed


__all__ = ["missing_entries", "reconcile"]
