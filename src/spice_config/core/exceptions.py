"""
核心异常定义。
"""

from __future__ import annotations


class SpiceConfigError(RuntimeError):
    """配置工具异常基类。"""


class ConfigParseError(SpiceConfigError):
    """配置文件不存在或无法解析。"""


class MissingSectionError(SpiceConfigError):
    """请求的配置段在补全后仍不存在，属于程序内部错误。"""

    def __init__(self, section: str) -> None:
        super().__init__(f'Section "{section}" does not exist in config.')
        self.section = section


__all__ = ["ConfigParseError", "MissingSectionError", "SpiceConfigError"]
