"""
日志等级与格式化工具。

所有对外输出都通过 ``on_log(msg)`` 回调发出，消息格式为
``【HH:MM:SS】【LEVEL】正文``。未提供回调时使用 :func:`default_sink`。
"""

from __future__ import annotations

import sys
from typing import Callable, Dict, Optional

from .common import now_label

LogSink = Callable[[str], None]

LOG_LEVELS: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30, "error": 40}

# default_sink 的输出阈值
DEFAULT_LEVEL = "info"

_TAGS = tuple(f"【{name.upper()}】" for name in LOG_LEVELS)


def level_name(level: str) -> str:
    name = str(level or "").lower()
    return name if name in LOG_LEVELS else "info"


def extract_level_from_msg(msg: str) -> str:
    for name in LOG_LEVELS:
        if f"【{name.upper()}】" in msg:
            return name
    return "info"


def ensure_level_tag(msg: str, level: str) -> str:
    if any(tag in msg for tag in _TAGS):
        return msg
    return f"【{now_label()}】【{level_name(level).upper()}】" + msg


def default_sink(msg: str) -> None:
    """打印到终端；低于 DEFAULT_LEVEL 的丢弃，warning 及以上写入 stderr。"""
    level = extract_level_from_msg(msg)
    if LOG_LEVELS[level] < LOG_LEVELS[DEFAULT_LEVEL]:
        return
    stream = sys.stderr if LOG_LEVELS[level] >= LOG_LEVELS["warning"] else sys.stdout
    print(msg, file=stream)


def make_emitter(on_log: Optional[LogSink]) -> Callable[[str, str], None]:
    """返回 ``emit(msg, level)``，负责打标签并投递到回调。"""
    sink = on_log or default_sink

    def emit(msg: str, level: str = "info") -> None:
        sink(ensure_level_tag(msg, level))

    return emit


__all__ = [
    "DEFAULT_LEVEL",
    "LOG_LEVELS",
    "LogSink",
    "default_sink",
    "ensure_level_tag",
    "extract_level_from_msg",
    "level_name",
    "make_emitter",
]
