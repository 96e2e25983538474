"""
核心通用工具。
"""

from __future__ import annotations

import time


def now_label() -> str:
    return time.strftime("%H:%M:%S")


__all__ = ["now_label"]
