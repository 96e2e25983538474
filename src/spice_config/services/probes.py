"""
Spotify 安装目录与 prefs 文件的定位。

每个平台一个探测类，按固定顺序尝试若干常见位置，返回第一个存在的路径；
都不存在时返回空字符串。探测只做存在性检查，不读取文件内容。
"""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Callable, Iterable, List, Mapping, Optional

from spice_config.core.logging import LogSink, make_emitter

LocatorRunner = Callable[[List[str]], str]


def first_existing(candidates: Iterable[str]) -> str:
    """返回第一个存在的候选路径，否则返回空字符串。"""
    for path in candidates:
        if not path:
            continue
        try:
            if os.path.exists(path):
                return path
        except (OSError, ValueError):
            continue
    return ""


def run_locator(argv: List[str]) -> str:
    """执行定位命令并返回 stdout；命令不存在或失败时返回空字符串。"""
    try:
        proc = subprocess.run(argv, capture_output=True, text=True, check=False)
    except OSError:
        return ""
    if proc.returncode != 0:
        return ""
    return proc.stdout or ""


def parse_whereis_output(output: str, name: str = "spotify") -> List[str]:
    """解析 ``whereis`` 输出，例如 ``spotify: /usr/bin/spotify /usr/share/spotify``。"""
    paths: List[str] = []
    for line in output.splitlines():
        tokens = line.split()
        if not tokens:
            continue
        if tokens[0] == f"{name}:":
            tokens = tokens[1:]
        elif tokens[0].endswith(":"):
            continue
        paths.extend(tokens)
    return paths


class PathProbe:
    """探测策略基类；未知平台直接使用它，两项结果均为空。"""

    missing_app_hint: Optional[str] = None

    def __init__(self, env: Optional[Mapping[str, str]] = None) -> None:
        self.env: Mapping[str, str] = os.environ if env is None else env

    def _env_path(self, name: str, *parts: str) -> str:
        base = self.env.get(name, "")
        if not base:
            return ""
        return os.path.join(base, *parts)

    def app_candidates(self) -> List[str]:
        return []

    def prefs_candidates(self) -> List[str]:
        return []

    def find_app_path(self) -> str:
        return first_existing(self.app_candidates())

    def find_prefs_path(self) -> str:
        return first_existing(self.prefs_candidates())


NullProbe = PathProbe


class WindowsProbe(PathProbe):
    missing_app_hint = (
        "Please make sure you are using normal Spotify version, not Windows Store version."
    )

    def app_candidates(self) -> List[str]:
        return [self._env_path("APPDATA", "Spotify")]

    def prefs_candidates(self) -> List[str]:
        return [self._env_path("APPDATA", "Spotify", "prefs")]


class LinuxProbe(PathProbe):
    LOCATOR = ["whereis", "spotify"]
    # 安装目录下必须存在的子目录
    APP_MARKER = "Apps"
    SNAP_APP_DIR = "/snap/spotify/current/usr/share/spotify"

    def __init__(
        self,
        env: Optional[Mapping[str, str]] = None,
        *,
        runner: Optional[LocatorRunner] = None,
    ) -> None:
        super().__init__(env)
        self.runner = runner or run_locator

    def located_dirs(self) -> List[str]:
        output = self.runner(list(self.LOCATOR))
        return parse_whereis_output(output, self.LOCATOR[-1])

    def find_app_path(self) -> str:
        for candidate in self.located_dirs():
            if first_existing([os.path.join(candidate, self.APP_MARKER)]):
                return candidate
        return first_existing([self.SNAP_APP_DIR])

    def prefs_candidates(self) -> List[str]:
        return [
            # deb/rpm 包安装
            self._env_path("HOME", ".config", "spotify", "prefs"),
            # snap 安装
            self._env_path("HOME", "snap", "spotify", "current", ".config", "spotify", "prefs"),
        ]


class DarwinProbe(PathProbe):
    APP_BUNDLE_DIR = "/Applications/Spotify.app/Contents/Resources"

    def app_candidates(self) -> List[str]:
        return [self.APP_BUNDLE_DIR]

    def prefs_candidates(self) -> List[str]:
        return [self._env_path("HOME", "Library", "Application Support", "Spotify", "prefs")]


def probe_for_platform(
    platform_tag: Optional[str] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
) -> PathProbe:
    """按 ``sys.platform`` 选择探测策略。"""
    tag = platform_tag or sys.platform
    if tag.startswith("win"):
        return WindowsProbe(env)
    if tag.startswith("linux"):
        return LinuxProbe(env)
    if tag == "darwin":
        return DarwinProbe(env)
    return NullProbe(env)


def find_app_path(
    probe: Optional[PathProbe] = None,
    *,
    on_log: Optional[LogSink] = None,
) -> str:
    probe = probe or probe_for_platform()
    path = probe.find_app_path()
    if not path and probe.missing_app_hint:
        make_emitter(on_log)(probe.missing_app_hint, "info")
    return path


def find_prefs_path(probe: Optional[PathProbe] = None) -> str:
    probe = probe or probe_for_platform()
    return probe.find_prefs_path()


__all__ = [
    "DarwinProbe",
    "LinuxProbe",
    "NullProbe",
    "PathProbe",
    "WindowsProbe",
    "find_app_path",
    "find_prefs_path",
    "first_existing",
    "parse_whereis_output",
    "probe_for_platform",
    "run_locator",
]
