"""
config.ini 文档模型与写入。

``ConfigDocument`` 以文件路径为标识，内部使用 ``configparser`` 保存
段/键/值，并额外记录段与键上方的注释，以便写回时保留。

读取前先逐行预处理：
- 去掉每行行首空白，不支持续行，缩进的键仍按普通键处理；
- 第一个段标题之前的键放入隐藏的根段，写回时仍位于文件开头；
- 注释行挂到其后第一个段标题或键上，中间的空行不打断。
"""

from __future__ import annotations

import configparser
import re
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from spice_config.core.exceptions import ConfigParseError, MissingSectionError

PathLike = Union[str, Path]

# configparser 的 DEFAULT 段会把键泄漏到所有段；改用一个不会出现在文件中的名字，
# 使用户写的 [DEFAULT] 作为普通段处理。
_DEFAULT_SECTION = "\x00spice_config.defaults"
# 承载第一个段标题之前的键
ROOT_SECTION = "\x00spice_config.root"

# 与 configparser.SECTCRE 一致，允许 ``]`` 之后的行内注释
_SECTION_RE = re.compile(r"\[(?P<name>.+)\]")
_COMMENT_PREFIXES = (";", "#")

KeyComments = Dict[Tuple[str, str], str]


def new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        interpolation=None,
        delimiters=("=",),
        strict=False,
        default_section=_DEFAULT_SECTION,
    )
    parser.optionxform = str  # type: ignore[assignment]
    return parser


def preprocess(text: str) -> Tuple[str, Dict[str, str], KeyComments]:
    """规整原始文本，返回 (可交给 configparser 的文本, 段注释, 键注释)。"""
    lines: List[str] = [f"[{ROOT_SECTION}]"]
    section_comments: Dict[str, str] = {}
    key_comments: KeyComments = {}
    pending: List[str] = []
    section = ROOT_SECTION
    for raw in text.splitlines():
        line = raw.strip()
        lines.append(line)
        if not line:
            continue
        if line.startswith(_COMMENT_PREFIXES):
            pending.append(line[1:].strip())
            continue
        match = _SECTION_RE.match(line)
        if match:
            section = match.group("name")
            if pending:
                section_comments[section] = "\n".join(pending)
        elif "=" in line and pending:
            key = line.split("=", 1)[0].strip()
            key_comments[(section, key)] = "\n".join(pending)
        pending = []
    return "\n".join(lines) + "\n", section_comments, key_comments


def _comment_lines(comment: Optional[str]) -> List[str]:
    return [f"; {line}" for line in comment.splitlines()] if comment else []


class ConfigDocument:
    """有序的配置段集合，单进程独占使用，不加锁。"""

    def __init__(
        self,
        path: PathLike,
        parser: Optional[configparser.ConfigParser] = None,
        comments: Optional[Dict[str, str]] = None,
        key_comments: Optional[KeyComments] = None,
    ) -> None:
        self._path = Path(path)
        self._parser = parser if parser is not None else new_parser()
        if not self._parser.has_section(ROOT_SECTION):
            self._parser.add_section(ROOT_SECTION)
        self._comments: Dict[str, str] = dict(comments or {})
        self._key_comments: KeyComments = dict(key_comments or {})

    @classmethod
    def read(cls, path: PathLike) -> "ConfigDocument":
        """解析磁盘上的文件；文件缺失或格式错误时抛出 ConfigParseError。"""
        cfg_path = Path(path)
        parser = new_parser()
        try:
            raw = cfg_path.read_text(encoding="utf-8-sig")
            text, comments, key_comments = preprocess(raw)
            parser.read_string(text, source=str(cfg_path))
        except (OSError, UnicodeDecodeError, configparser.Error) as exc:
            raise ConfigParseError(f"{cfg_path}: {exc}") from exc
        return cls(cfg_path, parser, comments, key_comments)

    @property
    def path(self) -> Path:
        return self._path

    def get_path(self) -> Path:
        return self._path

    def sections(self) -> List[str]:
        return [name for name in self._parser.sections() if name != ROOT_SECTION]

    def __iter__(self) -> Iterator[str]:
        return iter(self.sections())

    def __contains__(self, section: object) -> bool:
        return isinstance(section, str) and self.has_section(section)

    def has_section(self, section: str) -> bool:
        return section != ROOT_SECTION and self._parser.has_section(section)

    def add_section(self, section: str, comment: Optional[str] = None) -> configparser.SectionProxy:
        if not self._parser.has_section(section):
            self._parser.add_section(section)
        if comment:
            self._comments[section] = comment
        return self._parser[section]

    def has_key(self, section: str, key: str) -> bool:
        return self._parser.has_option(section, key)

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        return self._parser.get(section, key, fallback=fallback)

    def set(self, section: str, key: str, value: str) -> None:
        self._parser.set(section, key, str(value))

    def comment(self, section: str) -> Optional[str]:
        return self._comments.get(section)

    def key_comment(self, section: str, key: str) -> Optional[str]:
        return self._key_comments.get((section, key))

    def root_items(self) -> Dict[str, str]:
        """第一个段标题之前的键。"""
        return dict(self._parser[ROOT_SECTION])

    def get_section(self, name: str) -> configparser.SectionProxy:
        """返回可原地修改的段；段不存在属于调用约定被破坏。"""
        if not self.has_section(name):
            raise MissingSectionError(name)
        return self._parser[name]

    def as_dict(self) -> Dict[str, Dict[str, str]]:
        return {name: dict(self._parser[name]) for name in self.sections()}

    def _render_keys(self, section: str) -> List[str]:
        chunks: List[str] = []
        for key, value in self._parser[section].items():
            chunks.extend(_comment_lines(self._key_comments.get((section, key))))
            # 不支持续行，换行折叠为空格
            value = " ".join(str(value).splitlines())
            chunks.append(f"{key} = {value}".rstrip(" "))
        return chunks

    def render(self) -> str:
        """按 ini 文本格式序列化。"""
        chunks = self._render_keys(ROOT_SECTION)
        if chunks:
            chunks.append("")
        for name in self.sections():
            chunks.extend(_comment_lines(self._comments.get(name)))
            chunks.append(f"[{name}]")
            chunks.extend(self._render_keys(name))
            chunks.append("")
        return "\n".join(chunks) + ("\n" if chunks else "")

    def write(self) -> Path:
        return save_document(self)

    def __repr__(self) -> str:
        return f"ConfigDocument(path={str(self._path)!r}, sections={self.sections()!r})"


def save_document(doc: ConfigDocument) -> Path:
    """写回磁盘，必要时创建父目录。写入非原子。"""
    cfg_path = doc.path
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    with cfg_path.open("w", encoding="utf-8") as fh:
        fh.write(doc.render())
    return cfg_path


__all__ = [
    "ROOT_SECTION",
    "ConfigDocument",
    "new_parser",
    "preprocess",
    "save_document",
]
