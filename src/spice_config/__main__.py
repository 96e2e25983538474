"""spice-config 命令行入口。

用法：
  spice-config [--config PATH] path
  spice-config [--config PATH] show
  spice-config [--config PATH] get SECTION [KEY]
  spice-config [--config PATH] set SECTION KEY VALUE
  spice-config [--config PATH] check
  spice-config probe
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from spice_config.config import (
    ConfigDocument,
    ConfigPaths,
    missing_entries,
    open_config,
)
from spice_config.core.exceptions import ConfigParseError, MissingSectionError
from spice_config.services import probes


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spice-config", description="Manage Spicetify config.ini")
    parser.add_argument(
        "--config",
        default=None,
        help="config file path (default: $SPICE_CONFIG_HOME/config.ini or ~/.spicetify/config.ini)",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("path", help="print config file path")
    sub.add_parser("show", help="print every section and key")
    p_get = sub.add_parser("get", help="print a section or a single value")
    p_get.add_argument("section")
    p_get.add_argument("key", nargs="?")
    p_set = sub.add_parser("set", help="change a value and write the file")
    p_set.add_argument("section")
    p_set.add_argument("key")
    p_set.add_argument("value")
    sub.add_parser("check", help="list schema keys missing from the file, without changing it")
    sub.add_parser("probe", help="print detected Spotify and prefs paths")
    return parser


def _print_section(doc: ConfigDocument, name: str) -> None:
    comment = doc.comment(name)
    if comment:
        for line in comment.splitlines():
            print(f"; {line}")
    print(f"[{name}]")
    for key, value in doc.get_section(name).items():
        print(f"{key} = {value}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "probe":
        probe = probes.probe_for_platform()
        print(f"spotify_path = {probes.find_app_path(probe)}")
        print(f"prefs_path = {probes.find_prefs_path(probe)}")
        return 0

    cfg_path = args.config or ConfigPaths.default().config_file

    if args.command == "check":
        try:
            missing = missing_entries(ConfigDocument.read(cfg_path))
        except ConfigParseError as exc:
            print(str(exc), file=sys.stderr)
            return 1
        for section, key in missing:
            print(f"{section}.{key}")
        return 0

    doc = open_config(cfg_path)
    try:
        if args.command == "path":
            print(doc.get_path())
        elif args.command == "show":
            for index, name in enumerate(doc.sections()):
                if index:
                    print()
                _print_section(doc, name)
        elif args.command == "get":
            if args.key is None:
                _print_section(doc, args.section)
            else:
                section = doc.get_section(args.section)
                if args.key not in section:
                    print(f'Key "{args.key}" does not exist in [{args.section}].', file=sys.stderr)
                    return 1
                print(section[args.key])
        elif args.command == "set":
            doc.get_section(args.section)[args.key] = args.value
            doc.write()
    except MissingSectionError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
