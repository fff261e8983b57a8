from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from .config import get_value, section_names, set_value
from .errors import IniError
from .fileio import check_suffix, read_file, write_file
from .parser import Config
from .paths import DEFAULT_FILENAME, user_config_dir, user_config_file
from .serializer import dumps

DEBUG_ENV = "INICFG_DEBUG"
STRICT_ENV = "INICFG_STRICT"

logger = logging.getLogger("inicfg")


def _configure_logging(verbose: bool) -> None:
    if not (verbose or os.environ.get(DEBUG_ENV)) or logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s:%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def _target(args: argparse.Namespace) -> Path:
    if args.user:
        return user_config_file()
    return Path(args.file)


def _load(args: argparse.Namespace) -> Config:
    return read_file(_target(args), strict=args.strict)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def show_cmd(args: argparse.Namespace) -> int:
    config = _load(args)
    if args.format == "json":
        print(json.dumps(config))
    else:
        print(dumps(config), end="")
    return 0


def sections_cmd(args: argparse.Namespace) -> int:
    for name in section_names(_load(args)):
        print(name)
    return 0


def get_cmd(args: argparse.Namespace) -> int:
    print(get_value(_load(args), args.section, args.key))
    return 0


def set_cmd(args: argparse.Namespace) -> int:
    path = _target(args)
    check_suffix(path)
    if path.exists():
        config = read_file(path, strict=args.strict)
    else:
        logger.info("Creating %s", path)
        config = {}
        path.parent.mkdir(parents=True, exist_ok=True)
    set_value(config, args.section, args.key, args.value)
    write_file(config, path)
    return 0


def paths_cmd(args: argparse.Namespace) -> int:
    data = {
        "user_config": user_config_dir(),
        "user_file": user_config_file(),
        "default_file": Path.cwd() / DEFAULT_FILENAME,
    }
    if args.as_json:
        print(json.dumps({k: str(v) for k, v in data.items()}))
    else:
        for k, v in data.items():
            print(f"{k}: {v}")
    return 0


def build_parser(prog: str = "inicfg") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description="Read and edit INI files.")
    parser.add_argument(
        "--file", default=DEFAULT_FILENAME, help="INI file to operate on (default: %(default)s)"
    )
    parser.add_argument("--user", action="store_true", help="Use the per-user config file")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=bool(os.environ.get(STRICT_ENV)),
        help="Reject empty section names",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_show = subparsers.add_parser("show", help="Print the whole file.")
    p_show.add_argument("--as", dest="format", choices=["ini", "json"], default="ini")
    p_show.set_defaults(func=show_cmd)

    p_sections = subparsers.add_parser("sections", help="List section names.")
    p_sections.set_defaults(func=sections_cmd)

    p_get = subparsers.add_parser("get", help="Print the value of KEY in SECTION.")
    p_get.add_argument("section")
    p_get.add_argument("key")
    p_get.set_defaults(func=get_cmd)

    p_set = subparsers.add_parser("set", help="Set KEY in SECTION to VALUE.")
    p_set.add_argument("section")
    p_set.add_argument("key")
    p_set.add_argument("value")
    p_set.set_defaults(func=set_cmd)

    p_paths = subparsers.add_parser("paths", help="Show inicfg paths.")
    p_paths.add_argument("--json", dest="as_json", action="store_true")
    p_paths.set_defaults(func=paths_cmd)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    try:
        return int(args.func(args))
    except (IniError, OSError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
