from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from .backends import BACKENDS, DEFAULT_BACKENDS
from .core import Config
from .errors import EasyConfError

_ABSENT = object()


def _print_value(value: Any, *, as_json: bool) -> None:
    """Print strings as is and everything else as JSON."""
    if as_json or not isinstance(value, str):
        print(json.dumps(value, ensure_ascii=False))
    else:
        print(value)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def get_cmd(args: argparse.Namespace) -> int:
    config = Config(args.file, ro=True)
    query = args.keys[0] if len(args.keys) == 1 else list(args.keys)
    options: dict[str, Any] = {"required": args.required}
    if args.default is not None:
        options["default"] = args.default
    elif not args.required:
        options["default"] = _ABSENT
    value = config.get(query, **options)
    if value is _ABSENT:
        return 1
    _print_value(value, as_json=args.as_json)
    return 0


def has_cmd(args: argparse.Namespace) -> int:
    config = Config(args.file, ro=True)
    return 0 if config.has(args.key) else 1


def set_cmd(args: argparse.Namespace) -> int:
    config = Config(args.file, rw=True, compact=args.compact)
    value: Any = args.value
    if args.as_json:
        try:
            value = json.loads(args.value)
        except json.JSONDecodeError as exc:
            print(f"Invalid JSON value: {exc}", file=sys.stderr)
            return 2
    config.set(args.key, value)
    config.save()
    return 0


def show_cmd(args: argparse.Namespace) -> int:
    config = Config(args.file, ro=True)
    if args.format == "yaml":
        print(yaml.safe_dump(config.data, sort_keys=False, allow_unicode=True).rstrip())
    else:
        print(json.dumps(config.data, indent=2, ensure_ascii=False))
    return 0


def backends_cmd(_: argparse.Namespace) -> int:
    for name in DEFAULT_BACKENDS:
        print(f"{name}\t{' '.join(BACKENDS[name].suffixes)}")
    return 0


def build_parser(prog: str = "easyconf") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description="Query and edit structured config files.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_get = subparsers.add_parser("get", help="Print the value at KEY; extra keys are fallbacks.")
    p_get.add_argument("file", type=Path)
    p_get.add_argument("keys", nargs="+", metavar="KEY")
    p_get.add_argument("--default", help="Value printed when no key is found")
    p_get.add_argument("--required", action="store_true", help="Fail if no key is found")
    p_get.add_argument("--json", dest="as_json", action="store_true")
    p_get.set_defaults(func=get_cmd)

    p_has = subparsers.add_parser("has", help="Exit 0 if top-level KEY exists.")
    p_has.add_argument("file", type=Path)
    p_has.add_argument("key")
    p_has.set_defaults(func=has_cmd)

    p_set = subparsers.add_parser("set", help="Set top-level KEY to VALUE and save.")
    p_set.add_argument("file", type=Path)
    p_set.add_argument("key")
    p_set.add_argument("value")
    p_set.add_argument("--json", dest="as_json", action="store_true", help="Decode VALUE as JSON")
    p_set.add_argument("--compact", action="store_true", help="Write dense output where supported")
    p_set.set_defaults(func=set_cmd)

    p_show = subparsers.add_parser("show", help="Dump the whole config.")
    p_show.add_argument("file", type=Path)
    p_show.add_argument("--as", dest="format", choices=["json", "yaml"], default="json")
    p_show.set_defaults(func=show_cmd)

    p_backends = subparsers.add_parser("backends", help="List built-in backends.")
    p_backends.set_defaults(func=backends_cmd)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s:%(name)s:%(message)s")
    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 1
    try:
        return int(func(args))
    except EasyConfError as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
