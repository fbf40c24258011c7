"""
typeid_sdk.cli
──────────────
Command-line entry point, installed as ``typeid``:

    typeid new user -n 3
    typeid parse user_01h45y0sxkfmntta78gqs1vsw6
    typeid from-uuid device 01890be9-b248-777e-964e-af1d244f997d
    typeid validate user_01h45y0sxkfmntta78gqs1vsw6 --prefix user -q

Errors print to stderr and exit with status 1.
"""
from __future__ import annotations

import argparse
import json
import sys

from typeid_sdk.tier0_core.logging import get_logger
from typeid_sdk.tier0_core.typeid import TypeID, is_valid

logger = get_logger(__name__)


def _describe(tid: TypeID) -> dict:
    try:
        timestamp = tid.timestamp.isoformat()
    except (ValueError, OverflowError, OSError):
        # past datetime.MAX; only possible for wrapped non-v7 values
        timestamp = None
    return {
        "typeid": str(tid),
        "prefix": tid.prefix,
        "suffix": tid.suffix,
        "uuid": tid.uuid,
        "timestamp_ms": tid.timestamp_ms,
        "timestamp": timestamp,
    }


def _cmd_new(args: argparse.Namespace) -> int:
    for _ in range(args.count):
        print(TypeID.new(args.prefix, args.time))
    logger.debug("typeid.cli.new", prefix=args.prefix, count=args.count)
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    tid = TypeID.from_string(args.text, args.prefix)
    print(json.dumps(_describe(tid), indent=2))
    return 0


def _cmd_from_uuid(args: argparse.Namespace) -> int:
    print(TypeID.from_uuid(args.prefix, args.uuid))
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    valid = is_valid(args.text, args.prefix)
    if not args.quiet:
        print("valid" if valid else "invalid")
    return 0 if valid else 1


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="typeid", description="Generate and inspect TypeIDs.")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_new = sub.add_parser("new", help="Generate new TypeIDs.")
    p_new.add_argument("prefix", nargs="?", default="", help="Entity prefix (default: none).")
    p_new.add_argument("--count", "-n", type=int, default=1)
    p_new.add_argument("--time", type=int, default=None, help="Unix milliseconds to embed.")
    p_new.set_defaults(func=_cmd_new)

    p_parse = sub.add_parser("parse", help="Decode a TypeID and print its parts as JSON.")
    p_parse.add_argument("text")
    p_parse.add_argument("--prefix", default=None, help="Require this prefix.")
    p_parse.set_defaults(func=_cmd_parse)

    p_uuid = sub.add_parser("from-uuid", help="Wrap a UUID string as a TypeID.")
    p_uuid.add_argument("prefix")
    p_uuid.add_argument("uuid")
    p_uuid.set_defaults(func=_cmd_from_uuid)

    p_valid = sub.add_parser("validate", help="Exit 0 if TEXT is a valid TypeID, 1 otherwise.")
    p_valid.add_argument("text")
    p_valid.add_argument("--prefix", default=None, help="Require this prefix.")
    p_valid.add_argument("--quiet", "-q", action="store_true")
    p_valid.set_defaults(func=_cmd_validate)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
