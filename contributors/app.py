import argparse
from pathlib import Path
from typing import List, Optional

from . import __version__
from .aliases import SEEN_ALSO_AS
from .database import all_names
from .env import load_env, settings
from .logger import get_logger
from .names import config_version, mapping_updated_since, resolve_all
from .registry import get_registry
from .rules import describe_special_cases
from .schema import validate_alias_table


def _raw_names(args: argparse.Namespace) -> List[str]:
    names = list(args.names or [])
    if args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            raise SystemExit(f"Input file not found: {input_path}")
        with input_path.open("r", encoding="utf-8") as f:
            names.extend(line.rstrip("\n") for line in f)
    if not names:
        raise SystemExit("No names given. Pass names as arguments or use --input.")
    return names


def cmd_resolve(args: argparse.Namespace) -> None:
    resolved = resolve_all(_raw_names(args), fallback=args.fallback)
    for raw, names in resolved.items():
        print(f"{raw!r} -> {', '.join(sorted(names)) or '(none)'}")
    if args.summary:
        get_logger().log_metrics_summary()


def cmd_canonical(args: argparse.Namespace) -> None:
    registry = get_registry()
    for name in args.names:
        print(registry.canonical_name_for(name))


def cmd_check(args: argparse.Namespace) -> None:
    errors = validate_alias_table(SEEN_ALSO_AS)
    if errors:
        print("Invalid:")
        for e in errors:
            print(f" - {e}")
        raise SystemExit(2)
    print(f"Valid ({len(get_registry())} aliases)")


def cmd_rules(args: argparse.Namespace) -> None:
    for line in describe_special_cases():
        print(line)


def cmd_version(args: argparse.Namespace) -> None:
    print(config_version())


def cmd_stale(args: argparse.Namespace) -> None:
    if mapping_updated_since(args.since):
        print("updated")
        return
    print("unchanged")
    raise SystemExit(1)


def cmd_list(args: argparse.Namespace) -> None:
    db_path = Path(args.db) if args.db else settings()["db_path"]
    if not db_path.exists():
        print(f"Database not found: {db_path}")
        return
    names = sorted(all_names(db_path))
    if not names:
        print("No contributors in database.")
        return
    print(f"Found {len(names)} contributors in {db_path}:\n")
    for name in names:
        print(name)


def main(argv: Optional[List[str]] = None):
    # Load .env if present (CONTRIBUTORS_DB, CONTRIBUTORS_LOG_LEVEL, etc.)
    load_env()
    config = settings()
    get_logger(level=config["log_level"], log_dir=config["log_dir"])

    parser = argparse.ArgumentParser(prog="contributors", description="Resolve author names from commit logs")
    parser.add_argument("--version", action="store_true", help="Show version")

    subparsers = parser.add_subparsers(dest="command")
    res = subparsers.add_parser("resolve", help="Resolve raw log names to canonical contributor names")
    res.add_argument("names", nargs="*", help="Raw names as found in the log")
    res.add_argument("--input", help="Text file with one raw name per line")
    res.add_argument("--fallback", help="Name used when a raw string carries no author (default: the raw string)")
    res.add_argument("--summary", action="store_true", help="Log resolution metrics when done")
    res.set_defaults(func=cmd_resolve)

    can = subparsers.add_parser("canonical", help="Canonicalize names through the alias table only")
    can.add_argument("names", nargs="+", help="Names to canonicalize")
    can.set_defaults(func=cmd_canonical)

    chk = subparsers.add_parser("check", help="Validate the alias table")
    chk.set_defaults(func=cmd_check)

    rul = subparsers.add_parser("rules", help="List the special cases in evaluation order")
    rul.set_defaults(func=cmd_rules)

    ver = subparsers.add_parser("version", help="Print the name configuration version marker")
    ver.set_defaults(func=cmd_version)

    stl = subparsers.add_parser("stale", help="Tell whether the name configuration changed since a marker")
    stl.add_argument("--since", required=True, help="Marker printed by a previous 'version' run")
    stl.set_defaults(func=cmd_stale)

    lst = subparsers.add_parser("list", help="List all contributors in the database")
    lst.add_argument("--db", help="Path to SQLite database (default: CONTRIBUTORS_DB or data/contributors.db)")
    lst.set_defaults(func=cmd_list)

    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        args.func(args)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
