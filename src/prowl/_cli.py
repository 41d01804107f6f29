"""Prowl CLI — prowl routes.

Entry point for the ``prowl`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the prowl CLI."""
    parser = argparse.ArgumentParser(
        prog="prowl",
        description="Filesystem route auto-loading for Chirp applications.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # prowl routes
    routes_parser = subparsers.add_parser(
        "routes",
        help="List the routes a routes folder would mount",
    )
    routes_parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    routes_parser.add_argument(
        "--routes-folder", default=None, help="Routes folder (default: <root>/routes)",
    )
    routes_parser.add_argument("--prefix", default=None, help="URL prefix")
    routes_parser.add_argument(
        "--exclude",
        action="append",
        default=None,
        dest="exclusions",
        help="Name or regex to exclude (repeatable)",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from prowl import __version__

    return __version__


def _format_table(rows: list[tuple[str, str, str]]) -> list[str]:
    """Format METHOD / PATH / NAME rows as aligned lines."""
    max_methods = max([len(r[0]) for r in rows] + [6])
    max_path = max([len(r[1]) for r in rows] + [4])
    fmt = f"{{:<{max_methods}}}  {{:<{max_path}}}  {{}}"
    lines = [fmt.format("METHOD", "PATH", "NAME")]
    sep_len = max_methods + max_path + 4 + max((len(r[2]) for r in rows), default=4)
    lines.append("-" * min(sep_len, 80))
    lines.extend(fmt.format(*row) for row in rows)
    return lines


def run_routes(args: argparse.Namespace) -> int:
    """Dry-run a scan and print the routes it would register."""
    from prowl._errors import ProwlError
    from prowl.config_loader import load_config
    from prowl.loader import RouteLoader
    from prowl.mount import RecordingApp

    try:
        config = load_config(
            Path(args.root),
            routes_folder=args.routes_folder,
            prefix=args.prefix,
            exclusions=args.exclusions,
        )
        loader = RouteLoader(config).load(RecordingApp())
    except ProwlError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    routes = loader.loaded_routes
    if routes:
        rows = [
            (", ".join(m.upper() for m in record.methods), record.route, record.name)
            for record in routes
        ]
        print("\n".join(_format_table(rows)))
    else:
        print("No routes found.")

    skipped = loader.skipped_modules
    if skipped:
        print(f"\nSkipped {len(skipped)} module(s):")
        for event in skipped:
            print(f"  {event.path}: {event.reason}")
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        sys.exit(run_routes(args))


if __name__ == "__main__":
    main()
