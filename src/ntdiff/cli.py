"""ntdiff CLI: classify node type definition changes."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import List, Optional


EXIT_OK = 0
EXIT_ERROR = 1
EXIT_REJECTED = 2


def _build_parser() -> argparse.ArgumentParser:
    try:
        ntdiff_version = get_version("ntdiff")
    except PackageNotFoundError:
        ntdiff_version = "dev"

    parser = argparse.ArgumentParser(
        prog="ntdiff",
        description="ntdiff: classify changes between node type definition versions"
    )
    parser.add_argument("--version", action="version", version=f"ntdiff {ntdiff_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--from",
        dest="from_path",
        type=Path,
        required=True,
        help="Path to the old node type definition(s)"
    )
    parent_parser.add_argument(
        "--to",
        dest="to_path",
        type=Path,
        required=True,
        help="Path to the new node type definition(s)"
    )
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    diff_parser = subparsers.add_parser(
        "diff",
        help="Report the severity of every node type change",
        parents=[parent_parser]
    )
    diff_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format: text (one report per node type) or json (canonical JSON)"
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Check whether the changed node types may be re-registered",
        parents=[parent_parser]
    )
    check_parser.add_argument(
        "--fail-on",
        choices=["TRIVIAL", "MINOR", "MAJOR"],
        default="MAJOR",
        type=str.upper,
        help="Reject changes at or above this severity (default: MAJOR)"
    )
    return parser


def _run_diff(args) -> int:
    from ._internal.canonical_json import canonical_dumps
    from ._internal.io.definitions import load_definitions_from_path
    from .api import build_diff_result
    from .kernel.diff import compare

    old_defs = {d.name: d for d in load_definitions_from_path(args.from_path.resolve())}
    new_defs = {d.name: d for d in load_definitions_from_path(args.to_path.resolve())}

    if args.format == "json":
        from .api import diff_all
        result = diff_all(old_defs.values(), new_defs.values())
        if not args.quiet:
            print(canonical_dumps(result.model_dump()))
        return EXIT_OK

    if args.quiet:
        return EXIT_OK

    for name in sorted(old_defs.keys() & new_defs.keys()):
        print(compare(old_defs[name], new_defs[name]).report())
    for name in sorted(new_defs.keys() - old_defs.keys()):
        print(f"[ADDED] {name}")
    for name in sorted(old_defs.keys() - new_defs.keys()):
        print(f"[REMOVED] {name}")
    return EXIT_OK


def _run_check(args) -> int:
    from ._internal.io.definitions import load_definitions_from_path
    from .api import check_registration

    old_defs = {d.name: d for d in load_definitions_from_path(args.from_path.resolve())}
    new_defs = {d.name: d for d in load_definitions_from_path(args.to_path.resolve())}

    rejected = 0
    for name in sorted(old_defs.keys() & new_defs.keys()):
        verdict = check_registration(old_defs[name], new_defs[name], fail_on=args.fail_on)
        if not verdict.ok:
            rejected += 1
        if not args.quiet:
            status = "OK" if verdict.ok else "REJECTED"
            print(f"[{status}] {name}: {verdict.severity} ({verdict.reason})")

    if not args.quiet:
        print(f"  Checked: {len(old_defs.keys() & new_defs.keys())}")
        print(f"  Rejected: {rejected}")
    return EXIT_REJECTED if rejected else EXIT_OK


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point for ntdiff commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(EXIT_ERROR)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "diff":
            exit_code = _run_diff(args)
        else:
            exit_code = _run_check(args)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
