"""
cli_entry.py - CLI Entry Point

Supports:
- Command-line argument mode
- Interactive mode
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..core import (
    Renamer, RenameOptions, RenameToolError, RenameResult,
    ListReporter, ConsoleReporter, LoggingReporter,
)
from .cli_interactive import interactive_mode


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="subrename",
        description="Recursively rename files and directories containing a substring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  subrename

  # List entries whose names contain "foo"
  subrename search ./project --old foo

  # Replace "foo" with "bar" in every name, preview first
  subrename replace ./project --old foo --new bar --dry-run

  # Remove "(copy)" regardless of case, keep going past collisions
  subrename replace ./photos --old "(copy)" -i --skip-errors --yes
"""
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Subcommands")

    # search subcommand
    search_parser = subparsers.add_parser("search", help="List matching entries")
    search_parser.add_argument("directory", type=str, help="Root directory")
    search_parser.add_argument("--old", "-o", type=str, required=True, help="Substring to look for")
    search_parser.add_argument("--ignore-case", "-i", action="store_true", help="Case-insensitive match")
    search_parser.add_argument("--skip-errors", action="store_true", help="Continue past unreadable directories")
    search_parser.add_argument("--follow-symlinks", action="store_true", help="Descend into symlinked directories")

    # replace subcommand
    replace_parser = subparsers.add_parser("replace", help="Substring replacement rename")
    replace_parser.add_argument("directory", type=str, help="Root directory")
    replace_parser.add_argument("--old", "-o", type=str, required=True, help="Substring to replace")
    replace_parser.add_argument("--new", "-n", type=str, default="", help="Replacement substring")
    replace_parser.add_argument("--ignore-case", "-i", action="store_true", help="Case-insensitive match")
    replace_parser.add_argument("--dry-run", "-d", action="store_true", help="Preview only, do not execute")
    replace_parser.add_argument("--skip-errors", action="store_true", help="Skip collisions and failures instead of aborting")
    replace_parser.add_argument("--follow-symlinks", action="store_true", help="Descend into symlinked directories")
    replace_parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")

    return parser


def _options_from_args(args, dry_run: bool = False) -> RenameOptions:
    return RenameOptions(
        old=args.old,
        new=getattr(args, "new", ""),
        case_sensitive=not args.ignore_case,
        dry_run=dry_run,
        skip_errors=args.skip_errors,
        follow_symlinks=args.follow_symlinks,
    )


def _reporter(verbose: bool):
    if verbose:
        return LoggingReporter()
    return ConsoleReporter()


def print_preview(result: RenameResult, limit: int = 20) -> None:
    """Print the would-be renames of a dry-run result"""
    ops = result.success
    print(f"Will perform {len(ops)} rename operations:")
    print("-" * 80)
    for op in ops[:limit]:
        print(f"  {str(op.src):<50} -> {op.dst.name}")
    if len(ops) > limit:
        print(f"  ... and {len(ops) - limit} more operations")
    print("-" * 80)
    for op in result.skipped:
        print(f"  Warning: skip {op.src} ({op.message})")


def cmd_search(args) -> int:
    """Handle search command"""
    directory = Path(args.directory)
    if not directory.exists():
        print(f"Error: Directory does not exist: {directory}")
        return 1

    renamer = Renamer(_options_from_args(args), _reporter(args.verbose))
    candidates = renamer.collect(directory)

    if not candidates:
        print("No matching entries found")
        return 0

    print(f"Found {len(candidates)} entries:")
    print("-" * 80)
    for path in candidates:
        kind = "dir " if path.is_dir() else "file"
        print(f"  [{kind}] {path}")
    print("-" * 80)

    return 0


def cmd_replace(args) -> int:
    """Handle replace command"""
    directory = Path(args.directory)
    if not directory.exists():
        print(f"Error: Directory does not exist: {directory}")
        return 1

    if not args.dry_run and not args.yes:
        # Preview with a dry-run pass, then confirm
        preview = Renamer(_options_from_args(args, dry_run=True), ListReporter()).run(directory)
        if preview.success_count == 0:
            print("No entries need renaming")
            return 0
        print_preview(preview)
        confirm = input("\nConfirm execution? (y/N): ").strip().lower()
        if confirm != 'y':
            print("Cancelled")
            return 0
        print("\nExecuting...")

    options = _options_from_args(args, dry_run=args.dry_run)
    Renamer(options, _reporter(args.verbose)).run(directory)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if args.command is None:
        # No subcommand, enter interactive mode
        return interactive_mode()

    try:
        if args.command == "search":
            return cmd_search(args)
        elif args.command == "replace":
            return cmd_replace(args)
    except RenameToolError as e:
        print(f"Error: {e}")
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
