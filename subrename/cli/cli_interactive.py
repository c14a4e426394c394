"""
cli_interactive.py - Interactive CLI

Provides a menu-style interactive interface
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional
import os

from ..core import (
    Renamer, RenameOptions, RenameToolError,
    ListReporter, ConsoleReporter,
)


def clear_screen():
    """Clear screen"""
    os.system('cls' if os.name == 'nt' else 'clear')


def print_header(title: str):
    """Print header"""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)
    print()


def input_directory(prompt: str = "Please enter directory path") -> Optional[Path]:
    """Input and validate directory"""
    while True:
        path_str = input(f"{prompt} (q to return): ").strip()
        if path_str.lower() == 'q':
            return None

        path = Path(path_str).expanduser()
        if path.is_dir():
            return path
        else:
            print(f"Error: Directory does not exist: {path}")


def input_bool(prompt: str, default: bool = False) -> bool:
    """Input boolean value"""
    default_str = "Y/n" if default else "y/N"
    value = input(f"{prompt} ({default_str}): ").strip().lower()
    if not value:
        return default
    return value == 'y'


def input_old_substring() -> Optional[str]:
    """Input the substring to replace (empty returns None)"""
    old_str = input("String to replace: ")
    if not old_str:
        print("Replacement string cannot be empty")
        return None
    return old_str


def menu_search_only():
    """Search only menu"""
    print_header("Search Entries")

    directory = input_directory("Please enter root directory")
    if directory is None:
        return

    old_str = input_old_substring()
    if old_str is None:
        input("Press Enter to return...")
        return

    case_sensitive = input_bool("Case sensitive", default=True)

    print(f"\nSearching {directory} ...")
    try:
        candidates = Renamer(RenameOptions(old=old_str, case_sensitive=case_sensitive)).collect(directory)
    except RenameToolError as e:
        print(f"Error: {e}")
        input("Press Enter to return...")
        return

    if not candidates:
        print("No matching entries found")
        input("Press Enter to return...")
        return

    print(f"\nFound {len(candidates)} entries:")
    print("-" * 80)
    for i, path in enumerate(candidates):
        if i >= 50:
            print(f"... and {len(candidates) - 50} more entries")
            break
        print(f"  {path}")
    print("-" * 80)

    input("\nPress Enter to return...")


def menu_search_replace():
    """Search and replace rename menu"""
    print_header("Search and Replace Rename")

    directory = input_directory("Please enter root directory")
    if directory is None:
        return

    old_str = input_old_substring()
    if old_str is None:
        input("Press Enter to return...")
        return

    # Not stripped: surrounding spaces may be part of the replacement
    new_str = input("Replace with (leave empty to delete): ")
    case_sensitive = input_bool("Case sensitive", default=True)
    skip_errors = input_bool("Skip collisions and errors", default=False)

    options = RenameOptions(
        old=old_str,
        new=new_str,
        case_sensitive=case_sensitive,
        skip_errors=skip_errors,
    )

    # Preview first
    print("\nGenerating preview...")
    try:
        preview = Renamer(
            replace(options, dry_run=True), ListReporter()
        ).run(directory)
    except RenameToolError as e:
        print(f"\nError: {e}")
        input("Press Enter to return...")
        return

    if preview.success_count == 0:
        print("No entries need renaming")
        input("Press Enter to return...")
        return

    print(f"\nWill perform {preview.success_count} rename operations:")
    print("-" * 70)
    for op in preview.success[:15]:
        print(f"  {op.src.name:<30} -> {op.dst.name}")
    if preview.success_count > 15:
        print(f"  ... and {preview.success_count - 15} more operations")
    print("-" * 70)

    if preview.collision_count > 0:
        print(f"Note: {preview.collision_count} entries will be skipped because the destination exists")

    print()
    if not input_bool("Confirm execution", default=False):
        print("Cancelled")
        input("Press Enter to return...")
        return

    print("\nExecuting...")
    try:
        Renamer(options, ConsoleReporter()).run(directory)
    except RenameToolError as e:
        print(f"\nError: {e}")

    input("\nPress Enter to return...")


def interactive_mode() -> int:
    """Interactive mode main loop"""
    while True:
        clear_screen()
        print_header("Recursive Rename Tool")

        print("Please select function:")
        print()
        print("  1. Search entries")
        print("  2. Search and replace rename")
        print()
        print("  q. Exit")
        print()

        choice = input("Please select (1/2/q): ").strip().lower()

        if choice == 'q':
            print("Goodbye!")
            return 0
        elif choice == '1':
            menu_search_only()
        elif choice == '2':
            menu_search_replace()
        else:
            print("Invalid choice")
            input("Press Enter to continue...")


if __name__ == "__main__":
    interactive_mode()
