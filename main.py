#!/usr/bin/env python3
"""
Recursive Rename Tool - Main Entry

Supports:
- GUI mode (default startup)
- CLI mode (--cli or -c parameter)

Usage:
    python main.py                                  # GUI mode (default)
    python main.py --cli                            # CLI interactive mode
    python main.py -c search ./dir --old foo        # CLI command mode
    python main.py -c replace ./dir --old foo --new bar
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def main():
    """Main entry point"""
    # Check if CLI should be started
    if "--cli" in sys.argv or "-c" in sys.argv:
        argv = [arg for arg in sys.argv[1:] if arg not in ("--cli", "-c")]

        # CLI mode
        from subrename.cli import main as cli_main
        return cli_main(argv)

    # Default to starting GUI
    try:
        from subrename.gui import main as gui_main
        return gui_main()
    except ImportError as e:
        print(f"Error: Unable to start GUI, please ensure PySide6 is installed")
        print(f"Detailed error: {e}")
        print("\nInstall command: pip install PySide6")
        print("\nTo use CLI mode, run:")
        print("    python main.py --cli")
        print("or  python main.py -c")
        return 1


if __name__ == "__main__":
    sys.exit(main())
