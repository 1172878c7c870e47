#!/usr/bin/env python3
"""
Bulk Renaming Tool - Main Entry

Usage:
    python main.py                    # Edit all files of the current directory
    python main.py a.txt b.txt        # Edit the given files
    python main.py --gui              # Edit the list in a window (needs PySide6)
    python main.py --trash            # Delete through the trash (needs gio)
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def main():
    """Main entry point"""
    from cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
