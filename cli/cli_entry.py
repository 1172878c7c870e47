"""
cli_entry.py - CLI Entry Point

Lists the files, opens the list in an editor, then applies the edits.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from core import (
    RenameOptions,
    RenameToolError,
    EditorError,
    __version__,
    build_filename_list,
    build_plan,
    check_trash_available,
    edit_names,
    execute_plan,
    external_launcher,
    resolve_editor,
)
from core.edit_session import Launcher
from core.logger_helper import configure_logging, get_logger

from .cli_output import init_colors, report

logger = get_logger(__name__)


def delete_char_arg(value: str) -> str:
    """argparse type for the delete marker"""
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"must be a single character, got '{value}'")
    if value.isspace():
        raise argparse.ArgumentTypeError("cannot be whitespace")
    return value


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="editrename",
        description="Bulk renaming utility: edit the list of filenames in your editor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Each line of the list is the new name of the file on the same line.
Start a line with the delete character to remove that file.

Examples:
  # Rename files of the current directory
  editrename

  # Rename some files, deleting through the trash
  editrename --trash a.txt b.txt

  # Use another editor and delete character
  editrename -e "code --wait" -d %
"""
    )

    parser.add_argument("files", nargs="*", metavar="FILE", help="Files to rename (default: all files in the directory)")
    parser.add_argument("--delchar", "-d", type=delete_char_arg, default="#", metavar="CHARACTER",
                        help="Specify what deletion mark to use. Default '#'")
    parser.add_argument("--editor", "-e", type=str, default=None, metavar="PROGRAM", help="Specify what editor to use")
    parser.add_argument("--force", "-f", action="store_true", help="Allow overwriting of existing files")
    parser.add_argument("--silent", "-s", action="store_true", help="Only report errors")
    parser.add_argument("--trash", "-t", action="store_true", help="Send files to trash instead of deleting them")
    parser.add_argument("--directory", "-C", type=str, default=".", metavar="DIR",
                        help="Directory the files are in (default: current directory)")
    parser.add_argument("--gui", action="store_true", help="Edit the list in a window instead of an editor")
    parser.add_argument("--verbose", "-v", action="store_true", help="Print debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s v{__version__}")

    return parser


def options_from_args(args: argparse.Namespace) -> RenameOptions:
    """Build run configuration from parsed arguments"""
    return RenameOptions(
        directory=Path(args.directory),
        delete_char=args.delchar,
        force=args.force,
        silent=args.silent,
        trash=args.trash,
        editor=args.editor,
        use_gui=args.gui,
    )


def make_launcher(options: RenameOptions) -> Launcher:
    """Pick the editor for the edit session"""
    if options.use_gui:
        try:
            from gui import edit_in_window
        except ImportError as e:
            raise EditorError(
                f"Unable to start the editor window, please ensure PySide6 is installed ({e})"
            ) from e
        return edit_in_window

    return external_launcher(resolve_editor(options.editor))


def run(
    options: RenameOptions,
    names: Optional[Sequence[str]] = None,
    launcher: Optional[Launcher] = None,
) -> int:
    """
    Run one complete edit-and-apply cycle

    Args:
        options: Run configuration
        names: Explicit names (None or empty scans options.directory)
        launcher: Editor to use (defaults to make_launcher(options))

    Returns:
        Exit code

    Raises:
        RenameToolError: Any validation or execution failure
    """
    check_trash_available(options)

    filenames = build_filename_list(names, options)
    if not filenames:
        logger.debug("No input files, nothing to do")
        return 0

    if launcher is None:
        launcher = make_launcher(options)

    edited = edit_names(list(filenames), launcher)
    plan = build_plan(filenames, edited, options)

    if plan.is_noop:
        logger.debug("No changes")
        return 0

    execute_plan(plan, options, reporter=report)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)
    init_colors()

    try:
        return run(options_from_args(args), args.files)
    except RenameToolError as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
