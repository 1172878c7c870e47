"""
safety_checks.py - Precondition Checks

Checks that external programs are available before anything is changed
"""

import shutil
from typing import Optional

from .errors import TrashError
from .models_fs import RenameOptions


def find_binary(name: str, path: Optional[str] = None) -> Optional[str]:
    """
    Locate an executable on the search path

    Args:
        name: Program name
        path: Search path (defaults to $PATH)

    Returns:
        Full path to the program, or None
    """
    return shutil.which(name, path=path)


def binary_exists(name: str, path: Optional[str] = None) -> bool:
    """Whether an executable exists on the search path"""
    return find_binary(name, path) is not None


def check_trash_available(options: RenameOptions, path: Optional[str] = None) -> None:
    """
    Fail early if trash mode is requested without a trash program

    Args:
        options: Run configuration
        path: Search path (defaults to $PATH)

    Raises:
        TrashError: Trash mode is on and the trash program is missing
    """
    if not options.trash:
        return

    if not binary_exists(options.trash_command, path):
        raise TrashError(
            f"{options.trash_command} is required for trash functionality "
            "but was not found on PATH."
        )
