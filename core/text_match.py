"""
text_match.py - Edited Line Checks

Provides delete-marker detection and target name validation
"""

import os
from typing import Optional, Tuple

_SEPARATORS = tuple(s for s in (os.sep, os.altsep, "/") if s)


def is_delete_marked(line: str, delete_char: str) -> bool:
    """
    Check if an edited line marks its file for deletion

    Only the first character matters; anything after it is ignored.

    Args:
        line: Edited line
        delete_char: Delete marker character

    Returns:
        Whether the line starts with the marker
    """
    return bool(line) and line[0] == delete_char


def has_separator(name: str) -> bool:
    """Whether name contains a path separator"""
    return any(sep in name for sep in _SEPARATORS)


def is_valid_target(name: str) -> Tuple[bool, Optional[str]]:
    """
    Check if an edited line can be used as a rename target

    Args:
        name: Target name

    Returns:
        (is_valid, error_reason)
    """
    if not name:
        return False, "Filename cannot be empty"

    if "\0" in name:
        return False, "Filename contains a NUL character"

    if name in (".", ".."):
        return False, f"Filename cannot be '{name}'"

    if has_separator(name):
        return False, "Filename cannot contain a path separator"

    return True, None
