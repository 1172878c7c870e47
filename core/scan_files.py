"""
scan_files.py - Filename Set Ingestion

Collects the original names, either from explicit arguments or from the
regular files and symbolic links of a single directory (non-recursive).
"""

import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .errors import InvalidInputError
from .logger_helper import get_logger
from .models_fs import FilenameList, RenameOptions
from .text_match import has_separator, is_delete_marked

logger = get_logger(__name__)


def _check_delete_char(name: str, delete_char: str) -> None:
    if is_delete_marked(name, delete_char):
        raise InvalidInputError(
            f"Input filenames ('{name}') cannot begin with delete character '{delete_char}'.",
            name=name,
        )


def scan_directory(
    directory: Path,
    delete_char: str,
    include_hidden: bool = True,
) -> List[str]:
    """
    Scan single directory (non-recursive)

    Only regular files and symbolic links are collected; symbolic links are
    never followed, so a link to a directory counts as a link.

    Args:
        directory: Target directory
        delete_char: Delete marker; no collected name may start with it
        include_hidden: Whether to include names starting with '.'

    Returns:
        Names sorted by plain string order
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise InvalidInputError(f"Directory does not exist: {directory}")

    names: List[str] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if not (entry.is_symlink() or entry.is_file(follow_symlinks=False)):
                continue

            if not include_hidden and entry.name.startswith('.'):
                continue

            _check_delete_char(entry.name, delete_char)
            names.append(entry.name)

    names.sort()
    logger.debug("Scanned %d entries in %s", len(names), directory)
    return names


def collect_explicit(
    names: Iterable[str],
    directory: Path,
    delete_char: str,
) -> List[str]:
    """
    Validate names given on the command line

    Args:
        names: Names in argument order
        directory: Directory the names are relative to
        delete_char: Delete marker

    Returns:
        Names in argument order, duplicates removed
    """
    result: List[str] = []
    seen = set()
    for name in names:
        if name in seen:
            continue
        seen.add(name)

        _check_delete_char(name, delete_char)

        if has_separator(name):
            raise InvalidInputError(
                f"Input filenames ('{name}') must be plain names; use --directory for other directories.",
                name=name,
            )

        # lexists() does not follow symlinks, so dangling links are accepted
        if not os.path.lexists(Path(directory) / name):
            raise InvalidInputError(f"File '{name}' does not exist.", name=name)

        result.append(name)

    return result


def build_filename_list(
    names: Optional[Sequence[str]],
    options: RenameOptions,
) -> FilenameList:
    """
    Build the Filename Set for a run

    Args:
        names: Explicit names, or None/empty to scan options.directory
        options: Run configuration

    Returns:
        FilenameList (possibly empty)
    """
    if names:
        collected = collect_explicit(names, options.directory, options.delete_char)
    else:
        collected = scan_directory(options.directory, options.delete_char)
    return FilenameList(collected)
