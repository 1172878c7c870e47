"""
edit_session.py - Edit Session

Writes the names to a scratch file, hands it to an editor, waits for the
editor to exit, then reads the edited lines back.

The editor is any callable taking the scratch file path and returning an
exit status; external_launcher() builds one that spawns a program.
"""

import os
import shlex
import subprocess
import tempfile
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Sequence

from .errors import EditorError
from .logger_helper import get_logger
from .models_fs import EditedList
from .safety_checks import find_binary

logger = get_logger(__name__)

ENCODING = "utf-8"
# Undecodable bytes in names survive the round trip
ENCODING_ERRORS = "surrogateescape"

FALLBACK_EDITORS = ("nano", "vi")

Launcher = Callable[[Path], int]


def write_scratch_file(names: Sequence[str], directory: Optional[str] = None) -> Path:
    """
    Write one name per line to a new temporary file

    Args:
        names: Names in display order
        directory: Where to create the file (defaults to the system temp dir)

    Returns:
        Path of the scratch file
    """
    fd, tmp_path = tempfile.mkstemp(prefix="editrename_", suffix=".txt", dir=directory)
    with os.fdopen(fd, "w", encoding=ENCODING, errors=ENCODING_ERRORS, newline="\n") as f:
        for name in names:
            f.write(f"{name}\n")
    return Path(tmp_path)


def read_scratch_file(path: Path) -> EditedList:
    """
    Read the edited lines back

    Lines are split on '\\n' only; the empty element after the final newline
    is dropped and a trailing '\\r' is stripped from each line.

    Args:
        path: Scratch file

    Returns:
        Edited lines in file order
    """
    with open(path, "r", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
        content = f.read()

    if not content:
        return ()

    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()

    return tuple(line[:-1] if line.endswith("\r") else line for line in lines)


def resolve_editor(
    override: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    path: Optional[str] = None,
) -> List[str]:
    """
    Work out which editor to run

    Order: explicit override, $VISUAL, $EDITOR, then nano or vi on the
    search path. The chosen string is split like a shell would split it,
    so values such as "code --wait" work.

    Args:
        override: Editor given on the command line
        environ: Environment (defaults to os.environ)
        path: Search path for the fallback editors

    Returns:
        Editor argv, without the file argument

    Raises:
        EditorError: No editor could be found, or the editor string is malformed
    """
    if environ is None:
        environ = os.environ

    candidates = [override, environ.get("VISUAL"), environ.get("EDITOR")]
    for candidate in candidates:
        if candidate and candidate.strip():
            try:
                return shlex.split(candidate)
            except ValueError as e:
                raise EditorError(f"Could not parse editor command '{candidate}': {e}") from e

    for name in FALLBACK_EDITORS:
        if find_binary(name, path):
            return [name]

    raise EditorError("Could not find any editor from environment.")


def launch_editor(command: Sequence[str], path: Path) -> int:
    """
    Run the editor on path and wait for it to exit

    Args:
        command: Editor argv, without the file argument
        path: File to edit

    Returns:
        Editor exit status

    Raises:
        EditorError: The editor could not be started
    """
    argv = [*command, str(path)]
    logger.debug("Launching editor: %s", argv)
    try:
        completed = subprocess.run(argv, check=False)
    except OSError as e:
        raise EditorError(f"Could not start editor '{command[0]}': {e}") from e
    return completed.returncode


def external_launcher(command: Sequence[str]) -> Launcher:
    """Launcher that runs an external editor program"""
    command = list(command)

    def _launch(path: Path) -> int:
        return launch_editor(command, path)

    return _launch


class EditSession:
    """
    Scratch file lifetime plus one editor run

    Usage:
        with EditSession(names, launcher) as session:
            edited = session.run()

    The scratch file is removed when the block exits, whatever happened.
    """

    def __init__(self, names: Sequence[str], launcher: Launcher, directory: Optional[str] = None):
        self.names = list(names)
        self.launcher = launcher
        self.directory = directory
        self.path: Optional[Path] = None

    def __enter__(self) -> "EditSession":
        self.path = write_scratch_file(self.names, self.directory)
        logger.debug("Scratch file: %s", self.path)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.path is not None:
            self.path.unlink(missing_ok=True)
            self.path = None

    def run(self) -> EditedList:
        """
        Run the editor and return the edited lines

        Raises:
            EditorError: The editor exited with a nonzero status
        """
        if self.path is None:
            raise RuntimeError("EditSession.run() called outside of a with block")

        status = self.launcher(self.path)
        if status != 0:
            raise EditorError(f"Editor returned exit code {status}.")

        return read_scratch_file(self.path)


def edit_names(names: Sequence[str], launcher: Launcher) -> EditedList:
    """Run a complete edit session over names"""
    with EditSession(names, launcher) as session:
        return session.run()
