"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Phase A: deletions, direct renames, and moves of cyclic entries to
  temporary names, in original order
- Trash dispatch: queued deletions sent to the trash program in batches
- Phase B: temporary names renamed to their final names
- Stop at the first failure (no rollback); completed steps have already
  been reported
"""

import os
import subprocess
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from .errors import RemovalError, RenameError, RenameToolError, TrashError
from .logger_helper import get_logger
from .models_fs import Action, ExecutionPlan, RenameOptions, RenamePath

logger = get_logger(__name__)

RENAMED = "renamed"
REMOVED = "removed"
TRASHED = "trashed"

TEMP_PREFIX = ".__tmp_rename__"

# (event, source name, destination name or None)
Reporter = Callable[[str, str, Optional[str]], None]


@dataclass
class ExecutionResult:
    """Rename execution result"""
    renamed: List[Tuple[str, str]] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    trashed: List[str] = field(default_factory=list)
    temp_paths: List[RenamePath] = field(default_factory=list)

    @property
    def mutation_count(self) -> int:
        return len(self.renamed) + len(self.removed) + len(self.trashed)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            "Execution Result:",
            f"  - Renamed: {len(self.renamed)}",
            f"  - Removed: {len(self.removed)}",
            f"  - Trashed: {len(self.trashed)}",
        ]
        return "\n".join(lines)


def generate_temp_name(directory: Path) -> str:
    """
    Generate a temporary name that is unused in directory

    The name has a fixed length whatever the original name is. It is probed
    again until nothing exists under it; another process could still take it
    before the rename happens.
    """
    while True:
        temp_name = f"{TEMP_PREFIX}{uuid.uuid4().hex}"
        if not os.path.lexists(Path(directory) / temp_name):
            return temp_name


def rename_file(options: RenameOptions, old_name: str, new_name: str) -> None:
    """Rename old_name to new_name inside options.directory"""
    try:
        # Overwrites an existing target on every platform
        os.replace(options.resolve(old_name), options.resolve(new_name))
    except OSError as e:
        raise RenameError(old_name, new_name, e.strerror or str(e)) from e


def remove_file(options: RenameOptions, name: str) -> None:
    """Delete name inside options.directory"""
    try:
        os.remove(options.resolve(name))
    except OSError as e:
        raise RemovalError(name, e.strerror or str(e)) from e


def chunked(items: Sequence[str], size: int) -> Iterator[Sequence[str]]:
    """Yield consecutive slices of at most size items"""
    if size < 1:
        raise ValueError(f"Batch size must be positive, got {size}")
    for start in range(0, len(items), size):
        yield items[start:start + size]


def trash_batch(command: str, paths: Sequence[str]) -> None:
    """
    Run `command trash -- path...` once and wait for it

    Paths should be absolute so none of them can be read as an option.

    Raises:
        TrashError: The program could not be started or exited nonzero
    """
    argv = [command, "trash", "--", *paths]
    logger.debug("Trashing %d files with %s", len(paths), command)
    try:
        completed = subprocess.run(argv, check=False)
    except OSError as e:
        raise TrashError(f"Could not start '{command}': {e}") from e

    if completed.returncode != 0:
        raise TrashError(f"'{command} trash' exited with code {completed.returncode}.")


def execute_plan(
    plan: ExecutionPlan,
    options: Optional[RenameOptions] = None,
    reporter: Optional[Reporter] = None,
) -> ExecutionResult:
    """
    Execute a validated plan

    Args:
        plan: Plan from build_plan()
        options: Run configuration
        reporter: Called once per completed operation unless options.silent

    Returns:
        Execution result

    Raises:
        RenameError, RemovalError, TrashError: On the first failure; files
            still under a temporary name are logged as warnings first
    """
    if options is None:
        options = RenameOptions()

    result = ExecutionResult()

    def emit(event: str, src: str, dst: Optional[str] = None) -> None:
        if reporter is not None and not options.silent:
            reporter(event, src, dst)

    pending: List[RenamePath] = []
    trash_queue: List[str] = []

    try:
        _run_phase_a(plan, options, result, pending, trash_queue, emit)

        # Trashed names must be gone before any pending rename lands on them
        if trash_queue:
            for batch in chunked(trash_queue, options.trash_batch_size):
                trash_batch(options.trash_command, [os.path.abspath(options.resolve(name)) for name in batch])
                for name in batch:
                    result.trashed.append(name)
                    emit(TRASHED, name)

        # Phase B; entries leave pending once they have landed
        while pending:
            rp = pending[0]
            rename_file(options, rp.temp_name, rp.new_name)
            pending.pop(0)
            result.renamed.append((rp.initial_name, rp.new_name))
            emit(RENAMED, rp.initial_name, rp.new_name)
    except RenameToolError:
        for rp in pending:
            logger.warning(
                "'%s' was left as '%s' (intended name '%s')",
                rp.initial_name, rp.temp_name, rp.new_name,
            )
        raise

    logger.debug(result.summary())
    return result


def _run_phase_a(
    plan: ExecutionPlan,
    options: RenameOptions,
    result: ExecutionResult,
    pending: List[RenamePath],
    trash_queue: List[str],
    emit: Callable[..., None],
) -> None:
    # Every original name in a cycle is vacated before Phase B
    for entry in plan.entries:
        if entry.action is Action.UNCHANGED:
            continue

        if entry.action is Action.DELETE:
            remove_file(options, entry.old)
            result.removed.append(entry.old)
            emit(REMOVED, entry.old)

        elif entry.action is Action.TRASH:
            trash_queue.append(entry.old)

        elif entry.action is Action.DIRECT_RENAME:
            rename_file(options, entry.old, entry.new)
            result.renamed.append((entry.old, entry.new))
            emit(RENAMED, entry.old, entry.new)

        elif entry.action is Action.CYCLIC_RENAME:
            temp_name = generate_temp_name(options.directory)
            rename_file(options, entry.old, temp_name)
            rp = RenamePath(initial_name=entry.old, temp_name=temp_name, new_name=entry.new)
            pending.append(rp)
            result.temp_paths.append(rp)
            logger.debug("Moved '%s' to temporary name '%s'", entry.old, temp_name)
