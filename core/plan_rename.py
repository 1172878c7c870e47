"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Validate the (original, edited) pairing before anything is touched
- Classify each pair as unchanged / rename / delete / trash
- Output ExecutionPlan

A target that is itself one of the original names is always renamed through
a temporary name. Every member of a rename cycle has such a target, so cycles
of any length are handled without walking the rename graph.
"""

import os
from typing import Callable, List, Optional, Sequence

from .errors import (
    DuplicateTargetError,
    InvalidInputError,
    MismatchedCountError,
    NameCollisionError,
)
from .logger_helper import get_logger
from .models_fs import Action, ExecutionPlan, FilenameList, PlanEntry, RenameOptions
from .sort_rules import find_adjacent_duplicate, sorted_copy
from .text_match import is_delete_marked, is_valid_target

logger = get_logger(__name__)

ExistsProbe = Callable[[str], bool]


def _default_exists(options: RenameOptions) -> ExistsProbe:
    # lexists() so that a dangling symlink still counts as taken
    return lambda name: os.path.lexists(options.resolve(name))


def _is_real_directory(path) -> bool:
    return os.path.isdir(path) and not os.path.islink(path)


def validate_pairing(
    filenames: FilenameList,
    edited: Sequence[str],
    options: RenameOptions,
    exists: Optional[ExistsProbe] = None,
) -> None:
    """
    Validate the edited list against the original names

    Delete-marked lines are left out of every check below the count check.

    Args:
        filenames: Original names
        edited: Edited lines, same order as filenames
        options: Run configuration (delete_char, force)
        exists: Existence probe for a target name (defaults to the filesystem)

    Raises:
        MismatchedCountError: Line count differs from the number of names
        InvalidInputError: A target name is unusable, or is an existing
            directory (rejected even with force)
        NameCollisionError: A target outside the batch already exists
        DuplicateTargetError: Two lines name the same target
    """
    if len(edited) != len(filenames):
        raise MismatchedCountError(expected=len(filenames), actual=len(edited))

    if exists is None:
        exists = _default_exists(options)

    targets: List[str] = []
    for old, new in zip(filenames, edited):
        if is_delete_marked(new, options.delete_char):
            continue

        valid, error = is_valid_target(new)
        if not valid:
            raise InvalidInputError(f"Invalid new name for '{old}': {error}", name=new)

        # Names from the batch are vacated during execution; anything else on
        # disk would be overwritten
        if not filenames.has(new):
            target = options.resolve(new)
            if _is_real_directory(target):
                raise InvalidInputError(f"Cannot overwrite directory '{target}'.", name=new)
            if not options.force and exists(new):
                raise NameCollisionError(str(target))

        targets.append(new)

    duplicate = find_adjacent_duplicate(sorted_copy(targets))
    if duplicate is not None:
        raise DuplicateTargetError(duplicate)


def classify(old: str, new: str, filenames: FilenameList, options: RenameOptions) -> Action:
    """
    Classify one (original, edited) pair

    Args:
        old: Original name
        new: Edited line
        filenames: Original names
        options: Run configuration (delete_char, trash)

    Returns:
        Action for the pair
    """
    if new == old:
        return Action.UNCHANGED

    if is_delete_marked(new, options.delete_char):
        return Action.TRASH if options.trash else Action.DELETE

    if filenames.has(new):
        return Action.CYCLIC_RENAME

    return Action.DIRECT_RENAME


def build_plan(
    filenames: FilenameList,
    edited: Sequence[str],
    options: Optional[RenameOptions] = None,
    exists: Optional[ExistsProbe] = None,
) -> ExecutionPlan:
    """
    Validate and classify the edited list

    Args:
        filenames: Original names
        edited: Edited lines, same order as filenames
        options: Run configuration
        exists: Existence probe for a target name (defaults to the filesystem)

    Returns:
        ExecutionPlan with one entry per original name, in original order
    """
    if options is None:
        options = RenameOptions()

    validate_pairing(filenames, edited, options, exists)

    plan = ExecutionPlan()
    for i, (old, new) in enumerate(zip(filenames, edited)):
        plan.entries.append(PlanEntry(index=i, old=old, new=new, action=classify(old, new, filenames, options)))

    logger.debug(plan.summary())
    return plan
