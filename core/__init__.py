"""
core - Bulk Rename Tool Core Module

Provides filename collection, the edit session, plan building and execution.
"""

__version__ = "0.1.0"

from .models_fs import (
    Action,
    EditedList,
    ExecutionPlan,
    FilenameList,
    PlanEntry,
    RenameOptions,
    RenamePath,
)

from .errors import (
    RenameToolError,
    PlanValidationError,
    InvalidInputError,
    MismatchedCountError,
    NameCollisionError,
    DuplicateTargetError,
    RenameError,
    RemovalError,
    TrashError,
    EditorError,
)

from .scan_files import (
    scan_directory,
    collect_explicit,
    build_filename_list,
)

from .edit_session import (
    EditSession,
    edit_names,
    external_launcher,
    resolve_editor,
)

from .plan_rename import (
    build_plan,
    classify,
    validate_pairing,
)

from .exec_rename import (
    execute_plan,
    ExecutionResult,
    RENAMED,
    REMOVED,
    TRASHED,
)

from .safety_checks import (
    binary_exists,
    check_trash_available,
)

__all__ = [
    # Data models
    "Action",
    "EditedList",
    "ExecutionPlan",
    "FilenameList",
    "PlanEntry",
    "RenameOptions",
    "RenamePath",
    "ExecutionResult",

    # Errors
    "RenameToolError",
    "PlanValidationError",
    "InvalidInputError",
    "MismatchedCountError",
    "NameCollisionError",
    "DuplicateTargetError",
    "RenameError",
    "RemovalError",
    "TrashError",
    "EditorError",

    # Scanning
    "scan_directory",
    "collect_explicit",
    "build_filename_list",

    # Editing
    "EditSession",
    "edit_names",
    "external_launcher",
    "resolve_editor",

    # Planning
    "build_plan",
    "classify",
    "validate_pairing",

    # Execution
    "execute_plan",
    "RENAMED",
    "REMOVED",
    "TRASHED",

    # Safety checks
    "binary_exists",
    "check_trash_available",
]
