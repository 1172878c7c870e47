"""
errors.py - Exception Hierarchy

Validation errors are raised before any filesystem change.
Execution errors abort the run on the first failure, without rollback.
"""

from typing import Optional


class RenameToolError(Exception):
    """Base class for all errors reported to the user"""


class PlanValidationError(RenameToolError):
    """Raised while validating the edited list (nothing has been touched yet)"""


class InvalidInputError(PlanValidationError):
    """Input or target name that cannot be used"""

    def __init__(self, message: str, name: Optional[str] = None):
        super().__init__(message)
        self.name = name


class MismatchedCountError(PlanValidationError):
    """Edited list does not have one line per original name"""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Mismatched number of lines. New filename list contains {actual} "
            f"entries while original list contains {expected}."
        )
        self.expected = expected
        self.actual = actual


class NameCollisionError(PlanValidationError):
    """Target exists on disk and is not part of the batch"""

    def __init__(self, path: str):
        super().__init__(f"File '{path}' already exists (use --force to overwrite).")
        self.path = path


class DuplicateTargetError(PlanValidationError):
    """Two entries resolve to the same target name"""

    def __init__(self, name: str):
        super().__init__(f"Output filenames are not unique ('{name}').")
        self.name = name


class RenameError(RenameToolError):
    """A rename failed at the OS level"""

    def __init__(self, src: str, dst: str, reason: str = ""):
        message = f"Could not rename '{src}' to '{dst}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.src = src
        self.dst = dst


class RemovalError(RenameToolError):
    """A deletion failed at the OS level"""

    def __init__(self, path: str, reason: str = ""):
        message = f"Could not delete file '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path


class TrashError(RenameToolError):
    """The trash program is missing or reported a failure"""


class EditorError(RenameToolError):
    """No editor could be found, or the editor did not exit cleanly"""
