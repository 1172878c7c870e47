"""
models_fs.py - Core Data Structure Definitions

Contains:
- FilenameList: Original names, in display order, with a sorted lookup copy
- Action: Classification of one (original, edited) pair
- PlanEntry: One classified pair
- RenamePath: Pending rename through a temporary name
- ExecutionPlan: Classified pairs ready for execution
- RenameOptions: Run configuration
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from .sort_rules import contains_sorted, sorted_copy

DEFAULT_DELETE_CHAR = "#"
DEFAULT_TRASH_COMMAND = "gio"

# 200 argv slots in the original batch, minus program, verb and terminator
DEFAULT_TRASH_BATCH_SIZE = 197

# Edited list: one string per original name, newline-stripped
EditedList = Tuple[str, ...]


class Action(Enum):
    """What happens to one original name"""
    UNCHANGED = "unchanged"
    DELETE = "delete"
    TRASH = "trash"
    DIRECT_RENAME = "direct_rename"
    CYCLIC_RENAME = "cyclic_rename"


class FilenameList:
    """
    Ordered, deduplicated original names

    Keeps the insertion order for display and for pairing with the edited
    list, and a private sorted copy for binary-search membership tests.
    """

    __slots__ = ("_names", "_sorted")

    def __init__(self, names: Iterable[str] = ()):
        seen = set()
        ordered = []
        for name in names:
            if name not in seen:
                seen.add(name)
                ordered.append(name)
        self._names: Tuple[str, ...] = tuple(ordered)
        self._sorted: Tuple[str, ...] = tuple(sorted_copy(self._names))

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    def has(self, name: str) -> bool:
        """Whether name is one of the original names (O(log n))"""
        return contains_sorted(self._sorted, name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __getitem__(self, index: int) -> str:
        return self._names[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilenameList):
            return self._names == other._names
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"FilenameList({list(self._names)!r})"


@dataclass(frozen=True)
class PlanEntry:
    """Single classified (original, edited) pair"""
    index: int                      # Position in the original order
    old: str                        # Original name
    new: str                        # Edited line
    action: Action

    @property
    def is_mutation(self) -> bool:
        """Whether this entry touches the filesystem"""
        return self.action is not Action.UNCHANGED


@dataclass(frozen=True)
class RenamePath:
    """Rename that goes through a temporary name"""
    initial_name: str
    temp_name: str
    new_name: str


@dataclass
class RenameOptions:
    """Run configuration"""
    directory: Path = field(default_factory=lambda: Path("."))
    delete_char: str = DEFAULT_DELETE_CHAR
    force: bool = False             # Allow overwriting files outside the batch
    silent: bool = False            # Only report errors
    trash: bool = False             # Send deleted files to trash
    editor: Optional[str] = None    # Editor override
    use_gui: bool = False           # Edit the list in the built-in window
    trash_command: str = DEFAULT_TRASH_COMMAND
    trash_batch_size: int = DEFAULT_TRASH_BATCH_SIZE

    def resolve(self, name: str) -> Path:
        """Path of a name relative to the working directory"""
        return Path(self.directory) / name


@dataclass
class ExecutionPlan:
    """Classified pairs, in original order"""
    entries: List[PlanEntry] = field(default_factory=list)

    def of(self, action: Action) -> List[PlanEntry]:
        """Entries with the given action, in original order"""
        return [e for e in self.entries if e.action is action]

    @property
    def mutations(self) -> List[PlanEntry]:
        return [e for e in self.entries if e.is_mutation]

    @property
    def is_noop(self) -> bool:
        return not self.mutations

    def summary(self) -> str:
        """Generate summary"""
        counts = {action: len(self.of(action)) for action in Action}
        lines = [
            "Rename Plan Summary:",
            f"  - Unchanged: {counts[Action.UNCHANGED]}",
            f"  - Renames: {counts[Action.DIRECT_RENAME]}",
            f"  - Renames via temporary name: {counts[Action.CYCLIC_RENAME]}",
            f"  - Deletions: {counts[Action.DELETE]}",
            f"  - Trash: {counts[Action.TRASH]}",
        ]
        return "\n".join(lines)
