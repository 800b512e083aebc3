"""Base classification of a single property or child node definition change.

Pairs an old and a new item definition, either of which may be absent, and
derives the operation and a base severity. Property and child node specific
refinements live in property_diff and child_node_diff; they only run on top
of a TRIVIAL or MINOR base result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional, Tuple

from .model import ItemDefinition
from .severity import Severity


ItemKind = Literal["property", "child_node"]


class InvalidInputError(ValueError):
    """Raised when a comparison is requested with arguments that violate the caller contract."""
    pass


class Operation(str, Enum):
    """What happened to an item definition between two versions."""
    ADDED = "ADDED"
    REMOVED = "REMOVED"
    MODIFIED = "MODIFIED"
    UNCHANGED = "UNCHANGED"


@dataclass(frozen=True)
class ChildItemDiff:
    """Classified change of one property or child node definition."""
    kind: ItemKind
    old_def: Optional[ItemDefinition]  # None if the item was added
    new_def: Optional[ItemDefinition]  # None if the item was removed
    operation: Operation
    severity: Severity

    @property
    def name(self) -> str:
        item = self.old_def if self.old_def is not None else self.new_def
        return item.name

    @property
    def is_added(self) -> bool:
        return self.operation == Operation.ADDED

    @property
    def is_removed(self) -> bool:
        return self.operation == Operation.REMOVED

    @property
    def is_modified(self) -> bool:
        return self.operation == Operation.MODIFIED


def diff_item_base(
    old_def: Optional[ItemDefinition],
    new_def: Optional[ItemDefinition],
) -> Tuple[Operation, Severity]:
    """Classify an item definition change using the rules shared by all items.

    Rules for a modified item are checked in order, first match wins:
    becoming mandatory (MAJOR), becoming residual (MINOR), any other rename
    (MAJOR), anything else (TRIVIAL).
    """
    if old_def is None and new_def is None:
        raise InvalidInputError("At least one of old_def and new_def must be given")

    if old_def is None:
        # Adding a mandatory item invalidates existing content
        return Operation.ADDED, Severity.MAJOR if new_def.mandatory else Severity.TRIVIAL

    if new_def is None:
        return Operation.REMOVED, Severity.MAJOR

    if old_def == new_def:
        return Operation.UNCHANGED, Severity.NONE

    if old_def.mandatory != new_def.mandatory and new_def.mandatory:
        return Operation.MODIFIED, Severity.MAJOR
    if not old_def.defines_residual() and new_def.defines_residual():
        return Operation.MODIFIED, Severity.MINOR
    if old_def.name != new_def.name:
        return Operation.MODIFIED, Severity.MAJOR
    # protected, autoCreated, onParentVersion and all other fields
    return Operation.MODIFIED, Severity.TRIVIAL


def is_refinable(operation: Operation, severity: Severity) -> bool:
    """True if a specialization may refine this base result."""
    return operation == Operation.MODIFIED and severity in (Severity.TRIVIAL, Severity.MINOR)
