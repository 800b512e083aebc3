"""Child node definition diff: base item rules plus child node specific refinement."""

from typing import Optional

from .item_diff import ChildItemDiff, Operation, diff_item_base, is_refinable
from .model import ChildNodeDefinition
from .severity import Severity


def refine_child_node_severity(
    operation: Operation,
    severity: Severity,
    old_def: Optional[ChildNodeDefinition],
    new_def: Optional[ChildNodeDefinition],
) -> Severity:
    """Apply child node rules on top of a base (operation, severity) result.

    Disallowing same-name siblings is MAJOR. Required primary types are only
    compared while the severity is still exactly TRIVIAL: removing names
    weakens the definition (MINOR), any new name is MAJOR.
    defaultPrimaryType never escalates.
    """
    if not is_refinable(operation, severity):
        return severity

    if old_def.allows_same_name_siblings and not new_def.allows_same_name_siblings:
        severity = Severity.MAJOR

    if severity == Severity.TRIVIAL:
        old_types = list(old_def.required_primary_types)
        new_types = list(new_def.required_primary_types)
        if old_types != new_types:
            if all(t in old_types for t in new_types):
                severity = Severity.MINOR
            else:
                severity = Severity.MAJOR
    return severity


def diff_child_node(
    old_def: Optional[ChildNodeDefinition],
    new_def: Optional[ChildNodeDefinition],
) -> ChildItemDiff:
    """Classify the change of one child node definition."""
    operation, severity = diff_item_base(old_def, new_def)
    severity = refine_child_node_severity(operation, severity, old_def, new_def)
    return ChildItemDiff(
        kind="child_node",
        old_def=old_def,
        new_def=new_def,
        operation=operation,
        severity=severity,
    )
