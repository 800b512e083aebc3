"""Property definition diff: base item rules plus property specific refinement."""

from typing import Optional

from .item_diff import ChildItemDiff, Operation, diff_item_base, is_refinable
from .model import PropertyDefinition, PropertyType
from .severity import Severity


def _constraints_severity(old_def: PropertyDefinition, new_def: PropertyDefinition, severity: Severity) -> Severity:
    # Constraints are ORed, so only adding the first one or dropping one
    # while others remain makes the property more restrictive.
    old_constraints = set(old_def.value_constraints)
    new_constraints = set(new_def.value_constraints)

    if not old_constraints and new_constraints:
        return Severity.MAJOR
    if new_constraints and not new_constraints.issuperset(old_constraints):
        return Severity.MAJOR
    return severity


def _type_and_multiplicity_severity(
    old_def: PropertyDefinition,
    new_def: PropertyDefinition,
    severity: Severity,
) -> Severity:
    # Plain assignments: a multiplicity change overrides the required type outcome.
    if old_def.required_type != new_def.required_type:
        if new_def.required_type == PropertyType.UNDEFINED:
            severity = Severity.MINOR
        else:
            severity = Severity.MAJOR
    if old_def.multiple != new_def.multiple:
        if new_def.multiple:
            severity = Severity.MINOR
        else:
            severity = Severity.MAJOR
    return severity


def refine_property_severity(
    operation: Operation,
    severity: Severity,
    old_def: Optional[PropertyDefinition],
    new_def: Optional[PropertyDefinition],
) -> Severity:
    """Apply property rules on top of a base (operation, severity) result.

    Value constraints are checked first. Required type and multiplicity are
    only looked at when the severity is still exactly TRIVIAL afterwards.
    defaultValues never escalate.
    """
    if not is_refinable(operation, severity):
        return severity

    severity = _constraints_severity(old_def, new_def, severity)

    if severity == Severity.TRIVIAL:
        severity = _type_and_multiplicity_severity(old_def, new_def, severity)
    return severity


def diff_property(
    old_def: Optional[PropertyDefinition],
    new_def: Optional[PropertyDefinition],
) -> ChildItemDiff:
    """Classify the change of one property definition."""
    operation, severity = diff_item_base(old_def, new_def)
    severity = refine_property_severity(operation, severity, old_def, new_def)
    return ChildItemDiff(
        kind="property",
        old_def=old_def,
        new_def=new_def,
        operation=operation,
        severity=severity,
    )
