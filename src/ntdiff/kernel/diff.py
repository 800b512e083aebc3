"""Classification of changes between two versions of a node type definition."""

import logging
from dataclasses import dataclass, field
from typing import List

from .child_node_diff import diff_child_node
from .collection import CollectionDiff, match_items
from .item_diff import ChildItemDiff, InvalidInputError
from .model import NodeTypeDefinition, definitions_equal
from .property_diff import diff_property
from .severity import Severity


logger = logging.getLogger(__name__)

_ITEM_LABELS = {
    "property": "PropDefDiff",
    "child_node": "ChildNodeDefDiff",
}


@dataclass(frozen=True)
class NodeTypeDefDiff:
    """Result of comparing two versions of the same node type definition.

    Built once by `compare()`; never mutated afterwards.
    """
    old_def: NodeTypeDefinition
    new_def: NodeTypeDefinition
    severity: Severity
    mixin_severity: Severity = Severity.NONE
    supertypes_severity: Severity = Severity.NONE
    property_diffs: CollectionDiff = field(default_factory=CollectionDiff)
    child_node_diffs: CollectionDiff = field(default_factory=CollectionDiff)

    @property
    def node_type_name(self) -> str:
        return self.old_def.name

    @property
    def is_modified(self) -> bool:
        return self.severity != Severity.NONE

    @property
    def is_trivial(self) -> bool:
        return self.severity == Severity.TRIVIAL

    @property
    def is_minor(self) -> bool:
        return self.severity == Severity.MINOR

    @property
    def is_major(self) -> bool:
        return self.severity == Severity.MAJOR

    def report(self) -> str:
        """Render a deterministic, human readable summary of this diff."""
        lines = [
            "NodeTypeDefDiff[",
            f"\tnodeTypeName={self.node_type_name},",
            f"\tmixinFlagDiff={self.mixin_severity.label},",
            f"\tsupertypesDiff={self.supertypes_severity.label},",
            "\tpropertyDifferences=[",
        ]
        lines.extend(_item_lines(list(self.property_diffs)))
        lines.append("\t],")
        lines.append("\tchildNodeDifferences=[")
        lines.extend(_item_lines(list(self.child_node_diffs)))
        lines.append("\t]")
        lines.append("]")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.report()


def _item_lines(diffs: List[ChildItemDiff]) -> List[str]:
    lines = []
    for i, diff in enumerate(diffs):
        separator = "," if i < len(diffs) - 1 else ""
        lines.append(
            f"\t\t{_ITEM_LABELS[diff.kind]}[itemName={diff.name}, "
            f"type={diff.severity.label}, operation={diff.operation.value}]{separator}"
        )
    return lines


def supertypes_diff(old_def: NodeTypeDefinition, new_def: NodeTypeDefinition) -> Severity:
    """MAJOR if the supertype sequences differ (order matters)."""
    return Severity.MAJOR if tuple(old_def.supertypes) != tuple(new_def.supertypes) else Severity.NONE


def mixin_flag_diff(old_def: NodeTypeDefinition, new_def: NodeTypeDefinition) -> Severity:
    """MAJOR if the mixin flag flipped."""
    return Severity.MAJOR if old_def.is_mixin != new_def.is_mixin else Severity.NONE


def compare(old_def: NodeTypeDefinition, new_def: NodeTypeDefinition) -> NodeTypeDefDiff:
    """Classify the change from `old_def` to `new_def`.

    Both definitions must be given and share the same node type name.
    orderableChildNodes and primaryItemName are never inspected: changing
    them alone is TRIVIAL.

    Raises:
        InvalidInputError: If a definition is missing or the names differ.
    """
    if old_def is None or new_def is None:
        raise InvalidInputError("Both old and new node type definitions must be given")
    if old_def.name != new_def.name:
        raise InvalidInputError(
            f"Node type names must match: '{old_def.name}' != '{new_def.name}'"
        )

    if definitions_equal(old_def, new_def):
        logger.debug("Node type '%s' unchanged", old_def.name)
        return NodeTypeDefDiff(old_def=old_def, new_def=new_def, severity=Severity.NONE)

    supertypes_severity = supertypes_diff(old_def, new_def)
    mixin_severity = mixin_flag_diff(old_def, new_def)
    property_diffs = match_items(
        old_def.property_definitions, new_def.property_definitions, diff_property
    )
    child_node_diffs = match_items(
        old_def.child_node_definitions, new_def.child_node_definitions, diff_child_node
    )

    severity = Severity.TRIVIAL
    for contribution in (supertypes_severity, mixin_severity, property_diffs.severity, child_node_diffs.severity):
        severity = severity.raise_to(contribution)

    logger.debug(
        "Node type '%s' modified: %s (supertypes=%s, mixin=%s, properties=%s, child nodes=%s)",
        old_def.name, severity.label, supertypes_severity.label, mixin_severity.label,
        property_diffs.severity.label, child_node_diffs.severity.label,
    )

    return NodeTypeDefDiff(
        old_def=old_def,
        new_def=new_def,
        severity=severity,
        mixin_severity=mixin_severity,
        supertypes_severity=supertypes_severity,
        property_diffs=property_diffs,
        child_node_diffs=child_node_diffs,
    )
