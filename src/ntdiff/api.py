"""Public API for the ntdiff package.

High-level functions that return complete, JSON-friendly results.
Callers should use these instead of importing from _internal.
"""

import os
from pathlib import Path
from typing import Dict, Iterable, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from ntdiff._internal.io.definitions import (
    DefinitionLoadError,
    load_definition_from_path,
    parse_definitions,
)
from ntdiff.kernel.diff import NodeTypeDefDiff, compare
from ntdiff.kernel.item_diff import ChildItemDiff
from ntdiff.kernel.model import NodeTypeDefinition
from ntdiff.kernel.severity import Severity


DefinitionInput = Union[NodeTypeDefinition, Dict, str, os.PathLike, None]


class ItemDiffEntry(BaseModel):
    """One classified property or child node definition change."""
    name: str
    kind: Literal["property", "child_node"]
    operation: str  # ADDED | REMOVED | MODIFIED | UNCHANGED
    severity: str  # NONE | TRIVIAL | MINOR | MAJOR


class DiffResult(BaseModel):
    """Stable result model for a node type diff."""
    node_type: str
    severity: str
    modified: bool
    mixin_flag: str
    supertypes: str
    properties: List[ItemDiffEntry] = Field(default_factory=list)
    child_nodes: List[ItemDiffEntry] = Field(default_factory=list)


class BatchDiffResult(BaseModel):
    """Diffs of every node type present in two batches of definitions."""
    diffs: Dict[str, DiffResult] = Field(default_factory=dict)  # node type name -> diff
    added_node_types: List[str] = Field(default_factory=list)
    removed_node_types: List[str] = Field(default_factory=list)
    severity: str = Severity.NONE.label  # Max over diffs


class RegistrationVerdict(BaseModel):
    """Whether re-registering a changed node type is allowed."""
    node_type: str
    ok: bool
    severity: str
    fail_on: str
    reason: str


def _to_definition(value: DefinitionInput) -> Optional[NodeTypeDefinition]:
    """Normalize a definition, dict or path into a NodeTypeDefinition."""
    if value is None or isinstance(value, NodeTypeDefinition):
        return value
    if isinstance(value, dict):
        definitions = parse_definitions(value)
        if len(definitions) != 1:
            raise DefinitionLoadError(
                f"expected exactly one node type definition, found {len(definitions)}"
            )
        return definitions[0]
    if isinstance(value, (str, os.PathLike)):
        return load_definition_from_path(Path(value))
    raise TypeError(f"Unsupported definition input: {type(value).__name__}")


def _item_entry(item_diff: ChildItemDiff) -> ItemDiffEntry:
    return ItemDiffEntry(
        name=item_diff.name,
        kind=item_diff.kind,
        operation=item_diff.operation.value,
        severity=item_diff.severity.label,
    )


def build_diff_result(result: NodeTypeDefDiff) -> DiffResult:
    """Convert a kernel diff into its JSON-friendly form."""
    return DiffResult(
        node_type=result.node_type_name,
        severity=result.severity.label,
        modified=result.is_modified,
        mixin_flag=result.mixin_severity.label,
        supertypes=result.supertypes_severity.label,
        properties=[_item_entry(d) for d in result.property_diffs],
        child_nodes=[_item_entry(d) for d in result.child_node_diffs],
    )


def diff(from_def: DefinitionInput, to_def: DefinitionInput) -> DiffResult:
    """
    Classify the change between two versions of one node type definition.

    Args:
        from_def: Old definition (model, dict, or path to a JSON file)
        to_def: New definition (model, dict, or path to a JSON file)

    Returns:
        DiffResult

    Raises:
        InvalidInputError: If a definition is missing or names differ
        DefinitionLoadError: If a file or dict cannot be parsed
    """
    return build_diff_result(compare(_to_definition(from_def), _to_definition(to_def)))


def diff_all(
    old_defs: Iterable[NodeTypeDefinition],
    new_defs: Iterable[NodeTypeDefinition],
) -> BatchDiffResult:
    """Pair two batches of definitions by node type name and diff each pair."""
    old_by_name = {d.name: d for d in old_defs}
    new_by_name = {d.name: d for d in new_defs}

    diffs: Dict[str, DiffResult] = {}
    severity = Severity.NONE
    for name in sorted(old_by_name.keys() & new_by_name.keys()):
        result = compare(old_by_name[name], new_by_name[name])
        severity = severity.raise_to(result.severity)
        diffs[name] = build_diff_result(result)

    return BatchDiffResult(
        diffs=diffs,
        added_node_types=sorted(new_by_name.keys() - old_by_name.keys()),
        removed_node_types=sorted(old_by_name.keys() - new_by_name.keys()),
        severity=severity.label,
    )


def check_registration(
    from_def: DefinitionInput,
    to_def: DefinitionInput,
    fail_on: Union[Severity, str] = Severity.MAJOR,
) -> RegistrationVerdict:
    """
    Decide whether a changed node type may be re-registered as is.

    A change whose severity reaches `fail_on` is rejected: existing content
    would have to be migrated first.

    Raises:
        ValueError: If `fail_on` is below TRIVIAL
    """
    threshold = fail_on if isinstance(fail_on, Severity) else Severity.from_label(fail_on)
    if threshold < Severity.TRIVIAL:
        raise ValueError(f"fail_on must be TRIVIAL, MINOR or MAJOR, got {threshold.label}")
    result = compare(_to_definition(from_def), _to_definition(to_def))

    ok = result.severity < threshold
    if not result.is_modified:
        reason = "unchanged"
    elif ok:
        reason = f"{result.severity.label} change is below the {threshold.label} threshold"
    else:
        reason = (
            f"{result.severity.label} change reaches the {threshold.label} threshold; "
            "existing content must be migrated before re-registration"
        )

    return RegistrationVerdict(
        node_type=result.node_type_name,
        ok=ok,
        severity=result.severity.label,
        fail_on=threshold.label,
        reason=reason,
    )


__all__ = [
    "diff",
    "diff_all",
    "check_registration",
    "build_diff_result",
    "DiffResult",
    "BatchDiffResult",
    "ItemDiffEntry",
    "RegistrationVerdict",
    "DefinitionLoadError",
]
