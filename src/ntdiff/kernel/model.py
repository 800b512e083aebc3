"""Pydantic models for node type definitions (read-only input to the diff)."""

from collections import Counter
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


RESIDUAL_NAME = "*"


class PropertyType(str, Enum):
    """Required type of a property definition."""
    UNDEFINED = "undefined"
    STRING = "String"
    BINARY = "Binary"
    LONG = "Long"
    DOUBLE = "Double"
    DECIMAL = "Decimal"
    DATE = "Date"
    BOOLEAN = "Boolean"
    NAME = "Name"
    PATH = "Path"
    REFERENCE = "Reference"
    WEAKREFERENCE = "WeakReference"
    URI = "URI"


class OnParentVersion(str, Enum):
    """Behaviour of a child item when its parent is checked in."""
    COPY = "COPY"
    VERSION = "VERSION"
    INITIALIZE = "INITIALIZE"
    COMPUTE = "COMPUTE"
    IGNORE = "IGNORE"
    ABORT = "ABORT"


def _check_names(values: Tuple[str, ...], what: str) -> Tuple[str, ...]:
    for value in values:
        if not value or not value.strip():
            raise ValueError(f"{what} must not contain empty names")
    return values


class ItemDefinition(BaseModel):
    """Fields shared by property and child node definitions."""
    name: str  # Item name, or "*" for a residual definition
    mandatory: bool = False
    auto_created: bool = False
    protected: bool = False
    on_parent_version: OnParentVersion = OnParentVersion.COPY

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Item definition name must not be empty")
        return v

    def defines_residual(self) -> bool:
        """True if this definition matches any otherwise unmatched item name."""
        return self.name == RESIDUAL_NAME


class PropertyDefinition(ItemDefinition):
    """A property definition."""
    required_type: PropertyType = PropertyType.UNDEFINED
    multiple: bool = False
    value_constraints: Tuple[str, ...] = Field(default=(), description="Constraint expressions (ORed)")
    default_values: Tuple[str, ...] = ()


class ChildNodeDefinition(ItemDefinition):
    """A child node definition."""
    required_primary_types: Tuple[str, ...] = ()
    default_primary_type: Optional[str] = None
    allows_same_name_siblings: bool = False

    @field_validator('required_primary_types')
    @classmethod
    def validate_required_primary_types(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return _check_names(v, "required_primary_types")


class NodeTypeDefinition(BaseModel):
    """A named node type definition.

    Property and child node definitions are an unordered collection: their
    order is ignored by `definitions_equal`. Supertypes are ordered.
    """
    name: str
    is_mixin: bool = False
    supertypes: Tuple[str, ...] = ()
    has_orderable_child_nodes: bool = False  # Never affects severity
    primary_item_name: Optional[str] = None  # Never affects severity
    property_definitions: Tuple[PropertyDefinition, ...] = ()
    child_node_definitions: Tuple[ChildNodeDefinition, ...] = ()

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Node type name must not be empty")
        return v

    @field_validator('supertypes')
    @classmethod
    def validate_supertypes(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return _check_names(v, "supertypes")


def definitions_equal(a: NodeTypeDefinition, b: NodeTypeDefinition) -> bool:
    """Structural equality of two node type definitions.

    Scalar fields and the supertype sequence must match exactly; property and
    child node definitions are compared as multisets.
    """
    if (
        a.name != b.name
        or a.is_mixin != b.is_mixin
        or a.supertypes != b.supertypes
        or a.has_orderable_child_nodes != b.has_orderable_child_nodes
        or a.primary_item_name != b.primary_item_name
    ):
        return False
    return (
        Counter(a.property_definitions) == Counter(b.property_definitions)
        and Counter(a.child_node_definitions) == Counter(b.child_node_definitions)
    )
