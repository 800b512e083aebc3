"""Pytest configuration for tests.

No sys.path hacks - tests should import from the installed ntdiff package.
Definition factories are exposed as fixtures.
"""

import pytest

from ntdiff.kernel.model import (
    ChildNodeDefinition,
    NodeTypeDefinition,
    PropertyDefinition,
    PropertyType,
)


def _create_property(name: str = "title", **kwargs) -> PropertyDefinition:
    """Helper to create a property definition (STRING, single-valued by default)."""
    kwargs.setdefault("required_type", PropertyType.STRING)
    return PropertyDefinition(name=name, **kwargs)


def _create_child_node(name: str = "content", **kwargs) -> ChildNodeDefinition:
    """Helper to create a child node definition."""
    kwargs.setdefault("required_primary_types", ["nt:base"])
    return ChildNodeDefinition(name=name, **kwargs)


def _create_node_type(name: str = "app:document", properties=None, child_nodes=None, **kwargs) -> NodeTypeDefinition:
    """Helper to create a node type definition with one property and one child node."""
    if properties is None:
        properties = [_create_property()]
    if child_nodes is None:
        child_nodes = [_create_child_node()]
    kwargs.setdefault("supertypes", ["nt:hierarchyNode"])
    return NodeTypeDefinition(
        name=name,
        property_definitions=properties,
        child_node_definitions=child_nodes,
        **kwargs,
    )


@pytest.fixture
def make_property():
    return _create_property


@pytest.fixture
def make_child_node():
    return _create_child_node


@pytest.fixture
def make_node_type():
    return _create_node_type


@pytest.fixture
def node_type() -> NodeTypeDefinition:
    return _create_node_type()
