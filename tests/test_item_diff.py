"""Tests for the base item diff rules shared by properties and child nodes."""

import pytest

from ntdiff.kernel.item_diff import InvalidInputError, Operation, diff_item_base, is_refinable
from ntdiff.kernel.model import OnParentVersion
from ntdiff.kernel.property_diff import diff_property
from ntdiff.kernel.severity import Severity


def test_added_non_mandatory_is_trivial(make_property):
    assert diff_item_base(None, make_property(mandatory=False)) == (Operation.ADDED, Severity.TRIVIAL)


def test_added_mandatory_is_major(make_child_node):
    assert diff_item_base(None, make_child_node(mandatory=True)) == (Operation.ADDED, Severity.MAJOR)


@pytest.mark.parametrize("mandatory", [True, False])
def test_removed_is_always_major(mandatory, make_property):
    assert diff_item_base(make_property(mandatory=mandatory), None) == (Operation.REMOVED, Severity.MAJOR)


def test_equal_is_unchanged(make_property):
    assert diff_item_base(make_property(), make_property()) == (Operation.UNCHANGED, Severity.NONE)


def test_becoming_mandatory_is_major(make_property):
    old = make_property(mandatory=False)
    new = make_property(mandatory=True)
    assert diff_item_base(old, new) == (Operation.MODIFIED, Severity.MAJOR)


def test_becoming_optional_is_trivial(make_property):
    old = make_property(mandatory=True)
    new = make_property(mandatory=False)
    assert diff_item_base(old, new) == (Operation.MODIFIED, Severity.TRIVIAL)


def test_becoming_residual_is_minor(make_property):
    old = make_property("title")
    new = make_property("*")
    assert diff_item_base(old, new) == (Operation.MODIFIED, Severity.MINOR)


def test_mandatory_rule_wins_over_residual_rule(make_property):
    old = make_property("title", mandatory=False)
    new = make_property("*", mandatory=True)
    assert diff_item_base(old, new) == (Operation.MODIFIED, Severity.MAJOR)


def test_other_rename_is_major(make_child_node):
    assert diff_item_base(make_child_node("a"), make_child_node("b")) == (Operation.MODIFIED, Severity.MAJOR)
    # residual to specific name is a plain rename
    assert diff_item_base(make_child_node("*"), make_child_node("b")) == (Operation.MODIFIED, Severity.MAJOR)


@pytest.mark.parametrize("change", [
    {"protected": True},
    {"auto_created": True},
    {"on_parent_version": OnParentVersion.IGNORE},
])
def test_flag_changes_are_trivial(change, make_property):
    assert diff_item_base(make_property(), make_property(**change)) == (Operation.MODIFIED, Severity.TRIVIAL)


def test_both_absent_is_invalid():
    with pytest.raises(InvalidInputError):
        diff_item_base(None, None)


def test_is_refinable():
    assert is_refinable(Operation.MODIFIED, Severity.TRIVIAL)
    assert is_refinable(Operation.MODIFIED, Severity.MINOR)
    assert not is_refinable(Operation.MODIFIED, Severity.MAJOR)
    assert not is_refinable(Operation.UNCHANGED, Severity.NONE)
    assert not is_refinable(Operation.ADDED, Severity.TRIVIAL)


def test_operation_predicates(make_property):
    removed = diff_property(make_property(), None)
    assert removed.is_removed and not removed.is_added and not removed.is_modified

    modified = diff_property(make_property(), make_property(protected=True))
    assert modified.is_modified and not modified.is_removed and not modified.is_added

    unchanged = diff_property(make_property(), make_property())
    assert not (unchanged.is_added or unchanged.is_removed or unchanged.is_modified)
