"""Tests for property definition diff refinement."""

import pytest

from ntdiff.kernel.item_diff import Operation
from ntdiff.kernel.model import PropertyType
from ntdiff.kernel.property_diff import diff_property
from ntdiff.kernel.severity import Severity


def _severity(old, new) -> Severity:
    return diff_property(old, new).severity


def test_required_type_to_undefined_is_minor(make_property):
    old = make_property(required_type=PropertyType.STRING)
    new = make_property(required_type=PropertyType.UNDEFINED)
    assert _severity(old, new) == Severity.MINOR


def test_required_type_to_specific_type_is_major(make_property):
    old = make_property(required_type=PropertyType.STRING)
    new = make_property(required_type=PropertyType.LONG)
    assert _severity(old, new) == Severity.MAJOR


def test_multiple_to_true_is_minor(make_property):
    assert _severity(make_property(multiple=False), make_property(multiple=True)) == Severity.MINOR


def test_multiple_to_false_is_major(make_property):
    assert _severity(make_property(multiple=True), make_property(multiple=False)) == Severity.MAJOR


def test_multiple_outcome_overwrites_required_type_outcome(make_property):
    # required type alone: MINOR, multiple alone: MAJOR
    old = make_property(required_type=PropertyType.STRING, multiple=True)
    new = make_property(required_type=PropertyType.UNDEFINED, multiple=False)
    assert _severity(old, new) == Severity.MAJOR

    # required type alone: MAJOR, multiple alone: MINOR -> only MINOR survives
    old = make_property(required_type=PropertyType.STRING, multiple=False)
    new = make_property(required_type=PropertyType.LONG, multiple=True)
    assert _severity(old, new) == Severity.MINOR


def test_added_constraint_where_none_existed_is_major(make_property):
    assert _severity(make_property(value_constraints=[]), make_property(value_constraints=["a.*"])) == Severity.MAJOR


def test_partially_removed_constraints_is_major(make_property):
    old = make_property(value_constraints=["a", "b"])
    new = make_property(value_constraints=["a"])
    assert _severity(old, new) == Severity.MAJOR


def test_altered_constraint_is_major(make_property):
    assert _severity(make_property(value_constraints=["a"]), make_property(value_constraints=["b"])) == Severity.MAJOR


def test_removing_all_constraints_does_not_escalate(make_property):
    old = make_property(value_constraints=["a", "b"])
    new = make_property(value_constraints=[])
    result = diff_property(old, new)
    assert result.operation == Operation.MODIFIED
    assert result.severity == Severity.TRIVIAL


def test_adding_to_existing_constraints_does_not_escalate(make_property):
    old = make_property(value_constraints=["a"])
    new = make_property(value_constraints=["a", "b"])
    assert _severity(old, new) == Severity.TRIVIAL


def test_reordered_constraints_are_trivial(make_property):
    old = make_property(value_constraints=["a", "b"])
    new = make_property(value_constraints=["b", "a"])
    assert _severity(old, new) == Severity.TRIVIAL


def test_constraint_escalation_skips_type_rules(make_property):
    # constraints make it MAJOR; a multiple false->true change cannot lower it
    old = make_property(value_constraints=[], multiple=False)
    new = make_property(value_constraints=["a"], multiple=True)
    assert _severity(old, new) == Severity.MAJOR


def test_default_values_do_not_escalate(make_property):
    old = make_property(default_values=["x"])
    new = make_property(default_values=["y", "z"])
    assert _severity(old, new) == Severity.TRIVIAL


def test_minor_base_skips_type_rules(make_property):
    # becoming residual is MINOR; the required type change is not looked at
    old = make_property("title", required_type=PropertyType.STRING)
    new = make_property("*", required_type=PropertyType.LONG)
    assert _severity(old, new) == Severity.MINOR


def test_minor_base_still_checks_constraints(make_property):
    old = make_property("title")
    new = make_property("*", value_constraints=["a"])
    assert _severity(old, new) == Severity.MAJOR


def test_major_base_is_terminal(make_property):
    old = make_property(mandatory=False, required_type=PropertyType.STRING)
    new = make_property(mandatory=True, required_type=PropertyType.UNDEFINED, multiple=True)
    assert _severity(old, new) == Severity.MAJOR


@pytest.mark.parametrize("has_old,has_new,operation,severity", [
    (False, True, Operation.ADDED, Severity.TRIVIAL),
    (True, False, Operation.REMOVED, Severity.MAJOR),
    (True, True, Operation.UNCHANGED, Severity.NONE),
])
def test_base_results_pass_through(has_old, has_new, operation, severity, make_property):
    old = make_property() if has_old else None
    new = make_property() if has_new else None
    result = diff_property(old, new)
    assert result.kind == "property"
    assert result.operation == operation
    assert result.severity == severity
    assert result.name == "title"
