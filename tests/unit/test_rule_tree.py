"""
Unit tests for rule-tree structural checks and target resolution.

What this test file should cover
- assert_rule_tree accepts well-formed trees and rejects malformed ones.
- Error messages point at the offending location.
- resolve_target walks elements/keys and raises TargetPathError otherwise.
"""

import pytest

from rune.exceptions import RuleDefinitionError, TargetPathError
from rune.rule_tree import assert_conditional, assert_rule_tree, resolve_target

TREE = {
    "type": "object",
    "keys": {
        "users": {
            "type": "array",
            "length": {"or": [{"eq": 0}, {"ge": 2}]},
            "elements": {
                "type": "object",
                "keys": {
                    "name": {"type": "string", "length": {"and": [{"ge": 1}, {"le": 20}]}},
                    "age": {"type": "number", "or": [{"lt": 0}, {"gt": 17}]},
                },
            },
        },
        "extra": {"type": "ignore", "anything": ["goes"]},
    },
}


def test_well_formed_tree_passes() -> None:
    assert_rule_tree(TREE)


@pytest.mark.parametrize(
    ("rule", "where"),
    [
        ({"type": "date"}, "<root>"),
        ({"type": "array"}, "<root>"),
        ({"type": "object", "keys": ["a"]}, "<root>"),
        ({"type": "object", "keys": {"a": {"type": "text"}}}, "keys/a"),
        ({"type": "array", "elements": {"type": "array"}}, "elements"),
        ({"type": "number", "and": {"gt": 1}}, "<root>"),
        ({"type": "string", "asNumber": {"or": 5}}, "asNumber"),
        ({"type": "string", "length": {"and": [], "or": []}}, "length"),
        ({"type": "array", "length": {"and": [3]}, "elements": {"type": "number"}}, "length/and/0"),
        ({"type": "number", "between": [1, 2, 3]}, "<root>"),
        ({"type": "string", "length": {"or": [{"between": 4}]}}, "length/or/0"),
        ({"type": "string", "asNumber": {"oneOf": 7}}, "asNumber"),
    ],
)
def test_malformed_tree_raises(rule, where) -> None:
    with pytest.raises(RuleDefinitionError, match=where):
        assert_rule_tree(rule)


def test_non_mapping_root_raises() -> None:
    with pytest.raises(RuleDefinitionError):
        assert_rule_tree("string")


def test_ignore_subtree_is_not_inspected() -> None:
    assert_rule_tree({"type": "ignore", "keys": "not a mapping"})


def test_assert_conditional_accepts_none() -> None:
    assert_conditional(None)


# ── Targets ──


def test_target_through_object_and_array() -> None:
    node = resolve_target(TREE, ["users", 0, "name"])

    assert node["type"] == "string"


def test_any_segment_steps_into_array_elements() -> None:
    assert resolve_target(TREE, ["users", 99]) is TREE["keys"]["users"]["elements"]
    assert resolve_target(TREE, ["users", "*"]) is TREE["keys"]["users"]["elements"]


def test_target_needs_a_segment() -> None:
    with pytest.raises(TargetPathError):
        resolve_target(TREE, [])


def test_target_unknown_key() -> None:
    with pytest.raises(TargetPathError, match="'missing'"):
        resolve_target(TREE, ["users", 0, "missing"])


def test_target_into_scalar() -> None:
    with pytest.raises(TargetPathError, match="'string'"):
        resolve_target(TREE, ["users", 0, "name", "first"])


def test_target_path_error_is_a_rule_definition_error() -> None:
    assert issubclass(TargetPathError, RuleDefinitionError)
    assert issubclass(RuleDefinitionError, ValueError)
