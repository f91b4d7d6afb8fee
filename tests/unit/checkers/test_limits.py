"""
Unit tests for equality, ordering, range and membership constraints.

What this test file should cover
- Each constraint on its own, including boundary values.
- between is exclusive on both ends.
- All violated constraints are reported, in a fixed order.
- <name>ErrorCode overrides and label propagation.
"""

import pytest

from rune.checkers.limits import check_eq_ne, check_limits, strict_equal
from rune.exceptions import RuleDefinitionError

PATH: list = []


def _dicts(errors):
    return [error.to_dict() for error in errors]


def test_eq() -> None:
    rule = {"eq": "hoge"}

    assert check_eq_ne(rule, "hoge", PATH) == []
    assert _dicts(check_eq_ne(rule, "foo", PATH)) == [
        {"code": "eq", "path": [], "rule": {"name": "eq", "value": "hoge"}, "value": "foo"},
    ]


def test_ne() -> None:
    rule = {"ne": "foo"}

    assert check_eq_ne(rule, "hoge", PATH) == []
    assert _dicts(check_eq_ne(rule, "foo", PATH)) == [
        {"code": "ne", "path": [], "rule": {"name": "ne", "value": "foo"}, "value": "foo"},
    ]


def test_eq_and_ne_both_reported() -> None:
    rule = {"eq": "hoge", "ne": "foo"}

    assert [error.code for error in check_eq_ne(rule, "foo", PATH)] == ["eq", "ne"]


def test_eq_does_not_confuse_booleans_and_integers() -> None:
    assert strict_equal(True, 1) is False
    assert strict_equal(1, 1.0) is True
    assert [error.code for error in check_eq_ne({"eq": 1}, True, PATH)] == ["eq"]


@pytest.mark.parametrize(
    ("rule", "value", "ok"),
    [
        ({"ge": "2022-05-17"}, "2022-05-18", True),
        ({"ge": "2022-05-17"}, "2022-05-17", True),
        ({"ge": "2022-05-17"}, "2022-05-16", False),
        ({"gt": "2022-05-16"}, "2022-05-17", True),
        ({"gt": "2022-05-16"}, "2022-05-16", False),
        ({"le": 10}, 9, True),
        ({"le": 10}, 10, True),
        ({"le": 10}, 11, False),
        ({"lt": 10}, 9, True),
        ({"lt": 10}, 10, False),
        ({"between": [5, 10]}, 6, True),
        ({"between": [5, 10]}, 9, True),
        ({"between": [5, 10]}, 5, False),
        ({"between": [5, 10]}, 10, False),
        ({"oneOf": [1, 2, 3]}, 1, True),
        ({"oneOf": [1, 2, 3]}, 5, False),
        ({"oneOf": ["good", "cool"]}, "marvelous", False),
    ],
)
def test_single_limit(rule, value, ok) -> None:
    errors = check_limits(rule, value, PATH)

    if ok:
        assert errors == []
    else:
        (name,) = rule
        assert _dicts(errors) == [
            {"code": name, "path": [], "rule": {"name": name, "value": rule[name]}, "value": value},
        ]


def test_every_violation_is_reported_in_order() -> None:
    rule = {"oneOf": [1], "between": [10, 20], "lt": 3, "le": 3, "gt": 50, "ge": 50, "ne": 7, "eq": 1}

    errors = check_limits(rule, 7, PATH)

    assert [error.code for error in errors] == ["eq", "ne", "ge", "gt", "le", "lt", "between", "oneOf"]


def test_error_code_override_and_label() -> None:
    rule = {"lt": 10, "ltErrorCode": "too_big"}

    (error,) = check_limits(rule, 11, ["size"], "Size")

    assert error.code == "too_big"
    assert error.rule.name == "lt"
    assert error.label == "Size"
    assert error.path == ["size"]


def test_none_constraint_is_ignored() -> None:
    assert check_limits({"eq": None, "between": None}, 3, PATH) == []


@pytest.mark.parametrize(
    ("rule", "value"),
    [
        ({"ge": 5}, "text"),
        ({"lt": "9"}, 3),
        ({"between": [5]}, 6),
        ({"between": 5}, 6),
        ({"oneOf": 3}, 3),
    ],
)
def test_mismatched_limit_raises_rule_definition_error(rule, value) -> None:
    with pytest.raises(RuleDefinitionError, match=next(iter(rule))):
        check_limits(rule, value, ["field"])
