"""
Property-based tests for checking invariants.

What this test file should cover
- A required rule on a nullable value yields exactly one "required" error.
- AND of a single branch behaves like the bare branch.
- OR succeeds whenever its first branch does.
- Checking is deterministic and never mutates the value.
- Every error path points at an existing element.
"""

import copy

from hypothesis import given, settings
from hypothesis import strategies as st

import rune

numbers = st.one_of(st.integers(min_value=-10**6, max_value=10**6), st.floats(allow_nan=False, allow_infinity=False))
limit_rules = st.fixed_dictionaries(
    {},
    optional={
        "ge": st.integers(-100, 100),
        "gt": st.integers(-100, 100),
        "le": st.integers(-100, 100),
        "lt": st.integers(-100, 100),
        "ne": st.integers(-100, 100),
    },
)


@settings(max_examples=50, deadline=None)
@given(
    rule_type=st.sampled_from(["boolean", "number", "bigint", "string", "array", "object"]),
    value=st.sampled_from([None, rune.UNDEFINED]),
    disallow=st.booleans(),
)
def test_required_nullable_yields_one_error(rule_type, value, disallow) -> None:
    rule = {"type": rule_type, "required": True, "disallowNull": disallow, "disallowUndefined": disallow}
    if rule_type == "array":
        rule["elements"] = {"type": "number"}
    if rule_type == "object":
        rule["keys"] = {}

    assert rune.build(rule).check(value).codes() == ["required"]


@settings(max_examples=100, deadline=None)
@given(limits=limit_rules, value=numbers)
def test_and_of_one_equals_bare(limits, value) -> None:
    bare = rune.build({"type": "number", **limits}).check(value)
    wrapped = rune.build({"type": "number", "and": [limits]}).check(value)

    assert wrapped.to_dicts() == bare.to_dicts()


@settings(max_examples=100, deadline=None)
@given(first=limit_rules, second=limit_rules, value=numbers)
def test_or_succeeds_when_first_branch_does(first, second, value) -> None:
    if rune.build({"type": "number", **first}).check(value).is_failure():
        return

    assert rune.build({"type": "number", "or": [first, second]}).check(value).is_success()


@settings(max_examples=50, deadline=None)
@given(values=st.lists(st.one_of(numbers, st.text(max_size=5), st.none()), max_size=8))
def test_check_is_deterministic_and_pure(values) -> None:
    validator = rune.build({"type": "array", "length": {"le": 4}, "elements": {"type": "number", "ge": 0}})
    before = copy.deepcopy(values)

    first = validator.check(values).to_dicts()
    second = validator.check(values).to_dicts()

    assert first == second
    assert values == before


@settings(max_examples=50, deadline=None)
@given(rows=st.lists(st.lists(st.integers(-5, 5), max_size=4), max_size=4))
def test_error_paths_point_at_values(rows) -> None:
    validator = rune.build({"type": "array", "elements": {"type": "array", "elements": {"type": "number", "ge": 0}}})

    for error in validator.check(rows).errors():
        row, column = error.path
        assert rows[row][column] == error.value
        assert error.value < 0
