"""Conditional evaluator — AND/OR composition of constraint sets.

A rule value is either a plain constraint mapping, ``{"and": [...]}`` (every
branch must pass) or ``{"or": [...]}`` (at least one branch must pass). Both
forms nest.
"""

from collections.abc import Mapping
from typing import Any, Optional

from rune.checkers.base import CheckFunction
from rune.checkers.models import ErrorRecord, Path
from rune.exceptions import RuleDefinitionError

_BRANCH_TYPES = (list, tuple)


def _branches(rule: Mapping, combinator: str) -> Optional[list]:
    """Return the branch list for ``combinator``, or None if the rule has none."""
    if combinator not in rule:
        return None
    branches = rule[combinator]
    if not isinstance(branches, _BRANCH_TYPES):
        raise RuleDefinitionError(
            f"'{combinator}' must be a list of rules, got {type(branches).__name__}"
        )
    return list(branches)


def evaluate_conditional(
    rule: Optional[Mapping],
    checker: CheckFunction,
    value: Any,
    path: Path,
    label: Optional[str] = None,
) -> list[ErrorRecord]:
    """Reduce a (possibly nested) conditional rule to a flat error list.

    Args:
        rule: Constraint mapping, AND/OR wrapper, or None
        checker: Terminal check for a plain constraint mapping
        value: Value under test
        path: Path of the value
        label: Label carried into the errors

    Returns:
        AND: errors of every branch, in order.
        OR: [] if any branch is clean, otherwise errors of every branch.
    """
    if rule is None:
        return []
    if not isinstance(rule, Mapping):
        raise RuleDefinitionError(
            f"Expected a rule mapping, got {type(rule).__name__}"
        )

    and_rules = _branches(rule, "and")
    or_rules = _branches(rule, "or")
    if and_rules is not None and or_rules is not None:
        raise RuleDefinitionError("A rule cannot combine 'and' and 'or'")

    if and_rules is not None:
        errors = []
        for branch in and_rules:
            errors.extend(evaluate_conditional(branch, checker, value, path, label))
        return errors

    if or_rules is not None:
        results = [
            evaluate_conditional(branch, checker, value, path, label)
            for branch in or_rules
        ]
        if any(len(result) == 0 for result in results):
            return []
        return [error for result in results for error in result]

    return checker(rule, value, path, label)
