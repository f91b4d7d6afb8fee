"""Rule engine — dispatches every node of a rule tree to its checker.

This is the recursive entry point of checking. Each node goes through, in
order, and stopping at the first stage that reports anything:

    1. ignore    — "ignore" nodes are skipped with their whole subtree
    2. existence — required / disallowUndefined / disallowNull / disallowNokey
    3. type      — the value's TypeTag must match the rule's type
    4. value     — the type-specific checker

Usage:
    errors = rule_engine.dispatch(rule, classify(value), value, [])
"""

from collections.abc import Mapping
from typing import Any

from rune.checkers.array_checker import ArrayChecker
from rune.checkers.base import BaseChecker
from rune.checkers.existence import check_existence, check_type, is_nullable
from rune.checkers.models import ErrorRecord, Path, RuleType, TypeTag
from rune.checkers.object_checker import ObjectChecker
from rune.checkers.scalar_checker import bigint_checker, boolean_checker, number_checker
from rune.checkers.string_checker import string_checker
from rune.exceptions import RuleDefinitionError

RULE_TYPES = frozenset(rule_type.value for rule_type in RuleType)


def rule_type_of(rule: Any) -> RuleType:
    """Return the RuleType of a rule node, raising for anything malformed."""
    if not isinstance(rule, Mapping):
        raise RuleDefinitionError(f"A rule must be a mapping, got {type(rule).__name__}")
    declared = rule.get("type")
    try:
        return RuleType(declared)
    except (ValueError, TypeError):
        raise RuleDefinitionError(
            f"Unknown rule type {declared!r}; expected one of: {', '.join(sorted(RULE_TYPES))}"
        ) from None


class RuleEngine:
    """Routes rule nodes to the checker for their type.

    Design principles:
        - Deterministic: same input → same output
        - Closed: the RuleType → checker table covers every rule type
        - Stateless: all per-call state travels in the arguments
    """

    def __init__(self):
        self.checkers: dict[RuleType, BaseChecker] = {
            RuleType.BOOLEAN: boolean_checker,
            RuleType.NUMBER: number_checker,
            RuleType.BIGINT: bigint_checker,
            RuleType.STRING: string_checker,
            RuleType.ARRAY: ArrayChecker(self.dispatch),
            RuleType.OBJECT: ObjectChecker(self.dispatch),
        }

    def dispatch(self, rule: Mapping, type_tag: TypeTag, value: Any, path: Path) -> list[ErrorRecord]:
        """Check ``value`` (classified as ``type_tag``) against ``rule``.

        Args:
            rule: Rule node for this position
            type_tag: Classification of ``value`` (``nokey`` if absent)
            value: The value at ``path``
            path: Keys/indices from the root

        Returns:
            Every error found for this node and its subtree
        """
        rule_type = rule_type_of(rule)
        if rule_type is RuleType.IGNORE:
            return []

        existence_errors = check_existence(rule, type_tag, value, path)
        if existence_errors:
            return existence_errors

        # An absent value that passed the existence rules is allowed to be absent
        if is_nullable(type_tag):
            return []

        type_errors = check_type(rule, type_tag, value, path)
        if type_errors:
            return type_errors

        checker = self.checkers[rule_type]
        return checker.check(rule, value, path, rule.get("label"))


# Module-level singleton
rule_engine = RuleEngine()
