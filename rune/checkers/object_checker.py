"""Object checker — undeclared-key detection, then every declared key.

Keys missing from the value are classified ``nokey`` and go through the same
existence checks as any other value; they are not a separate code path.
"""

from collections.abc import Mapping
from typing import Any, Optional

from rune.checkers.array_checker import DispatchFunction
from rune.checkers.base import BaseChecker
from rune.checkers.classifier import classify_from_parent, member_value, own_members
from rune.checkers.models import ErrorRecord, Path
from rune.exceptions import RuleDefinitionError


class ObjectChecker(BaseChecker):
    """Validates the key set of an object and recurses into each declared key."""

    def __init__(self, dispatch: DispatchFunction):
        self._dispatch = dispatch

    @property
    def name(self) -> str:
        return "ObjectChecker"

    def check(
        self,
        rule: Mapping,
        value: Any,
        path: Path,
        label: Optional[str] = None,
    ) -> list[ErrorRecord]:
        key_rules = rule.get("keys")
        if not isinstance(key_rules, Mapping):
            raise RuleDefinitionError(f"Object rule at {path} has no 'keys' mapping")

        errors = self._check_undefined_keys(rule, key_rules, value, path, label)

        # Declaration order of the rule's keys
        for key, key_rule in key_rules.items():
            errors.extend(self._dispatch(
                key_rule,
                classify_from_parent(value, key),
                member_value(value, key),
                path + [key],
            ))
        return errors

    def _check_undefined_keys(
        self,
        rule: Mapping,
        key_rules: Mapping,
        value: Any,
        path: Path,
        label: Optional[str],
    ) -> list[ErrorRecord]:
        """One error for the whole object if it has any key the rule does not declare."""
        if not rule.get("disallowUndefinedKeys"):
            return []
        if set(key_rules).issuperset(own_members(value)):
            return []
        return [self._error("disallowUndefinedKeys", rule, value, path, label)]
