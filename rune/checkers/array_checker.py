"""Array checker — length rules, then every element against ``elements``."""

from collections.abc import Mapping
from typing import Any, Callable, Optional

from rune.checkers.base import BaseChecker
from rune.checkers.classifier import classify
from rune.checkers.conditional import evaluate_conditional
from rune.checkers.limits import check_limits
from rune.checkers.models import ErrorRecord, Path, TypeTag
from rune.exceptions import RuleDefinitionError

# (rule, type_tag, value, path) -> errors; provided by the engine
DispatchFunction = Callable[[Mapping, TypeTag, Any, Path], list[ErrorRecord]]


class ArrayChecker(BaseChecker):
    """Validates array length and recurses into each element."""

    def __init__(self, dispatch: DispatchFunction):
        self._dispatch = dispatch

    @property
    def name(self) -> str:
        return "ArrayChecker"

    def check(
        self,
        rule: Mapping,
        value: Any,
        path: Path,
        label: Optional[str] = None,
    ) -> list[ErrorRecord]:
        errors = self._check_length(rule, value, path, label)

        element_rule = rule.get("elements")
        if not isinstance(element_rule, Mapping):
            raise RuleDefinitionError(f"Array rule at {path} has no 'elements' rule")

        # Every index is checked, whatever happened to earlier ones
        for index, element in enumerate(value):
            errors.extend(self._dispatch(element_rule, classify(element), element, path + [index]))
        return errors

    def _check_length(self, rule: Mapping, value: Any, path: Path, label: Optional[str]) -> list[ErrorRecord]:
        length_rule = rule.get("length")
        if length_rule is None:
            return []
        return evaluate_conditional(length_rule, check_limits, len(value), path + ["length"], label)
