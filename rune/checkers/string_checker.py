"""String checker — text constraints, coercions and length.

On top of the shared limit rules a string rule can require a prefix, a
substring, a regular-expression match, or that the text converts to a
boolean/number/bigint which then satisfies a nested rule. The whole rule set
supports AND/OR composition.
"""

import decimal
import re
from collections.abc import Mapping
from typing import Any, Optional, Union

from rune.checkers.base import BaseChecker
from rune.checkers.conditional import evaluate_conditional
from rune.checkers.limits import check_limits
from rune.checkers.models import ErrorRecord, Path
from rune.checkers.scalar_checker import bigint_checker, boolean_checker, number_checker

TRUE_WORDS = frozenset({"y", "yes", "t", "true", "on", "1"})
FALSE_WORDS = frozenset({"n", "no", "f", "false", "off", "0"})


def to_boolean(text: str) -> Optional[bool]:
    """Convert ``text`` using the yes/no vocabulary (case-insensitive)."""
    lower = text.lower()
    if lower in TRUE_WORDS:
        return True
    if lower in FALSE_WORDS:
        return False
    return None


# ASCII decimal literals only: no digit-group underscores, no non-ASCII digits
INTEGER_LITERAL = re.compile(r"[+-]?\d+", re.ASCII)
NUMBER_LITERAL = re.compile(r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|Infinity)", re.ASCII)


def _parse_integer(text: str) -> int:
    # Decimal avoids the int(str) digit limit for very long literals
    return int(decimal.Decimal(text))


def to_number(text: str) -> Optional[Union[int, float]]:
    """Parse ``text`` as a number; integral literals stay exact ints.

    Surrounding whitespace is ignored. Anything but an ASCII decimal literal
    or ``Infinity`` is rejected.
    """
    literal = text.strip()
    if INTEGER_LITERAL.fullmatch(literal):
        return _parse_integer(literal)
    if NUMBER_LITERAL.fullmatch(literal):
        return float(literal)
    return None


def to_bigint(text: str) -> Optional[int]:
    """Parse ``text`` as an integer; fractions and exponents are rejected."""
    literal = text.strip()
    if not INTEGER_LITERAL.fullmatch(literal):
        return None
    return _parse_integer(literal)


def _search(pattern: Union[str, re.Pattern], text: str) -> bool:
    return re.search(pattern, text) is not None


class StringChecker(BaseChecker):
    """Validates string rules in a fixed order.

    Order: limits, beginsWith, contains, notContains, pattern, notPattern,
    asBoolean, asNumber, asBigInt, length. No check short-circuits another.
    """

    @property
    def name(self) -> str:
        return "StringChecker"

    def check(
        self,
        rule: Mapping,
        value: Any,
        path: Path,
        label: Optional[str] = None,
    ) -> list[ErrorRecord]:
        return evaluate_conditional(rule, self.check_rules, value, path, label)

    def check_rules(
        self,
        rule: Mapping,
        value: str,
        path: Path,
        label: Optional[str] = None,
    ) -> list[ErrorRecord]:
        """Check one plain (non-conditional) string constraint set."""
        errors = []
        errors.extend(self._check_text(rule, value, path, label))
        errors.extend(self._check_as_boolean(rule, value, path, label))
        errors.extend(self._check_as_number(rule, value, path, label))
        errors.extend(self._check_as_bigint(rule, value, path, label))
        errors.extend(self._check_length(rule, value, path, label))
        return errors

    # ── Text constraints ──

    def _check_text(self, rule: Mapping, value: str, path: Path, label: Optional[str]) -> list[ErrorRecord]:
        errors = check_limits(rule, value, path, label)

        prefix = rule.get("beginsWith")
        if prefix is not None and not value.startswith(prefix):
            errors.append(self._error("beginsWith", rule, value, path, label))

        needle = rule.get("contains")
        if needle is not None and needle not in value:
            errors.append(self._error("contains", rule, value, path, label))

        needle = rule.get("notContains")
        if needle is not None and needle in value:
            errors.append(self._error("notContains", rule, value, path, label))

        pattern = rule.get("pattern")
        if pattern is not None and not _search(pattern, value):
            errors.append(self._error("pattern", rule, value, path, label))

        pattern = rule.get("notPattern")
        if pattern is not None and _search(pattern, value):
            errors.append(self._error("notPattern", rule, value, path, label))

        return errors

    # ── Coercions ──

    def _check_as_boolean(self, rule: Mapping, value: str, path: Path, label: Optional[str]) -> list[ErrorRecord]:
        sub_rule = rule.get("asBoolean")
        if sub_rule is None:
            return []
        converted = to_boolean(value)
        if converted is None:
            return [self._error("asBoolean", rule, value, path, label)]
        return boolean_checker.check(sub_rule, converted, path, label)

    def _check_as_number(self, rule: Mapping, value: str, path: Path, label: Optional[str]) -> list[ErrorRecord]:
        sub_rule = rule.get("asNumber")
        if sub_rule is None:
            return []
        converted = to_number(value)
        if converted is None:
            return [self._error("asNumber", rule, value, path, label)]
        return number_checker.check(sub_rule, converted, path, label)

    def _check_as_bigint(self, rule: Mapping, value: str, path: Path, label: Optional[str]) -> list[ErrorRecord]:
        sub_rule = rule.get("asBigInt")
        if sub_rule is None:
            return []
        converted = to_bigint(value)
        if converted is None:
            return [self._error("asBigInt", rule, value, path, label)]
        return bigint_checker.check(sub_rule, converted, path, label)

    # ── Length ──

    def _check_length(self, rule: Mapping, value: str, path: Path, label: Optional[str]) -> list[ErrorRecord]:
        length_rule = rule.get("length")
        if length_rule is None:
            return []
        return evaluate_conditional(length_rule, check_limits, len(value), path + ["length"], label)


string_checker = StringChecker()
