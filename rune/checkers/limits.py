"""Limit checks — equality, ordering, range and membership constraints.

Shared by the boolean, number, bigint and string checkers and by every
``length`` sub-rule. Every constraint is evaluated; one error per violation.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional

from rune.checkers.base import create_error
from rune.checkers.models import ErrorRecord, Path
from rune.exceptions import RuleDefinitionError


def strict_equal(left: Any, right: Any) -> bool:
    """Equality that does not treat True/False as 1/0."""
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left == right


# Constraint name → passes(limit, value). Order is the reporting order.
EQ_NE_TESTS: dict[str, Callable[[Any, Any], bool]] = {
    "eq": lambda limit, value: strict_equal(limit, value),
    "ne": lambda limit, value: not strict_equal(limit, value),
}

ORDER_TESTS: dict[str, Callable[[Any, Any], bool]] = {
    "ge": lambda limit, value: limit <= value,
    "gt": lambda limit, value: limit < value,
    "le": lambda limit, value: limit >= value,
    "lt": lambda limit, value: limit > value,
    # Exclusive on both ends
    "between": lambda limit, value: limit[0] < value < limit[1],
    "oneOf": lambda limit, value: any(strict_equal(option, value) for option in limit),
}


def _run_tests(
    tests: dict[str, Callable[[Any, Any], bool]],
    rule: Mapping,
    value: Any,
    path: Path,
    label: Optional[str],
) -> list[ErrorRecord]:
    errors = []
    for name, passes in tests.items():
        limit = rule.get(name)
        if limit is None:
            continue
        try:
            passed = passes(limit, value)
        except (TypeError, IndexError) as exc:
            # The value already passed the type check; only the limit can be malformed
            raise RuleDefinitionError(
                f"'{name}' limit {limit!r} cannot be applied to {type(value).__name__} at {path}"
            ) from exc
        if not passed:
            errors.append(create_error(name, rule, value, path, label))
    return errors


def check_eq_ne(
    rule: Mapping,
    value: Any,
    path: Path,
    label: Optional[str] = None,
) -> list[ErrorRecord]:
    """Check ``eq`` and ``ne``."""
    return _run_tests(EQ_NE_TESTS, rule, value, path, label)


def check_limits(
    rule: Mapping,
    value: Any,
    path: Path,
    label: Optional[str] = None,
) -> list[ErrorRecord]:
    """Check ``eq``, ``ne``, ``ge``, ``gt``, ``le``, ``lt``, ``between`` and ``oneOf``.

    Ordering uses native comparison: numeric for numbers, lexicographic for
    strings.
    """
    errors = check_eq_ne(rule, value, path, label)
    errors.extend(_run_tests(ORDER_TESTS, rule, value, path, label))
    return errors
