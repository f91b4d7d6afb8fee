"""Scalar checkers — boolean, number and bigint rules."""

from collections.abc import Mapping
from typing import Any, Optional

from rune.checkers.base import BaseChecker
from rune.checkers.conditional import evaluate_conditional
from rune.checkers.limits import check_eq_ne, check_limits
from rune.checkers.models import ErrorRecord, Path


class BooleanChecker(BaseChecker):
    """Validates ``eq``/``ne`` on booleans."""

    @property
    def name(self) -> str:
        return "BooleanChecker"

    def check(
        self,
        rule: Mapping,
        value: Any,
        path: Path,
        label: Optional[str] = None,
    ) -> list[ErrorRecord]:
        return check_eq_ne(rule, value, path, label)


class NumberChecker(BaseChecker):
    """Validates limit rules on numbers, with AND/OR composition."""

    @property
    def name(self) -> str:
        return "NumberChecker"

    def check(
        self,
        rule: Mapping,
        value: Any,
        path: Path,
        label: Optional[str] = None,
    ) -> list[ErrorRecord]:
        return evaluate_conditional(rule, check_limits, value, path, label)


class BigIntChecker(NumberChecker):
    """Validates limit rules on arbitrary-precision integers."""

    @property
    def name(self) -> str:
        return "BigIntChecker"


boolean_checker = BooleanChecker()
number_checker = NumberChecker()
bigint_checker = BigIntChecker()
