"""Checkers — the recursive rule-evaluation engine.

Usage:
    from rune.checkers import rule_engine, classify

    errors = rule_engine.dispatch(rule, classify(value), value, [])
"""

from rune.checkers.classifier import UNDEFINED, classify, classify_from_parent
from rune.checkers.engine import RuleEngine, rule_engine
from rune.checkers.models import DefaultRules, ErrorRecord, RuleRef, RuleType, TypeTag
from rune.checkers.string_checker import to_bigint, to_boolean, to_number

__all__ = [
    "RuleEngine",
    "rule_engine",
    "classify",
    "classify_from_parent",
    "UNDEFINED",
    "ErrorRecord",
    "RuleRef",
    "RuleType",
    "TypeTag",
    "DefaultRules",
    "to_boolean",
    "to_number",
    "to_bigint",
]
