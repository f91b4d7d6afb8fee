"""Validator — builds rule trees into reusable validators.

This is the main entry point of the library.

Usage:
    validator = build({"type": "object", "keys": {"age": {"type": "number", "ge": 0}}})
    result = validator.check(json.loads(payload))
    if result.is_failure():
        # result.errors() is the complete list of findings
"""

import copy
import time
from collections.abc import Mapping
from typing import Any, Optional

from rune.checkers.classifier import classify
from rune.checkers.engine import RuleEngine, rule_engine
from rune.checkers.models import DefaultRules, ErrorRecord
from rune.config import get_settings
from rune.defaults import DefaultRulesLike, coerce_default_rules, merge_default_rules, with_default_rules
from rune.exceptions import RuleDefinitionError
from rune.logging_config import get_logger
from rune.rule_tree import assert_rule_tree, resolve_target

logger = get_logger()


class CheckResult:
    """Outcome of one check() call. Safe to query any number of times."""

    def __init__(self, errors: list[ErrorRecord]):
        self._errors = tuple(errors)

    def is_success(self) -> bool:
        return len(self._errors) == 0

    def is_failure(self) -> bool:
        return len(self._errors) != 0

    def errors(self) -> list[ErrorRecord]:
        """All errors, depth-first in key/element order."""
        return list(self._errors)

    def codes(self) -> list[str]:
        return [error.code for error in self._errors]

    def to_dicts(self) -> list[dict]:
        return [error.to_dict() for error in self._errors]

    def __repr__(self) -> str:
        return f"CheckResult(errors={len(self._errors)})"


class Validator:
    """A built rule tree. Never mutated after construction."""

    def __init__(self, rule: Mapping, engine: Optional[RuleEngine] = None):
        self._rule = rule
        self._engine = engine or rule_engine

    @property
    def rule(self) -> Mapping:
        """A copy of the rule tree, with defaults applied.

        Changing the copy does not affect this validator.
        """
        return copy.deepcopy(self._rule)

    def check(self, value: Any) -> CheckResult:
        """Check ``value`` against the rule tree.

        Args:
            value: Any value, typically decoded JSON

        Returns:
            CheckResult holding every error found
        """
        start_time = time.perf_counter()

        errors = self._engine.dispatch(self._rule, classify(value), value, [])

        duration = (time.perf_counter() - start_time) * 1000
        logger.debug(
            "check_complete",
            rule_type=self._rule["type"],
            error_count=len(errors),
            duration_ms=round(duration, 3),
        )
        return CheckResult(errors)

    def target(self, *segments: Any) -> "Validator":
        """Return a validator for the rule node found at ``segments``.

        Array rules are stepped through with an index, object rules with a
        key. Error paths from the returned validator start at [].
        """
        node = resolve_target(self._rule, segments)
        logger.debug("target_resolved", segments=list(segments), rule_type=node["type"])
        return Validator(node, self._engine)


class ObjectValidator(Validator):
    """Validator for a top-level key mapping; rejects non-mapping values."""

    def check(self, value: Any) -> CheckResult:
        if not isinstance(value, Mapping):
            raise RuleDefinitionError(
                f"This validator checks mappings, got {type(value).__name__}"
            )
        return super().check(value)


def _build_rule(rule_tree: Any, default_rules: DefaultRules) -> Mapping:
    try:
        assert_rule_tree(rule_tree)
    except RuleDefinitionError as exc:
        logger.error("rule_tree_invalid", error=str(exc))
        raise

    rule = with_default_rules(rule_tree, default_rules)
    logger.debug(
        "validator_built",
        rule_type=rule["type"],
        defaults_applied=not default_rules.is_empty(),
    )
    return rule


def build(rule_tree: Mapping, default_rules: DefaultRulesLike = None) -> Validator:
    """Build a validator from a rule tree.

    Args:
        rule_tree: Root rule node. Deep-copied; the caller's tree is untouched.
        default_rules: Defaults injected into every node that does not set them.
            Layered over RUNE_DEFAULT_* settings; these values win.

    Returns:
        Validator ready for check() and target()

    Raises:
        RuleDefinitionError: The rule tree or default rules are malformed
    """
    merged = merge_default_rules(get_settings().default_rules(), default_rules)
    return Validator(_build_rule(rule_tree, merged))


def rules(key_rules: Mapping, default_rules: DefaultRulesLike = None) -> Validator:
    """Build a validator for an object from its key → rule mapping."""
    if not isinstance(key_rules, Mapping):
        raise RuleDefinitionError(
            f"rules() takes a mapping of key rules, got {type(key_rules).__name__}"
        )
    merged = merge_default_rules(get_settings().default_rules(), default_rules)
    return ObjectValidator(_build_rule({"type": "object", "keys": key_rules}, merged))


class Configuration:
    """build() bound to a set of default rules."""

    def __init__(self, default_rules: DefaultRulesLike):
        self.default_rules = coerce_default_rules(default_rules)

    def build(self, rule_tree: Mapping, default_rules: DefaultRulesLike = None) -> Validator:
        """Like rune.build(); per-call defaults win over configured ones per field."""
        return build(rule_tree, self.default_rules.merged_with(coerce_default_rules(default_rules)))

    def rules(self, key_rules: Mapping, default_rules: DefaultRulesLike = None) -> Validator:
        return rules(key_rules, self.default_rules.merged_with(coerce_default_rules(default_rules)))


def configure(default_rules: DefaultRulesLike) -> Configuration:
    """Bind default rules for every validator built through the result."""
    if not isinstance(default_rules, (Mapping, DefaultRules)):
        raise RuleDefinitionError(
            f"configure() takes a mapping of default rules, got {type(default_rules).__name__}"
        )
    return Configuration(default_rules)
