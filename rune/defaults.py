"""Default rules — merge configured defaults and inject them into rule trees."""

import copy
from collections.abc import Mapping, MutableMapping
from typing import Any, Optional, Union

from pydantic import ValidationError

from rune.checkers.engine import rule_type_of
from rune.checkers.models import DefaultRules, RuleType
from rune.exceptions import RuleDefinitionError

DefaultRulesLike = Union[DefaultRules, Mapping, None]


def coerce_default_rules(default_rules: DefaultRulesLike) -> DefaultRules:
    """Accept a DefaultRules, a plain mapping, or None."""
    if default_rules is None:
        return DefaultRules()
    if isinstance(default_rules, DefaultRules):
        return default_rules
    if not isinstance(default_rules, Mapping):
        raise RuleDefinitionError(
            f"Default rules must be a mapping, got {type(default_rules).__name__}"
        )
    try:
        return DefaultRules.model_validate(dict(default_rules))
    except ValidationError as exc:
        raise RuleDefinitionError(f"Invalid default rules: {exc}") from exc


def merge_default_rules(*layers: DefaultRulesLike) -> DefaultRules:
    """Merge default-rule layers per field; later layers win."""
    merged = DefaultRules()
    for layer in layers:
        merged = merged.merged_with(coerce_default_rules(layer))
    return merged


def _inject(rule: MutableMapping, fields: dict[str, Any]) -> None:
    for name, value in fields.items():
        if name not in rule:
            rule[name] = copy.deepcopy(value)


def apply_default_rules(rule: MutableMapping, default_rules: DefaultRules) -> MutableMapping:
    """Inject defaults into every node of ``rule`` in place, pre-order.

    Fields a node already sets are never overwritten; ignore nodes and their
    subtrees are left alone.
    """
    rule_type = rule_type_of(rule)
    if rule_type is RuleType.IGNORE:
        return rule

    _inject(rule, default_rules.existence.as_rule_fields())

    if rule_type is RuleType.ARRAY:
        _inject(rule, default_rules.array.as_rule_fields())
        apply_default_rules(rule["elements"], default_rules)

    elif rule_type is RuleType.OBJECT:
        _inject(rule, default_rules.object.as_rule_fields())
        for key_rule in rule["keys"].values():
            apply_default_rules(key_rule, default_rules)

    return rule


def with_default_rules(rule: Mapping, default_rules: Optional[DefaultRules] = None) -> MutableMapping:
    """Return a deep copy of ``rule`` with ``default_rules`` injected.

    The caller's rule tree is never modified. copy.deepcopy keeps compiled
    patterns and other non-JSON values intact.
    """
    copied = copy.deepcopy(rule)
    if default_rules is not None and not default_rules.is_empty():
        apply_default_rules(copied, default_rules)
    return copied
