"""Rule tree helpers — structural checks and path resolution.

Structural problems are authoring bugs, so build() looks for them up front
instead of waiting for a value that happens to reach the broken node.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from rune.checkers.engine import rule_type_of
from rune.checkers.models import RuleType
from rune.exceptions import RuleDefinitionError, TargetPathError

# String sub-rules that may themselves use and/or
_NESTED_CONDITIONALS = ("asNumber", "asBigInt", "length")


def _where(location: Sequence) -> str:
    return "/".join(str(segment) for segment in location) or "<root>"


def _assert_limit_shapes(node: Mapping, location: Sequence) -> None:
    between = node.get("between")
    if between is not None and not (isinstance(between, (list, tuple)) and len(between) == 2):
        raise RuleDefinitionError(
            f"'between' at {_where(location)} must be a [lower, upper] pair, got {between!r}"
        )
    one_of = node.get("oneOf")
    if one_of is not None and not isinstance(one_of, (list, tuple)):
        raise RuleDefinitionError(f"'oneOf' at {_where(location)} must be a list, got {one_of!r}")


def assert_conditional(node: Any, location: Sequence = ()) -> None:
    """Raise RuleDefinitionError if an and/or combinator or a range is malformed."""
    if node is None:
        return
    if not isinstance(node, Mapping):
        raise RuleDefinitionError(f"Rule at {_where(location)} must be a mapping")
    _assert_limit_shapes(node, location)
    if "and" in node and "or" in node:
        raise RuleDefinitionError(f"Rule at {_where(location)} combines 'and' and 'or'")
    for combinator in ("and", "or"):
        if combinator not in node:
            continue
        branches = node[combinator]
        if not isinstance(branches, (list, tuple)):
            raise RuleDefinitionError(
                f"'{combinator}' at {_where(location)} must be a list of rules"
            )
        for index, branch in enumerate(branches):
            assert_conditional(branch, [*location, combinator, index])


def assert_rule_tree(rule: Any, location: Sequence = ()) -> None:
    """Walk a whole rule tree and raise on the first structural problem."""
    try:
        rule_type = rule_type_of(rule)
    except RuleDefinitionError as exc:
        raise RuleDefinitionError(f"{exc} (at {_where(location)})") from None

    if rule_type is RuleType.IGNORE:
        return

    if rule_type in (RuleType.NUMBER, RuleType.BIGINT, RuleType.STRING):
        assert_conditional(rule, location)

    if rule_type is RuleType.STRING:
        for name in _NESTED_CONDITIONALS:
            assert_conditional(rule.get(name), [*location, name])

    elif rule_type is RuleType.ARRAY:
        assert_conditional(rule.get("length"), [*location, "length"])
        elements = rule.get("elements")
        if not isinstance(elements, Mapping):
            raise RuleDefinitionError(f"Array rule at {_where(location)} has no 'elements' rule")
        assert_rule_tree(elements, [*location, "elements"])

    elif rule_type is RuleType.OBJECT:
        keys = rule.get("keys")
        if not isinstance(keys, Mapping):
            raise RuleDefinitionError(f"Object rule at {_where(location)} has no 'keys' mapping")
        for key, key_rule in keys.items():
            assert_rule_tree(key_rule, [*location, "keys", key])


def resolve_target(rule: Mapping, segments: Sequence) -> Mapping:
    """Follow ``segments`` through ``elements``/``keys`` to a nested rule node.

    Any segment steps into an array's ``elements``; for objects the segment
    must be a declared key.
    """
    if not segments:
        raise TargetPathError("target() needs at least one path segment")

    node = rule
    for depth, segment in enumerate(segments):
        rule_type = rule_type_of(node)
        if rule_type is RuleType.ARRAY:
            node = node["elements"]
        elif rule_type is RuleType.OBJECT and segment in node["keys"]:
            node = node["keys"][segment]
        elif rule_type is RuleType.OBJECT:
            raise TargetPathError(
                f"Key {segment!r} is not declared at {_where(segments[:depth])}"
            )
        else:
            raise TargetPathError(
                f"Cannot step into {rule_type.value!r} rule at {_where(segments[:depth])}"
            )
    return node
