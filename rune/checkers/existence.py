"""Existence and type checks — run by the engine before any value check.

``required`` wins over the disallow rules so a missing required field gets
exactly one diagnostic.
"""

from collections.abc import Mapping
from typing import Any

from rune.checkers.base import create_error
from rune.checkers.models import ACCEPTED_TAGS, NULLABLE_TAGS, ErrorRecord, Path, RuleType, TypeTag

# Nullable tag → the disallow rule that rejects it
DISALLOW_RULES: dict[TypeTag, str] = {
    TypeTag.UNDEFINED: "disallowUndefined",
    TypeTag.NULL: "disallowNull",
    TypeTag.NOKEY: "disallowNokey",
}


def is_nullable(type_tag: TypeTag) -> bool:
    return type_tag in NULLABLE_TAGS


def check_required(rule: Mapping, type_tag: TypeTag, value: Any, path: Path) -> list[ErrorRecord]:
    if not rule.get("required"):
        return []
    if not is_nullable(type_tag):
        return []
    return [create_error("required", rule, value, path, rule.get("label"))]


def check_disallow(rule: Mapping, type_tag: TypeTag, value: Any, path: Path) -> list[ErrorRecord]:
    name = DISALLOW_RULES.get(type_tag)
    if name is None or not rule.get(name):
        return []
    return [create_error(name, rule, value, path, rule.get("label"))]


def check_existence(rule: Mapping, type_tag: TypeTag, value: Any, path: Path) -> list[ErrorRecord]:
    """Check required, then disallowUndefined/disallowNull/disallowNokey."""
    required_errors = check_required(rule, type_tag, value, path)
    if required_errors:
        return required_errors
    return check_disallow(rule, type_tag, value, path)


def check_type(rule: Mapping, type_tag: TypeTag, value: Any, path: Path) -> list[ErrorRecord]:
    """Check that ``type_tag`` is one the rule's declared type accepts.

    Nullable tags pass: a nullable value that survived the existence checks
    is allowed to be absent.
    """
    if is_nullable(type_tag):
        return []
    accepted = ACCEPTED_TAGS.get(RuleType(rule["type"]), frozenset())
    if type_tag in accepted:
        return []
    return [create_error("type", rule, value, path, rule.get("label"))]
