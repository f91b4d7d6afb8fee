"""Checker models — type tags, rule types, error records and default rules.

All checking is deterministic: same rule tree + same value → same error list.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TypeTag(str, Enum):
    """Runtime category of a value, as seen by the checkers."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    BIGINT = "bigint"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    DATE = "date"
    ERROR = "error"
    FUNCTION = "function"
    GENERATOR = "generator"
    GENERATOR_FUNCTION = "generator-function"
    REGEXP = "regexp"

    # Nullable sentinels
    UNDEFINED = "undefined"
    NULL = "null"
    NOKEY = "nokey"  # Key absent from the parent container


NULLABLE_TAGS = frozenset({TypeTag.UNDEFINED, TypeTag.NULL, TypeTag.NOKEY})


class RuleType(str, Enum):
    """Closed set of values for a rule node's "type" field."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    BIGINT = "bigint"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    IGNORE = "ignore"


# Tags each rule type accepts. Python ints are arbitrary precision and classify
# as bigint, but JSON integers are plain numbers, so number rules take both.
ACCEPTED_TAGS: dict[RuleType, frozenset[TypeTag]] = {
    RuleType.BOOLEAN: frozenset({TypeTag.BOOLEAN}),
    RuleType.NUMBER: frozenset({TypeTag.NUMBER, TypeTag.BIGINT}),
    RuleType.BIGINT: frozenset({TypeTag.BIGINT}),
    RuleType.STRING: frozenset({TypeTag.STRING}),
    RuleType.ARRAY: frozenset({TypeTag.ARRAY}),
    RuleType.OBJECT: frozenset({TypeTag.OBJECT}),
}

Path = list[Union[str, int]]


class RuleRef(BaseModel):
    """The constraint that produced an error: its name and configured value."""

    name: str
    value: Any = None


class ErrorRecord(BaseModel):
    """A single validation finding."""

    path: Path = Field(default_factory=list)
    rule: RuleRef
    value: Any = None
    code: str
    label: Optional[str] = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def to_dict(self) -> dict:
        """Plain-dict form; ``label`` is omitted when the rule has none."""
        data = {
            "path": list(self.path),
            "rule": {"name": self.rule.name, "value": self.rule.value},
            "value": self.value,
            "code": self.code,
        }
        if self.label is not None:
            data["label"] = self.label
        return data


class _RuleSection(BaseModel):
    """Base for default-rule sections: snake_case fields, camelCase rule keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def as_rule_fields(self) -> dict:
        """Fields that were actually set, keyed the way rule nodes spell them."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ExistenceDefaults(_RuleSection):
    """Existence rules injected into every non-ignore node."""

    required: Optional[bool] = None
    required_error_code: Optional[str] = None
    disallow_undefined: Optional[bool] = None
    disallow_undefined_error_code: Optional[str] = None
    disallow_null: Optional[bool] = None
    disallow_null_error_code: Optional[str] = None
    disallow_nokey: Optional[bool] = None
    disallow_nokey_error_code: Optional[str] = None


class ArrayDefaults(_RuleSection):
    """Meta rules injected into every array node."""

    length: Optional[dict[str, Any]] = None


class ObjectDefaults(_RuleSection):
    """Meta rules injected into every object node."""

    disallow_undefined_keys: Optional[bool] = None
    disallow_undefined_keys_error_code: Optional[str] = None


class DefaultRules(BaseModel):
    """Default rules applied to a rule tree at build time.

    Only fields that are set are injected, and never over a field the rule
    node already specifies.
    """

    existence: ExistenceDefaults = Field(default_factory=ExistenceDefaults)
    array: ArrayDefaults = Field(default_factory=ArrayDefaults)
    object: ObjectDefaults = Field(default_factory=ObjectDefaults)

    model_config = ConfigDict(extra="forbid")

    def merged_with(self, override: "DefaultRules") -> "DefaultRules":
        """Merge per field; values set on ``override`` win."""
        merged = {}
        for section in ("existence", "array", "object"):
            base = getattr(self, section).model_dump(exclude_none=True)
            base.update(getattr(override, section).model_dump(exclude_none=True))
            merged[section] = base
        return DefaultRules.model_validate(merged)

    def is_empty(self) -> bool:
        return not (
            self.existence.as_rule_fields()
            or self.array.as_rule_fields()
            or self.object.as_rule_fields()
        )
