"""rune — declarative validation of JSON-like values against rule trees.

Usage:
    import rune

    validator = rune.build({"type": "string", "oneOf": ["good", "cool"]})
    result = validator.check("marvelous")
    if result.is_failure():
        print(result.to_dicts())
"""

from rune.checkers import (
    UNDEFINED,
    DefaultRules,
    ErrorRecord,
    RuleRef,
    RuleType,
    TypeTag,
    classify,
    classify_from_parent,
    to_bigint,
    to_boolean,
    to_number,
)
from rune.exceptions import RuleDefinitionError, RuneError, TargetPathError
from rune.logging_config import configure_logging
from rune.validator import CheckResult, Configuration, Validator, build, configure, rules

__version__ = "0.4.0"

__all__ = [
    "build",
    "configure",
    "rules",
    "Validator",
    "Configuration",
    "CheckResult",
    "ErrorRecord",
    "RuleRef",
    "DefaultRules",
    "RuleType",
    "TypeTag",
    "UNDEFINED",
    "classify",
    "classify_from_parent",
    "to_boolean",
    "to_number",
    "to_bigint",
    "configure_logging",
    "RuneError",
    "RuleDefinitionError",
    "TargetPathError",
]
