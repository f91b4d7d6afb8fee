"""Custom exceptions for rule-tree authoring mistakes.

Validation failures in the *data* are never raised; they are returned as
ErrorRecord lists. Everything here signals a bug in the *rule tree*.
"""


class RuneError(Exception):
    """Base exception for rune errors."""
    pass


class RuleDefinitionError(RuneError, ValueError):
    """Raised for malformed rule trees, combinators or default rules."""
    pass


class TargetPathError(RuleDefinitionError):
    """Raised when a target() path cannot be resolved against the rule tree."""
    pass
