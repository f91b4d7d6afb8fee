"""Base checker — abstract class implementing the Strategy Pattern.

Each rule type is handled by a standalone, independently testable checker.
The engine picks the checker from the rule node's "type".
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable, Optional

from rune.checkers.models import ErrorRecord, Path, RuleRef

# (rule, value, path, label) -> errors
CheckFunction = Callable[[Mapping, Any, Path, Optional[str]], list[ErrorRecord]]


def create_error(
    name: str,
    rule: Mapping,
    value: Any,
    path: Path,
    label: Optional[str] = None,
) -> ErrorRecord:
    """Build the ErrorRecord for constraint ``name`` of ``rule``.

    The code is ``name`` unless the rule carries a ``<name>ErrorCode`` override.
    """
    code = rule.get(f"{name}ErrorCode")
    return ErrorRecord(
        path=path,
        rule=RuleRef(name=name, value=rule.get(name)),
        value=value,
        code=name if code is None else code,
        label=label,
    )


class BaseChecker(ABC):
    """Abstract base for all type-specific checkers.

    Contract:
        - check() is deterministic: same input → same output
        - check() returns a list of ErrorRecord (empty = no issues)
        - check() never raises for bad data, only for malformed rules
        - existence and type have already been verified by the engine
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def check(
        self,
        rule: Mapping,
        value: Any,
        path: Path,
        label: Optional[str] = None,
    ) -> list[ErrorRecord]:
        """Run the checks of ``rule`` against ``value``.

        Args:
            rule: Rule node whose type matches the value
            value: The value found at ``path``
            path: Keys/indices from the root to ``value``
            label: The rule node's label, carried into every error

        Returns:
            List of ErrorRecord findings (empty if no issues)
        """
        ...

    # ── Helper Methods ──

    def _error(
        self,
        name: str,
        rule: Mapping,
        value: Any,
        path: Path,
        label: Optional[str] = None,
    ) -> ErrorRecord:
        """Convenience method to create an ErrorRecord."""
        return create_error(name, rule, value, path, label)
