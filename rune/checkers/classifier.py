"""Type classifier — maps runtime values to TypeTag values.

Pure functions, no side effects. ``classify_from_parent`` additionally reports
keys that are missing from their container as ``nokey``.
"""

import datetime
import enum
import inspect
import numbers
import re
import types
from collections.abc import Mapping
from typing import Any

from rune.checkers.models import TypeTag


class _Undefined(enum.Enum):
    UNDEFINED = "undefined"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


# A value that is present but undefined. Also the value reported for absent keys.
UNDEFINED = _Undefined.UNDEFINED

_FUNCTION_TYPES = (types.FunctionType, types.MethodType, types.BuiltinFunctionType)


def classify(value: Any) -> TypeTag:
    """Return the TypeTag for ``value``."""
    if value is None:
        return TypeTag.NULL
    if value is UNDEFINED:
        return TypeTag.UNDEFINED

    # bool is a subclass of int, so it must be tested first
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, numbers.Integral):
        return TypeTag.BIGINT
    if isinstance(value, numbers.Real):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING

    if isinstance(value, (list, tuple)):
        return TypeTag.ARRAY
    if isinstance(value, (datetime.date, datetime.time)):
        return TypeTag.DATE
    if isinstance(value, BaseException):
        return TypeTag.ERROR
    if isinstance(value, re.Pattern):
        return TypeTag.REGEXP
    if inspect.isgenerator(value):
        return TypeTag.GENERATOR
    if inspect.isgeneratorfunction(value):
        return TypeTag.GENERATOR_FUNCTION
    if isinstance(value, _FUNCTION_TYPES):
        return TypeTag.FUNCTION

    return TypeTag.OBJECT


def own_members(container: Any) -> Mapping:
    """The container's own members: a Mapping itself, otherwise its ``__dict__``."""
    if isinstance(container, Mapping):
        return container
    try:
        return vars(container)
    except TypeError:
        return {}


def member_value(container: Any, key: Any) -> Any:
    """Value of ``key`` on ``container``, or UNDEFINED when it is absent."""
    members = own_members(container)
    if key not in members:
        return UNDEFINED
    return members[key]


def classify_from_parent(container: Any, key: Any) -> TypeTag:
    """Classify the value found at ``key``; ``nokey`` when it is not a member."""
    members = own_members(container)
    if key not in members:
        return TypeTag.NOKEY
    return classify(members[key])
