"""Boolean tests over loosely-typed scalar values.

The negated forms exist so they can be handed to ``filter()`` and ``map()``
as single-argument callbacks.
"""

import re
from collections.abc import Sized
from typing import Any, FrozenSet

# Truthy value constants
TRUTHY_VALUES: FrozenSet[str] = frozenset({"y", "yes", "t", "true", "on"})

_NUMERIC_STRING = re.compile(
    r"""
    ^[ \t\n\r\v\f]*
    [+-]?
    (?:\d+(?:\.\d*)?|\.\d+)
    (?:[eE][+-]?\d+)?
    [ \t\n\r\v\f]*$
    """,
    re.VERBOSE | re.ASCII,
)


def is_null(value: Any) -> bool:
    """Return True if value is None."""
    return value is None


def is_not_null(value: Any) -> bool:
    """Inverse of is_null()."""
    return value is not None


def is_numeric(value: Any) -> bool:
    """Check if a value is a number or a string that spells one.

    Booleans are not numeric. Strings may carry surrounding whitespace, a sign,
    a fractional part and an exponent; hex, ``inf`` and ``nan`` are rejected.

    Examples:
        >>> is_numeric("1.5e3")
        True
        >>> is_numeric(" -2 ")
        True
        >>> is_numeric(True)
        False
        >>> is_numeric("0x1A")
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        return _NUMERIC_STRING.match(value) is not None
    return False


def is_truthy(value: Any) -> bool:
    """Check if a value may mean 'yes'.

    Args:
        value: The value to evaluate (string, bool, int, float, etc.)

    Returns:
        bool: True for ``True``, for numbers (or numeric strings) greater
        than zero, and for the strings in TRUTHY_VALUES (case and surrounding
        whitespace are ignored).

    Examples:
        >>> is_truthy("Yes ")
        True
        >>> is_truthy("2.5")
        True
        >>> is_truthy(-1)
        False
        >>> is_truthy(None)
        False
    """
    if isinstance(value, bool):
        return value
    if is_numeric(value):
        return (float(value) if isinstance(value, str) else value) > 0
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_VALUES
    return False


def is_not_truthy(value: Any) -> bool:
    """Inverse of is_truthy()."""
    return not is_truthy(value)


def is_empty(value: Any) -> bool:
    """Check if a value is empty.

    Unlike ``not value``, numbers and numeric strings are never empty, so
    ``0``, ``0.0`` and ``"0"`` all return False. ``None``, ``False``, ``""``
    and containers without items are empty.

    Examples:
        >>> is_empty("0")
        False
        >>> is_empty([])
        True
    """
    if is_numeric(value):
        return False
    if isinstance(value, str):
        return value == ""
    if value is None or value is False:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_not_empty(value: Any) -> bool:
    """Inverse of is_empty()."""
    return not is_empty(value)
