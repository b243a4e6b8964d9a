"""Scalar coercion of loosely-typed values into canonical primitives."""

import math
from typing import Any, Union

from primval.predicates.core import is_numeric, is_truthy

Number = Union[int, float]


def numeric_value(value: Any) -> Number:
    """Return the numeric value of ``value``, or ``0`` if it is not numeric.

    Numbers are returned unchanged. Numeric strings are trimmed and parsed as
    ``float`` when they contain a decimal point, ``int`` otherwise. Exponent
    forms without a decimal point (``"1e3"``) are truncated to ``int``.

    Args:
        value: Any value.

    Returns:
        int | float: The parsed number. Never raises.
    """
    if not is_numeric(value):
        return 0
    if not isinstance(value, str):
        return value

    text = value.strip()
    if "." in text:
        return float(text)
    if "e" in text or "E" in text:
        parsed = float(text)
        return int(parsed) if math.isfinite(parsed) else parsed
    try:
        return int(text)
    except ValueError:
        # Longer than the interpreter allows for int parsing.
        return float(text)


def primitive_value(value: Any) -> Any:
    """Return the value in its canonical primitive type.

    Numeric values become ``int``/``float`` (see numeric_value), strings that
    mean 'yes' become ``True``, and everything else, including containers and
    arbitrary objects, is returned as is.

    Examples:
        >>> primitive_value("1")
        1
        >>> primitive_value("1.1")
        1.1
        >>> primitive_value(" ON ")
        True
        >>> primitive_value("off")
        'off'
    """
    if is_numeric(value):
        return numeric_value(value)
    if isinstance(value, str) and is_truthy(value):
        return True
    return value
