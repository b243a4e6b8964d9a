import json
from typing import Any

from primval.coercion.core import numeric_value
from primval.containers.core import is_container
from primval.predicates.core import is_numeric


def strip_prefix(string: str, sep: str = ":") -> str:
    """Remove everything up to and including the first ``sep``.

    Args:
        string (str): The input string.
        sep (str): The delimiter.

    Returns:
        str: The remainder, or ``string`` unchanged if ``sep`` is absent.
    """
    _, found, rest = string.partition(sep)
    return rest if found else string


def strip_suffix(string: str, sep: str = ":") -> str:
    """Remove everything from the last ``sep`` onwards.

    Args:
        string (str): The input string.
        sep (str): The delimiter.

    Returns:
        str: The head, or ``string`` unchanged if ``sep`` is absent.
    """
    head, found, _ = string.rpartition(sep)
    return head if found else string


def sql_like(
    string: str,
    prefix: bool = True,
    suffix: bool = False,
    use_wildcard: bool = False,
) -> str:
    """Build a pattern for the SQL ``LIKE`` operator.

    Args:
        string (str): The text to match.
        prefix (bool): Match values starting with ``string`` (``text%``).
        suffix (bool): Match values ending with ``string`` (``%text``).
        use_wildcard (bool): ``string`` already contains wildcards; do not
            escape ``_`` and ``%``.

    Returns:
        str: The pattern.
    """
    if not use_wildcard:
        string = string.replace("_", "\\_").replace("%", "\\%")
    if prefix:
        string = f"{string}%"
    if suffix:
        string = f"%{string}"
    return string


def numeric_check(obj: Any) -> Any:
    """Recursively replace numeric strings with numbers, leaving other values alone."""
    if isinstance(obj, str):
        return numeric_value(obj) if is_numeric(obj) else obj
    if isinstance(obj, dict):
        return {k: numeric_check(v) for k, v in obj.items()}
    if is_container(obj):
        return [numeric_check(item) for item in obj]
    return obj


def to_json(value: Any, **kwargs: Any) -> str:
    """Encode ``value`` as JSON with numeric strings written as numbers.

    Unicode is written unescaped and floats keep their fraction (``1.0``).
    Extra keyword arguments go to ``json.dumps``.
    """
    kwargs.setdefault("ensure_ascii", False)
    return json.dumps(numeric_check(value), **kwargs)
