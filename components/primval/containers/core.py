"""Container helpers consistent with the primval coercion policy.

Containers are lists, tuples and dicts. Every function returns a new
container of the same kind as its input; dict keys are preserved and
sequences keep the relative order of surviving items.
"""

from typing import Any, Callable, Dict, Hashable, Iterable, Optional, TypeVar

from primval.coercion.core import numeric_value, primitive_value
from primval.predicates.core import is_empty, is_numeric

C = TypeVar("C", list, tuple, dict)

_MISSING = object()


# ===== Helpers =====


def is_container(value: Any) -> bool:
    """Return True for the container kinds handled here (list, tuple, dict)."""
    return isinstance(value, (list, tuple, dict))


def _require_container(value: Any, func_name: str) -> None:
    if not is_container(value):
        raise TypeError(f"{func_name}() expects a list, tuple or dict, got {type(value).__name__}")


def _map_values(container: C, func: Callable[[Any], Any]) -> C:
    if isinstance(container, dict):
        return {key: func(val) for key, val in container.items()}
    return type(container)(func(val) for val in container)


def _filter_values(container: C, keep: Callable[[Any], bool]) -> C:
    if isinstance(container, dict):
        return {key: val for key, val in container.items() if keep(val)}
    return type(container)(val for val in container if keep(val))


# ===== Equality =====


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _loosely_true(value: Any) -> bool:
    """Truthiness used by loose comparison: "0" is false, like 0 and ""."""
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value not in ("", "0")
    if _is_number(value):
        return value != 0
    if is_container(value):
        return len(value) > 0
    return True


def loose_equals(a: Any, b: Any) -> bool:
    """Compare two values with type-juggling equality.

    Rules, first match wins:

    1. A bool on either side compares the loose truthiness of both sides.
    2. None equals None and ``""``; against non-strings it equals anything
       loosely false.
    3. Two numbers compare numerically.
    4. A number equals a numeric string of the same value; against any other
       string it compares as text (``1 == "1"`` but ``1 != "abc"``).
    5. Two numeric strings compare numerically (``"1" == "1.0"``), other
       strings compare as text.
    6. Sequences of the same length compare item by item, dicts compare key
       sets and then values.
    7. Anything else falls back to ``==``.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return _loosely_true(a) == _loosely_true(b)

    if a is None or b is None:
        other = b if a is None else a
        if other is None:
            return True
        if isinstance(other, str):
            return other == ""
        return not _loosely_true(other)

    if _is_number(a) and _is_number(b):
        return a == b

    if (_is_number(a) and isinstance(b, str)) or (isinstance(a, str) and _is_number(b)):
        number, text = (a, b) if _is_number(a) else (b, a)
        if is_numeric(text):
            return number == numeric_value(text)
        return _number_text(number) == text

    if isinstance(a, str) and isinstance(b, str):
        if is_numeric(a) and is_numeric(b):
            return numeric_value(a) == numeric_value(b)
        return a == b

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        return len(a) == len(b) and all(loose_equals(x, y) for x, y in zip(a, b))

    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(loose_equals(a[k], b[k]) for k in a)

    return a == b


def _number_text(number: Any) -> str:
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def strict_equals(a: Any, b: Any) -> bool:
    """Compare two values requiring identical types, recursively for containers."""
    if type(a) is not type(b):
        return False
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(strict_equals(x, y) for x, y in zip(a, b))
    if isinstance(a, dict):
        return a.keys() == b.keys() and all(strict_equals(a[k], b[k]) for k in a)
    return a == b


# ===== Public API =====


def primitive_array(container: C, recursive: bool = False) -> C:
    """Convert every value of a container with primitive_value().

    Args:
        container: A list, tuple or dict.
        recursive: Descend into nested containers. Only scalar leaves are
            converted; nested containers keep their kind and keys.

    Returns:
        A new container of the same kind.

    Examples:
        >>> primitive_array(["1.1", 1])
        [1.1, 1]
        >>> primitive_array(["1.1", 1, ["123", "3.21"]], recursive=True)
        [1.1, 1, [123, 3.21]]
    """
    _require_container(container, "primitive_array")
    if not recursive:
        return _map_values(container, primitive_value)

    def convert(value: Any) -> Any:
        if is_container(value):
            return _map_values(value, convert)
        return primitive_value(value)

    return _map_values(container, convert)


def trim_filter(container: C, keep_empty: bool = False) -> C:
    """Trim strings and remove empty values, recursively.

    Nested containers are processed first. Only a nested container that was
    already empty on input is removed. One that becomes empty through
    filtering is kept as an empty container, so ``["a", ["", " "]]`` gives
    ``["a", []]``. This is a deliberate choice: dropping containers emptied
    by filtering as well would also be a valid reading.

    Args:
        container: A list, tuple or dict.
        keep_empty: Only trim, do not remove anything.

    Returns:
        A new container of the same kind.

    Raises:
        TypeError: If container is not a list, tuple or dict.

    Examples:
        >>> trim_filter([" a ", "", ["b", ""]])
        ['a', ['b']]
        >>> trim_filter([" a ", "", ["b", ""]], keep_empty=True)
        ['a', '', ['b', '']]
    """
    _require_container(container, "trim_filter")

    def process(value: Any) -> Any:
        if is_container(value):
            return value, trim_filter(value, keep_empty)
        return value, value.strip() if isinstance(value, str) else value

    processed = _map_values(container, process)

    def keep(pair: Any) -> bool:
        original, value = pair
        if keep_empty:
            return True
        if is_container(original):
            return len(original) > 0
        return not is_empty(value)

    survivors = _filter_values(processed, keep)
    return _map_values(survivors, lambda pair: pair[1])


def filter_value(
    needle: Any,
    haystack: C,
    invert: bool = False,
    strict: bool = False,
) -> C:
    """Filter out values that equal ``needle``.

    Args:
        needle: The value to compare against.
        haystack: A list, tuple or dict.
        invert: Keep only the values that equal ``needle`` instead.
        strict: Compare with strict_equals() instead of loose_equals().

    Returns:
        A new container of the same kind.

    Examples:
        >>> filter_value("1", [1, 2, 3])
        [2, 3]
        >>> filter_value(1, [1, 2, 3], invert=True)
        [1]
    """
    _require_container(haystack, "filter_value")
    equals = strict_equals if strict else loose_equals
    return _filter_values(haystack, lambda val: equals(val, needle) == invert)


def fill_keys(
    keys: Iterable[Hashable],
    value: Any = _MISSING,
    *,
    factory: Optional[Callable[[Any], Any]] = None,
    params: Any = None,
) -> Dict[Hashable, Any]:
    """Build a dict mapping each of ``keys`` to a value.

    Args:
        keys: The keys, in order.
        value: The literal value stored for every key (default None).
        factory: Called as ``factory(params)`` once per key; each result is
            stored. Mutually exclusive with ``value``.
        params: Argument passed to ``factory``.

    Returns:
        Dict[Hashable, Any]: The filled dict.

    Raises:
        ValueError: If both ``value`` and ``factory`` are given.
    """
    if factory is not None:
        if value is not _MISSING:
            raise ValueError("fill_keys() takes either value or factory, not both")
        return {key: factory(params) for key in keys}

    literal = None if value is _MISSING else value
    return {key: literal for key in keys}
