from primval.containers.core import (
    fill_keys,
    filter_value,
    is_container,
    loose_equals,
    primitive_array,
    strict_equals,
    trim_filter,
)

__all__ = [
    "fill_keys",
    "filter_value",
    "is_container",
    "loose_equals",
    "primitive_array",
    "strict_equals",
    "trim_filter",
]
