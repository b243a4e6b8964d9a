from primval.string_utils.core import (
    numeric_check,
    sql_like,
    strip_prefix,
    strip_suffix,
    to_json,
)

__all__ = [
    "numeric_check",
    "sql_like",
    "strip_prefix",
    "strip_suffix",
    "to_json",
]
