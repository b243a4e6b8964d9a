from primval.predicates.core import (
    TRUTHY_VALUES,
    is_empty,
    is_not_empty,
    is_not_null,
    is_not_truthy,
    is_null,
    is_numeric,
    is_truthy,
)

__all__ = [
    "TRUTHY_VALUES",
    "is_empty",
    "is_not_empty",
    "is_not_null",
    "is_not_truthy",
    "is_null",
    "is_numeric",
    "is_truthy",
]
