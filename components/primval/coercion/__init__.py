from primval.coercion.core import Number, numeric_value, primitive_value

__all__ = ["Number", "numeric_value", "primitive_value"]
