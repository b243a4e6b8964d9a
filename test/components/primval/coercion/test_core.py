import math

from primval.coercion import numeric_value, primitive_value


class TestPrimitiveValue:
    def test_numeric_strings(self):
        assert primitive_value("1") == 1
        assert type(primitive_value("1")) is int
        assert primitive_value("1.1") == 1.1
        assert type(primitive_value("1.1")) is float

    def test_numbers_unchanged(self):
        assert primitive_value(1) == 1
        assert primitive_value(1.1) == 1.1

    def test_containers_pass_through(self):
        assert primitive_value(["1.1", 1]) == ["1.1", 1]
        assert primitive_value({"a": "1"}) == {"a": "1"}

    def test_truthy_strings_become_true(self):
        assert primitive_value("yes") is True
        assert primitive_value(" ON ") is True

    def test_other_strings_returned_verbatim(self):
        assert primitive_value("no") == "no"
        assert primitive_value("  hello ") == "  hello "
        assert primitive_value("") == ""

    def test_booleans_and_none(self):
        assert primitive_value(False) is False
        assert primitive_value(True) is True
        assert primitive_value(None) is None

    def test_opaque_objects_pass_through(self):
        marker = object()
        assert primitive_value(marker) is marker

    def test_idempotent(self):
        for value in ["1", "1.5", "yes", "no", " x ", 3, 2.5, True, False, None, "", ["1"], "1e3"]:
            once = primitive_value(value)
            assert primitive_value(once) == once, value


class TestNumericValue:
    def test_zero(self):
        assert numeric_value(0) == 0
        assert numeric_value("0") == 0
        assert type(numeric_value("0")) is int

    def test_decimal_point_selects_float(self):
        assert numeric_value("1.0") == 1.0
        assert type(numeric_value("1.0")) is float
        assert numeric_value("1") == 1
        assert type(numeric_value("1")) is int

    def test_whitespace_and_sign(self):
        assert numeric_value(" -12 ") == -12
        assert numeric_value("+.5") == 0.5

    def test_exponent_without_decimal_point_is_int(self):
        assert numeric_value("1e3") == 1000
        assert type(numeric_value("1e3")) is int
        assert numeric_value("1e-3") == 0

    def test_exponent_with_decimal_point_is_float(self):
        assert numeric_value("1.5e3") == 1500.0
        assert type(numeric_value("1.5e3")) is float

    def test_overflow_does_not_raise(self):
        assert math.isinf(numeric_value("1e999"))

    def test_non_numeric_is_zero(self):
        assert numeric_value("abc") == 0
        assert numeric_value("") == 0
        assert numeric_value(None) == 0
        assert numeric_value(True) == 0
        assert numeric_value([1]) == 0

    def test_huge_integer_string_does_not_raise(self):
        assert numeric_value("9" * 5000) > 0
