"""Tests for the AvroDecimal value type."""

from decimal import Decimal

import pytest

from avro_decimal import MINUS_ONE, ONE, ZERO, AvroDecimal, CodecConfig
from avro_decimal.errors import InvalidCastError, SizingError
from tests.helpers import MAX_96_BIT


class TestAvroDecimalConstruction:
    """Tests for construction from an explicit (unscaled, scale) pair."""

    def test_stores_fields_verbatim(self):
        d = AvroDecimal(100, 2)
        assert d.unscaled_value == 100
        assert d.scale == 2

    def test_trailing_zeros_not_normalized(self):
        assert AvroDecimal(1000, 3).unscaled_value == 1000

    def test_default_scale_is_zero(self):
        assert AvroDecimal(42).scale == 0

    def test_large_unscaled_value(self):
        """No machine-word limit on the significand."""
        d = AvroDecimal(10**60 + 1, 10)
        assert d.unscaled_value == 10**60 + 1

    def test_invalid_unscaled_type_raises(self):
        with pytest.raises(TypeError):
            AvroDecimal("100", 2)  # type: ignore
        with pytest.raises(TypeError):
            AvroDecimal(1.5, 0)  # type: ignore
        with pytest.raises(TypeError):
            AvroDecimal(True, 0)

    def test_invalid_scale_type_raises(self):
        with pytest.raises(TypeError):
            AvroDecimal(1, 2.0)  # type: ignore

    def test_negative_scale_raises(self):
        with pytest.raises(ValueError, match="scale"):
            AvroDecimal(1, -1)

    def test_scale_beyond_int32_raises(self):
        with pytest.raises(ValueError):
            AvroDecimal(1, 2**31)
        assert AvroDecimal(1, 2**31 - 1).scale == 2**31 - 1

    def test_constants(self):
        assert ZERO == AvroDecimal(0, 0)
        assert ONE == AvroDecimal(1, 0)
        assert MINUS_ONE == AvroDecimal(-1, 0)


class TestFromNative:
    """Tests for construction from native Python numbers."""

    def test_from_int(self):
        assert AvroDecimal.from_int(-42) == AvroDecimal(-42, 0)

    def test_from_decimal_keeps_exponent(self):
        assert AvroDecimal.from_decimal(Decimal("1.50")) == AvroDecimal(150, 2)
        assert AvroDecimal.from_decimal(Decimal("-0.005")) == AvroDecimal(-5, 3)

    def test_from_decimal_positive_exponent_folds_into_unscaled(self):
        assert AvroDecimal.from_decimal(Decimal("1E+3")) == AvroDecimal(1000, 0)

    def test_from_decimal_zero(self):
        assert AvroDecimal.from_decimal(Decimal("0")) == AvroDecimal(0, 0)
        assert AvroDecimal.from_decimal(Decimal("-0.00")) == AvroDecimal(0, 2)

    def test_from_decimal_beyond_96_bits_is_exact(self):
        """Values wider than a 96-bit platform decimal are not truncated."""
        d = AvroDecimal.from_decimal(Decimal("79228162514264337593543950336.125"))
        assert d == AvroDecimal((MAX_96_BIT + 1) * 1000 + 125, 3)

    def test_from_decimal_non_finite_raises(self):
        with pytest.raises(InvalidCastError):
            AvroDecimal.from_decimal(Decimal("NaN"))
        with pytest.raises(InvalidCastError):
            AvroDecimal.from_decimal(Decimal("-Infinity"))

    def test_from_float_uses_shortest_repr(self):
        assert AvroDecimal.from_float(0.1) == AvroDecimal(1, 1)
        assert AvroDecimal.from_float(-2.5) == AvroDecimal(-25, 1)

    def test_from_float_large_exponent(self):
        assert AvroDecimal.from_float(1e20) == AvroDecimal(10**20, 0)

    def test_from_float_exact(self):
        """The exact binary expansion of 0.1 has 55 fractional digits."""
        d = AvroDecimal.from_float(0.1, exact=True)
        assert d.scale == 55
        assert d == AvroDecimal.from_decimal(Decimal(0.1))

    def test_from_float_exact_from_config(self):
        config = CodecConfig(exact_float_conversion=True)
        assert AvroDecimal.from_float(0.1, config=config).scale == 55

    def test_from_float_non_finite_raises(self):
        with pytest.raises(InvalidCastError):
            AvroDecimal.from_float(float("nan"))
        with pytest.raises(InvalidCastError):
            AvroDecimal.from_float(float("inf"))

    def test_from_native_dispatch(self):
        assert AvroDecimal.from_native(7) == AvroDecimal(7, 0)
        assert AvroDecimal.from_native(0.5) == AvroDecimal(5, 1)
        assert AvroDecimal.from_native(Decimal("2.25")) == AvroDecimal(225, 2)

    def test_from_native_returns_decimal_unchanged(self):
        d = AvroDecimal(1, 1)
        assert AvroDecimal.from_native(d) is d

    def test_from_native_unsupported_raises(self):
        with pytest.raises(InvalidCastError):
            AvroDecimal.from_native(True)
        with pytest.raises(InvalidCastError):
            AvroDecimal.from_native("1.5")
        with pytest.raises(InvalidCastError):
            AvroDecimal.from_native(None)


class TestPredicates:
    """Tests for read-only predicates on the unscaled value."""

    def test_sign(self):
        assert AvroDecimal(-5, 2).sign == -1
        assert AvroDecimal(0, 2).sign == 0
        assert AvroDecimal(5, 2).sign == 1

    def test_is_zero(self):
        assert AvroDecimal(0, 3).is_zero
        assert not AvroDecimal(1, 3).is_zero

    def test_is_one_ignores_scale(self):
        assert AvroDecimal(1, 3).is_one
        assert not AvroDecimal(10, 1).is_one

    def test_is_even(self):
        assert AvroDecimal(4, 0).is_even
        assert AvroDecimal(-2, 1).is_even
        assert not AvroDecimal(3, 0).is_even

    def test_is_power_of_two(self):
        assert AvroDecimal(8, 0).is_power_of_two
        assert AvroDecimal(1, 0).is_power_of_two
        assert not AvroDecimal(6, 0).is_power_of_two
        assert not AvroDecimal(0, 0).is_power_of_two
        assert not AvroDecimal(-8, 0).is_power_of_two

    def test_bool(self):
        assert AvroDecimal(1, 5)
        assert not AvroDecimal(0, 5)


class TestEquality:
    """Equality and hashing are field-wise."""

    def test_equal_fields(self):
        assert AvroDecimal(150, 2) == AvroDecimal(150, 2)

    def test_scale_is_part_of_identity(self):
        """1.0 and 1.00 are different values."""
        assert AvroDecimal(10, 1) != AvroDecimal(100, 2)

    def test_hash_consistent_with_equality(self):
        assert hash(AvroDecimal(150, 2)) == hash(AvroDecimal(150, 2))
        assert len({AvroDecimal(1, 0), AvroDecimal(1, 0), AvroDecimal(10, 1)}) == 2

    def test_not_equal_to_native_numbers(self):
        assert AvroDecimal(1, 0) != 1
        assert AvroDecimal(15, 1) != Decimal("1.5")

    def test_immutable(self):
        d = AvroDecimal(1, 0)
        with pytest.raises(AttributeError):
            d.scale = 2  # type: ignore[misc]
        with pytest.raises(AttributeError):
            d.extra = 1  # type: ignore[attr-defined]


class TestCompare:
    """Tests for exact ordering."""

    def test_same_scale_compares_unscaled(self):
        assert AvroDecimal(150, 2).compare(AvroDecimal(100, 2)) == 1
        assert AvroDecimal(100, 2).compare(AvroDecimal(150, 2)) == -1
        assert AvroDecimal(100, 2).compare(AvroDecimal(100, 2)) == 0

    def test_different_scales_are_exact(self):
        """1.05 > 1.049 even though both truncate to 1."""
        assert AvroDecimal(105, 2).compare(AvroDecimal(1049, 3)) == 1
        assert AvroDecimal(1049, 3).compare(AvroDecimal(105, 2)) == -1

    def test_different_scales_negative(self):
        assert AvroDecimal(-105, 2).compare(AvroDecimal(-1049, 3)) == -1

    def test_numerically_equal_compares_zero(self):
        assert AvroDecimal(10, 1).compare(AvroDecimal(100, 2)) == 0

    def test_compare_with_native(self):
        assert AvroDecimal(150, 2).compare(1) == 1
        assert AvroDecimal(150, 2).compare(Decimal("1.5")) == 0

    def test_compare_unsupported_raises(self):
        with pytest.raises(TypeError):
            AvroDecimal(1, 0).compare("1")  # type: ignore[arg-type]

    def test_operators(self):
        assert AvroDecimal(150, 2) > AvroDecimal(100, 2)
        assert AvroDecimal(100, 2) < AvroDecimal(150, 2)
        assert AvroDecimal(10, 1) <= AvroDecimal(100, 2)
        assert AvroDecimal(10, 1) >= AvroDecimal(100, 2)

    def test_operators_with_native(self):
        assert AvroDecimal(5, 1) < 1
        assert AvroDecimal(5, 1) < Decimal("0.6")
        assert 1 < AvroDecimal(15, 1)
        assert Decimal("2") >= AvroDecimal(2, 0)

    def test_ordering_with_float_raises(self):
        with pytest.raises(TypeError):
            _ = AvroDecimal(1, 0) < 1.5

    def test_sorting(self):
        values = [AvroDecimal(105, 2), AvroDecimal(-3, 0), AvroDecimal(1049, 3), AvroDecimal(0, 4)]
        assert sorted(values) == [AvroDecimal(-3, 0), AvroDecimal(0, 4), AvroDecimal(1049, 3), AvroDecimal(105, 2)]


class TestStringForm:
    """Tests for __str__ and __repr__."""

    def test_inserts_decimal_point(self):
        assert str(AvroDecimal(12345, 2)) == "123.45"
        assert str(AvroDecimal(-12345, 2)) == "-123.45"

    def test_scale_zero_has_no_point(self):
        assert str(AvroDecimal(100, 0)) == "100"
        assert str(AvroDecimal(-1, 0)) == "-1"

    def test_pads_when_fewer_digits_than_scale(self):
        assert str(AvroDecimal(5, 2)) == "0.05"
        assert str(AvroDecimal(-5, 3)) == "-0.005"
        assert str(AvroDecimal(0, 2)) == "0.00"

    def test_repr(self):
        assert repr(AvroDecimal(150, 2)) == "AvroDecimal(150, 2)"


class TestByteArray:
    """Tests for the self-describing serialization."""

    def test_layout(self):
        """Little-endian unscaled bytes followed by a little-endian Int32 scale."""
        assert AvroDecimal(1, 0).to_byte_array() == b"\x01\x00\x00\x00\x00"
        assert AvroDecimal(-1, 2).to_byte_array() == b"\xff\x02\x00\x00\x00"
        assert AvroDecimal(256, 3).to_byte_array() == b"\x00\x01\x03\x00\x00\x00"

    @pytest.mark.parametrize(
        "value",
        [AvroDecimal(0, 0), AvroDecimal(-129, 7), AvroDecimal(10**40, 12), AvroDecimal(-(2**96), 28)],
    )
    def test_round_trip(self, value):
        assert AvroDecimal.from_byte_array(value.to_byte_array()) == value

    def test_accepts_bytearray(self):
        assert AvroDecimal.from_byte_array(bytearray(b"\x7f\x01\x00\x00\x00")) == AvroDecimal(127, 1)

    def test_short_buffer_raises(self):
        with pytest.raises(SizingError) as exc_info:
            AvroDecimal.from_byte_array(b"\x01\x00\x00\x00")
        assert exc_info.value.required == 5
        assert exc_info.value.limit == 4


class TestIntegral:
    """Tests for the unbounded integral conversion."""

    def test_truncates_toward_zero(self):
        assert AvroDecimal(199, 2).to_integral() == 1
        assert AvroDecimal(-199, 2).to_integral() == -1

    def test_int_builtin(self):
        assert int(AvroDecimal(-199, 2)) == -1

    def test_no_overflow(self):
        assert AvroDecimal(10**50, 1).to_integral() == 10**49
