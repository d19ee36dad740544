"""Tests for numeric domain conversion."""

import math

import numpy as np
import pytest

from labyrinth.core.convert import approx_convert, convert, resolve_dtype
from labyrinth.core.errors import ConversionError


class TestResolveDtype:
    def test_python_types(self):
        assert resolve_dtype(int) == np.dtype(np.int64)
        assert resolve_dtype(float) == np.dtype(np.float64)

    def test_numpy_types_and_strings(self):
        assert resolve_dtype(np.uint32) == np.dtype(np.uint32)
        assert resolve_dtype("float32") == np.dtype(np.float32)

    @pytest.mark.parametrize("dtype", [bool, np.bool_, complex, object])
    def test_rejects_non_numeric(self, dtype):
        with pytest.raises(TypeError, match="Numeric domain"):
            resolve_dtype(dtype)


class TestConvert:
    @pytest.mark.parametrize(
        "value, src, dst",
        [
            (0, np.int32, np.uint32),
            (2_147_483_647, np.int32, np.uint32),
            (4_294_967_295, np.uint64, np.uint32),
            (-5, np.int64, np.int32),
            (1 << 40, np.uint64, np.float64),
        ],
    )
    def test_round_trip(self, value, src, dst):
        there = convert(convert(value, src), dst)
        assert convert(there, src) == value

    def test_negative_to_unsigned_fails(self):
        with pytest.raises(ConversionError):
            convert(-1, np.uint32)

    def test_overflow_fails(self):
        with pytest.raises(ConversionError):
            convert(4_294_967_296, np.uint32)

    def test_returns_plain_python_numbers(self):
        assert type(convert(np.uint32(7), np.uint32)) is int
        assert type(convert(7, np.float32)) is float

    def test_integral_float_to_int(self):
        assert convert(3.0, np.uint32) == 3

    def test_fractional_float_to_int_fails(self):
        with pytest.raises(ConversionError):
            convert(3.5, np.uint32)

    def test_nan_to_int_fails(self):
        with pytest.raises(ConversionError):
            convert(float("nan"), np.uint32)

    def test_int_losing_float_precision_fails(self):
        assert convert(2**53, np.float64) == float(2**53)
        with pytest.raises(ConversionError):
            convert(2**53 + 1, np.float64)

    def test_float64_to_float32_exactness(self):
        assert convert(0.5, np.float32) == 0.5
        with pytest.raises(ConversionError):
            convert(0.1, np.float32)

    def test_huge_int_to_float_fails(self):
        with pytest.raises(ConversionError):
            convert(10**400, np.float64)

    def test_nan_stays_nan(self):
        assert math.isnan(convert(float("nan"), np.float32))

    def test_rejects_non_numbers(self):
        with pytest.raises(TypeError):
            convert("1", np.uint32)
        with pytest.raises(TypeError):
            convert(True, np.uint32)


class TestApproxConvert:
    def test_truncates_toward_zero(self):
        assert approx_convert(3.9, np.uint32) == 3
        assert approx_convert(-3.9, np.int32) == -3

    def test_small_negative_fraction_truncates_to_zero(self):
        assert approx_convert(-0.5, np.uint32) == 0

    def test_negative_whole_pixel_fails(self):
        with pytest.raises(ConversionError):
            approx_convert(-1.0, np.uint32)

    def test_overflow_fails(self):
        with pytest.raises(ConversionError):
            approx_convert(4_294_967_296.0, np.uint32)

    def test_largest_value_fits(self):
        assert approx_convert(4_294_967_295.0, np.uint32) == 4_294_967_295

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), -float("inf")])
    def test_non_finite_to_int_fails(self, value):
        with pytest.raises(ConversionError):
            approx_convert(value, np.uint32)

    def test_float_narrowing_rounds(self):
        assert approx_convert(0.1, np.float32) == float(np.float32(0.1))

    def test_float_narrowing_overflow_fails(self):
        with pytest.raises(ConversionError):
            approx_convert(1e300, np.float32)

    def test_int_to_float(self):
        assert approx_convert(2**53 + 1, np.float64) == float(2**53)


class TestConversionError:
    def test_message_for_int(self):
        with pytest.raises(ConversionError) as info:
            convert(-1, np.uint32)
        assert str(info.value) == 'Conversion error or overflow while converting "-1"'
        assert info.value.value == "-1"

    def test_message_for_float(self):
        with pytest.raises(ConversionError) as info:
            approx_convert(4294967296.0, np.uint32)
        assert str(info.value) == (
            'Conversion error or overflow while converting "4294967296.0"'
        )

    def test_message_unwraps_numpy_scalars(self):
        with pytest.raises(ConversionError) as info:
            convert(np.uint64(4_294_967_296), np.uint32)
        assert info.value.value == "4294967296"

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            convert(-1, np.uint32)
