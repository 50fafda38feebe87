"""
Тесты для модуля Checked Arithmetic

Проверяет:
1. Границы signed/unsigned диапазонов
2. Checked addition на границах (без wraparound)
3. Принадлежность диапазону
4. Валидацию индексов
"""

import struct
import sys

import gmpy2
import pytest

from fibseq.core.math.checked_arithmetic import (
    HOST_MAX_INDEX,
    NATIVE_WORD_BITS,
    checked_add,
    is_in_range,
    signed_bounds,
    unsigned_bounds,
    validate_index,
)

# =============================================================================
# ТЕСТЫ ГРАНИЦ ДИАПАЗОНОВ
# =============================================================================


class TestBounds:
    """Тесты signed_bounds / unsigned_bounds"""

    @pytest.mark.parametrize(
        "bits,expected",
        [
            (8, (-128, 127)),
            (16, (-32768, 32767)),
            (32, (-2147483648, 2147483647)),
            (64, (-9223372036854775808, 9223372036854775807)),
        ],
    )
    def test_signed_bounds(self, bits, expected) -> None:
        """Two's complement диапазоны стандартных разрядностей"""
        assert signed_bounds(bits) == expected

    @pytest.mark.parametrize(
        "bits,expected",
        [
            (8, (0, 255)),
            (16, (0, 65535)),
            (32, (0, 4294967295)),
            (64, (0, 18446744073709551615)),
        ],
    )
    def test_unsigned_bounds(self, bits, expected) -> None:
        """Беззнаковые диапазоны стандартных разрядностей"""
        assert unsigned_bounds(bits) == expected

    def test_128_bit_bounds(self) -> None:
        """128-битные границы точные (без float-приближений)"""
        assert signed_bounds(128) == (-(2**127), 2**127 - 1)
        assert unsigned_bounds(128) == (0, 2**128 - 1)

    def test_invalid_bits_raises(self) -> None:
        """Неположительная разрядность вызывает ошибку"""
        with pytest.raises(ValueError, match="bits must be positive"):
            signed_bounds(0)

        with pytest.raises(ValueError, match="bits must be positive"):
            unsigned_bounds(-8)


class TestHostConstants:
    """Тесты host-параметров"""

    def test_native_word_matches_pointer_size(self) -> None:
        assert NATIVE_WORD_BITS == struct.calcsize("P") * 8
        assert NATIVE_WORD_BITS in (32, 64)

    def test_host_max_index(self) -> None:
        assert HOST_MAX_INDEX == sys.maxsize


# =============================================================================
# ТЕСТЫ CHECKED ADDITION
# =============================================================================


class TestCheckedAdd:
    """Тесты checked_add"""

    def test_sum_in_range(self) -> None:
        """Представимая сумма возвращается как есть"""
        assert checked_add(2, 3, -128, 127) == 5
        assert checked_add(-100, -28, -128, 127) == -128

    def test_sum_at_upper_boundary(self) -> None:
        """Ровно max_value представимо"""
        assert checked_add(100, 27, -128, 127) == 127
        assert checked_add(200, 55, 0, 255) == 255

    def test_positive_overflow_returns_none(self) -> None:
        """Переполнение сверху → None, а не wraparound"""
        assert checked_add(100, 28, -128, 127) is None
        assert checked_add(89, 55, -128, 127) is None
        assert checked_add(233, 144, 0, 255) is None

    def test_negative_overflow_returns_none(self) -> None:
        """Переполнение снизу → None"""
        assert checked_add(-100, -29, -128, 127) is None
        assert checked_add(0, -1, 0, 255) is None

    def test_wide_domain_exact(self) -> None:
        """Для 128 бит сумма точная"""
        hi = 2**128 - 1
        assert checked_add(hi - 1, 1, 0, hi) == hi
        assert checked_add(hi, 1, 0, hi) is None


class TestIsInRange:
    """Тесты is_in_range"""

    def test_inclusive_bounds(self) -> None:
        assert is_in_range(0, 0, 255)
        assert is_in_range(255, 0, 255)
        assert not is_in_range(256, 0, 255)
        assert not is_in_range(-1, 0, 255)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ ИНДЕКСОВ
# =============================================================================


class TestValidateIndex:
    """Тесты validate_index"""

    def test_int_passthrough(self) -> None:
        assert validate_index(10) == 10
        assert validate_index(-10) == -10

    def test_mpz_converted(self) -> None:
        """gmpy2.mpz поддерживает __index__"""
        result = validate_index(gmpy2.mpz(42))
        assert result == 42
        assert type(result) is int

    @pytest.mark.parametrize("value", [1.0, "3", None, 2.5])
    def test_non_integer_raises(self, value) -> None:
        """Не integer-like значения вызывают TypeError"""
        with pytest.raises(TypeError, match="index must be an integer"):
            validate_index(value)
