"""
Checked Arithmetic — Safe Integer Primitives

Модуль обеспечивает целочисленные примитивы для доменов фиксированной ширины:
- Границы диапазона для signed/unsigned представлений заданной разрядности
- Checked addition: None вместо переполнения (никакого wraparound)
- Проверка принадлежности значения диапазону
- Валидация индексов (только integer-like значения)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не маскируется (возвращается None)
2. Результат checked_add всегда лежит в [min_value, max_value]
3. Все операции детерминированы и выполняются над точными int
"""

import operator
import struct
import sys
from typing import Final, Optional

# =============================================================================
# HOST-ПАРАМЕТРЫ
# =============================================================================

# Разрядность машинного слова (ширина указателя текущего интерпретатора)
NATIVE_WORD_BITS: Final[int] = struct.calcsize("P") * 8

# Максимальный индекс, адресуемый хостом (аналог usize для Python-последовательностей)
HOST_MAX_INDEX: Final[int] = sys.maxsize


# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНОВ
# =============================================================================


def signed_bounds(bits: int) -> tuple[int, int]:
    """
    Диапазон two's complement представления разрядности bits.

    Args:
        bits: Разрядность (> 0)

    Returns:
        (min_value, max_value) = (-2^(bits-1), 2^(bits-1) - 1)

    Examples:
        >>> signed_bounds(8)
        (-128, 127)
        >>> signed_bounds(1)
        (-1, 0)
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")

    half = 1 << (bits - 1)
    return -half, half - 1


def unsigned_bounds(bits: int) -> tuple[int, int]:
    """
    Диапазон беззнакового представления разрядности bits.

    Args:
        bits: Разрядность (> 0)

    Returns:
        (0, 2^bits - 1)

    Examples:
        >>> unsigned_bounds(8)
        (0, 255)
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")

    return 0, (1 << bits) - 1


# =============================================================================
# CHECKED ОПЕРАЦИИ
# =============================================================================


def is_in_range(value: int, min_value: int, max_value: int) -> bool:
    """Проверка min_value <= value <= max_value."""
    return min_value <= value <= max_value


def checked_add(a: int, b: int, min_value: int, max_value: int) -> Optional[int]:
    """
    Сложение с контролем переполнения.

    Точная сумма вычисляется в arbitrary-precision int и затем проверяется
    на принадлежность диапазону. Wraparound невозможен по построению.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое
        min_value: Нижняя граница домена
        max_value: Верхняя граница домена

    Returns:
        a + b если сумма представима, иначе None

    Examples:
        >>> checked_add(100, 27, -128, 127)
        127
        >>> checked_add(100, 28, -128, 127) is None
        True
    """
    result = a + b

    if not is_in_range(result, min_value, max_value):
        return None

    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_index(n: object) -> int:
    """
    Приведение индекса к int через протокол __index__.

    Принимает int, bool, gmpy2.mpz и любые типы с __index__.
    Float и строки индексами не являются.

    Args:
        n: Индекс

    Returns:
        Индекс как int

    Raises:
        TypeError: Если n не integer-like
    """
    try:
        return operator.index(n)
    except TypeError:
        raise TypeError(
            f"index must be an integer, got {type(n).__name__}"
        ) from None
