"""
BigInteger — Capability произвольной точности

Домен произвольной точности не владеет таблицей: значения вычисляются
рекуррентно. Арифметика делегируется внешней библиотеке (по умолчанию gmpy2),
здесь описан только минимальный набор требуемых операций:

- zero() / one() конструкторы
- сложение (+) и унарное отрицание (-)
- сравнение с нулём
- fallible конверсия в host-sized индекс (to_index)
"""

from dataclasses import dataclass
from typing import Any, Callable, Final, Optional

import gmpy2

from fibseq.core.math.checked_arithmetic import HOST_MAX_INDEX, validate_index


@dataclass(frozen=True)
class BigIntegerBackend:
    """
    Реализация big-integer capability поверх конкретного типа.

    Attributes:
        name: Имя backend'а (для диагностики и реестра)
        factory: Конструктор значений из int (gmpy2.mpz, int, ...)
        max_index: Максимальный индекс, представимый на хосте
    """

    name: str
    factory: Callable[[int], Any]
    max_index: int = HOST_MAX_INDEX

    def __post_init__(self) -> None:
        if self.max_index <= 0:
            raise ValueError(f"max_index must be positive, got {self.max_index}")

    def zero(self) -> Any:
        return self.factory(0)

    def one(self) -> Any:
        return self.factory(1)

    def from_int(self, value: int) -> Any:
        return self.factory(value)

    def to_index(self, value: Any) -> Optional[int]:
        """
        Конверсия значения в неотрицательный host-sized индекс.

        Returns:
            int в [0, max_index] или None если значение не представимо
        """
        index = validate_index(value)

        if index < 0 or index > self.max_index:
            return None

        return index

    def __str__(self) -> str:
        return self.name


# =============================================================================
# СТАНДАРТНЫЕ BACKEND'Ы
# =============================================================================

# GMP через gmpy2: основной backend произвольной точности
GMPY2_BACKEND: Final[BigIntegerBackend] = BigIntegerBackend(name="gmpy2", factory=gmpy2.mpz)

# Встроенный int Python
PYTHON_INT_BACKEND: Final[BigIntegerBackend] = BigIntegerBackend(name="int", factory=int)
