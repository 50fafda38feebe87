"""
Bounded Table Generator — таблицы Фибоначчи для доменов фиксированной ширины

Для каждого домена вычисляется максимальный префикс последовательности
Фибоначчи, все значения которого представимы в домене. Алгоритм один для всех
доменов и опирается только на checked-arithmetic capability:
zero, one, checked_add, contains.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. values[0] = 0, values[1] = 1, values[i] = values[i-1] + values[i-2]
2. values[-1] + values[-2] не представимо в домене
3. Таблица строится один раз и далее только читается
4. Значение вне домена → TableConstructionError (а не "правдоподобная" таблица)

Числовые литералы таблиц нигде не захардкожены: длина и значения следуют
исключительно из checked_add домена.
"""

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Final, Iterator, Mapping, Optional, Protocol

from fibseq.core.domain.integer_domain import STANDARD_DOMAINS, IntegerDomain

logger = logging.getLogger(__name__)

TABLE_SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class TableConstructionError(Exception):
    """
    Нарушение инварианта при построении таблицы.

    Означает сломанный checked-arithmetic примитив (например, checked_add,
    который никогда не сообщает о переполнении). Это дефект окружения,
    а не ошибка пользователя: построение таблицы прерывается.
    """
    pass


# =============================================================================
# CAPABILITY
# =============================================================================


class CheckedArithmetic(Protocol):
    """Минимальный набор операций, достаточный для построения таблицы."""

    @property
    def zero(self) -> int: ...

    @property
    def one(self) -> int: ...

    def checked_add(self, a: int, b: int) -> Optional[int]: ...

    def contains(self, value: int) -> bool: ...


# =============================================================================
# TABLE
# =============================================================================


@dataclass(frozen=True)
class FibonacciTable:
    """
    Неизменяемая таблица Фибоначчи одного домена.

    Attributes:
        domain: Домен, для которого построена таблица
        values: Все представимые числа Фибоначчи в порядке индексов
    """

    domain: IntegerDomain
    values: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def get(self, index: int) -> Optional[int]:
        """Значение по неотрицательному индексу или None за пределами таблицы."""
        if 0 <= index < len(self.values):
            return self.values[index]
        return None

    @property
    def last(self) -> int:
        """Наибольшее представимое число Фибоначчи домена."""
        return self.values[-1]

    def to_contract(self) -> Dict[str, Any]:
        """Документ fibonacci_table контракта."""
        return {
            "schema_version": TABLE_SCHEMA_VERSION,
            "domain": self.domain.to_contract(),
            "length": len(self.values),
            "values": list(self.values),
        }


# =============================================================================
# GENERATOR
# =============================================================================


def _checked_term(arithmetic: CheckedArithmetic, value: int, index: int) -> int:
    if not arithmetic.contains(value):
        logger.error(
            "Fibonacci term F(%d)=%d is outside domain %s", index, value, arithmetic
        )
        raise TableConstructionError(
            f"F({index})={value} does not fit domain {arithmetic}; "
            f"checked arithmetic reported success for a non-representable value"
        )
    return value


def generate_fibonacci_values(arithmetic: CheckedArithmetic) -> tuple[int, ...]:
    """
    Максимальный префикс последовательности Фибоначчи, представимый в домене.

    Алгоритм:
        a, b = zero, one
        emit a, b
        loop:
            next = checked_add(a, b)
            if next is None: stop
            emit next
            a, b = b, next

    Каждое значение дополнительно проверяется через contains и сверяется с
    точной суммой: checked_add, "всегда возвращающий успех", не может
    произвести таблицу со значением вне домена.

    Args:
        arithmetic: Checked-arithmetic capability домена

    Returns:
        Кортеж значений, начиная с F(0) = 0

    Raises:
        TableConstructionError: Если нарушен инвариант представимости

    Examples:
        >>> from fibseq.core.domain import I8
        >>> generate_fibonacci_values(I8)
        (0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89)
    """
    a = _checked_term(arithmetic, arithmetic.zero, 0)
    b = _checked_term(arithmetic, arithmetic.one, 1)
    values = [a, b]

    while True:
        successor = arithmetic.checked_add(a, b)
        if successor is None:
            break

        index = len(values)
        if successor != a + b:
            logger.error(
                "checked_add(%d, %d) returned %d in domain %s", a, b, successor, arithmetic
            )
            raise TableConstructionError(
                f"checked_add({a}, {b}) returned {successor} in domain {arithmetic}"
            )

        values.append(_checked_term(arithmetic, successor, index))
        a, b = b, successor

    return tuple(values)


def build_fibonacci_table(domain: IntegerDomain) -> FibonacciTable:
    """
    Построение таблицы Фибоначчи для домена фиксированной ширины.

    Raises:
        TableConstructionError: Если нарушен инвариант представимости
    """
    table = FibonacciTable(domain=domain, values=generate_fibonacci_values(domain))
    logger.debug(
        "Built Fibonacci table for %s: length=%d last=%d", domain, len(table), table.last
    )
    return table


# =============================================================================
# РЕЕСТР ТАБЛИЦ
# =============================================================================

# Стандартные домены: таблицы строятся один раз при импорте и далее только читаются
STANDARD_TABLES: Final[Mapping[IntegerDomain, FibonacciTable]] = MappingProxyType(
    {domain: build_fibonacci_table(domain) for domain in STANDARD_DOMAINS.values()}
)

# Пользовательские домены: lazy-once под блокировкой
_custom_tables: Dict[IntegerDomain, FibonacciTable] = {}
_custom_tables_lock = threading.Lock()


def fibonacci_table(domain: IntegerDomain) -> FibonacciTable:
    """
    Таблица Фибоначчи домена (строится не более одного раза за процесс).

    Args:
        domain: Домен фиксированной ширины

    Returns:
        Общая неизменяемая таблица домена
    """
    table = STANDARD_TABLES.get(domain)
    if table is not None:
        return table

    table = _custom_tables.get(domain)
    if table is not None:
        return table

    with _custom_tables_lock:
        table = _custom_tables.get(domain)
        if table is None:
            table = build_fibonacci_table(domain)
            _custom_tables[domain] = table
    return table
