"""
Sequence Accessor — единый контракт enumerate/lookup для всех доменов

Два реализатора одного интерфейса Fibonacci:
- BoundedFibonacci: домены фиксированной ширины, поверх общей таблицы
- ArbitraryPrecisionFibonacci: домен произвольной точности, поверх рекуррентности

Отрицательные индексы (bidirectional extension):
    F(-n) = (-1)^(n+1) · F(n)
то есть значение F(n) берётся по неотрицательному пути и отрицается,
если n чётно, и возвращается без изменений, если n нечётно.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. lookup(n) == n-е значение enumerate() для всех представимых n
2. Переполнение и индекс вне диапазона → None (не wraparound, не exception)
3. Исчерпание конечного курсора терминально и идемпотентно
4. Каждый вызов enumerate() создаёт новый курсор с индекса 0
"""

from abc import ABC, abstractmethod
from itertools import islice
from typing import Any, Dict, Final, Iterator, Optional, Union

from fibseq.core.domain.big_integer import GMPY2_BACKEND, BigIntegerBackend
from fibseq.core.domain.integer_domain import STANDARD_DOMAINS, IntegerDomain
from fibseq.core.math.checked_arithmetic import validate_index
from fibseq.sequences.table import FibonacciTable, fibonacci_table


# =============================================================================
# CURSORS
# =============================================================================


class TableCursor:
    """
    Курсор по таблице Фибоначчи (конечная последовательность).

    Состояния: active → exhausted. Исчерпание терминально: дальнейшие
    вызовы next() снова поднимают StopIteration.
    """

    def __init__(self, table: FibonacciTable):
        self._table = table
        self._position = 0

    @property
    def position(self) -> int:
        """Индекс следующего значения."""
        return self._position

    @property
    def exhausted(self) -> bool:
        return self._position >= len(self._table)

    def __iter__(self) -> "TableCursor":
        return self

    def __next__(self) -> int:
        if self.exhausted:
            raise StopIteration

        value = self._table[self._position]
        self._position += 1
        return value


class RecurrenceCursor:
    """
    Курсор по бесконечной последовательности произвольной точности.

    Хранит пару аккумуляторов и флаг чётности: на чётном шаге отдаётся a
    и a ← a + b, на нечётном отдаётся b и b ← b + a.
    """

    def __init__(self, backend: BigIntegerBackend):
        self._a = backend.zero()
        self._b = backend.one()
        self._a_next = True
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def exhausted(self) -> bool:
        return False

    def __iter__(self) -> "RecurrenceCursor":
        return self

    def __next__(self) -> Any:
        if self._a_next:
            result = self._a
            self._a = self._a + self._b
        else:
            result = self._b
            self._b = self._b + self._a

        self._a_next = not self._a_next
        self._position += 1
        return result


# =============================================================================
# ACCESSOR INTERFACE
# =============================================================================


class Fibonacci(ABC):
    """
    Единый интерфейс последовательности Фибоначчи над доменом.

    Вызывающий код может быть generic по домену: все реализации
    предоставляют enumerate() и lookup(n) с одинаковой семантикой.
    """

    @property
    @abstractmethod
    def is_finite(self) -> bool:
        """True для доменов фиксированной ширины."""

    @abstractmethod
    def enumerate(self) -> Iterator[Any]:
        """Новый курсор, начинающийся с F(0)."""

    @abstractmethod
    def lookup(self, n: int) -> Optional[Any]:
        """F(n) или None, если значение не представимо в домене."""

    def __iter__(self) -> Iterator[Any]:
        return self.enumerate()


class BoundedFibonacci(Fibonacci):
    """
    Последовательность Фибоначчи над доменом фиксированной ширины.

    Все экземпляры одного домена читают одну и ту же таблицу.

    Examples:
        >>> from fibseq.core.domain import I8
        >>> fib = BoundedFibonacci(I8)
        >>> fib.lookup(10), fib.lookup(-10), fib.lookup(12)
        (55, -55, None)
    """

    def __init__(self, domain: IntegerDomain):
        self._domain = domain
        self._table = fibonacci_table(domain)

    @property
    def domain(self) -> IntegerDomain:
        return self._domain

    @property
    def table(self) -> FibonacciTable:
        return self._table

    @property
    def is_finite(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._table)

    def enumerate(self) -> TableCursor:
        return TableCursor(self._table)

    def lookup(self, n: int) -> Optional[int]:
        """
        F(n) в домене.

        Args:
            n: Индекс (любое integer-like значение, может быть отрицательным)

        Returns:
            - n >= 0: table[n] или None если n >= len(table)
            - n < 0, signed домен: ±table[-n] по правилу чётности или None
            - n < 0, unsigned домен: None

        Raises:
            TypeError: Если n не integer-like
        """
        index = validate_index(n)

        if index >= 0:
            return self._table.get(index)

        if not self._domain.signed:
            return None

        value = self._table.get(-index)
        if value is None:
            return None

        # F(-n) = (-1)^(n+1) · F(n): отрицание для чётных n
        if index % 2 == 0:
            return -value
        return value

    def __repr__(self) -> str:
        return f"BoundedFibonacci(domain={self._domain.name!r}, length={len(self._table)})"


class ArbitraryPrecisionFibonacci(Fibonacci):
    """
    Последовательность Фибоначчи произвольной точности.

    Таблицы нет: каждый курсор независимо ведёт рекуррентность, lookup
    прогоняет свежий курсор до нужной позиции. Арифметика выполняется
    типом backend'а (по умолчанию gmpy2.mpz).

    Examples:
        >>> fib = ArbitraryPrecisionFibonacci()
        >>> fib.lookup(100)
        mpz(354224848179261915075)
    """

    def __init__(self, backend: BigIntegerBackend = GMPY2_BACKEND):
        self._backend = backend

    @property
    def backend(self) -> BigIntegerBackend:
        return self._backend

    @property
    def is_finite(self) -> bool:
        return False

    def enumerate(self) -> RecurrenceCursor:
        return RecurrenceCursor(self._backend)

    def lookup(self, n: int) -> Optional[Any]:
        """
        F(n) произвольной точности.

        Returns:
            Значение типа backend'а или None, если |n| не представим
            как host-sized индекс (больше backend.max_index)

        Raises:
            TypeError: Если n не integer-like
        """
        index = validate_index(n)

        position = self._backend.to_index(-index if index < 0 else index)
        if position is None:
            return None

        value = next(islice(self.enumerate(), position, None))

        if index < 0 and position % 2 == 0:
            return -value
        return value

    def __repr__(self) -> str:
        return f"ArbitraryPrecisionFibonacci(backend={self._backend.name!r})"


# =============================================================================
# СТАНДАРТНЫЕ ПОСЛЕДОВАТЕЛЬНОСТИ
# =============================================================================

STANDARD_SEQUENCES: Final[Dict[str, BoundedFibonacci]] = {
    name: BoundedFibonacci(domain) for name, domain in STANDARD_DOMAINS.items()
}

BIG_FIBONACCI: Final[ArbitraryPrecisionFibonacci] = ArbitraryPrecisionFibonacci()


def fibonacci_for(domain: Union[IntegerDomain, BigIntegerBackend]) -> Fibonacci:
    """
    Accessor для произвольного домена.

    Args:
        domain: Домен фиксированной ширины или big-integer backend

    Returns:
        Fibonacci реализация для домена

    Raises:
        TypeError: Если domain не является поддерживаемым доменом
    """
    if isinstance(domain, IntegerDomain):
        standard = STANDARD_SEQUENCES.get(domain.name)
        if standard is not None and standard.domain == domain:
            return standard
        return BoundedFibonacci(domain)

    if isinstance(domain, BigIntegerBackend):
        if domain == GMPY2_BACKEND:
            return BIG_FIBONACCI
        return ArbitraryPrecisionFibonacci(domain)

    raise TypeError(f"Unsupported domain type: {type(domain).__name__}")
