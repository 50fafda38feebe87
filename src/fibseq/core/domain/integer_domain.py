"""
IntegerDomain — Модель целочисленного домена фиксированной ширины

Immutable Pydantic модель, описывающая представление целых чисел:
разрядность + знаковость. Предоставляет checked-arithmetic capability
(zero, one, checked_add, contains, max_value), поверх которой строятся
таблицы Фибоначчи.

Стандартные домены: 8/16/32/64/128 бит signed и unsigned + машинное слово.
"""

from typing import Any, Dict, Final, Optional

from pydantic import BaseModel, Field

from fibseq.core.math.checked_arithmetic import (
    NATIVE_WORD_BITS,
    checked_add,
    is_in_range,
    signed_bounds,
    unsigned_bounds,
)


# =============================================================================
# DOMAIN MODEL
# =============================================================================


class IntegerDomain(BaseModel):
    """
    Целочисленный домен фиксированной ширины.

    Immutable модель (frozen=True): домен является ключом реестра таблиц
    и не может изменяться после создания.
    """

    name: str = Field(..., min_length=1, description="Имя домена (например, 'i8')")
    bits: int = Field(..., ge=2, le=4096, description="Разрядность представления")
    signed: bool = Field(..., description="Two's complement (True) или unsigned (False)")

    model_config = {"frozen": True}

    @property
    def min_value(self) -> int:
        """Минимальное представимое значение."""
        return self._bounds()[0]

    @property
    def max_value(self) -> int:
        """Максимальное представимое значение."""
        return self._bounds()[1]

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def _bounds(self) -> tuple[int, int]:
        if self.signed:
            return signed_bounds(self.bits)
        return unsigned_bounds(self.bits)

    def contains(self, value: int) -> bool:
        """Проверка, что value представимо в домене."""
        lo, hi = self._bounds()
        return is_in_range(value, lo, hi)

    def checked_add(self, a: int, b: int) -> Optional[int]:
        """
        Сложение в домене с контролем переполнения.

        Returns:
            a + b если сумма представима, иначе None
        """
        lo, hi = self._bounds()
        return checked_add(a, b, lo, hi)

    def to_contract(self) -> Dict[str, Any]:
        """Документ integer_domain контракта."""
        return {
            "name": self.name,
            "bits": self.bits,
            "signed": self.signed,
            "min_value": self.min_value,
            "max_value": self.max_value,
        }

    def __str__(self) -> str:
        return self.name


# =============================================================================
# СТАНДАРТНЫЕ ДОМЕНЫ
# =============================================================================

I8: Final[IntegerDomain] = IntegerDomain(name="i8", bits=8, signed=True)
U8: Final[IntegerDomain] = IntegerDomain(name="u8", bits=8, signed=False)
I16: Final[IntegerDomain] = IntegerDomain(name="i16", bits=16, signed=True)
U16: Final[IntegerDomain] = IntegerDomain(name="u16", bits=16, signed=False)
I32: Final[IntegerDomain] = IntegerDomain(name="i32", bits=32, signed=True)
U32: Final[IntegerDomain] = IntegerDomain(name="u32", bits=32, signed=False)
I64: Final[IntegerDomain] = IntegerDomain(name="i64", bits=64, signed=True)
U64: Final[IntegerDomain] = IntegerDomain(name="u64", bits=64, signed=False)
I128: Final[IntegerDomain] = IntegerDomain(name="i128", bits=128, signed=True)
U128: Final[IntegerDomain] = IntegerDomain(name="u128", bits=128, signed=False)

# Машинное слово (аналог isize/usize)
ISIZE: Final[IntegerDomain] = IntegerDomain(name="isize", bits=NATIVE_WORD_BITS, signed=True)
USIZE: Final[IntegerDomain] = IntegerDomain(name="usize", bits=NATIVE_WORD_BITS, signed=False)

STANDARD_DOMAINS: Final[Dict[str, IntegerDomain]] = {
    domain.name: domain
    for domain in (I8, U8, I16, U16, I32, U32, I64, U64, I128, U128, ISIZE, USIZE)
}


def domain_by_name(name: str) -> IntegerDomain:
    """
    Поиск стандартного домена по имени.

    Raises:
        KeyError: Если домен с таким именем не зарегистрирован
    """
    try:
        return STANDARD_DOMAINS[name]
    except KeyError:
        raise KeyError(
            f"Unknown integer domain {name!r}; expected one of {sorted(STANDARD_DOMAINS)}"
        ) from None
