"""
Domain models and value objects.

Contains integer domains (fixed-width and arbitrary precision).
"""

from fibseq.core.domain.big_integer import (
    GMPY2_BACKEND,
    PYTHON_INT_BACKEND,
    BigIntegerBackend,
)
from fibseq.core.domain.integer_domain import (
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    STANDARD_DOMAINS,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    IntegerDomain,
    domain_by_name,
)

__all__ = [
    # Fixed-width domains
    "IntegerDomain",
    "I8",
    "U8",
    "I16",
    "U16",
    "I32",
    "U32",
    "I64",
    "U64",
    "I128",
    "U128",
    "ISIZE",
    "USIZE",
    "STANDARD_DOMAINS",
    "domain_by_name",
    # Arbitrary precision
    "BigIntegerBackend",
    "GMPY2_BACKEND",
    "PYTHON_INT_BACKEND",
]
