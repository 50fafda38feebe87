"""
fibseq — overflow-bounded Fibonacci sequences over integer domains.

Fixed-width domains (8..128 bit signed/unsigned, native word) enumerate the
sequence up to the last representable value; the arbitrary-precision domain
enumerates it forever. Indexed lookup supports negative indices and reports
non-representable values as None.
"""

from fibseq.core.domain import (
    GMPY2_BACKEND,
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    PYTHON_INT_BACKEND,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    BigIntegerBackend,
    IntegerDomain,
)
from fibseq.sequences import (
    BIG_FIBONACCI,
    ArbitraryPrecisionFibonacci,
    BoundedFibonacci,
    Fibonacci,
    TableConstructionError,
    fibonacci_for,
)

__version__ = "0.1.0"

__all__ = [
    "IntegerDomain",
    "BigIntegerBackend",
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
    "GMPY2_BACKEND",
    "PYTHON_INT_BACKEND",
    "Fibonacci",
    "BoundedFibonacci",
    "ArbitraryPrecisionFibonacci",
    "BIG_FIBONACCI",
    "TableConstructionError",
    "fibonacci_for",
]
