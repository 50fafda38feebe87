"""
Sequences — overflow-bounded Fibonacci sequences.

Bounded Table Generator (table) + Sequence Accessor (accessor).
"""

from fibseq.sequences.accessor import (
    BIG_FIBONACCI,
    STANDARD_SEQUENCES,
    ArbitraryPrecisionFibonacci,
    BoundedFibonacci,
    Fibonacci,
    RecurrenceCursor,
    TableCursor,
    fibonacci_for,
)
from fibseq.sequences.table import (
    STANDARD_TABLES,
    TABLE_SCHEMA_VERSION,
    CheckedArithmetic,
    FibonacciTable,
    TableConstructionError,
    build_fibonacci_table,
    fibonacci_table,
    generate_fibonacci_values,
)

__all__ = [
    # Table generator — Constants
    "STANDARD_TABLES",
    "TABLE_SCHEMA_VERSION",
    # Table generator — Exceptions
    "TableConstructionError",
    # Table generator — Types
    "CheckedArithmetic",
    "FibonacciTable",
    # Table generator — Functions
    "build_fibonacci_table",
    "fibonacci_table",
    "generate_fibonacci_values",
    # Accessor — Types
    "Fibonacci",
    "BoundedFibonacci",
    "ArbitraryPrecisionFibonacci",
    "TableCursor",
    "RecurrenceCursor",
    # Accessor — Instances
    "STANDARD_SEQUENCES",
    "BIG_FIBONACCI",
    # Accessor — Functions
    "fibonacci_for",
]
