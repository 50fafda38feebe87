"""
Contract Validation Module

Модуль для валидации JSON контрактов fibseq.
"""

from .validators import (
    ContractValidator,
    FibonacciTableValidator,
    IntegerDomainValidator,
    SchemaLoader,
    validate_fibonacci_table,
    validate_integer_domain,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IntegerDomainValidator",
    "FibonacciTableValidator",
    # Functions
    "validate_integer_domain",
    "validate_fibonacci_table",
]
