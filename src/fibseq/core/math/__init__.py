"""
Core math modules для fibseq

Целочисленные примитивы с гарантией отсутствия переполнения.
"""

from fibseq.core.math.checked_arithmetic import (
    HOST_MAX_INDEX,
    NATIVE_WORD_BITS,
    checked_add,
    is_in_range,
    signed_bounds,
    unsigned_bounds,
    validate_index,
)

__all__ = [
    # Host constants
    "HOST_MAX_INDEX",
    "NATIVE_WORD_BITS",
    # Range bounds
    "signed_bounds",
    "unsigned_bounds",
    # Checked operations
    "checked_add",
    "is_in_range",
    # Validation
    "validate_index",
]
