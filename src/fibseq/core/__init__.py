"""
Core domain models, integer primitives, and contracts.

This module contains the foundational building blocks that the sequence
engine is parameterized over.
"""
