"""
Test suite for fibseq

Contains:
- tests/unit/          : Unit tests for individual modules
"""
