"""
Test suite for fold compositions

Contains:
- tests/unit/          : Unit tests for the algebra and numerical primitives
"""
