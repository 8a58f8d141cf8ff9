"""
Core algebra of fold compositions and numerical primitives.

This module contains the foundational building blocks: the Composition and
Partition types, their operations, and value comparison helpers. Nothing here
performs I/O.
"""
