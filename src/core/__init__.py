"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks: the DecimalBigInt
value type, digit-level arithmetic kernels, 64-bit number theory helpers,
JSON Schema contracts, settings and logging setup.
"""
