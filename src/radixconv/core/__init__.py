"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the radix conversion
engine: alphabets, symbol tables, positional arithmetic and block relations.
"""
