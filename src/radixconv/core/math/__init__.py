"""
Core math modules для radixconv

Позиционная арифметика (standard / bijective) и вывод соотношения блоков.
"""

from radixconv.core.math import bijective, positional
from radixconv.core.math.positional import validate_value
from radixconv.core.math.radix_relation import RadixRelation, common_root, exact_log

__all__ = [
    # Value arithmetic
    "positional",
    "bijective",
    "validate_value",
    # Radix relation
    "RadixRelation",
    "common_root",
    "exact_log",
]
