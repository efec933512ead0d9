"""
Contract Validation Module

JSON Schema контракт tagged descriptor'а алфавита.
"""

from .validators import (
    ALPHABET_DESCRIPTOR_VALIDATOR,
    SCHEMA_DIR,
    describe_error,
    descriptor_error,
    load_schema,
)

__all__ = [
    "SCHEMA_DIR",
    "ALPHABET_DESCRIPTOR_VALIDATOR",
    "load_schema",
    "descriptor_error",
    "describe_error",
]
