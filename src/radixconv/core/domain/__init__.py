"""
Domain models and value objects.

Contains alphabets (tagged sum type), symbol tables and the error hierarchy.
"""

from radixconv.core.domain.alphabet import (
    MIN_RADIX,
    Alphabet,
    BijectiveAlphabet,
    NumerationKind,
    StandardAlphabet,
    coerce_alphabet,
)
from radixconv.core.domain.errors import InvalidAlphabet, RadixConversionError, UnrecognizedDigit
from radixconv.core.domain.symbol_table import SymbolTable

__all__ = [
    # Alphabet module
    "MIN_RADIX",
    "Alphabet",
    "BijectiveAlphabet",
    "NumerationKind",
    "StandardAlphabet",
    "coerce_alphabet",
    # Errors
    "RadixConversionError",
    "InvalidAlphabet",
    "UnrecognizedDigit",
    # Symbol table
    "SymbolTable",
]
