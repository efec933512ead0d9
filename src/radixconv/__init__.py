"""
radixconv — конвертация последовательностей цифр между позиционными системами
счисления произвольных оснований, включая bijective нумерацию.
"""

from radixconv.converter import (
    BaseConverter,
    ConversionPath,
    from_array,
    from_iterable,
    to_array,
    to_iterable,
)
from radixconv.core.domain import (
    Alphabet,
    BijectiveAlphabet,
    InvalidAlphabet,
    RadixConversionError,
    StandardAlphabet,
    SymbolTable,
    UnrecognizedDigit,
    coerce_alphabet,
)
from radixconv.core.math import RadixRelation

__version__ = "0.1.0"

__all__ = [
    # Converter
    "BaseConverter",
    "ConversionPath",
    # Stand-alone forms
    "from_iterable",
    "from_array",
    "to_iterable",
    "to_array",
    # Domain
    "Alphabet",
    "StandardAlphabet",
    "BijectiveAlphabet",
    "SymbolTable",
    "coerce_alphabet",
    "RadixRelation",
    # Errors
    "RadixConversionError",
    "InvalidAlphabet",
    "UnrecognizedDigit",
]
