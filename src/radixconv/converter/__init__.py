"""
Converter — оркестрация конвертации между двумя алфавитами.
"""

from radixconv.converter.base_converter import (
    BaseConverter,
    ConversionPath,
    decode_be,
    decode_le,
    encode_be,
    encode_le,
)
from radixconv.converter.standalone import from_array, from_iterable, to_array, to_iterable

__all__ = [
    # Converter
    "BaseConverter",
    "ConversionPath",
    # Value dispatch
    "decode_le",
    "decode_be",
    "encode_le",
    "encode_be",
    # Stand-alone forms
    "from_iterable",
    "from_array",
    "to_iterable",
    "to_array",
]
