"""
Stand-alone (one-shot) формы Value arithmetic, параметризованные алфавитом.

Не требуют конструирования converter'а. Алфавит: любая форма, допустимая
для coerce_alphabet (включая bijective descriptor).

- from_iterable: LE символы → Value
- from_array:    BE символы → Value
- to_iterable:   Value → lazy LE символы
- to_array:      Value → BE список символов
"""

from typing import Any, Iterable, Iterator, List

from radixconv.converter.base_converter import decode_be, decode_le, encode_be, encode_le
from radixconv.core.domain.symbol_table import SymbolTable


def from_iterable(digits: Iterable[Any], alphabet: Any) -> int:
    """
    Little-endian символы → Value.

    Raises:
        InvalidAlphabet: Если алфавит невалиден
        UnrecognizedDigit: Если символ отсутствует в алфавите

    Examples:
        >>> from_iterable("1011", "01")
        13
    """
    return decode_le(digits, SymbolTable.build(alphabet))


def from_array(digits: Iterable[Any], alphabet: Any) -> int:
    """
    Big-endian символы → Value.

    Examples:
        >>> from_array("ff", "0123456789abcdef")
        255
    """
    return decode_be(digits, SymbolTable.build(alphabet))


def to_iterable(value: int, alphabet: Any) -> Iterator[Any]:
    """
    Value → lazy little-endian символы.

    Алфавит и value валидируются сразу, цифры выдаются лениво.

    Examples:
        >>> list(to_iterable(13, "01"))
        ['1', '0', '1', '1']
    """
    return encode_le(value, SymbolTable.build(alphabet))


def to_array(value: int, alphabet: Any) -> List[Any]:
    """
    Value → big-endian список символов.

    Examples:
        >>> to_array(255, "0123456789abcdef")
        ['f', 'f']
    """
    return encode_be(value, SymbolTable.build(alphabet))
