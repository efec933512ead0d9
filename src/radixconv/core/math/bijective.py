"""
Bijective — Codec для bijective нумерации

Алфавит размера b в bijective режиме представляет bijective base-k, k = b - 1:
позиционные цифры 1..k, символ с индексом 0 зарезервирован как zero-sentinel.

ФОРМУЛЫ (to_le):
    value == 0 → [sentinel]
    иначе пока value != 0:
        q = ceil(value / k) - 1
        digit = value - q * k        # всегда в [1, k]
        emit symbols[digit]; value = q

from_le / from_be: как в стандартной нумерации с основанием k, но цифра
со значением 0 пропускается: ничего не добавляет и НЕ сдвигает разряд.
Корректный bijective поток содержит sentinel только как единственную цифру
значения 0; на прочих (malformed) потоках поведение пропуска сохранено как есть.
"""

from typing import Any, Iterable, Iterator, List

from radixconv.core.domain.symbol_table import SymbolTable
from radixconv.core.math.positional import validate_value


# =============================================================================
# DIGITS → VALUE
# =============================================================================


def from_le(digits: Iterable[Any], table: SymbolTable) -> int:
    """
    Bijective little-endian → Value.

    Examples:
        >>> from_le(["a", "a"], SymbolTable.build({"bijective": True, "symbols": ["_", "a", "b", "c"]}))
        4
    """
    base = table.positional_base
    value, place = 0, 1
    for symbol in digits:
        digit = table.lookup(symbol)
        if digit == 0:
            continue
        value += digit * place
        place *= base
    return value


def from_be(digits: Iterable[Any], table: SymbolTable) -> int:
    """Bijective big-endian → Value (Horner по основанию k)."""
    base = table.positional_base
    value = 0
    for symbol in digits:
        digit = table.lookup(symbol)
        if digit == 0:
            continue
        value = value * base + digit
    return value


# =============================================================================
# VALUE → DIGITS
# =============================================================================


def _iter_le(value: int, symbols: tuple[Any, ...]) -> Iterator[Any]:
    if value == 0:
        yield symbols[0]
        return

    base = len(symbols) - 1
    while value != 0:
        quotient = -(-value // base) - 1
        yield symbols[value - quotient * base]
        value = quotient


def to_le(value: int, table: SymbolTable) -> Iterator[Any]:
    """
    Value → lazy bijective little-endian последовательность.

    Каждая выданная цифра, кроме единственного sentinel для 0, лежит в [1, k].
    """
    return _iter_le(validate_value(value), table.symbols)


def to_be(value: int, table: SymbolTable) -> List[Any]:
    """Value → bijective big-endian список."""
    digits = list(to_le(value, table))
    digits.reverse()
    return digits
