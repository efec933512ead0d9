"""
Positional — Value arithmetic для стандартной нумерации

Value: неограниченное неотрицательное целое (Python int), каноническое
промежуточное представление между двумя несвязанными алфавитами.

ФОРМУЛЫ:
    from_le: v += d_i * m;  m *= radix      (Horner-in-reverse, LSB → MSB)
    from_be: v = v * radix + d_i            (классический Horner, MSB → LSB)
    to_le:   пока v > 0: emit v % radix; v //= radix
    to_be:   to_le, собранный в список и развёрнутый

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Value никогда не отрицательно
2. to_le(0) не выдаёт ни одной цифры (явный "ноль" обрабатывает вызывающий)
3. Все значения цифр лежат в [0, radix)
"""

from typing import Any, Iterable, Iterator, List, Optional

from radixconv.core.domain.symbol_table import SymbolTable


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_value(value: Any) -> int:
    """
    Валидация Value: целое и неотрицательное.

    Args:
        value: Проверяемое значение

    Returns:
        value (int)

    Raises:
        TypeError: Если value не int
        ValueError: Если value < 0
    """
    if not isinstance(value, int):
        raise TypeError(f"value must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    return value


# =============================================================================
# DIGITS → VALUE
# =============================================================================


def from_le(digits: Iterable[Any], table: SymbolTable, radix: Optional[int] = None) -> int:
    """
    Little-endian последовательность символов → Value.

    Args:
        digits: Символы, LSB первым
        table: Таблица исходного алфавита
        radix: Основание (default: table.radix)

    Returns:
        Value

    Raises:
        UnrecognizedDigit: Если символ отсутствует в алфавите

    Examples:
        >>> from_le([1, 0, 1, 1], SymbolTable.build([0, 1]))
        13
    """
    base = table.radix if radix is None else radix
    value, place = 0, 1
    for symbol in digits:
        value += table.lookup(symbol) * place
        place *= base
    return value


def from_be(digits: Iterable[Any], table: SymbolTable, radix: Optional[int] = None) -> int:
    """
    Big-endian последовательность символов → Value (Horner).

    Examples:
        >>> from_be([1, 1, 0, 1], SymbolTable.build([0, 1]))
        13
    """
    base = table.radix if radix is None else radix
    value = 0
    for symbol in digits:
        value = value * base + table.lookup(symbol)
    return value


# =============================================================================
# VALUE → DIGITS
# =============================================================================


def _iter_le(value: int, symbols: tuple[Any, ...]) -> Iterator[Any]:
    base = len(symbols)
    while value > 0:
        value, digit = divmod(value, base)
        yield symbols[digit]


def to_le(value: int, table: SymbolTable) -> Iterator[Any]:
    """
    Value → lazy little-endian последовательность символов.

    Value валидируется сразу, до первого next().
    Для value == 0 последовательность пуста.

    Raises:
        TypeError, ValueError: см. validate_value
    """
    return _iter_le(validate_value(value), table.symbols)


def to_be(value: int, table: SymbolTable) -> List[Any]:
    """
    Value → big-endian список символов.

    Старшая цифра известна только после окончания цикла, поэтому буферизуем.
    """
    digits = list(to_le(value, table))
    digits.reverse()
    return digits
