"""
Errors — Исключения radix conversion engine

Всего два вида ошибок:
- InvalidAlphabet: алфавит короче 2 символов, дубликаты, невалидный descriptor
- UnrecognizedDigit: символ отсутствует в активном алфавите

Обе ошибки фатальны для текущего вызова: частичный результат не возвращается,
автоматический retry не выполняется.
"""

from typing import Any


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RadixConversionError(Exception):
    """Базовый класс для всех ошибок radixconv."""

    pass


class InvalidAlphabet(RadixConversionError, ValueError):
    """
    Алфавит не может использоваться как система счисления.

    Возникает при конструировании converter'а или в stand-alone вызове, если:
    1. Символов меньше двух
    2. Символы не попарно различны (или не hashable)
    3. Descriptor {"bijective": ..., "symbols": ...} не соответствует контракту
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid alphabet: {reason}")


class UnrecognizedDigit(RadixConversionError, LookupError):
    """
    Символ отсутствует в исходном алфавите.

    Прерывает конвертацию в момент обнаружения символа.
    """

    def __init__(self, symbol: Any):
        self.symbol = symbol
        super().__init__(f"Unrecognized digit: {symbol!r}")
