"""
Тесты для Positional — Value arithmetic стандартной нумерации

Проверяемые инварианты:
1. Round-trip from_le(to_le(n)) == n и from_be(to_be(n)) == n для radix 2..120
2. to_le(0) пуст
3. Horner-формы LE/BE согласованы
4. Валидация Value (int, неотрицательное) сразу, до итерации
"""

import pytest

from radixconv.core.domain import SymbolTable, UnrecognizedDigit
from radixconv.core.math import positional, validate_value

INTEGERS = [
    0,
    1,
    7,
    255,
    65536,
    10**20 + 12345,
    2**127 - 1,
    123456789012345678901234567890123456789,
]


# =============================================================================
# ТЕСТЫ: Digits → Value
# =============================================================================


class TestFromDigits:
    """Тесты from_le / from_be"""

    def test_from_le_binary(self) -> None:
        table = SymbolTable.build([0, 1])
        assert positional.from_le([1, 0, 1, 1], table) == 13

    def test_from_be_binary(self) -> None:
        table = SymbolTable.build([0, 1])
        assert positional.from_be([1, 1, 0, 1], table) == 13

    def test_from_be_decimal_strings(self) -> None:
        table = SymbolTable.build("0123456789")
        assert positional.from_be("9007199254740993", table) == 9007199254740993

    def test_empty_is_zero(self) -> None:
        table = SymbolTable.build("01")
        assert positional.from_le([], table) == 0
        assert positional.from_be([], table) == 0

    def test_leading_zeros_ignored(self) -> None:
        """Старшие нули не меняют значение"""
        table = SymbolTable.build("0123456789")
        assert positional.from_be("000042", table) == 42
        assert positional.from_le("240000", table) == 42

    def test_explicit_radix_override(self) -> None:
        table = SymbolTable.build("0123456789")
        assert positional.from_be("11", table, radix=2) == 3
        assert positional.from_le("11", table, radix=16) == 17

    def test_unrecognized_digit(self) -> None:
        table = SymbolTable.build("01")
        with pytest.raises(UnrecognizedDigit) as exc_info:
            positional.from_le("0121", table)
        assert exc_info.value.symbol == "2"


# =============================================================================
# ТЕСТЫ: Value → Digits
# =============================================================================


class TestToDigits:
    """Тесты to_le / to_be"""

    def test_to_le_binary(self) -> None:
        table = SymbolTable.build([0, 1])
        assert list(positional.to_le(13, table)) == [1, 0, 1, 1]

    def test_to_be_hex(self) -> None:
        table = SymbolTable.build("0123456789abcdef")
        assert positional.to_be(0xDEADBEEF, table) == list("deadbeef")

    def test_zero_emits_nothing(self) -> None:
        """to_le(0) не выдаёт цифр"""
        table = SymbolTable.build("01")
        assert list(positional.to_le(0, table)) == []
        assert positional.to_be(0, table) == []

    def test_to_le_is_lazy(self) -> None:
        """to_le возвращает generator"""
        table = SymbolTable.build("01")
        digits = positional.to_le(2**64, table)
        assert next(digits) == "0"

    def test_to_be_reverses_to_le(self) -> None:
        table = SymbolTable.build("0123456")
        for n in INTEGERS:
            assert positional.to_be(n, table) == list(positional.to_le(n, table))[::-1]


# =============================================================================
# ТЕСТЫ: Round-trip
# =============================================================================


@pytest.mark.parametrize("radix", range(2, 121, 3))
class TestRoundTrip:
    """Round-trip через одно основание"""

    def test_le_roundtrip(self, radix: int) -> None:
        table = SymbolTable.build(range(radix))
        for n in INTEGERS:
            assert positional.from_le(positional.to_le(n, table), table) == n

    def test_be_roundtrip(self, radix: int) -> None:
        table = SymbolTable.build(range(radix))
        for n in INTEGERS:
            assert positional.from_be(positional.to_be(n, table), table) == n

    def test_matches_builtin_divmod(self, radix: int) -> None:
        """Цифры совпадают с независимым разложением"""
        table = SymbolTable.build(range(radix))
        n = INTEGERS[-1]
        expected = []
        while n:
            n, digit = divmod(n, radix)
            expected.append(digit)
        assert list(positional.to_le(INTEGERS[-1], table)) == expected


# =============================================================================
# ТЕСТЫ: Валидация
# =============================================================================


class TestValidateValue:
    """Тесты validate_value"""

    def test_accepts_non_negative_int(self) -> None:
        assert validate_value(0) == 0
        assert validate_value(10**50) == 10**50

    @pytest.mark.parametrize("value", [1.5, "3", None])
    def test_rejects_non_int(self, value) -> None:
        with pytest.raises(TypeError):
            validate_value(value)

    def test_rejects_negative(self) -> None:
        with pytest.raises(ValueError):
            validate_value(-1)

    def test_to_le_validates_eagerly(self) -> None:
        """Ошибка возникает при вызове, а не при первом next()"""
        table = SymbolTable.build("01")
        with pytest.raises(ValueError):
            positional.to_le(-5, table)
