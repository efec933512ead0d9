"""
Тесты для Bijective — codec bijective нумерации

Проверяемые инварианты:
1. to_le(0) == [sentinel]
2. Все цифры n > 0 лежат в [1, k] (sentinel не встречается)
3. Round-trip для алфавитов размера b >= 3
4. Пропуск sentinel без сдвига разряда при decode
"""

import string

import pytest

from radixconv.core.domain import SymbolTable, UnrecognizedDigit
from radixconv.core.math import bijective


@pytest.fixture
def base3():
    """Bijective алфавит размера 4 (bijective base-3, sentinel '_')."""
    return SymbolTable.build({"bijective": True, "symbols": ["_", "a", "b", "c"]})


@pytest.fixture
def columns():
    """Bijective base-26: нумерация столбцов электронных таблиц."""
    return SymbolTable.build({"bijective": True, "symbols": [""] + list(string.ascii_uppercase)})


# =============================================================================
# ТЕСТЫ: Encode
# =============================================================================


class TestBijectiveEncode:
    """Тесты to_le / to_be"""

    def test_zero_is_sentinel(self, base3) -> None:
        assert list(bijective.to_le(0, base3)) == ["_"]
        assert bijective.to_be(0, base3) == ["_"]

    def test_four_in_base3(self, base3) -> None:
        """4 = 1·3¹ + 1·3⁰"""
        assert list(bijective.to_le(4, base3)) == ["a", "a"]

    def test_three_in_base3(self, base3) -> None:
        """3 записывается одной цифрой со значением k"""
        assert list(bijective.to_le(3, base3)) == ["c"]

    @pytest.mark.parametrize(
        "value, expected",
        [(1, "A"), (26, "Z"), (27, "AA"), (28, "AB"), (702, "ZZ"), (703, "AAA")],
    )
    def test_spreadsheet_columns(self, columns, value: int, expected: str) -> None:
        assert "".join(bijective.to_be(value, columns)) == expected

    def test_no_sentinel_for_positive_values(self, base3) -> None:
        for n in range(1, 500):
            assert "_" not in list(bijective.to_le(n, base3))

    def test_validates_eagerly(self, base3) -> None:
        with pytest.raises(ValueError):
            bijective.to_le(-1, base3)
        with pytest.raises(TypeError):
            bijective.to_be(2.0, base3)

    def test_unary_alphabet(self) -> None:
        """b = 2: bijective base-1 (унарная запись)"""
        table = SymbolTable.build({"bijective": True, "symbols": ["0", "|"]})
        assert bijective.to_be(5, table) == ["|"] * 5
        assert bijective.from_le(["|"] * 5, table) == 5


# =============================================================================
# ТЕСТЫ: Decode
# =============================================================================


class TestBijectiveDecode:
    """Тесты from_le / from_be"""

    def test_sentinel_decodes_to_zero(self, base3) -> None:
        assert bijective.from_le(["_"], base3) == 0
        assert bijective.from_be(["_"], base3) == 0

    def test_from_be_columns(self, columns) -> None:
        assert bijective.from_be("AB", columns) == 28
        assert bijective.from_be("XFD", columns) == 16384

    def test_interior_sentinel_skipped_without_advancing(self, base3) -> None:
        """Sentinel внутри потока пропускается и не сдвигает разряд"""
        assert bijective.from_le(["a", "_", "a"], base3) == bijective.from_le(["a", "a"], base3)
        assert bijective.from_be(["a", "_", "a"], base3) == bijective.from_be(["a", "a"], base3)

    def test_unrecognized_digit(self, base3) -> None:
        with pytest.raises(UnrecognizedDigit):
            bijective.from_le(["a", "d"], base3)


# =============================================================================
# ТЕСТЫ: Round-trip
# =============================================================================


@pytest.mark.parametrize("size", [3, 4, 5, 10, 27, 64])
class TestBijectiveRoundTrip:
    """Round-trip для bijective алфавитов размера b >= 3"""

    def test_le_roundtrip(self, size: int) -> None:
        table = SymbolTable.build({"bijective": True, "symbols": list(range(size))})
        for n in list(range(300)) + [10**30 + 7]:
            assert bijective.from_le(bijective.to_le(n, table), table) == n

    def test_be_roundtrip(self, size: int) -> None:
        table = SymbolTable.build({"bijective": True, "symbols": list(range(size))})
        for n in list(range(300)) + [2**100]:
            assert bijective.from_be(bijective.to_be(n, table), table) == n

    def test_representation_is_unique(self, size: int) -> None:
        """Bijective: разные значения → разные последовательности"""
        table = SymbolTable.build({"bijective": True, "symbols": list(range(size))})
        seen = {tuple(bijective.to_le(n, table)) for n in range(300)}
        assert len(seen) == 300
