"""
SymbolTable — Bidirectional mapping символ ↔ значение цифры

Строится один раз на алфавит и никогда не мутирует после конструирования.

ИНВАРИАНТЫ:
1. Каждое значение, возвращённое lookup, лежит в [0, radix)
2. symbol_at(lookup(s)) == s для любого символа алфавита
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Union

from radixconv.core.domain.alphabet import BijectiveAlphabet, StandardAlphabet, coerce_alphabet
from radixconv.core.domain.errors import UnrecognizedDigit


@dataclass(frozen=True)
class SymbolTable:
    """Immutable таблица символов одного алфавита."""

    alphabet: Union[StandardAlphabet, BijectiveAlphabet]
    values: Mapping[Any, int]

    @classmethod
    def build(cls, alphabet: Any) -> "SymbolTable":
        """
        Построение таблицы из любой допустимой формы алфавита.

        Args:
            alphabet: Alphabet модель, descriptor или iterable символов

        Returns:
            SymbolTable

        Raises:
            InvalidAlphabet: Если длина < 2 или символы не попарно различны
        """
        model = coerce_alphabet(alphabet)
        values = MappingProxyType({symbol: index for index, symbol in enumerate(model.symbols)})
        return cls(alphabet=model, values=values)

    @property
    def symbols(self) -> tuple[Any, ...]:
        return self.alphabet.symbols

    @property
    def radix(self) -> int:
        return self.alphabet.radix

    @property
    def is_bijective(self) -> bool:
        return self.alphabet.is_bijective

    @property
    def positional_base(self) -> int:
        """Основание арифметики: radix, либо radix-1 для bijective."""
        return self.alphabet.positional_base

    def lookup(self, symbol: Any) -> int:
        """
        Значение цифры для символа.

        Raises:
            UnrecognizedDigit: Если символ отсутствует в алфавите
        """
        try:
            return self.values[symbol]
        except (KeyError, TypeError):
            # TypeError: unhashable символ заведомо не из алфавита
            raise UnrecognizedDigit(symbol) from None

    def symbol_at(self, value: int) -> Any:
        """Символ для значения цифры в [0, radix)."""
        return self.alphabet.symbols[value]

    def __contains__(self, symbol: Any) -> bool:
        try:
            return symbol in self.values
        except TypeError:
            return False
