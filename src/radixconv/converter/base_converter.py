"""BaseConverter — конвертация последовательностей цифр между двумя алфавитами.

Путь конвертации выбирается один раз при конструировании:
- PASSTHROUGH: равные radix и bijectivity → прямое переотображение символов
- BLOCK_STREAMING: основания являются степенями общего корня, ни одна сторона не bijective
  → потоковая конвертация блоками (in_block → out_block), без полного Value
- BUFFERED: иначе (или streaming_enabled=False) → весь вход в Value, затем весь выход

Little-endian (convert_le) возвращает lazy generator, big-endian (convert_be) всегда
eager список. Converter immutable после конструирования и может использоваться
параллельно: каждое обращение работает только со своим локальным состоянием.
"""

import logging
from enum import Enum
from typing import Any, Iterable, Iterator, List

from radixconv.core.domain.symbol_table import SymbolTable
from radixconv.core.math import bijective, positional
from radixconv.core.math.radix_relation import RadixRelation

logger = logging.getLogger(__name__)


class ConversionPath(str, Enum):
    """Путь конвертации, выбранный при конструировании."""

    PASSTHROUGH = "passthrough"
    BLOCK_STREAMING = "block_streaming"
    BUFFERED = "buffered"


# =============================================================================
# VALUE DISPATCH (standard / bijective)
# =============================================================================


def decode_le(digits: Iterable[Any], table: SymbolTable) -> int:
    """LE символы → Value по правилам нумерации таблицы."""
    if table.is_bijective:
        return bijective.from_le(digits, table)
    return positional.from_le(digits, table)


def decode_be(digits: Iterable[Any], table: SymbolTable) -> int:
    """BE символы → Value по правилам нумерации таблицы."""
    if table.is_bijective:
        return bijective.from_be(digits, table)
    return positional.from_be(digits, table)


def encode_le(value: int, table: SymbolTable) -> Iterator[Any]:
    """Value → lazy LE символы по правилам нумерации таблицы."""
    if table.is_bijective:
        return bijective.to_le(value, table)
    return positional.to_le(value, table)


def encode_be(value: int, table: SymbolTable) -> List[Any]:
    """Value → BE список символов по правилам нумерации таблицы."""
    if table.is_bijective:
        return bijective.to_be(value, table)
    return positional.to_be(value, table)


# =============================================================================
# CONVERTER
# =============================================================================


class BaseConverter:
    """
    Converter между двумя позиционными системами счисления.

    Alphabets, таблицы и RadixRelation вычисляются один раз и не меняются.
    """

    def __init__(self, from_alphabet: Any, to_alphabet: Any, streaming_enabled: bool = True):
        """
        Args:
            from_alphabet: Исходный алфавит (iterable символов, descriptor
                {"bijective": True, "symbols": [...]} или Alphabet модель)
            to_alphabet: Целевой алфавит (те же формы)
            streaming_enabled: False → всегда BUFFERED путь

        Raises:
            InvalidAlphabet: Если любой из алфавитов короче 2 символов или с дубликатами
        """
        self.source = SymbolTable.build(from_alphabet)
        self.target = SymbolTable.build(to_alphabet)
        self.streaming_enabled = streaming_enabled
        self.relation = RadixRelation.derive(
            self.source.radix,
            self.target.radix,
            from_bijective=self.source.is_bijective,
            to_bijective=self.target.is_bijective,
        )
        self.path = self._select_path()

        logger.debug(
            "Converter %d%s -> %d%s uses %s path (blocks %s/%s)",
            self.source.radix,
            "b" if self.source.is_bijective else "",
            self.target.radix,
            "b" if self.target.is_bijective else "",
            self.path.value,
            self.relation.in_block,
            self.relation.out_block,
        )

    def _select_path(self) -> ConversionPath:
        if not self.streaming_enabled:
            return ConversionPath.BUFFERED

        if (
            self.source.radix == self.target.radix
            and self.source.is_bijective == self.target.is_bijective
        ):
            return ConversionPath.PASSTHROUGH

        if self.relation.related:
            return ConversionPath.BLOCK_STREAMING

        return ConversionPath.BUFFERED

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(from_radix={self.source.radix}, "
            f"to_radix={self.target.radix}, path={self.path.value})"
        )

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def convert_le(self, digits: Iterable[Any]) -> Iterator[Any]:
        """
        LE символы источника → lazy LE символы цели.

        На пути BLOCK_STREAMING цифры выдаются по мере поступления входа,
        поэтому допустим бесконечный источник. PASSTHROUGH также lazy.
        BUFFERED путь полностью читает вход перед первой цифрой выхода.

        На путях PASSTHROUGH и BLOCK_STREAMING цифры, выданные до встречи
        символа вне алфавита, уже получены потребителем; list(...) или
        convert_be частичного результата не возвращают.

        Raises:
            UnrecognizedDigit: В момент встречи символа вне исходного алфавита
        """
        if self.path is ConversionPath.PASSTHROUGH:
            return self._passthrough(digits)
        if self.path is ConversionPath.BLOCK_STREAMING:
            return self._stream_blocks(digits)
        return self._buffered_le(digits)

    def convert_be(self, digits: Iterable[Any]) -> List[Any]:
        """
        BE символы источника → BE список символов цели.

        Всегда eager: Horner требует старшую цифру первой, а выход
        разворачивается перед возвратом.
        """
        if self.path is ConversionPath.PASSTHROUGH:
            return list(self._passthrough(digits))

        if self.path is ConversionPath.BLOCK_STREAMING:
            buffered = list(digits)
            buffered.reverse()
            converted = list(self._stream_blocks(buffered))
            converted.reverse()
            return converted

        return self.to_be(self.from_be(digits))

    def _passthrough(self, digits: Iterable[Any]) -> Iterator[Any]:
        lookup, symbol_at = self.source.lookup, self.target.symbol_at
        for symbol in digits:
            yield symbol_at(lookup(symbol))

    def _buffered_le(self, digits: Iterable[Any]) -> Iterator[Any]:
        # Generator: чтение входа откладывается до первого next()
        yield from self.to_le(self.from_le(digits))

    def _stream_blocks(self, digits: Iterable[Any]) -> Iterator[Any]:
        """
        Block streaming по RadixRelation.

        Окно из in_block входных цифр накапливается как в from_le. Полное окно
        сбрасывается ровно out_block цифрами только при поступлении следующей
        цифры: последнее (возможно неполное) окно сбрасывается делением до
        нуля. Нулевые цифры выхода откладываются счётчиком и выдаются только
        перед следующей ненулевой цифрой, поэтому ведущих нулей нет.
        """
        lookup = self.source.lookup
        symbols = self.target.symbols
        from_radix, to_radix = self.source.radix, self.target.radix
        in_block, out_block = self.relation.in_block, self.relation.out_block
        zero = symbols[0]

        value, place, filled = 0, 1, 0
        pending_zeros = 0
        for symbol in digits:
            digit = lookup(symbol)

            if filled == in_block:
                for _ in range(out_block):
                    value, remainder = divmod(value, to_radix)
                    if remainder == 0:
                        pending_zeros += 1
                        continue
                    for _ in range(pending_zeros):
                        yield zero
                    pending_zeros = 0
                    yield symbols[remainder]
                value, place, filled = 0, 1, 0

            value += digit * place
            place *= from_radix
            filled += 1

        while value:
            value, remainder = divmod(value, to_radix)
            if remainder == 0:
                pending_zeros += 1
                continue
            for _ in range(pending_zeros):
                yield zero
            pending_zeros = 0
            yield symbols[remainder]

    # -------------------------------------------------------------------------
    # Value forms (алфавит источника → Value → алфавит цели)
    # -------------------------------------------------------------------------

    def from_le(self, digits: Iterable[Any]) -> int:
        """LE символы исходного алфавита → Value."""
        return decode_le(digits, self.source)

    def from_be(self, digits: Iterable[Any]) -> int:
        """BE символы исходного алфавита → Value."""
        return decode_be(digits, self.source)

    def to_le(self, value: int) -> Iterator[Any]:
        """Value → lazy LE символы целевого алфавита."""
        return encode_le(value, self.target)

    def to_be(self, value: int) -> List[Any]:
        """Value → BE список символов целевого алфавита."""
        return encode_be(value, self.target)
