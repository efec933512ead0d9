"""
RadixRelation — Поиск общего целого корня двух оснований

Если rA = c^w и rB = c^z для некоторого целого c, то существует минимальная
пара блоков (in_block, out_block) с rA^in_block == rB^out_block, и конвертация
может идти потоково, блоками фиксированного размера.

АЛГОРИТМ:
1. Необходимое условие: max(rA, rB) % min(rA, rB) == 0
2. (hi, lo) = (max, min); повторять hi //= lo:
   - hi == lo → корень найден (c = lo)
   - hi < lo  → swap
   - hi % lo != 0 на любом шаге → "unrelated"
   (GCD-подобная редукция по показателям степени)
3. w = log_c(rA), z = log_c(rB) (точные целые логарифмы), g = gcd(w, z)
4. in_block = z / g, out_block = w / g

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. related → from_radix ** in_block == to_radix ** out_block (точно)
2. Равные основания → (1, 1) без поиска
3. Bijective с любой стороны → всегда "unrelated"
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


# =============================================================================
# INTEGER HELPERS
# =============================================================================


def common_root(a: int, b: int) -> Optional[int]:
    """
    Наибольший общий целый корень c: a = c^w, b = c^z.

    Args:
        a, b: Основания >= 2

    Returns:
        c, либо None если общего корня нет

    Examples:
        >>> common_root(8, 4)
        2
        >>> common_root(36, 6)
        6
        >>> common_root(2, 6) is None
        True
    """
    if a < 2 or b < 2:
        raise ValueError(f"radices must be >= 2, got {a} and {b}")

    if a == b:
        return a

    hi, lo = max(a, b), min(a, b)
    while True:
        if hi % lo != 0:
            return None
        hi //= lo
        if hi == lo:
            return lo
        if hi < lo:
            hi, lo = lo, hi


def exact_log(value: int, base: int) -> int:
    """
    Точный целый логарифм: value == base ** result.

    Raises:
        ValueError: Если value не является степенью base
    """
    exponent = 0
    while value > 1:
        value, remainder = divmod(value, base)
        if remainder:
            raise ValueError(f"value is not a power of {base}")
        exponent += 1
    if value != 1:
        raise ValueError(f"value is not a power of {base}")
    return exponent


# =============================================================================
# RADIX RELATION
# =============================================================================


@dataclass(frozen=True)
class RadixRelation:
    """
    Соотношение блоков между двумя основаниями.

    in_block/out_block/root равны None для "unrelated".
    """

    from_radix: int
    to_radix: int
    in_block: Optional[int] = None
    out_block: Optional[int] = None
    root: Optional[int] = None

    @property
    def related(self) -> bool:
        return self.in_block is not None

    @classmethod
    def derive(
        cls,
        from_radix: int,
        to_radix: int,
        from_bijective: bool = False,
        to_bijective: bool = False,
    ) -> "RadixRelation":
        """
        Вычисление минимальной пары блоков.

        Args:
            from_radix: Основание исходного алфавита
            to_radix: Основание целевого алфавита
            from_bijective: Исходный алфавит bijective
            to_bijective: Целевой алфавит bijective

        Returns:
            RadixRelation (related или "unrelated")

        Examples:
            >>> RadixRelation.derive(2, 16)
            RadixRelation(from_radix=2, to_radix=16, in_block=4, out_block=1, root=2)
            >>> RadixRelation.derive(16, 8).related
            True
            >>> RadixRelation.derive(10, 16).related
            False
        """
        if from_bijective or to_bijective:
            return cls(from_radix, to_radix)

        if from_radix == to_radix:
            return cls(from_radix, to_radix, 1, 1, from_radix)

        root = common_root(from_radix, to_radix)
        if root is None:
            logger.debug("Radices %d and %d share no integer root", from_radix, to_radix)
            return cls(from_radix, to_radix)

        w = exact_log(from_radix, root)
        z = exact_log(to_radix, root)
        g = math.gcd(w, z)
        relation = cls(from_radix, to_radix, z // g, w // g, root)

        logger.debug(
            "Radices %d and %d share root %d: blocks (%d, %d)",
            from_radix,
            to_radix,
            root,
            relation.in_block,
            relation.out_block,
        )
        return relation
