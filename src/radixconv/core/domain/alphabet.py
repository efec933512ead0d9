"""
Alphabet — Tagged sum type для алфавитов систем счисления

Alphabet = StandardAlphabet | BijectiveAlphabet

Immutable Pydantic модели. Форма алфавита определяется один раз (при
конструировании), а не проверяется на каждом вызове.

Допустимые входные формы (coerce_alphabet):
- Alphabet модель: возвращается как есть
- Mapping descriptor {"bijective": bool, "symbols": [...]}: проходит
  jsonschema контракт, затем Pydantic валидацию
- Любой упорядоченный iterable символов (не set): стандартная нумерация

ИНВАРИАНТЫ:
1. Минимум MIN_RADIX символов
2. Символы попарно различны и hashable (индекс = значение цифры)
3. Для bijective алфавита символ с индексом 0 является zero-sentinel
"""

from collections.abc import Iterable, Mapping, Set
from enum import Enum
from typing import Annotated, Any, Final, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from radixconv.core.contracts.validators import describe_error, descriptor_error
from radixconv.core.domain.errors import InvalidAlphabet

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Минимальная длина алфавита (radix >= 2)
MIN_RADIX: Final[int] = 2


# =============================================================================
# ENUMS
# =============================================================================


class NumerationKind(str, Enum):
    """Тип позиционной нумерации"""

    STANDARD = "standard"
    BIJECTIVE = "bijective"


# =============================================================================
# ALPHABET MODELS
# =============================================================================


class _AlphabetBase(BaseModel):
    """Общая часть обоих вариантов алфавита."""

    symbols: tuple[Any, ...] = Field(
        ..., min_length=MIN_RADIX, description="Символы; индекс символа = значение цифры"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("symbols")
    @classmethod
    def validate_distinct(cls, v: tuple[Any, ...]) -> tuple[Any, ...]:
        """
        Проверка попарной различимости символов.

        Дубликаты схлопывают значения цифр на меньшее число индексов,
        поэтому отклоняются здесь, а не при lookup.
        """
        try:
            distinct = len(set(v))
        except TypeError:
            raise ValueError("symbols must be hashable")
        if distinct != len(v):
            raise ValueError(f"symbols must be pairwise distinct, got {len(v) - distinct} duplicate(s)")
        return v

    @property
    def radix(self) -> int:
        """Количество символов (длина алфавита)."""
        return len(self.symbols)

    @property
    def is_bijective(self) -> bool:
        return self.kind == NumerationKind.BIJECTIVE


class StandardAlphabet(_AlphabetBase):
    """
    Стандартная позиционная нумерация: цифры 0..radix-1.
    """

    kind: Literal[NumerationKind.STANDARD] = NumerationKind.STANDARD

    @property
    def positional_base(self) -> int:
        return self.radix


class BijectiveAlphabet(_AlphabetBase):
    """
    Bijective нумерация над алфавитом размера b.

    Представляет bijective base-(b-1): позиционные цифры 1..b-1,
    символ с индексом 0 зарезервирован как zero-sentinel (только для значения 0).
    """

    kind: Literal[NumerationKind.BIJECTIVE] = NumerationKind.BIJECTIVE

    @property
    def positional_base(self) -> int:
        return self.radix - 1

    @property
    def sentinel(self) -> Any:
        """Символ, представляющий значение 0."""
        return self.symbols[0]


Alphabet = Annotated[Union[StandardAlphabet, BijectiveAlphabet], Field(discriminator="kind")]

_ALPHABET_ADAPTER: Final = TypeAdapter(Alphabet)


# =============================================================================
# COERCION
# =============================================================================


def _first_error(exc: ValidationError) -> str:
    """Короткое описание первой ошибки Pydantic."""
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}" if location else error["msg"]


def coerce_alphabet(source: Any) -> Union[StandardAlphabet, BijectiveAlphabet]:
    """
    Приведение любой допустимой формы алфавита к Alphabet модели.

    Args:
        source: Alphabet модель, descriptor {"bijective", "symbols"} или iterable символов

    Returns:
        StandardAlphabet или BijectiveAlphabet

    Raises:
        InvalidAlphabet: Если алфавит не может использоваться как система счисления

    Examples:
        >>> coerce_alphabet("01").radix
        2
        >>> coerce_alphabet({"bijective": True, "symbols": ["-", "a", "b"]}).positional_base
        2
    """
    if isinstance(source, (StandardAlphabet, BijectiveAlphabet)):
        return source

    if isinstance(source, Mapping):
        return _coerce_descriptor(source)

    if not isinstance(source, Iterable):
        raise InvalidAlphabet(f"expected an iterable of symbols, got {type(source).__name__}")

    if isinstance(source, Set):
        raise InvalidAlphabet("symbols must be ordered, got an unordered set")

    try:
        return StandardAlphabet(symbols=tuple(source))
    except ValidationError as exc:
        raise InvalidAlphabet(_first_error(exc)) from exc


def _coerce_descriptor(descriptor: Mapping) -> Union[StandardAlphabet, BijectiveAlphabet]:
    """Tagged descriptor → Alphabet (через jsonschema контракт)."""
    data = dict(descriptor)
    symbols = data.get("symbols")
    if isinstance(symbols, Set):
        raise InvalidAlphabet("symbols: must be ordered, got an unordered set")
    # jsonschema "array" принимает только list
    if isinstance(symbols, Iterable) and not isinstance(symbols, (str, bytes, Mapping)):
        data["symbols"] = list(symbols)

    error = descriptor_error(data)
    if error is not None:
        raise InvalidAlphabet(describe_error(error)) from error

    kind = NumerationKind.BIJECTIVE if data.get("bijective", False) else NumerationKind.STANDARD
    try:
        return _ALPHABET_ADAPTER.validate_python({"kind": kind, "symbols": tuple(data["symbols"])})
    except ValidationError as exc:
        raise InvalidAlphabet(_first_error(exc)) from exc
