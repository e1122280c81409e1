"""
EncodedNumeral — Модель числа в позиционной системе счисления

Immutable Pydantic модель, связывающая десятичное значение, основание и
строку цифр. Полная совместимость с JSON Schema
(src/core/contracts/schema/encoded_numeral.json).
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.radix import MAX_BASE, MIN_BASE, decode, encode

# Текущая версия схемы encoded_numeral
DEFAULT_SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# ENCODED NUMERAL MODEL
# =============================================================================


class EncodedNumeral(BaseModel):
    """
    Число, записанное в системе счисления с основанием base.

    Immutable модель (frozen=True). Инвариант: decode(digits, base) == value.
    """

    schema_version: str = Field(
        DEFAULT_SCHEMA_VERSION,
        pattern="^1$",
        description="Версия схемы для tracking совместимости",
    )
    value: int = Field(..., ge=0, strict=True, description="Десятичное значение")
    base: int = Field(
        ...,
        ge=MIN_BASE,
        le=MAX_BASE,
        strict=True,
        description="Основание системы счисления",
    )
    digits: str = Field(
        ...,
        min_length=1,
        pattern="^[0-9A-I]+$",
        description="Цифры числа, старший разряд первым",
    )

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digits_match_value(cls, v: str, info) -> str:
        """Проверка, что digits в основании base дают value"""
        if "value" not in info.data or "base" not in info.data:
            return v

        base = info.data["base"]
        value = info.data["value"]
        decoded = decode(v, base)
        if decoded != value:
            raise ValueError(
                f"digits {v!r} in base {base} decode to {decoded}, expected {value}"
            )
        return v

    @classmethod
    def from_value(cls, value: int, base: int) -> "EncodedNumeral":
        """Построение модели через encode()."""
        return cls(value=value, base=base, digits=encode(value, base))

    @classmethod
    def from_digits(cls, digits: str, base: int) -> "EncodedNumeral":
        """Построение модели через decode(). digits сохраняются как переданы."""
        return cls(value=decode(digits, base), base=base, digits=digits)

    def is_canonical(self) -> bool:
        """True если digits без ведущих нулей (совпадает с encode(value, base))."""
        return self.digits == encode(self.value, self.base)

    def to_base(self, base: int) -> "EncodedNumeral":
        """То же значение в другом основании."""
        return type(self).from_value(self.value, base)
