"""
Tests for EncodedNumeral Pydantic model

Покрывает:
- Создание через from_value / from_digits
- Инвариант decode(digits, base) == value
- Ограничения полей (base, value, digits)
- Immutability (frozen=True)
- JSON сериализация/десериализация
"""

import pytest
from pydantic import ValidationError

from src.core.domain import DEFAULT_SCHEMA_VERSION, EncodedNumeral
from src.core.math import OutOfRangeError


class TestEncodedNumeralCreation:
    """Создание модели"""

    def test_from_value(self) -> None:
        """from_value строит каноническую запись"""
        numeral = EncodedNumeral.from_value(12345, 19)
        assert numeral.value == 12345
        assert numeral.base == 19
        assert numeral.digits == "1F3E"
        assert numeral.schema_version == DEFAULT_SCHEMA_VERSION
        assert numeral.is_canonical()

    def test_from_digits(self) -> None:
        """from_digits вычисляет value"""
        numeral = EncodedNumeral.from_digits("50664", 7)
        assert numeral.value == 12345

    def test_from_digits_keeps_leading_zeros(self) -> None:
        """Ведущие нули сохраняются, но запись не каноническая"""
        numeral = EncodedNumeral.from_digits("0FF", 16)
        assert numeral.digits == "0FF"
        assert numeral.value == 255
        assert not numeral.is_canonical()

    def test_zero(self) -> None:
        numeral = EncodedNumeral.from_value(0, 2)
        assert numeral.digits == "0"

    def test_to_base(self) -> None:
        """to_base сохраняет value"""
        numeral = EncodedNumeral.from_value(54321, 7).to_base(19)
        assert numeral.digits == "7H90"
        assert numeral.value == 54321

    def test_to_base_keeps_subclass(self) -> None:
        """to_base возвращает тот же класс, что и исходная модель"""

        class TaggedNumeral(EncodedNumeral):
            pass

        numeral = TaggedNumeral.from_value(255, 16).to_base(2)
        assert type(numeral) is TaggedNumeral
        assert numeral.digits == "11111111"

    def test_from_value_out_of_range_base(self) -> None:
        """Ошибки конвертера пробрасываются как есть"""
        with pytest.raises(OutOfRangeError):
            EncodedNumeral.from_value(10, 20)


class TestEncodedNumeralValidation:
    """Валидация полей"""

    def test_mismatched_digits_rejected(self) -> None:
        """digits, не соответствующие value, отклоняются"""
        with pytest.raises(ValidationError, match="decode to 255, expected 256"):
            EncodedNumeral(value=256, base=16, digits="FF")

    def test_digit_invalid_for_base_rejected(self) -> None:
        """Цифра вне основания отклоняется"""
        with pytest.raises(ValidationError, match="invalid digit"):
            EncodedNumeral(value=2, base=2, digits="2")

    @pytest.mark.parametrize("base", [1, 20])
    def test_base_out_of_range(self, base: int) -> None:
        with pytest.raises(ValidationError):
            EncodedNumeral(value=1, base=base, digits="1")

    def test_negative_value(self) -> None:
        with pytest.raises(ValidationError):
            EncodedNumeral(value=-1, base=10, digits="1")

    def test_bool_value_rejected(self) -> None:
        """strict=True: bool не принимается как int"""
        with pytest.raises(ValidationError):
            EncodedNumeral(value=True, base=10, digits="1")

    @pytest.mark.parametrize("digits", ["", "ff", "J", " 1"])
    def test_digits_pattern(self, digits: str) -> None:
        with pytest.raises(ValidationError):
            EncodedNumeral(value=1, base=19, digits=digits)

    def test_wrong_schema_version(self) -> None:
        with pytest.raises(ValidationError):
            EncodedNumeral(schema_version="2", value=1, base=10, digits="1")


class TestEncodedNumeralImmutability:
    """Immutability (frozen=True)"""

    def test_cannot_modify(self) -> None:
        numeral = EncodedNumeral.from_value(10, 10)
        with pytest.raises(ValidationError):
            numeral.value = 11


class TestEncodedNumeralSerialization:
    """JSON сериализация"""

    def test_model_dump(self) -> None:
        numeral = EncodedNumeral.from_value(12345, 7)
        assert numeral.model_dump() == {
            "schema_version": "1",
            "value": 12345,
            "base": 7,
            "digits": "50664",
        }

    def test_json_round_trip(self) -> None:
        numeral = EncodedNumeral.from_value(54321, 19)
        restored = EncodedNumeral.model_validate_json(numeral.model_dump_json())
        assert restored == numeral
