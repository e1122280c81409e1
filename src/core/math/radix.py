"""
Radix — Позиционные системы счисления с основанием 2..19

Модуль конвертирует неотрицательные целые числа между base 10 и
позиционной системой с основанием из диапазона [MIN_BASE, MAX_BASE]:
- encode: decimal → строка цифр (старший разряд первым)
- decode: строка цифр → decimal
- Тонкие параметризации для base 7 и base 19
- Перекодирование между двумя основаниями (transcode)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Алфавит фиксирован: '0'-'9' для значений 0-9, 'A'-'I' для 10-18
2. Основание вне [2, 19] → OutOfRangeError (никакого clamp)
3. encode(0, base) == "0" для любого допустимого base
4. decode(encode(v, b), b) == v для всех v >= 0
5. Все операции детерминированы, без побочных эффектов
"""

import logging
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ АЛФАВИТА И ОСНОВАНИЙ
# =============================================================================

# Упорядоченный алфавит цифр: индекс символа = его значение
# Алфавит намеренно заканчивается на 'I' (19 символов), а не на 'Z'
DIGIT_ALPHABET: Final[str] = "0123456789ABCDEFGHI"

# Допустимый диапазон оснований (включительно)
MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = len(DIGIT_ALPHABET)

# Обратный индекс: символ → значение цифры
_DIGIT_VALUES: Final[dict[str, int]] = {
    symbol: index for index, symbol in enumerate(DIGIT_ALPHABET)
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RadixError(ValueError):
    """Базовая ошибка конверсии систем счисления."""


class OutOfRangeError(RadixError):
    """
    Основание вне допустимого диапазона [MIN_BASE, MAX_BASE].

    Attributes:
        base: Отклонённое основание
    """

    def __init__(self, base: int):
        self.base = base
        super().__init__(
            f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}"
        )


class InvalidDigitError(RadixError):
    """
    Символ не входит в первые `base` символов алфавита.

    Attributes:
        symbol: Недопустимый символ
        position: Позиция символа в строке (0 = старший разряд)
        base: Основание, для которого символ недопустим
    """

    def __init__(self, symbol: str, base: int, position: int | None = None):
        self.symbol = symbol
        self.base = base
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"invalid digit {symbol!r}{where} for base {base}")


class InvalidInputError(RadixError):
    """Отрицательное, нецелое или пустое входное значение."""


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _is_strict_int(value: object) -> bool:
    # bool — подкласс int, но как число не принимается
    return isinstance(value, int) and not isinstance(value, bool)


def validate_base(base: int) -> None:
    """
    Валидация основания системы счисления.

    Args:
        base: Проверяемое основание

    Raises:
        InvalidInputError: Если base не целое число (или bool)
        OutOfRangeError: Если base вне [MIN_BASE, MAX_BASE]
    """
    if not _is_strict_int(base):
        raise InvalidInputError(f"base must be an integer, got {base!r}")

    if base < MIN_BASE or base > MAX_BASE:
        logger.debug("Rejected base %d (allowed %d..%d)", base, MIN_BASE, MAX_BASE)
        raise OutOfRangeError(base)


def _lookup_digit(symbol: str, base: int, position: int | None = None) -> int:
    # base уже проверен вызывающей функцией
    value = _DIGIT_VALUES.get(symbol)
    if value is None or value >= base:
        where = f" at position {position}" if position is not None else ""
        logger.debug("Rejected digit %r%s for base %d", symbol, where, base)
        raise InvalidDigitError(symbol, base, position)
    return value


def digit_value(symbol: str, base: int) -> int:
    """
    Значение одного символа-цифры в заданном основании.

    Args:
        symbol: Один символ алфавита
        base: Основание системы счисления

    Returns:
        Значение цифры в диапазоне [0, base - 1]

    Raises:
        OutOfRangeError: Если base вне диапазона
        InvalidDigitError: Если символа нет среди первых base символов алфавита

    Examples:
        >>> digit_value("7", 10)
        7
        >>> digit_value("I", 19)
        18
    """
    validate_base(base)
    return _lookup_digit(symbol, base)


# =============================================================================
# ENCODE / DECODE
# =============================================================================


def encode(value: int, base: int) -> str:
    """
    Конверсия неотрицательного целого в строку цифр основания base.

    Алгоритм: последовательное деление на base; остатки собираются от
    младшего разряда к старшему и разворачиваются перед склейкой.

    Args:
        value: Неотрицательное целое число
        base: Основание в диапазоне [2, 19]

    Returns:
        Представление value, старший разряд первым, без ведущих нулей

    Raises:
        OutOfRangeError: Если base вне [2, 19]
        InvalidInputError: Если value отрицательное или не целое

    Examples:
        >>> encode(12345, 7)
        '50664'
        >>> encode(12345, 19)
        '1F3E'
        >>> encode(0, 2)
        '0'
    """
    validate_base(base)

    if not _is_strict_int(value):
        raise InvalidInputError(f"value must be an integer, got {value!r}")
    if value < 0:
        raise InvalidInputError(f"value must be non-negative, got {value}")

    # Цикл деления для нуля не выполнится ни разу
    if value == 0:
        return DIGIT_ALPHABET[0]

    digits = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(DIGIT_ALPHABET[remainder])

    digits.reverse()
    return "".join(digits)


def decode(text: str, base: int) -> int:
    """
    Конверсия строки цифр основания base обратно в целое число.

    Накопление слева направо: acc = acc * base + digit_value(symbol).
    Ведущие нули допускаются.

    Args:
        text: Строка символов алфавита (старший разряд первым)
        base: Основание в диапазоне [2, 19]

    Returns:
        Неотрицательное целое число

    Raises:
        OutOfRangeError: Если base вне [2, 19]
        InvalidInputError: Если text не строка или пустая строка
        InvalidDigitError: Если символ недопустим для base

    Examples:
        >>> decode("50664", 7)
        12345
        >>> decode("007", 10)
        7
    """
    validate_base(base)

    if not isinstance(text, str):
        raise InvalidInputError(f"text must be a string, got {type(text).__name__}")
    if not text:
        raise InvalidInputError("text must not be empty")

    acc = 0
    for position, symbol in enumerate(text):
        acc = acc * base + _lookup_digit(symbol, base, position)

    return acc


def is_valid_numeral(text: str, base: int) -> bool:
    """
    Проверка строки без exception.

    Args:
        text: Проверяемая строка
        base: Основание системы счисления

    Returns:
        True если decode(text, base) завершится успешно
    """
    try:
        decode(text, base)
    except RadixError:
        return False
    return True


# =============================================================================
# ФИКСИРОВАННЫЕ ОСНОВАНИЯ
# =============================================================================


def encode_base7(value: int) -> str:
    """encode() с base=7."""
    return encode(value, 7)


def decode_base7(text: str) -> int:
    """decode() с base=7."""
    return decode(text, 7)


def encode_base19(value: int) -> str:
    """encode() с base=19 (максимальное основание алфавита)."""
    return encode(value, MAX_BASE)


def decode_base19(text: str) -> int:
    """decode() с base=19."""
    return decode(text, MAX_BASE)


# =============================================================================
# ПЕРЕКОДИРОВАНИЕ
# =============================================================================


def transcode(text: str, from_base: int, to_base: int) -> str:
    """
    Перекодирование строки цифр из одного основания в другое.

    Args:
        text: Строка цифр в основании from_base
        from_base: Исходное основание
        to_base: Целевое основание

    Returns:
        Каноническое представление того же числа в основании to_base
        (ведущие нули входа не сохраняются)

    Raises:
        OutOfRangeError: Если любое из оснований вне [2, 19]
        InvalidInputError: Если text не строка или пустая строка
        InvalidDigitError: Если символ недопустим для from_base

    Examples:
        >>> transcode("FF", 16, 2)
        '11111111'
    """
    validate_base(to_base)
    return encode(decode(text, from_base), to_base)
