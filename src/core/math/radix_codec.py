"""
Radix Codec - Конверсия текст ↔ digit sequence для оснований 2^k

Для основания 2^k каждый символ текста несёт ровно k бит, поэтому
конверсия выполняется прямой упаковкой битового потока без деления.

Разбор (parse_pow2):
- символы отображаются в значения (0-9, затем a-z для 10..35, без учёта регистра)
- биты значений идут от младшего (последнего) символа к старшему (первому)
- биты упаковываются младшими вперёд в последовательные 32-битные цифры
- старшие нулевые цифры удаляются

Форматирование (format_pow2):
- цифры читаются от старшей к младшей, биты от старшего к младшему
- биты группируются по k, каждая группа даёт один символ
- начальное смещение (k - 32*len mod k) mod k выравнивает группы по младшему биту
- ведущие нулевые символы подавляются

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверка основания: сначала диапазон [2, 36], затем степень двойки
2. Все символы проверяются ДО начала сборки цифр (fail fast)
3. Произвольные основания не реализованы → UnsupportedBase
"""

import logging
from dataclasses import dataclass
from typing import Final

from src.core.errors import InvalidBaseRange, InvalidCharacter, UnsupportedBase
from src.core.math.digit_sequence import DIGIT_BITS, DigitSequence, normalize

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ОСНОВАНИЙ
# =============================================================================

# Минимальное основание
MIN_BASE: Final[int] = 2

# Максимальное основание: 10 десятичных цифр + 26 букв
MAX_BASE: Final[int] = 36

# Основания, поддерживаемые битовой упаковкой
SUPPORTED_BASES: Final[tuple[int, ...]] = (2, 4, 8, 16, 32)

DIGIT_CHARACTERS_UPPER: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGIT_CHARACTERS_LOWER: Final[str] = DIGIT_CHARACTERS_UPPER.lower()

_CHARACTER_VALUES: Final[dict[str, int]] = {
    **{c: v for v, c in enumerate(DIGIT_CHARACTERS_UPPER)},
    **{c: v for v, c in enumerate(DIGIT_CHARACTERS_LOWER)},
}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TextCodecConfig:
    """Конфигурация форматирования.

    canonical_zero: при True нулевая magnitude форматируется как "0"
    (знак отбрасывается); по умолчанию ноль не даёт ни одного символа цифры.
    """

    uppercase: bool = True
    canonical_zero: bool = False


# =============================================================================
# ОСНОВАНИЯ
# =============================================================================


def is_pow2(value: int) -> bool:
    """True если value - степень двойки (1 = 2^0 включительно)."""
    return value > 0 and value & (value - 1) == 0


def log2_pow2(value: int) -> int:
    """
    log2 для степени двойки.

    Raises:
        ValueError: Если value не степень двойки
    """
    if not is_pow2(value):
        raise ValueError(f"{value} is not a power of two")
    return value.bit_length() - 1


def validate_base(base: int) -> int:
    """
    Проверка основания и вычисление числа бит на символ.

    Порядок проверок: диапазон, затем степень двойки.

    Returns:
        k = log2(base)

    Raises:
        InvalidBaseRange: base вне [MIN_BASE, MAX_BASE]
        UnsupportedBase: base не степень двойки
    """
    if base < MIN_BASE or base > MAX_BASE:
        logger.debug("Rejecting base %d: outside [%d, %d]", base, MIN_BASE, MAX_BASE)
        raise InvalidBaseRange(base, MIN_BASE, MAX_BASE)
    if not is_pow2(base):
        logger.debug("Rejecting base %d: not a power of two", base)
        raise UnsupportedBase(base)
    return log2_pow2(base)


# =============================================================================
# СИМВОЛЫ
# =============================================================================


def split_sign(text: str) -> tuple[bool, str]:
    """
    Отделение необязательного ведущего знака '+' / '-'.

    Returns:
        (is_negative, текст без знака)
    """
    if text and text[0] in "+-":
        return text[0] == "-", text[1:]
    return False, text


def _character_values(text: str, base: int) -> list[int]:
    values = []
    for position, character in enumerate(text):
        value = _CHARACTER_VALUES.get(character)
        if value is None or value >= base:
            logger.debug(
                "Rejecting character %r at position %d for base %d", character, position, base
            )
            raise InvalidCharacter(character, position, base)
        values.append(value)
    return values


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_pow2(text: str, base: int) -> DigitSequence:
    """
    Разбор magnitude (без знака) в основании 2^k.

    Args:
        text: Цифры основания, старшая первой
        base: Основание (степень двойки в [2, 36])

    Returns:
        Нормализованная DigitSequence (пустая для "" и для нулей)

    Raises:
        InvalidBaseRange, UnsupportedBase, InvalidCharacter

    Examples:
        >>> parse_pow2("100000000", 16)
        DigitSequence([0, 1])
    """
    bit_count = validate_base(base)
    values = _character_values(text, base)

    result = DigitSequence.builder()
    current_digit = 0
    digit_bit_index = 0
    # От младшего символа к старшему, биты значения от младшего к старшему
    for value in reversed(values):
        for value_bit_index in range(bit_count):
            if value >> value_bit_index & 1:
                current_digit |= 1 << digit_bit_index
            digit_bit_index += 1
            if digit_bit_index == DIGIT_BITS:
                result.append(current_digit)
                current_digit = 0
                digit_bit_index = 0
    if current_digit:
        result.append(current_digit)

    digits = normalize(result.freeze())
    logger.debug("Parsed %d characters in base %d into %d digits", len(text), base, len(digits))
    return digits


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_pow2(
    digits: DigitSequence,
    base: int,
    is_negative: bool = False,
    config: TextCodecConfig | None = None,
) -> str:
    """
    Форматирование digit sequence в основании 2^k.

    Args:
        digits: Magnitude (little-endian base 2^32)
        base: Основание (степень двойки в [2, 36])
        is_negative: Выводить ли ведущий '-' (без проверки на ноль)
        config: Регистр букв и рендеринг нуля

    Raises:
        InvalidBaseRange, UnsupportedBase

    Examples:
        >>> format_pow2(DigitSequence((0, 1)), 16)
        '100000000'
        >>> format_pow2(DigitSequence(()), 16)
        ''
    """
    config = config or TextCodecConfig()
    bit_count = validate_base(base)
    alphabet = DIGIT_CHARACTERS_UPPER if config.uppercase else DIGIT_CHARACTERS_LOWER

    characters: list[str] = []
    current_bits = 0
    has_character = False
    # Виртуальные нулевые биты перед старшей группой, если 32*len не кратно k
    counter = (bit_count - len(digits) * DIGIT_BITS % bit_count) % bit_count

    for i in range(len(digits) - 1, -1, -1):
        digit = digits.get(i)
        for bit in range(DIGIT_BITS - 1, -1, -1):
            if digit >> bit & 1:
                current_bits |= 1 << (bit_count - 1 - counter)
            counter += 1
            if counter == bit_count:
                counter = 0
                if has_character or current_bits:
                    characters.append(alphabet[current_bits])
                    has_character = True
                current_bits = 0

    if not has_character and config.canonical_zero:
        return "0"

    text = "".join(characters)
    logger.debug("Formatted %d digits in base %d into %d characters", len(digits), base, len(text))
    return "-" + text if is_negative else text
