"""
Digit Arithmetic - Операции над magnitude (беззнаковыми digit sequences)

Примитивы, на которые сводится знаковая арифметика Integer:
- magnitude_add: поразрядное сложение с переносом (carry)
- magnitude_subtract: поразрядное вычитание с заёмом (borrow), x >= y
- magnitude_compare / magnitude_less_than: сравнение без учёта знака
- inverse_digit: дополнение цифры до 2^32

Все функции ожидают нормализованные входы (без старших нулевых цифр)
и возвращают нормализованный результат.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Перенос берётся из суммы ширины superdigit (sum >> 32), поэтому
   перенос не теряется даже при x[i] + MAX_DIGIT + carry
2. inverse_digit(0) не определён → InvalidDigitOperand
3. Результат никогда не содержит старшей нулевой цифры
"""

import logging
from typing import Final

from src.core.errors import InvalidDigitOperand
from src.core.math.digit_sequence import (
    DIGIT_BASE,
    DIGIT_BITS,
    MAX_DIGIT,
    DigitSequence,
    normalize,
)

logger = logging.getLogger(__name__)

# Ширина промежуточного значения (superdigit) в битах
SUPERDIGIT_BITS: Final[int] = 2 * DIGIT_BITS


# =============================================================================
# DIGIT HELPERS
# =============================================================================


def inverse_digit(digit: int) -> int:
    """
    Цифра, дополняющая digit до 10 в base 2^32: 2^32 - digit.

    Вычисление выполняется в ширине superdigit, поэтому 2^32 - 1
    не переполняется.

    Raises:
        InvalidDigitOperand: Для digit == 0 (обратного элемента нет)

    Examples:
        >>> inverse_digit(1)
        4294967295
        >>> inverse_digit(4294967295)
        1
    """
    if digit == 0:
        logger.error("inverse_digit called with zero digit")
        raise InvalidDigitOperand("Digit 0 has no additive inverse in base 2^32")
    return DIGIT_BASE - digit


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def magnitude_compare(x: DigitSequence, y: DigitSequence) -> int:
    """
    Сравнение magnitude: -1 если x < y, 0 если равны, 1 если x > y.

    Более короткая последовательность меньше; при равной длине
    решает первая несовпадающая цифра от старшей к младшей.
    """
    if len(x) != len(y):
        return -1 if len(x) < len(y) else 1
    for i in range(len(x) - 1, -1, -1):
        xi = x.get(i)
        yi = y.get(i)
        if xi != yi:
            return -1 if xi < yi else 1
    return 0


def magnitude_less_than(x: DigitSequence, y: DigitSequence) -> bool:
    """True если magnitude x строго меньше magnitude y."""
    return magnitude_compare(x, y) < 0


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def magnitude_add(x: DigitSequence, y: DigitSequence) -> DigitSequence:
    """
    Поразрядное сложение с переносом.

    Для каждого индекса до max(len(x), len(y)):
        total = x[i] + y[i] + carry   (ширина superdigit)
        digit = total mod 2^32, carry = total >> 32
    Если после последнего индекса перенос остался, добавляется цифра 1.

    Examples:
        >>> magnitude_add(DigitSequence((MAX_DIGIT,)), DigitSequence((1,)))
        DigitSequence([0, 1])
    """
    result = DigitSequence.builder()
    carry = 0
    for i in range(max(len(x), len(y))):
        total = x.get(i) + y.get(i) + carry
        result.append(total & MAX_DIGIT)
        carry = total >> DIGIT_BITS
    if carry:
        result.append(1)
    return normalize(result.freeze())


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def magnitude_subtract(x: DigitSequence, y: DigitSequence) -> DigitSequence:
    """
    Поразрядное вычитание с заёмом, требует magnitude x >= magnitude y.

    Для каждого индекса:
    - x[i] - borrow >= y[i] (нет underflow):
        diff = x[i] - borrow - y[i], borrow = 0
    - иначе (underflow):
        diff = inverse_digit(y[i] - (x[i] - borrow)), borrow = 1

    На ветке underflow аргумент inverse_digit строго положителен.

    Raises:
        ValueError: Если x < y (заём остался после старшей цифры)
    """
    result = DigitSequence.builder()
    borrow = 0
    for i in range(max(len(x), len(y))):
        xi = x.get(i) - borrow
        yi = y.get(i)
        if xi >= yi:
            result.append(xi - yi)
            borrow = 0
        else:
            result.append(inverse_digit(yi - xi))
            borrow = 1
    if borrow:
        raise ValueError("magnitude_subtract requires magnitude x >= magnitude y")
    return normalize(result.freeze())
