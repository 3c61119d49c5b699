"""
Integer - Знаковое целое произвольной точности

Immutable Pydantic модель в представлении sign-magnitude:
(is_negative, digits), где digits - персистентная little-endian
последовательность цифр base 2^32.

Операции:
- Фабрики: from_digits, from_int, from_text
- Форматирование: to_text (основания 2, 4, 8, 16, 32)
- Арифметика: negate, add, subtract
- Сравнение: is_less_than (только magnitude), compare (с учётом знака)

Знаковая арифметика сводится к разбору пары знаков (вычисляется один раз)
и одному вызову magnitude_add или magnitude_subtract.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Integer никогда не изменяется: каждая операция возвращает новый экземпляр
2. Результаты add / subtract / from_text нормализованы, ноль неотрицателен
3. from_digits и negate не нормализуют (negate(0) даёт "отрицательный ноль")
4. Отрицательный ноль равен нулю для ==, hash и упорядочивания
"""

from typing import Any, Iterable

from pydantic import BaseModel, Field, field_serializer, field_validator

from src.core.math.digit_arithmetic import (
    magnitude_add,
    magnitude_compare,
    magnitude_less_than,
    magnitude_subtract,
)
from src.core.math.digit_sequence import (
    DIGIT_BITS,
    MAX_DIGIT,
    DigitSequence,
    normalize,
)
from src.core.math.radix_codec import (
    TextCodecConfig,
    format_pow2,
    parse_pow2,
    split_sign,
)

_CANONICAL_HEX = TextCodecConfig(uppercase=True, canonical_zero=True)


# =============================================================================
# INTEGER MODEL
# =============================================================================


class Integer(BaseModel):
    """
    Целое произвольной точности.

    Immutable модель (frozen=True): все изменения создают новый экземпляр.
    Несколько Integer могут разделять одну DigitSequence (например, x и -x).
    """

    is_negative: bool = Field(False, description="Знак (True для отрицательных)")
    digits: DigitSequence = Field(
        default_factory=DigitSequence.empty,
        description="Magnitude: цифры base 2^32, индекс 0 = младшая",
    )

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("digits", mode="before")
    @classmethod
    def coerce_digits(cls, v: Any) -> DigitSequence:
        """
        Приведение последовательности int к DigitSequence.

        Каждая цифра должна лежать в [0, 2^32). Нормализация не выполняется.
        """
        if isinstance(v, DigitSequence):
            return v
        if isinstance(v, (str, bytes)):
            raise ValueError("digits must be a sequence of integers, not text")
        return DigitSequence.of(v)

    @field_serializer("digits")
    def serialize_digits(self, digits: DigitSequence) -> list[int]:
        return list(digits)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return len(normalize(self.digits)) == 0

    def sign(self) -> int:
        """-1, 0 или 1 (отрицательный ноль даёт 0)."""
        if self.is_zero():
            return 0
        return -1 if self.is_negative else 1

    def to_int(self) -> int:
        """Конверсия в встроенный int."""
        value = 0
        for i in range(len(self.digits) - 1, -1, -1):
            value = (value << DIGIT_BITS) | self.digits.get(i)
        return -value if self.is_negative else value

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Integer":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: Any) -> "Integer":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return add(other, self)

    def __sub__(self, other: Any) -> "Integer":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other: Any) -> "Integer":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return subtract(other, self)

    def __neg__(self) -> "Integer":
        return negate(self)

    def __pos__(self) -> "Integer":
        return self

    def __abs__(self) -> "Integer":
        return negate(self) if self.is_negative else self

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        return self.to_int()

    # -------------------------------------------------------------------------
    # Сравнение (с учётом знака)
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) == 0

    def __hash__(self) -> int:
        # Согласовано с int: Integer == 5 ⇒ hash(Integer) == hash(5)
        return hash(self.to_int())

    def __lt__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) >= 0

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return to_text(self, 16, config=_CANONICAL_HEX)

    def __repr__(self) -> str:
        sign = "-" if self.is_negative else ""
        return f"Integer({sign}0x{format_pow2(self.digits, 16, config=_CANONICAL_HEX)})"


def _coerce(value: Any) -> Integer | None:
    if isinstance(value, Integer):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return from_int(value)
    return None


def _signed(digits: DigitSequence, is_negative: bool) -> Integer:
    """Integer из нормализованной magnitude; ноль всегда неотрицателен."""
    return Integer(digits=digits, is_negative=is_negative and len(digits) > 0)


# =============================================================================
# ФАБРИКИ
# =============================================================================


def from_digits(digits: Iterable[int] | DigitSequence, is_negative: bool = False) -> Integer:
    """
    Прямое создание из цифр base 2^32 (нативное представление).

    Нормализация НЕ выполняется: корректность цифр на стороне вызывающего.

    Raises:
        pydantic.ValidationError: Если цифра вне [0, 2^32)
    """
    return Integer(digits=digits, is_negative=is_negative)


def from_int(value: int) -> Integer:
    """
    Создание из встроенного int.

    Examples:
        >>> from_int(-(2**32)).digits
        DigitSequence([0, 1])
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"from_int expects int, got {type(value).__name__}")
    magnitude = -value if value < 0 else value
    builder = DigitSequence.builder()
    while magnitude:
        builder.append(magnitude & MAX_DIGIT)
        magnitude >>= DIGIT_BITS
    return _signed(builder.freeze(), value < 0)


def from_text(text: str, base: int) -> Integer:
    """
    Разбор текста в заданном основании.

    Поддерживается необязательный ведущий знак '+' / '-'.
    Основание должно быть степенью двойки в [2, 36].

    Args:
        text: Текст числа, старшая цифра первой
        base: Основание

    Raises:
        InvalidBaseRange: base вне [2, 36]
        UnsupportedBase: base не степень двойки
        InvalidCharacter: символ не является цифрой основания

    Examples:
        >>> to_text(from_text("-ff", 16), 16)
        '-FF'
    """
    is_negative, magnitude_text = split_sign(text)
    return _signed(parse_pow2(magnitude_text, base), is_negative)


def to_text(
    x: Integer,
    base: int,
    uppercase: bool = True,
    config: TextCodecConfig | None = None,
) -> str:
    """
    Форматирование в заданном основании (обратная операция к from_text).

    Ноль форматируется пустой строкой (или "-" для отрицательного нуля),
    если config.canonical_zero не задан. Явный config имеет приоритет
    над аргументом uppercase.

    Raises:
        InvalidBaseRange: base вне [2, 36]
        UnsupportedBase: base не степень двойки
    """
    if config is None:
        config = TextCodecConfig(uppercase=uppercase)
    return format_pow2(x.digits, base, is_negative=x.is_negative, config=config)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def negate(x: Integer) -> Integer:
    """Смена знака; magnitude разделяется с исходным значением."""
    return Integer(digits=x.digits, is_negative=not x.is_negative)


def _difference(minuend: DigitSequence, subtrahend: DigitSequence) -> Integer:
    # minuend - subtrahend для magnitude: x - y = -(y - x) при x < y
    if magnitude_less_than(minuend, subtrahend):
        return _signed(magnitude_subtract(subtrahend, minuend), True)
    return _signed(magnitude_subtract(minuend, subtrahend), False)


def add(x: Integer, y: Integer) -> Integer:
    """
    Сложение.

    Разбор знаков:
    - -x + (-y) = -(x + y)
    - -x + y = y - x
    - x + (-y) = x - y
    - x + y: поразрядное сложение с переносом

    Examples:
        >>> add(from_text("FFFFFFFF", 16), from_text("1", 16)).digits
        DigitSequence([0, 1])
    """
    x_digits = normalize(x.digits)
    y_digits = normalize(y.digits)

    if x.is_negative and y.is_negative:
        return _signed(magnitude_add(x_digits, y_digits), True)
    elif x.is_negative:
        return _difference(y_digits, x_digits)
    elif y.is_negative:
        return _difference(x_digits, y_digits)
    return _signed(magnitude_add(x_digits, y_digits), False)


def subtract(x: Integer, y: Integer) -> Integer:
    """
    Вычитание.

    Разбор знаков:
    - -x - (-y) = y - x
    - -x - y = -(x + y)
    - x - (-y) = x + y
    - x - y: поразрядное вычитание с заёмом, x - y = -(y - x) при x < y

    Examples:
        >>> to_text(subtract(from_digits([]), from_text("5", 16)), 16)
        '-5'
    """
    x_digits = normalize(x.digits)
    y_digits = normalize(y.digits)

    if x.is_negative and y.is_negative:
        return _difference(y_digits, x_digits)
    elif x.is_negative:
        return _signed(magnitude_add(x_digits, y_digits), True)
    elif y.is_negative:
        return _signed(magnitude_add(x_digits, y_digits), False)
    return _difference(x_digits, y_digits)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def is_less_than(x: Integer, y: Integer) -> bool:
    """
    Сравнение ТОЛЬКО magnitude (знак игнорируется).

    ВАЖНО: is_less_than(from_int(-5), from_int(3)) == False, так как |−5| > |3|.
    Для упорядочивания с учётом знака использовать compare или операторы < / >.
    """
    return magnitude_less_than(normalize(x.digits), normalize(y.digits))


def compare(x: Integer, y: Integer) -> int:
    """
    Полный порядок с учётом знака: -1 если x < y, 0 если равны, 1 если x > y.

    Отрицательный ноль равен нулю.
    """
    x_sign = x.sign()
    y_sign = y.sign()
    if x_sign != y_sign:
        return -1 if x_sign < y_sign else 1
    order = magnitude_compare(normalize(x.digits), normalize(y.digits))
    return -order if x_sign < 0 else order
