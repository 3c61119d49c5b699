"""
Errors - Иерархия исключений для целочисленной арифметики

Все ошибки наследуются от IntegerError и несут стабильный code (snake_case),
пригодный для логов и контрактов.

Таксономия:
- UnsupportedBase: основание не является степенью двойки (не реализовано)
- InvalidBaseRange: основание вне диапазона [2, 36]
- InvalidCharacter: символ не является цифрой в заданном основании
- InvalidDigitOperand: обратный элемент для нулевой цифры (внутренняя ошибка)

ПОЛИТИКА:
1. Ошибка терминальна для операции, которая её подняла
2. Некорректный ввод отклоняется до начала построения digit sequence
3. Вызывающий код никогда не получает валидный Integer при ошибке
"""


class IntegerError(Exception):
    """Базовое исключение для всех ошибок Integer / codec."""

    code: str = "integer_error"


# =============================================================================
# ОШИБКИ ОСНОВАНИЯ
# =============================================================================


class UnsupportedBase(IntegerError, NotImplementedError):
    """
    Основание не является степенью двойки.

    Конверсия для произвольных оснований не реализована и должна
    завершаться явной ошибкой, а не угадыванием алгоритма.
    """

    code = "unsupported_base"

    def __init__(self, base: int):
        self.base = base
        super().__init__(
            f"Base {base} is not a power of two; arbitrary bases are not implemented "
            f"({self.code})"
        )


class InvalidBaseRange(IntegerError, ValueError):
    """Основание вне диапазона [2, 36]."""

    code = "invalid_base_range"

    def __init__(self, base: int, min_base: int, max_base: int):
        self.base = base
        super().__init__(
            f"Base {base} outside supported range [{min_base}, {max_base}] ({self.code})"
        )


# =============================================================================
# ОШИБКИ ВВОДА
# =============================================================================


class InvalidCharacter(IntegerError, ValueError):
    """
    Символ текста не является цифрой в заданном основании.

    Attributes:
        character: Отклонённый символ
        position: Индекс символа в тексте (после знака)
        base: Основание, в котором выполнялся разбор
    """

    code = "invalid_character"

    def __init__(self, character: str, position: int, base: int):
        self.character = character
        self.position = position
        self.base = base
        super().__init__(
            f"Character {character!r} at position {position} is not a valid digit "
            f"in base {base} ({self.code})"
        )


# =============================================================================
# ВНУТРЕННИЕ ОШИБКИ
# =============================================================================


class InvalidDigitOperand(IntegerError, ArithmeticError):
    """
    Попытка вычислить обратный элемент для нулевой цифры.

    При соблюдении инвариантов вычитания с заёмом возникнуть не может:
    это внутренняя логическая ошибка, а не пользовательская.
    """

    code = "invalid_digit_operand"
