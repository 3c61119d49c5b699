"""
DigitSequence - Персистентная последовательность цифр base 2^32

Неизменяемая little-endian последовательность беззнаковых 32-битных цифр
(индекс 0 = младшая цифра) и отдельная mutable стадия сборки (builder).

Модель использования:
    builder = DigitSequence.builder()
    builder.append(...)          # много дешёвых append
    digits = builder.freeze()    # один раз, после чего builder закрыт

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Frozen последовательность никогда не изменяется
2. Builder принадлежит одному владельцу и недоступен после freeze()
3. get(i) для i >= len возвращает виртуальный 0 (бесконечный хвост нулей)
4. drop_last() разделяет storage с исходной последовательностью (O(1))
5. Нормализованная последовательность не имеет старшей нулевой цифры;
   ноль представлен пустой последовательностью
"""

from typing import Final, Iterable, Iterator

# =============================================================================
# ПАРАМЕТРЫ ЦИФРЫ
# =============================================================================

# Ширина цифры в битах
DIGIT_BITS: Final[int] = 32

# Основание внутреннего позиционного представления
DIGIT_BASE: Final[int] = 1 << DIGIT_BITS

# Максимальное значение цифры
MAX_DIGIT: Final[int] = DIGIT_BASE - 1


def validate_digit(value: int) -> int:
    """
    Проверка, что значение помещается в одну цифру.

    Raises:
        ValueError: Если значение не int или вне [0, MAX_DIGIT]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Digit must be int, got {type(value).__name__}")
    if value < 0 or value > MAX_DIGIT:
        raise ValueError(f"Digit {value} outside [0, {MAX_DIGIT}]")
    return value


# =============================================================================
# FROZEN SEQUENCE
# =============================================================================


class DigitSequence:
    """
    Неизменяемая последовательность цифр.

    Хранит tuple (storage) и логическую длину. Производные версии,
    полученные через drop_last, ссылаются на тот же storage.
    """

    __slots__ = ("_storage", "_length")

    def __init__(self, storage: tuple[int, ...] = (), length: int | None = None):
        if length is None:
            length = len(storage)
        if length < 0 or length > len(storage):
            raise ValueError(f"length {length} outside storage bounds [0, {len(storage)}]")
        self._storage = storage
        self._length = length

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "DigitSequence":
        """Пустая последовательность (значение 0)."""
        return _EMPTY

    @classmethod
    def builder(cls) -> "DigitSequenceBuilder":
        """Новая стадия сборки."""
        return DigitSequenceBuilder()

    @classmethod
    def of(cls, digits: Iterable[int]) -> "DigitSequence":
        """
        Сборка из итерируемого набора цифр (с проверкой диапазона).

        Нормализация НЕ выполняется.
        """
        if isinstance(digits, DigitSequence):
            return digits
        return DigitSequenceBuilder().extend(digits).freeze()

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    def get(self, index: int) -> int:
        """
        Цифра по индексу или виртуальный 0 для index >= len.

        Raises:
            IndexError: Для отрицательного индекса
        """
        if index < 0:
            raise IndexError(f"Negative digit index: {index}")
        if index < self._length:
            return self._storage[index]
        return 0

    def last(self) -> int:
        """Старшая цифра."""
        if self._length == 0:
            raise IndexError("last() on empty DigitSequence")
        return self._storage[self._length - 1]

    def drop_last(self, count: int = 1) -> "DigitSequence":
        """
        Удаление count старших цифр.

        Результат разделяет storage с исходной последовательностью.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count == 0:
            return self
        if count >= self._length:
            return _EMPTY
        return DigitSequence(self._storage, self._length - count)

    def to_tuple(self) -> tuple[int, ...]:
        if self._length == len(self._storage):
            return self._storage
        return self._storage[: self._length]

    def shares_storage_with(self, other: "DigitSequence") -> bool:
        """True если обе последовательности ссылаются на один storage."""
        return self._storage is other._storage

    # -------------------------------------------------------------------------
    # Протоколы Python
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        storage = self._storage
        for i in range(self._length):
            yield storage[i]

    def __getitem__(self, index: int) -> int:
        if index < 0:
            index += self._length
        if index < 0 or index >= self._length:
            raise IndexError(f"DigitSequence index out of range: {index}")
        return self._storage[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitSequence):
            return NotImplemented
        if self._length != other._length:
            return False
        if self._storage is other._storage:
            return True
        return self.to_tuple() == other.to_tuple()

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __repr__(self) -> str:
        return f"DigitSequence({list(self)!r})"


_EMPTY: Final[DigitSequence] = DigitSequence()


# =============================================================================
# BUILDER (staged construction)
# =============================================================================


class DigitSequenceBuilder:
    """
    Mutable стадия сборки DigitSequence.

    Single-owner объект: не должен передаваться другим потокам и не
    должен использоваться после freeze().
    """

    __slots__ = ("_digits", "_frozen")

    def __init__(self):
        self._digits: list[int] = []
        self._frozen = False

    def _check_open(self) -> None:
        if self._frozen:
            raise RuntimeError("DigitSequenceBuilder already frozen")

    def append(self, value: int) -> None:
        self._check_open()
        self._digits.append(validate_digit(value))

    def extend(self, values: Iterable[int]) -> "DigitSequenceBuilder":
        self._check_open()
        for value in values:
            self._digits.append(validate_digit(value))
        return self

    def get(self, index: int) -> int:
        self._check_open()
        if index < 0:
            raise IndexError(f"Negative digit index: {index}")
        return self._digits[index] if index < len(self._digits) else 0

    def drop_last(self, count: int = 1) -> None:
        self._check_open()
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        del self._digits[max(len(self._digits) - count, 0):]

    def __len__(self) -> int:
        return len(self._digits)

    def freeze(self) -> DigitSequence:
        """
        Публикация собранных цифр как неизменяемой последовательности.

        После вызова builder закрыт: любые операции поднимают RuntimeError.
        """
        self._check_open()
        self._frozen = True
        digits, self._digits = self._digits, []
        if not digits:
            return _EMPTY
        return DigitSequence(tuple(digits))


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(digits: DigitSequence) -> DigitSequence:
    """
    Удаление старших нулевых цифр.

    Единственная точка нормализации для всех операций, производящих
    magnitude (сложение, вычитание, разбор текста).

    Examples:
        >>> normalize(DigitSequence((5, 0, 0)))
        DigitSequence([5])
        >>> normalize(DigitSequence((0, 0)))
        DigitSequence([])
    """
    zeros = 0
    for i in range(len(digits) - 1, -1, -1):
        if digits.get(i) != 0:
            break
        zeros += 1
    return digits.drop_last(zeros)


def is_normalized(digits: DigitSequence) -> bool:
    """True если у последовательности нет старшей нулевой цифры."""
    return len(digits) == 0 or digits.last() != 0
