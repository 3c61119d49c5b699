"""
Тесты для модуля Radix Codec

Проверяет:
1. Проверку основания (диапазон, затем степень двойки)
2. Разбор текста: порядок символов, регистр, перенос бит через границы цифр
3. Форматирование: выравнивание групп для k = 3 и k = 5, подавление нулей
4. InvalidCharacter с позицией и основанием
5. TextCodecConfig
"""

import pytest

from src.core.errors import (
    IntegerError,
    InvalidBaseRange,
    InvalidCharacter,
    UnsupportedBase,
)
from src.core.math.digit_sequence import MAX_DIGIT, DigitSequence, is_normalized
from src.core.math.radix_codec import (
    MAX_BASE,
    MIN_BASE,
    SUPPORTED_BASES,
    TextCodecConfig,
    format_pow2,
    is_pow2,
    log2_pow2,
    parse_pow2,
    split_sign,
    validate_base,
)


def as_int(digits: DigitSequence) -> int:
    return sum(d << (32 * i) for i, d in enumerate(digits))


def seq(*digits: int) -> DigitSequence:
    return DigitSequence.of(digits)


# =============================================================================
# ОСНОВАНИЯ
# =============================================================================


class TestPow2Helpers:
    """Тесты is_pow2 / log2_pow2"""

    def test_is_pow2(self) -> None:
        assert all(is_pow2(b) for b in (1, 2, 4, 8, 16, 32, 64))
        assert not any(is_pow2(b) for b in (0, -2, 3, 6, 10, 36))

    def test_log2_pow2(self) -> None:
        assert [log2_pow2(b) for b in SUPPORTED_BASES] == [1, 2, 3, 4, 5]

    def test_log2_non_pow2_raises(self) -> None:
        with pytest.raises(ValueError, match="not a power of two"):
            log2_pow2(10)


class TestValidateBase:
    """Тесты для validate_base"""

    def test_constants(self) -> None:
        assert MIN_BASE == 2
        assert MAX_BASE == 36
        assert SUPPORTED_BASES == (2, 4, 8, 16, 32)

    @pytest.mark.parametrize("base,bits", [(2, 1), (4, 2), (8, 3), (16, 4), (32, 5)])
    def test_supported_bases(self, base: int, bits: int) -> None:
        assert validate_base(base) == bits

    @pytest.mark.parametrize("base", [-16, 0, 1, 37, 64])
    def test_out_of_range(self, base: int) -> None:
        """Вне [2, 36] - InvalidBaseRange, даже для степеней двойки"""
        with pytest.raises(InvalidBaseRange) as exc_info:
            validate_base(base)
        assert exc_info.value.base == base
        assert exc_info.value.code == "invalid_base_range"

    @pytest.mark.parametrize("base", [3, 10, 36])
    def test_not_pow2(self, base: int) -> None:
        """Произвольные основания не реализованы"""
        with pytest.raises(UnsupportedBase) as exc_info:
            validate_base(base)
        assert isinstance(exc_info.value, NotImplementedError)
        assert exc_info.value.code == "unsupported_base"

    def test_range_checked_before_pow2(self) -> None:
        """37 не степень двойки, но сначала срабатывает диапазон"""
        with pytest.raises(InvalidBaseRange):
            validate_base(37)


class TestSplitSign:
    """Тесты для split_sign"""

    def test_minus(self) -> None:
        assert split_sign("-A") == (True, "A")

    def test_plus(self) -> None:
        assert split_sign("+A") == (False, "A")

    def test_no_sign(self) -> None:
        assert split_sign("A") == (False, "A")

    def test_empty(self) -> None:
        assert split_sign("") == (False, "")

    def test_only_first_sign_stripped(self) -> None:
        assert split_sign("--1") == (True, "-1")


# =============================================================================
# РАЗБОР
# =============================================================================


class TestParsePow2:
    """Тесты разбора текста"""

    def test_hex_single_digit(self) -> None:
        assert list(parse_pow2("FFFFFFFF", 16)) == [MAX_DIGIT]

    def test_hex_digit_boundary(self) -> None:
        assert list(parse_pow2("100000000", 16)) == [0, 1]

    def test_last_character_is_least_significant(self) -> None:
        """Первый символ - старший"""
        assert list(parse_pow2("10", 16)) == [16]
        assert list(parse_pow2("10", 2)) == [2]

    def test_case_insensitive(self) -> None:
        assert parse_pow2("aBcDeF", 16) == parse_pow2("ABCDEF", 16)
        assert list(parse_pow2("abcdef", 16)) == [0xABCDEF]

    def test_leading_zeros_stripped(self) -> None:
        digits = parse_pow2("0000000000000000000FF", 16)
        assert list(digits) == [255]
        assert is_normalized(digits)

    def test_zero_is_empty(self) -> None:
        assert len(parse_pow2("0", 16)) == 0
        assert len(parse_pow2("000", 2)) == 0
        assert len(parse_pow2("", 8)) == 0

    @pytest.mark.parametrize(
        "text,base",
        [
            ("777777777777777777777", 8),
            ("1234567012345670123456701", 8),
            ("VVVVVVVVVVVVVVVV", 32),
            ("1NB2K3P9Q0ABCDEFGHIJKLMNOPQRSTUV", 32),
            ("10110111011110111110111111011111110", 2),
            ("3210321032103210321032103210", 4),
            ("DEADBEEFCAFEBABE0123456789ABCDEF", 16),
        ],
    )
    def test_matches_int_parsing(self, text: str, base: int) -> None:
        """Биты символов пересекают границы 32-битных цифр корректно"""
        digits = parse_pow2(text, base)
        assert as_int(digits) == int(text, base)
        assert is_normalized(digits)

    def test_invalid_character_value_too_large(self) -> None:
        """'G' (16) не является цифрой основания 8"""
        with pytest.raises(InvalidCharacter) as exc_info:
            parse_pow2("G", 8)
        error = exc_info.value
        assert error.character == "G"
        assert error.position == 0
        assert error.base == 8
        assert error.code == "invalid_character"

    def test_invalid_character_position(self) -> None:
        with pytest.raises(InvalidCharacter) as exc_info:
            parse_pow2("12Z", 32)
        assert exc_info.value.position == 2

    @pytest.mark.parametrize("text", ["8", "1 2", "1-2", "ff.", "é"])
    def test_invalid_characters_octal(self, text: str) -> None:
        with pytest.raises(InvalidCharacter):
            parse_pow2(text, 8)

    def test_invalid_character_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_pow2("2", 2)

    def test_base_errors(self) -> None:
        with pytest.raises(InvalidBaseRange):
            parse_pow2("ZZ", 37)
        with pytest.raises(UnsupportedBase):
            parse_pow2("99", 10)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


class TestFormatPow2:
    """Тесты форматирования"""

    def test_hex(self) -> None:
        assert format_pow2(seq(0, 1), 16) == "100000000"
        assert format_pow2(seq(MAX_DIGIT), 16) == "FFFFFFFF"

    def test_binary_one(self) -> None:
        assert format_pow2(seq(1), 2) == "1"

    def test_base4(self) -> None:
        assert format_pow2(seq(5), 4) == "11"

    def test_octal_alignment(self) -> None:
        """32 бита не кратны 3: старшая группа неполная"""
        assert format_pow2(seq(MAX_DIGIT), 8) == "37777777777"
        assert format_pow2(seq(0, 1), 8) == "40000000000"
        assert format_pow2(seq(8), 8) == "10"

    def test_base32_alignment(self) -> None:
        """32 бита не кратны 5: старшая группа из 2 бит"""
        assert format_pow2(seq(MAX_DIGIT), 32) == "3VVVVVV"
        assert format_pow2(seq(0, 1), 32) == "4000000"
        assert format_pow2(seq(32), 32) == "10"

    @pytest.mark.parametrize("base", SUPPORTED_BASES)
    def test_matches_int_formatting(self, base: int) -> None:
        digits = seq(0x89ABCDEF, 0x01234567, 0xFEDCBA98, 0x7)
        value = as_int(digits)
        expected = ""
        while value:
            expected = "0123456789ABCDEFGHIJKLMNOPQRSTUV"[value % base] + expected
            value //= base
        assert format_pow2(digits, base) == expected

    def test_lowercase(self) -> None:
        config = TextCodecConfig(uppercase=False)
        assert format_pow2(seq(0xABCDEF), 16, config=config) == "abcdef"

    def test_leading_zero_digits_suppressed(self) -> None:
        """Ненормализованная последовательность форматируется без ведущих нулей"""
        assert format_pow2(seq(1, 0, 0), 16) == "1"

    def test_zero_is_empty(self) -> None:
        assert format_pow2(seq(), 16) == ""
        assert format_pow2(seq(0, 0), 2) == ""

    def test_negative_sign(self) -> None:
        assert format_pow2(seq(5), 16, is_negative=True) == "-5"

    def test_negative_zero_not_checked(self) -> None:
        """Знак выводится без проверки на ноль"""
        assert format_pow2(seq(), 16, is_negative=True) == "-"

    def test_canonical_zero(self) -> None:
        config = TextCodecConfig(canonical_zero=True)
        assert format_pow2(seq(), 16, config=config) == "0"
        assert format_pow2(seq(), 2, is_negative=True, config=config) == "0"
        assert format_pow2(seq(3), 2, config=config) == "11"

    def test_base_errors(self) -> None:
        with pytest.raises(InvalidBaseRange):
            format_pow2(seq(1), 64)
        with pytest.raises(UnsupportedBase):
            format_pow2(seq(1), 10)

    def test_all_errors_share_base_class(self) -> None:
        for call in (
            lambda: format_pow2(seq(1), 10),
            lambda: format_pow2(seq(1), 40),
            lambda: parse_pow2("x", 16),
        ):
            with pytest.raises(IntegerError):
                call()
