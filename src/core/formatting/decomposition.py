"""
Decomposition — разбор числовой строки на знак, целую часть и дробь

Единая процедура, используемая и format(), и parse(): обе стороны
разбирают строку одним и тем же паттерном, построенным из decimal_separator.

Анатомия паттерна:
    ^(-?)([0-9]*)(<decimal_separator>?)([0-9]*)
     ^^^^ ^^^^^^^ ^^^^^^^^^^^^^^^^^^^^^ ^^^^^^^
       1     2              3              4

1. (-?)                   - знак минус
2. ([0-9]*)               - цифры целой части
3. (<decimal_separator>?) - десятичный разделитель (не более одного)
4. ([0-9]*)               - цифры дробной части

Паттерн привязан к началу строки. Всё, что идёт после дробных цифр,
игнорируется.
"""

import re
from dataclasses import dataclass
from typing import Final

NEGATIVE_SIGN: Final[str] = "-"
DOT_SIGN: Final[str] = "."


@dataclass(frozen=True)
class DecomposedNumber:
    """Разобранное число. Живёт в пределах одного вызова format/parse."""

    sign: str
    integer_digits: str
    has_separator: bool
    fraction_digits: str

    @property
    def has_digits(self) -> bool:
        """Есть ли хотя бы одна цифра (в целой или дробной части)."""
        return bool(self.integer_digits or self.fraction_digits)

    def to_canonical(self) -> str:
        """
        Каноническая десятичная строка для float()/Decimal().

        Returns:
            sign + integer_digits + ('.' если был разделитель) + fraction_digits
        """
        separator = DOT_SIGN if self.has_separator else ""
        return f"{self.sign}{self.integer_digits}{separator}{self.fraction_digits}"


def build_extraction_pattern(decimal_separator: str) -> re.Pattern[str]:
    """
    Построение паттерна разбора для заданного десятичного разделителя.

    Args:
        decimal_separator: Десятичный разделитель (один символ)

    Returns:
        Скомпилированный паттерн с четырьмя группами (sign, integer, separator, fraction)
    """
    separator = re.escape(decimal_separator)
    return re.compile(rf"(-?)([0-9]*)((?:{separator})?)([0-9]*)")


def decompose(source: str, pattern: re.Pattern[str]) -> DecomposedNumber:
    """
    Разбор строки на DecomposedNumber.

    Args:
        source: Исходная строка
        pattern: Паттерн из build_extraction_pattern

    Returns:
        DecomposedNumber (все поля могут быть пустыми, если строка не начинается
        со знака или цифры)

    Examples:
        >>> decompose("-9873,10", build_extraction_pattern(","))
        DecomposedNumber(sign='-', integer_digits='9873', has_separator=True, fraction_digits='10')
        >>> decompose("12abc", build_extraction_pattern(","))
        DecomposedNumber(sign='', integer_digits='12', has_separator=False, fraction_digits='')
    """
    # Пустой паттерн всегда совпадает с началом строки, match() не вернёт None
    match = pattern.match(source)
    sign, integer_digits, separator, fraction_digits = match.groups()

    return DecomposedNumber(
        sign=sign,
        integer_digits=integer_digits,
        has_separator=separator != "",
        fraction_digits=fraction_digits,
    )
