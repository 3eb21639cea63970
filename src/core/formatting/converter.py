"""
NumericTextConverter — число <-> локализованная строка

Двунаправленный конвертер с настраиваемыми разделителями и точностью:
    format(100000.12) -> "100 000,12"
    parse("100 000,12") -> 100000.12

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. precision - это минимум дробных цифр: недостающие дополняются нулями,
   лишние НЕ отбрасываются и НЕ округляются (pass-through)
2. Отрицательный ноль всегда форматируется со знаком минус
3. parse() никогда не бросает исключений: невалидный ввод -> math.nan
4. Round-trip: parse(format(x)) == x для конечных x с дробью <= precision
5. Конвертер immutable: паттерны компилируются один раз при создании
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Union

import structlog

from src.core.formatting.converter_options import ConverterOptions, resolve_options
from src.core.formatting.decomposition import (
    DOT_SIGN,
    NEGATIVE_SIGN,
    DecomposedNumber,
    build_extraction_pattern,
    decompose,
)
from src.core.formatting.errors import NonFiniteValueError
from src.core.formatting.grouping import (
    build_group_separator_pattern,
    insert_group_separators,
    strip_group_separators,
)

logger = structlog.get_logger(__name__)

Number = Union[int, float, Decimal]


# =============================================================================
# HOST REPRESENTATION
# =============================================================================


def host_decimal_repr(value: Number) -> str:
    """
    Стандартное десятичное представление числа без экспоненты.

    int -> str(value), Decimal -> fixed-point, float -> repr(value).
    Экспоненциальная запись float (1e-05, 1e+16) разворачивается через Decimal.

    Raises:
        TypeError: Если value не int/float/Decimal (bool отклоняется)
        NonFiniteValueError: Если value равен NaN или ±Inf
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(f"value must be int, float or Decimal, got {type(value).__name__}")

    if isinstance(value, int):
        return str(value)

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise NonFiniteValueError(f"Cannot format non-finite value {value}")
        return format(value, "f")

    if not math.isfinite(value):
        raise NonFiniteValueError(f"Cannot format non-finite value {value}")

    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")

    # Отрицательный ноль всегда со знаком
    if value == 0 and math.copysign(1.0, value) < 0 and not text.startswith(NEGATIVE_SIGN):
        text = NEGATIVE_SIGN + text

    return text


# =============================================================================
# CONVERTER
# =============================================================================


class NumericTextConverter:
    """
    Конвертер числа в локализованную строку и обратно.

    Конфигурация задаётся один раз; format/parse - чистые функции,
    безопасные для конкурентного вызова.
    """

    def __init__(self, options: ConverterOptions | Mapping[str, Any] | None = None):
        """
        Инициализация конвертера.

        Args:
            options: ConverterOptions или частичный mapping (опционально, используются defaults)

        Raises:
            ConverterConfigurationError: Если конфигурация невалидна
        """
        self.options = resolve_options(options)
        self._group_separator_pattern = build_group_separator_pattern(self.options.group_separator)
        self._extraction_pattern = build_extraction_pattern(self.options.decimal_separator)

    def __repr__(self) -> str:
        return (
            f"NumericTextConverter(precision={self.options.precision}, "
            f"group_separator={self.options.group_separator!r}, "
            f"decimal_separator={self.options.decimal_separator!r})"
        )

    @property
    def precision(self) -> int:
        return self.options.precision

    @property
    def group_separator(self) -> str:
        return self.options.group_separator

    @property
    def decimal_separator(self) -> str:
        return self.options.decimal_separator

    # -------------------------------------------------------------------------
    # number -> string
    # -------------------------------------------------------------------------

    def format(self, value: Number) -> str:
        """
        Число -> строка.

        Args:
            value: Конечное число (int, float или Decimal)

        Returns:
            sign + сгруппированная целая часть + дробная часть

        Raises:
            TypeError: Если value не число
            NonFiniteValueError: Если value равен NaN или ±Inf

        Examples:
            >>> converter = create_converter()
            >>> converter.format(100000.12)
            '100 000,12'
            >>> converter.format(-9873.1)
            '-9 873,10'
            >>> converter.format(1.2345)
            '1,2345'
        """
        source = host_decimal_repr(value).replace(DOT_SIGN, self.decimal_separator, 1)
        parts = decompose(source, self._extraction_pattern)

        formatted = parts.sign

        if parts.integer_digits:
            cleared = strip_group_separators(parts.integer_digits, self._group_separator_pattern)
            formatted += insert_group_separators(cleared, self.group_separator)

        formatted += self._format_fraction(parts)
        return formatted

    def _format_fraction(self, parts: DecomposedNumber) -> str:
        """Дробная часть: дополнение нулями до precision, иначе как есть"""
        fraction = parts.fraction_digits

        if self.precision and len(fraction) < self.precision:
            return self.decimal_separator + fraction.ljust(self.precision, "0")

        separator = self.decimal_separator if parts.has_separator else ""
        return separator + fraction

    # -------------------------------------------------------------------------
    # string -> number
    # -------------------------------------------------------------------------

    def _decompose_text(self, value: str) -> DecomposedNumber | None:
        """Общий путь parse/parse_decimal: None для пустого ввода или ввода без цифр"""
        if value == "":
            return None

        stripped = strip_group_separators(value, self._group_separator_pattern)
        parts = decompose(stripped, self._extraction_pattern)

        if not parts.has_digits:
            return None
        return parts

    def parse(self, value: str) -> float:
        """
        Строка -> число.

        Разделители групп удаляются, всё после дробных цифр игнорируется.

        Args:
            value: Строка в формате конвертера

        Returns:
            float значение, либо math.nan для невалидного ввода

        Examples:
            >>> converter = create_converter()
            >>> converter.parse("100 000,12")
            100000.12
            >>> converter.parse("-9 873,10")
            -9873.1
        """
        parts = self._decompose_text(value)
        if parts is None:
            return math.nan

        canonical = parts.to_canonical()
        try:
            return float(canonical)
        except ValueError as e:
            logger.warning(
                "numeric_text_conversion_failed",
                source=value,
                canonical=canonical,
                error=str(e),
            )
        return math.nan

    def parse_decimal(self, value: str) -> Decimal | None:
        """
        Строка -> Decimal без потерь двоичного float.

        Returns:
            Decimal значение, либо None для невалидного ввода
        """
        parts = self._decompose_text(value)
        if parts is None:
            return None

        canonical = parts.to_canonical()
        try:
            return Decimal(canonical)
        except InvalidOperation as e:
            logger.warning(
                "numeric_text_conversion_failed",
                source=value,
                canonical=canonical,
                error=str(e),
            )
        return None

    # Альтернативные имена
    to_string = format
    to_number = parse


# =============================================================================
# FACTORY
# =============================================================================


def create_converter(
    options: ConverterOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> NumericTextConverter:
    """
    Создание конвертера из частичной конфигурации.

    Args:
        options: ConverterOptions или mapping (snake_case/camelCase ключи)
        **overrides: Отдельные поля конфигурации

    Returns:
        NumericTextConverter

    Raises:
        ConverterConfigurationError: Если конфигурация невалидна

    Examples:
        >>> create_converter(precision=0, decimalSeparator=".").format(1234.5)
        '1 234.5'
    """
    return NumericTextConverter(resolve_options(options, **overrides))
