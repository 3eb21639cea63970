"""
Numeric text formatting

Конвертер число <-> локализованная строка (разделители групп и дроби,
минимальная точность) и его строительные блоки.
"""

from src.core.formatting.converter import (
    Number,
    NumericTextConverter,
    create_converter,
    host_decimal_repr,
)
from src.core.formatting.converter_options import (
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_GROUP_SEPARATOR,
    DEFAULT_PRECISION,
    ConverterOptions,
    resolve_options,
)
from src.core.formatting.decomposition import (
    DOT_SIGN,
    NEGATIVE_SIGN,
    DecomposedNumber,
    build_extraction_pattern,
    decompose,
)
from src.core.formatting.errors import (
    ConverterConfigurationError,
    NonFiniteValueError,
    NumericTextError,
)
from src.core.formatting.grouping import (
    GROUP_SIZE,
    build_group_separator_pattern,
    insert_group_separators,
    strip_group_separators,
)

__all__ = [
    # Converter
    "Number",
    "NumericTextConverter",
    "create_converter",
    "host_decimal_repr",
    # Options
    "DEFAULT_DECIMAL_SEPARATOR",
    "DEFAULT_GROUP_SEPARATOR",
    "DEFAULT_PRECISION",
    "ConverterOptions",
    "resolve_options",
    # Decomposition
    "DOT_SIGN",
    "NEGATIVE_SIGN",
    "DecomposedNumber",
    "build_extraction_pattern",
    "decompose",
    # Errors
    "ConverterConfigurationError",
    "NonFiniteValueError",
    "NumericTextError",
    # Grouping
    "GROUP_SIZE",
    "build_group_separator_pattern",
    "insert_group_separators",
    "strip_group_separators",
]
