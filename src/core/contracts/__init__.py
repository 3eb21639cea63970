"""
Contract Validation Module

Валидация JSON контрактов конфигурации конвертера.
"""

from .validators import (
    ContractValidator,
    ConverterOptionsValidator,
    SchemaLoader,
    validate_converter_options,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConverterOptionsValidator",
    # Functions
    "validate_converter_options",
]
