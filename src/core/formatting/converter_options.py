"""
ConverterOptions — конфигурация конвертера числа в текст

Immutable Pydantic модель. Создаётся один раз при конструировании
конвертера; любое изменение требует нового экземпляра конвертера.

Поля принимают как snake_case имена, так и camelCase алиасы
(groupSeparator, decimalSeparator) для совместимости с внешними настройками.
"""

import unicodedata
from typing import Any, Final, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from src.core.formatting.decomposition import NEGATIVE_SIGN
from src.core.formatting.errors import ConverterConfigurationError

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_PRECISION: Final[int] = 2
DEFAULT_GROUP_SEPARATOR: Final[str] = " "
DEFAULT_DECIMAL_SEPARATOR: Final[str] = ","


# =============================================================================
# MODEL
# =============================================================================


class ConverterOptions(BaseModel):
    """
    Параметры форматирования.

    precision - минимальное число дробных цифр (дополняется нулями, без округления)
    group_separator - разделитель групп разрядов, например 100 000 000
    decimal_separator - десятичный разделитель, например 100,99
    """

    precision: int = Field(default=DEFAULT_PRECISION, ge=0, description="Минимум дробных цифр")
    group_separator: str = Field(
        default=DEFAULT_GROUP_SEPARATOR,
        alias="groupSeparator",
        description="Разделитель групп разрядов",
    )
    decimal_separator: str = Field(
        default=DEFAULT_DECIMAL_SEPARATOR,
        alias="decimalSeparator",
        description="Десятичный разделитель",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid", strict=True)

    @field_validator("group_separator", "decimal_separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Один символ, не цифра, не знак минус и не управляющий (пробелы, включая NBSP, допустимы)"""
        if len(v) != 1:
            raise ValueError(f"separator must be a single character, got {v!r}")
        if v in "0123456789":
            raise ValueError(f"separator must not be a digit, got {v!r}")
        if v == NEGATIVE_SIGN:
            raise ValueError("separator must not be the negative sign '-'")
        if unicodedata.category(v).startswith("C"):
            raise ValueError(f"separator must not be a control or format character, got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_distinct_separators(self) -> "ConverterOptions":
        """Разделители не могут совпадать: вывод стал бы неоднозначным"""
        if self.group_separator == self.decimal_separator:
            raise ValueError(
                f"group_separator and decimal_separator must differ, "
                f"both are {self.group_separator!r}"
            )
        return self


# =============================================================================
# MERGE
# =============================================================================


def _to_field_names(raw: Mapping[str, Any]) -> dict[str, Any]:
    """camelCase алиасы -> имена полей, чтобы overrides не дублировали ключи"""
    aliases = {
        field.alias: name
        for name, field in ConverterOptions.model_fields.items()
        if field.alias
    }
    return {aliases.get(key, key): value for key, value in raw.items()}


def resolve_options(
    options: "ConverterOptions | Mapping[str, Any] | None" = None,
    **overrides: Any,
) -> ConverterOptions:
    """
    Слияние частичной конфигурации с defaults и валидация.

    Args:
        options: Готовые ConverterOptions, mapping (snake_case или camelCase ключи) или None
        **overrides: Поля, переопределяющие options

    Returns:
        Провалидированные ConverterOptions

    Raises:
        ConverterConfigurationError: Если итоговая конфигурация невалидна
        TypeError: Если options не ConverterOptions, не mapping и не None

    Examples:
        >>> resolve_options({"groupSeparator": "."}, precision=3).group_separator
        '.'
    """
    if isinstance(options, ConverterOptions):
        if not overrides:
            return options
        merged: dict[str, Any] = options.model_dump()
    elif options is None:
        merged = {}
    elif not isinstance(options, Mapping):
        raise TypeError(f"options must be ConverterOptions or a mapping, got {type(options).__name__}")
    else:
        merged = _to_field_names(options)

    merged.update(_to_field_names(overrides))

    try:
        return ConverterOptions.model_validate(merged)
    except ValidationError as e:
        raise ConverterConfigurationError(f"Invalid converter options: {e}") from e
