"""
Numeric Text Errors — таксономия ошибок конвертера

Ошибки возникают только при конструировании конвертера и при форматировании
невалидных чисел. parse() никогда не бросает исключений: невалидный ввод
отображается в math.nan.
"""


class NumericTextError(Exception):
    """Базовая ошибка конвертера числа в текст."""

    pass


class ConverterConfigurationError(NumericTextError, ValueError):
    """
    Невалидная конфигурация конвертера.

    Возникает при создании конвертера, например если group_separator
    совпадает с decimal_separator (результат был бы неоднозначным).
    """

    pass


class NonFiniteValueError(NumericTextError, ValueError):
    """format() получил NaN или ±Inf: текстового представления нет."""

    pass
