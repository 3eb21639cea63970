"""
Group separators — вставка и удаление разделителей групп разрядов.

Группы всегда по 3 цифры, считая от младшего разряда:
    1234567 -> 1 234 567
"""

import re
from typing import Final

GROUP_SIZE: Final[int] = 3


def build_group_separator_pattern(group_separator: str) -> re.Pattern[str]:
    """Скомпилированный паттерн, находящий все вхождения group_separator."""
    return re.compile(re.escape(group_separator))


def strip_group_separators(value: str, pattern: re.Pattern[str]) -> str:
    """Удаляет все разделители групп, найденные паттерном."""
    return pattern.sub("", value)


def insert_group_separators(digits: str, group_separator: str) -> str:
    """
    Вставка разделителя групп каждые 3 цифры справа налево.

    Ведущий разделитель никогда не добавляется.

    Args:
        digits: Строка ASCII цифр без знака (может быть пустой)
        group_separator: Разделитель групп

    Returns:
        Сгруппированная строка

    Examples:
        >>> insert_group_separators("123", " ")
        '123'
        >>> insert_group_separators("123456", " ")
        '123 456'
        >>> insert_group_separators("1234567", " ")
        '1 234 567'
    """
    head_len = len(digits) % GROUP_SIZE or GROUP_SIZE
    groups = [digits[:head_len]]
    groups.extend(
        digits[start:start + GROUP_SIZE]
        for start in range(head_len, len(digits), GROUP_SIZE)
    )
    return group_separator.join(groups)
