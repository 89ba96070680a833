"""
Integer Safeguards — целочисленные примитивы календарной арифметики

Модуль обеспечивает тотальность всех календарных операций:
- Clamp целых значений в диапазон вместо отказа
- Проверка принадлежности диапазону без исключений
- Деление с усечением к нулю (для симметричных "видов" одной величины)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не выбрасывает исключение на целочисленном входе
2. Оператор // в Python — floor-деление; trunc_div используется только там,
   где требуется усечение к нулю
3. Все операции детерминированы и воспроизводимы
"""


# =============================================================================
# CLAMP И ПРОВЕРКА ДИАПАЗОНА
# =============================================================================


def clamp_int(value: int, min_value: int, max_value: int) -> int:
    """
    Ограничение целого значения диапазоном [min_value, max_value].

    Args:
        value: Исходное значение
        min_value: Нижняя граница (включительно)
        max_value: Верхняя граница (включительно)

    Returns:
        Значение, ограниченное диапазоном

    Examples:
        >>> clamp_int(5, 1, 12)
        5
        >>> clamp_int(-3, 1, 12)
        1
        >>> clamp_int(40, 1, 31)
        31
    """
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def is_in_range(value: int, min_value: int, max_value: int) -> bool:
    """Проверка min_value <= value <= max_value (без исключений)."""
    return min_value <= value <= max_value


def is_plain_int(value: object) -> bool:
    """
    Является ли значение целым числом, но не bool.

    Examples:
        >>> is_plain_int(5)
        True
        >>> is_plain_int(True)
        False
        >>> is_plain_int(5.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def trunc_div(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    В отличие от //, результат симметричен относительно знака:
    trunc_div(-a, b) == -trunc_div(a, b).

    Args:
        numerator: Делимое
        denominator: Делитель (ненулевой, всегда константа единицы времени)

    Returns:
        Частное, усечённое к нулю

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
        >>> -7 // 2
        -4
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient
