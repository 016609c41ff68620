"""
Factors — НОД и НОК для целых чисел

Модуль содержит вспомогательные целочисленные примитивы, на которых строится
каноническая форма Fraction:
- greatest_common_factor: НОД через двоичное ускорение и пробное деление
- least_common_multiple: НОК через НОД (общий знаменатель для +, -, сравнений)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Оба аргумента строго положительные (иначе ValueError)
2. Результат детерминирован и не зависит от порядка аргументов
3. Аргументы не модифицируются (функции чистые)
"""


def _require_positive(a: int, b: int, name: str) -> None:
    if a <= 0 or b <= 0:
        raise ValueError(f"{name} requires positive arguments, got ({a}, {b})")


# =============================================================================
# НОД
# =============================================================================


def greatest_common_factor(a: int, b: int) -> int:
    """
    Наибольший общий делитель двух положительных чисел.

    Алгоритм:
        1. Снимаем общие множители 2 сдвигом, пока (a | b) чётное
        2. Пробное деление на нечётные f = 3, 5, 7, ... пока f*f <= min(a, b)
        3. Остаток: если большее кратно меньшему, меньшее и есть остаток НОД.
           Иначе проверка повторяется на (меньшее, большее % меньшее), так как
           общий множитель больше sqrt(min) пробным делением не найден.

    Args:
        a: Положительное целое
        b: Положительное целое

    Returns:
        НОД(a, b) >= 1

    Raises:
        ValueError: Если a <= 0 или b <= 0

    Examples:
        >>> greatest_common_factor(12, 18)
        6
        >>> greatest_common_factor(21, 35)
        7
        >>> greatest_common_factor(7, 16)
        1
    """
    _require_positive(a, b, "greatest_common_factor")

    result = 1

    # Общие множители 2
    while ((a | b) & 1) == 0:
        a >>= 1
        b >>= 1
        result <<= 1

    # Нечётные множители >= 3
    factor = 3
    while factor * factor <= min(a, b):
        while a % factor == 0 and b % factor == 0:
            a //= factor
            b //= factor
            result *= factor
        factor += 2

    # Одна проверка кратности, как в исходном алгоритме; цикл продолжается
    # только когда она не проходит (общий множитель > sqrt(min))
    low = min(a, b)
    high = max(a, b)
    while high % low != 0:
        high, low = low, high % low

    return result * low


# =============================================================================
# НОК
# =============================================================================


def least_common_multiple(a: int, b: int) -> int:
    """
    Наименьшее общее кратное двух положительных чисел.

    Формула: lcm(a, b) = (a / gcd(a, b)) * b

    Деление выполняется до умножения, чтобы промежуточное значение
    не превышало результат.

    Raises:
        ValueError: Если a <= 0 или b <= 0
    """
    _require_positive(a, b, "least_common_multiple")

    factor = greatest_common_factor(a, b)
    return (a // factor) * b
