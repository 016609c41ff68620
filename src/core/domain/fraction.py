"""
Fraction — Рациональное число в канонической форме

Immutable Pydantic модель рационального числа numerator/denominator.
Каждый экземпляр хранится в несократимом виде, поэтому равенство
значений совпадает с равенством полей.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0
2. gcd(|numerator|, denominator) == 1
3. Ноль представлен строго как 0/1
4. Любая арифметика возвращает новый экземпляр через конструктор (1-3)

Деление на ноль → FractionDivisionByZero (подкласс ZeroDivisionError).
Без исключений: try_construct / try_divide → FractionResult.
"""

import logging
from dataclasses import dataclass
from typing import Any, Final, Mapping

from pydantic import BaseModel, Field

from src.core.math.factors import greatest_common_factor, least_common_multiple

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Нечётный множитель для hash: numerator * K + denominator
HASH_MULTIPLIER: Final[int] = 1000003


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FractionDivisionByZero(ZeroDivisionError):
    """
    Знаменатель после нормализации равен нулю.

    Возникает только в конструкторе: при явном denominator == 0
    или при делении на дробь с нулевым числителем.
    """
    pass


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def _require_int(value: object, name: str) -> None:
    # bool — подкласс int, но не допустимое значение поля
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")


def normalize(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Приведение пары (numerator, denominator) к канонической форме.

    Алгоритм:
        1. denominator < 0 → меняем знак обоих полей
        2. denominator == 0 → FractionDivisionByZero
        3. numerator != 0 → делим оба поля на gcd(|numerator|, denominator)
        4. numerator == 0 → denominator = 1

    Raises:
        TypeError: Если аргументы не int
        FractionDivisionByZero: Если denominator == 0

    Examples:
        >>> normalize(3, 12)
        (1, 4)
        >>> normalize(2, -4)
        (-1, 2)
        >>> normalize(0, -7)
        (0, 1)
    """
    _require_int(numerator, "numerator")
    _require_int(denominator, "denominator")

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator
    elif denominator == 0:
        raise FractionDivisionByZero(
            f"denominator must be non-zero (numerator={numerator})"
        )

    if numerator == 0:
        return 0, 1

    factor = greatest_common_factor(abs(numerator), denominator)
    return numerator // factor, denominator // factor


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Рациональное число в несократимой форме.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    Конструктор принимает произвольную пару целых и нормализует её.

    Examples:
        >>> str(Fraction(3, 12) + Fraction(3, 8))
        '5/8'
        >>> str(Fraction(0, 5))
        '0'
    """

    numerator: int = Field(..., description="Числитель (знак дроби)")
    denominator: int = Field(..., gt=0, description="Знаменатель (всегда > 0)")

    model_config = {"frozen": True, "strict": True}  # Immutable

    def __init__(self, numerator: int, denominator: int) -> None:
        numerator, denominator = normalize(numerator, denominator)
        super().__init__(numerator=numerator, denominator=denominator)

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> "Fraction":
        """
        Копия с изменёнными полями.

        update проходит через конструктор, поэтому результат нормализован
        (denominator == 0 → FractionDivisionByZero).
        """
        if not update:
            return self
        return Fraction(
            update.get("numerator", self.numerator),
            update.get("denominator", self.denominator),
        )

    @classmethod
    def zero(cls) -> "Fraction":
        """Канонический ноль 0/1 (без прохода через нормализацию)."""
        return ZERO

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __mul__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return Fraction(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def __truediv__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return Fraction(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        )

    def __add__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return _add(self.numerator, self.denominator, other.numerator, other.denominator)

    def __sub__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return _add(self.numerator, self.denominator, -other.numerator, other.denominator)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return equals(self, other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return not equals(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return compare(self, other) >= 0

    def __hash__(self) -> int:
        return self.numerator * HASH_MULTIPLIER + self.denominator

    def __str__(self) -> str:
        return to_display(self)


# Канонический ноль; model_construct не вызывает __init__ и нормализацию
ZERO: Final[Fraction] = Fraction.model_construct(numerator=0, denominator=1)


def _add(n1: int, d1: int, n2: int, d2: int) -> Fraction:
    d = least_common_multiple(d1, d2)
    n1 *= d // d1
    n2 *= d // d2
    return Fraction(n1 + n2, d)


# =============================================================================
# ЯВНЫЕ ОПЕРАЦИИ
# =============================================================================


def equals(a: Fraction, b: Fraction) -> bool:
    """
    Структурное равенство: совпадение numerator и denominator.

    Корректно только благодаря канонической форме: равные значения
    всегда имеют одинаковое представление.
    """
    return a.numerator == b.numerator and a.denominator == b.denominator


def compare(a: Fraction, b: Fraction) -> int:
    """
    Трёхстороннее сравнение через общий знаменатель.

    Алгоритм:
        d = lcm(a.denominator, b.denominator)
        diff = a.numerator * (d / a.denominator) - b.numerator * (d / b.denominator)

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b
    """
    d = least_common_multiple(a.denominator, b.denominator)
    diff = a.numerator * (d // a.denominator) - b.numerator * (d // b.denominator)

    if diff < 0:
        return -1
    elif diff > 0:
        return 1
    return 0


def to_display(f: Fraction) -> str:
    """
    Строковое представление: "n" если denominator == 1, иначе "n/d".

    Examples:
        >>> to_display(Fraction(-6, 3))
        '-2'
        >>> to_display(Fraction(7, -16))
        '-7/16'
    """
    if f.denominator == 1:
        return str(f.numerator)
    return f"{f.numerator}/{f.denominator}"


# =============================================================================
# RESULT (без исключений)
# =============================================================================


@dataclass(frozen=True)
class FractionResult:
    """Результат построения дроби без исключений."""

    ok: bool
    value: Fraction | None
    error: str


def try_construct(numerator: int, denominator: int) -> FractionResult:
    """
    Построение дроби с явным сигналом ошибки вместо исключения.

    TypeError по-прежнему пробрасывается: это ошибка вызывающего кода,
    а не значения.

    Returns:
        FractionResult(ok=True, value=Fraction, error="")
        или FractionResult(ok=False, value=None, error=<причина>)
    """
    try:
        value = Fraction(numerator, denominator)
    except FractionDivisionByZero as e:
        logger.debug("try_construct(%r, %r) failed: %s", numerator, denominator, e)
        return FractionResult(ok=False, value=None, error=str(e))
    return FractionResult(ok=True, value=value, error="")


def try_divide(a: Fraction, b: Fraction) -> FractionResult:
    """Деление a / b с явным сигналом деления на ноль."""
    return try_construct(a.numerator * b.denominator, a.denominator * b.numerator)
