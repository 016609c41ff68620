"""Demo Driver — печать примеров вычислений над Fraction.

Для каждой пары (a, b) выводит:
- a * b, a / b, a + b, a - b
- a == b, a < b
- пустую строку-разделитель

Деление на нулевую дробь не прерывает прогон: строка содержит <error: ...>.
"""

import logging
from dataclasses import dataclass
from typing import Final

from src.core.domain.fraction import Fraction, try_divide

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================

# Пары (numerator, denominator) из исходной демонстрации
DEFAULT_PAIRS: Final[tuple[tuple[tuple[int, int], tuple[int, int]], ...]] = (
    ((1, 2), (1, 2)),
    ((1, 2), (1, 3)),
    ((3, 12), (3, 8)),
    ((7, 16), (3, 8)),
)


@dataclass(frozen=True)
class DemoConfig:
    """Конфигурация демонстрации.

    pairs: последовательность пар ((n1, d1), (n2, d2)); каждая пара
    превращается в два Fraction через обычный конструктор.
    """

    pairs: tuple[tuple[tuple[int, int], tuple[int, int]], ...] = DEFAULT_PAIRS
    log_level: int = logging.WARNING


# =============================================================================
# RENDERING
# =============================================================================


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def render_pair(a: Fraction, b: Fraction) -> list[str]:
    """Строки вывода для одной пары дробей (включая пустой разделитель)."""
    quotient = try_divide(a, b)
    quotient_text = str(quotient.value) if quotient.ok else f"<error: {quotient.error}>"

    return [
        f"{a} * {b} => {a * b}",
        f"{a} / {b} => {quotient_text}",
        f"{a} + {b} => {a + b}",
        f"{a} - {b} => {a - b}",
        f"{a} == {b} => {_bool_text(a == b)}",
        f"{a} < {b} => {_bool_text(a < b)}",
        "",
    ]


def run_demo(config: DemoConfig | None = None) -> list[str]:
    """Полный вывод демонстрации по config.pairs."""
    config = config or DemoConfig()

    lines: list[str] = []
    for (n1, d1), (n2, d2) in config.pairs:
        logger.debug("rendering pair (%d/%d, %d/%d)", n1, d1, n2, d2)
        lines.extend(render_pair(Fraction(n1, d1), Fraction(n2, d2)))
    return lines


def main(config: DemoConfig | None = None) -> None:
    """Точка входа: python -m src.demo"""
    config = config or DemoConfig()
    logging.basicConfig(level=config.log_level)

    for line in run_demo(config):
        print(line)
