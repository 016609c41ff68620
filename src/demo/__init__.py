"""Demo — демонстрационный вывод операций над Fraction.

Внешний потребитель core: вызывает только публичные операции Fraction
и форматирует результаты как текст.
"""

from .driver import (
    DEFAULT_PAIRS,
    DemoConfig,
    main,
    render_pair,
    run_demo,
)

__all__ = [
    "DEFAULT_PAIRS",
    "DemoConfig",
    "main",
    "render_pair",
    "run_demo",
]
