"""
Тесты для модуля Factors (НОД / НОК)

Проверяет:
1. Корректность НОД на чётных, нечётных и взаимно простых парах
2. Общие множители больше sqrt(min), не найденные пробным делением
3. Симметрию и соответствие math.gcd
4. НОК и его связь с НОД
5. Явную проверку предусловий (ValueError)
"""

import math

import pytest

from src.core.math.factors import greatest_common_factor, least_common_multiple


# =============================================================================
# ТЕСТЫ НОД
# =============================================================================


class TestGreatestCommonFactor:
    """Тесты для greatest_common_factor"""

    def test_powers_of_two(self) -> None:
        """Общие степени 2 снимаются сдвигом"""
        assert greatest_common_factor(8, 16) == 8
        assert greatest_common_factor(4, 6) == 2
        assert greatest_common_factor(1024, 96) == 32

    def test_odd_factors(self) -> None:
        """Нечётные множители находятся пробным делением"""
        assert greatest_common_factor(9, 15) == 3
        assert greatest_common_factor(3, 12) == 3
        assert greatest_common_factor(25, 35) == 5

    def test_coprime(self) -> None:
        """Взаимно простые числа → 1"""
        assert greatest_common_factor(7, 16) == 1
        assert greatest_common_factor(1, 2) == 1
        assert greatest_common_factor(17, 19) == 1

    def test_one_divides_other(self) -> None:
        """Одно число кратно другому → меньшее"""
        assert greatest_common_factor(3, 9) == 3
        assert greatest_common_factor(13, 26) == 13
        assert greatest_common_factor(5, 5) == 5
        assert greatest_common_factor(1, 1) == 1

    def test_shared_factor_above_trial_bound(self) -> None:
        """Общий множитель больше sqrt(min) после пробного деления"""
        # 21 = 3 * 7, 35 = 5 * 7: 7 > sqrt(21)
        assert greatest_common_factor(21, 35) == 7
        # после снятия 2: (6, 9) → 3 > sqrt(6)
        assert greatest_common_factor(12, 18) == 6
        assert greatest_common_factor(2 * 101, 3 * 101) == 101

    def test_symmetric(self) -> None:
        """НОД не зависит от порядка аргументов"""
        for a, b in [(12, 18), (21, 35), (100, 75), (7, 49)]:
            assert greatest_common_factor(a, b) == greatest_common_factor(b, a)

    @pytest.mark.parametrize("a", [1, 2, 6, 15, 21, 36, 97, 210, 1000])
    @pytest.mark.parametrize("b", [1, 3, 8, 14, 35, 45, 99, 360, 1001])
    def test_matches_math_gcd(self, a: int, b: int) -> None:
        """Совпадение с math.gcd на сетке значений"""
        assert greatest_common_factor(a, b) == math.gcd(a, b)

    def test_large_values(self) -> None:
        """Большие значения с большим общим простым множителем"""
        p = 1_000_003
        assert greatest_common_factor(p * 6, p * 35) == p

    @pytest.mark.parametrize("a, b", [(0, 5), (5, 0), (0, 0), (-3, 6), (6, -3)])
    def test_non_positive_raises(self, a: int, b: int) -> None:
        """Неположительные аргументы → ValueError"""
        with pytest.raises(ValueError, match="positive"):
            greatest_common_factor(a, b)


# =============================================================================
# ТЕСТЫ НОК
# =============================================================================


class TestLeastCommonMultiple:
    """Тесты для least_common_multiple"""

    def test_basic(self) -> None:
        """Общий знаменатель для типовых пар"""
        assert least_common_multiple(2, 3) == 6
        assert least_common_multiple(4, 8) == 8
        assert least_common_multiple(16, 8) == 16
        assert least_common_multiple(1, 7) == 7

    def test_product_identity(self) -> None:
        """gcd(a, b) * lcm(a, b) == a * b"""
        for a, b in [(4, 6), (21, 35), (9, 28), (12, 18)]:
            assert greatest_common_factor(a, b) * least_common_multiple(a, b) == a * b

    def test_non_positive_raises(self) -> None:
        """Неположительные аргументы → ValueError"""
        with pytest.raises(ValueError):
            least_common_multiple(0, 4)
        with pytest.raises(ValueError):
            least_common_multiple(4, -2)
