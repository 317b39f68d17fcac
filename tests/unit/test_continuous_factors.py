"""
Тесты для Continuous Compounding Factors и Rate Conversion

Проверяемые инварианты:
1. Формулы через e^r и e^(r*n)
2. Сходимость к дискретным факторам при r = ln(1+i)
3. IEEE-754 семантика при r = 0 и переполнении
4. Корректность конверсии ставок (expm1/log1p)
"""

import math

import pytest

from src.econ.factors.continuous import (
    continuous_compounding_capital_recovery,
    continuous_compounding_series_compound_amount,
    continuous_compounding_series_present_worth,
    continuous_compounding_sinking_fund,
)
from src.econ.factors.discrete import (
    uniform_series_capital_recovery,
    uniform_series_compound_amount,
    uniform_series_present_worth,
    uniform_series_sinking_fund,
)
from src.econ.factors.rates import (
    LOG1P_SWITCH_THRESHOLD,
    effective_rate_from_nominal,
    nominal_rate_from_effective,
)

CONTINUOUS_FACTORS = [
    continuous_compounding_sinking_fund,
    continuous_compounding_capital_recovery,
    continuous_compounding_series_compound_amount,
    continuous_compounding_series_present_worth,
]


# =============================================================================
# ТЕСТЫ: Формулы
# =============================================================================


class TestContinuousFormulas:
    """Сверка с формулами для r = 10%, n = 5."""

    def test_series_compound_amount(self):
        expected = (math.exp(0.5) - 1) / (math.exp(0.1) - 1)
        result = continuous_compounding_series_compound_amount(0.10, 5)
        assert result == pytest.approx(expected, rel=1e-12)
        assert result == pytest.approx(6.1683, abs=1e-3)

    def test_sinking_fund(self):
        expected = (math.exp(0.1) - 1) / (math.exp(0.5) - 1)
        assert continuous_compounding_sinking_fund(0.10, 5) == pytest.approx(expected, rel=1e-12)

    def test_capital_recovery(self):
        expected = math.exp(0.5) * (math.exp(0.1) - 1) / (math.exp(0.5) - 1)
        assert continuous_compounding_capital_recovery(0.10, 5) == pytest.approx(
            expected, rel=1e-12
        )

    def test_series_present_worth(self):
        expected = (math.exp(0.5) - 1) / (math.exp(0.5) * (math.exp(0.1) - 1))
        assert continuous_compounding_series_present_worth(0.10, 5) == pytest.approx(
            expected, rel=1e-12
        )

    @pytest.mark.parametrize("r", [0.02, 0.10, 0.30])
    @pytest.mark.parametrize("n", [1, 5, 20])
    def test_reciprocal_pairs(self, r, n):
        af = continuous_compounding_sinking_fund(r, n)
        fa = continuous_compounding_series_compound_amount(r, n)
        ap = continuous_compounding_capital_recovery(r, n)
        pa = continuous_compounding_series_present_worth(r, n)
        assert af == pytest.approx(1.0 / fa, rel=1e-12)
        assert ap == pytest.approx(1.0 / pa, rel=1e-12)


# =============================================================================
# ТЕСТЫ: Сходимость к дискретным факторам
# =============================================================================


class TestMatchedRates:
    """При r = ln(1+i) непрерывные факторы совпадают с дискретными."""

    @pytest.mark.parametrize("i", [0.005, 0.01, 0.05, 0.08, 0.20])
    @pytest.mark.parametrize("n", [1, 3, 10, 40])
    def test_sinking_fund_matches_discrete(self, i, n):
        r = nominal_rate_from_effective(i)
        assert continuous_compounding_sinking_fund(r, n) == pytest.approx(
            uniform_series_sinking_fund(i, n), rel=1e-9
        )

    @pytest.mark.parametrize("i", [0.01, 0.08, 0.20])
    def test_all_series_factors_match_discrete(self, i):
        n = 12
        r = nominal_rate_from_effective(i)
        assert continuous_compounding_capital_recovery(r, n) == pytest.approx(
            uniform_series_capital_recovery(i, n), rel=1e-9
        )
        assert continuous_compounding_series_compound_amount(r, n) == pytest.approx(
            uniform_series_compound_amount(i, n), rel=1e-9
        )
        assert continuous_compounding_series_present_worth(r, n) == pytest.approx(
            uniform_series_present_worth(i, n), rel=1e-9
        )

    def test_convergence_as_rate_approaches_matched(self):
        """Ошибка уменьшается при r → ln(1+i)."""
        i, n = 0.08, 10
        target = uniform_series_sinking_fund(i, n)
        r_matched = math.log1p(i)
        errors = [
            abs(continuous_compounding_sinking_fund(r_matched + delta, n) - target)
            for delta in (1e-2, 1e-4, 1e-6)
        ]
        assert errors[0] > errors[1] > errors[2]
        assert errors[2] < 1e-6


# =============================================================================
# ТЕСТЫ: IEEE-754
# =============================================================================


class TestContinuousBoundaries:
    """r = 0, переполнение e^(r*n)."""

    @pytest.mark.parametrize("factor", CONTINUOUS_FACTORS)
    def test_zero_rate_is_nan(self, factor):
        assert math.isnan(factor(0.0, 5))

    def test_overflow(self):
        """e^(r*n) → inf без OverflowError."""
        assert math.isinf(continuous_compounding_series_compound_amount(0.10, 10_000))
        assert continuous_compounding_sinking_fund(0.10, 10_000) == 0.0

    def test_zero_periods(self):
        assert math.isinf(continuous_compounding_sinking_fund(0.10, 0))
        assert continuous_compounding_series_compound_amount(0.10, 0) == 0.0

    @pytest.mark.parametrize("factor", CONTINUOUS_FACTORS)
    def test_repeat_calls_identical(self, factor):
        assert factor(0.0625, 9) == factor(0.0625, 9)


# =============================================================================
# ТЕСТЫ: Конверсия ставок
# =============================================================================


class TestRateConversion:
    """effective_rate_from_nominal / nominal_rate_from_effective."""

    def test_zero(self):
        assert effective_rate_from_nominal(0.0) == 0.0
        assert nominal_rate_from_effective(0.0) == 0.0

    def test_known_values(self):
        assert effective_rate_from_nominal(0.10) == pytest.approx(math.exp(0.10) - 1, rel=1e-14)
        assert nominal_rate_from_effective(0.10) == pytest.approx(math.log(1.10), rel=1e-14)

    def test_small_rate_uses_log1p(self):
        i = LOG1P_SWITCH_THRESHOLD / 10
        assert nominal_rate_from_effective(i) == pytest.approx(math.log1p(i), rel=1e-14)

    def test_tiny_rate_precision(self):
        """expm1/log1p не теряют точность для малых ставок."""
        assert effective_rate_from_nominal(1e-12) == pytest.approx(1e-12, rel=1e-9)
        assert nominal_rate_from_effective(1e-12) == pytest.approx(1e-12, rel=1e-9)

    @pytest.mark.parametrize("i", [0.001, 0.05, 0.5, 2.0])
    def test_roundtrip(self, i):
        assert effective_rate_from_nominal(nominal_rate_from_effective(i)) == pytest.approx(
            i, rel=1e-12
        )

    def test_domain_not_checked(self):
        """i = -1 → -inf, i < -1 → nan, без exceptions."""
        assert nominal_rate_from_effective(-1.0) == -math.inf
        assert math.isnan(nominal_rate_from_effective(-2.0))
