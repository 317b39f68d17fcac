"""
Short Factor Aliases — короткие имена в textbook-нотации

Тонкие обёртки над каноническими функциями: fp(i, n) ≡ (F/P, i, n) и т.д.
Формулы здесь не дублируются — только делегирование.
"""

from src.econ.factors.continuous import (
    continuous_compounding_capital_recovery,
    continuous_compounding_series_compound_amount,
    continuous_compounding_series_present_worth,
    continuous_compounding_sinking_fund,
)
from src.econ.factors.discrete import (
    arithmetic_gradient_present_worth,
    arithmetic_gradient_to_uniform_series,
    geometric_series_present_worth,
    single_payment_compound_amount,
    single_payment_present_worth,
    uniform_series_capital_recovery,
    uniform_series_compound_amount,
    uniform_series_present_worth,
    uniform_series_sinking_fund,
)


# =============================================================================
# DISCRETE
# =============================================================================


def fp(i: float, n: int) -> float:
    """(F/P, i, n): см. single_payment_compound_amount."""
    return single_payment_compound_amount(i, n)


def pf(i: float, n: int) -> float:
    """(P/F, i, n): см. single_payment_present_worth."""
    return single_payment_present_worth(i, n)


def af(i: float, n: int) -> float:
    """(A/F, i, n): см. uniform_series_sinking_fund."""
    return uniform_series_sinking_fund(i, n)


def fa(i: float, n: int) -> float:
    """(F/A, i, n): см. uniform_series_compound_amount."""
    return uniform_series_compound_amount(i, n)


def ap(i: float, n: int) -> float:
    """(A/P, i, n): см. uniform_series_capital_recovery."""
    return uniform_series_capital_recovery(i, n)


def pa(i: float, n: int) -> float:
    """(P/A, i, n): см. uniform_series_present_worth."""
    return uniform_series_present_worth(i, n)


def pg(i: float, n: int) -> float:
    """(P/G, i, n): см. arithmetic_gradient_present_worth."""
    return arithmetic_gradient_present_worth(i, n)


def ag(i: float, n: int) -> float:
    """(A/G, i, n): см. arithmetic_gradient_to_uniform_series."""
    return arithmetic_gradient_to_uniform_series(i, n)


def pa_geo(g: float, i: float, n: int) -> float:
    """(P/A, g, i, n): см. geometric_series_present_worth."""
    return geometric_series_present_worth(g, i, n)


# =============================================================================
# CONTINUOUS
# =============================================================================


def af_cont(r: float, n: int) -> float:
    """(A/F, r, n): см. continuous_compounding_sinking_fund."""
    return continuous_compounding_sinking_fund(r, n)


def ap_cont(r: float, n: int) -> float:
    """(A/P, r, n): см. continuous_compounding_capital_recovery."""
    return continuous_compounding_capital_recovery(r, n)


def fa_cont(r: float, n: int) -> float:
    """(F/A, r, n): см. continuous_compounding_series_compound_amount."""
    return continuous_compounding_series_compound_amount(r, n)


def pa_cont(r: float, n: int) -> float:
    """(P/A, r, n): см. continuous_compounding_series_present_worth."""
    return continuous_compounding_series_present_worth(r, n)
