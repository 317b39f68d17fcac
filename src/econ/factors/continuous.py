"""
Continuous Compounding Factors — факторы непрерывного начисления

Номинальная ставка r за период начисляется непрерывно; эквивалентная
дискретная ставка равна e^r - 1 (см. rates.effective_rate_from_nominal).

ИНВАРИАНТЫ:
1. Замкнутые формулы через e^r и e^(r*n)
2. Переполнение e^(r*n) даёт inf, а не OverflowError
3. r = 0 даёт nan/inf по IEEE-754
"""

import numpy as np

from src.econ.math.numerical_safeguards import ieee_arithmetic, ieee_result, to_ieee


def _exp_growth(r: float, n: int) -> np.float64:
    """e^(r*n) как numpy.float64. Вызывать внутри ieee_arithmetic()."""
    return np.exp(to_ieee(r) * n)


def _exp_rate(r: float) -> np.float64:
    return np.exp(to_ieee(r))


def continuous_compounding_sinking_fund(r: float, n: int) -> float:
    """
    Continuous Compounding Sinking Fund Factor (A/F, r, n).

    Формула: (e^r - 1) / (e^(r*n) - 1)
    """
    with ieee_arithmetic():
        return ieee_result((_exp_rate(r) - 1.0) / (_exp_growth(r, n) - 1.0))


def continuous_compounding_capital_recovery(r: float, n: int) -> float:
    """
    Continuous Compounding Capital Recovery Factor (A/P, r, n).

    Формула: e^(r*n) * (e^r - 1) / (e^(r*n) - 1)
    """
    with ieee_arithmetic():
        growth = _exp_growth(r, n)
        return ieee_result(growth * (_exp_rate(r) - 1.0) / (growth - 1.0))


def continuous_compounding_series_compound_amount(r: float, n: int) -> float:
    """
    Continuous Compounding Series Compound Amount Factor (F/A, r, n).

    Формула: (e^(r*n) - 1) / (e^r - 1)
    """
    with ieee_arithmetic():
        return ieee_result((_exp_growth(r, n) - 1.0) / (_exp_rate(r) - 1.0))


def continuous_compounding_series_present_worth(r: float, n: int) -> float:
    """
    Continuous Compounding Series Present Worth Factor (P/A, r, n).

    Формула: (e^(r*n) - 1) / (e^(r*n) * (e^r - 1))
    """
    with ieee_arithmetic():
        growth = _exp_growth(r, n)
        return ieee_result((growth - 1.0) / (growth * (_exp_rate(r) - 1.0)))
