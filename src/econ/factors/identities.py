"""
Factor Identities — диагностика алгебраических тождеств между факторами

Тождества (для i > 0, n ≥ 1):
    (F/P) = 1 / (P/F)
    (A/F) = 1 / (F/A)
    (A/P) = 1 / (P/A)
    (A/P) = (A/F) + i
    (A/F, r, n) = (A/F, i, n)  при r = ln(1+i)

Проверка не бросает исключений: вырожденные входы (i = 0, n = 0) дают
inf/nan в факторах; тождество с нечисловым фактором считается
невыполненным.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional

from src.econ.factors.continuous import continuous_compounding_sinking_fund
from src.econ.factors.discrete import (
    single_payment_compound_amount,
    single_payment_present_worth,
    uniform_series_capital_recovery,
    uniform_series_compound_amount,
    uniform_series_present_worth,
    uniform_series_sinking_fund,
)
from src.econ.factors.rates import nominal_rate_from_effective
from src.econ.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    compare_with_tolerance,
    ieee_arithmetic,
    ieee_result,
    is_close,
    is_valid_float,
    to_ieee,
)


@dataclass(frozen=True)
class IdentityCheckConfig:
    """Толерантности для сравнения факторов."""

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS


class FactorIdentityReport(NamedTuple):
    """Результат проверки тождеств для пары (i, n)."""

    i: float
    n: int
    single_payment_reciprocal: bool  # F/P · P/F = 1
    uniform_series_reciprocal: bool  # A/F · F/A = 1
    capital_recovery_reciprocal: bool  # A/P · P/A = 1
    capital_recovery_equals_sinking_fund_plus_rate: bool  # A/P = A/F + i
    present_worth_not_above_one: bool  # P/F ≤ 1 при i ≥ 0
    continuous_matches_discrete: bool  # A/F,r = A/F при r = ln(1+i)

    @property
    def all_hold(self) -> bool:
        return all(value for value in self[2:])


def _reciprocal(value: float) -> float:
    with ieee_arithmetic():
        return ieee_result(1.0 / to_ieee(value))


def check_factor_identities(
    i: float,
    n: int,
    config: Optional[IdentityCheckConfig] = None,
) -> FactorIdentityReport:
    """
    Проверка тождеств между факторами для заданных i и n.

    Args:
        i: Ставка за период
        n: Число периодов
        config: Толерантности сравнения (default: IdentityCheckConfig())

    Returns:
        FactorIdentityReport

    Examples:
        >>> check_factor_identities(0.10, 5).all_hold
        True
        >>> check_factor_identities(0.0, 5).all_hold
        False
    """
    config = config or IdentityCheckConfig()

    def close(a: float, b: float) -> bool:
        if not (is_valid_float(a) and is_valid_float(b)):
            return False
        return is_close(a, b, rel_tol=config.rel_tol, abs_tol=config.abs_tol)

    fp = single_payment_compound_amount(i, n)
    pf = single_payment_present_worth(i, n)
    af = uniform_series_sinking_fund(i, n)
    fa = uniform_series_compound_amount(i, n)
    ap = uniform_series_capital_recovery(i, n)
    pa = uniform_series_present_worth(i, n)

    af_cont = continuous_compounding_sinking_fund(nominal_rate_from_effective(i), n)

    # При i < 0 дисконтирование увеличивает сумму, P/F > 1 ожидаемо
    pf_bounded = i < 0 or compare_with_tolerance(pf, 1.0, tol=config.abs_tol) <= 0

    return FactorIdentityReport(
        i=i,
        n=n,
        single_payment_reciprocal=close(fp, _reciprocal(pf)),
        uniform_series_reciprocal=close(af, _reciprocal(fa)),
        capital_recovery_reciprocal=close(ap, _reciprocal(pa)),
        capital_recovery_equals_sinking_fund_plus_rate=close(ap, af + i),
        present_worth_not_above_one=pf_bounded,
        continuous_matches_discrete=close(af_cont, af),
    )
