"""
Rate Conversion — дискретная ↔ непрерывная ставка

Эквивалентность ставок:
    i = e^r - 1      (эффективная дискретная ставка из номинальной непрерывной)
    r = ln(1 + i)    (номинальная непрерывная ставка из эффективной дискретной)

При r = ln(1+i) непрерывные факторы совпадают с дискретными
(например, (A/F, r, n) == (A/F, i, n)).
"""

from typing import Final

import numpy as np

from src.econ.math.numerical_safeguards import ieee_arithmetic, ieee_result, to_ieee

# Порог переключения между log1p(i) и log(1 + i)
# Если |i| < LOG1P_SWITCH_THRESHOLD → log1p(i)
LOG1P_SWITCH_THRESHOLD: Final[float] = 0.01


def effective_rate_from_nominal(r: float) -> float:
    """
    Эффективная дискретная ставка за период: e^r - 1.

    Вычисляется через expm1 для точности при малых r.

    Examples:
        >>> effective_rate_from_nominal(0.0)
        0.0
    """
    with ieee_arithmetic():
        return ieee_result(np.expm1(to_ieee(r)))


def nominal_rate_from_effective(i: float) -> float:
    """
    Номинальная непрерывная ставка за период: ln(1 + i).

    - Если |i| < LOG1P_SWITCH_THRESHOLD → log1p(i)
    - Иначе → log(1 + i)

    Домен не проверяется: i = -1 даёт -inf, i < -1 даёт nan.

    Args:
        i: Эффективная дискретная ставка за период

    Returns:
        Эквивалентная номинальная непрерывная ставка r

    Examples:
        >>> nominal_rate_from_effective(0.0)
        0.0
    """
    with ieee_arithmetic():
        rate = to_ieee(i)
        if abs(i) < LOG1P_SWITCH_THRESHOLD:
            return ieee_result(np.log1p(rate))
        return ieee_result(np.log(rate + 1.0))
