"""
Numerical Safeguards — IEEE-754 арифметика и epsilon-сравнения

Модуль обеспечивает единые правила работы с float для всех факторов:
- Арифметика по IEEE-754: деление на ноль → inf/nan, переполнение → inf
- Никаких Python exceptions для вырожденных входов (ZeroDivisionError,
  OverflowError подавляются переходом на numpy.float64)
- Epsilon-сравнения float для проверки тождеств

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf НЕ санитизируются — они пропагируют к вызывающему коду
2. Факторы не валидируют входы (i = 0, n = 0 допустимы)
3. Все операции детерминированы и воспроизводимы
"""

import math
from contextlib import contextmanager
from typing import Final, Iterator

import numpy as np

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения факторов
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения факторов
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# IEEE-754 АРИФМЕТИКА
# =============================================================================


@contextmanager
def ieee_arithmetic() -> Iterator[None]:
    """
    Контекст, в котором numpy не сообщает о floating-point ошибках.

    Внутри контекста деление на ноль, переполнение и invalid-операции
    молча возвращают inf/nan (без RuntimeWarning).

    Examples:
        >>> with ieee_arithmetic():
        ...     float(to_ieee(1.0) / to_ieee(0.0))
        inf
    """
    with np.errstate(all="ignore"):
        yield


def to_ieee(value: float) -> np.float64:
    """
    Приведение скаляра к numpy.float64.

    Python float бросает ZeroDivisionError при делении на 0.0 и
    OverflowError при переполнении в **; numpy.float64 следует IEEE-754.

    Args:
        value: int или float

    Returns:
        numpy.float64 с тем же значением
    """
    return np.float64(value)


def ieee_result(value: np.float64) -> float:
    """
    Обратное приведение результата к Python float.

    Args:
        value: Результат вычисления (numpy.float64)

    Returns:
        float (inf/nan сохраняются как есть)
    """
    return float(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    NaN никогда не близок ни к чему (включая NaN).

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(float("nan"), float("nan"))
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def compare_with_tolerance(
    a: float,
    b: float,
    tol: float = EPS_FLOAT_COMPARE_ABS,
) -> int:
    """
    Сравнение двух float с учётом толерантности.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        -1 если a < b (с учётом tol)
         0 если a ≈ b (в пределах tol)
        +1 если a > b (с учётом tol)

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(2.0, 1.0)
        1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-13)
        0
    """
    diff = a - b

    if abs(diff) <= tol:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1
