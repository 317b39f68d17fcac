"""
Discrete Compounding Factors — факторы дискретного начисления процентов

Стандартные факторы engineering economics для процентной ставки i за период
и числа периодов n. Каждый фактор — безразмерный множитель, который вызывающий
код умножает на денежную сумму.

Обозначения (стандартная нотация (X/Y, i, n)):
    F/P  single payment compound amount
    P/F  single payment present worth
    A/F  uniform series sinking fund
    F/A  uniform series compound amount
    A/P  uniform series capital recovery
    P/A  uniform series present worth
    P/G  arithmetic gradient present worth
    A/G  arithmetic gradient to uniform series
    P/A,g geometric series present worth

ИНВАРИАНТЫ:
1. Каждый фактор — замкнутая формула, без итераций и приближений
2. Входы не валидируются: i = 0 или n = 0 дают inf/nan по IEEE-754
3. Повторный вызов с теми же входами возвращает bit-identical результат
"""

import numpy as np

from src.econ.math.numerical_safeguards import ieee_arithmetic, ieee_result, to_ieee


def _growth(i: float, n: int) -> np.float64:
    """(1+i)^n как numpy.float64. Вызывать внутри ieee_arithmetic()."""
    return (to_ieee(i) + 1.0) ** n


# =============================================================================
# SINGLE PAYMENT
# =============================================================================


def single_payment_compound_amount(i: float, n: int) -> float:
    """
    Single Payment Compound Amount Factor (F/P, i, n).

    Переносит один платёж на n периодов вперёд.

    Формула: (1+i)^n

    Examples:
        >>> round(single_payment_compound_amount(0.10, 5), 5)
        1.61051
        >>> single_payment_compound_amount(0.10, 0)
        1.0
    """
    with ieee_arithmetic():
        return ieee_result(_growth(i, n))


def single_payment_present_worth(i: float, n: int) -> float:
    """
    Single Payment Present Worth Factor (P/F, i, n).

    Переносит один платёж на n периодов назад.

    Формула: 1 / (1+i)^n
    """
    with ieee_arithmetic():
        return ieee_result(1.0 / _growth(i, n))


# =============================================================================
# UNIFORM SERIES
# =============================================================================


def uniform_series_sinking_fund(i: float, n: int) -> float:
    """
    Uniform Series Sinking Fund Factor (A/F, i, n).

    Раскладывает будущую сумму F в равномерную серию за n предшествующих
    периодов. Последний платёж серии совпадает по времени с F.

    Формула: i / ((1+i)^n - 1)
    """
    with ieee_arithmetic():
        return ieee_result(to_ieee(i) / (_growth(i, n) - 1.0))


def uniform_series_compound_amount(i: float, n: int) -> float:
    """
    Uniform Series Compound Amount Factor (F/A, i, n).

    Сворачивает равномерную серию в одну сумму на момент последнего платежа.

    Формула: ((1+i)^n - 1) / i
    """
    with ieee_arithmetic():
        return ieee_result((_growth(i, n) - 1.0) / to_ieee(i))


def uniform_series_capital_recovery(i: float, n: int) -> float:
    """
    Uniform Series Capital Recovery Factor (A/P, i, n).

    Раскладывает текущую сумму P в равномерную серию за n последующих
    периодов. Первый платёж серии — через один период после P.

    Формула: i * (1+i)^n / ((1+i)^n - 1)
    """
    with ieee_arithmetic():
        growth = _growth(i, n)
        return ieee_result(to_ieee(i) * growth / (growth - 1.0))


def uniform_series_present_worth(i: float, n: int) -> float:
    """
    Uniform Series Present Worth Factor (P/A, i, n).

    Сворачивает равномерную серию в одну сумму за один период до первого
    платежа.

    Формула: ((1+i)^n - 1) / (i * (1+i)^n)

    Examples:
        >>> round(uniform_series_present_worth(0.10, 5), 5)
        3.79079
    """
    with ieee_arithmetic():
        growth = _growth(i, n)
        return ieee_result((growth - 1.0) / (to_ieee(i) * growth))


# =============================================================================
# ARITHMETIC GRADIENT
# =============================================================================


def arithmetic_gradient_present_worth(i: float, n: int) -> float:
    """
    Arithmetic Gradient Present Worth Factor (P/G, i, n).

    Сворачивает арифметический градиент (платёж периода 1 равен 0, далее
    растёт на G за период) в одну сумму за два периода до первого
    ненулевого платежа.

    Формула: ((1+i)^n - i*n - 1) / (i^2 * (1+i)^n)
    """
    with ieee_arithmetic():
        rate = to_ieee(i)
        growth = _growth(i, n)
        return ieee_result((growth - rate * n - 1.0) / (rate**2 * growth))


def arithmetic_gradient_to_uniform_series(i: float, n: int) -> float:
    """
    Arithmetic Gradient to Uniform Series Factor (A/G, i, n).

    Переводит арифметический градиент в эквивалентную равномерную серию
    на том же интервале.

    Формула: ((1+i)^n - i*n - 1) / (i * (1+i)^n - i)
    """
    with ieee_arithmetic():
        rate = to_ieee(i)
        growth = _growth(i, n)
        return ieee_result((growth - rate * n - 1.0) / (rate * growth - rate))


# =============================================================================
# GEOMETRIC GRADIENT
# =============================================================================


def geometric_series_present_worth(g: float, i: float, n: int) -> float:
    """
    Geometric Series Present Worth Factor (P/A, g, i, n).

    Текущая стоимость серии, платёж которой растёт в (1+g) раз за период.

    Формула:
        g == i:  n / (1+i)
        иначе:   (1 - ((1+g)/(1+i))^n) / (i - g)

    Сравнение g == i — точное равенство float, без толерантности: при
    g == i общая формула даёт 0/0.

    Args:
        g: Темп роста платежа за период
        i: Ставка дисконтирования за период
        n: Число периодов

    Returns:
        Фактор P/A для геометрической серии

    Examples:
        >>> round(geometric_series_present_worth(0.08, 0.08, 10), 6)
        9.259259
    """
    with ieee_arithmetic():
        rate = to_ieee(i)
        if g == i:
            return ieee_result(n / (rate + 1.0))
        growth = to_ieee(g)
        ratio = (growth + 1.0) / (rate + 1.0)
        return ieee_result((1.0 - ratio**n) / (rate - growth))
