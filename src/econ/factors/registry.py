"""
Factor Registry — каталог факторов по стандартной нотации

Позволяет вызывающему коду выбирать фактор по строке, а не по имени функции:
    evaluate_factor("A/P", i=0.08, n=10)
    evaluate_factor("uniform_series_capital_recovery", i=0.08, n=10)
    evaluate_factor("ap", i=0.08, n=10)

Реестр только диспетчеризует вызов: формулы живут в discrete/continuous,
вырожденные результаты (inf/nan) возвращаются без изменений.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from src.econ.factors import aliases, continuous, discrete
from src.econ.math.numerical_safeguards import is_valid_float

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class CompoundingMode(str, Enum):
    """Режим начисления процентов."""

    DISCRETE = "DISCRETE"
    CONTINUOUS = "CONTINUOUS"


class FactorNotation(str, Enum):
    """
    Стандартная нотация факторов (X/Y).

    Суффикс ",g": геометрический градиент, ",r": непрерывное начисление.
    """

    FP = "F/P"
    PF = "P/F"
    AF = "A/F"
    FA = "F/A"
    AP = "A/P"
    PA = "P/A"
    PG = "P/G"
    AG = "A/G"
    PA_GEO = "P/A,g"
    AF_CONT = "A/F,r"
    AP_CONT = "A/P,r"
    FA_CONT = "F/A,r"
    PA_CONT = "P/A,r"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownFactorError(KeyError):
    """Фактор не найден ни по нотации, ни по имени, ни по alias."""

    pass


class FactorParameterError(TypeError):
    """Набор параметров не совпадает с сигнатурой фактора."""

    pass


# =============================================================================
# FACTOR SPEC
# =============================================================================


@dataclass(frozen=True)
class FactorSpec:
    """Описание фактора в реестре."""

    notation: FactorNotation
    name: str
    alias: str
    params: tuple[str, ...]
    compounding: CompoundingMode
    func: Callable[..., float]
    description: str

    def __call__(self, **params: float) -> float:
        return self.func(**params)


_DISCRETE_PARAMS = ("i", "n")
_CONTINUOUS_PARAMS = ("r", "n")


def _spec(
    notation: FactorNotation,
    func: Callable[..., float],
    alias: Callable[..., float],
    params: tuple[str, ...],
    compounding: CompoundingMode,
) -> FactorSpec:
    # Первая строка docstring: название фактора
    doc_lines = (func.__doc__ or "").strip().splitlines()
    description = doc_lines[0] if doc_lines else func.__name__
    return FactorSpec(
        notation=notation,
        name=func.__name__,
        alias=alias.__name__,
        params=params,
        compounding=compounding,
        func=func,
        description=description,
    )


FACTOR_REGISTRY: Mapping[FactorNotation, FactorSpec] = MappingProxyType(
    {
        spec.notation: spec
        for spec in (
            _spec(FactorNotation.FP, discrete.single_payment_compound_amount, aliases.fp,
                  _DISCRETE_PARAMS, CompoundingMode.DISCRETE),
            _spec(FactorNotation.PF, discrete.single_payment_present_worth, aliases.pf,
                  _DISCRETE_PARAMS, CompoundingMode.DISCRETE),
            _spec(FactorNotation.AF, discrete.uniform_series_sinking_fund, aliases.af,
                  _DISCRETE_PARAMS, CompoundingMode.DISCRETE),
            _spec(FactorNotation.FA, discrete.uniform_series_compound_amount, aliases.fa,
                  _DISCRETE_PARAMS, CompoundingMode.DISCRETE),
            _spec(FactorNotation.AP, discrete.uniform_series_capital_recovery, aliases.ap,
                  _DISCRETE_PARAMS, CompoundingMode.DISCRETE),
            _spec(FactorNotation.PA, discrete.uniform_series_present_worth, aliases.pa,
                  _DISCRETE_PARAMS, CompoundingMode.DISCRETE),
            _spec(FactorNotation.PG, discrete.arithmetic_gradient_present_worth, aliases.pg,
                  _DISCRETE_PARAMS, CompoundingMode.DISCRETE),
            _spec(FactorNotation.AG, discrete.arithmetic_gradient_to_uniform_series, aliases.ag,
                  _DISCRETE_PARAMS, CompoundingMode.DISCRETE),
            _spec(FactorNotation.PA_GEO, discrete.geometric_series_present_worth, aliases.pa_geo,
                  ("g", "i", "n"), CompoundingMode.DISCRETE),
            _spec(FactorNotation.AF_CONT, continuous.continuous_compounding_sinking_fund,
                  aliases.af_cont, _CONTINUOUS_PARAMS, CompoundingMode.CONTINUOUS),
            _spec(FactorNotation.AP_CONT, continuous.continuous_compounding_capital_recovery,
                  aliases.ap_cont, _CONTINUOUS_PARAMS, CompoundingMode.CONTINUOUS),
            _spec(FactorNotation.FA_CONT, continuous.continuous_compounding_series_compound_amount,
                  aliases.fa_cont, _CONTINUOUS_PARAMS, CompoundingMode.CONTINUOUS),
            _spec(FactorNotation.PA_CONT, continuous.continuous_compounding_series_present_worth,
                  aliases.pa_cont, _CONTINUOUS_PARAMS, CompoundingMode.CONTINUOUS),
        )
    }
)


def _normalize_key(key: str) -> str:
    return key.replace(" ", "").lower()


_LOOKUP: dict[str, FactorSpec] = {}
for _factor in FACTOR_REGISTRY.values():
    for _key in (_factor.notation.value, _factor.name, _factor.alias):
        _LOOKUP[_normalize_key(_key)] = _factor


# =============================================================================
# LOOKUP & EVALUATION
# =============================================================================


def get_factor(key: str | FactorNotation) -> FactorSpec:
    """
    Поиск фактора по нотации ("A/P"), каноническому имени или alias ("ap").

    Нотация сравнивается без учёта регистра и пробелов: "a/p", " A/P ".

    Args:
        key: Нотация, FactorNotation, имя функции или alias

    Returns:
        FactorSpec

    Raises:
        UnknownFactorError: если фактор не найден
    """
    if isinstance(key, FactorNotation):
        return FACTOR_REGISTRY[key]

    spec = _LOOKUP.get(_normalize_key(key))
    if spec is None:
        raise UnknownFactorError(f"Unknown factor: {key!r}")
    return spec


def evaluate_factor(key: str | FactorNotation, **params: float) -> float:
    """
    Вычисление фактора по ключу с именованными параметрами.

    Args:
        key: См. get_factor
        **params: Ровно параметры фактора (i/r/g и n)

    Returns:
        Значение фактора (inf/nan для вырожденных входов)

    Raises:
        UnknownFactorError: если фактор не найден
        FactorParameterError: если параметры не совпадают с сигнатурой

    Examples:
        >>> round(evaluate_factor("F/P", i=0.10, n=5), 5)
        1.61051
    """
    spec = get_factor(key)

    missing = [p for p in spec.params if p not in params]
    unexpected = sorted(set(params) - set(spec.params))
    if missing or unexpected:
        raise FactorParameterError(
            f"Factor {spec.notation.value} expects parameters {spec.params}, "
            f"missing={missing}, unexpected={unexpected}"
        )

    value = spec(**params)

    if not is_valid_float(value):
        logger.debug(
            "Factor %s evaluated to non-finite value %r for params %r",
            spec.notation.value,
            value,
            params,
        )

    return value


def list_factors(compounding: Optional[CompoundingMode] = None) -> list[FactorSpec]:
    """
    Список факторов реестра в порядке объявления.

    Args:
        compounding: Фильтр по режиму начисления (None — все)
    """
    return [
        spec
        for spec in FACTOR_REGISTRY.values()
        if compounding is None or spec.compounding == compounding
    ]
