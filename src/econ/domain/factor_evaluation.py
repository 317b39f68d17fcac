"""
FactorQuery / FactorEvaluation — модели запроса и результата вычисления фактора

Immutable Pydantic модели для вызывающих приложений, которым нужна
валидация входа и сериализация результата.
Полная совместимость с JSON Schema (src/econ/contracts/schema/factor_evaluation.json).

Сами функции факторов входы НЕ валидируют; проверки ниже касаются только
структуры запроса: какие ставки передаются для какого фактора, n ≥ 0 и
конечность ставок (JSON не представляет nan/inf).
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from src.econ.factors.registry import (
    CompoundingMode,
    FactorNotation,
    evaluate_factor,
    get_factor,
)
from src.econ.math.numerical_safeguards import is_valid_float

_RATE_FIELDS = ("i", "r", "g")


# =============================================================================
# FACTOR QUERY
# =============================================================================


class FactorQuery(BaseModel):
    """
    Запрос на вычисление одного фактора.

    Immutable модель (frozen=True). Передаются ровно те ставки, которые
    принимает фактор: i для дискретных, r для непрерывных, g и i для
    геометрического градиента.
    """

    factor: FactorNotation = Field(..., description="Нотация фактора (F/P, A/P,r, ...)")
    n: int = Field(..., ge=0, description="Число периодов")
    i: Optional[float] = Field(
        None, allow_inf_nan=False, description="Дискретная ставка за период"
    )
    r: Optional[float] = Field(
        None, allow_inf_nan=False, description="Номинальная непрерывная ставка"
    )
    g: Optional[float] = Field(
        None, allow_inf_nan=False, description="Темп роста геометрической серии"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_rate_fields(self) -> "FactorQuery":
        spec = get_factor(self.factor)
        for name in _RATE_FIELDS:
            value = getattr(self, name)
            if name in spec.params and value is None:
                raise ValueError(f"Factor {spec.notation.value} requires '{name}'")
            if name not in spec.params and value is not None:
                raise ValueError(f"Factor {spec.notation.value} does not accept '{name}'")
        return self

    def params(self) -> dict[str, float | int]:
        """Параметры для evaluate_factor в порядке сигнатуры фактора."""
        spec = get_factor(self.factor)
        return {name: getattr(self, name) for name in spec.params}


# =============================================================================
# FACTOR EVALUATION
# =============================================================================


class FactorEvaluation(BaseModel):
    """
    Результат вычисления фактора.

    value = None, если фактор вырожден (inf/nan): JSON не представляет
    нечисловые значения, признак вырожденности — is_finite = False.
    """

    factor: FactorNotation = Field(..., description="Нотация фактора")
    name: str = Field(..., min_length=1, description="Каноническое имя функции")
    compounding: CompoundingMode = Field(..., description="DISCRETE/CONTINUOUS")
    params: dict[str, float | int] = Field(..., description="Параметры вычисления")
    value: Optional[float] = Field(None, description="Значение фактора (nullable)")
    is_finite: bool = Field(..., description="False если фактор inf/nan")

    model_config = {"frozen": True}


def evaluate_query(query: FactorQuery) -> FactorEvaluation:
    """
    Вычисление фактора по запросу.

    Args:
        query: Валидированный FactorQuery

    Returns:
        FactorEvaluation
    """
    spec = get_factor(query.factor)
    params = query.params()
    value = evaluate_factor(spec.notation, **params)
    finite = is_valid_float(value)

    return FactorEvaluation(
        factor=spec.notation,
        name=spec.name,
        compounding=spec.compounding,
        params=params,
        value=value if finite else None,
        is_finite=finite,
    )
