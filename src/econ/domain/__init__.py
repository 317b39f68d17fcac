"""
Domain models: validated factor queries and serializable results.
"""

from src.econ.domain.factor_evaluation import (
    FactorEvaluation,
    FactorQuery,
    evaluate_query,
)

__all__ = [
    "FactorQuery",
    "FactorEvaluation",
    "evaluate_query",
]
