"""
Contract Validation Module

Модуль для валидации JSON контрактов econ.
"""

from .validators import (
    DEFAULT_SCHEMA_DIR,
    ContractValidator,
    FactorEvaluationValidator,
    SchemaLoader,
    get_schema_loader,
    validate_factor_evaluation,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FactorEvaluationValidator",
    # Constants
    "DEFAULT_SCHEMA_DIR",
    # Functions
    "get_schema_loader",
    "validate_factor_evaluation",
]
