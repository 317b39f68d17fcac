"""
Factor Library — факторы time value of money

Канонические имена — описательные (single_payment_compound_amount),
короткие (fp, pf, ...) — делегирующие alias.
"""

# Discrete compounding
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

# Continuous compounding
from src.econ.factors.continuous import (
    continuous_compounding_capital_recovery,
    continuous_compounding_series_compound_amount,
    continuous_compounding_series_present_worth,
    continuous_compounding_sinking_fund,
)

# Rate conversion
from src.econ.factors.rates import (
    LOG1P_SWITCH_THRESHOLD,
    effective_rate_from_nominal,
    nominal_rate_from_effective,
)

# Short aliases
from src.econ.factors.aliases import (
    af,
    af_cont,
    ag,
    ap,
    ap_cont,
    fa,
    fa_cont,
    fp,
    pa,
    pa_cont,
    pa_geo,
    pf,
    pg,
)

# Registry
from src.econ.factors.registry import (
    FACTOR_REGISTRY,
    CompoundingMode,
    FactorNotation,
    FactorParameterError,
    FactorSpec,
    UnknownFactorError,
    evaluate_factor,
    get_factor,
    list_factors,
)

# Identities
from src.econ.factors.identities import (
    FactorIdentityReport,
    IdentityCheckConfig,
    check_factor_identities,
)

__all__ = [
    # Discrete
    "single_payment_compound_amount",
    "single_payment_present_worth",
    "uniform_series_sinking_fund",
    "uniform_series_compound_amount",
    "uniform_series_capital_recovery",
    "uniform_series_present_worth",
    "arithmetic_gradient_present_worth",
    "arithmetic_gradient_to_uniform_series",
    "geometric_series_present_worth",
    # Continuous
    "continuous_compounding_sinking_fund",
    "continuous_compounding_capital_recovery",
    "continuous_compounding_series_compound_amount",
    "continuous_compounding_series_present_worth",
    # Rates
    "LOG1P_SWITCH_THRESHOLD",
    "effective_rate_from_nominal",
    "nominal_rate_from_effective",
    # Aliases
    "fp",
    "pf",
    "af",
    "fa",
    "ap",
    "pa",
    "pg",
    "ag",
    "pa_geo",
    "af_cont",
    "ap_cont",
    "fa_cont",
    "pa_cont",
    # Registry
    "FACTOR_REGISTRY",
    "CompoundingMode",
    "FactorNotation",
    "FactorSpec",
    "UnknownFactorError",
    "FactorParameterError",
    "evaluate_factor",
    "get_factor",
    "list_factors",
    # Identities
    "IdentityCheckConfig",
    "FactorIdentityReport",
    "check_factor_identities",
]
