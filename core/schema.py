from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# Result record layouts, in display order. Projector results expose exactly these keys.
FUTURE_WEALTH_RESULT_FIELDS: Tuple[str, ...] = (
    "future_value_current",
    "future_value_lumpsum",
    "future_value_sip",
    "total_wealth",
    "total_invested",
    "estimated_return",
    "years",
)

RETIREMENT_RESULT_FIELDS: Tuple[str, ...] = (
    "monthly_expense_at_retirement",
    "corpus_required",
    "monthly_sip",
    "future_value_current_wealth",
    "future_value_sip",
    "shortfall",
    "years_to_retirement",
    "retirement_years",
)

SIP_SWP_RESULT_FIELDS: Tuple[str, ...] = (
    "accumulated_corpus",
    "monthly_withdrawal",
    "total_withdrawal",
    "withdrawal_months",
)

# Typical input ranges offered by the calculator forms: (min, max).
# Values outside these are allowed but flagged by assumptions.validators.
# Retirement/life-expectancy lower bounds are relative and checked separately.
INPUT_BOUNDS: Mapping[str, Mapping[str, Tuple[float, float]]] = MappingProxyType({
    "future_wealth": MappingProxyType({
        "current_portfolio": (100_000, 50_000_000),
        "lumpsum_yearly": (0, 10_000_000),
        "monthly_sip": (0, 2_000_000),
        "expected_return": (1, 25),
        "years": (1, 40),
    }),
    "retirement_corpus": MappingProxyType({
        "current_expense": (10_000, 500_000),
        "inflation": (3, 10),
        "current_age": (20, 60),
        "retirement_age": (21, 75),
        "life_expectancy": (22, 100),
        "earning_return": (6, 18),
        "retirement_return": (4, 12),
        "current_wealth": (0, 50_000_000),
    }),
    "sip_swp": MappingProxyType({
        "monthly_sip": (1_000, 200_000),
        "sip_years": (1, 40),
        "withdrawal_years": (1, 40),
        "sip_return": (1, 25),
        "swp_return": (1, 15),
    }),
})
