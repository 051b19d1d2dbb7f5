"""
Core package — configuration, result schemas, input bounds, errors and shared utilities.
No business logic lives here.
"""

from .config import DEFAULT_ASSUMPTIONS, ProjectionConfig, resolve_config
from .errors import AssumptionError, ProjectionComputationError, ProjectionError
from .schema import (
    FUTURE_WEALTH_RESULT_FIELDS,
    INPUT_BOUNDS,
    RETIREMENT_RESULT_FIELDS,
    SIP_SWP_RESULT_FIELDS,
)
from .utils import (
    annual_to_monthly_rate,
    ensure_finite,
    percent_to_decimal,
    require_fields,
    round_half_up,
)

__all__ = [
    "DEFAULT_ASSUMPTIONS",
    "ProjectionConfig",
    "resolve_config",
    "AssumptionError",
    "ProjectionComputationError",
    "ProjectionError",
    "FUTURE_WEALTH_RESULT_FIELDS",
    "INPUT_BOUNDS",
    "RETIREMENT_RESULT_FIELDS",
    "SIP_SWP_RESULT_FIELDS",
    "annual_to_monthly_rate",
    "ensure_finite",
    "percent_to_decimal",
    "require_fields",
    "round_half_up",
]
