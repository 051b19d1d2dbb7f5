"""
Future wealth projection: existing portfolio + yearly lumpsums + monthly SIP.

  - portfolio compounds annually over the horizon
  - yearly lumpsum is an ordinary annuity (end of year, annual compounding)
  - monthly SIP is an annuity-due (start of month) at annual_rate / 12

Nothing is rounded here; formatting belongs to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Optional

from assumptions.models import FutureWealthAssumptions
from core.config import ProjectionConfig, resolve_config
from core.utils import annual_to_monthly_rate, percent_to_decimal

from .compounding import (
    annuity_due_future_value_monthly,
    lumpsum_future_value,
    ordinary_annuity_future_value,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FutureWealthResult:
    future_value_current: float
    future_value_lumpsum: float
    future_value_sip: float
    total_wealth: float
    total_invested: float
    estimated_return: float
    years: int

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def project_future_wealth(
    assumptions: FutureWealthAssumptions,
    *,
    config: Optional[ProjectionConfig] = None,
) -> FutureWealthResult:
    cfg = resolve_config(config)
    a = assumptions

    annual_rate = percent_to_decimal(a.expected_return)
    monthly_rate = annual_to_monthly_rate(annual_rate, cfg.rate_convention)

    fv_current = lumpsum_future_value(a.current_portfolio, annual_rate, a.years)
    fv_lumpsum = ordinary_annuity_future_value(a.lumpsum_yearly, annual_rate, a.years)
    fv_sip = annuity_due_future_value_monthly(
        a.monthly_sip, monthly_rate, a.months, tolerance=cfg.degenerate_rate_tolerance
    )

    total_wealth = fv_current + fv_lumpsum + fv_sip
    total_invested = a.current_portfolio + a.lumpsum_yearly * a.years + a.monthly_sip * a.months

    logger.debug(
        "future_wealth: years=%d rate=%.4f total_wealth=%.2f", a.years, annual_rate, total_wealth
    )

    return FutureWealthResult(
        future_value_current=fv_current,
        future_value_lumpsum=fv_lumpsum,
        future_value_sip=fv_sip,
        total_wealth=total_wealth,
        total_invested=total_invested,
        estimated_return=total_wealth - total_invested,
        years=a.years,
    )
