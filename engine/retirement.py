"""
Retirement corpus sizing.

Steps (all closed form):
  1. Inflate today's monthly expense to the first month of retirement (annual compounding).
  2. Corpus required = present value, at retirement, of retirement_years * 12 monthly
     expenses growing at inflation / 12, discounted at retirement_return / 12.
  3. Compound current wealth at earning_return until retirement.
  4. Shortfall = max(0, corpus - that future value).
  5. Monthly SIP (start of month, earning_return / 12) that grows to the shortfall.
     Zero when there is no shortfall or the earning rate is zero.
  6. Future value the SIP actually reaches, for display.

Monetary outputs are rounded half-up to whole currency units here, at the
boundary, never inside the primitives.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Optional

from assumptions.models import RetirementCorpusAssumptions
from core.config import ProjectionConfig, resolve_config
from core.utils import annual_to_monthly_rate, percent_to_decimal, round_half_up

from .compounding import (
    annuity_due_future_value_monthly,
    annuity_due_payment,
    growing_annuity_present_value,
    lumpsum_future_value,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetirementCorpusResult:
    monthly_expense_at_retirement: float
    corpus_required: float
    monthly_sip: float
    future_value_current_wealth: float
    future_value_sip: float
    shortfall: float
    years_to_retirement: int
    retirement_years: int

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def size_retirement_corpus(
    assumptions: RetirementCorpusAssumptions,
    *,
    config: Optional[ProjectionConfig] = None,
) -> RetirementCorpusResult:
    cfg = resolve_config(config)
    a = assumptions

    years_to_retirement = a.years_to_retirement
    retirement_years = a.retirement_years

    inflation = percent_to_decimal(a.inflation)
    earning_rate = percent_to_decimal(a.earning_return)
    retirement_rate = percent_to_decimal(a.retirement_return)

    monthly_inflation = annual_to_monthly_rate(inflation, cfg.rate_convention)
    monthly_retirement_rate = annual_to_monthly_rate(retirement_rate, cfg.rate_convention)
    monthly_earning_rate = annual_to_monthly_rate(earning_rate, cfg.rate_convention)

    months_in_retirement = retirement_years * 12
    months_to_retirement = years_to_retirement * 12

    # 1-2. expense at retirement and the corpus funding it
    expense_at_retirement = lumpsum_future_value(a.current_expense, inflation, years_to_retirement)
    corpus_required = growing_annuity_present_value(
        expense_at_retirement,
        monthly_retirement_rate,
        monthly_inflation,
        months_in_retirement,
        tolerance=cfg.degenerate_rate_tolerance,
    )

    # 3-4. what existing wealth covers
    fv_current_wealth = lumpsum_future_value(a.current_wealth, earning_rate, years_to_retirement)
    shortfall = max(0.0, corpus_required - fv_current_wealth)

    # 5-6. SIP closing the gap
    if shortfall > 0 and monthly_earning_rate > 0:
        monthly_sip = annuity_due_payment(
            shortfall, monthly_earning_rate, months_to_retirement, tolerance=cfg.degenerate_rate_tolerance
        )
    else:
        monthly_sip = 0.0
    fv_sip = annuity_due_future_value_monthly(
        monthly_sip, monthly_earning_rate, months_to_retirement, tolerance=cfg.degenerate_rate_tolerance
    )

    logger.debug(
        "retirement_corpus: years_to_retirement=%d retirement_years=%d corpus=%.2f shortfall=%.2f",
        years_to_retirement, retirement_years, corpus_required, shortfall,
    )

    d = cfg.currency_decimals
    return RetirementCorpusResult(
        monthly_expense_at_retirement=round_half_up(expense_at_retirement, d),
        corpus_required=round_half_up(corpus_required, d),
        monthly_sip=round_half_up(monthly_sip, d),
        future_value_current_wealth=round_half_up(fv_current_wealth, d),
        future_value_sip=round_half_up(fv_sip, d),
        shortfall=round_half_up(shortfall, d),
        years_to_retirement=years_to_retirement,
        retirement_years=retirement_years,
    )
