"""
SIP -> SWP bridge: accumulate with a monthly SIP, then draw the corpus down to zero
with a level monthly withdrawal.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Optional

from assumptions.models import SipSwpAssumptions
from core.config import ProjectionConfig, resolve_config
from core.utils import annual_to_monthly_rate, percent_to_decimal

from .compounding import amortized_payment, annuity_due_future_value_monthly

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SipSwpResult:
    accumulated_corpus: float
    monthly_withdrawal: float
    total_withdrawal: float
    withdrawal_months: int

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def project_sip_swp(
    assumptions: SipSwpAssumptions,
    *,
    config: Optional[ProjectionConfig] = None,
) -> SipSwpResult:
    """
    (a) corpus = annuity-due FV of the SIP over sip_years * 12 months
    (b) withdrawal = PMT that depletes the corpus over withdrawal_years * 12 months
        (a 0% withdrawal-phase return falls back to corpus / months)
    (c) total withdrawn = withdrawal * months
    """
    cfg = resolve_config(config)
    a = assumptions

    sip_rate = annual_to_monthly_rate(percent_to_decimal(a.sip_return), cfg.rate_convention)
    swp_rate = annual_to_monthly_rate(percent_to_decimal(a.swp_return), cfg.rate_convention)

    tol = cfg.degenerate_rate_tolerance

    corpus = annuity_due_future_value_monthly(a.monthly_sip, sip_rate, a.sip_months, tolerance=tol)
    months = a.withdrawal_months
    withdrawal = amortized_payment(corpus, swp_rate, months, tolerance=tol)

    logger.debug("sip_swp: corpus=%.2f withdrawal=%.2f months=%d", corpus, withdrawal, months)

    return SipSwpResult(
        accumulated_corpus=corpus,
        monthly_withdrawal=withdrawal,
        total_withdrawal=withdrawal * months,
        withdrawal_months=months,
    )
