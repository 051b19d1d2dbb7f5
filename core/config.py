"""
Projection configuration and calculator defaults.
Assumption ranges live in core/schema.py (INPUT_BOUNDS).
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionConfig:
    # "flat" = annual / 12 (what every calculator has always used)
    # "geometric" = (1 + annual) ** (1/12) - 1, changes every monthly output
    rate_convention: Literal["flat", "geometric"] = "flat"

    # rounding applied at the retirement projector boundary only
    currency_decimals: int = 0

    # rates within this of zero (or discount within this of growth) take the
    # zero-rate limit instead of the closed form
    degenerate_rate_tolerance: float = 1e-12


DEFAULT_CONFIG = ProjectionConfig()


# Starting values of each calculator form.
DEFAULT_ASSUMPTIONS: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "future_wealth": MappingProxyType({
        "current_portfolio": 2_500_000,
        "lumpsum_yearly": 300_000,
        "monthly_sip": 20_000,
        "expected_return": 13,
        "years": 20,
    }),
    "retirement_corpus": MappingProxyType({
        "current_expense": 100_000,
        "inflation": 6,
        "current_age": 35,
        "retirement_age": 60,
        "life_expectancy": 90,
        "earning_return": 12,
        "retirement_return": 7,
        "current_wealth": 1_500_000,
    }),
    "sip_swp": MappingProxyType({
        "monthly_sip": 5_000,
        "sip_years": 20,
        "withdrawal_years": 20,
        "sip_return": 12,
        "swp_return": 7,
    }),
})


@functools.lru_cache(maxsize=None)
def _warn_rate_convention(config: ProjectionConfig) -> None:
    # once per distinct config; a sensitivity sweep resolves the same one many times
    logger.warning(
        "Monthly rates use the %r convention; outputs differ from the standard annual/12 figures.",
        config.rate_convention,
    )


def resolve_config(config: Optional[ProjectionConfig] = None) -> ProjectionConfig:
    cfg = config or DEFAULT_CONFIG
    if cfg.rate_convention != "flat":
        _warn_rate_convention(cfg)
    return cfg
