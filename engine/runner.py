"""
Projection runner — the flat-mapping boundary over the three projectors.

A form, CLI or HTTP handler passes a calculator name and the raw field values;
the runner parses and validates them into an assumption record, projects, and
returns the result record as a plain dict. Validation happens entirely before
any formula runs, so a failure yields no partial result.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from assumptions.loader import parse_assumptions
from core.config import ProjectionConfig

from .future_wealth import project_future_wealth
from .retirement import size_retirement_corpus
from .sip_swp import project_sip_swp

logger = logging.getLogger(__name__)


PROJECTORS: Dict[str, Callable] = {
    "future_wealth": project_future_wealth,
    "retirement_corpus": size_retirement_corpus,
    "sip_swp": project_sip_swp,
}


def available_calculators() -> List[str]:
    return sorted(PROJECTORS)


def project(assumptions, *, config: Optional[ProjectionConfig] = None):
    """Dispatch an already-built assumption record to its projector."""
    try:
        projector = PROJECTORS[assumptions.calculator]
    except (AttributeError, KeyError):
        raise ValueError(f"No projector for {type(assumptions).__name__}.") from None
    return projector(assumptions, config=config)


def run_projection(
    calculator: str,
    fields: Mapping[str, Any],
    *,
    config: Optional[ProjectionConfig] = None,
) -> Dict[str, float]:
    """
    Parse `fields`, run the named calculator and return its flat result record.

    Parameters
    ----------
    calculator : str
        "future_wealth", "retirement_corpus" or "sip_swp"
    fields : Mapping
        Raw field values keyed by record field name (camelCase form names are accepted)
    config : ProjectionConfig, optional
        Rate convention / rounding overrides

    Raises
    ------
    ValueError
        Unknown calculator name.
    AssumptionError
        First invalid field; nothing is computed.
    ProjectionComputationError
        A formula had no finite value.
    """
    if calculator not in PROJECTORS:
        raise ValueError(
            f"Unknown calculator {calculator!r}; expected one of {available_calculators()}"
        )
    assumptions = parse_assumptions(calculator, fields)
    logger.debug("run_projection: %s %s", calculator, assumptions.model_dump())
    return project(assumptions, config=config).as_dict()
