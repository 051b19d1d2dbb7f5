"""
Labeled components of a result record, in the order the charts draw them.

Every value is read from the record; no financial formula is re-derived here.
"""

from __future__ import annotations

from typing import List, Mapping, Tuple

import pandas as pd


def _future_wealth(r: Mapping[str, float]) -> List[Tuple[str, float]]:
    return [
        ("Current Portfolio", r["future_value_current"]),
        ("Yearly Lumpsum", r["future_value_lumpsum"]),
        ("Monthly SIP", r["future_value_sip"]),
    ]


def _retirement(r: Mapping[str, float]) -> List[Tuple[str, float]]:
    # gap left after both current wealth and the SIP; ~0 up to rounding when the SIP is feasible
    remaining = max(0.0, r["corpus_required"] - r["future_value_current_wealth"] - r["future_value_sip"])
    return [
        ("Current Wealth", r["future_value_current_wealth"]),
        ("SIP Contributions", r["future_value_sip"]),
        ("Shortfall", remaining),
    ]


def _sip_swp(r: Mapping[str, float]) -> List[Tuple[str, float]]:
    return [
        ("Accumulated Corpus", r["accumulated_corpus"]),
        ("Total Withdrawn", r["total_withdrawal"]),
    ]


_BREAKDOWNS = {
    "future_wealth": _future_wealth,
    "retirement_corpus": _retirement,
    "sip_swp": _sip_swp,
}


def chart_components(calculator: str, result) -> List[Tuple[str, float]]:
    """
    (label, value) pairs for a result record (dict or result dataclass).
    """
    if calculator not in _BREAKDOWNS:
        raise KeyError(f"No chart breakdown for calculator {calculator!r}. Available: {sorted(_BREAKDOWNS)}")
    record = result.as_dict() if hasattr(result, "as_dict") else result
    return [(label, float(value)) for label, value in _BREAKDOWNS[calculator](record)]


def components_frame(calculator: str, result) -> pd.DataFrame:
    """Chart components as a DataFrame with a share-of-total column."""
    df = pd.DataFrame(chart_components(calculator, result), columns=["label", "value"])
    total = df["value"].sum()
    df["share"] = df["value"] / total if total > 0 else 0.0
    return df
