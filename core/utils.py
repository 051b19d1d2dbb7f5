from __future__ import annotations

import math
from typing import Iterable, Mapping

import numpy as np

from .errors import AssumptionError, ProjectionComputationError


def require_fields(values: Mapping[str, object], fields: Iterable[str]) -> None:
    """Raise on the first field (in declaration order) absent from `values`."""
    for name in fields:
        if name not in values:
            raise AssumptionError(name, "missing required field")


def percent_to_decimal(rate_pct: float) -> float:
    """12 -> 0.12"""
    return rate_pct / 100.0


def annual_to_monthly_rate(annual_rate: float, convention: str = "flat") -> float:
    """
    Convert a decimal annual rate to a decimal monthly rate.

    "flat" divides by 12, which is what every projection uses unless told otherwise.
    "geometric" returns the true monthly-compounding equivalent (1+r)^(1/12) - 1.
    """
    if convention == "flat":
        return annual_rate / 12.0
    if convention == "geometric":
        return (1.0 + annual_rate) ** (1.0 / 12.0) - 1.0
    raise ValueError(f"Unknown rate convention: {convention!r}")


def round_half_up(x, decimals: int = 0):
    """Round half away from zero (vectorized). Python's round() is half-to-even."""
    m = 10 ** decimals
    arr = np.asarray(x, dtype=float)
    out = np.sign(arr) * (np.floor(np.abs(arr) * m + 0.5) / m)
    if out.ndim == 0:
        return float(out)
    return out


def ensure_finite(name: str, value: float) -> float:
    """Guard a formula output so NaN/Infinity never reach a result record."""
    value = float(value)
    if not math.isfinite(value):
        raise ProjectionComputationError(f"{name} evaluated to a non-finite value ({value}).")
    return value
