"""
Sensitivity grids: re-run one projector while sweeping a single assumption.

Each row is an independent projection of a freshly validated record, so an
invalid override fails the same way a bad form value would.
"""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np
import pandas as pd

from assumptions.loader import parse_assumptions
from core.config import ProjectionConfig
from core.errors import AssumptionError
from engine.runner import project


def sensitivity_grid(
    base,
    field: str,
    values: Iterable[float],
    *,
    config: Optional[ProjectionConfig] = None,
) -> pd.DataFrame:
    """
    Project `base` once per value of `field`.

    Parameters
    ----------
    base : assumption record
        Starting assumptions; every other field is held fixed.
    field : str
        Field to override, e.g. "expected_return".
    values : iterable of float
        Values to try (a list, range or np.arange).

    Returns
    -------
    DataFrame with one row per value: the swept field followed by the result fields.
    """
    if field not in type(base).model_fields:
        raise AssumptionError(field, f"not a field of {type(base).__name__}")

    base_fields = base.model_dump()
    rows = []
    for v in np.asarray(list(values)).tolist():
        record = parse_assumptions(base.calculator, {**base_fields, field: v})
        rows.append({field: v, **project(record, config=config).as_dict()})

    return pd.DataFrame(rows)
