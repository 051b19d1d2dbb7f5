"""
Serialize assumption/result pairs for download. Each exporter returns (filename, bytes).
"""

from __future__ import annotations

import io
import json
from typing import Mapping, Tuple

import numpy as np
import pandas as pd


def _json_default(o):
    # numpy scalars/arrays from sensitivity grids
    if isinstance(o, np.ndarray):
        return o.tolist()
    if isinstance(o, np.generic):
        return o.item()
    raise TypeError(f"Object of type {o.__class__.__name__} is not JSON serializable")


def _as_frame(calculator: str, assumptions, result) -> pd.DataFrame:
    record = result.as_dict() if hasattr(result, "as_dict") else dict(result)
    rows = [("assumption", k, v) for k, v in assumptions.model_dump().items()]
    rows += [("result", k, v) for k, v in record.items()]
    df = pd.DataFrame(rows, columns=["section", "name", "value"])
    df.insert(0, "calculator", calculator)
    return df


def export_results_csv(calculator: str, assumptions, result) -> Tuple[str, bytes]:
    df = _as_frame(calculator, assumptions, result)
    return f"{calculator}.csv", df.to_csv(index=False).encode()


def export_results_json(calculator: str, assumptions, result) -> Tuple[str, bytes]:
    record: Mapping = result.as_dict() if hasattr(result, "as_dict") else dict(result)
    blob = json.dumps(
        {"calculator": calculator, "assumptions": assumptions.model_dump(), "result": record},
        indent=2,
        default=_json_default,
    )
    return f"{calculator}.json", blob.encode()


def export_results_excel(calculator: str, assumptions, result) -> Tuple[str, bytes]:
    """Two sheets: Assumptions and Results (requires openpyxl)."""
    df = _as_frame(calculator, assumptions, result)
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        for section, sheet in (("assumption", "Assumptions"), ("result", "Results")):
            part = df[df["section"] == section][["name", "value"]]
            part.to_excel(writer, sheet_name=sheet, index=False)
    return f"{calculator}.xlsx", buf.getvalue()
