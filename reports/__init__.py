"""
Reports — labeled chart components, sensitivity grids, and export of result records.
"""

from .breakdown import chart_components, components_frame
from .sensitivity import sensitivity_grid
from .exporters import export_results_csv, export_results_excel, export_results_json

__all__ = [
    "chart_components",
    "components_frame",
    "sensitivity_grid",
    "export_results_csv",
    "export_results_excel",
    "export_results_json",
]
