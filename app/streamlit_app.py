"""
Suji — Savings & Retirement Projection Dashboard
================================================

Three calculators over the projection engine:
  1. Future Wealth:       portfolio + yearly lumpsum + monthly SIP
  2. Retirement Corpus:   corpus needed for inflation-linked withdrawals, and the SIP closing the gap
  3. SIP Today, SWP Tomorrow: accumulate with a SIP, then draw down with a level SWP

Every widget change reruns the script, which rebuilds the assumption record and
calls the engine again. The engine itself keeps no state.

Run: streamlit run app/streamlit_app.py   (or the `suji-projections` console script)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from assumptions.loader import parse_assumptions
from assumptions.validators import validate_assumptions
from core.config import DEFAULT_ASSUMPTIONS, ProjectionConfig
from core.errors import AssumptionError, ProjectionComputationError
from core.schema import INPUT_BOUNDS
from engine.runner import project
from reports.breakdown import chart_components
from reports.exporters import export_results_csv, export_results_excel, export_results_json
from reports.sensitivity import sensitivity_grid

logger = logging.getLogger(__name__)

PIE_COLORS = {
    "future_wealth": ["#1e3a8a", "#3b82f6", "#60a5fa"],
    "retirement_corpus": ["#1e3a8a", "#3b82f6", "#60a5fa"],
    "sip_swp": ["#3b82f6", "#10b981"],
}


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
def _fmt_inr(val) -> str:
    """₹ with Indian digit grouping (12,34,56,789), no decimals."""
    n = int(round(float(val)))
    sign = "-" if n < 0 else ""
    digits = str(abs(n))
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups + [tail])
    return f"{sign}₹{digits}"


def _fmt_cr_lac(val) -> str:
    amt = abs(float(val))
    sign = "-" if float(val) < 0 else ""
    if amt >= 10_000_000:
        return f"{sign}₹{amt / 10_000_000:.2f} Cr"
    if amt >= 100_000:
        return f"{sign}₹{amt / 100_000:.2f} L"
    return _fmt_inr(val)


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_pie(calculator: str, result, *, title: str, height=320):
    parts = [(label, value) for label, value in chart_components(calculator, result) if value > 0]
    if not parts:
        st.info("Nothing to chart.")
        return
    labels, values = zip(*parts)
    fig = go.Figure(go.Pie(
        labels=labels,
        values=values,
        marker=dict(colors=PIE_COLORS[calculator][: len(values)]),
        hovertemplate="%{label}: ₹%{value:,.0f}<extra></extra>",
    ))
    fig.update_layout(title=title, height=height, margin=dict(t=40, b=10, l=10, r=10))
    st.plotly_chart(fig, use_container_width=True)


def _plot_sensitivity(df: pd.DataFrame, *, x: str, ys, title: str, x_title: str, height=300):
    if len(df) == 0:
        return
    fig = go.Figure()
    for y in ys:
        fig.add_trace(go.Scatter(x=df[x], y=df[y], mode="lines+markers", name=y.replace("_", " ")))
    fig.update_layout(
        title=title, height=height, xaxis_title=x_title, yaxis_title="₹",
        yaxis=dict(tickformat=",.0f"), margin=dict(t=40, b=10, l=10, r=10),
    )
    st.plotly_chart(fig, use_container_width=True)


# ---------------------------------------------------------------------------
# Input widgets
# ---------------------------------------------------------------------------
def _money_input(calculator: str, name: str, label: str, *, step: int, key_prefix: str):
    _, hi = INPUT_BOUNDS[calculator][name]
    return st.number_input(
        label, min_value=0, max_value=int(hi),
        value=int(DEFAULT_ASSUMPTIONS[calculator][name]), step=step, key=f"{key_prefix}_{name}",
    )


def _slider(calculator: str, name: str, label: str, *, key_prefix: str, lo=None, hi=None):
    b_lo, b_hi = INPUT_BOUNDS[calculator][name]
    lo = b_lo if lo is None else lo
    hi = b_hi if hi is None else hi
    default = DEFAULT_ASSUMPTIONS[calculator][name]
    return st.slider(
        label, min_value=int(lo), max_value=int(hi),
        value=int(min(max(default, lo), hi)), key=f"{key_prefix}_{name}",
    )


def _project(calculator: str, fields: Dict[str, float], config: ProjectionConfig):
    """Parse + project; show the error and return (None, None) on failure."""
    try:
        assumptions = parse_assumptions(calculator, fields)
        result = project(assumptions, config=config)
    except AssumptionError as exc:
        st.error(f"Check **{exc.field.replace('_', ' ')}**: {exc.reason}")
        return None, None
    except ProjectionComputationError as exc:
        logger.warning("projection failed for %s: %s", calculator, exc)
        st.error(f"This combination can't be projected: {exc}")
        return None, None

    for w in validate_assumptions(assumptions).warnings:
        st.caption(f"⚠ {w}")
    return assumptions, result


def _downloads(calculator: str, assumptions, result, key_prefix: str):
    c1, c2, c3 = st.columns(3)
    for col, exporter, mime in (
        (c1, export_results_csv, "text/csv"),
        (c2, export_results_json, "application/json"),
        (c3, export_results_excel, "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"),
    ):
        name, blob = exporter(calculator, assumptions, result)
        col.download_button(f"Download {name.rsplit('.', 1)[1].upper()}", blob, file_name=name,
                            mime=mime, key=f"{key_prefix}_{name}", use_container_width=True)


# ---------------------------------------------------------------------------
# Calculator tabs
# ---------------------------------------------------------------------------
def _future_wealth_tab(config: ProjectionConfig):
    calc = "future_wealth"
    left, right = st.columns([1, 2])
    with left:
        fields = {
            "current_portfolio": _money_input(calc, "current_portfolio", "Current portfolio (₹)", step=100_000, key_prefix="fw"),
            "lumpsum_yearly": _money_input(calc, "lumpsum_yearly", "Yearly lumpsum (₹)", step=10_000, key_prefix="fw"),
            "monthly_sip": _money_input(calc, "monthly_sip", "Monthly SIP (₹)", step=1_000, key_prefix="fw"),
            "expected_return": _slider(calc, "expected_return", "Expected return (% p.a.)", key_prefix="fw"),
            "years": _slider(calc, "years", "Investment period (years)", key_prefix="fw"),
        }

    assumptions, result = _project(calc, fields, config)
    if result is None:
        return

    with right:
        k1, k2, k3 = st.columns(3)
        k1.metric("Total Wealth", _fmt_cr_lac(result.total_wealth))
        k2.metric("Total Invested", _fmt_cr_lac(result.total_invested))
        k3.metric("Estimated Returns", _fmt_cr_lac(result.estimated_return))
        _plot_pie(calc, result, title=f"Wealth after {result.years} years")

        with st.expander("Sensitivity to expected return", expanded=False):
            grid = sensitivity_grid(assumptions, "expected_return", range(1, 26), config=config)
            _plot_sensitivity(grid, x="expected_return", ys=["total_wealth", "total_invested"],
                              title="Total wealth by expected return", x_title="Expected return (%)")
        _downloads(calc, assumptions, result, "fw")


def _retirement_tab(config: ProjectionConfig):
    calc = "retirement_corpus"
    left, right = st.columns([1, 2])
    with left:
        current_age = _slider(calc, "current_age", "Current age", key_prefix="rc")
        retirement_age = _slider(calc, "retirement_age", "Retirement age", key_prefix="rc",
                                 lo=min(current_age + 1, 75))
        life_expectancy = _slider(calc, "life_expectancy", "Life expectancy", key_prefix="rc",
                                  lo=min(retirement_age + 1, 100))
        fields = {
            "current_expense": _money_input(calc, "current_expense", "Current monthly expense (₹)", step=5_000, key_prefix="rc"),
            "inflation": _slider(calc, "inflation", "Inflation (% p.a.)", key_prefix="rc"),
            "current_age": current_age,
            "retirement_age": retirement_age,
            "life_expectancy": life_expectancy,
            "earning_return": _slider(calc, "earning_return", "Return before retirement (% p.a.)", key_prefix="rc"),
            "retirement_return": _slider(calc, "retirement_return", "Return during retirement (% p.a.)", key_prefix="rc"),
            "current_wealth": _money_input(calc, "current_wealth", "Current investable wealth (₹)", step=100_000, key_prefix="rc"),
        }

    assumptions, result = _project(calc, fields, config)
    if result is None:
        return

    with right:
        k1, k2, k3 = st.columns(3)
        k1.metric("Corpus Required", _fmt_cr_lac(result.corpus_required))
        k2.metric("Monthly SIP Needed", _fmt_inr(result.monthly_sip))
        k3.metric("Expense at Retirement", _fmt_inr(result.monthly_expense_at_retirement) + "/mo")
        st.markdown(
            f"- **{result.years_to_retirement}** years to retirement, "
            f"**{result.retirement_years}** years in retirement.\n"
            f"- Current wealth grows to **{_fmt_cr_lac(result.future_value_current_wealth)}**; "
            f"shortfall **{_fmt_cr_lac(result.shortfall)}**."
        )
        _plot_pie(calc, result, title="How the corpus is funded")
        _downloads(calc, assumptions, result, "rc")


def _sip_swp_tab(config: ProjectionConfig):
    calc = "sip_swp"
    left, right = st.columns([1, 2])
    with left:
        fields = {
            "monthly_sip": _money_input(calc, "monthly_sip", "Monthly SIP (₹)", step=500, key_prefix="ss"),
            "sip_years": _slider(calc, "sip_years", "SIP period (years)", key_prefix="ss"),
            "withdrawal_years": _slider(calc, "withdrawal_years", "SWP period (years)", key_prefix="ss"),
            "sip_return": _slider(calc, "sip_return", "Return while investing (% p.a.)", key_prefix="ss"),
            "swp_return": _slider(calc, "swp_return", "Return while withdrawing (% p.a.)", key_prefix="ss"),
        }

    assumptions, result = _project(calc, fields, config)
    if result is None:
        return

    with right:
        k1, k2, k3 = st.columns(3)
        k1.metric("Accumulated Corpus", _fmt_cr_lac(result.accumulated_corpus))
        k2.metric("Monthly Withdrawal", _fmt_inr(result.monthly_withdrawal))
        k3.metric("Total Withdrawn", _fmt_cr_lac(result.total_withdrawal))
        _plot_pie(calc, result, title="Corpus vs. total withdrawn")
        _downloads(calc, assumptions, result, "ss")


def render(config: Optional[ProjectionConfig] = None):
    cfg = config or ProjectionConfig()
    st.set_page_config(page_title="Suji Calculators", page_icon="📈", layout="wide")
    st.title("Plan your savings and retirement")
    st.caption("Projections assume constant returns; no taxes or fees are modelled.")

    fw_tab, rc_tab, ss_tab = st.tabs(["Future Wealth", "Retirement Corpus", "SIP Today… SWP Tomorrow"])
    with fw_tab:
        _future_wealth_tab(cfg)
    with rc_tab:
        _retirement_tab(cfg)
    with ss_tab:
        _sip_swp_tab(cfg)


def main():
    """Console entry point: launch this file under `streamlit run`."""
    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(Path(__file__).resolve())]
    sys.exit(stcli.main())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    render()
