from __future__ import annotations

import pytest

from assumptions.models import SipSwpAssumptions
from core.config import ProjectionConfig
from engine.compounding import annuity_present_value
from engine.sip_swp import project_sip_swp


@pytest.fixture
def base() -> SipSwpAssumptions:
    return SipSwpAssumptions(monthly_sip=5_000, sip_years=20, withdrawal_years=20, sip_return=12, swp_return=7)


def test_reference_scenario(base):
    r = project_sip_swp(base)
    s, w = 0.01, 0.07 / 12

    corpus = 5_000 * ((1 + s) ** 240 - 1) / s * (1 + s)
    assert r.accumulated_corpus == pytest.approx(corpus)
    assert r.monthly_withdrawal == pytest.approx(corpus * w / (1 - (1 + w) ** -240))
    assert r.withdrawal_months == 240
    assert r.monthly_withdrawal * 240 == r.total_withdrawal


def test_withdrawals_deplete_the_corpus(base):
    r = project_sip_swp(base)
    assert annuity_present_value(r.monthly_withdrawal, 0.07 / 12, 240) == pytest.approx(r.accumulated_corpus)


def test_zero_withdrawal_return_spreads_corpus_evenly(base):
    r = project_sip_swp(base.model_copy(update={"swp_return": 0}))
    assert r.monthly_withdrawal == pytest.approx(r.accumulated_corpus / 240)
    assert r.total_withdrawal == pytest.approx(r.accumulated_corpus)


def test_configured_tolerance_reaches_withdrawal_guard(base):
    # 7% / 12 is below a 0.8% monthly tolerance; 12% / 12 is not
    loose = ProjectionConfig(degenerate_rate_tolerance=0.008)
    r = project_sip_swp(base, config=loose)
    assert r.accumulated_corpus == project_sip_swp(base).accumulated_corpus
    assert r.monthly_withdrawal == pytest.approx(r.accumulated_corpus / 240)


def test_zero_sip_return_accumulates_contributions(base):
    r = project_sip_swp(base.model_copy(update={"sip_return": 0}))
    assert r.accumulated_corpus == 5_000 * 240


def test_no_contribution_phase(base):
    r = project_sip_swp(base.model_copy(update={"sip_years": 0}))
    assert r.accumulated_corpus == 0
    assert r.monthly_withdrawal == 0
    assert r.total_withdrawal == 0


def test_idempotent(base):
    assert project_sip_swp(base) == project_sip_swp(base)
