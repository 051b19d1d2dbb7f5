from __future__ import annotations

import pytest

from assumptions.models import RetirementCorpusAssumptions
from core.config import ProjectionConfig
from engine.retirement import size_retirement_corpus

HALF_UNIT = 0.5 + 1e-6


@pytest.fixture
def base() -> RetirementCorpusAssumptions:
    return RetirementCorpusAssumptions.defaults()


def _reference(a: RetirementCorpusAssumptions) -> dict:
    n_ret = (a.life_expectancy - a.retirement_age) * 12
    n_acc = (a.retirement_age - a.current_age) * 12
    expense = a.current_expense * (1 + a.inflation / 100) ** (a.retirement_age - a.current_age)
    mr, mi = a.retirement_return / 100 / 12, a.inflation / 100 / 12
    corpus = expense * (1 - ((1 + mi) / (1 + mr)) ** n_ret) / (mr - mi)
    fvw = a.current_wealth * (1 + a.earning_return / 100) ** (a.retirement_age - a.current_age)
    shortfall = max(0.0, corpus - fvw)
    r = a.earning_return / 100 / 12
    sip = shortfall * r / (((1 + r) ** n_acc - 1) * (1 + r))
    return dict(expense=expense, corpus=corpus, fvw=fvw, shortfall=shortfall, sip=sip)


def test_default_scenario_matches_closed_form(base):
    ref = _reference(base)
    r = size_retirement_corpus(base)

    assert r.years_to_retirement == 25
    assert r.retirement_years == 30
    assert r.monthly_expense_at_retirement == pytest.approx(ref["expense"], abs=HALF_UNIT)
    assert r.corpus_required == pytest.approx(ref["corpus"], abs=HALF_UNIT)
    assert r.future_value_current_wealth == pytest.approx(ref["fvw"], abs=HALF_UNIT)
    assert r.shortfall == pytest.approx(ref["shortfall"], abs=HALF_UNIT)
    assert r.monthly_sip == pytest.approx(ref["sip"], abs=HALF_UNIT)
    assert r.shortfall > 0


def test_sip_reaches_the_shortfall(base):
    r = size_retirement_corpus(base)
    # both sides rounded independently; the SIP rounding is scaled by the annuity factor
    assert r.future_value_sip == pytest.approx(r.shortfall, rel=1e-4)


def test_monetary_outputs_are_whole_units(base):
    r = size_retirement_corpus(base)
    for name in ("monthly_expense_at_retirement", "corpus_required", "monthly_sip",
                 "future_value_current_wealth", "future_value_sip", "shortfall"):
        assert float(getattr(r, name)).is_integer(), name


def test_currency_decimals_config(base):
    r = size_retirement_corpus(base, config=ProjectionConfig(currency_decimals=2))
    assert r.corpus_required == pytest.approx(_reference(base)["corpus"], abs=0.005 + 1e-6)


def test_no_shortfall_means_no_sip(base):
    rich = base.model_copy(update={"current_wealth": 1_000_000_000})
    r = size_retirement_corpus(rich)
    assert r.future_value_current_wealth >= r.corpus_required
    assert r.shortfall == 0
    assert r.monthly_sip == 0
    assert r.future_value_sip == 0


def test_zero_retirement_years_needs_no_corpus(base):
    a = base.model_copy(update={"life_expectancy": base.retirement_age})
    r = size_retirement_corpus(a)
    assert r.retirement_years == 0
    assert r.corpus_required == 0
    assert r.shortfall == 0
    assert r.monthly_sip == 0


def test_return_equal_to_inflation_uses_level_sum(base):
    a = base.model_copy(update={"inflation": 7, "retirement_return": 7})
    r = size_retirement_corpus(a)
    expense = a.current_expense * 1.07 ** 25
    assert r.corpus_required == pytest.approx(expense * 360, abs=HALF_UNIT)


def test_zero_earning_return_leaves_sip_at_zero(base):
    a = base.model_copy(update={"earning_return": 0})
    r = size_retirement_corpus(a)
    assert r.future_value_current_wealth == base.current_wealth
    assert r.shortfall > 0
    assert r.monthly_sip == 0
    assert r.future_value_sip == 0


def test_rounding_is_half_up(base):
    # expense of 0.5 with no inflation horizon effect: 0.5 rounds to 1, not 0
    a = base.model_copy(update={"current_expense": 0.5, "inflation": 0})
    assert size_retirement_corpus(a).monthly_expense_at_retirement == 1.0


def test_idempotent(base):
    assert size_retirement_corpus(base).as_dict() == size_retirement_corpus(base).as_dict()
