from __future__ import annotations

import math

import pytest

from core.errors import AssumptionError, ProjectionComputationError
from engine.compounding import (
    amortized_payment,
    annuity_due_future_value_monthly,
    annuity_due_payment,
    annuity_present_value,
    growing_annuity_present_value,
    lumpsum_future_value,
    ordinary_annuity_future_value,
)


@pytest.mark.parametrize("principal", [0.0, 1.0, 250_000.0])
@pytest.mark.parametrize("rate", [0.0, 0.04, 0.13])
@pytest.mark.parametrize("years", [0, 1, 20])
def test_lumpsum_never_below_principal(principal, rate, years):
    fv = lumpsum_future_value(principal, rate, years)
    assert fv >= principal
    if principal > 0 and (years == 0 or rate == 0):
        assert fv == principal
    elif principal > 0:
        assert fv > principal


def test_lumpsum_matches_closed_form():
    assert lumpsum_future_value(2_500_000, 0.13, 20) == pytest.approx(2_500_000 * 1.13 ** 20)


@pytest.mark.parametrize(
    "fn, kwargs, field",
    [
        (lumpsum_future_value, dict(principal=1, annual_rate=0.1, years=-1), "years"),
        (ordinary_annuity_future_value, dict(payment=1, annual_rate=0.1, years=-1), "years"),
        (annuity_due_future_value_monthly, dict(payment=1, monthly_rate=0.01, months=-12), "months"),
        (amortized_payment, dict(present_value=1, periodic_rate=0.01, periods=-1), "periods"),
        (growing_annuity_present_value, dict(first_payment=1, discount_rate=0.01, growth_rate=0.0, periods=-1), "periods"),
    ],
)
def test_negative_horizon_rejected(fn, kwargs, field):
    with pytest.raises(AssumptionError) as exc:
        fn(**kwargs)
    assert exc.value.field == field


def test_zero_horizon_is_identity():
    assert ordinary_annuity_future_value(1000, 0.1, 0) == 0.0
    assert annuity_due_future_value_monthly(1000, 0.01, 0) == 0.0
    assert growing_annuity_present_value(1000, 0.01, 0.005, 0) == 0.0


def test_ordinary_annuity_zero_rate_is_an_error():
    with pytest.raises(ProjectionComputationError):
        ordinary_annuity_future_value(1000, 0.0, 10)


def test_ordinary_annuity_closed_form():
    expected = 300_000 * ((1.13 ** 20 - 1) / 0.13)
    assert ordinary_annuity_future_value(300_000, 0.13, 20) == pytest.approx(expected)


def test_annuity_due_is_ordinary_times_one_plus_rate():
    r, n = 0.01, 120
    ordinary = 1000 * ((1 + r) ** n - 1) / r
    assert annuity_due_future_value_monthly(1000, r, n) == pytest.approx(ordinary * (1 + r))


def test_annuity_due_zero_rate_sums_payments():
    assert annuity_due_future_value_monthly(5000, 0.0, 240) == 5000 * 240


def test_annuity_due_payment_inverts_future_value():
    fv = annuity_due_future_value_monthly(7_500, 0.01, 300)
    assert annuity_due_payment(fv, 0.01, 300) == pytest.approx(7_500, rel=1e-12)


def test_annuity_due_payment_needs_months():
    assert annuity_due_payment(0.0, 0.01, 0) == 0.0
    with pytest.raises(ProjectionComputationError):
        annuity_due_payment(1_000.0, 0.01, 0)


@pytest.mark.parametrize("rate", [0.0, 0.0025, 0.07 / 12, 0.02])
def test_amortized_payment_inverts_present_value(rate):
    pv = annuity_present_value(12_345.0, rate, 240)
    assert amortized_payment(pv, rate, 240) == pytest.approx(12_345.0, rel=1e-10)


def test_amortized_payment_zero_rate_falls_back_to_straight_line():
    assert amortized_payment(1_200_000, 0.0, 240) == 5_000.0


def test_amortized_payment_zero_periods():
    assert amortized_payment(0.0, 0.01, 0) == 0.0
    with pytest.raises(ProjectionComputationError):
        amortized_payment(1_000.0, 0.01, 0)


def test_zero_rate_tolerance_is_configurable():
    # 0.1% a month sits inside a 1% tolerance, so every guard takes its zero-rate limit
    assert amortized_payment(1_200, 0.001, 12, tolerance=0.01) == 100.0
    assert annuity_present_value(100, 0.001, 12, tolerance=0.01) == 1_200.0
    assert annuity_due_future_value_monthly(100, 0.001, 12, tolerance=0.01) == 1_200.0
    assert annuity_due_payment(1_200, 0.001, 12, tolerance=0.01) == 100.0
    assert amortized_payment(1_200, 0.001, 12) > 100.0


def test_growing_annuity_generic_formula():
    first, r, g, n = 429_000.0, 0.07 / 12, 0.06 / 12, 360
    expected = first * (1 - ((1 + g) / (1 + r)) ** n) / (r - g)
    assert growing_annuity_present_value(first, r, g, n) == pytest.approx(expected)


def test_growing_annuity_degenerate_branch_is_level_sum():
    r = 0.07 / 12
    assert growing_annuity_present_value(10_000.0, r, r, 360) == 10_000.0 * 360


def test_growing_annuity_continuous_at_zero_rates():
    level = growing_annuity_present_value(1_000.0, 0.0, 0.0, 120)
    near = growing_annuity_present_value(1_000.0, 1e-9, 0.0, 120)
    assert near == pytest.approx(level, rel=1e-6)


@pytest.mark.parametrize("g", [0.0, 0.005, 0.01])
def test_growing_annuity_near_degenerate_converges_within_one_period(g):
    # generic formula tends to first * n / (1 + r); the level branch is first * n
    r = g + 1e-9
    generic = growing_annuity_present_value(1_000.0, r, g, 360)
    level = growing_annuity_present_value(1_000.0, g, g, 360)
    assert generic == pytest.approx(level / (1 + g), rel=1e-5)
    assert generic == pytest.approx(level, rel=g + 1e-5)


def test_overflow_is_a_computation_error():
    with pytest.raises(ProjectionComputationError):
        lumpsum_future_value(1.0, 10.0, 10_000)


def test_results_are_finite():
    for value in (
        lumpsum_future_value(1e6, 0.2, 40),
        annuity_due_future_value_monthly(1e5, 0.25 / 12, 480),
        growing_annuity_present_value(1e5, 0.12 / 12, 0.10 / 12, 600),
    ):
        assert math.isfinite(value)
