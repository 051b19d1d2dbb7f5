"""
Closed-form time-value-of-money primitives.

Every function here is pure and O(1): horizons are plugged into the formulas,
never simulated period by period. Rates are decimals per period (0.01, not 1).
Negative horizons are rejected; a zero horizon is the identity.
"""

from __future__ import annotations

import math

from core.errors import AssumptionError, ProjectionComputationError
from core.utils import ensure_finite

DEGENERATE_RATE_TOLERANCE = 1e-12


def _check_horizon(name: str, n: float) -> None:
    if n < 0:
        raise AssumptionError(name, "must not be negative", n)


def _growth(rate: float, n: float) -> float:
    """(1 + rate) ** n, with overflow reported instead of raised as OverflowError."""
    try:
        return (1.0 + rate) ** n
    except OverflowError as exc:
        raise ProjectionComputationError(
            f"(1 + {rate}) ** {n} is too large to represent."
        ) from exc


def lumpsum_future_value(principal: float, annual_rate: float, years: float) -> float:
    """principal * (1 + annual_rate) ** years"""
    _check_horizon("years", years)
    return ensure_finite("lumpsum_future_value", principal * _growth(annual_rate, years))


def ordinary_annuity_future_value(payment: float, annual_rate: float, years: float) -> float:
    """
    Future value of one payment at the end of each year, compounded annually.

    A zero rate has no fallback here: it is a caller error.
    """
    _check_horizon("years", years)
    if years == 0:
        return 0.0
    if annual_rate == 0:
        raise ProjectionComputationError(
            "ordinary_annuity_future_value: annual_rate is 0 (division by zero)."
        )
    fv = payment * ((_growth(annual_rate, years) - 1.0) / annual_rate)
    return ensure_finite("ordinary_annuity_future_value", fv)


def annuity_due_factor(
    monthly_rate: float, months: float, *, tolerance: float = DEGENERATE_RATE_TOLERANCE
) -> float:
    """
    Future value of 1 paid at the start of each month for `months` months.

    ((1 + r) ** n - 1) / r * (1 + r), or n when r == 0.
    """
    _check_horizon("months", months)
    if months == 0:
        return 0.0
    if abs(monthly_rate) < tolerance:
        return float(months)
    factor = ((_growth(monthly_rate, months) - 1.0) / monthly_rate) * (1.0 + monthly_rate)
    return ensure_finite("annuity_due_factor", factor)


def annuity_due_future_value_monthly(
    payment: float, monthly_rate: float, months: float, *, tolerance: float = DEGENERATE_RATE_TOLERANCE
) -> float:
    """Future value of a monthly SIP paid at the start of each month."""
    factor = annuity_due_factor(monthly_rate, months, tolerance=tolerance)
    return ensure_finite("annuity_due_future_value_monthly", payment * factor)


def annuity_due_payment(
    future_value: float, monthly_rate: float, months: float, *, tolerance: float = DEGENERATE_RATE_TOLERANCE
) -> float:
    """Level start-of-month payment that grows to `future_value` (inverse of the above)."""
    factor = annuity_due_factor(monthly_rate, months, tolerance=tolerance)
    if factor == 0:
        if future_value == 0:
            return 0.0
        raise ProjectionComputationError(
            "annuity_due_payment: no months to accumulate a non-zero target."
        )
    return ensure_finite("annuity_due_payment", future_value / factor)


def amortized_payment(
    present_value: float, periodic_rate: float, periods: float, *, tolerance: float = DEGENERATE_RATE_TOLERANCE
) -> float:
    """
    Fully-amortizing level payment (PMT) with near-zero rate guard.

    Solves present_value = payment * (1 - (1 + r) ** -n) / r for payment.
    """
    _check_horizon("periods", periods)
    if periods == 0:
        if present_value == 0:
            return 0.0
        raise ProjectionComputationError(
            "amortized_payment: cannot amortize a non-zero balance over 0 periods."
        )
    if abs(periodic_rate) < tolerance:
        return float(present_value) / periods
    pmt = present_value * periodic_rate / (1.0 - _growth(periodic_rate, -periods))
    return ensure_finite("amortized_payment", pmt)


def annuity_present_value(
    payment: float, periodic_rate: float, periods: float, *, tolerance: float = DEGENERATE_RATE_TOLERANCE
) -> float:
    """Present value of `periods` end-of-period payments (the balance `amortized_payment` retires)."""
    _check_horizon("periods", periods)
    if periods == 0:
        return 0.0
    if abs(periodic_rate) < tolerance:
        return float(payment) * periods
    pv = payment * (1.0 - _growth(periodic_rate, -periods)) / periodic_rate
    return ensure_finite("annuity_present_value", pv)


def growing_annuity_present_value(
    first_payment: float,
    discount_rate: float,
    growth_rate: float,
    periods: float,
    *,
    tolerance: float = DEGENERATE_RATE_TOLERANCE,
) -> float:
    """
    Present value of `periods` payments starting at `first_payment` and growing
    by `growth_rate` each period, discounted at `discount_rate`.

        first * (1 - ((1 + g) / (1 + r)) ** n) / (r - g)

    When r == g the formula is 0/0 and the value is first * n.
    """
    _check_horizon("periods", periods)
    if periods == 0:
        return 0.0
    if math.isclose(discount_rate, growth_rate, rel_tol=0.0, abs_tol=tolerance):
        return ensure_finite("growing_annuity_present_value", first_payment * periods)
    if discount_rate <= -1.0:
        raise ProjectionComputationError(
            f"growing_annuity_present_value: discount_rate {discount_rate} <= -100%."
        )
    ratio = (1.0 + growth_rate) / (1.0 + discount_rate)
    try:
        shrink = ratio ** periods
    except OverflowError as exc:
        raise ProjectionComputationError("growing_annuity_present_value overflowed.") from exc
    pv = first_payment * (1.0 - shrink) / (discount_rate - growth_rate)
    return ensure_finite("growing_annuity_present_value", pv)
