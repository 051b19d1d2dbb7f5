"""
Soft checks on assumption records before they reach the engine.

Hard domain rules are enforced by the records themselves; this module adds
warnings for values outside the ranges the calculator forms offer, so a caller
can show "are you sure?" hints without refusing to project.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping

from core.errors import AssumptionError
from core.schema import INPUT_BOUNDS

from .loader import parse_assumptions


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for an assumption set."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_assumptions(assumptions) -> ValidationResult:
    """Range warnings for an already-valid record."""
    result = ValidationResult()
    bounds = INPUT_BOUNDS[assumptions.calculator]

    for name, (lo, hi) in bounds.items():
        v = getattr(assumptions, name)
        if v < lo:
            result.warnings.append(f"{name} = {v:g} is below the usual minimum of {lo:g}.")
        elif v > hi:
            result.warnings.append(f"{name} = {v:g} is above the usual maximum of {hi:g}.")

    # --- Calculator-specific ---
    if assumptions.calculator == "retirement_corpus":
        if assumptions.retirement_years == 0:
            result.warnings.append(
                "life_expectancy equals retirement_age; no retirement period, corpus required is 0."
            )
        if assumptions.earning_return == 0:
            result.warnings.append(
                "earning_return is 0; no monthly SIP can be derived to close a shortfall."
            )
        if assumptions.retirement_return < assumptions.inflation:
            result.warnings.append(
                "retirement_return is below inflation; withdrawals lose purchasing power faster "
                "than the corpus grows."
            )
    elif assumptions.calculator == "future_wealth":
        if assumptions.current_portfolio == 0 and assumptions.lumpsum_yearly == 0 and assumptions.monthly_sip == 0:
            result.warnings.append("No portfolio and no contributions; projected wealth is 0.")
    elif assumptions.calculator == "sip_swp":
        if assumptions.sip_years == 0 or assumptions.monthly_sip == 0:
            result.warnings.append("Nothing is accumulated; monthly withdrawal is 0.")

    return result


def validate_fields(calculator: str, raw: Mapping[str, Any]) -> ValidationResult:
    """
    Parse a raw mapping and run all checks.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    try:
        assumptions = parse_assumptions(calculator, raw)
    except AssumptionError as exc:
        return ValidationResult(errors=[str(exc)])
    return validate_assumptions(assumptions)
