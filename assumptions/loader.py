"""
Build assumption records from raw field mappings (form values, query params, JSON bodies).

Malformed values are reported, never coerced: an empty box or "abc" is an
AssumptionError naming the field, not a silent zero.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from core.errors import AssumptionError
from core.utils import require_fields

from .models import ASSUMPTION_MODELS


_FIELD_ALIASES: Dict[str, str] = {
    # future wealth form
    "currentPortfolio": "current_portfolio",
    "lumpsumYearly": "lumpsum_yearly",
    "monthlySIP": "monthly_sip",
    "monthlySip": "monthly_sip",
    "expectedReturn": "expected_return",
    # retirement corpus form
    "currentExpense": "current_expense",
    "currentAge": "current_age",
    "retirementAge": "retirement_age",
    "lifeExpectancy": "life_expectancy",
    "earningReturn": "earning_return",
    "retirementReturn": "retirement_return",
    "currentWealth": "current_wealth",
    # sip -> swp form
    "sipYears": "sip_years",
    "withdrawalYears": "withdrawal_years",
    "sipReturn": "sip_return",
    "swpReturn": "swp_return",
}

# Digit grouping accepted in text values: Western (1,234,567), Indian (12,34,567)
# or Python-style underscores (1_234_567). Anything else with a separator is malformed.
_GROUPED_NUMBER = re.compile(
    r"[+-]?(?:\d{1,3}(?:,\d{3})+|\d{1,2}(?:,\d{2})*,\d{3}|\d{1,3}(?:_\d{3})+)(?:\.\d+)?"
)


def canonicalize_fields(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy with camelCase form names mapped to record field names."""
    out: Dict[str, Any] = {}
    for key, value in raw.items():
        name = _FIELD_ALIASES.get(key, key)
        if name in out:
            raise AssumptionError(name, f"given more than once (as {key!r})")
        out[name] = value
    return out


def _clean_value(name: str, value: Any) -> Any:
    if value is None:
        raise AssumptionError(name, "value is empty")
    if isinstance(value, bool):
        raise AssumptionError(name, "expected a number, got a boolean", value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise AssumptionError(name, "value is empty", value)
        if "," in text or "_" in text:
            if not _GROUPED_NUMBER.fullmatch(text):
                raise AssumptionError(name, "malformed number", value)
            text = text.replace(",", "").replace("_", "")
        return text
    return value


def parse_assumptions(calculator: str, raw: Mapping[str, Any]):
    """
    Validate a raw mapping into the calculator's assumption record.

    Raises AssumptionError for the first offending field, in the record's
    field order. Nothing is evaluated until every field passes.
    """
    try:
        model = ASSUMPTION_MODELS[calculator]
    except KeyError:
        raise ValueError(
            f"Unknown calculator {calculator!r}; expected one of {sorted(ASSUMPTION_MODELS)}"
        ) from None

    fields = canonicalize_fields(raw)
    unknown = [k for k in fields if k not in model.model_fields]
    if unknown:
        raise AssumptionError(unknown[0], "unknown field", fields[unknown[0]])

    require_fields(fields, model.model_fields)
    cleaned = {name: _clean_value(name, fields[name]) for name in model.model_fields}

    try:
        return model(**cleaned)
    except ValidationError as exc:
        first = exc.errors()[0]
        loc = ".".join(str(p) for p in first["loc"]) or calculator
        reason = first["msg"].removeprefix("Value error, ")
        raise AssumptionError(loc, reason, first.get("input")) from exc
