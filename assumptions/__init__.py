"""
Assumption records — immutable inputs, explicit parsing from raw mappings, range checks.
"""

from .models import (
    ASSUMPTION_MODELS,
    FutureWealthAssumptions,
    RetirementCorpusAssumptions,
    SipSwpAssumptions,
)
from .loader import canonicalize_fields, parse_assumptions
from .validators import ValidationResult, validate_assumptions, validate_fields

__all__ = [
    "ASSUMPTION_MODELS",
    "FutureWealthAssumptions",
    "RetirementCorpusAssumptions",
    "SipSwpAssumptions",
    "canonicalize_fields",
    "parse_assumptions",
    "ValidationResult",
    "validate_assumptions",
    "validate_fields",
]
