"""
Projection engine — closed-form compounding primitives and the three projectors.
"""

from .future_wealth import FutureWealthResult, project_future_wealth
from .retirement import RetirementCorpusResult, size_retirement_corpus
from .sip_swp import SipSwpResult, project_sip_swp
from .runner import available_calculators, project, run_projection

__all__ = [
    "FutureWealthResult",
    "project_future_wealth",
    "RetirementCorpusResult",
    "size_retirement_corpus",
    "SipSwpResult",
    "project_sip_swp",
    "available_calculators",
    "project",
    "run_projection",
]
