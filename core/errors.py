"""
Exception hierarchy shared by the assumption parser and the projection engine.
"""

from __future__ import annotations

from typing import Optional


class ProjectionError(Exception):
    """Base class for everything the engine raises on purpose."""


class AssumptionError(ProjectionError, ValueError):
    """
    An assumption is missing, malformed, or outside its domain.

    `field` names the first offending field (or primitive argument) so the
    caller can point the user at the right input.
    """

    def __init__(self, field: str, reason: str, value: Optional[object] = None):
        self.field = field
        self.reason = reason
        self.value = value
        super().__init__(f"{field}: {reason}")


class ProjectionComputationError(ProjectionError, ArithmeticError):
    """A formula hit a division by zero or a non-finite value with no closed-form fallback."""
