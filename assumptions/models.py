"""
Immutable assumption records, one per projector.

Rates are annual percentages (12 means 12%). Money is in whole currency units.
Records are frozen: a changed input produces a new record via `model_copy(update=...)`.
"""

from __future__ import annotations

from typing import ClassVar, Dict, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from core.config import DEFAULT_ASSUMPTIONS


class _Assumptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    calculator: ClassVar[str] = ""

    @classmethod
    def defaults(cls):
        """Record populated with the calculator form's starting values."""
        return cls(**DEFAULT_ASSUMPTIONS[cls.calculator])


class FutureWealthAssumptions(_Assumptions):
    calculator: ClassVar[str] = "future_wealth"

    current_portfolio: float = Field(ge=0, description="Existing portfolio value.")
    lumpsum_yearly: float = Field(ge=0, description="Lumpsum added at the end of each year.")
    monthly_sip: float = Field(ge=0, description="Contribution at the start of each month.")
    expected_return: float = Field(gt=0, description="Expected annual return, percent.")
    years: int = Field(ge=0, description="Investment horizon in years.")

    @property
    def months(self) -> int:
        return self.years * 12


class RetirementCorpusAssumptions(_Assumptions):
    calculator: ClassVar[str] = "retirement_corpus"

    current_expense: float = Field(ge=0, description="Current monthly expense.")
    inflation: float = Field(ge=0, description="Expected annual inflation, percent.")
    current_age: int = Field(ge=0)
    retirement_age: int = Field(ge=0)
    life_expectancy: int = Field(ge=0)
    earning_return: float = Field(ge=0, description="Annual return until retirement, percent.")
    retirement_return: float = Field(ge=0, description="Annual return during retirement, percent.")
    current_wealth: float = Field(ge=0, description="Current investable wealth.")

    @field_validator("retirement_age")
    @classmethod
    def _retire_after_today(cls, v: int, info: ValidationInfo) -> int:
        current = info.data.get("current_age")
        if current is not None and v <= current:
            raise ValueError(f"must be greater than current_age ({current})")
        return v

    @field_validator("life_expectancy")
    @classmethod
    def _live_to_retire(cls, v: int, info: ValidationInfo) -> int:
        retire = info.data.get("retirement_age")
        if retire is not None and v < retire:
            raise ValueError(f"must not be less than retirement_age ({retire})")
        return v

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.current_age

    @property
    def retirement_years(self) -> int:
        return self.life_expectancy - self.retirement_age


class SipSwpAssumptions(_Assumptions):
    calculator: ClassVar[str] = "sip_swp"

    monthly_sip: float = Field(ge=0)
    sip_years: int = Field(ge=0, description="Contribution phase, years.")
    withdrawal_years: int = Field(ge=1, description="Withdrawal phase, years.")
    sip_return: float = Field(ge=0, description="Annual return while contributing, percent.")
    swp_return: float = Field(ge=0, description="Annual return while withdrawing, percent.")

    @property
    def sip_months(self) -> int:
        return self.sip_years * 12

    @property
    def withdrawal_months(self) -> int:
        return self.withdrawal_years * 12


ASSUMPTION_MODELS: Dict[str, Type[_Assumptions]] = {
    m.calculator: m
    for m in (FutureWealthAssumptions, RetirementCorpusAssumptions, SipSwpAssumptions)
}
