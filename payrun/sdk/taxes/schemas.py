"""Pydantic schemas for the deduction rate table.

These schemas validate rates.yaml and provide typed access to the AFP and
ARS rates and the ISR brackets. Rates read from YAML arrive as floats and
are converted through their shortest text form, so 0.0287 becomes
Decimal("0.0287") exactly.
"""

from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Thresholds and rates may change; the schedule shape may not.
ISR_BRACKET_COUNT = 3


def _to_decimal(value: Any) -> Any:
    if isinstance(value, float):
        return Decimal(repr(value))
    return value


class TaxBracket(BaseModel):
    """Single ISR bracket. The whole gross is taxed at `rate` when it falls here."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    up_to: Optional[Decimal] = Field(default=None, ge=0, description="Inclusive upper bound (None for top bracket)")
    rate: Decimal = Field(..., ge=0, le=1, description="Tax rate as decimal")

    @field_validator("up_to", "rate", mode="before")
    @classmethod
    def coerce_float(cls, value: Any) -> Any:
        return _to_decimal(value)


class RateTable(BaseModel):
    """Deduction rates applied by the payroll calculator."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    afp_rate: Decimal = Field(default=Decimal("0.0287"), ge=0, le=1, description="Retirement fund (AFP)")
    ars_rate: Decimal = Field(default=Decimal("0.0304"), ge=0, le=1, description="Health insurance (ARS)")
    isr_brackets: List[TaxBracket] = Field(
        default_factory=lambda: [
            TaxBracket(up_to=Decimal("20000"), rate=Decimal("0")),
            TaxBracket(up_to=Decimal("40000"), rate=Decimal("0.05")),
            TaxBracket(up_to=None, rate=Decimal("0.10")),
        ]
    )

    @field_validator("afp_rate", "ars_rate", mode="before")
    @classmethod
    def coerce_float(cls, value: Any) -> Any:
        return _to_decimal(value)

    @model_validator(mode="after")
    def check_brackets(self) -> "RateTable":
        """Three brackets, ascending, the last one open-ended."""
        if len(self.isr_brackets) != ISR_BRACKET_COUNT:
            raise ValueError(
                f"isr_brackets must have exactly {ISR_BRACKET_COUNT} brackets, "
                f"got {len(self.isr_brackets)}"
            )

        *bounded, top = self.isr_brackets
        if top.up_to is not None:
            raise ValueError("last ISR bracket must be open-ended (up_to: null)")

        previous = None
        for bracket in bounded:
            if bracket.up_to is None:
                raise ValueError("only the last ISR bracket may be open-ended")
            if previous is not None and bracket.up_to <= previous:
                raise ValueError(
                    f"ISR bracket thresholds must increase ({bracket.up_to} after {previous})"
                )
            previous = bracket.up_to
        return self

    def isr_rate_for(self, gross: Decimal) -> Decimal:
        """Rate of the first bracket whose upper bound is >= gross."""
        for bracket in self.isr_brackets:
            if bracket.up_to is None or gross <= bracket.up_to:
                return bracket.rate
        # unreachable: the validator guarantees an open-ended last bracket
        return self.isr_brackets[-1].rate


DEFAULT_RATES = RateTable()
