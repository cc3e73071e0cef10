"""Chart and performance data models.

Pydantic models for the demo performance chart:
- Window: symbolic chart range selector
- ValuationPoint: one day's portfolio value
- PerformanceSummary: profit/loss derived from a valuation series
"""

import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from finbar.errors import InvalidWindowError


class Window(str, Enum):
    """Chart range selector.

    ONE_DAY: today only
    SEVEN_DAYS: today minus 7 days
    ONE_MONTH: one calendar month back, same day of month
    THREE_MONTHS: three calendar months back, same day of month
    YEAR_TO_DATE: January 1 of the current year
    ALL: two calendar years back
    """

    ONE_DAY = "1D"
    SEVEN_DAYS = "7D"
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    YEAR_TO_DATE = "YTD"
    ALL = "ALL"

    @classmethod
    def parse(cls, value: "Window | str") -> "Window":
        """
        Resolve a window from its symbol (case-insensitive).

        Raises:
            InvalidWindowError: If the symbol is not a known window
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise InvalidWindowError(value)


class ValuationPoint(BaseModel):
    """
    Portfolio value on a single calendar day.

    Attributes:
        date: Calendar day (no time-of-day)
        value: Portfolio value in currency units, 2 decimal places

    Example:
        >>> ValuationPoint(date=datetime.date(2025, 1, 2), value=Decimal("50123.45"))
    """

    date: datetime.date
    value: Decimal

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: Decimal) -> Decimal:
        """Validate value is non-negative."""
        if v < 0:
            raise ValueError(f"Valuation must be non-negative, got {v}")
        return v

    def to_payload(self) -> dict[str, Any]:
        """Wire shape: {"date": "YYYY-MM-DD", "value": number}."""
        return {"date": self.date.isoformat(), "value": float(self.value)}

    model_config = ConfigDict(frozen=True)


class PerformanceSummary(BaseModel):
    """
    Aggregate profit/loss over a valuation series.

    Derived on every request, never persisted.

    Attributes:
        pnl: current_value - initial_value
        pnl_percent: pnl as a percentage of initial_value
        current_value: Value of the last point
        initial_value: Value of the first point
        percent_defined: False when initial_value is zero and the
            percentage could not be computed (pnl_percent is then 0)
    """

    pnl: Decimal = Decimal("0")
    pnl_percent: Decimal = Decimal("0")
    current_value: Decimal = Decimal("0")
    initial_value: Decimal = Decimal("0")
    percent_defined: bool = True

    @property
    def is_positive(self) -> bool:
        """Gain or flat (used for green/red display)."""
        return self.pnl >= Decimal("0")

    def to_payload(self) -> dict[str, Any]:
        """Wire shape: {pnl, pnlPercent, currentValue, initialValue, pnlPercentDefined}."""
        return {
            "pnl": float(self.pnl),
            "pnlPercent": float(self.pnl_percent),
            "currentValue": float(self.current_value),
            "initialValue": float(self.initial_value),
            "pnlPercentDefined": self.percent_defined,
        }

    model_config = ConfigDict(frozen=True)
