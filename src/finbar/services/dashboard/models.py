"""Data models for the dashboard service."""

import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from finbar.libraries.performance.models import PerformanceSummary, ValuationPoint, Window


class ChartSnapshot(BaseModel):
    """
    Everything the dashboard shows for one window selection.

    Attributes:
        window: Selected chart window
        start_date: First charted day
        end_date: Last charted day (today)
        points: Valuation series
        summary: Performance derived from points
    """

    window: Window
    start_date: datetime.date
    end_date: datetime.date
    points: list[ValuationPoint]
    summary: PerformanceSummary

    @property
    def current_value(self) -> ValuationPoint | None:
        """Latest point (chart header value)."""
        return self.points[-1] if self.points else None

    def to_payload(self) -> dict[str, Any]:
        return {
            "window": self.window.value,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "points": [point.to_payload() for point in self.points],
            "summary": self.summary.to_payload(),
        }

    model_config = ConfigDict(frozen=True)
