"""Dashboard service (demo chart + performance card)."""

from finbar.services.dashboard.models import ChartSnapshot
from finbar.services.dashboard.service import DashboardService

__all__ = [
    "ChartSnapshot",
    "DashboardService",
]
