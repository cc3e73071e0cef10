"""FINBAR services package.

Each service is independently testable and receives its collaborators
(backend client, generator, other services) through its constructor.
"""

from finbar.services.actions import ActionService
from finbar.services.auth import AuthService
from finbar.services.dashboard import DashboardService
from finbar.services.portfolio import IPortfolioService, PortfolioService

__all__: list[str] = [
    "ActionService",
    "AuthService",
    "DashboardService",
    "IPortfolioService",
    "PortfolioService",
]
