"""Portfolio service for managing a user's brokerage portfolios.

Key components:
- PortfolioService: Backend-backed implementation
- IPortfolioService: Protocol interface
- Portfolio, PortfolioFields: Models

Example:
    >>> from finbar.services.backend import InMemoryBackend
    >>> from finbar.services.portfolio import PortfolioService
    >>>
    >>> backend = InMemoryBackend()
    >>> backend.sign_up("dana@example.com", "secret1", {"name": "Dana"})
    >>> portfolios = PortfolioService(backend)
    >>> portfolios.create("Main", "123456", "0.1")
"""

from finbar.services.portfolio.interface import IPortfolioService
from finbar.services.portfolio.models import Portfolio, PortfolioFields
from finbar.services.portfolio.service import PortfolioService

__all__ = [
    # Service
    "IPortfolioService",
    "PortfolioService",
    # Models
    "Portfolio",
    "PortfolioFields",
]
