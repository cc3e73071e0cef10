"""Portfolio service interface (Protocol)."""

from decimal import Decimal
from typing import Protocol

from finbar.services.portfolio.models import Portfolio


class IPortfolioService(Protocol):
    """
    Per-user portfolio management.

    All operations act on the signed-in user's portfolios only and raise
    NotAuthenticatedError without a session.
    """

    def list(self) -> list[Portfolio]:
        """Portfolios of the current user, oldest first."""
        ...

    def get(self, portfolio_id: str) -> Portfolio:
        """
        Fetch one portfolio.

        Raises:
            PortfolioNotFoundError: If it does not exist for the current user
        """
        ...

    def create(self, name: str, account_number: str, fee: Decimal | float | str) -> Portfolio:
        """
        Create a portfolio.

        Raises:
            PortfolioValidationError: If input is invalid
        """
        ...

    def update(self, portfolio_id: str, name: str, account_number: str, fee: Decimal | float | str) -> Portfolio:
        """
        Replace name, account number and fee.

        Raises:
            PortfolioValidationError: If input is invalid
            PortfolioNotFoundError: If it does not exist for the current user
        """
        ...

    def delete(self, portfolio_id: str) -> None:
        """
        Delete a portfolio.

        Raises:
            PortfolioNotFoundError: If it does not exist for the current user
        """
        ...
