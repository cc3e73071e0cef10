"""Portfolio service implementation backed by the managed backend."""

from decimal import Decimal

import structlog

from finbar.errors import NotAuthenticatedError, PortfolioNotFoundError
from finbar.services.backend.interface import IBackendClient
from finbar.services.backend.models import User
from finbar.services.portfolio.models import Portfolio, PortfolioFields

logger = structlog.get_logger(__name__)

TABLE = "portfolios"


class PortfolioService:
    """
    CRUD for the signed-in user's portfolios.

    Every query is filtered by user_id in addition to the backend's own
    row-level security.

    Example:
        >>> service = PortfolioService(backend)
        >>> main = service.create("Main", "123456", "0.25")
        >>> [p.name for p in service.list()]
        ['Main']
    """

    def __init__(self, backend: IBackendClient):
        self._backend = backend

    def list(self) -> list[Portfolio]:
        user = self._require_user()
        rows = self._backend.select(TABLE, {"user_id": user.id}, order_by="created_at")
        return [Portfolio.from_row(row) for row in rows]

    def get(self, portfolio_id: str) -> Portfolio:
        user = self._require_user()
        rows = self._backend.select(TABLE, {"id": portfolio_id, "user_id": user.id})
        if not rows:
            raise PortfolioNotFoundError(f"Portfolio not found: {portfolio_id}")
        return Portfolio.from_row(rows[0])

    def create(self, name: str, account_number: str, fee: Decimal | float | str) -> Portfolio:
        user = self._require_user()
        fields = PortfolioFields.parse(name, account_number, fee)

        row = self._backend.insert(TABLE, {"user_id": user.id, **fields.to_row()})
        portfolio = Portfolio.from_row(row)

        logger.info("portfolio.created", portfolio_id=portfolio.id, name=portfolio.name)
        return portfolio

    def update(self, portfolio_id: str, name: str, account_number: str, fee: Decimal | float | str) -> Portfolio:
        user = self._require_user()
        fields = PortfolioFields.parse(name, account_number, fee)

        rows = self._backend.update(TABLE, fields.to_row(), {"id": portfolio_id, "user_id": user.id})
        if not rows:
            raise PortfolioNotFoundError(f"Portfolio not found: {portfolio_id}")

        logger.info("portfolio.updated", portfolio_id=portfolio_id, name=fields.name)
        return Portfolio.from_row(rows[0])

    def delete(self, portfolio_id: str) -> None:
        user = self._require_user()
        deleted = self._backend.delete(TABLE, {"id": portfolio_id, "user_id": user.id})
        if deleted == 0:
            raise PortfolioNotFoundError(f"Portfolio not found: {portfolio_id}")

        logger.info("portfolio.deleted", portfolio_id=portfolio_id)

    def _require_user(self) -> User:
        user = self._backend.get_user()
        if user is None:
            raise NotAuthenticatedError("Sign in to manage portfolios")
        return user
