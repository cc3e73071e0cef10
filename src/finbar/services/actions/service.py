"""Action service: logs buy/sell/convert/deposit/withdraw/dividend actions."""

import structlog

from finbar.errors import NoPortfoliosError, NotAuthenticatedError, PortfolioNotFoundError
from finbar.services.actions.models import Action, ActionRequest
from finbar.services.backend.interface import IBackendClient
from finbar.services.backend.models import User
from finbar.services.portfolio.interface import IPortfolioService

logger = structlog.get_logger(__name__)

TABLE = "actions"


class ActionService:
    """
    Records actions against the current user's portfolios.

    Example:
        >>> actions = ActionService(backend, PortfolioService(backend))
        >>> actions.record(ActionRequest(portfolio_id=main.id, date=date(2025, 1, 2),
        ...                              type="deposit", currency="ILS", amount=Decimal("5000")))
    """

    def __init__(self, backend: IBackendClient, portfolios: IPortfolioService):
        self._backend = backend
        self._portfolios = portfolios

    def record(self, request: ActionRequest) -> Action:
        """
        Validate and store an action.

        Raises:
            NotAuthenticatedError: If nobody is signed in
            NoPortfoliosError: If the user has no portfolios yet
            ActionValidationError: If fields required by the type are missing/invalid
            PortfolioNotFoundError: If the selected portfolio is not the user's
        """
        user = self._require_user()

        portfolio_ids = {portfolio.id for portfolio in self._portfolios.list()}
        if not portfolio_ids:
            raise NoPortfoliosError("Add a portfolio in settings before logging actions")

        fields = request.validate_fields()
        if request.portfolio_id not in portfolio_ids:
            raise PortfolioNotFoundError(f"Portfolio not found: {request.portfolio_id}")

        row = self._backend.insert(
            TABLE,
            {
                "user_id": user.id,
                "portfolio_id": request.portfolio_id,
                "date": request.date,
                "type": request.type,
                **fields,
            },
        )
        action = Action.from_row(row)

        logger.info(
            "action.recorded",
            action_id=action.id,
            portfolio_id=action.portfolio_id,
            type=action.type.value,
            date=action.date.isoformat(),
        )
        return action

    def list(self, portfolio_id: str) -> list[Action]:
        """
        Actions of one portfolio, oldest first.

        Raises:
            PortfolioNotFoundError: If the portfolio is not the user's
        """
        user = self._require_user()
        self._portfolios.get(portfolio_id)

        rows = self._backend.select(
            TABLE,
            {"user_id": user.id, "portfolio_id": portfolio_id},
            order_by="date",
        )
        return [Action.from_row(row) for row in rows]

    def _require_user(self) -> User:
        user = self._backend.get_user()
        if user is None:
            raise NotAuthenticatedError("Sign in to log actions")
        return user
