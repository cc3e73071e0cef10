"""Data models for portfolio actions.

An action is one logged event on a portfolio. Each type carries its own
fields:

- buy / sell:          symbol, quantity, price
- convert:             source_currency, target_currency, exchange_rate
- deposit / withdraw:  currency, amount
- dividend:            symbol, amount
"""

import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from finbar.errors import ActionValidationError


class ActionType(str, Enum):
    """Kind of portfolio action."""

    BUY = "buy"
    SELL = "sell"
    CONVERT = "convert"
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    DIVIDEND = "dividend"


class Currency(str, Enum):
    """Supported cash currencies."""

    USD = "USD"
    ILS = "ILS"


TRADE_TYPES = frozenset({ActionType.BUY, ActionType.SELL})
CASH_TYPES = frozenset({ActionType.DEPOSIT, ActionType.WITHDRAW})

# Fields stored for each action type
TYPE_FIELDS: dict[ActionType, tuple[str, ...]] = {
    ActionType.BUY: ("symbol", "quantity", "price"),
    ActionType.SELL: ("symbol", "quantity", "price"),
    ActionType.CONVERT: ("source_currency", "target_currency", "exchange_rate"),
    ActionType.DEPOSIT: ("currency", "amount"),
    ActionType.WITHDRAW: ("currency", "amount"),
    ActionType.DIVIDEND: ("symbol", "amount"),
}


class ActionRequest(BaseModel):
    """
    Unvalidated action as entered by the user.

    Every field is optional so that incomplete input can be reported with
    a specific message by validate_fields().

    Example:
        >>> request = ActionRequest(
        ...     portfolio_id="p-1",
        ...     date=datetime.date(2025, 1, 2),
        ...     type=ActionType.BUY,
        ...     symbol="AAPL",
        ...     quantity=Decimal("10"),
        ...     price=Decimal("185.50"),
        ... )
        >>> request.validate_fields()
        {'symbol': 'AAPL', 'quantity': Decimal('10'), 'price': Decimal('185.50')}
    """

    portfolio_id: str = ""
    date: datetime.date | None = None
    type: ActionType | None = None

    symbol: str = ""
    quantity: Decimal | None = None
    price: Decimal | None = None

    source_currency: Currency | None = None
    target_currency: Currency | None = None
    exchange_rate: Decimal | None = None

    currency: Currency | None = None
    amount: Decimal | None = None

    def validate_fields(self) -> dict[str, Any]:
        """
        Check the fields required by the action type.

        Returns:
            Only the type's fields, normalized (symbol trimmed and upper-cased)

        Raises:
            ActionValidationError: On the first missing or invalid field
        """
        if not self.portfolio_id:
            raise ActionValidationError("Please select a portfolio")
        if self.date is None:
            raise ActionValidationError("Please select a date")
        if self.type is None:
            raise ActionValidationError("Please select an action type")

        if self.type in TRADE_TYPES:
            _require_symbol(self.symbol)
            _require_positive(self.quantity, "Please enter a valid quantity")
            _require_positive(self.price, "Please enter a valid price")

        elif self.type is ActionType.CONVERT:
            if self.source_currency is None:
                raise ActionValidationError("Please select a source currency")
            if self.target_currency is None:
                raise ActionValidationError("Please select a target currency")
            if self.source_currency == self.target_currency:
                raise ActionValidationError("Source and target currency must be different")
            _require_positive(self.exchange_rate, "Please enter a valid exchange rate")

        elif self.type in CASH_TYPES:
            if self.currency is None:
                raise ActionValidationError("Please select a currency")
            _require_positive(self.amount, "Please enter a valid amount")

        elif self.type is ActionType.DIVIDEND:
            _require_symbol(self.symbol)
            _require_positive(self.amount, "Please enter a valid amount")

        fields = {name: getattr(self, name) for name in TYPE_FIELDS[self.type]}
        if "symbol" in fields:
            fields["symbol"] = self.symbol.strip().upper()
        return fields


class Action(BaseModel):
    """
    Recorded portfolio action.

    Only the fields of the action's type are set; the rest stay None.
    """

    id: str
    portfolio_id: str
    date: datetime.date
    type: ActionType

    symbol: str | None = None
    quantity: Decimal | None = None
    price: Decimal | None = None
    source_currency: Currency | None = None
    target_currency: Currency | None = None
    exchange_rate: Decimal | None = None
    currency: Currency | None = None
    amount: Decimal | None = None

    created_at: datetime.datetime | None = None

    @property
    def total(self) -> Decimal | None:
        """Trade value (quantity * price) for buy/sell, amount for cash/dividend."""
        if self.quantity is not None and self.price is not None:
            return self.quantity * self.price
        return self.amount

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Action":
        """Build from a backend row (ignores unknown columns)."""
        return cls(**{key: row[key] for key in cls.model_fields if key in row})

    model_config = ConfigDict(frozen=True)


def _require_symbol(symbol: str) -> None:
    if not symbol or not symbol.strip():
        raise ActionValidationError("Please enter a symbol")


def _require_positive(value: Decimal | None, message: str) -> None:
    if value is None or not value.is_finite() or value <= 0:
        raise ActionValidationError(message)
