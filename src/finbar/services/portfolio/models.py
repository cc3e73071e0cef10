"""Data models for portfolio service."""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, ConfigDict

from finbar.errors import PortfolioValidationError


class Portfolio(BaseModel):
    """
    Named brokerage portfolio owned by one user.

    Attributes:
        id: Backend row id
        user_id: Owning user
        name: Display name (e.g., "Main portfolio")
        account_number: Brokerage account number
        fee: Management fee (non-negative)
        created_at: Creation timestamp (list order)
    """

    id: str
    user_id: str
    name: str
    account_number: str
    fee: Decimal
    created_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Portfolio":
        """Build from a backend row (ignores unknown columns)."""
        return cls(**{key: row[key] for key in cls.model_fields if key in row})

    model_config = ConfigDict(frozen=True)


class PortfolioFields(BaseModel):
    """Validated, trimmed user input for create/update."""

    name: str
    account_number: str
    fee: Decimal

    @classmethod
    def parse(cls, name: str, account_number: str, fee: Decimal | float | str) -> "PortfolioFields":
        """
        Trim and validate raw input.

        Raises:
            PortfolioValidationError: If a field is blank or fee is not a non-negative number
        """
        name = (name or "").strip()
        account_number = (account_number or "").strip()

        if not name:
            raise PortfolioValidationError("Please enter a portfolio name")
        if not account_number:
            raise PortfolioValidationError("Please enter an account number")

        try:
            fee_value = Decimal(str(fee).strip())
        except (InvalidOperation, ValueError) as e:
            raise PortfolioValidationError("Please enter a valid fee (non-negative number)") from e
        if not fee_value.is_finite() or fee_value < 0:
            raise PortfolioValidationError("Please enter a valid fee (non-negative number)")

        return cls(name=name, account_number=account_number, fee=fee_value)

    def to_row(self) -> dict[str, Any]:
        # Stored as float: the backend column is numeric
        return {"name": self.name, "account_number": self.account_number, "fee": float(self.fee)}
