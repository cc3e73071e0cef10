"""Unit tests for portfolio models and service."""

from decimal import Decimal

import pytest

from finbar.errors import NotAuthenticatedError, PortfolioNotFoundError, PortfolioValidationError
from finbar.services.portfolio import Portfolio, PortfolioFields, PortfolioService


@pytest.fixture
def service(signed_in_backend):
    return PortfolioService(signed_in_backend)


class TestPortfolioFields:
    """Test input parsing for create/update."""

    def test_trims_text(self):
        fields = PortfolioFields.parse("  Main  ", " 123-456 ", "0.25")

        assert fields.name == "Main"
        assert fields.account_number == "123-456"
        assert fields.fee == Decimal("0.25")

    def test_accepts_zero_fee(self):
        assert PortfolioFields.parse("Main", "1", 0).fee == Decimal("0")

    def test_blank_name(self):
        with pytest.raises(PortfolioValidationError, match="portfolio name"):
            PortfolioFields.parse("   ", "123", "0")

    def test_blank_account_number(self):
        with pytest.raises(PortfolioValidationError, match="account number"):
            PortfolioFields.parse("Main", "", "0")

    @pytest.mark.parametrize("fee", ["abc", "", "-0.1", "NaN", "Infinity"])
    def test_invalid_fee(self, fee):
        with pytest.raises(PortfolioValidationError, match="valid fee"):
            PortfolioFields.parse("Main", "123", fee)

    def test_row_stores_fee_as_number(self):
        row = PortfolioFields.parse("Main", "123", "0.5").to_row()

        assert row == {"name": "Main", "account_number": "123", "fee": 0.5}


class TestPortfolioService:
    """Test PortfolioService CRUD."""

    def test_create(self, service, signed_in_backend):
        portfolio = service.create(" Main ", "123456", "0.25")

        assert isinstance(portfolio, Portfolio)
        assert portfolio.name == "Main"
        assert portfolio.user_id == signed_in_backend.get_user().id
        assert portfolio.fee == Decimal("0.25")
        assert portfolio.created_at is not None

    def test_create_invalid_does_not_store(self, service):
        with pytest.raises(PortfolioValidationError):
            service.create("Main", "123", "-1")

        assert service.list() == []

    def test_list_in_creation_order(self, service):
        for name in ["Main", "Pension", "Kids"]:
            service.create(name, "1", "0")

        assert [p.name for p in service.list()] == ["Main", "Pension", "Kids"]

    def test_get(self, service):
        created = service.create("Main", "1", "0")

        assert service.get(created.id) == created

    def test_get_unknown(self, service):
        with pytest.raises(PortfolioNotFoundError):
            service.get("missing")

    def test_update(self, service):
        created = service.create("Main", "1", "0")

        updated = service.update(created.id, "Main account", "2", "1.5")

        assert updated.id == created.id
        assert updated.name == "Main account"
        assert updated.account_number == "2"
        assert updated.fee == Decimal("1.5")
        assert service.get(created.id) == updated

    def test_update_unknown(self, service):
        with pytest.raises(PortfolioNotFoundError):
            service.update("missing", "Main", "1", "0")

    def test_delete(self, service):
        keep = service.create("Keep", "1", "0")
        drop = service.create("Drop", "2", "0")

        service.delete(drop.id)

        assert service.list() == [keep]

    def test_delete_unknown(self, service):
        with pytest.raises(PortfolioNotFoundError):
            service.delete("missing")

    def test_portfolios_scoped_to_user(self, signed_in_backend, service):
        """Another user's portfolios are neither listed nor reachable."""
        dana_portfolio = service.create("Dana's", "1", "0")
        signed_in_backend.sign_out()
        signed_in_backend.sign_up("omer@example.com", "secret2", {"name": "Omer"})

        assert service.list() == []
        with pytest.raises(PortfolioNotFoundError):
            service.get(dana_portfolio.id)
        with pytest.raises(PortfolioNotFoundError):
            service.delete(dana_portfolio.id)

    def test_requires_signed_in_user(self, backend):
        service = PortfolioService(backend)

        with pytest.raises(NotAuthenticatedError):
            service.list()
        with pytest.raises(NotAuthenticatedError):
            service.create("Main", "1", "0")
