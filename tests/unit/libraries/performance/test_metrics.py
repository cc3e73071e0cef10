"""Unit tests for performance metrics."""

from datetime import date
from decimal import Decimal

from finbar.libraries.performance.metrics import calculate_pnl, calculate_pnl_percent, summarize
from finbar.libraries.performance.models import PerformanceSummary, ValuationPoint


def _points(*values: str) -> list[ValuationPoint]:
    return [ValuationPoint(date=date(2025, 1, day + 1), value=Decimal(v)) for day, v in enumerate(values)]


class TestCalculatePnl:
    """Test absolute and percentage P&L."""

    def test_gain(self):
        assert calculate_pnl(Decimal("100"), Decimal("150")) == Decimal("50")

    def test_loss(self):
        assert calculate_pnl(Decimal("100"), Decimal("50")) == Decimal("-50")

    def test_percent_gain(self):
        assert calculate_pnl_percent(Decimal("100"), Decimal("150")) == Decimal("50")

    def test_percent_loss(self):
        assert calculate_pnl_percent(Decimal("100"), Decimal("50")) == Decimal("-50")

    def test_percent_undefined_for_zero_initial(self):
        assert calculate_pnl_percent(Decimal("0"), Decimal("50")) is None

    def test_percent_not_rounded(self):
        pct = calculate_pnl_percent(Decimal("3"), Decimal("4"))

        assert pct is not None
        assert pct > Decimal("33.3333")
        assert pct < Decimal("33.3334")


class TestSummarize:
    """Test summarize()."""

    def test_empty_series(self):
        """An empty series yields the all-zero summary."""
        summary = summarize([])

        assert summary == PerformanceSummary()
        assert summary.pnl == Decimal("0")
        assert summary.percent_defined is True

    def test_gain_series(self):
        summary = summarize(_points("100", "120", "150"))

        assert summary.initial_value == Decimal("100")
        assert summary.current_value == Decimal("150")
        assert summary.pnl == Decimal("50")
        assert summary.pnl_percent == Decimal("50")
        assert summary.is_positive

    def test_loss_series(self):
        summary = summarize(_points("100", "80", "50"))

        assert summary.pnl == Decimal("-50")
        assert summary.pnl_percent == Decimal("-50")
        assert not summary.is_positive

    def test_single_point_is_flat(self):
        summary = summarize(_points("51234.56"))

        assert summary.pnl == Decimal("0")
        assert summary.pnl_percent == Decimal("0")
        assert summary.initial_value == summary.current_value == Decimal("51234.56")
        assert summary.is_positive

    def test_zero_initial_value(self):
        """Percentage reported as 0 and flagged undefined."""
        summary = summarize(_points("0", "100"))

        assert summary.pnl == Decimal("100")
        assert summary.pnl_percent == Decimal("0")
        assert summary.percent_defined is False

    def test_only_endpoints_matter(self):
        """Intermediate values do not affect the summary."""
        assert summarize(_points("100", "1", "150")) == summarize(_points("100", "9999", "150"))
