"""Unit tests for reporting formatters."""

from datetime import date
from decimal import Decimal
from io import StringIO

import pytest
from rich.console import Console

from finbar.libraries.performance.models import PerformanceSummary, ValuationPoint, Window
from finbar.services.dashboard import ChartSnapshot
from finbar.services.reporting import (
    display_performance,
    display_series,
    format_currency,
    format_percentage,
    format_signed_currency,
)
from finbar.services.reporting.formatters import create_performance_table, create_series_table


@pytest.fixture
def console():
    """Console writing to a buffer, wide enough to avoid wrapping."""
    return Console(file=StringIO(), width=120, color_system=None)


def _snapshot(*values: str, summary: PerformanceSummary | None = None) -> ChartSnapshot:
    points = [ValuationPoint(date=date(2025, 3, 13 + i), value=Decimal(v)) for i, v in enumerate(values)]
    return ChartSnapshot(
        window=Window.SEVEN_DAYS,
        start_date=points[0].date,
        end_date=points[-1].date,
        points=points,
        summary=summary
        or PerformanceSummary(
            pnl=points[-1].value - points[0].value,
            pnl_percent=Decimal("2.5"),
            current_value=points[-1].value,
            initial_value=points[0].value,
        ),
    )


class TestFormatCurrency:
    """Test currency formatting."""

    def test_shekel_grouped_no_decimals(self):
        assert format_currency(Decimal("51234.56")) == "₪51,235"

    def test_dollar_negative(self):
        assert format_currency(-1500, "USD") == "-$1,500"

    def test_currency_code_case_insensitive(self):
        assert format_currency(1000, "usd") == "$1,000"

    def test_unknown_currency_uses_code(self):
        assert format_currency(1000, "EUR") == "EUR 1,000"

    def test_rounds_half_up(self):
        assert format_currency(Decimal("0.5")) == "₪1"

    def test_signed(self):
        assert format_signed_currency(Decimal("1250")) == "+₪1,250"
        assert format_signed_currency(Decimal("-1250")) == "-₪1,250"
        assert format_signed_currency(0) == "+₪0"


class TestFormatPercentage:
    """Test percentage formatting."""

    def test_positive(self):
        assert format_percentage(Decimal("12.345")) == "+12.35%"

    def test_negative(self):
        assert format_percentage(-3.1) == "-3.10%"

    def test_zero_has_plus_sign(self):
        assert format_percentage(0) == "+0.00%"

    def test_tiny_negative_rounds_to_plus_zero(self):
        assert format_percentage(Decimal("-0.001")) == "+0.00%"


class TestTables:
    """Test Rich table builders."""

    def test_performance_table_rows(self):
        table = create_performance_table(PerformanceSummary())

        assert table.row_count == 4

    def test_series_table_has_row_per_point(self):
        snapshot = _snapshot("100", "110", "99")

        assert create_series_table(snapshot.points).row_count == 3


class TestDisplay:
    """Test console output."""

    def test_display_performance(self, console):
        display_performance(_snapshot("50000", "51250"), console)

        output = console.file.getvalue()
        assert "FINBAR" in output
        assert "7D" in output
        assert "+₪1,250" in output
        assert "+2.50%" in output
        assert "₪51,250" in output

    def test_display_performance_undefined_percent(self, console):
        summary = PerformanceSummary(
            pnl=Decimal("100"),
            current_value=Decimal("100"),
            percent_defined=False,
        )

        display_performance(_snapshot("0", "100", summary=summary), console, currency="USD")

        output = console.file.getvalue()
        assert "n/a" in output
        assert "+$100" in output

    def test_display_series(self, console):
        display_series(_snapshot("100", "110"), console)

        output = console.file.getvalue()
        assert "2025-03-13" in output
        assert "2025-03-14" in output
        assert "₪110" in output
        assert "+10.00%" in output

    def test_display_series_uses_currency(self, console):
        display_series(_snapshot("49318.73", "51234.56"), console, currency="USD")

        output = console.file.getvalue()
        assert "$49,319" in output
        assert "$51,235" in output
        assert "₪" not in output
