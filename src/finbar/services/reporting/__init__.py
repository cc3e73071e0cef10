"""Reporting: currency/percentage formatting and Rich console output."""

from finbar.services.reporting.formatters import (
    display_performance,
    display_series,
    format_currency,
    format_percentage,
    format_signed_currency,
)

__all__ = [
    "display_performance",
    "display_series",
    "format_currency",
    "format_percentage",
    "format_signed_currency",
]
