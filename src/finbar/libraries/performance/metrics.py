"""Performance metrics calculation functions.

Pure functions deriving profit/loss figures from a valuation series.

Usage:
    >>> from finbar.libraries.performance import metrics
    >>> summary = metrics.summarize(points)
    >>> summary.pnl_percent
    Decimal('4.20')
"""

from decimal import Decimal
from typing import Sequence

import structlog

from finbar.libraries.performance.models import PerformanceSummary, ValuationPoint

logger = structlog.get_logger(__name__)


def calculate_pnl(initial_value: Decimal, current_value: Decimal) -> Decimal:
    """
    Calculate absolute profit/loss.

    Example:
        >>> calculate_pnl(Decimal("100"), Decimal("150"))
        Decimal('50')
    """
    return current_value - initial_value


def calculate_pnl_percent(initial_value: Decimal, current_value: Decimal) -> Decimal | None:
    """
    Calculate profit/loss as a percentage of the initial value.

    Returns:
        Percentage (e.g., 50 for +50%), or None when initial_value is zero

    Example:
        >>> calculate_pnl_percent(Decimal("100"), Decimal("50"))
        Decimal('-50.0')
    """
    if initial_value == Decimal("0"):
        return None

    return (current_value - initial_value) / initial_value * Decimal("100")


def summarize(points: Sequence[ValuationPoint]) -> PerformanceSummary:
    """
    Reduce a valuation series to a performance summary.

    First point is the initial value, last point is the current value.
    An empty series yields the all-zero summary. A zero initial value
    yields pnl_percent=0 with percent_defined=False.

    Args:
        points: Date-ascending valuation points

    Returns:
        PerformanceSummary
    """
    if not points:
        return PerformanceSummary()

    initial_value = points[0].value
    current_value = points[-1].value
    pnl_percent = calculate_pnl_percent(initial_value, current_value)

    if pnl_percent is None:
        logger.warning(
            "performance.percent_undefined",
            initial_value=str(initial_value),
            current_value=str(current_value),
        )
        return PerformanceSummary(
            pnl=calculate_pnl(initial_value, current_value),
            pnl_percent=Decimal("0"),
            current_value=current_value,
            initial_value=initial_value,
            percent_defined=False,
        )

    return PerformanceSummary(
        pnl=calculate_pnl(initial_value, current_value),
        pnl_percent=pnl_percent,
        current_value=current_value,
        initial_value=initial_value,
    )
