"""Performance library for the demo portfolio chart.

1. **Models** (`models.py`): Window, ValuationPoint, PerformanceSummary
2. **Series** (`series.py`): SeriesGenerator random walk per chart window
3. **Metrics** (`metrics.py`): Pure profit/loss functions and summarize()
4. **Clock** (`clock.py`): Injectable source of "today"

Usage:
    >>> from random import Random
    >>> from finbar.libraries.performance import FixedClock, SeriesGenerator, Window, summarize
    >>> generator = SeriesGenerator(clock=FixedClock(date(2025, 6, 30)), rng=Random(1))
    >>> summary = summarize(generator.generate(Window.YEAR_TO_DATE))
"""

from finbar.libraries.performance.clock import Clock, FixedClock, SystemClock
from finbar.libraries.performance.metrics import calculate_pnl, calculate_pnl_percent, summarize
from finbar.libraries.performance.models import PerformanceSummary, ValuationPoint, Window
from finbar.libraries.performance.series import SeriesGenerator, generate_series, resolve_window_start

__all__ = [
    # Models
    "Window",
    "ValuationPoint",
    "PerformanceSummary",
    # Series
    "SeriesGenerator",
    "generate_series",
    "resolve_window_start",
    # Metrics
    "calculate_pnl",
    "calculate_pnl_percent",
    "summarize",
    # Clock
    "Clock",
    "SystemClock",
    "FixedClock",
]
