"""Synthetic valuation series for the demo performance chart.

Produces a random walk of daily portfolio values over a chart window:

    value *= 1 + trend + noise,   noise ~ Uniform[-volatility, +volatility]

The value is clamped to a floor and rounded to cents on each step. One point
is emitted per calendar day from the window start to today, inclusive.

Usage:
    >>> from random import Random
    >>> from finbar.libraries.performance.clock import FixedClock
    >>> generator = SeriesGenerator(clock=FixedClock(date(2025, 3, 15)), rng=Random(7))
    >>> points = generator.generate(Window.SEVEN_DAYS)
    >>> len(points)
    8
"""

import random
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

import structlog
from dateutil.relativedelta import relativedelta

from finbar.libraries.performance.clock import Clock, SystemClock
from finbar.libraries.performance.models import ValuationPoint, Window
from finbar.system.config import SeriesConfig

logger = structlog.get_logger(__name__)

CENTS = Decimal("0.01")


def resolve_window_start(window: Window | str, today: date, all_years: int = 2) -> date:
    """
    Resolve the first day of a chart window.

    Month and year arithmetic keeps the day of month, clamped to the last
    day of the target month (Mar 31 - 1M = Feb 28/29).

    Args:
        window: Chart window or its symbol
        today: End of the window
        all_years: Span of the ALL window in calendar years

    Returns:
        Start date (always <= today)

    Raises:
        InvalidWindowError: If window symbol is unknown
    """
    window = Window.parse(window)
    if window is Window.ONE_DAY:
        return today
    if window is Window.SEVEN_DAYS:
        return today - timedelta(days=7)
    if window is Window.ONE_MONTH:
        return today - relativedelta(months=1)
    if window is Window.THREE_MONTHS:
        return today - relativedelta(months=3)
    if window is Window.YEAR_TO_DATE:
        return date(today.year, 1, 1)
    return today - relativedelta(years=all_years)  # ALL


class SeriesGenerator:
    """
    Random-walk generator for demo chart data.

    Each generate() call yields a fresh independent path; nothing is cached.
    Pass a seeded random.Random and a FixedClock for reproducible output.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        rng: random.Random | None = None,
        config: SeriesConfig | None = None,
    ):
        """
        Initialize generator.

        Args:
            clock: Source of "today" (default: SystemClock)
            rng: Random source for daily noise (default: unseeded Random)
            config: Walk parameters (default: SeriesConfig())
        """
        self._clock = clock or SystemClock()
        self._rng = rng or random.Random()
        self._config = config or SeriesConfig()

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def config(self) -> SeriesConfig:
        return self._config

    def generate(self, window: Window | str) -> list[ValuationPoint]:
        """
        Generate one valuation point per day of the window.

        Args:
            window: Window or its symbol ("1D", "7D", "1M", "3M", "YTD", "ALL")

        Returns:
            Date-ascending list of points ending today

        Raises:
            InvalidWindowError: If window symbol is unknown
        """
        window = Window.parse(window)
        cfg = self._config

        end_date = self._clock.today()
        start_date = resolve_window_start(window, end_date, cfg.all_years)
        day_count = (end_date - start_date).days

        value = cfg.starting_value
        points: list[ValuationPoint] = []

        for offset in range(day_count + 1):
            current_date = start_date + timedelta(days=offset)
            if current_date > end_date:
                break

            noise = self._rng.uniform(-cfg.volatility, cfg.volatility)
            value = max(value * (1 + cfg.trend + noise), cfg.floor_value)

            points.append(
                ValuationPoint(
                    date=current_date,
                    value=Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP),
                )
            )

        logger.debug(
            "series.generated",
            window=window.value,
            start_date=start_date.isoformat(),
            end_date=end_date.isoformat(),
            points=len(points),
        )
        return points


def generate_series(
    window: Window | str,
    clock: Clock | None = None,
    rng: random.Random | None = None,
    config: SeriesConfig | None = None,
) -> list[ValuationPoint]:
    """Generate a demo series with a one-off SeriesGenerator."""
    return SeriesGenerator(clock=clock, rng=rng, config=config).generate(window)
