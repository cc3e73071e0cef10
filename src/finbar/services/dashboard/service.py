"""Dashboard service: demo chart series plus performance summary."""

import structlog

from finbar.libraries.performance.metrics import summarize
from finbar.libraries.performance.models import Window
from finbar.libraries.performance.series import SeriesGenerator, resolve_window_start
from finbar.services.dashboard.models import ChartSnapshot

logger = structlog.get_logger(__name__)


class DashboardService:
    """
    Builds chart snapshots for the dashboard page.

    A new random series is generated on every call, including repeated
    calls for the same window.

    Example:
        >>> dashboard = DashboardService(SeriesGenerator(rng=Random(3)))
        >>> snapshot = dashboard.snapshot("3M")
        >>> snapshot.summary.pnl_percent
    """

    def __init__(self, generator: SeriesGenerator | None = None, default_window: Window | str = Window.ALL):
        self._generator = generator or SeriesGenerator()
        self._default_window = Window.parse(default_window)

    @property
    def default_window(self) -> Window:
        return self._default_window

    def snapshot(self, window: Window | str | None = None) -> ChartSnapshot:
        """
        Generate the series for a window and summarize it.

        Args:
            window: Chart window; None selects the default window

        Raises:
            InvalidWindowError: If window symbol is unknown
        """
        selected = self._default_window if window is None else Window.parse(window)
        points = self._generator.generate(selected)
        summary = summarize(points)

        if points:
            start_date, end_date = points[0].date, points[-1].date
        else:
            end_date = self._generator.clock.today()
            start_date = resolve_window_start(selected, end_date, self._generator.config.all_years)

        logger.info(
            "performance.snapshot",
            window=selected.value,
            start_date=start_date.isoformat(),
            end_date=end_date.isoformat(),
            points=len(points),
        )
        return ChartSnapshot(
            window=selected,
            start_date=start_date,
            end_date=end_date,
            points=points,
            summary=summary,
        )
