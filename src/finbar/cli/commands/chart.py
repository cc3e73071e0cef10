"""Demo chart commands: valuation series and performance card."""

import json
import random
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from finbar.errors import FinbarError
from finbar.libraries.performance.clock import Clock, FixedClock, SystemClock
from finbar.libraries.performance.models import Window
from finbar.libraries.performance.series import SeriesGenerator
from finbar.services.dashboard import ChartSnapshot, DashboardService
from finbar.services.reporting import display_performance, display_series
from finbar.system import LoggerFactory, SystemConfig, reload_system_config

console = Console()

WINDOW_CHOICES = [window.value for window in Window]


def chart_options(func):
    """Options shared by the chart commands."""
    options = [
        click.option(
            "--window",
            "-w",
            type=click.Choice(WINDOW_CHOICES, case_sensitive=False),
            help="Chart window (default: display.default_window from config)",
        ),
        click.option("--seed", type=int, help="Random seed for a reproducible series"),
        click.option(
            "--as-of",
            type=click.DateTime(formats=["%Y-%m-%d"]),
            help="Treat this date as today (YYYY-MM-DD)",
        ),
        click.option("--json", "as_json", is_flag=True, help="Print JSON instead of tables"),
        click.option(
            "--config",
            "-c",
            "config_path",
            type=click.Path(exists=True, path_type=Path),
            help="Path to finbar.yaml",
        ),
        click.option(
            "--log-level",
            "-l",
            type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
            help="Override logging level",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _load_config(config_path: Optional[Path], log_level: Optional[str]) -> SystemConfig:
    """Load system config and configure logging from it."""
    system_config = reload_system_config(config_path)
    if log_level:
        system_config.logging.level = log_level.upper()
    LoggerFactory.configure(system_config.logging.to_logger_config())
    return system_config


def _build_snapshot(
    system_config: SystemConfig,
    window: Optional[str],
    seed: Optional[int],
    as_of: Optional[datetime],
) -> ChartSnapshot:
    clock: Clock = FixedClock(as_of.date()) if as_of else SystemClock()
    generator = SeriesGenerator(clock=clock, rng=random.Random(seed), config=system_config.series)
    dashboard = DashboardService(generator, default_window=system_config.display.default_window)
    return dashboard.snapshot(window)


@click.command("chart")
@chart_options
def chart_command(
    window: Optional[str],
    seed: Optional[int],
    as_of: Optional[datetime],
    as_json: bool,
    config_path: Optional[Path],
    log_level: Optional[str],
):
    """
    Print the demo valuation series for a chart window.

    \b
    Examples:
        finbar chart -w 1M
        finbar chart -w YTD --seed 42 --as-of 2025-06-30
        finbar chart -w 7D --json
    """
    try:
        system_config = _load_config(config_path, log_level)
        snapshot = _build_snapshot(system_config, window, seed, as_of)
    except FinbarError as e:
        console.print(f"[bold red]✗ {e}[/bold red]")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([point.to_payload() for point in snapshot.points], indent=2))
        return

    display_series(snapshot, console, currency=system_config.display.currency)


@click.command("performance")
@chart_options
def performance_command(
    window: Optional[str],
    seed: Optional[int],
    as_of: Optional[datetime],
    as_json: bool,
    config_path: Optional[Path],
    log_level: Optional[str],
):
    """
    Print the performance card (P&L) for a chart window.

    \b
    Examples:
        finbar performance
        finbar performance -w 3M --seed 7
        finbar performance -w ALL --json
    """
    try:
        system_config = _load_config(config_path, log_level)
        snapshot = _build_snapshot(system_config, window, seed, as_of)
    except FinbarError as e:
        console.print(f"[bold red]✗ {e}[/bold red]")
        sys.exit(1)

    if as_json:
        payload = snapshot.summary.to_payload()
        payload.update(
            {
                "window": snapshot.window.value,
                "startDate": snapshot.start_date.isoformat(),
                "endDate": snapshot.end_date.isoformat(),
            }
        )
        click.echo(json.dumps(payload, indent=2))
        return

    display_performance(snapshot, console, currency=system_config.display.currency)
